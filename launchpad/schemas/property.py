"""Property schemas."""

from pydantic import ConfigDict, Field

from launchpad.schemas.base import BaseSchema, IDMixin


class PropertyCreate(BaseSchema):
    """Register a property. Address fields are stored as given."""

    model_config = ConfigDict(str_strip_whitespace=False)

    id: str = Field(..., min_length=1, max_length=128)
    address: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str = Field(..., max_length=50)
    zip: str = Field(..., max_length=20)


class PropertyResponse(BaseSchema, IDMixin):
    """Property response."""

    model_config = ConfigDict(str_strip_whitespace=False)

    address: str
    city: str
    state: str
    zip: str
    owner: str
    created_at: int
