"""Service request schemas.

Urgency and status travel as their display strings and are mapped to enums
by the routers (unknown strings are rejected there as invalid input).
"""

from pydantic import ConfigDict, Field

from launchpad.models.enums import ServiceRequestStatus, Urgency
from launchpad.schemas.base import BaseSchema, IDMixin


class ServiceRequestCreate(BaseSchema):
    """File a service request against a property.

    The property id must match the registered id exactly; text fields are
    stored as given.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    property_id: str = Field(..., min_length=1, max_length=128)
    title: str = Field(..., max_length=255)
    description: str
    urgency: str


class ServiceRequestStatusUpdate(BaseSchema):
    """Move a request to another status (admin only)."""

    status: str


class PhotoAttach(BaseSchema):
    """Attach an uploaded photo by its opaque content reference."""

    content_ref: str = Field(..., max_length=1024)


class ServiceRequestResponse(BaseSchema, IDMixin):
    """Service request response."""

    model_config = ConfigDict(str_strip_whitespace=False)

    property_id: str
    title: str
    description: str
    urgency: Urgency
    status: ServiceRequestStatus
    created_by: str
    created_at: int
    updated_at: int
    photos: list[str] = []
