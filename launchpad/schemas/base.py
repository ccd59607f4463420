"""Base schema utilities."""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class IDMixin(BaseModel):
    """Mixin for the opaque string id field."""

    id: str


class CreatedIdResponse(BaseSchema):
    """Response carrying a server-generated id."""

    id: str
