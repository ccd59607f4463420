"""Profile and role schemas."""

from pydantic import Field

from launchpad.models.enums import Role
from launchpad.schemas.base import BaseSchema


class ProfileSave(BaseSchema):
    """Save the caller's own profile.

    `role` is validated but never grants access; roles come from admins.
    """

    name: str = Field(..., max_length=255)
    role: str = "user"


class ProfileResponse(BaseSchema):
    """User profile response."""

    principal: str
    name: str
    role: Role
    created_at: int
    updated_at: int


class RoleResponse(BaseSchema):
    role: Role


class IsAdminResponse(BaseSchema):
    is_admin: bool


class RoleAssign(BaseSchema):
    """Assign a role to a principal (admin only)."""

    role: str


class RoleAssignmentResponse(BaseSchema):
    principal: str
    role: Role
    assigned_by: str | None = None
    assigned_at: int
