"""Audit log schemas."""

from typing import Any, Optional
from uuid import UUID

from launchpad.models.enums import AuditAction
from launchpad.schemas.base import BaseSchema


class AuditLogResponse(BaseSchema):
    """Audit log entry."""

    id: UUID
    actor: Optional[str] = None
    action: AuditAction
    resource_type: str
    resource_id: str
    details: Optional[dict[str, Any]] = None
    created_at: int
