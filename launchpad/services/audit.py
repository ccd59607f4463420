"""Audit logging service."""

from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.security import Caller
from launchpad.models.audit import AuditLog
from launchpad.models.enums import AuditAction, Role, ServiceRequestStatus
from launchpad.services.authority import Operation, ensure_authorized


class AuditService:
    """Service for creating audit log entries.

    Entries are added to the caller's session and commit together with the
    change they describe.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def log(
        self,
        action: AuditAction,
        resource_type: str,
        resource_id: str,
        actor: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> AuditLog:
        """Create an audit log entry."""
        entry = AuditLog(
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            actor=actor,
            details=details or {},
        )
        self.db.add(entry)
        await self.db.flush()
        return entry

    async def log_property_created(self, property_id: str, actor: str) -> AuditLog:
        return await self.log(
            action=AuditAction.PROPERTY_CREATED,
            resource_type="property",
            resource_id=property_id,
            actor=actor,
        )

    async def log_service_request_created(
        self,
        request_id: str,
        property_id: str,
        actor: str,
    ) -> AuditLog:
        return await self.log(
            action=AuditAction.SERVICE_REQUEST_CREATED,
            resource_type="service_request",
            resource_id=request_id,
            actor=actor,
            details={"property_id": property_id},
        )

    async def log_status_changed(
        self,
        request_id: str,
        actor: str,
        old_status: ServiceRequestStatus,
        new_status: ServiceRequestStatus,
    ) -> AuditLog:
        """Log a service request status transition."""
        return await self.log(
            action=AuditAction.STATUS_CHANGED,
            resource_type="service_request",
            resource_id=request_id,
            actor=actor,
            details={"from": old_status.value, "to": new_status.value},
        )

    async def log_photo_attached(
        self,
        request_id: str,
        actor: str,
        content_ref: str,
    ) -> AuditLog:
        return await self.log(
            action=AuditAction.PHOTO_ATTACHED,
            resource_type="service_request",
            resource_id=request_id,
            actor=actor,
            details={"content_ref": content_ref},
        )

    async def log_role_assigned(
        self,
        principal: str,
        role: Role,
        actor: Optional[str],
    ) -> AuditLog:
        """Log a role assignment (actor None for the startup bootstrap)."""
        return await self.log(
            action=AuditAction.ROLE_ASSIGNED,
            resource_type="principal",
            resource_id=principal,
            actor=actor,
            details={"role": role.value},
        )

    async def log_contact_form_received(self, contact_id: str) -> AuditLog:
        return await self.log(
            action=AuditAction.CONTACT_FORM_RECEIVED,
            resource_type="contact_form",
            resource_id=contact_id,
        )

    async def list_entries(
        self,
        caller: Caller,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        limit: int = 100,
    ) -> Sequence[AuditLog]:
        """List audit entries, newest first (admin only)."""
        ensure_authorized(caller, Operation.LIST_AUDIT_LOG)

        query = select(AuditLog)
        if resource_type:
            query = query.where(AuditLog.resource_type == resource_type)
        if resource_id:
            query = query.where(AuditLog.resource_id == resource_id)
        query = query.order_by(AuditLog.created_at.desc()).limit(limit)

        result = await self.db.execute(query)
        return result.scalars().all()
