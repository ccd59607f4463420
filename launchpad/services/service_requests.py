"""Service Request Engine: creation, status workflow and photo attachment.

Status and `updated_at` always change together in one row write, under a
row lock, so concurrent writers on the same request are serialized and
readers never see one without the other.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.clock import now_ns
from launchpad.core.errors import InvalidInputError, NotFoundError
from launchpad.core.security import Caller
from launchpad.models.enums import ServiceRequestStatus, Urgency
from launchpad.models.property import Property
from launchpad.models.service_request import (
    ServiceRequest,
    ServiceRequestPhoto,
    parse_request_id,
)
from launchpad.services.audit import AuditService
from launchpad.services.authority import Operation, ensure_authorized

logger = logging.getLogger(__name__)


class ServiceRequestService:
    """Service requests filed by agents and triaged by admins."""

    def __init__(self, db: AsyncSession, scope_lists_to_owner: bool = False):
        self.db = db
        self.scope_lists_to_owner = scope_lists_to_owner

    async def _load(self, request_id: str, for_update: bool = False) -> ServiceRequest:
        seq = parse_request_id(request_id)
        if seq is None:
            raise NotFoundError("Service request not found")

        query = select(ServiceRequest).where(ServiceRequest.seq == seq)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        request = result.scalar_one_or_none()
        if request is None:
            raise NotFoundError("Service request not found")
        return request

    @staticmethod
    def _touch(request: ServiceRequest) -> None:
        # updated_at never moves backwards, even if the wall clock does
        request.updated_at = max(now_ns(), request.updated_at)

    async def create_service_request(
        self,
        caller: Caller,
        property_id: str,
        title: str,
        description: str,
        urgency: Urgency,
    ) -> ServiceRequest:
        """File a request against an existing property. Status starts at Pending."""
        ensure_authorized(caller, Operation.CREATE_SERVICE_REQUEST)

        if await self.db.get(Property, property_id) is None:
            raise NotFoundError("Property not found")

        now = now_ns()
        request = ServiceRequest(
            property_id=property_id,
            title=title,
            description=description,
            urgency=urgency,
            status=ServiceRequestStatus.PENDING,
            created_by=caller.principal,
            created_at=now,
            updated_at=now,
            photo_rows=[],
        )
        self.db.add(request)
        await self.db.flush()

        await AuditService(self.db).log_service_request_created(
            request.id, property_id, caller.principal
        )
        await self.db.commit()

        logger.info(
            f"[REQUESTS] {caller.principal} filed {request.id} "
            f"({urgency.value}) on property {property_id}"
        )
        return request

    async def update_status(
        self,
        caller: Caller,
        request_id: str,
        new_status: ServiceRequestStatus,
    ) -> ServiceRequest:
        """Move a request to `new_status` (admin only).

        Any status may follow any other. Setting the current status again is
        a successful no-op and leaves `updated_at` untouched.
        """
        ensure_authorized(caller, Operation.UPDATE_SERVICE_REQUEST_STATUS)

        request = await self._load(request_id, for_update=True)
        old_status = request.status
        if old_status == new_status:
            await self.db.commit()
            return request

        request.status = new_status
        self._touch(request)
        await AuditService(self.db).log_status_changed(
            request.id, caller.principal, old_status, new_status
        )
        await self.db.commit()

        logger.info(
            f"[REQUESTS] {caller.principal} moved {request.id} "
            f"from {old_status.value} to {new_status.value}"
        )
        return request

    async def upload_photo(
        self,
        caller: Caller,
        request_id: str,
        content_ref: str,
    ) -> ServiceRequest:
        """Append one photo content reference and refresh `updated_at`."""
        ensure_authorized(caller, Operation.UPLOAD_PHOTO)

        if not content_ref.strip():
            raise InvalidInputError("Content reference must not be empty")

        request = await self._load(request_id, for_update=True)
        request.photo_rows.append(
            ServiceRequestPhoto(
                content_ref=content_ref,
                uploaded_by=caller.principal,
                uploaded_at=now_ns(),
            )
        )
        self._touch(request)
        await AuditService(self.db).log_photo_attached(request.id, caller.principal, content_ref)
        await self.db.commit()

        logger.info(f"[REQUESTS] {caller.principal} attached photo #{len(request.photo_rows)} to {request.id}")
        return request

    async def get_service_request(self, caller: Caller, request_id: str) -> ServiceRequest:
        ensure_authorized(caller, Operation.GET_SERVICE_REQUEST)
        return await self._load(request_id)

    async def list_service_requests(
        self,
        caller: Caller,
        status: Optional[ServiceRequestStatus] = None,
        property_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Sequence[ServiceRequest]:
        """Requests in insertion order, optionally filtered.

        `search` matches title or description, case-insensitively. Callers
        must not rely on the order.
        """
        ensure_authorized(caller, Operation.LIST_SERVICE_REQUESTS)

        query = select(ServiceRequest)
        if self.scope_lists_to_owner and not caller.is_admin:
            query = query.where(ServiceRequest.created_by == caller.principal)
        if status:
            query = query.where(ServiceRequest.status == status)
        if property_id:
            query = query.where(ServiceRequest.property_id == property_id)
        if search:
            # Literal substring match; % and _ in the text are not wildcards
            query = query.where(
                or_(
                    ServiceRequest.title.icontains(search, autoescape=True),
                    ServiceRequest.description.icontains(search, autoescape=True),
                )
            )
        query = query.order_by(ServiceRequest.seq)

        result = await self.db.execute(query)
        return result.scalars().all()
