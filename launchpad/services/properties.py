"""Property Registry."""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.clock import now_ns
from launchpad.core.errors import ConflictError, NotFoundError
from launchpad.core.security import Caller
from launchpad.models.property import Property
from launchpad.services.audit import AuditService
from launchpad.services.authority import Operation, ensure_authorized

logger = logging.getLogger(__name__)


class PropertyService:
    """Create and read properties. Properties are never updated or deleted here."""

    def __init__(self, db: AsyncSession, scope_lists_to_owner: bool = False):
        self.db = db
        self.scope_lists_to_owner = scope_lists_to_owner

    async def add_property(
        self,
        caller: Caller,
        property_id: str,
        address: str,
        city: str,
        state: str,
        zip_code: str,
    ) -> Property:
        """Register a property owned by the caller. Conflict if the id is taken."""
        ensure_authorized(caller, Operation.ADD_PROPERTY)

        if await self.db.get(Property, property_id) is not None:
            raise ConflictError(f"Property {property_id!r} already exists")

        prop = Property(
            id=property_id,
            address=address,
            city=city,
            state=state,
            zip=zip_code,
            owner=caller.principal,
            created_at=now_ns(),
        )
        self.db.add(prop)

        try:
            await AuditService(self.db).log_property_created(property_id, caller.principal)
            await self.db.commit()
        except IntegrityError:
            # Lost a race with another creator using the same id
            await self.db.rollback()
            raise ConflictError(f"Property {property_id!r} already exists")

        logger.info(f"[PROPERTIES] {caller.principal} added property {property_id}")
        return prop

    async def get_property(self, caller: Caller, property_id: str) -> Property:
        ensure_authorized(caller, Operation.GET_PROPERTY)

        prop = await self.db.get(Property, property_id)
        if prop is None:
            raise NotFoundError("Property not found")
        return prop

    async def list_properties(self, caller: Caller) -> Sequence[Property]:
        """All properties, in creation order.

        Non-admins see every owner's properties unless owner scoping is enabled.
        """
        ensure_authorized(caller, Operation.LIST_PROPERTIES)

        query = select(Property)
        if self.scope_lists_to_owner and not caller.is_admin:
            query = query.where(Property.owner == caller.principal)
        query = query.order_by(Property.created_at)

        result = await self.db.execute(query)
        return result.scalars().all()
