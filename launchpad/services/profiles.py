"""Profile Store: who the caller is and which role they hold."""

import logging
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.clock import now_ns
from launchpad.core.errors import ConflictError, InvalidInputError
from launchpad.core.security import Caller
from launchpad.models.enums import Role
from launchpad.models.user import RoleAssignment, UserProfile
from launchpad.services.audit import AuditService
from launchpad.services.authority import Operation, ensure_authorized

logger = logging.getLogger(__name__)


class ProfileService:
    """Profiles are self-service; roles are granted by admins only."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _assigned_role(self, principal: str) -> Role:
        assignment = await self.db.get(RoleAssignment, principal)
        return assignment.role if assignment else Role.USER

    async def get_profile(self, caller: Caller, principal: str) -> Optional[UserProfile]:
        """Profile of `principal`; reading someone else's needs admin."""
        ensure_authorized(caller, Operation.GET_USER_PROFILE, target=principal)
        return await self.db.get(UserProfile, principal)

    async def get_own_profile(self, caller: Caller) -> Optional[UserProfile]:
        ensure_authorized(caller, Operation.GET_OWN_PROFILE)
        return await self.db.get(UserProfile, caller.principal)

    async def save_own_profile(self, caller: Caller, name: str, role: Role) -> UserProfile:
        """Create the caller's profile, or rename it on a later save.

        The requested role never takes effect: a new profile gets the role
        assigned out-of-band, or `user` when there is none.
        """
        ensure_authorized(caller, Operation.SAVE_OWN_PROFILE)

        name = name.strip()
        if not name:
            raise InvalidInputError("Name must not be empty")

        profile = await self.db.get(UserProfile, caller.principal, with_for_update=True)
        if profile is None:
            now = now_ns()
            profile = UserProfile(
                principal=caller.principal,
                name=name,
                role=await self._assigned_role(caller.principal),
                created_at=now,
                updated_at=now,
            )
            self.db.add(profile)
            logger.info(f"[PROFILES] Created profile for {caller.principal} as {profile.role.value}")
        elif profile.name != name:
            profile.name = name
            logger.info(f"[PROFILES] Renamed profile of {caller.principal}")

        if role != profile.role:
            logger.info(
                f"[PROFILES] Ignored requested role {role.value} for {caller.principal}; "
                f"roles are assigned by admins"
            )

        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent first save for the same principal won the insert
            await self.db.rollback()
            raise ConflictError("Profile was created concurrently; reload and retry")

        return profile

    async def get_own_role(self, caller: Caller) -> Role:
        """Role of the caller; `guest` until the caller has saved a profile."""
        ensure_authorized(caller, Operation.GET_OWN_ROLE)
        profile = await self.db.get(UserProfile, caller.principal)
        return profile.role if profile else Role.GUEST

    async def is_caller_admin(self, caller: Caller) -> bool:
        ensure_authorized(caller, Operation.IS_CALLER_ADMIN)
        return await self.get_own_role(caller) == Role.ADMIN

    async def _upsert_assignment(
        self,
        principal: str,
        role: Role,
        assigned_by: Optional[str],
    ) -> RoleAssignment:
        assignment = await self.db.get(RoleAssignment, principal, with_for_update=True)
        if assignment is None:
            assignment = RoleAssignment(principal=principal, role=role)
            self.db.add(assignment)
        assignment.role = role
        assignment.assigned_by = assigned_by
        assignment.assigned_at = now_ns()

        profile = await self.db.get(UserProfile, principal, with_for_update=True)
        if profile is not None:
            profile.role = role

        await AuditService(self.db).log_role_assigned(principal, role, assigned_by)
        return assignment

    async def assign_role(self, caller: Caller, principal: str, role: Role) -> RoleAssignment:
        """Grant `role` to `principal` (admin only; admins may demote themselves)."""
        ensure_authorized(caller, Operation.ASSIGN_ROLE)

        assignment = await self._upsert_assignment(principal, role, caller.principal)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("Role was assigned concurrently; reload and retry")

        logger.info(f"[PROFILES] {caller.principal} assigned {role.value} to {principal}")
        return assignment

    async def bootstrap_admins(self, principals: Iterable[str]) -> list[str]:
        """Grant admin to configured principals at startup. Returns newly granted ones."""
        granted = []
        for principal in principals:
            existing = await self.db.get(RoleAssignment, principal)
            if existing is not None and existing.role == Role.ADMIN:
                continue
            await self._upsert_assignment(principal, Role.ADMIN, None)
            granted.append(principal)

        await self.db.commit()
        if granted:
            logger.info(f"[PROFILES] Bootstrapped admin role for {', '.join(granted)}")
        return granted
