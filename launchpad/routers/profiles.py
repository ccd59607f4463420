"""Profiles router - self-service profiles and admin role assignment."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.database import get_db
from launchpad.core.security import Caller, get_current_caller
from launchpad.models.enums import Role
from launchpad.schemas.profile import (
    IsAdminResponse,
    ProfileResponse,
    ProfileSave,
    RoleAssign,
    RoleAssignmentResponse,
    RoleResponse,
)
from launchpad.services.profiles import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=Optional[ProfileResponse])
async def get_caller_profile(
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Get the caller's profile, or null when onboarding is still needed."""
    profile = await ProfileService(db).get_own_profile(caller)
    return ProfileResponse.model_validate(profile) if profile else None


@router.put("/me", response_model=ProfileResponse)
async def save_caller_profile(
    data: ProfileSave,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Create the caller's profile on first login (or update the display name)."""
    profile = await ProfileService(db).save_own_profile(
        caller, name=data.name, role=Role.from_wire(data.role)
    )
    return ProfileResponse.model_validate(profile)


@router.get("/me/role", response_model=RoleResponse)
async def get_caller_role(
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Get the caller's role (guest until a profile exists)."""
    return RoleResponse(role=await ProfileService(db).get_own_role(caller))


@router.get("/me/is-admin", response_model=IsAdminResponse)
async def is_caller_admin(
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    return IsAdminResponse(is_admin=await ProfileService(db).is_caller_admin(caller))


@router.get("/{principal}", response_model=Optional[ProfileResponse])
async def get_user_profile(
    principal: str,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Get a principal's profile (own, or any for admins)."""
    profile = await ProfileService(db).get_profile(caller, principal)
    return ProfileResponse.model_validate(profile) if profile else None


@router.put("/{principal}/role", response_model=RoleAssignmentResponse)
async def assign_role(
    principal: str,
    data: RoleAssign,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Assign a role to a principal (admins only)."""
    assignment = await ProfileService(db).assign_role(
        caller, principal, Role.from_wire(data.role)
    )
    return RoleAssignmentResponse.model_validate(assignment)
