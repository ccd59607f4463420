"""Audit log router (admins only)."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.database import get_db
from launchpad.core.security import Caller, get_current_caller
from launchpad.schemas.audit import AuditLogResponse
from launchpad.services.audit import AuditService

router = APIRouter(prefix="/audit", tags=["audit"])


@router.get("", response_model=List[AuditLogResponse])
async def list_audit_log(
    resource_type: Optional[str] = None,
    resource_id: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """List audit entries, newest first."""
    entries = await AuditService(db).list_entries(
        caller,
        resource_type=resource_type,
        resource_id=resource_id,
        limit=limit,
    )
    return [AuditLogResponse.model_validate(e) for e in entries]
