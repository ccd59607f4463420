"""Properties router."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.config import Settings, get_app_settings
from launchpad.core.database import get_db
from launchpad.core.security import Caller, get_current_caller
from launchpad.schemas.property import PropertyCreate, PropertyResponse
from launchpad.services.properties import PropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def add_property(
    data: PropertyCreate,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Register a property. The caller becomes its owner."""
    prop = await PropertyService(db).add_property(
        caller,
        property_id=data.id,
        address=data.address,
        city=data.city,
        state=data.state,
        zip_code=data.zip,
    )
    return PropertyResponse.model_validate(prop)


@router.get("", response_model=List[PropertyResponse])
async def list_properties(
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
    settings: Settings = Depends(get_app_settings),
):
    """List properties."""
    service = PropertyService(db, scope_lists_to_owner=settings.scope_lists_to_owner)
    properties = await service.list_properties(caller)
    return [PropertyResponse.model_validate(p) for p in properties]


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Get a property by ID."""
    prop = await PropertyService(db).get_property(caller, property_id)
    return PropertyResponse.model_validate(prop)
