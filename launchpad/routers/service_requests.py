"""Service requests router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.config import Settings, get_app_settings
from launchpad.core.database import get_db
from launchpad.core.security import Caller, get_current_caller
from launchpad.models.enums import ServiceRequestStatus, Urgency
from launchpad.schemas.base import CreatedIdResponse
from launchpad.schemas.service_request import (
    PhotoAttach,
    ServiceRequestCreate,
    ServiceRequestResponse,
    ServiceRequestStatusUpdate,
)
from launchpad.services.service_requests import ServiceRequestService

router = APIRouter(prefix="/service-requests", tags=["service-requests"])


@router.post("", response_model=CreatedIdResponse, status_code=status.HTTP_201_CREATED)
async def create_service_request(
    data: ServiceRequestCreate,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """File a service request against an existing property."""
    request = await ServiceRequestService(db).create_service_request(
        caller,
        property_id=data.property_id,
        title=data.title,
        description=data.description,
        urgency=Urgency.from_wire(data.urgency),
    )
    return CreatedIdResponse(id=request.id)


@router.get("", response_model=List[ServiceRequestResponse])
async def list_service_requests(
    status: Optional[str] = None,
    property_id: Optional[str] = None,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
    settings: Settings = Depends(get_app_settings),
):
    """List service requests, optionally filtered by status, property or text."""
    service = ServiceRequestService(db, scope_lists_to_owner=settings.scope_lists_to_owner)
    requests = await service.list_service_requests(
        caller,
        status=ServiceRequestStatus.from_wire(status) if status else None,
        property_id=property_id,
        search=search,
    )
    return [ServiceRequestResponse.model_validate(r) for r in requests]


@router.get("/{request_id}", response_model=ServiceRequestResponse)
async def get_service_request(
    request_id: str,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Get a service request by ID."""
    request = await ServiceRequestService(db).get_service_request(caller, request_id)
    return ServiceRequestResponse.model_validate(request)


@router.patch("/{request_id}/status", response_model=ServiceRequestResponse)
async def update_service_request_status(
    request_id: str,
    data: ServiceRequestStatusUpdate,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Move a service request to another status (admins only)."""
    request = await ServiceRequestService(db).update_status(
        caller, request_id, ServiceRequestStatus.from_wire(data.status)
    )
    return ServiceRequestResponse.model_validate(request)


@router.post(
    "/{request_id}/photos",
    response_model=ServiceRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_photo(
    request_id: str,
    data: PhotoAttach,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Attach a photo by its content reference (bytes live in blob storage)."""
    request = await ServiceRequestService(db).upload_photo(caller, request_id, data.content_ref)
    return ServiceRequestResponse.model_validate(request)
