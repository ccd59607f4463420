"""Contact forms router - public intake, admin review."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.database import get_db
from launchpad.core.security import Caller, get_current_caller
from launchpad.schemas.base import CreatedIdResponse
from launchpad.schemas.contact import ContactFormCreate, ContactFormResponse
from launchpad.services.contact import ContactService

router = APIRouter(prefix="/contact-forms", tags=["contact-forms"])


@router.post("", response_model=CreatedIdResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact_form(
    data: ContactFormCreate,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Submit a contact form. No authentication required."""
    form = await ContactService(db).submit_contact_form(
        caller,
        name=data.name,
        email=data.email,
        phone=data.phone,
        message=data.message,
    )
    return CreatedIdResponse(id=form.id)


@router.get("", response_model=List[ContactFormResponse])
async def list_contact_forms(
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """List contact form submissions (admins only)."""
    forms = await ContactService(db).list_contact_forms(caller)
    return [ContactFormResponse.model_validate(f) for f in forms]


@router.get("/{contact_id}", response_model=ContactFormResponse)
async def get_contact_form(
    contact_id: str,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
):
    """Get one contact form submission (admins only)."""
    form = await ContactService(db).get_contact_form(caller, contact_id)
    return ContactFormResponse.model_validate(form)
