"""Contact Intake: append-only store of public contact-form submissions."""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.clock import now_ns
from launchpad.core.errors import NotFoundError
from launchpad.core.security import Caller
from launchpad.models.contact import ContactForm, parse_contact_id
from launchpad.services.audit import AuditService
from launchpad.services.authority import Operation, ensure_authorized

logger = logging.getLogger(__name__)


class ContactService:
    """Anyone may submit; only admins may read."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def submit_contact_form(
        self,
        caller: Caller,
        name: str,
        email: str,
        phone: str,
        message: str,
    ) -> ContactForm:
        """Store a submission verbatim. Never rejects a lead."""
        ensure_authorized(caller, Operation.SUBMIT_CONTACT_FORM)

        form = ContactForm(
            name=name,
            email=email,
            phone=phone,
            message=message,
            submitted_at=now_ns(),
        )
        self.db.add(form)
        await self.db.flush()

        await AuditService(self.db).log_contact_form_received(form.id)
        await self.db.commit()

        logger.info(f"[CONTACT] Received contact form {form.id}")
        return form

    async def list_contact_forms(self, caller: Caller) -> Sequence[ContactForm]:
        ensure_authorized(caller, Operation.LIST_CONTACT_FORMS)

        result = await self.db.execute(select(ContactForm).order_by(ContactForm.seq))
        return result.scalars().all()

    async def get_contact_form(self, caller: Caller, contact_id: str) -> ContactForm:
        ensure_authorized(caller, Operation.GET_CONTACT_FORM)

        seq = parse_contact_id(contact_id)
        form = await self.db.get(ContactForm, seq) if seq is not None else None
        if form is None:
            raise NotFoundError("Contact form not found")
        return form
