"""ContactForm model."""

from typing import Optional

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from launchpad.core.clock import now_ns
from launchpad.core.database import Base

CONTACT_ID_PREFIX = "c"


def parse_contact_id(contact_id: str) -> Optional[int]:
    """Map an external contact form id ("c3") to its storage key, None if malformed."""
    if not contact_id.startswith(CONTACT_ID_PREFIX):
        return None
    digits = contact_id[len(CONTACT_ID_PREFIX):]
    if not digits.isdigit():
        return None
    return int(digits)


class ContactForm(Base):
    """Public contact-form submission. Stored verbatim, never mutated."""

    __tablename__ = "contact_forms"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    submitted_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False)

    @property
    def id(self) -> str:
        return f"{CONTACT_ID_PREFIX}{self.seq}"
