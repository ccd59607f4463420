"""Contact form schemas."""

from pydantic import ConfigDict

from launchpad.schemas.base import BaseSchema, IDMixin


class ContactFormCreate(BaseSchema):
    """Public contact form submission.

    Fields are stored verbatim: no trimming, no format checks. The intake
    never rejects a lead.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    name: str
    email: str
    phone: str
    message: str


class ContactFormResponse(BaseSchema, IDMixin):
    """Contact form response (admin only)."""

    model_config = ConfigDict(str_strip_whitespace=False)

    name: str
    email: str
    phone: str
    message: str
    submitted_at: int
