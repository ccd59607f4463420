"""Enumeration types for the Listing Launchpad domain model.

Values are the strings exchanged with the UI; member names are what the
database stores.
"""

from enum import Enum

from launchpad.core.errors import InvalidInputError


class WireEnum(str, Enum):
    """String enum with a strict mapping from the external representation."""

    @classmethod
    def from_wire(cls, value: str):
        """Map an external string to a member, rejecting unknown values."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(repr(m.value) for m in cls)
            raise InvalidInputError(f"Unknown {cls.__name__} {value!r}; expected one of {allowed}") from None


class Role(WireEnum):
    """Access role of a principal."""
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class Urgency(WireEnum):
    """Priority tag on a service request."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    INSPECTION_SHOWSTOPPER = "Inspection Showstopper"


class ServiceRequestStatus(WireEnum):
    """Workflow status of a service request.

    No transition table: an admin may move a request from any status to any
    other, including reopening a Completed request.
    """
    PENDING = "Pending"
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class AuditAction(str, Enum):
    """Actions recorded in the audit log."""
    PROPERTY_CREATED = "property_created"
    SERVICE_REQUEST_CREATED = "service_request_created"
    STATUS_CHANGED = "status_changed"
    PHOTO_ATTACHED = "photo_attached"
    ROLE_ASSIGNED = "role_assigned"
    CONTACT_FORM_RECEIVED = "contact_form_received"
