"""SQLAlchemy models for Listing Launchpad."""

from launchpad.models.user import UserProfile, RoleAssignment
from launchpad.models.property import Property
from launchpad.models.service_request import ServiceRequest, ServiceRequestPhoto
from launchpad.models.contact import ContactForm
from launchpad.models.audit import AuditLog

__all__ = [
    "UserProfile",
    "RoleAssignment",
    "Property",
    "ServiceRequest",
    "ServiceRequestPhoto",
    "ContactForm",
    "AuditLog",
]
