"""Services for Listing Launchpad."""

from launchpad.services.audit import AuditService
from launchpad.services.contact import ContactService
from launchpad.services.plans import PlanCatalog
from launchpad.services.profiles import ProfileService
from launchpad.services.properties import PropertyService
from launchpad.services.service_requests import ServiceRequestService

__all__ = [
    "AuditService",
    "ContactService",
    "PlanCatalog",
    "ProfileService",
    "PropertyService",
    "ServiceRequestService",
]
