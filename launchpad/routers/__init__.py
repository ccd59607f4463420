"""API Routers for Listing Launchpad."""

from launchpad.routers.profiles import router as profiles_router
from launchpad.routers.properties import router as properties_router
from launchpad.routers.service_requests import router as service_requests_router
from launchpad.routers.contact import router as contact_router
from launchpad.routers.plans import router as plans_router
from launchpad.routers.audit import router as audit_router

__all__ = [
    "profiles_router",
    "properties_router",
    "service_requests_router",
    "contact_router",
    "plans_router",
    "audit_router",
]
