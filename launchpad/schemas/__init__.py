"""Pydantic schemas for the Listing Launchpad API."""

from launchpad.schemas.base import *
from launchpad.schemas.profile import *
from launchpad.schemas.property import *
from launchpad.schemas.service_request import *
from launchpad.schemas.contact import *
from launchpad.schemas.plan import *
from launchpad.schemas.audit import *
