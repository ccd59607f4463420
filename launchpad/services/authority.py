"""Role Authority: decides whether a caller may perform an operation.

Rules, in priority order:

1. Anonymous callers may only submit contact forms and read the plan catalog.
2. Admin-only operations need the admin role.
3. Self-scoped operations are allowed on the caller's own principal; acting on
   another principal is a cross-owner operation and needs admin.
4. Every other authenticated operation is allowed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from launchpad.core.errors import ForbiddenError, UnauthenticatedError
from launchpad.core.security import Caller
from launchpad.models.enums import Role

logger = logging.getLogger(__name__)


class Access(str, Enum):
    PUBLIC = "public"
    ADMIN = "admin"
    SELF = "self"
    AUTHENTICATED = "authenticated"


class Operation(str, Enum):
    """Every operation exposed by the core."""
    # Property Registry
    ADD_PROPERTY = "add_property"
    GET_PROPERTY = "get_property"
    LIST_PROPERTIES = "list_properties"
    # Service Request Engine
    CREATE_SERVICE_REQUEST = "create_service_request"
    GET_SERVICE_REQUEST = "get_service_request"
    LIST_SERVICE_REQUESTS = "list_service_requests"
    UPDATE_SERVICE_REQUEST_STATUS = "update_service_request_status"
    UPLOAD_PHOTO = "upload_photo"
    # Profile Store
    GET_OWN_PROFILE = "get_own_profile"
    SAVE_OWN_PROFILE = "save_own_profile"
    GET_OWN_ROLE = "get_own_role"
    IS_CALLER_ADMIN = "is_caller_admin"
    GET_USER_PROFILE = "get_user_profile"
    ASSIGN_ROLE = "assign_role"
    # Contact Intake
    SUBMIT_CONTACT_FORM = "submit_contact_form"
    LIST_CONTACT_FORMS = "list_contact_forms"
    GET_CONTACT_FORM = "get_contact_form"
    # Plan Catalog
    LIST_PLANS = "list_plans"
    GET_PLAN = "get_plan"
    # Audit Trail
    LIST_AUDIT_LOG = "list_audit_log"


OPERATION_ACCESS: dict[Operation, Access] = {
    Operation.ADD_PROPERTY: Access.AUTHENTICATED,
    Operation.GET_PROPERTY: Access.AUTHENTICATED,
    Operation.LIST_PROPERTIES: Access.AUTHENTICATED,
    Operation.CREATE_SERVICE_REQUEST: Access.AUTHENTICATED,
    Operation.GET_SERVICE_REQUEST: Access.AUTHENTICATED,
    Operation.LIST_SERVICE_REQUESTS: Access.AUTHENTICATED,
    Operation.UPDATE_SERVICE_REQUEST_STATUS: Access.ADMIN,
    Operation.UPLOAD_PHOTO: Access.AUTHENTICATED,
    Operation.GET_OWN_PROFILE: Access.SELF,
    Operation.SAVE_OWN_PROFILE: Access.SELF,
    Operation.GET_OWN_ROLE: Access.SELF,
    Operation.IS_CALLER_ADMIN: Access.SELF,
    Operation.GET_USER_PROFILE: Access.SELF,
    Operation.ASSIGN_ROLE: Access.ADMIN,
    Operation.SUBMIT_CONTACT_FORM: Access.PUBLIC,
    Operation.LIST_CONTACT_FORMS: Access.ADMIN,
    Operation.GET_CONTACT_FORM: Access.ADMIN,
    Operation.LIST_PLANS: Access.PUBLIC,
    Operation.GET_PLAN: Access.PUBLIC,
    Operation.LIST_AUDIT_LOG: Access.ADMIN,
}


class DenyReason(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Decision:
    """Outcome of an authorization check. `reason` is None when allowed."""

    reason: Optional[DenyReason] = None

    @property
    def allowed(self) -> bool:
        return self.reason is None


ALLOW = Decision()


def authorize(caller: Caller, operation: Operation, target: Optional[str] = None) -> Decision:
    """Decide whether `caller` may perform `operation` (on principal `target`)."""
    access = OPERATION_ACCESS[operation]

    if access == Access.PUBLIC:
        return ALLOW

    if caller.is_anonymous:
        return Decision(DenyReason.UNAUTHENTICATED)

    if access == Access.ADMIN:
        return ALLOW if caller.role == Role.ADMIN else Decision(DenyReason.FORBIDDEN)

    if access == Access.SELF:
        if target is None or target == caller.principal:
            return ALLOW
        return ALLOW if caller.role == Role.ADMIN else Decision(DenyReason.FORBIDDEN)

    return ALLOW


def ensure_authorized(caller: Caller, operation: Operation, target: Optional[str] = None) -> None:
    """Raise the typed error matching a denied decision."""
    decision = authorize(caller, operation, target)
    if decision.allowed:
        return

    logger.warning(f"[AUTHZ] Denied {operation.value} for {caller!r}: {decision.reason.value}")
    if decision.reason == DenyReason.UNAUTHENTICATED:
        raise UnauthenticatedError()
    if operation == Operation.GET_USER_PROFILE:
        raise ForbiddenError("Cannot read another user's profile")
    raise ForbiddenError()
