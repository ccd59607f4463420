"""Typed domain errors raised by services and rendered by the API layer."""

from fastapi import status


class LaunchpadError(Exception):
    """Base class for errors returned to the caller as typed results."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "error"
    default_detail: str = "Request failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class UnauthenticatedError(LaunchpadError):
    """No identity where one is required."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"
    default_detail = "Authentication required"


class ForbiddenError(LaunchpadError):
    """Identity present, role insufficient."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    default_detail = "Admin privileges required"


class NotFoundError(LaunchpadError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_detail = "Not found"


class ConflictError(LaunchpadError):
    """Duplicate id on creation."""

    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_detail = "Already exists"


class InvalidInputError(LaunchpadError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_input"
    default_detail = "Invalid input"
