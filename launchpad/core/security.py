"""Firebase ID token verification and caller resolution."""

import logging
from collections.abc import Callable
from typing import Any, Optional

import firebase_admin
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth, credentials
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.core.config import get_settings
from launchpad.core.database import get_db
from launchpad.models.enums import Role

logger = logging.getLogger(__name__)

# Anonymous callers are valid; public operations must not demand a token.
security = HTTPBearer(auto_error=False)

TokenVerifier = Callable[[str], dict[str, Any]]


class Caller:
    """The caller of one request: a principal (or anonymous) and its role."""

    def __init__(
        self,
        principal: Optional[str] = None,
        email: Optional[str] = None,
        claims: Optional[dict[str, Any]] = None,
        role: Role = Role.GUEST,
    ):
        self.principal = principal
        self.email = email
        self.claims = claims or {}
        self.role = role

    @property
    def is_anonymous(self) -> bool:
        return self.principal is None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __repr__(self) -> str:
        return f"Caller(principal={self.principal!r}, role={self.role.value})"


def _ensure_firebase_app() -> None:
    """Initialize the Firebase Admin SDK on first use."""
    if firebase_admin._apps:
        return
    settings = get_settings()
    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    if settings.google_application_credentials:
        cred = credentials.Certificate(settings.google_application_credentials)
        firebase_admin.initialize_app(cred, options)
    else:
        firebase_admin.initialize_app(options=options)


def verify_firebase_token(token: str) -> dict[str, Any]:
    """Verify a Firebase ID token and return its decoded claims.

    This service NEVER mints tokens - it only verifies tokens issued by Firebase.
    """
    _ensure_firebase_app()
    return auth.verify_id_token(token)


def get_token_verifier() -> TokenVerifier:
    """Dependency returning the token verifier (overridden in tests)."""
    return verify_firebase_token


async def resolve_caller(
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Caller:
    """Map the request to a principal. Never fails: returns an anonymous caller instead."""
    if bearer is None:
        return Caller()

    try:
        decoded_token = verifier(bearer.credentials)
    except auth.CertificateFetchError as e:
        logger.error(f"[AUTH] Could not fetch token signing certificates: {e}")
        return Caller()
    except (auth.InvalidIdTokenError, ValueError) as e:
        logger.warning(f"[AUTH] Rejected bearer token, treating caller as anonymous: {e}")
        return Caller()

    return Caller(
        principal=decoded_token["uid"],
        email=decoded_token.get("email"),
        claims=decoded_token,
    )


async def get_current_caller(
    caller: Caller = Depends(resolve_caller),
    db: AsyncSession = Depends(get_db),
) -> Caller:
    """Resolve the caller and load its effective role (guest until a profile exists)."""
    from launchpad.models.user import UserProfile

    if caller.principal is not None:
        result = await db.execute(
            select(UserProfile.role).where(UserProfile.principal == caller.principal)
        )
        caller.role = result.scalar_one_or_none() or Role.GUEST

    return caller
