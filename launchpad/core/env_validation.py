"""
Runtime Environment Validation Module

Validates configuration at application startup. If validation fails, the
application refuses to start (hard fail) instead of failing on the first
request that touches the broken setting.
"""

import os
import sys
from typing import Optional

from pydantic import ValidationError

from launchpad.core.config import Settings, get_settings

SUPPORTED_DATABASE_SCHEMES = ("postgresql", "sqlite")


def check_settings(settings: Settings) -> list[str]:
    """Return a list of configuration problems (empty when valid)."""
    problems = []

    # 1. CORS: wildcard is only acceptable in debug mode
    if not settings.debug and "*" in settings.allowed_origin_list:
        problems.append(
            "Wildcard CORS origin (*) detected in production mode. "
            "Set ALLOWED_ORIGINS to specific domains (comma-separated)."
        )

    # 2. Database URL: basic scheme validation
    if not settings.database_url.startswith(SUPPORTED_DATABASE_SCHEMES):
        problems.append(
            "DATABASE_URL must be a PostgreSQL (postgresql+asyncpg://) "
            "or SQLite (sqlite+aiosqlite://) connection string"
        )

    # 3. Firebase: credentials path must exist if provided
    if settings.google_application_credentials:
        if not os.path.exists(settings.google_application_credentials):
            problems.append(
                f"Firebase credentials file not found: {settings.google_application_credentials}"
            )

    # 4. Bootstrap admins: at least one admin must exist before the system is useful
    if not settings.debug and not settings.admin_principal_list:
        print(
            "⚠️  ADMIN_PRINCIPALS is empty. No admin can triage requests until one is assigned.",
            file=sys.stderr,
        )

    return problems


def validate_environment(settings: Optional[Settings] = None) -> Settings:
    """
    Validate configuration before the FastAPI app is constructed.

    Returns:
        Settings: the validated settings object

    Raises:
        SystemExit: if validation fails (exit code 1)
    """
    try:
        settings = settings or get_settings()
    except ValidationError as e:
        print("❌ FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            print(f"   • {field}: {error['msg']}", file=sys.stderr)
        print("\nPlease check your .env file or environment variables.", file=sys.stderr)
        sys.exit(1)

    problems = check_settings(settings)
    if problems:
        for problem in problems:
            print(f"❌ FATAL: {problem}", file=sys.stderr)
        sys.exit(1)

    return settings


if __name__ == "__main__":
    # Allow running this module directly to test validation
    validated = validate_environment()
    print("✅ All environment variables are valid!")
    print(f"   App: {validated.app_name}")
    print(f"   Debug: {validated.debug}")
    print(f"   CORS Origins: {validated.allowed_origins}")
