"""Listing Launchpad - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from launchpad.core.config import Settings
from launchpad.core.database import build_engine, build_session_maker, init_models
from launchpad.core.env_validation import validate_environment
from launchpad.core.errors import LaunchpadError, UnauthenticatedError
from launchpad.core.logging_config import setup_logging
from launchpad.routers import (
    audit_router,
    contact_router,
    plans_router,
    profiles_router,
    properties_router,
    service_requests_router,
)
from launchpad.services.profiles import ProfileService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    Hard-fails (exit 1) if the configuration is invalid.
    """
    settings = validate_environment(settings)
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        engine = build_engine(settings.database_url)
        app.state.engine = engine
        app.state.session_maker = build_session_maker(engine)

        if settings.auto_create_tables:
            await init_models(engine)

        # Out-of-band admin bootstrap: at least one admin must exist
        if settings.admin_principal_list:
            async with app.state.session_maker() as db:
                await ProfileService(db).bootstrap_admins(settings.admin_principal_list)

        logger.info(f"[APP] {settings.app_name} started")
        yield
        # Shutdown
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Property-maintenance coordination for real-estate agents: properties, "
            "prioritized service requests with photos, and admin triage."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # CORS - configured from ALLOWED_ORIGINS; wildcard is blocked outside debug by env_validation.py
    allowed_origins = settings.allowed_origin_list
    logger.info(f"[APP] CORS configured with origins: {allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(LaunchpadError)
    async def launchpad_error_handler(request: Request, exc: LaunchpadError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "code": exc.code},
            headers=headers,
        )

    # API v1 routers
    app.include_router(profiles_router, prefix=settings.api_v1_prefix)
    app.include_router(properties_router, prefix=settings.api_v1_prefix)
    app.include_router(service_requests_router, prefix=settings.api_v1_prefix)
    app.include_router(contact_router, prefix=settings.api_v1_prefix)
    app.include_router(plans_router, prefix=settings.api_v1_prefix)
    app.include_router(audit_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": settings.app_name}

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs" if settings.debug else "Disabled in production",
        }

    return app


app = create_app()
