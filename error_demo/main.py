"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and the users demonstration endpoints)
- Error handlers (centralized error-to-HTTP mapping)
- Middleware (security headers, request logging)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from error_demo.core.config import settings
from error_demo.infrastructure.users.user_repository import get_user_directory
from error_demo.interfaces.health import router as health_router
from error_demo.interfaces.users.router import router as users_router
from error_demo.shared.errors.handlers import register_error_handlers
from error_demo.shared.logging import configure_logging
from error_demo.shared.request_logging import RequestLoggingMiddleware
from error_demo.shared.security.headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build the user directory before serving."""
    directory = get_user_directory()
    logger.info(
        "Starting %s %s with %d users",
        settings.project_name,
        settings.version,
        len(directory.find_all()),
    )
    yield
    logger.info("Shutting down %s", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, debug=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Error Handlers (innermost middleware, so registered first) ---
    register_error_handlers(app)

    # --- Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix=settings.api_prefix)
    if settings.mount_root_aliases and settings.api_prefix:
        app.include_router(users_router, include_in_schema=False)

    return app


app = create_app()
