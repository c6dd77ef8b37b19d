"""
Centralized error handlers for FastAPI.

One handler is registered for every exception type of the translation
table; anything else is caught by an innermost middleware.
All error responses use the ErrorResponse schema.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from error_demo.core.config import settings
from error_demo.shared.errors.translation import (
    EXCEPTION_CATEGORIES,
    ErrorCategory,
    classify,
    translate,
)

logger = logging.getLogger(__name__)

DEFAULT_NOT_FOUND_DETAIL = HTTPStatus.NOT_FOUND.phrase


def _describe(request: Request, exc: Exception, category: ErrorCategory) -> str | None:
    """Return the human-readable detail of ``exc``."""
    if (
        category is ErrorCategory.ROUTE_NOT_FOUND
        and exc.detail == DEFAULT_NOT_FOUND_DETAIL
    ):
        return f"No endpoint {request.method} {request.url.path}."
    if isinstance(exc, RequestValidationError):
        return "; ".join(str(err.get("msg", "")) for err in exc.errors()) or None
    if isinstance(exc, StarletteHTTPException):
        return str(exc.detail) if exc.detail else None
    return str(exc) or None


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Translate any raised error into its JSON error response."""
    category = classify(exc)
    message = _describe(request, exc, category)
    body = translate(
        category,
        message if settings.expose_error_messages else None,
        status=getattr(exc, "status_code", None),
    )

    if category is ErrorCategory.INTERNAL:
        logger.error("Unexpected error: %s", type(exc).__name__, exc_info=exc)
    elif body.status >= 500:
        logger.error("%s on %s: %s", body.error, request.url.path, message)
    else:
        logger.warning("%s on %s: %s", body.error, request.url.path, message)

    return JSONResponse(
        status_code=body.status,
        content=body.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Translates exceptions no registered handler claimed.

    Installed innermost so its responses still pass through every other
    middleware. The exception is not re-raised.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await handle_error(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI application.

    Must be called before any other middleware is added, so that
    unmapped errors are translated inside the middleware stack.

    Args:
        app: The FastAPI application instance.
    """
    for exc_type in EXCEPTION_CATEGORIES:
        app.add_exception_handler(exc_type, handle_error)
    app.add_middleware(UnhandledErrorMiddleware)
