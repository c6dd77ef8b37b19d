"""
Request logging middleware.

Logs one line per handled request: method, path, status and duration.
Request bodies and headers are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request and its outcome."""

    def __init__(self, app, ignore_paths: tuple[str, ...] = ()) -> None:
        super().__init__(app)
        self.ignore_paths = ignore_paths or ("/api/v1/health", "/favicon.ico")

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.ignore_paths:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info
        log(
            "%s %s -> %d (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )

        response.headers[PROCESS_TIME_HEADER] = str(elapsed_ms)
        return response
