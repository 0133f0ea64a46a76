"""
NoteKeeper Backend — Request Logging Middleware
=================================================

What:  One access-log line per request: method, path, status, duration,
       request ID and client IP.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Level follows the status class: 5xx → ERROR, 4xx → WARNING, else INFO.
Health probes are not logged.

An exception escaping a route is turned into the generic 500 here rather
than by the outermost server-error handler, so the failure still gets an
access-log line and RequestIDMiddleware still stamps X-Request-ID on it.

Request bodies and the Authorization header are never logged (they carry
passwords and tokens).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from notekeeper.exceptions import InternalError
from notekeeper.middleware.request_id import request_id_var

logger = logging.getLogger("notekeeper.access")

HEALTH_PATH = "/api/health"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path == HEALTH_PATH:
            return await self._call_guarded(request, call_next)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await self._call_guarded(request, call_next)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

    async def _call_guarded(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.error(
                "Unhandled error on %s %s [%s]",
                request.method,
                request.url.path,
                request_id_var.get(""),
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={"error": InternalError.default_message},
            )
