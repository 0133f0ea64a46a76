"""
NoteKeeper Backend — Request ID Middleware
============================================

What:  Assigns each request a short correlation ID and echoes it back in the
       `X-Request-ID` response header.
How:   Honours a client-supplied X-Request-ID, otherwise generates one. The
       value is stored in a ContextVar so loggers and exception handlers
       can include it without threading it through every call.

Error bodies are just `{"error": ...}`, so the response header is the only
place a client can pick the ID up for a bug report.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags every request/response pair with a correlation ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars is plenty to correlate log lines within one process
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
