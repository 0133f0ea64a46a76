# Middleware package init
"""
NoteKeeper Backend — Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID available to everything downstream
    2. Logging: access log line tagged with that ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""

from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import RequestIDMiddleware, request_id_var

__all__ = ["RequestIDMiddleware", "RequestLoggingMiddleware", "request_id_var"]
