"""
NoteKeeper Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions, each bound to an HTTP status code.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers (registered in main.py) turn them into
       `{"error": message}` JSON responses; the context is only logged.
Who:   Raised by services and the auth dependency; caught by global handlers.

Exception Hierarchy:
    NoteKeeperError (base)       → 500
    ├── ValidationError          → 400 Bad Request
    ├── AuthenticationError      → 401 Unauthorized (bad credentials)
    ├── MissingTokenError        → 401 Unauthorized (no bearer token)
    ├── InvalidTokenError        → 403 Forbidden (bad signature / expired)
    ├── NotFoundError            → 404 Not Found
    └── InternalError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (returned as the `error` field)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500
    default_message: str = "Something went wrong!"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteKeeperError):
    """
    Raised when client input fails validation.

    When:  Missing login fields, empty note content, malformed request body.
    HTTP:  400 Bad Request
    """

    status_code = 400
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(NoteKeeperError):
    """Username/password pair did not match any known user. HTTP 401."""

    status_code = 401
    default_message = "Invalid credentials"


class MissingTokenError(NoteKeeperError):
    """
    No usable bearer token on the request.

    When:  Authorization header absent, not using the `Bearer` scheme,
           or carrying an empty token.
    HTTP:  401 Unauthorized
    """

    status_code = 401
    default_message = "Access token required"


class InvalidTokenError(NoteKeeperError):
    """
    A bearer token was supplied but could not be trusted.

    When:  Signature mismatch, malformed token, missing claims, or expired.
    HTTP:  403 Forbidden

    The reason is kept in `context` for the logs; the client only ever
    sees "Invalid token".
    """

    status_code = 403
    default_message = "Invalid token"


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested resource does not exist.

    When:  PUT or DELETE on a note id that is not in the store.
    HTTP:  404 Not Found
    """

    status_code = 404
    default_message = "Note not found"

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource.capitalize()} not found", context=ctx)


class InternalError(NoteKeeperError):
    """Unexpected failure inside a handler. HTTP 500, generic message."""

    status_code = 500
    default_message = "Something went wrong!"
