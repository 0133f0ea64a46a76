"""
NoteKeeper Backend — FastAPI Dependencies
===========================================

What:  Accessors for the per-app services and the bearer-token guard.
How:   The app factory stores one AuthService and one NoteService on
       `app.state`; these functions hand them to route handlers through
       FastAPI's dependency injection.

`require_identity` raises MissingTokenError / InvalidTokenError; the global
exception handlers turn those into 401 / 403. Because it runs as a route
dependency it is resolved before body fields are validated (a body that is
not JSON at all is still rejected earlier, while FastAPI reads it).
"""

from typing import Optional

from fastapi import Depends, Header, Request

from notekeeper.models.user import Identity
from notekeeper.security import extract_bearer_token
from notekeeper.services.auth_service import AuthService
from notekeeper.services.note_service import NoteService


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service


async def require_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    """Verify the bearer token and attach the caller to `request.state.user`."""
    token = extract_bearer_token(authorization)
    identity = auth_service.verify(token)
    request.state.user = identity
    return identity
