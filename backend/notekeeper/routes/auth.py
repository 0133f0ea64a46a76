"""
NoteKeeper Backend — Login Route
==================================

POST /api/login — exchange a username/password pair for a bearer token.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from notekeeper.dependencies import get_auth_service
from notekeeper.schemas.auth import LoginRequest, LoginResponse
from notekeeper.schemas.note import ErrorResponse
from notekeeper.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Username or password missing", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Log in and obtain an access token",
)
async def login(
    payload: Optional[LoginRequest] = None,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Returns `{token, user: {id, username}}`. The token is valid for 24 hours
    and must be sent as `Authorization: Bearer <token>` on every notes call.
    """
    payload = payload or LoginRequest()
    return auth_service.login(payload.username, payload.password)
