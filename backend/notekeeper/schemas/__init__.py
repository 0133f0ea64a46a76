from notekeeper.schemas.auth import LoginRequest, LoginResponse, UserSummary
from notekeeper.schemas.note import (
    ErrorResponse,
    HealthResponse,
    NoteContentRequest,
    NoteResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "NoteContentRequest",
    "NoteResponse",
    "UserSummary",
]
