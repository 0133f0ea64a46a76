"""
NoteKeeper Backend — Authentication Schemas
=============================================

Login input is optional field-by-field so that a missing username or
password reaches AuthService and yields "Username and password required".
"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)


class UserSummary(BaseModel):
    """Public view of a user. Never includes the password."""

    id: int
    username: str


class LoginResponse(BaseModel):
    token: str = Field(description="Signed bearer token, valid for 24 hours")
    user: UserSummary
