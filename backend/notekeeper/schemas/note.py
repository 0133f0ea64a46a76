"""
NoteKeeper Backend — Note Request/Response Schemas
====================================================

What:  Pydantic models defining the notes API contract.
How:   Response fields are snake_case in Python and camelCase on the wire
       (`createdAt`, `updatedAt`) through an alias generator. FastAPI
       serializes response models by alias.

Request bodies are deliberately permissive (every field optional): a missing
`content` must produce the service's "Content is required" error, not
FastAPI's generic 422.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteContentRequest(BaseModel):
    """Body of POST /api/items and PUT /api/items/{id}."""

    content: Optional[str] = Field(default=None, description="Note text; trimmed before storage")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  A single note as returned by every notes endpoint.

    `updatedAt` is only present once the note has been edited; routes set
    `response_model_exclude_none` so the key is dropped rather than sent as null.
    """

    id: int = Field(description="Server-assigned, never reused")
    content: str = Field(description="Trimmed note text")
    created_at: datetime = Field(description="Creation time (UTC ISO 8601)")
    updated_at: Optional[datetime] = Field(
        default=None,
        description="Time of the last edit (UTC ISO 8601); absent if never edited",
    )

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class HealthResponse(BaseModel):
    """Liveness probe body for GET /api/health."""

    status: str = Field(default="OK")
    timestamp: datetime = Field(description="Server time (UTC ISO 8601)")


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"error": "Note not found"}
    """

    error: str = Field(description="Human-readable error description")
