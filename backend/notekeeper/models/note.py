"""
NoteKeeper Backend — Note Domain Model
========================================

What:  In-memory representation of a single note.
Who:   Created and mutated only by NoteStore; read by NoteService and the
       response schemas (via `from_attributes`).

Lifecycle:
    1. Created by POST /api/items (updated_at = None)
    2. Content replaced in place by PUT /api/items/{id} (updated_at set)
    3. Removed by DELETE /api/items/{id}; its id is never handed out again
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Note:
    id: int
    content: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    def __repr__(self) -> str:
        preview = self.content[:30] + "..." if len(self.content) > 30 else self.content
        return f"<Note(id={self.id}, content='{preview}')>"
