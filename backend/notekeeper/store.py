"""
NoteKeeper Backend — In-Memory Note Store
===========================================

What:  Owns the note collection and the next-id counter.
How:   A plain list (insertion order) guarded by a threading.Lock. Every read
       and mutation goes through a method that holds the lock, so id
       allocation stays atomic even when handlers run in a threadpool.
Who:   Constructed by the app factory and handed to NoteService.

Invariants:
    - Ids are allocated by post-incrementing `_next_id` and never reused,
      even after the note holding the highest id is deleted.
    - Callers receive copies; the only way to change a stored note is
      through `update()`.

Nothing here survives a restart. That is the whole persistence story.
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime
from typing import Iterable, List, Optional

from notekeeper.models.note import Note

logger = logging.getLogger(__name__)

WELCOME_NOTES = (
    "Welcome to your notes app!",
    "Click edit to modify this note",
)


class NoteStore:
    """Thread-safe, process-local note collection."""

    def __init__(self) -> None:
        self._notes: List[Note] = []
        self._next_id = 1
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls, now: datetime, contents: Iterable[str] = WELCOME_NOTES) -> "NoteStore":
        """Builds a store pre-populated with `contents`, ids starting at 1."""
        store = cls()
        for content in contents:
            store.add(content, now)
        logger.debug("Seeded note store with %d notes", len(store))
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def all(self) -> List[Note]:
        with self._lock:
            return [replace(note) for note in self._notes]

    def get(self, note_id: int) -> Optional[Note]:
        with self._lock:
            index = self._index_of(note_id)
            return None if index is None else replace(self._notes[index])

    def add(self, content: str, now: datetime) -> Note:
        with self._lock:
            note = Note(id=self._next_id, content=content, created_at=now)
            self._next_id += 1
            self._notes.append(note)
            return replace(note)

    def update(self, note_id: int, content: str, now: datetime) -> Optional[Note]:
        """Replaces content and stamps updated_at. Returns None if absent."""
        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                return None
            note = self._notes[index]
            note.content = content
            note.updated_at = now
            return replace(note)

    def remove(self, note_id: int) -> bool:
        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                return False
            del self._notes[index]
            return True

    def _index_of(self, note_id: int) -> Optional[int]:
        # Caller must hold the lock
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None
