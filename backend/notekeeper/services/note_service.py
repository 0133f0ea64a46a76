"""
NoteKeeper Backend — Note Service (Business Logic)
====================================================

What:  List, create, update and delete notes held in a NoteStore.
Why:   Keeps the validation rules out of the route handlers so they can be
       exercised without HTTP.
Who:   Called by the /api/items route handlers.

Validation Order:
    Every mutation validates its input before touching the store, so a
    rejected request never leaves a partial write behind. Update checks the
    content first and the id second: an empty body on an unknown id is a
    400, not a 404.

Ids in the path arrive as strings and must be plain ASCII digits. Anything
else (including "1abc", which a lenient prefix parse would read as 1) cannot
name a note, so it is reported as "Note not found". So is a digit string too
long to convert.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.schemas.note import NoteResponse
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes():  Full collection, insertion order
        - create_note(): Validate + trim + append
        - update_note(): Validate + replace content + stamp updated_at
        - delete_note(): Remove by id
    """

    def __init__(self, store: NoteStore, clock: Callable[[], datetime] = _utc_now):
        self.store = store
        self._clock = clock

    def list_notes(self) -> List[NoteResponse]:
        return [NoteResponse.model_validate(note) for note in self.store.all()]

    def create_note(self, content: Optional[str]) -> NoteResponse:
        """
        Raises:
            ValidationError: content missing or blank after trimming (→ 400)
        """
        text = self._clean_content(content)
        note = self.store.add(text, now=self._clock())
        logger.info("Note %d created (%d chars)", note.id, len(text))
        return NoteResponse.model_validate(note)

    def update_note(self, note_id: Union[int, str], content: Optional[str]) -> NoteResponse:
        """
        Raises:
            ValidationError: content missing or blank after trimming (→ 400)
            NotFoundError: no note with that id (→ 404)
        """
        text = self._clean_content(content)
        resolved = self._resolve_id(note_id)

        note = self.store.update(resolved, text, now=self._clock())
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))

        logger.info("Note %d updated (%d chars)", note.id, len(text))
        return NoteResponse.model_validate(note)

    def delete_note(self, note_id: Union[int, str]) -> None:
        """
        Raises:
            NotFoundError: no note with that id (→ 404)
        """
        resolved = self._resolve_id(note_id)
        if not self.store.remove(resolved):
            raise NotFoundError(resource="note", resource_id=str(note_id))
        logger.info("Note %d deleted", resolved)

    @staticmethod
    def _clean_content(content: Optional[str]) -> str:
        text = content.strip() if content is not None else ""
        if not text:
            raise ValidationError(message="Content is required", field="content")
        return text

    @staticmethod
    def _resolve_id(note_id: Union[int, str]) -> int:
        if isinstance(note_id, int):
            return note_id
        # Ids are positive, so anything but plain ASCII digits misses
        if not (note_id.isascii() and note_id.isdigit()):
            raise NotFoundError(resource="note", resource_id=note_id)
        try:
            return int(note_id)
        except ValueError:
            # Past the interpreter's int-string digit limit; no such note exists
            raise NotFoundError(resource="note", resource_id=note_id[:32])
