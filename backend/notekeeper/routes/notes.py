"""
NoteKeeper Backend — Notes Route Handlers
===========================================

What:  CRUD over /api/items.
How:   Every route depends on `require_identity`; handlers stay thin and
       delegate to NoteService.

    GET    /api/items        → 200 [Note]
    POST   /api/items        → 201 Note
    PUT    /api/items/{id}   → 200 Note
    DELETE /api/items/{id}   → 204 (empty)

The `{id}` path segment is taken as a plain string so that a non-numeric id
reaches the service and comes back as "Note not found" instead of a 422.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from notekeeper.dependencies import get_note_service, require_identity
from notekeeper.schemas.note import ErrorResponse, NoteContentRequest, NoteResponse
from notekeeper.services.note_service import NoteService

logger = logging.getLogger(__name__)

_AUTH_ERRORS = {
    401: {"description": "Access token required", "model": ErrorResponse},
    403: {"description": "Invalid token", "model": ErrorResponse},
}

router = APIRouter(
    prefix="/api",
    tags=["Notes"],
    dependencies=[Depends(require_identity)],
    responses=_AUTH_ERRORS,
)


@router.get(
    "/items",
    response_model=List[NoteResponse],
    response_model_exclude_none=True,
    summary="List all notes",
)
async def list_notes(
    note_service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    """Every note currently in the store, oldest first. No pagination."""
    return note_service.list_notes()


@router.post(
    "/items",
    response_model=NoteResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Content is required", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: Optional[NoteContentRequest] = None,
    note_service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    content = payload.content if payload else None
    return note_service.create_note(content)


@router.put(
    "/items/{note_id}",
    response_model=NoteResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Content is required", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace a note's content",
)
async def update_note(
    note_id: str,
    payload: Optional[NoteContentRequest] = None,
    note_service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    content = payload.content if payload else None
    return note_service.update_note(note_id, content)


@router.delete(
    "/items/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    note_service: NoteService = Depends(get_note_service),
) -> Response:
    note_service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
