"""
Notes API Endpoints.

REST API endpoints for the caller's active notes. Every route sits behind
the authorization guard.
"""

from fastapi import APIRouter, Depends

from notepad.core.dependencies import CurrentUserId, DbSession, get_current_user_id
from notepad.schemas.base import MessageResponse
from notepad.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from notepad.services.note import NoteService

router = APIRouter(dependencies=[Depends(get_current_user_id)])


@router.get(
    "",
    response_model=list[NoteResponse],
    summary="List notes",
    description="Get the caller's active notes, newest first.",
)
async def list_notes(user_id: CurrentUserId, db: DbSession) -> list[NoteResponse]:
    """List notes."""
    service = NoteService(db)
    notes = await service.list_notes(user_id)
    return [NoteResponse.model_validate(note) for note in notes]


@router.post(
    "",
    response_model=NoteResponse,
    status_code=201,
    summary="Create a note",
    description="Create a note. A missing or blank title becomes 'Untitled Note'.",
)
async def create_note(
    user_id: CurrentUserId,
    data: NoteCreate,
    db: DbSession,
) -> NoteResponse:
    """Create a new note."""
    service = NoteService(db)
    note = await service.create_note(user_id, data)
    return NoteResponse.model_validate(note)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Update a note",
    description="Replace title and content of a note owned by the caller.",
)
async def update_note(
    user_id: CurrentUserId,
    note_id: str,
    data: NoteUpdate,
    db: DbSession,
) -> NoteResponse:
    """Update a note."""
    service = NoteService(db)
    note = await service.update_note(user_id, note_id, data)
    return NoteResponse.model_validate(note)


@router.delete(
    "/{note_id}",
    response_model=MessageResponse,
    summary="Delete a note",
    description="Move a note to the archive. Notes are never hard-deleted here.",
)
async def delete_note(
    user_id: CurrentUserId,
    note_id: str,
    db: DbSession,
) -> MessageResponse:
    """Archive a note."""
    service = NoteService(db)
    await service.delete_note(user_id, note_id)
    return MessageResponse(message="Note archived")
