"""
Archive API Endpoints.

Listing and permanent deletion of the caller's archived notes.
"""

from fastapi import APIRouter, Depends

from notepad.core.dependencies import CurrentUserId, DbSession, get_current_user_id
from notepad.schemas.base import MessageResponse
from notepad.schemas.note import ArchivedNoteResponse
from notepad.services.archive import ArchiveService

router = APIRouter(dependencies=[Depends(get_current_user_id)])


@router.get(
    "",
    response_model=list[ArchivedNoteResponse],
    summary="List archived notes",
    description="Get the caller's archived notes, most recently archived first.",
)
async def list_archived_notes(
    user_id: CurrentUserId,
    db: DbSession,
) -> list[ArchivedNoteResponse]:
    """List archived notes."""
    service = ArchiveService(db)
    archived = await service.list_archived(user_id)
    return [ArchivedNoteResponse.model_validate(note) for note in archived]


@router.delete(
    "/{archived_note_id}",
    response_model=MessageResponse,
    summary="Purge an archived note",
    description="Permanently delete an archived note. There is no recovery.",
)
async def purge_archived_note(
    user_id: CurrentUserId,
    archived_note_id: str,
    db: DbSession,
) -> MessageResponse:
    """Permanently delete an archived note."""
    service = ArchiveService(db)
    await service.purge(user_id, archived_note_id)
    return MessageResponse(message="Archived note permanently deleted")
