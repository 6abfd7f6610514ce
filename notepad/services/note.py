"""
Note Service.

Business logic layer for active notes. Every operation takes the owner id
resolved by the authorization guard and never trusts one from the client.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notepad.core.exceptions import NotFoundError
from notepad.models.archived_note import ArchivedNote
from notepad.models.note import DEFAULT_NOTE_TITLE, Note
from notepad.repositories.note import NoteRepository
from notepad.schemas.note import NoteCreate, NoteUpdate
from notepad.services.archive import NOTE_NOT_FOUND_MESSAGE, ArchiveService
from notepad.services.base import BaseService


def resolve_title(title: str | None) -> str:
    """Apply the title default: a missing, empty or blank title becomes 'Untitled Note'."""
    if title is None or not title.strip():
        return DEFAULT_NOTE_TITLE
    return title


class NoteService(BaseService):
    """
    Service for note business logic.

    Concurrent updates of the same note are last-write-wins.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)

    async def list_notes(self, owner_id: str) -> list[Note]:
        """List the owner's active notes, newest first."""
        return await self.repo.list_for_owner(owner_id)

    async def create_note(self, owner_id: str, data: NoteCreate) -> Note:
        """
        Create a new note.

        Args:
            owner_id: Authenticated user id
            data: Note creation data

        Returns:
            Created note
        """
        title = resolve_title(data.title)
        self._log_operation("Creating note", title_length=len(title))

        note = await self._execute_db_operation(
            "create_note",
            self.repo.create_for_owner(
                owner_id=owner_id,
                title=title,
                content=data.content or "",
            ),
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def update_note(self, owner_id: str, note_id: str, data: NoteUpdate) -> Note:
        """
        Replace title and content of a note.

        Raises:
            NotFoundError: If the note does not exist or belongs to someone else
        """
        self._log_operation("Updating note", note_id=note_id)

        note = await self._execute_db_operation(
            "update_note",
            self.repo.update_owned(
                owner_id,
                note_id,
                title=resolve_title(data.title),
                content=data.content,
            ),
        )
        if note is None:
            raise NotFoundError(NOTE_NOT_FOUND_MESSAGE)

        return note

    async def delete_note(self, owner_id: str, note_id: str) -> ArchivedNote:
        """
        Delete a note by moving it to the archive. Never a hard delete.

        Raises:
            NotFoundError: If the note does not exist or belongs to someone else
        """
        return await ArchiveService(self.session).archive_note(owner_id, note_id)
