"""
Archive Service.

Moves notes from the active set to the archive and purges archived notes.

The archive transition is two writes (delete the note, insert the copy)
inside the caller's single transaction, so the request either commits
both or neither. The note row is locked first; the delete must remove
exactly one row, otherwise a concurrent archive already took it and
this request fails with NotFoundError before inserting anything.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notepad.core.exceptions import NotFoundError
from notepad.models.archived_note import ArchivedNote
from notepad.repositories.archived_note import ArchivedNoteRepository
from notepad.repositories.note import NoteRepository
from notepad.services.base import BaseService

NOTE_NOT_FOUND_MESSAGE = "Note not found or not authorized"
ARCHIVED_NOTE_NOT_FOUND_MESSAGE = "Archived note not found or not authorized"


class ArchiveService(BaseService):
    """Service for the Active -> Archived -> Purged lifecycle."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.notes = NoteRepository(session)
        self.archive = ArchivedNoteRepository(session)

    async def archive_note(self, owner_id: str, note_id: str) -> ArchivedNote:
        """
        Move an active note into the archive.

        Args:
            owner_id: Authenticated user id
            note_id: Active note id

        Returns:
            The new archived copy (with its own id)

        Raises:
            NotFoundError: If the note does not exist, belongs to someone
                else, or was archived by a concurrent request
        """
        self._log_operation("Archiving note", note_id=note_id)

        note = await self._execute_db_operation(
            "archive_note.lock",
            self.notes.get_owned(owner_id, note_id, for_update=True),
        )
        if note is None:
            raise NotFoundError(NOTE_NOT_FOUND_MESSAGE)

        deleted = await self._execute_db_operation(
            "archive_note.remove",
            self.notes.delete_owned(owner_id, note_id),
        )
        if not deleted:
            self._log_debug("Archive lost to concurrent request", note_id=note_id)
            raise NotFoundError(NOTE_NOT_FOUND_MESSAGE)

        archived = await self._execute_db_operation(
            "archive_note.copy",
            self.archive.create_from_note(note),
        )
        # The row is gone; keep the stale instance out of the unit of work
        self.session.expunge(note)

        self._log_debug("Note archived", note_id=note_id, archived_note_id=archived.id)
        return archived

    async def list_archived(self, owner_id: str) -> list[ArchivedNote]:
        """List the owner's archived notes, most recently archived first."""
        return await self.archive.list_for_owner(owner_id)

    async def purge(self, owner_id: str, archived_note_id: str) -> None:
        """
        Permanently delete an archived note. There is no recovery.

        Raises:
            NotFoundError: If the archived note does not exist or belongs to someone else
        """
        self._log_operation("Purging archived note", archived_note_id=archived_note_id)

        deleted = await self._execute_db_operation(
            "purge_archived_note",
            self.archive.delete_owned(owner_id, archived_note_id),
        )
        if not deleted:
            raise NotFoundError(ARCHIVED_NOTE_NOT_FOUND_MESSAGE)
