"""
Archived Note Repository.

Data access layer for archived notes. Every method is scoped to the
owning user.
"""

from sqlalchemy import select

from notepad.core.utils import utc_now
from notepad.models.archived_note import ArchivedNote
from notepad.models.note import Note
from notepad.repositories.base import OwnedRepository


class ArchivedNoteRepository(OwnedRepository[ArchivedNote]):
    """Repository for ArchivedNote model."""

    model = ArchivedNote

    async def list_for_owner(self, owner_id: str) -> list[ArchivedNote]:
        """Get all archived notes of a user, most recently archived first."""
        result = await self.session.execute(
            select(ArchivedNote)
            .where(ArchivedNote.owner_id == owner_id)
            .order_by(ArchivedNote.archived_at.desc(), ArchivedNote.id.desc())
        )
        return list(result.scalars().all())

    async def create_from_note(self, note: Note) -> ArchivedNote:
        """Insert an independent copy of `note` stamped with the current time."""
        return await self.create(
            owner_id=note.owner_id,
            title=note.title,
            content=note.content,
            original_created_at=note.created_at,
            archived_at=utc_now(),
        )
