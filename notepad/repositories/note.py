"""
Note Repository.

Data access layer for active notes. Every method is scoped to the
owning user.
"""

from sqlalchemy import select

from notepad.core.utils import utc_now
from notepad.models.note import Note
from notepad.repositories.base import OwnedRepository


class NoteRepository(OwnedRepository[Note]):
    """Repository for Note model."""

    model = Note

    async def list_for_owner(self, owner_id: str) -> list[Note]:
        """
        Get all active notes of a user, newest first.

        Args:
            owner_id: Authenticated user id

        Returns:
            List of notes ordered by created_at descending
        """
        result = await self.session.execute(
            select(Note)
            .where(Note.owner_id == owner_id)
            .order_by(Note.created_at.desc(), Note.id.desc())
        )
        return list(result.scalars().all())

    async def create_for_owner(self, owner_id: str, title: str, content: str) -> Note:
        """Insert a note whose created_at and updated_at are the same instant."""
        now = utc_now()
        return await self.create(
            owner_id=owner_id,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )

    async def update_owned(
        self,
        owner_id: str,
        note_id: str,
        title: str,
        content: str,
    ) -> Note | None:
        """
        Overwrite title and content of an owned note and bump updated_at.

        Returns:
            The refreshed note, or None when missing or not owned
        """
        note = await self.get_owned(owner_id, note_id)
        if note is None:
            return None

        note.title = title
        note.content = content
        note.updated_at = utc_now()

        await self.session.flush()
        await self.session.refresh(note)
        return note
