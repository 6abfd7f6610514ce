"""
Note Model.

An active note. Archiving removes the row and leaves an independent
ArchivedNote copy behind.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notepad.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from notepad.models.user import User

DEFAULT_NOTE_TITLE = "Untitled Note"


class Note(UUIDMixin, TimestampMixin, Base):
    """Note database model."""

    __tablename__ = "notes"

    owner_id: Mapped[str] = mapped_column(
        ForeignKey("notepad_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=DEFAULT_NOTE_TITLE,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    owner: Mapped["User"] = relationship(back_populates="notes")

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
