"""
Archived Note Model.

Copy of a note taken at archive time. Has its own id and no link back
to the note it came from.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notepad.core.utils import utc_now
from notepad.models.base import Base, UUIDMixin
from notepad.models.note import DEFAULT_NOTE_TITLE

if TYPE_CHECKING:
    from notepad.models.user import User


class ArchivedNote(UUIDMixin, Base):
    """Archived note database model."""

    __tablename__ = "archived_notes"

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
    original_created_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        nullable=True,
    )
    archived_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )

    owner: Mapped["User"] = relationship(back_populates="archived_notes")

    def __repr__(self) -> str:
        return f"<ArchivedNote(id={self.id}, title={self.title!r})>"
