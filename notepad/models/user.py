"""
User Model.

Registered account. Owns notes and archived notes; deleting a user
deletes both.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notepad.core.utils import utc_now
from notepad.models.base import Base, UUIDMixin

if TYPE_CHECKING:
    from notepad.models.archived_note import ArchivedNote
    from notepad.models.note import Note


class User(UUIDMixin, Base):
    """User database model."""

    __tablename__ = "notepad_users"

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )

    notes: Mapped[list["Note"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    archived_notes: Mapped[list["ArchivedNote"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r})>"
