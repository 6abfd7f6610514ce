# Importing every model here registers it on Base.metadata
from notepad.models.archived_note import ArchivedNote
from notepad.models.base import Base
from notepad.models.note import DEFAULT_NOTE_TITLE, Note
from notepad.models.user import User

__all__ = [
    "ArchivedNote",
    "Base",
    "DEFAULT_NOTE_TITLE",
    "Note",
    "User",
]
