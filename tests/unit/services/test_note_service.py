"""
Unit Tests for Note Service.

Tests the NoteService business logic with mocked dependencies.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notepad.core.exceptions import NotFoundError
from notepad.schemas.note import NoteCreate, NoteUpdate
from notepad.services.note import NoteService, resolve_title


class TestResolveTitle:
    """Tests for the title default."""

    @pytest.mark.parametrize("title", [None, "", " ", "\t\n"])
    def test_missing_or_blank_becomes_default(self, title):
        assert resolve_title(title) == "Untitled Note"

    def test_keeps_real_title_verbatim(self):
        assert resolve_title("  Shopping ") == "  Shopping "


class TestNoteServiceCreate:
    """Tests for note creation."""

    @pytest.fixture
    def service(self, mock_db_session):
        """Create NoteService with mocked session."""
        return NoteService(mock_db_session)

    @pytest.mark.asyncio
    async def test_create_note_success(self, service):
        """Should create a note for the owner with title and content."""
        mock_note = MagicMock()
        mock_note.id = "note-123"

        with patch.object(
            service.repo, "create_for_owner", AsyncMock(return_value=mock_note),
        ) as mock_create:
            result = await service.create_note(
                "user-1", NoteCreate(title="Test Note", content="Test content"),
            )

        mock_create.assert_awaited_once_with(
            owner_id="user-1",
            title="Test Note",
            content="Test content",
        )
        assert result.id == "note-123"

    @pytest.mark.asyncio
    async def test_create_note_defaults(self, service):
        """Should default the title and use empty content."""
        with patch.object(
            service.repo, "create_for_owner", AsyncMock(return_value=MagicMock()),
        ) as mock_create:
            await service.create_note("user-1", NoteCreate())

        mock_create.assert_awaited_once_with(
            owner_id="user-1",
            title="Untitled Note",
            content="",
        )


class TestNoteServiceList:
    """Tests for listing notes."""

    @pytest.mark.asyncio
    async def test_list_notes_scoped_to_owner(self, mock_db_session):
        service = NoteService(mock_db_session)
        notes = [MagicMock(), MagicMock()]

        with patch.object(service.repo, "list_for_owner", AsyncMock(return_value=notes)) as listing:
            result = await service.list_notes("user-1")

        listing.assert_awaited_once_with("user-1")
        assert result == notes


class TestNoteServiceUpdate:
    """Tests for note updates."""

    @pytest.fixture
    def service(self, mock_db_session):
        return NoteService(mock_db_session)

    @pytest.mark.asyncio
    async def test_update_note_success(self, service):
        updated = MagicMock()
        updated.title = "New"

        with patch.object(service.repo, "update_owned", AsyncMock(return_value=updated)) as update:
            result = await service.update_note(
                "user-1", "note-1", NoteUpdate(title="New", content="body"),
            )

        update.assert_awaited_once_with("user-1", "note-1", title="New", content="body")
        assert result.title == "New"

    @pytest.mark.asyncio
    async def test_update_note_blank_title(self, service):
        with patch.object(service.repo, "update_owned", AsyncMock(return_value=MagicMock())) as update:
            await service.update_note("user-1", "note-1", NoteUpdate(title="", content="x"))

        assert update.await_args.kwargs["title"] == "Untitled Note"

    @pytest.mark.asyncio
    async def test_update_note_not_found(self, service):
        """Should raise NotFoundError when the note is missing or not owned."""
        with patch.object(service.repo, "update_owned", AsyncMock(return_value=None)):
            with pytest.raises(NotFoundError, match="Note not found or not authorized"):
                await service.update_note("user-1", "nope", NoteUpdate(title="a", content="b"))


class TestNoteServiceDelete:
    """Deleting a note archives it."""

    @pytest.mark.asyncio
    async def test_delete_note_delegates_to_archive(self, mock_db_session):
        service = NoteService(mock_db_session)
        archived = MagicMock()

        with patch(
            "notepad.services.note.ArchiveService.archive_note",
            AsyncMock(return_value=archived),
        ) as archive_note:
            result = await service.delete_note("user-1", "note-1")

        archive_note.assert_awaited_once_with("user-1", "note-1")
        assert result is archived
