"""
Note Schemas.

Pydantic schemas for note and archived note request/response validation.
Response fields are serialized in camelCase.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

TITLE_MAX_LENGTH = 255


class NoteCreate(BaseModel):
    """Schema for creating a new note. Both fields are optional."""

    title: str | None = Field(
        default=None,
        max_length=TITLE_MAX_LENGTH,
        description="Note title; blank or missing becomes 'Untitled Note'",
        examples=["Shopping"],
    )
    content: str | None = Field(
        default=None,
        description="Note content",
        examples=["milk"],
    )


class NoteUpdate(BaseModel):
    """Schema for replacing the title and content of a note."""

    title: str = Field(
        ...,
        max_length=TITLE_MAX_LENGTH,
        description="Note title; blank becomes 'Untitled Note'",
    )
    content: str = Field(
        ...,
        description="Note content",
    )


class NoteResponse(BaseModel):
    """Schema for an active note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)


class ArchivedNoteResponse(BaseModel):
    """Schema for an archived note in API responses."""

    id: str = Field(description="Archived note identifier, distinct from the original note")
    title: str
    content: str
    original_created_at: datetime | None = Field(
        serialization_alias="createdAt",
        description="Creation time of the note this copy was archived from",
    )
    archived_at: datetime = Field(serialization_alias="archivedAt")

    model_config = ConfigDict(from_attributes=True)
