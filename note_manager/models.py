"""Pydantic models for notes and the persisted notes document."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import parse_timestamp


class Note(BaseModel):
    """A single note with metadata.

    Timestamps are kept as the ISO-8601 strings they are persisted as.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="UUID4 identifier")
    title: str = Field(..., description="Note title")
    body: str = Field(..., description="Note body")
    created_at: str = Field(
        ..., alias="createdAt", description="ISO-8601 creation timestamp"
    )
    updated_at: str = Field(
        ..., alias="updatedAt", description="ISO-8601 last update timestamp"
    )
    tags: list[str] = Field(default_factory=list, description="List of tags")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        parse_timestamp(value)
        return value


class NotesData(BaseModel):
    """Container for all notes, used for JSON serialization."""

    notes: list[Note] = Field(default_factory=list)


class CreateNoteOptions(BaseModel):
    """Fields accepted when creating a note."""

    title: str
    body: str
    tags: list[str] | None = None


class UpdateNoteOptions(BaseModel):
    """Partial update; only fields that were explicitly set are applied."""

    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None

    def changes(self) -> dict:
        """Return the explicitly provided fields."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
