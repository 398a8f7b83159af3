"""JSON file-based storage layer for the note manager.

Every operation is a full snapshot round-trip: load the whole document,
mutate it in memory, write the whole document back. Nothing is cached
between calls, so two overlapping read-modify-write cycles can lose an
update; callers that share the file across processes must lock externally.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from enum import Enum
from pathlib import Path

from pydantic import ValidationError

from .models import Note, NotesData

logger = logging.getLogger("note_manager.storage")


class StorageErrorKind(str, Enum):
    """Category of a storage failure."""

    IO_FAILURE = "io_failure"
    INVALID_FORMAT = "invalid_format"


class StorageError(Exception):
    """Raised when the notes file cannot be read, parsed or written."""

    def __init__(
        self, kind: StorageErrorKind, message: str, cause: BaseException | None = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.cause = cause


class NoteStorage:
    """Manages note persistence using a local JSON file."""

    def __init__(self, file_path: Path | str) -> None:
        self._path = Path(file_path)

    @property
    def path(self) -> Path:
        """Location of the backing JSON file."""
        return self._path

    @property
    def _tmp_path(self) -> Path:
        return self._path.with_name(self._path.name + ".tmp")

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Create the file (and parent directories) with no notes if missing."""
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create %s: %s", self._path.parent, exc)
            raise StorageError(
                StorageErrorKind.IO_FAILURE, "Failed to initialize notes storage", exc
            ) from exc
        self.save(NotesData())
        logger.info("Created empty notes file at %s", self._path)

    def load(self) -> NotesData:
        """Read and validate the whole document from disk."""
        self.initialize()
        try:
            content = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.error("Notes file %s is not valid UTF-8", self._path)
            raise StorageError(
                StorageErrorKind.INVALID_FORMAT, "Invalid JSON in notes file", exc
            ) from exc
        except OSError as exc:
            logger.error("Failed to read %s: %s", self._path, exc)
            raise StorageError(
                StorageErrorKind.IO_FAILURE, "Failed to load notes", exc
            ) from exc

        try:
            data = NotesData.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.error("Notes file %s has an invalid format: %s", self._path, exc)
            raise StorageError(
                StorageErrorKind.INVALID_FORMAT, "Invalid JSON in notes file", exc
            ) from exc

        logger.debug("Loaded %d notes from %s", len(data.notes), self._path)
        return data

    def save(self, data: NotesData) -> None:
        """Write the whole document, publishing it with an atomic rename."""
        content = json.dumps(data.model_dump(by_alias=True), indent=2, ensure_ascii=False)
        tmp_path = self._tmp_path
        try:
            with open(tmp_path, "w", encoding="utf-8") as fh:
                fh.write(content + "\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self._path)
        except OSError as exc:
            logger.error("Failed to save notes to %s: %s", self._path, exc)
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StorageError(
                StorageErrorKind.IO_FAILURE, "Failed to save notes", exc
            ) from exc
        logger.debug("Saved %d notes to %s", len(data.notes), self._path)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def get_all_notes(self) -> list[Note]:
        """Return every stored note in storage order."""
        return self.load().notes

    def add_note(self, note: Note) -> None:
        """Append a note to the end of the document."""
        data = self.load()
        data.notes.append(note)
        self.save(data)

    def update_note(self, note_id: str, note: Note) -> bool:
        """Replace the note with ``note_id`` in place. Returns False if absent."""
        data = self.load()
        for index, existing in enumerate(data.notes):
            if existing.id == note_id:
                data.notes[index] = note
                self.save(data)
                return True
        return False

    def delete_note(self, note_id: str) -> bool:
        """Remove the first note with ``note_id``. Returns False if absent."""
        data = self.load()
        for index, existing in enumerate(data.notes):
            if existing.id == note_id:
                del data.notes[index]
                self.save(data)
                return True
        return False
