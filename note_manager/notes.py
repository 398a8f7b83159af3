"""Note lifecycle on top of :class:`NoteStorage`.

The manager keeps no state of its own. Every call takes a fresh snapshot
from storage, computes on it and, for writes, hands the result back to
storage.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import CreateNoteOptions, Note, UpdateNoteOptions
from .storage import NoteStorage
from .utils import current_timestamp, generate_id, parse_timestamp

logger = logging.getLogger("note_manager.notes")


def _newest_first(notes: Iterable[Note]) -> list[Note]:
    return sorted(notes, key=lambda n: parse_timestamp(n.created_at), reverse=True)


class NoteManager:
    """Create, query, update and delete notes."""

    def __init__(self, storage: NoteStorage) -> None:
        self._storage = storage

    def create_note(self, options: CreateNoteOptions) -> Note:
        """Create and persist a new note."""
        now = current_timestamp()
        note = Note(
            id=generate_id(),
            title=options.title,
            body=options.body,
            created_at=now,
            updated_at=now,
            tags=list(options.tags or []),
        )
        self._storage.add_note(note)
        logger.info("Created note %s: '%s'", note.id, note.title)
        return note

    def list_notes(self) -> list[Note]:
        """Return all notes, most recently created first."""
        return _newest_first(self._storage.get_all_notes())

    def get_note(self, note_id: str) -> Note | None:
        """Return the note with ``note_id``, or None."""
        for note in self._storage.get_all_notes():
            if note.id == note_id:
                return note
        return None

    def search_notes(self, query: str) -> list[Note]:
        """Return notes whose title or body contains ``query`` (case-insensitive)."""
        q = query.lower()
        return _newest_first(
            n
            for n in self._storage.get_all_notes()
            if q in n.title.lower() or q in n.body.lower()
        )

    def update_note(self, note_id: str, updates: UpdateNoteOptions) -> Note | None:
        """Apply the provided fields to an existing note.

        ``id`` and ``created_at`` never change; ``updated_at`` is always
        refreshed. Returns None when the note does not exist or storage
        reports that nothing was replaced.
        """
        note = self.get_note(note_id)
        if note is None:
            return None

        updated = note.model_copy(
            update={**updates.changes(), "updated_at": current_timestamp()}
        )
        if not self._storage.update_note(note_id, updated):
            logger.warning("Note %s disappeared before it could be updated", note_id)
            return None
        logger.info("Updated note %s", note_id)
        return updated

    def delete_note(self, note_id: str) -> bool:
        """Delete a note. Returns whether anything was removed."""
        deleted = self._storage.delete_note(note_id)
        if deleted:
            logger.info("Deleted note %s", note_id)
        return deleted

    def filter_notes_by_tags(self, tags: list[str]) -> list[Note]:
        """Return notes carrying every tag in ``tags`` (exact match).

        An empty ``tags`` list matches all notes.
        """
        notes = self._storage.get_all_notes()
        if not tags:
            return _newest_first(notes)
        return _newest_first(n for n in notes if all(t in n.tags for t in tags))

    def get_all_tags(self) -> list[str]:
        """Return every distinct tag in ascending order."""
        tags: set[str] = set()
        for note in self._storage.get_all_notes():
            tags.update(note.tags)
        return sorted(tags)
