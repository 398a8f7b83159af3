"""Shared fixtures: storage and manager backed by a temp JSON file."""

from __future__ import annotations

from pathlib import Path

import pytest

from note_manager.notes import NoteManager
from note_manager.storage import NoteStorage


@pytest.fixture()
def notes_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "notes.json"


@pytest.fixture()
def storage(notes_path: Path) -> NoteStorage:
    """Return a NoteStorage backed by a temp JSON file."""
    return NoteStorage(notes_path)


@pytest.fixture()
def manager(storage: NoteStorage) -> NoteManager:
    return NoteManager(storage)


@pytest.fixture()
def clock():
    """Timestamps one second apart, oldest first."""
    return [f"2024-12-02T14:30:{s:02d}.000Z" for s in range(60)]
