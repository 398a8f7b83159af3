"""Console formatting for notes."""

from __future__ import annotations

import os
import sys

from .models import Note
from .utils import format_timestamp, truncate

# ---------------------------------------------------------------------------
# ANSI colours
# ---------------------------------------------------------------------------
BOLD = "\033[1m"
RESET = "\033[0m"
CYAN = "\033[96m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
BLUE = "\033[94m"
GRAY = "\033[90m"
WHITE = "\033[97m"

BODY_PREVIEW_LENGTH = 100


def color_enabled() -> bool:
    """Colour is on for a terminal stdout unless ``NO_COLOR`` is set."""
    return "NO_COLOR" not in os.environ and sys.stdout.isatty()


def _paint(text: str, *codes: str, color: bool) -> str:
    if not color:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def format_note_list(notes: list[Note], color: bool = True) -> str:
    """Render notes as a list with truncated bodies and a total line."""
    if not notes:
        return _paint("No notes found.", YELLOW, color=color)

    lines = [_paint("\nNotes:\n", BOLD, color=color)]
    for note in notes:
        lines.append(_paint(f"ID: {note.id}", GREEN, color=color))
        lines.append(_paint(f"Title: {note.title}", BOLD, color=color))
        lines.append(f"Body: {truncate(note.body, BODY_PREVIEW_LENGTH)}")
        lines.append(f"Created: {format_timestamp(note.created_at)}")
        if note.tags:
            tags = _paint(f"[{', '.join(note.tags)}]", CYAN, color=color)
            lines.append(f"Tags: {tags}")
        lines.append("")
    lines.append(_paint(f"Total: {len(notes)} note(s)\n", GRAY, color=color))
    return "\n".join(lines)


def format_note(note: Note, color: bool = True) -> str:
    """Render one note with its full body and both timestamps."""
    lines = [
        "",
        _paint(f"ID: {note.id}", GREEN, color=color),
        _paint(f"Title: {note.title}", BOLD, WHITE, color=color),
        "",
        note.body,
        "",
        _paint(f"Created: {format_timestamp(note.created_at)}", GRAY, color=color),
        _paint(f"Updated: {format_timestamp(note.updated_at)}", GRAY, color=color),
    ]
    if note.tags:
        lines.append(_paint(f"Tags: {', '.join(note.tags)}", CYAN, color=color))
    lines.append("")
    return "\n".join(lines)


def display_note_list(notes: list[Note]) -> None:
    """Print a list of notes."""
    print(format_note_list(notes, color=color_enabled()))


def display_note(note: Note) -> None:
    """Print a single note."""
    print(format_note(note, color=color_enabled()))


def display_success(msg: str) -> None:
    """Print a success line."""
    print(_paint(f"✓ {msg}", GREEN, color=color_enabled()))


def display_error(msg: str) -> None:
    """Print an error line to stderr."""
    print(_paint(f"✗ Error: {msg}", RED, color=color_enabled()), file=sys.stderr)


def display_info(msg: str) -> None:
    """Print an info line."""
    print(_paint(f"ℹ {msg}", BLUE, color=color_enabled()))
