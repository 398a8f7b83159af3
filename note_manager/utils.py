"""Small helpers shared by the core, the CLI and the MCP server."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4


def generate_id() -> str:
    """Return a fresh UUID4 in canonical 36-character form."""
    return str(uuid4())


def current_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with millisecond precision.

    The ``+00:00`` offset is written as ``Z`` so persisted values keep one
    stable shape, e.g. ``2024-12-02T14:30:00.123Z``.
    """
    now = datetime.now(UTC).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse a persisted timestamp into an aware ``datetime``."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(value: str) -> str:
    """Format a timestamp for display (``Dec 02, 2024 14:30``).

    Falls back to the raw value when it cannot be parsed.
    """
    try:
        return parse_timestamp(value).strftime("%b %d, %Y %H:%M")
    except (TypeError, ValueError):
        return value


def truncate(text: str, max_length: int) -> str:
    """Shorten ``text`` to ``max_length`` characters, ending with ``...``."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def parse_tags(value: str | None) -> list[str]:
    """Split a comma-separated tag string into trimmed, non-empty tags."""
    if not value:
        return []
    return [tag.strip() for tag in value.split(",") if tag.strip()]
