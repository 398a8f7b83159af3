"""Unit tests for note_manager.utils."""

from __future__ import annotations

import re
import uuid
from datetime import UTC, datetime

from note_manager.utils import (
    current_timestamp,
    format_timestamp,
    generate_id,
    parse_tags,
    parse_timestamp,
    truncate,
)

ISO_MS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestGenerateId:
    def test_canonical_uuid4(self) -> None:
        value = generate_id()
        assert len(value) == 36
        assert uuid.UUID(value).version == 4
        assert str(uuid.UUID(value)) == value

    def test_unique(self) -> None:
        assert len({generate_id() for _ in range(500)}) == 500


class TestTimestamps:
    def test_current_timestamp_format(self) -> None:
        assert ISO_MS.match(current_timestamp())

    def test_current_timestamp_is_utc_now(self) -> None:
        parsed = parse_timestamp(current_timestamp())
        assert parsed.tzinfo is not None
        assert abs((datetime.now(UTC) - parsed).total_seconds()) < 5

    def test_parse_timestamp_z_suffix(self) -> None:
        parsed = parse_timestamp("2024-12-02T14:30:00.123Z")
        assert parsed == datetime(2024, 12, 2, 14, 30, 0, 123000, tzinfo=UTC)

    def test_parse_timestamp_naive_is_utc(self) -> None:
        assert parse_timestamp("2024-12-02T14:30:00").tzinfo == UTC

    def test_format_timestamp(self) -> None:
        assert format_timestamp("2024-12-02T14:30:00.123Z") == "Dec 02, 2024 14:30"

    def test_format_timestamp_fallback(self) -> None:
        assert format_timestamp("not a date") == "not a date"


class TestTruncate:
    def test_short_text_unchanged(self) -> None:
        assert truncate("hello", 10) == "hello"

    def test_exact_length_unchanged(self) -> None:
        assert truncate("a" * 10, 10) == "a" * 10

    def test_long_text_ellipsis(self) -> None:
        assert truncate("a" * 20, 10) == "aaaaaaa..."
        assert len(truncate("a" * 20, 10)) == 10


class TestParseTags:
    def test_none_and_empty(self) -> None:
        assert parse_tags(None) == []
        assert parse_tags("") == []

    def test_trims_and_drops_blanks(self) -> None:
        assert parse_tags(" work, ideas ,, ,todo") == ["work", "ideas", "todo"]

    def test_keeps_order_and_duplicates(self) -> None:
        assert parse_tags("b,a,b") == ["b", "a", "b"]
