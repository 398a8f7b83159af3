"""Unit tests for note_manager.display."""

from __future__ import annotations

import pytest

from note_manager import display
from note_manager.models import Note


def _note(**overrides) -> Note:
    fields = {
        "id": "abc",
        "title": "Title",
        "body": "Body",
        "created_at": "2024-12-02T14:30:00.000Z",
        "updated_at": "2024-12-03T09:15:00.000Z",
        "tags": ["work", "ideas"],
    }
    fields.update(overrides)
    return Note(**fields)


class TestFormatNoteList:
    def test_empty(self) -> None:
        assert display.format_note_list([], color=False) == "No notes found."

    def test_entries_and_total(self) -> None:
        text = display.format_note_list([_note(), _note(id="def", tags=[])], color=False)
        assert "ID: abc" in text
        assert "Title: Title" in text
        assert "Created: Dec 02, 2024 14:30" in text
        assert "Tags: [work, ideas]" in text
        assert text.count("Tags:") == 1
        assert "Total: 2 note(s)" in text

    def test_body_truncated(self) -> None:
        text = display.format_note_list([_note(body="x" * 150)], color=False)
        assert f"Body: {'x' * 97}..." in text

    def test_colour_codes(self) -> None:
        text = display.format_note_list([_note()], color=True)
        assert display.GREEN in text
        assert display.RESET in text


class TestFormatNote:
    def test_full_detail(self) -> None:
        text = display.format_note(_note(body="y" * 150), color=False)
        assert "y" * 150 in text
        assert "Created: Dec 02, 2024 14:30" in text
        assert "Updated: Dec 03, 2024 09:15" in text
        assert "Tags: work, ideas" in text

    def test_no_tags_line_when_untagged(self) -> None:
        assert "Tags:" not in display.format_note(_note(tags=[]), color=False)


class TestMessages:
    @pytest.fixture(autouse=True)
    def _no_color(self, monkeypatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

    def test_success(self, capsys) -> None:
        display.display_success("done")
        assert capsys.readouterr().out == "✓ done\n"

    def test_error_goes_to_stderr(self, capsys) -> None:
        display.display_error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "✗ Error: boom\n"

    def test_info(self, capsys) -> None:
        display.display_info("fyi")
        assert capsys.readouterr().out == "ℹ fyi\n"


class _Terminal:
    def isatty(self) -> bool:
        return True


class TestColorEnabled:
    def test_on_for_terminal(self, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setattr(display.sys, "stdout", _Terminal())
        assert display.color_enabled() is True

    def test_no_color_env_wins(self, monkeypatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setattr(display.sys, "stdout", _Terminal())
        assert display.color_enabled() is False

    def test_off_when_piped(self, monkeypatch, capsys) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        display.display_success("done")
        assert capsys.readouterr().out == "✓ done\n"
