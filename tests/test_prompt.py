"""Tests for pi.lineedit.prompt.read_line."""

from __future__ import annotations

import logging

import pytest

from pi.lineedit.keycodes import Key
from pi.lineedit.line_editor import InvalidCursorPosition
from pi.lineedit.prompt import read_line


class TestReadLineKeyEvents:
    """read_line feeds decoded keys until Enter."""

    def test_returns_submitted_text(self) -> None:
        events = [Key.char("H"), Key.char("e"), Key.char("j"), Key.enter]
        assert read_line(events) == "Hej"

    def test_empty_submission(self) -> None:
        assert read_line([Key.enter]) == ""

    def test_stops_consuming_after_enter(self) -> None:
        events = iter([Key.char("a"), Key.enter, Key.char("b"), Key.enter])
        assert read_line(events) == "a"
        assert list(events) == [Key.char("b"), Key.enter]

    def test_placeholder_and_cursor(self) -> None:
        events = [Key.char("H"), Key.char("e"), Key.char("j"), Key.enter]
        assert read_line(events, placeholder="test", cursor=2) == "teHejst"

    def test_invalid_cursor_propagates(self) -> None:
        with pytest.raises(InvalidCursorPosition):
            read_line([Key.enter], placeholder="test", cursor=9)


class TestReadLineRawInput:
    """Raw string chunks are decoded before being fed."""

    def test_raw_chunks(self) -> None:
        assert read_line(["Hej", "\x1b[D", "\x7f", "\r"]) == "Hj"

    def test_mixed_events(self) -> None:
        assert read_line(["ab", Key.left, "X", Key.enter]) == "aXb"

    def test_keys_after_enter_in_same_chunk_are_dropped(self) -> None:
        assert read_line(["ab\rc"]) == "ab"

    def test_pasted_commands_return_first_line(self) -> None:
        assert read_line(["ls\rpwd\r"]) == "ls"

    def test_later_events_not_consumed_after_chunk_submit(self) -> None:
        events = iter(["a\rb", "c"])
        assert read_line(events) == "a"
        assert list(events) == ["c"]


class TestReadLineUnfinished:
    """Running out of events before Enter yields None."""

    def test_no_events(self) -> None:
        assert read_line([]) is None

    def test_no_enter(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pi.lineedit.prompt"):
            assert read_line(["abc"]) is None
        assert any("Input ended before submission" in r.getMessage() for r in caplog.records)
