"""LineEditor - single-line text buffer driven by key codes."""

from __future__ import annotations

import logging
from typing import Iterable

from pi.lineedit.keycodes import KeyCode
from pi.lineedit.keys import parse_key_code, split_sequences

logger = logging.getLogger(__name__)


class InvalidCursorPosition(ValueError):
    """Raised when a placeholder cursor lies outside the placeholder text."""

    def __init__(self, cursor: int, length: int) -> None:
        super().__init__(f"Cursor position {cursor} is outside [0, {length}]")
        self.cursor = cursor
        self.length = length


class LineEditor:
    """Editable line of text with a cursor and a submitted flag.

    Feed it key codes with ``next_key``; read the line back with
    ``result`` and stop once ``is_done`` turns true. Every key is accepted:
    edits that cannot apply at the current cursor are no-ops.

    The text is a ``str`` indexed by code point, so each insertion or
    removal copies the line.
    """

    def __init__(self, placeholder: str = "", cursor: int | None = None) -> None:
        if cursor is None:
            cursor = len(placeholder)
        elif isinstance(cursor, bool) or not isinstance(cursor, int):
            raise TypeError(f"cursor must be an int, got {type(cursor).__name__}")
        elif not 0 <= cursor <= len(placeholder):
            raise InvalidCursorPosition(cursor, len(placeholder))

        self._text: str = placeholder
        self._cursor: int = cursor
        self._done: bool = False

    @classmethod
    def with_placeholder(cls, placeholder: str, cursor: int | None = None) -> LineEditor:
        """Start with ``placeholder`` and the cursor at ``cursor`` (default: end)."""
        return cls(placeholder, cursor)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> int:
        return self._cursor

    def is_done(self) -> bool:
        """True once Enter has been processed."""
        return self._done

    def result(self) -> str:
        return self._text

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def next_key(self, key: KeyCode) -> None:
        name = key.name

        if name == "char":
            self._insert_character(key.char or "")
            return

        if name == "backspace":
            self._handle_backspace()
            return

        if name == "delete":
            self._handle_forward_delete()
            return

        if name == "left":
            if self._cursor > 0:
                self._cursor -= 1
            return

        if name == "right":
            if self._cursor < len(self._text):
                self._cursor += 1
            return

        if name == "enter":
            if not self._done:
                logger.debug("Line submitted (%d chars)", len(self._text))
            self._done = True
            return

        # up, down, home, end, pageUp, pageDown, tab, backTab, insert, null, esc

    def feed(self, keys: Iterable[KeyCode]) -> None:
        for key in keys:
            self.next_key(key)

    def handle_input(self, data: str) -> None:
        """Decode raw terminal input and apply each key it contains."""
        for seq in split_sequences(data):
            key = parse_key_code(seq)
            if key is None:
                logger.debug("Ignoring undecodable input %r", seq)
                continue
            self.next_key(key)

    def _insert_character(self, char: str) -> None:
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor += len(char)

    def _handle_backspace(self) -> None:
        if self._cursor > 0:
            self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
            self._cursor -= 1

    def _handle_forward_delete(self) -> None:
        if self._cursor < len(self._text):
            self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]

    def __repr__(self) -> str:
        return (
            f"LineEditor(text={self._text!r}, cursor={self._cursor}, "
            f"done={self._done})"
        )
