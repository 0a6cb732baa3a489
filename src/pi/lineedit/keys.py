"""Decode raw terminal input into ``KeyCode`` values.

Covers the legacy VT/xterm sequences for the editing keys, the unmodified
subset of the kitty keyboard protocol (``CSI <codepoint> u``), and plain
control bytes. Modified keys (``ctrl+left`` and friends), mouse reports
and anything else the line editor has no use for decode to ``None``.
"""

from __future__ import annotations

import re

from pi.lineedit.keycodes import Key, KeyCode

ESC = "\x1b"

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Legacy escape sequences -> key codes
LEGACY_KEY_SEQUENCES: dict[str, KeyCode] = {
    "\x1b[A": Key.up,
    "\x1b[B": Key.down,
    "\x1b[C": Key.right,
    "\x1b[D": Key.left,
    "\x1b[H": Key.home,
    "\x1b[F": Key.end,
    "\x1bOA": Key.up,
    "\x1bOB": Key.down,
    "\x1bOC": Key.right,
    "\x1bOD": Key.left,
    "\x1bOH": Key.home,
    "\x1bOF": Key.end,
    "\x1b[1~": Key.home,
    "\x1b[4~": Key.end,
    "\x1b[7~": Key.home,
    "\x1b[8~": Key.end,
    "\x1b[2~": Key.insert,
    "\x1b[3~": Key.delete,
    "\x1b[5~": Key.page_up,
    "\x1b[6~": Key.page_down,
    "\x1b[Z": Key.back_tab,
}

CONTROL_KEYS: dict[str, KeyCode] = {
    "\r": Key.enter,
    "\n": Key.enter,
    "\r\n": Key.enter,
    "\t": Key.tab,
    "\x7f": Key.backspace,
    "\x08": Key.backspace,
    "\x1b": Key.esc,
    "\x00": Key.null,
}

# Kitty protocol codepoints for unmodified keys
KITTY_CODEPOINTS: dict[int, KeyCode] = {
    27: Key.esc,
    9: Key.tab,
    13: Key.enter,
    57414: Key.enter,  # keypad enter
    127: Key.backspace,
}

_KITTY_UNMODIFIED_RE = re.compile(r"\x1b\[([0-9]{1,7})(?:;1)?u")


def _is_printable(ch: str) -> bool:
    code = ord(ch)
    return not (code < 32 or code == 0x7F or 0x80 <= code <= 0x9F)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def parse_key_code(data: str) -> KeyCode | None:
    """Decode one complete input sequence, or return ``None``."""
    if not data:
        return None

    key = CONTROL_KEYS.get(data)
    if key is not None:
        return key

    key = LEGACY_KEY_SEQUENCES.get(data)
    if key is not None:
        return key

    match = _KITTY_UNMODIFIED_RE.fullmatch(data)
    if match:
        cp = int(match.group(1))
        key = KITTY_CODEPOINTS.get(cp)
        if key is not None:
            return key
        if cp > 0x10FFFF:
            return None
        ch = chr(cp)
        return KeyCode.from_char(ch) if _is_printable(ch) else None

    if len(data) == 1 and _is_printable(data):
        return KeyCode.from_char(data)

    return None


# ---------------------------------------------------------------------------
# Sequence splitting
# ---------------------------------------------------------------------------


def _escape_sequence_length(data: str) -> int:
    """Length of the escape sequence at the start of ``data``.

    Falls back to the whole string when the sequence is unterminated.
    """
    if len(data) == 1:
        return 1

    introducer = data[1]

    # CSI sequences: ESC [ params final
    if introducer == "[":
        for i in range(2, len(data)):
            if 0x40 <= ord(data[i]) <= 0x7E:
                return i + 1
        return len(data)

    # SS3 sequences: ESC O x
    if introducer == "O":
        return min(3, len(data))

    # A second ESC starts a new sequence
    if introducer == ESC:
        return 1

    # Meta key sequences: ESC followed by a single character
    return 2


def split_sequences(data: str) -> list[str]:
    """Split a chunk of input into single key sequences."""
    sequences: list[str] = []
    pos = 0

    while pos < len(data):
        if data[pos] == ESC:
            length = _escape_sequence_length(data[pos:])
        elif data[pos] == "\r" and data[pos + 1 : pos + 2] == "\n":
            length = 2
        else:
            length = 1
        sequences.append(data[pos : pos + length])
        pos += length

    return sequences


def parse_key_codes(data: str) -> list[KeyCode]:
    """Decode every recognised key in ``data``, in order."""
    keys: list[KeyCode] = []
    for seq in split_sequences(data):
        key = parse_key_code(seq)
        if key is not None:
            keys.append(key)
    return keys
