"""pi-lineedit: key-driven single-line input buffer."""

# Key codes
from pi.lineedit.keycodes import KEY_NAMES, Key, KeyCode, KeyName

# Raw input decoding
from pi.lineedit.keys import parse_key_code, parse_key_codes, split_sequences

# Line editor
from pi.lineedit.line_editor import InvalidCursorPosition, LineEditor

# Driver loop
from pi.lineedit.prompt import InputEvent, read_line

__all__ = [
    # Key codes
    "KEY_NAMES",
    "Key",
    "KeyCode",
    "KeyName",
    # Raw input decoding
    "parse_key_code",
    "parse_key_codes",
    "split_sequences",
    # Line editor
    "InvalidCursorPosition",
    "LineEditor",
    # Driver loop
    "InputEvent",
    "read_line",
]
