"""Abstract key codes consumed by the line editor.

A ``KeyCode`` is an already-decoded key press, independent of how the
terminal encoded it. The set of names is closed; only ``char`` carries a
payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyName = Literal[
    "backspace",
    "enter",
    "left",
    "right",
    "up",
    "down",
    "home",
    "end",
    "pageUp",
    "pageDown",
    "tab",
    "backTab",
    "delete",
    "insert",
    "char",
    "null",
    "esc",
]

KEY_NAMES: frozenset[str] = frozenset(
    {
        "backspace",
        "enter",
        "left",
        "right",
        "up",
        "down",
        "home",
        "end",
        "pageUp",
        "pageDown",
        "tab",
        "backTab",
        "delete",
        "insert",
        "char",
        "null",
        "esc",
    }
)


# ---------------------------------------------------------------------------
# KeyCode
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyCode:
    """A single decoded key press.

    ``char`` holds exactly one code point when ``name == "char"`` and is
    ``None`` for every other key.
    """

    name: KeyName
    char: str | None = None

    def __post_init__(self) -> None:
        if self.name not in KEY_NAMES:
            raise ValueError(f"Unknown key name: {self.name!r}")
        if self.name == "char":
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError(
                    f"char key requires a single character, got {self.char!r}"
                )
        elif self.char is not None:
            raise ValueError(f"{self.name} key does not take a character")

    @classmethod
    def from_char(cls, c: str) -> KeyCode:
        """Build the ``char`` key for a raw character."""
        return cls("char", c)

    @property
    def is_char(self) -> bool:
        return self.name == "char"

    def __repr__(self) -> str:
        if self.name == "char":
            return f"KeyCode.from_char({self.char!r})"
        return f"KeyCode({self.name!r})"


# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key code constants."""

    backspace = KeyCode("backspace")
    enter = KeyCode("enter")
    left = KeyCode("left")
    right = KeyCode("right")
    up = KeyCode("up")
    down = KeyCode("down")
    home = KeyCode("home")
    end = KeyCode("end")
    page_up = KeyCode("pageUp")
    page_down = KeyCode("pageDown")
    tab = KeyCode("tab")
    back_tab = KeyCode("backTab")
    delete = KeyCode("delete")
    insert = KeyCode("insert")
    null = KeyCode("null")
    esc = KeyCode("esc")

    @staticmethod
    def char(c: str) -> KeyCode:
        return KeyCode.from_char(c)
