"""Drive a LineEditor from a stream of input events until submission."""

from __future__ import annotations

import logging
from typing import Iterable, Union

from pi.lineedit.keycodes import KeyCode
from pi.lineedit.keys import parse_key_codes
from pi.lineedit.line_editor import LineEditor

logger = logging.getLogger(__name__)

# A decoded key, or a raw chunk of terminal input
InputEvent = Union[KeyCode, str]


def read_line(
    events: Iterable[InputEvent],
    placeholder: str = "",
    cursor: int | None = None,
) -> str | None:
    """Feed ``events`` into a fresh editor and return the submitted line.

    Events are consumed only up to the one that submits the line; keys
    following Enter inside the same raw chunk are discarded. Returns
    ``None`` if the events run out first.
    """
    editor = LineEditor(placeholder, cursor)

    for event in events:
        keys = [event] if isinstance(event, KeyCode) else parse_key_codes(event)
        for key in keys:
            editor.next_key(key)
            if editor.is_done():
                return editor.result()

    logger.debug("Input ended before submission: %r", editor.result())
    return None
