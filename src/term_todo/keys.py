"""Key decoding.

Raw input from ``window.get_wch()`` is either a ``str`` or an ``int`` key
code. :func:`decode` turns it into a :class:`KeyEvent` once, so nothing past
the input boundary looks at raw codes.
"""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Key(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: Optional[str] = None


class Command(Enum):
    """List-view commands."""

    DOWN = "down"
    UP = "up"
    QUIT = "quit"
    ADD = "add"
    EDIT = "edit"
    TOGGLE_DONE = "toggle_done"
    DELETE = "delete"
    DUPLICATE = "duplicate"


_SPECIAL_KEYS = {
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
}

_ENTER_CHARS = ("\n", "\r")
_BACKSPACE_CHARS = ("\x7f", "\b")

_COMMAND_CHARS = {
    "j": Command.DOWN,
    "k": Command.UP,
    "q": Command.QUIT,
    "a": Command.ADD,
    "e": Command.EDIT,
    "x": Command.TOGGLE_DONE,
    "d": Command.DELETE,
    "c": Command.DUPLICATE,
}

_COMMAND_KEYS = {
    Key.DOWN: Command.DOWN,
    Key.UP: Command.UP,
    Key.ENTER: Command.EDIT,
}


def decode(raw: Union[str, int]) -> KeyEvent:
    if isinstance(raw, int):
        if raw in _SPECIAL_KEYS:
            return KeyEvent(_SPECIAL_KEYS[raw])
        # getch() style codes below KEY_MIN are plain characters
        if not 0 <= raw < curses.KEY_MIN:
            return KeyEvent(Key.OTHER)
        raw = chr(raw)

    if raw in _ENTER_CHARS:
        return KeyEvent(Key.ENTER)
    if raw in _BACKSPACE_CHARS:
        return KeyEvent(Key.BACKSPACE)
    if len(raw) == 1 and raw.isprintable():
        return KeyEvent(Key.CHAR, raw)
    return KeyEvent(Key.OTHER)


def command_for(event: KeyEvent) -> Optional[Command]:
    """Map a key event to a list-view command, or ``None`` to ignore it."""
    if event.key is Key.CHAR:
        return _COMMAND_CHARS.get(event.char or "")
    return _COMMAND_KEYS.get(event.key)
