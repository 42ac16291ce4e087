"""Keyboard and terminal events fed into the state machine."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Key(str, Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    SPACE = "space"
    RUNE = "rune"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]


def rune(char: str) -> KeyEvent:
    return KeyEvent(Key.RUNE, char)


_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
}

_CONTROL_CHARS = {
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x1b": Key.ESCAPE,
    "\x03": Key.ESCAPE,  # Ctrl+C behaves like Escape
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    " ": Key.SPACE,
}


def decode_key(ch: Union[int, str]) -> Optional[KeyEvent]:
    """Translate a `get_wch()` result into a KeyEvent.

    Returns None for keys the application ignores.
    """
    if isinstance(ch, int):
        key = _SPECIAL_KEYS.get(ch)
        return KeyEvent(key) if key else None
    if ch in _CONTROL_CHARS:
        return KeyEvent(_CONTROL_CHARS[ch])
    if len(ch) == 1 and ch.isprintable():
        return rune(ch)
    return None
