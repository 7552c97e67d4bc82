"""
Key events and key sources for the interactive editors.

The editors pull one logical key at a time from a KeySource. Every
physical key maps to some KeyEvent; keys the editors don't understand
map to KeyKind.NONE, never to an error.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class KeyKind(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CHAR = "char"
    ERASE = "erase"
    TERMINATE = "terminate"
    NONE = "none"


# (d_row, d_col) for each navigation key
MOVES: dict[KeyKind, tuple[int, int]] = {
    KeyKind.UP: (-1, 0),
    KeyKind.DOWN: (1, 0),
    KeyKind.LEFT: (0, -1),
    KeyKind.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class KeyEvent:
    """A logical key. char is set only for KeyKind.CHAR."""
    kind: KeyKind
    char: str = ""

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHAR and len(self.char) != 1:
            raise ValueError(f"CHAR events carry exactly one character, got {self.char!r}")

    @classmethod
    def of_char(cls, ch: str) -> KeyEvent:
        return cls(KeyKind.CHAR, ch)

    @property
    def is_move(self) -> bool:
        return self.kind in MOVES


UP = KeyEvent(KeyKind.UP)
DOWN = KeyEvent(KeyKind.DOWN)
LEFT = KeyEvent(KeyKind.LEFT)
RIGHT = KeyEvent(KeyKind.RIGHT)
ERASE = KeyEvent(KeyKind.ERASE)
TERMINATE = KeyEvent(KeyKind.TERMINATE)
NONE = KeyEvent(KeyKind.NONE)


@runtime_checkable
class KeySource(Protocol):
    """Blocking source of logical key events."""

    def next_key(self) -> KeyEvent:
        """Block until the next key and return it."""
        ...


class ScriptedKeySource:
    """
    Replays a fixed sequence of key events.

    Raises EOFError once the script is exhausted, so a test whose script
    never terminates an editor fails instead of hanging.
    """

    def __init__(self, events: Iterable[KeyEvent]):
        self._events: Iterator[KeyEvent] = iter(events)
        self.consumed = 0

    def next_key(self) -> KeyEvent:
        try:
            event = next(self._events)
        except StopIteration:
            raise EOFError(f"key script exhausted after {self.consumed} events") from None
        self.consumed += 1
        return event


def key_script(*items: str | KeyEvent) -> list[KeyEvent]:
    """
    Build a key sequence. Strings expand to one CHAR event per character.

    Example:
        key_script("12", RIGHT, "3", TERMINATE)
    """
    events: list[KeyEvent] = []
    for item in items:
        if isinstance(item, KeyEvent):
            events.append(item)
        else:
            events.extend(KeyEvent.of_char(ch) for ch in item)
    return events


_ESCAPE = "\x1b"
_ERASE_CHARS = ("\x7f", "\b")


def key_from_curses(ch: int | str) -> KeyEvent:
    """
    Map a value returned by curses get_wch() to a KeyEvent.

    Arrow keys navigate, Backspace/Delete erase, Escape terminates and
    printable characters are input. Everything else is KeyKind.NONE.
    """
    import curses

    if isinstance(ch, int):
        mapped = {
            curses.KEY_UP: UP,
            curses.KEY_DOWN: DOWN,
            curses.KEY_LEFT: LEFT,
            curses.KEY_RIGHT: RIGHT,
            curses.KEY_BACKSPACE: ERASE,
        }.get(ch)
        if mapped is None:
            logger.debug("unmapped curses key code %r", ch)
            return NONE
        return mapped

    if ch == _ESCAPE:
        return TERMINATE
    if ch in _ERASE_CHARS:
        return ERASE
    if len(ch) == 1 and ch.isprintable():
        return KeyEvent.of_char(ch)
    logger.debug("unmapped curses character %r", ch)
    return NONE
