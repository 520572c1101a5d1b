"""Keyboard events that drive the menus of the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    """Keys the menus react to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    D = auto()
    X = auto()


class EventKind(Enum):
    """Whether a key went down or came back up."""

    KEY_PRESSED = auto()
    KEY_RELEASED = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single key press or release."""

    kind: EventKind
    key: Key

    def is_press(self, key: Key) -> bool:
        """True if this event is a press of ``key``."""
        return self.kind is EventKind.KEY_PRESSED and self.key is key

    def is_release(self, key: Key) -> bool:
        """True if this event is a release of ``key``."""
        return self.kind is EventKind.KEY_RELEASED and self.key is key


def press(key: Key) -> KeyEvent:
    """Build a key-press event."""
    return KeyEvent(EventKind.KEY_PRESSED, key)


def release(key: Key) -> KeyEvent:
    """Build a key-release event."""
    return KeyEvent(EventKind.KEY_RELEASED, key)