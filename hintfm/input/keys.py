"""Key tokens and key events.

Character keys are their own one-character string; every other key is an
upper-case token such as ``"ENTER"`` or ``"UP"``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..errors import ConfigError

ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
LEFT = "LEFT"
RIGHT = "RIGHT"
UP = "UP"
DOWN = "DOWN"
HOME = "HOME"
END = "END"
PAGE_UP = "PAGEUP"
PAGE_DOWN = "PAGEDOWN"
DELETE = "DELETE"
INSERT = "INSERT"
TAB = "TAB"
BACKTAB = "BACKTAB"
ESC = "ESC"

NAMED_KEYS: dict[str, str] = {
    "enter": ENTER,
    "backspace": BACKSPACE,
    "left": LEFT,
    "right": RIGHT,
    "up": UP,
    "down": DOWN,
    "home": HOME,
    "end": END,
    "pageup": PAGE_UP,
    "pagedown": PAGE_DOWN,
    "delete": DELETE,
    "insert": INSERT,
    "tab": TAB,
    "backtab": BACKTAB,
    "esc": ESC,
}
KEY_NAMES: dict[str, str] = {token: name for name, token in NAMED_KEYS.items()}


class KeyEventKind(enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_char(self) -> bool:
        return is_char_key(self.key)

    @property
    def is_press(self) -> bool:
        return self.kind is KeyEventKind.PRESS


def is_char_key(key: str) -> bool:
    return len(key) == 1


def key_from_name(name: str) -> str:
    """Translate a configured key name into a key token.

    Single characters map to themselves (case preserved); longer names are
    matched case-insensitively against ``NAMED_KEYS``.
    """
    if not isinstance(name, str) or not name:
        raise ConfigError(f"key binding must be a non-empty string, got {name!r}")
    if len(name) == 1:
        return name
    token = NAMED_KEYS.get(name.strip().lower())
    if token is None:
        raise ConfigError(f"unknown key name {name!r} (expected one character or {', '.join(NAMED_KEYS)})")
    return token


def key_display_name(key: str) -> str:
    """Return the configuration spelling of a key token."""
    return KEY_NAMES.get(key, key)


__all__ = [
    "BACKSPACE",
    "BACKTAB",
    "DELETE",
    "DOWN",
    "END",
    "ENTER",
    "ESC",
    "HOME",
    "INSERT",
    "KEY_NAMES",
    "KeyEvent",
    "KeyEventKind",
    "LEFT",
    "NAMED_KEYS",
    "PAGE_DOWN",
    "PAGE_UP",
    "RIGHT",
    "TAB",
    "UP",
    "is_char_key",
    "key_display_name",
    "key_from_name",
]
