"""Input-layer public API: terminal key decoding and key-binding resolution."""

from .bindings import DEFAULT_BINDINGS, KeyBindings
from .keys import KeyEvent, KeyEventKind, key_from_name
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key, read_key_event

__all__ = [
    "DEFAULT_BINDINGS",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBindings",
    "KeyEvent",
    "KeyEventKind",
    "key_from_name",
    "read_key",
    "read_key_event",
]
