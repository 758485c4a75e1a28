"""Key-binding tables and per-mode key resolution.

Tables are built once at startup from ``DEFAULT_BINDINGS`` overridden by the
user configuration. Resolution is a pure lookup: in the text-entry modes the
structural table is consulted first and any other character falls through to
text insertion, so free text can always be typed whatever the configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..errors import ConfigError
from ..model.mode import Mode
from .commands import (
    FILE_LIST_ACTIONS,
    FINDER_ACTIONS,
    OMNIBAR_ACTIONS,
    Command,
    ExitHint,
    HintChar,
    Write,
)
from .keys import KeyEvent, is_char_key, key_display_name, key_from_name

FILE_LIST_SECTION = "filelist"
FINDER_SECTION = "finder"
OMNIBAR_SECTION = "omnibar"

DEFAULT_BINDINGS: dict[str, dict[str, str]] = {
    FILE_LIST_SECTION: {
        "scroll_down": "j",
        "scroll_up": "k",
        "select_entry": "enter",
        "hint_mode": "f",
        "finder_fzf": "/",
        "finder_zoxide": "z",
        "rename": "r",
        "touch": "t",
        "mkdir": "m",
        "yank": "y",
        "cut": "x",
        "paste": "p",
        "delete": "d",
        "force_delete": "D",
        "clear_clipboard": "c",
        "exit": "q",
        "exit_hint": "esc",
    },
    FINDER_SECTION: {
        "backspace": "backspace",
        "select_entry": "enter",
        "scroll_down": "down",
        "scroll_up": "up",
        "exit": "esc",
    },
    OMNIBAR_SECTION: {
        "backspace": "backspace",
        "submit": "enter",
        "exit": "esc",
    },
}

_SECTION_ACTIONS: dict[str, Mapping[str, Command]] = {
    FILE_LIST_SECTION: FILE_LIST_ACTIONS,
    FINDER_SECTION: FINDER_ACTIONS,
    OMNIBAR_SECTION: OMNIBAR_ACTIONS,
}
_TEXT_ENTRY_SECTIONS = frozenset({FINDER_SECTION, OMNIBAR_SECTION})


def _build_table(section: str, user_section: Mapping[str, object]) -> dict[str, str]:
    """Merge one user section over its defaults and return ``{key token: action}``."""
    actions = _SECTION_ACTIONS[section]
    unknown = sorted(name for name in user_section if name not in actions)
    if unknown:
        raise ConfigError(f"[{section}] unknown action(s): {', '.join(unknown)}")

    table: dict[str, str] = {}
    for action, default_name in DEFAULT_BINDINGS[section].items():
        raw_name = user_section.get(action, default_name)
        if not isinstance(raw_name, str):
            raise ConfigError(f"[{section}] {action}: expected a key name string, got {raw_name!r}")
        key = key_from_name(raw_name)
        if section in _TEXT_ENTRY_SECTIONS and is_char_key(key):
            raise ConfigError(f"[{section}] {action}: character keys are reserved for text entry ({raw_name!r})")
        previous = table.get(key)
        if previous is not None:
            raise ConfigError(f"[{section}] {action} and {previous} are both bound to {raw_name!r}")
        table[key] = action
    return table


def _user_section(config: Mapping[str, object], section: str) -> Mapping[str, object]:
    raw = config.get(section, {})
    if not isinstance(raw, Mapping):
        raise ConfigError(f"[{section}] must be an object of action -> key name")
    return raw


@dataclass(frozen=True)
class KeyBindings:
    """Resolved per-mode tables mapping key tokens to action names."""

    file_list: Mapping[str, str]
    finder: Mapping[str, str]
    omnibar: Mapping[str, str]

    @classmethod
    def from_config(cls, config: Mapping[str, object] | None = None) -> KeyBindings:
        """Build bindings from a parsed configuration object.

        Missing sections and missing actions fall back to ``DEFAULT_BINDINGS``;
        malformed values raise ``ConfigError``.
        """
        config = config or {}
        return cls(
            file_list=_build_table(FILE_LIST_SECTION, _user_section(config, FILE_LIST_SECTION)),
            finder=_build_table(FINDER_SECTION, _user_section(config, FINDER_SECTION)),
            omnibar=_build_table(OMNIBAR_SECTION, _user_section(config, OMNIBAR_SECTION)),
        )

    def resolve(self, mode: Mode, event: KeyEvent) -> Command | None:
        """Translate one key event into the command for ``mode``.

        Non-press events never produce a command.
        """
        if not event.is_press:
            return None
        key = event.key

        if mode is Mode.NORMAL:
            action = self.file_list.get(key)
            if action is None or action == "exit_hint":
                return None
            return FILE_LIST_ACTIONS[action]

        if mode is Mode.HINT:
            if is_char_key(key):
                return HintChar(key)
            if self.file_list.get(key) == "exit_hint":
                return ExitHint()
            return None

        if mode is Mode.FINDER:
            action = self.finder.get(key)
            if action is not None:
                return FINDER_ACTIONS[action]
            return Write(key) if is_char_key(key) else None

        if mode is Mode.OMNIBAR:
            action = self.omnibar.get(key)
            if action is not None:
                return OMNIBAR_ACTIONS[action]
            return Write(key) if is_char_key(key) else None

        return None

    def key_for(self, section: str, action: str) -> str | None:
        """Return the configured key name for ``action`` (used by help rows)."""
        table = {
            FILE_LIST_SECTION: self.file_list,
            FINDER_SECTION: self.finder,
            OMNIBAR_SECTION: self.omnibar,
        }[section]
        for key, bound_action in table.items():
            if bound_action == action:
                return key_display_name(key)
        return None

    def as_config(self) -> dict[str, dict[str, str]]:
        """Return the bindings in configuration-file shape."""
        return {
            section: {action: self.key_for(section, action) or "" for action in DEFAULT_BINDINGS[section]}
            for section in DEFAULT_BINDINGS
        }


__all__ = [
    "DEFAULT_BINDINGS",
    "FILE_LIST_SECTION",
    "FINDER_SECTION",
    "KeyBindings",
    "OMNIBAR_SECTION",
]
