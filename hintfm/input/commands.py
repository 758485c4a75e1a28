"""Typed commands produced by key-binding resolution, per mode.

Each command is a small frozen dataclass so the controller can dispatch on
type with ``isinstance`` and commands compare by value in tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..model.omnibar import OmnibarKind


@dataclass(frozen=True)
class EntryScroll:
    down: bool


@dataclass(frozen=True)
class SelectEntry:
    pass


@dataclass(frozen=True)
class HintMode:
    pass


@dataclass(frozen=True)
class FinderMode:
    zoxide: bool


@dataclass(frozen=True)
class OmnibarMode:
    kind: OmnibarKind


@dataclass(frozen=True)
class Yank:
    cut: bool


@dataclass(frozen=True)
class Paste:
    pass


@dataclass(frozen=True)
class Delete:
    force: bool


@dataclass(frozen=True)
class ClearClipboard:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class ExitHint:
    pass


@dataclass(frozen=True)
class HintChar:
    char: str


@dataclass(frozen=True)
class Write:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Submit:
    pass


FileListCommand = (
    EntryScroll | SelectEntry | HintMode | FinderMode | OmnibarMode | Yank | Paste | Delete | ClearClipboard | Exit
)
HintCommand = HintChar | ExitHint
FinderCommand = Write | Backspace | SelectEntry | EntryScroll | Exit
OmnibarCommand = Write | Backspace | Submit | Exit
Command = FileListCommand | HintCommand | FinderCommand | OmnibarCommand

# Configuration action names, in the order defaults are documented.
FILE_LIST_ACTIONS: dict[str, FileListCommand | ExitHint] = {
    "scroll_down": EntryScroll(down=True),
    "scroll_up": EntryScroll(down=False),
    "select_entry": SelectEntry(),
    "hint_mode": HintMode(),
    "finder_fzf": FinderMode(zoxide=False),
    "finder_zoxide": FinderMode(zoxide=True),
    "rename": OmnibarMode(OmnibarKind.RENAME),
    "touch": OmnibarMode(OmnibarKind.TOUCH),
    "mkdir": OmnibarMode(OmnibarKind.MKDIR),
    "yank": Yank(cut=False),
    "cut": Yank(cut=True),
    "paste": Paste(),
    "delete": Delete(force=False),
    "force_delete": Delete(force=True),
    "clear_clipboard": ClearClipboard(),
    "exit": Exit(),
    "exit_hint": ExitHint(),
}

FINDER_ACTIONS: dict[str, FinderCommand] = {
    "backspace": Backspace(),
    "select_entry": SelectEntry(),
    "scroll_down": EntryScroll(down=True),
    "scroll_up": EntryScroll(down=False),
    "exit": Exit(),
}

OMNIBAR_ACTIONS: dict[str, OmnibarCommand] = {
    "backspace": Backspace(),
    "submit": Submit(),
    "exit": Exit(),
}


def refreshes_preview(command: Command | None) -> bool:
    """Return whether the preview should be recomputed after ``command``."""
    return command is not None and not isinstance(command, Exit)
