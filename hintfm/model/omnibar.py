"""Text-entry overlay for rename / create-file / create-directory actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .text_buffer import TextBuffer


class OmnibarKind(enum.Enum):
    RENAME = "rename"
    TOUCH = "touch"
    MKDIR = "mkdir"

    @property
    def title(self) -> str:
        return OMNIBAR_TITLES[self]


OMNIBAR_TITLES = {
    OmnibarKind.RENAME: "Rename",
    OmnibarKind.TOUCH: "New file",
    OmnibarKind.MKDIR: "New directory",
}


@dataclass
class OmnibarState:
    active: bool = False
    kind: OmnibarKind = OmnibarKind.TOUCH
    buffer: TextBuffer = field(default_factory=TextBuffer)

    def open(self, kind: OmnibarKind, initial: str = "") -> None:
        self.active = True
        self.kind = kind
        self.buffer.set(initial)

    def close(self) -> None:
        self.active = False
        self.buffer.clear()


__all__ = ["OmnibarKind", "OmnibarState"]
