"""Pending copy/cut operations waiting for a paste."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ClipboardEntry:
    path: Path
    cut: bool = False

    def display(self) -> str:
        """Return the clipboard panel row for this entry."""
        marker = "mv" if self.cut else "cp"
        return f"{marker} {self.path}"


class Clipboard:
    """Ordered queue of files to copy or move into the next paste target.

    Only regular files are admitted; directories are rejected silently.
    Yanking a path that is already queued updates its cut flag in place.
    """

    def __init__(self) -> None:
        self.entries: list[ClipboardEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def push(self, path: Path, cut: bool = False) -> bool:
        """Queue ``path``; return ``False`` when it was rejected."""
        if path.is_dir():
            return False
        absolute = path.absolute()
        for entry in self.entries:
            if entry.path == absolute:
                entry.cut = cut
                return True
        self.entries.append(ClipboardEntry(absolute, cut))
        return True

    def clear(self) -> None:
        self.entries.clear()

    def display_lines(self) -> list[str]:
        return [entry.display() for entry in self.entries]


__all__ = ["Clipboard", "ClipboardEntry"]
