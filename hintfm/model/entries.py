"""Directory entries and the directory listing order used by the file view."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from ..errors import IOFailure

CURRENT_DIR_NAME = "."
PARENT_DIR_NAME = ".."
SYNTHETIC_NAMES = frozenset({CURRENT_DIR_NAME, PARENT_DIR_NAME})


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Entry:
    """One row of the file view."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_synthetic(self) -> bool:
        """Return whether this is the ``.`` or ``..`` row."""
        return self.name in SYNTHETIC_NAMES


SYNTHETIC_ENTRIES: tuple[Entry, ...] = (
    Entry(CURRENT_DIR_NAME, EntryKind.DIRECTORY),
    Entry(PARENT_DIR_NAME, EntryKind.DIRECTORY),
)


def list_entries(directory: Path) -> list[Entry]:
    """Enumerate ``directory`` in display order.

    Directories come first, then files, each group sorted by name. The
    synthetic ``.`` and ``..`` rows are always prepended, so an empty
    directory still yields two entries. Symlinks are classified by their
    target; dangling links count as files.
    """
    directories: list[str] = []
    files: list[str] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    is_dir = child.is_dir(follow_symlinks=True)
                except OSError:
                    is_dir = False
                (directories if is_dir else files).append(child.name)
    except OSError as exc:
        raise IOFailure(f"cannot read {directory}: {exc.strerror or exc}") from exc

    directories.sort()
    files.sort()
    return [
        *SYNTHETIC_ENTRIES,
        *(Entry(name, EntryKind.DIRECTORY) for name in directories),
        *(Entry(name, EntryKind.FILE) for name in files),
    ]


__all__ = [
    "CURRENT_DIR_NAME",
    "PARENT_DIR_NAME",
    "SYNTHETIC_ENTRIES",
    "SYNTHETIC_NAMES",
    "Entry",
    "EntryKind",
    "list_entries",
]
