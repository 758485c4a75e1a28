"""Scrollable, selectable list with a fixed-height viewport.

``scroll`` is the index of the first visible entry and ``selected`` is the
cursor row relative to that window, so ``scroll + selected`` is the absolute
index. Window scrolling and entry scrolling are separate: hints stay anchored
to ``scroll`` while the cursor tracks the logical selection.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from ..errors import OutOfRange

T = TypeVar("T")


class PaginatedList(Generic[T]):
    """Entries plus viewport, scroll offset, and window-relative selection."""

    def __init__(self, entries: Sequence[T] = (), viewport: int = 1) -> None:
        self.entries: list[T] = list(entries)
        self.scroll = 0
        self.selected = 0
        self.viewport = max(1, viewport)

    def __len__(self) -> int:
        return len(self.entries)

    def set_viewport(self, rows: int) -> None:
        """Set the visible row count (at least one) without moving the cursor."""
        self.viewport = max(1, rows)

    def replace(self, entries: Sequence[T]) -> None:
        """Swap in new entries and reset scroll and selection to the top."""
        self.entries = list(entries)
        self.scroll = 0
        self.selected = 0

    def refill(self, entries: Sequence[T]) -> None:
        """Swap in entries truncated to the viewport, keeping the cursor when possible.

        The window is reset to the top, so the list never holds more rows
        than it can show; a cursor that now points past the end is clamped
        to the last entry.
        """
        self.entries = list(entries)[: self.viewport]
        self.scroll = 0
        if self.selected >= len(self.entries):
            self.selected = max(0, len(self.entries) - 1)

    def clear(self) -> None:
        self.replace(())

    def absolute_index(self) -> int:
        return self.scroll + self.selected

    def current(self) -> T:
        """Return the selected entry; raises ``OutOfRange`` for an empty list."""
        index = self.absolute_index()
        if not self.entries or index >= len(self.entries):
            raise OutOfRange("list is empty")
        return self.entries[index]

    def visible(self) -> list[T]:
        return self.entries[self.scroll : self.scroll + self.viewport]

    def visible_count(self) -> int:
        return max(0, min(self.viewport, len(self.entries) - self.scroll))

    def scroll_window(self, down: bool) -> None:
        """Move the window by one row, leaving ``selected`` at its window position."""
        if down:
            if self.scroll < max(0, len(self.entries) - self.viewport):
                self.scroll += 1
        elif self.scroll > 0:
            self.scroll -= 1

    def scroll_entry(self, down: bool) -> None:
        """Move the cursor by one entry, scrolling the window at its edges.

        Moving down past the last visible row advances ``scroll`` by the
        overflow and pins the cursor to the bottom row. Both ends of the list
        are saturating no-ops.
        """
        if down:
            if self.absolute_index() >= len(self.entries) - 1:
                return
            last_row = self.viewport - 1
            if self.selected >= last_row:
                self.scroll += self.selected + 1 - last_row
                self.selected = last_row
            else:
                self.selected += 1
            return

        if self.selected == 0 and self.scroll > 0:
            self.scroll -= 1
        elif self.selected > 0:
            self.selected -= 1

    def select_index(self, index: int) -> None:
        """Move the cursor to absolute ``index`` (clamped), scrolling as little as needed."""
        if not self.entries:
            self.scroll = 0
            self.selected = 0
            return
        index = max(0, min(index, len(self.entries) - 1))
        if self.scroll <= index < self.scroll + self.viewport:
            self.selected = index - self.scroll
        elif index < self.viewport:
            self.scroll = 0
            self.selected = index
        else:
            self.scroll = index - self.viewport + 1
            self.selected = self.viewport - 1

    def select_visible_row(self, row: int) -> None:
        """Put the cursor on visible row ``row`` without touching ``scroll``."""
        if not 0 <= row < self.visible_count():
            raise OutOfRange(f"row {row} is not visible")
        self.selected = row


__all__ = ["PaginatedList"]
