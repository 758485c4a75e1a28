"""Incremental-search overlay state."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .paginated import PaginatedList
from .text_buffer import TextBuffer


@dataclass
class FinderState:
    """Query buffer plus a result list that never exceeds its viewport."""

    active: bool = False
    query: TextBuffer = field(default_factory=TextBuffer)
    results: PaginatedList[str] = field(default_factory=PaginatedList)
    zoxide_mode: bool = False

    def open(self, zoxide_mode: bool) -> None:
        self.active = True
        self.zoxide_mode = zoxide_mode
        self.query.clear()
        self.results.clear()

    def close(self) -> None:
        self.active = False
        self.query.clear()
        self.results.clear()

    def update_files(self, results: Sequence[str]) -> None:
        self.results.refill(results)

    def selection(self) -> str | None:
        if not self.results.entries:
            return None
        return self.results.current()


__all__ = ["FinderState"]
