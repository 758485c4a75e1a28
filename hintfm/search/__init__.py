"""Finder search backends.

``Searcher`` is the callable the controller uses: index mode fuzzy-filters
the project file list, history mode asks zoxide.
"""

from __future__ import annotations

import enum
from pathlib import Path

from .fuzzy import fuzzy_score, match_labels
from .history import query_history
from .index import ProjectIndex, collect_project_files


class SearchMode(enum.Enum):
    INDEX = "index"
    HISTORY = "history"


class Searcher:
    def __init__(self, index: ProjectIndex | None = None) -> None:
        self.index = index if index is not None else ProjectIndex()

    def reset(self) -> None:
        """Forget cached file lists so the next search re-indexes."""
        self.index.clear()

    def __call__(self, query: str, mode: SearchMode, cwd: Path, limit: int) -> list[str]:
        if mode is SearchMode.HISTORY:
            return query_history(query, limit)
        return match_labels(query, self.index.labels(cwd), limit)


__all__ = [
    "ProjectIndex",
    "SearchMode",
    "Searcher",
    "collect_project_files",
    "fuzzy_score",
    "match_labels",
    "query_history",
]
