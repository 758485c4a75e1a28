"""Top-level interaction modes; exactly one is active at a time."""

from __future__ import annotations

import enum


class Mode(enum.Enum):
    NORMAL = "normal"
    HINT = "hint"
    FINDER = "finder"
    OMNIBAR = "omnibar"


__all__ = ["Mode"]
