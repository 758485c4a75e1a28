"""Width-aware helpers for lines that carry ANSI styling."""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Terminal columns taken by ``ch`` when printed at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` to ``max_cols`` visible columns.

    Escape sequences are copied through without counting toward the width and
    tabs become spaces so the cut lines up with what the terminal shows.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    while i < len(text) and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        width = char_display_width(ch, col)
        if col + width > max_cols:
            break
        out.append(" " * width if ch == "\t" else ch)
        col += width
        i += 1
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip to ``width`` and pad with spaces so the line fills it exactly."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def selected_with_ansi(text: str) -> str:
    """Reverse-video ``text`` while keeping any colors already inside it."""
    if not text:
        return text
    return "\033[7m" + text.replace(RESET, "\033[0;7m") + RESET


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "pad_ansi_line",
    "selected_with_ansi",
]
