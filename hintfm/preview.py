"""Highlighted file previews for the right-hand pane.

Directories and binary files preview as nothing. Text is decoded with an
encoding fallback, stripped of terminal control bytes, highlighted with
Pygments and prefixed with line numbers.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from .ansi import RESET, clip_ansi_line

logger = logging.getLogger(__name__)

BINARY_PROBE_BYTES = 4_096
PREVIEW_READ_BYTES = 256 * 1_024
PREVIEW_STYLE = "monokai"
LINE_NUMBER_STYLE = "\033[38;5;242m"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTER = Terminal256Formatter(style=PREVIEW_STYLE)


def read_text(path: Path, max_bytes: int | None = None) -> str:
    """Decode ``path``, or only its first ``max_bytes`` bytes.

    A cut-off read drops the trailing partial line so a split multi-byte
    character never forces the latin-1 fallback.
    """
    with path.open("rb") as handle:
        raw = handle.read() if max_bytes is None else handle.read(max_bytes)
    if max_bytes is not None and len(raw) >= max_bytes:
        newline = raw.rfind(b"\n")
        if newline >= 0:
            raw = raw[: newline + 1]
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    return raw.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Replace control bytes other than newline and tab with ``\\xNN`` escapes."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda m: f"\\x{ord(m.group(0)):02x}", source)


def looks_binary(path: Path) -> bool:
    with path.open("rb") as handle:
        sample = handle.read(BINARY_PROBE_BYTES)
    return b"\x00" in sample


def highlight_source(source: str, path: Path) -> list[str]:
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    rendered = highlight(source, lexer, _FORMATTER)
    return rendered.splitlines()


def preview(path: Path, max_lines: int, max_width: int) -> list[str]:
    """Return at most ``max_lines`` display-ready lines for ``path``.

    Unreadable files preview as an empty list; the failure is only logged.
    """
    if max_lines <= 0 or max_width <= 0:
        return []
    try:
        if not path.is_file() or looks_binary(path):
            return []
        source = read_text(path, max_bytes=PREVIEW_READ_BYTES)
    except OSError as exc:
        logger.debug("no preview for %s: %s", path, exc)
        return []

    head = "\n".join(source.splitlines()[:max_lines])
    if not head:
        return []
    highlighted = highlight_source(sanitize_terminal_text(head), path)[:max_lines]
    gutter = len(str(len(highlighted)))
    lines: list[str] = []
    for number, line in enumerate(highlighted, start=1):
        numbered = f"{LINE_NUMBER_STYLE}{number:>{gutter}}{RESET} {line}"
        lines.append(clip_ansi_line(numbered, max_width) + RESET)
    return lines


__all__ = [
    "BINARY_PROBE_BYTES",
    "PREVIEW_READ_BYTES",
    "highlight_source",
    "looks_binary",
    "preview",
    "read_text",
    "sanitize_terminal_text",
]
