"""Project file index for the finder.

Prefers ``rg --files`` and ``fd`` (both honor ignore files), falling back to
a directory walk that skips hidden entries. Labels are POSIX paths relative
to the indexed root.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from ..errors import ExternalProcessFailure

logger = logging.getLogger(__name__)

INDEX_TIMEOUT_SECONDS = 10.0

_INDEX_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("rg", "--files"),
    ("fd", "--type", "f", "--color", "never", "--strip-cwd-prefix"),
)


def _run_lister(cmd: tuple[str, ...], root: Path) -> list[str]:
    try:
        proc = subprocess.run(
            cmd,
            cwd=root,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            timeout=INDEX_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise ExternalProcessFailure(f"{cmd[0]} failed: {exc}") from exc
    # rg exits 1 when it finds no files at all.
    if proc.returncode not in (0, 1):
        detail = proc.stderr.strip().splitlines()[:1]
        raise ExternalProcessFailure(f"{cmd[0]} exited with {proc.returncode}: {' '.join(detail)}")
    return sorted(line for line in proc.stdout.splitlines() if line)


def walk_project_files(root: Path) -> list[str]:
    labels: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
        base = Path(dirpath)
        for filename in sorted(filenames):
            if filename.startswith("."):
                continue
            labels.append((base / filename).relative_to(root).as_posix())
    return labels


def collect_project_files(root: Path) -> list[str]:
    """List files under ``root`` using the first available lister."""
    for cmd in _INDEX_COMMANDS:
        if shutil.which(cmd[0]) is None:
            continue
        try:
            return _run_lister(cmd, root)
        except ExternalProcessFailure as exc:
            logger.warning("file index via %s failed: %s", cmd[0], exc)
    return walk_project_files(root)


class ProjectIndex:
    """File labels per root, collected once and reused across keystrokes."""

    def __init__(self) -> None:
        self._labels: dict[Path, list[str]] = {}

    def labels(self, root: Path) -> list[str]:
        cached = self._labels.get(root)
        if cached is None:
            cached = collect_project_files(root)
            self._labels[root] = cached
            logger.debug("indexed %d files under %s", len(cached), root)
        return cached

    def clear(self) -> None:
        self._labels.clear()


__all__ = ["ProjectIndex", "collect_project_files", "walk_project_files"]
