"""Opening selected files outside the browser.

With ``$EDITOR`` set the editor runs in the foreground while the terminal is
handed back to it. Otherwise the desktop opener is started detached.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from .errors import ExternalProcessFailure

logger = logging.getLogger(__name__)


def _noop() -> None:
    return None


def desktop_opener() -> str | None:
    candidates = ("open",) if sys.platform == "darwin" else ("xdg-open", "open")
    for name in candidates:
        found = shutil.which(name)
        if found:
            return found
    return None


def open_external(
    target: Path,
    disable_tui_mode: Callable[[], None] = _noop,
    enable_tui_mode: Callable[[], None] = _noop,
) -> None:
    editor_env = os.environ.get("EDITOR", "").strip()
    if editor_env:
        try:
            cmd = shlex.split(editor_env)
        except ValueError as exc:
            raise ExternalProcessFailure(f"cannot parse $EDITOR {editor_env!r}: {exc}") from exc
        if not cmd or not cmd[0]:
            raise ExternalProcessFailure("cannot open file: $EDITOR is empty")
        logger.info("opening %s with %s", target, cmd[0])
        disable_tui_mode()
        try:
            subprocess.run([*cmd, str(target)], check=False)
        except OSError as exc:
            raise ExternalProcessFailure(f"failed to launch editor: {exc}") from exc
        finally:
            enable_tui_mode()
        return

    opener = desktop_opener()
    if opener is None:
        raise ExternalProcessFailure("cannot open file: $EDITOR is not set and no opener was found")
    logger.info("opening %s with %s", target, opener)
    try:
        subprocess.Popen(
            [opener, str(target)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise ExternalProcessFailure(f"failed to launch {opener}: {exc}") from exc


__all__ = ["desktop_opener", "open_external"]
