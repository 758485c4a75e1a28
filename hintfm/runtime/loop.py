"""Main interactive event loop.

Each pass measures the terminal, pushes panel sizes into the controller,
redraws when something changed, then waits briefly for one key and
dispatches it. The loop ends as soon as the controller asks to exit.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..controller import BrowserView, ModeController
from ..input.keys import KeyEvent
from ..input.reader import read_key_event
from ..layout import compute_layout
from ..render import render_frame
from .terminal import TerminalController

logger = logging.getLogger(__name__)

POLL_TIMEOUT_MS = 50


def _terminal_size() -> os.terminal_size:
    return shutil.get_terminal_size((80, 24))


@dataclass(frozen=True)
class RuntimeLoopHooks:
    """Replaceable I/O edges of ``run_main_loop``."""

    read_event: Callable[[int, int], KeyEvent | None] = read_key_event
    terminal_size: Callable[[], os.terminal_size] = _terminal_size
    render: Callable[[BrowserView, int, int], str] = render_frame


def run_main_loop(
    controller: ModeController,
    terminal: TerminalController,
    stdin_fd: int,
    hooks: RuntimeLoopHooks | None = None,
) -> None:
    hooks = hooks or RuntimeLoopHooks()
    last_size: tuple[int, int] | None = None
    dirty = True

    with terminal.raw_mode():
        while not controller.exit_requested:
            term = hooks.terminal_size()
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                layout = compute_layout(*size)
                controller.set_viewports(
                    file_rows=layout.file_rows,
                    finder_rows=layout.finder_rows,
                    preview_rows=layout.body_rows,
                    preview_width=layout.preview_width,
                )
                dirty = True

            if dirty:
                terminal.write(hooks.render(controller.view_model(), *size))
                dirty = False

            event = hooks.read_event(stdin_fd, POLL_TIMEOUT_MS)
            if event is None:
                continue
            if controller.handle_key(event):
                dirty = True
    logger.info("session ended in %s", controller.cwd)


__all__ = ["POLL_TIMEOUT_MS", "RuntimeLoopHooks", "run_main_loop"]
