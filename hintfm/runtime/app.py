"""Session bootstrap: wires the real collaborators and starts the loop."""

from __future__ import annotations

import sys
from functools import partial
from pathlib import Path

from ..controller import Collaborators, ModeController
from ..editor import open_external
from ..input.bindings import KeyBindings
from ..preview import preview
from ..search import Searcher
from .loop import run_main_loop
from .terminal import TerminalController


def build_collaborators(terminal: TerminalController, searcher: Searcher | None = None) -> Collaborators:
    searcher = searcher or Searcher()
    return Collaborators(
        search=searcher,
        preview=preview,
        open_external=partial(
            open_external,
            disable_tui_mode=terminal.disable_tui_mode,
            enable_tui_mode=terminal.enable_tui_mode,
        ),
        reset_search=searcher.reset,
    )


def run_browser(start: Path, bindings: KeyBindings) -> Path:
    """Browse from ``start`` until the user exits; return the final directory."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    controller = ModeController(start, bindings, build_collaborators(terminal))
    run_main_loop(controller, terminal, stdin_fd)
    return controller.cwd


__all__ = ["build_collaborators", "run_browser"]
