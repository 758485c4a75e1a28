"""Terminal control for the TUI session: raw mode and the alternate screen."""

from __future__ import annotations

import contextlib
import os
import termios
import tty
from collections.abc import Iterator


class TerminalController:
    """Owns the tty state of one session and restores it on every exit path."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Alternate screen, hidden cursor.
        self.write("\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        self.write("\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, text: str) -> None:
        data = text.encode("utf-8", errors="replace")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController"]
