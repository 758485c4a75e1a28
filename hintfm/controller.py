"""Mode controller: the browser's state machine and view-model owner.

The controller owns the file list, hint session, finder, omnibar and
clipboard, plus the current directory and the status line. Key events are
resolved into commands through ``KeyBindings`` and dispatched by mode.
External effects (search, preview, opening files) go through the injected
``Collaborators`` so the whole engine can be driven without a terminal.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from . import fs_actions
from .errors import HintfmError, InvalidDirectory, IOFailure, OutOfRange
from .input.bindings import FILE_LIST_SECTION, FINDER_SECTION, OMNIBAR_SECTION, KeyBindings
from .input.commands import (
    Backspace,
    ClearClipboard,
    Command,
    Delete,
    EntryScroll,
    Exit,
    ExitHint,
    FinderMode,
    HintChar,
    HintMode,
    OmnibarMode,
    Paste,
    SelectEntry,
    Submit,
    Write,
    Yank,
    refreshes_preview,
)
from .input.keys import KeyEvent
from .model import (
    Clipboard,
    Entry,
    FinderState,
    HintSequence,
    HintStatus,
    HintTable,
    Mode,
    OmnibarKind,
    OmnibarState,
    PaginatedList,
    list_entries,
)
from .search import SearchMode

logger = logging.getLogger(__name__)


def _noop() -> None:
    return None


@dataclass(frozen=True)
class Collaborators:
    """External effects the controller requests but does not implement."""

    search: Callable[[str, SearchMode, Path, int], list[str]]
    preview: Callable[[Path, int, int], list[str]]
    open_external: Callable[[Path], None]
    reset_search: Callable[[], None] = _noop


@dataclass(frozen=True)
class BrowserView:
    """Read-only snapshot of everything the renderer draws."""

    mode: Mode
    cwd: Path
    rows: tuple[Entry, ...]
    selected: int | None
    hints: tuple[str, ...]
    typed_hint: str
    preview: tuple[str, ...]
    clipboard: tuple[str, ...]
    finder_query: str
    finder_results: tuple[str, ...]
    finder_selected: int | None
    finder_zoxide: bool
    omnibar_title: str
    omnibar_text: str
    controls: tuple[str, ...]
    status: str
    status_is_error: bool

    @property
    def panels_visible(self) -> bool:
        """Whether the file list, preview and clipboard panels are shown."""
        return self.mode in (Mode.NORMAL, Mode.HINT)


_NORMAL_CONTROLS: tuple[tuple[tuple[str, str], ...], ...] = (
    (
        ("scroll_down", "down"),
        ("scroll_up", "up"),
        ("select_entry", "open"),
        ("hint_mode", "hints"),
        ("finder_fzf", "find"),
        ("finder_zoxide", "jump"),
        ("exit", "quit"),
    ),
    (
        ("rename", "rename"),
        ("touch", "new file"),
        ("mkdir", "new dir"),
        ("yank", "copy"),
        ("cut", "cut"),
        ("paste", "paste"),
        ("delete", "delete"),
        ("force_delete", "delete dir"),
        ("clear_clipboard", "clear clipboard"),
    ),
)
_FINDER_CONTROLS: tuple[tuple[tuple[str, str], ...], ...] = (
    (("select_entry", "open"), ("scroll_down", "down"), ("scroll_up", "up"), ("exit", "cancel")),
    (("backspace", "delete char"),),
)
_OMNIBAR_CONTROLS: tuple[tuple[tuple[str, str], ...], ...] = (
    (("submit", "confirm"), ("exit", "cancel")),
    (("backspace", "delete char"),),
)


class ModeController:
    """Top-level interaction state machine for one browsing session."""

    def __init__(
        self,
        start: Path,
        bindings: KeyBindings,
        collaborators: Collaborators,
        hint_table: HintTable | None = None,
    ) -> None:
        self.bindings = bindings
        self.collaborators = collaborators
        self.hint_table = hint_table or HintTable()
        self.hint_sequence: HintSequence | None = None
        self.file_list: PaginatedList[Entry] = PaginatedList()
        self.finder = FinderState()
        self.omnibar = OmnibarState()
        self.clipboard = Clipboard()
        self.mode = Mode.NORMAL
        self.exit_requested = False
        self.status_message = ""
        self.status_is_error = False
        self.preview_lines: list[str] = []
        self.preview_rows = 1
        self.preview_width = 1
        self.cwd = Path(start).absolute()
        self.change_directory(start)
        self.refresh_preview()

    # Status line

    def report(self, message: str, *, error: bool = False) -> None:
        self.status_message = message
        self.status_is_error = error
        if error:
            logger.warning("%s", message)
        else:
            logger.info("%s", message)

    def clear_status(self) -> None:
        self.status_message = ""
        self.status_is_error = False

    # Input

    def handle_key(self, event: KeyEvent) -> bool:
        """Resolve and dispatch one key event; return whether a command ran."""
        if self.exit_requested:
            return False
        command = self.bindings.resolve(self.mode, event)
        if command is None:
            return False
        self.dispatch(command)
        return True

    def dispatch(self, command: Command) -> None:
        """Apply ``command`` in the current mode.

        Library errors are reported on the status line; the mode the handler
        left behind stays in effect.
        """
        if self.exit_requested:
            return
        self.clear_status()
        handler = {
            Mode.NORMAL: self._dispatch_normal,
            Mode.HINT: self._dispatch_hint,
            Mode.FINDER: self._dispatch_finder,
            Mode.OMNIBAR: self._dispatch_omnibar,
        }[self.mode]
        try:
            handler(command)
        except HintfmError as exc:
            self.report(str(exc), error=True)
        if refreshes_preview(command):
            self.refresh_preview()

    def _dispatch_normal(self, command: Command) -> None:
        if isinstance(command, EntryScroll):
            self.file_list.scroll_entry(command.down)
        elif isinstance(command, SelectEntry):
            self.open_selected_entry()
        elif isinstance(command, HintMode):
            self.enter_hint_mode()
        elif isinstance(command, FinderMode):
            self.open_finder(command.zoxide)
        elif isinstance(command, OmnibarMode):
            self.open_omnibar(command.kind)
        elif isinstance(command, Yank):
            self.yank(command.cut)
        elif isinstance(command, Paste):
            self.paste()
        elif isinstance(command, Delete):
            self.delete(command.force)
        elif isinstance(command, ClearClipboard):
            self.clipboard.clear()
            self.report("clipboard cleared")
        elif isinstance(command, Exit):
            logger.info("exit requested")
            self.exit_requested = True

    def _dispatch_hint(self, command: Command) -> None:
        if isinstance(command, ExitHint):
            self.leave_hint_mode()
        elif isinstance(command, HintChar):
            self.feed_hint(command.char)

    def _dispatch_finder(self, command: Command) -> None:
        if isinstance(command, Write):
            self.finder.query.insert(command.char)
            self.run_search()
        elif isinstance(command, Backspace):
            self.finder.query.backspace()
            self.run_search()
        elif isinstance(command, EntryScroll):
            self.finder.results.scroll_entry(command.down)
        elif isinstance(command, SelectEntry):
            self.select_finder_result()
        elif isinstance(command, Exit):
            self.close_finder()

    def _dispatch_omnibar(self, command: Command) -> None:
        if isinstance(command, Write):
            self.omnibar.buffer.insert(command.char)
        elif isinstance(command, Backspace):
            self.omnibar.buffer.backspace()
        elif isinstance(command, Submit):
            self.submit_omnibar()
        elif isinstance(command, Exit):
            self.close_omnibar()

    # Directory

    def change_directory(self, target: Path) -> None:
        """Make ``target`` the current directory.

        Nothing changes unless the target resolves to a readable directory.
        The listing starts again at its first row.
        """
        try:
            resolved = Path(target).resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise InvalidDirectory(f"cannot open {target}: {exc}") from exc
        if not resolved.is_dir():
            raise InvalidDirectory(f"{resolved} is not a directory")
        entries = list_entries(resolved)
        try:
            os.chdir(resolved)
        except OSError as exc:
            raise InvalidDirectory(f"cannot enter {resolved}: {exc.strerror or exc}") from exc

        self.cwd = resolved
        self.file_list.replace(entries)
        logger.info("changed directory to %s", resolved)

    def reload(self) -> None:
        """Re-read the current directory through the directory-change path."""
        self.change_directory(self.cwd)

    def selected_entry(self) -> Entry:
        return self.file_list.current()

    def open_selected_entry(self) -> None:
        entry = self.selected_entry()
        target = self.cwd / entry.name
        if entry.is_dir:
            self.change_directory(target)
        else:
            self.collaborators.open_external(target)

    # Hint mode

    def enter_hint_mode(self) -> None:
        visible = min(self.file_list.visible_count(), len(self.hint_table))
        if visible == 0:
            self.report("nothing to jump to", error=True)
            return
        self.hint_sequence = HintSequence(self.hint_table, visible)
        self.mode = Mode.HINT

    def leave_hint_mode(self) -> None:
        self.hint_sequence = None
        self.mode = Mode.NORMAL

    def feed_hint(self, char: str) -> None:
        if self.hint_sequence is None:
            self.leave_hint_mode()
            return
        step = self.hint_sequence.feed(char)
        if step.status is HintStatus.PENDING:
            return
        if step.status is HintStatus.RESOLVED and step.row is not None:
            self.file_list.select_visible_row(step.row)
        self.leave_hint_mode()

    # Finder

    def open_finder(self, zoxide_mode: bool) -> None:
        self.collaborators.reset_search()
        self.finder.open(zoxide_mode)
        self.mode = Mode.FINDER
        self.run_search()

    def close_finder(self) -> None:
        self.finder.close()
        self.mode = Mode.NORMAL

    def run_search(self) -> None:
        """Re-run the search for the current query and replace the results."""
        mode = SearchMode.HISTORY if self.finder.zoxide_mode else SearchMode.INDEX
        try:
            results = self.collaborators.search(
                self.finder.query.text, mode, self.cwd, self.finder.results.viewport
            )
        except HintfmError:
            self.finder.update_files(())
            raise
        self.finder.update_files(results)

    def select_finder_result(self) -> None:
        selection = self.finder.selection()
        if selection is None:
            return
        zoxide_mode = self.finder.zoxide_mode
        target = Path(selection) if zoxide_mode else self.cwd / selection
        self.close_finder()
        # history results are always directories, even stale ones
        if zoxide_mode or target.is_dir():
            self.change_directory(target)
        else:
            self.collaborators.open_external(target)

    # Omnibar

    def open_omnibar(self, kind: OmnibarKind) -> None:
        initial = ""
        if kind is OmnibarKind.RENAME:
            initial = self._renameable_entry().name
        self.omnibar.open(kind, initial)
        self.mode = Mode.OMNIBAR

    def close_omnibar(self) -> None:
        self.omnibar.close()
        self.mode = Mode.NORMAL

    def _renameable_entry(self) -> Entry:
        entry = self.selected_entry()
        if entry.is_synthetic or entry.is_dir:
            raise IOFailure(f"cannot rename {entry.name}: only files can be renamed")
        return entry

    def submit_omnibar(self) -> None:
        """Run the omnibar action; on failure the omnibar stays open for correction."""
        kind = self.omnibar.kind
        text = self.omnibar.buffer.text
        if kind is OmnibarKind.RENAME:
            source = self.cwd / self._renameable_entry().name
            created = fs_actions.rename_path(source, text)
            message = f"renamed {source.name} to {created.name}"
        elif kind is OmnibarKind.TOUCH:
            created = fs_actions.create_file(self.cwd, text)
            message = f"touched {created.name}"
        else:
            created = fs_actions.create_directory(self.cwd, text)
            message = f"created {created.name}/"
        self.close_omnibar()
        self.reload()
        self.report(message)

    # Clipboard

    def yank(self, cut: bool) -> None:
        entry = self.selected_entry()
        if entry.is_dir:
            return
        path = self.cwd / entry.name
        if self.clipboard.push(path, cut):
            self.report(f"{'cut' if cut else 'copied'} {entry.name}")

    def paste(self) -> None:
        """Copy (or move) every clipboard entry into the current directory.

        A failed entry keeps its source and does not stop the others. The
        clipboard is emptied afterwards either way.
        """
        if not self.clipboard:
            self.report("clipboard is empty", error=True)
            return
        done = 0
        failures: list[str] = []
        for entry in list(self.clipboard):
            try:
                fs_actions.copy_file(entry.path, self.cwd)
                if entry.cut:
                    fs_actions.remove_path(entry.path)
            except IOFailure as exc:
                failures.append(str(exc))
                continue
            done += 1
        self.clipboard.clear()
        self.reload()
        summary = f"pasted {done} file{'s' if done != 1 else ''}"
        if failures:
            self.report(f"{summary}, {len(failures)} failed: {failures[0]}", error=True)
        else:
            self.report(summary)

    def delete(self, force: bool) -> None:
        entry = self.selected_entry()
        if entry.is_synthetic:
            raise IOFailure(f"cannot delete {entry.name!r}")
        if entry.is_dir and not force:
            raise IOFailure(f"{entry.name} is a directory; use force delete")
        fs_actions.remove_path(self.cwd / entry.name, recursive=force)
        self.reload()
        self.report(f"deleted {entry.name}")

    # Preview and viewports

    def refresh_preview(self) -> None:
        try:
            entry = self.selected_entry()
        except OutOfRange:
            self.preview_lines = []
            return
        try:
            self.preview_lines = self.collaborators.preview(
                self.cwd / entry.name, self.preview_rows, self.preview_width
            )
        except HintfmError as exc:
            logger.debug("preview failed for %s: %s", entry.name, exc)
            self.preview_lines = []

    def set_viewports(self, file_rows: int, finder_rows: int, preview_rows: int, preview_width: int) -> None:
        """Apply new panel sizes after a terminal resize."""
        self.file_list.set_viewport(file_rows)
        self.file_list.select_index(self.file_list.absolute_index())
        self.finder.results.set_viewport(finder_rows)
        if self.finder.active:
            self.finder.update_files(self.finder.results.entries)
        if (preview_rows, preview_width) != (self.preview_rows, self.preview_width):
            self.preview_rows = max(1, preview_rows)
            self.preview_width = max(1, preview_width)
            self.refresh_preview()

    # View-model

    def _controls(self) -> tuple[str, ...]:
        if self.mode is Mode.FINDER:
            section, layout = FINDER_SECTION, _FINDER_CONTROLS
        elif self.mode is Mode.OMNIBAR:
            section, layout = OMNIBAR_SECTION, _OMNIBAR_CONTROLS
        elif self.mode is Mode.HINT:
            cancel = self.bindings.key_for(FILE_LIST_SECTION, "exit_hint") or "esc"
            return ("type a hint to jump", f"{cancel} cancel")
        else:
            section, layout = FILE_LIST_SECTION, _NORMAL_CONTROLS
        lines: list[str] = []
        for row in layout:
            parts = []
            for action, label in row:
                key = self.bindings.key_for(section, action)
                if key:
                    parts.append(f"{key} {label}")
            lines.append("  ".join(parts))
        return tuple(lines)

    def view_model(self) -> BrowserView:
        rows = tuple(self.file_list.visible())
        selected = self.file_list.selected if rows else None
        hints: tuple[str, ...] = ()
        typed_hint = ""
        if self.mode is Mode.HINT:
            hints = tuple(self.hint_table.lookup_code(row) or "" for row in range(len(rows)))
            if self.hint_sequence is not None:
                typed_hint = self.hint_sequence.typed
        finder_results = tuple(self.finder.results.entries)
        return BrowserView(
            mode=self.mode,
            cwd=self.cwd,
            rows=rows,
            selected=selected,
            hints=hints,
            typed_hint=typed_hint,
            preview=tuple(self.preview_lines),
            clipboard=tuple(self.clipboard.display_lines()),
            finder_query=self.finder.query.text,
            finder_results=finder_results,
            finder_selected=self.finder.results.selected if finder_results else None,
            finder_zoxide=self.finder.zoxide_mode,
            omnibar_title=self.omnibar.kind.title if self.omnibar.active else "",
            omnibar_text=self.omnibar.buffer.text,
            controls=self._controls(),
            status=self.status_message,
            status_is_error=self.status_is_error,
        )


__all__ = ["BrowserView", "Collaborators", "ModeController"]
