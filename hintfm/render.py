"""ANSI frame rendering for the browser view-model.

``render_frame`` is a pure function of the view and the terminal size; the
main loop writes its result in a single ``os.write``.
"""

from __future__ import annotations

from .ansi import RESET, clip_ansi_line, pad_ansi_line, selected_with_ansi
from .controller import BrowserView
from .layout import Layout, compute_layout
from .model import Entry, Mode

DIRECTORY_STYLE = "\033[1;38;5;81m"
HINT_STYLE = "\033[1;38;5;229m"
HINT_TYPED_STYLE = "\033[1;38;5;203m"
DIM_STYLE = "\033[2;38;5;250m"
TITLE_STYLE = "\033[1;38;5;81m"
ERROR_STYLE = "\033[38;5;203m"
OK_STYLE = "\033[38;5;114m"
CURSOR = "\033[7m \033[0m"
CLIPBOARD_MAX_ROWS = 5

MODE_TITLES = {
    Mode.NORMAL: "Keys",
    Mode.HINT: "Hint",
    Mode.FINDER: "Finder",
    Mode.OMNIBAR: "Omnibar",
}


def _top_border(widths: list[int], titles: list[str]) -> str:
    parts: list[str] = []
    for width, title in zip(widths, titles):
        if title and width > len(title) + 3:
            label = f"─ {title} "
            parts.append(f"{TITLE_STYLE}{label}{RESET}" + "─" * (width - len(label)))
        else:
            parts.append("─" * width)
    return "┌" + "┬".join(parts) + "┐"


def _bottom_border(widths: list[int]) -> str:
    return "└" + "┴".join("─" * width for width in widths) + "┘"


def _boxed(cells: list[str], widths: list[int]) -> str:
    return "│" + "│".join(pad_ansi_line(cell, width) for cell, width in zip(cells, widths)) + "│"


def _path_label(view: BrowserView, width: int) -> str:
    label = str(view.cwd)
    if len(label) > width:
        label = "…" + label[-(width - 1) :] if width > 1 else label[-width:]
    return label


def entry_label(entry: Entry) -> str:
    if entry.is_synthetic:
        return f"{DIRECTORY_STYLE}{entry.name}{RESET}"
    if entry.is_dir:
        return f"{DIRECTORY_STYLE}{entry.name}/{RESET}"
    return entry.name


def _hint_prefix(code: str, typed: str) -> str:
    if typed and code.startswith(typed):
        rest = code[len(typed) :].ljust(2 - len(typed))
        return f"{HINT_TYPED_STYLE}{typed}{HINT_STYLE}{rest}{RESET} "
    return f"{HINT_STYLE}{code:<2}{RESET} "


def file_list_cells(view: BrowserView, layout: Layout) -> list[str]:
    cells: list[str] = []
    for row, entry in enumerate(view.rows):
        text = entry_label(entry)
        if view.mode is Mode.HINT:
            code = view.hints[row] if row < len(view.hints) else ""
            text = _hint_prefix(code, view.typed_hint) + text
        else:
            text = " " + text
        if row == view.selected and view.mode is Mode.NORMAL:
            text = selected_with_ansi(pad_ansi_line(text, layout.list_width))
        cells.append(text)
    cells.extend([""] * (layout.body_rows - len(cells)))
    return cells


def preview_cells(view: BrowserView, layout: Layout) -> list[str]:
    cells = list(view.preview[: layout.body_rows])
    cells.extend([""] * (layout.body_rows - len(cells)))
    if not view.clipboard:
        return cells

    shown = list(view.clipboard[-CLIPBOARD_MAX_ROWS:])
    header = f"{DIM_STYLE}── Clipboard ({len(view.clipboard)}) " + "─" * layout.preview_width + RESET
    section = [header, *shown][-layout.body_rows :]
    return cells[: layout.body_rows - len(section)] + section


def _finder_cells(view: BrowserView, layout: Layout) -> list[str]:
    cells = [f"{HINT_STYLE}>{RESET} {view.finder_query}{CURSOR}"]
    for row, label in enumerate(view.finder_results):
        text = " " + label
        if row == view.finder_selected:
            text = selected_with_ansi(pad_ansi_line(text, layout.overlay_width))
        cells.append(text)
    if len(cells) == 1 and view.finder_query:
        cells.append(f"{DIM_STYLE} no matches{RESET}")
    return cells


def _omnibar_cells(view: BrowserView) -> list[str]:
    return [f"{HINT_STYLE}>{RESET} {view.omnibar_text}{CURSOR}"]


def _status_cell(view: BrowserView) -> str:
    if not view.status:
        return ""
    style = ERROR_STYLE if view.status_is_error else OK_STYLE
    return f"{style}{view.status}{RESET}"


def render_lines(view: BrowserView, layout: Layout) -> list[str]:
    full = [layout.overlay_width]
    lines = [
        _top_border(full, ["hintfm"]),
        _boxed([_path_label(view, layout.overlay_width)], full),
        _bottom_border(full),
    ]

    if view.panels_visible:
        split = [layout.list_width, layout.preview_width]
        lines.append(_top_border(split, ["Files", "Preview"]))
        for left, right in zip(file_list_cells(view, layout), preview_cells(view, layout)):
            lines.append(_boxed([left, right], split))
        lines.append(_bottom_border(split))
    else:
        if view.mode is Mode.FINDER:
            title = "Directory history" if view.finder_zoxide else "Find file"
            cells = _finder_cells(view, layout)
        else:
            title = view.omnibar_title
            cells = _omnibar_cells(view)
        cells = cells[: layout.body_rows] + [""] * max(0, layout.body_rows - len(cells))
        lines.append(_top_border(full, [title]))
        lines.extend(_boxed([cell], full) for cell in cells)
        lines.append(_bottom_border(full))

    controls = list(view.controls[:2]) + [""] * max(0, 2 - len(view.controls))
    lines.append(_top_border(full, [MODE_TITLES[view.mode]]))
    lines.extend(_boxed([f"{DIM_STYLE}{line}{RESET}" if line else ""], full) for line in controls)
    lines.append(_boxed([_status_cell(view)], full))
    lines.append(_bottom_border(full))
    return lines


def render_frame(view: BrowserView, width: int, height: int) -> str:
    """Return the escape sequence that redraws the whole screen for ``view``."""
    layout = compute_layout(width, height)
    lines = [clip_ansi_line(line, width) + RESET for line in render_lines(view, layout)[: max(1, height)]]
    return "\033[H\033[J" + "\r\n".join(lines)


__all__ = [
    "entry_label",
    "file_list_cells",
    "preview_cells",
    "render_frame",
    "render_lines",
]
