"""Screen geometry shared by the main loop and the renderer.

The screen is three stacked boxes: the path label, the body (file list and
preview side by side, or the finder/omnibar overlay), and the controls.
"""

from __future__ import annotations

from dataclasses import dataclass

PATH_PANEL_HEIGHT = 3
CONTROLS_PANEL_HEIGHT = 5
BODY_BORDER_LINES = 2
LIST_WIDTH_PERCENT = 40
MIN_WIDTH = 8


@dataclass(frozen=True)
class Layout:
    width: int
    height: int
    body_rows: int
    list_width: int
    preview_width: int

    @property
    def file_rows(self) -> int:
        return self.body_rows

    @property
    def finder_rows(self) -> int:
        """Result rows under the query line."""
        return max(1, self.body_rows - 1)

    @property
    def overlay_width(self) -> int:
        return max(1, self.width - 2)


def compute_layout(columns: int, lines: int) -> Layout:
    width = max(MIN_WIDTH, columns)
    chrome = PATH_PANEL_HEIGHT + CONTROLS_PANEL_HEIGHT + BODY_BORDER_LINES
    body_rows = max(1, lines - chrome)
    # Three vertical borders: left, divider, right.
    inner = max(2, width - 3)
    list_width = max(1, inner * LIST_WIDTH_PERCENT // 100)
    preview_width = max(1, inner - list_width)
    return Layout(
        width=width,
        height=chrome + body_rows,
        body_rows=body_rows,
        list_width=list_width,
        preview_width=preview_width,
    )


__all__ = ["Layout", "compute_layout"]
