"""Textual widget that holds the drawn cell grid and repaints dirty rows."""

from __future__ import annotations

from itertools import groupby
from typing import List, Sequence, Tuple

from rich.segment import Segment
from rich.style import Style as RichStyle
from textual import events
from textual.geometry import Region
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from termpad.render import BLANK, Cell, Style, Update

CELL_STYLES = {
    Style.NORMAL: RichStyle(),
    Style.CURSOR: RichStyle(reverse=True),
    Style.STATUS: RichStyle(color="black", bgcolor="grey70"),
    Style.GUTTER: RichStyle(dim=True),
}


class FrameView(Widget):
    """Line-API widget backed by a flat ``rows * cols`` list of cells."""

    DEFAULT_CSS = """
    FrameView {
        width: 100%;
        height: 100%;
    }
    """

    class Resized(Message):
        """Posted when the widget's cell grid changes size."""

        def __init__(self, rows: int, cols: int) -> None:
            super().__init__()
            self.rows = rows
            self.cols = cols

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.rows = 0
        self.cols = 0
        self.cursor: Tuple[int, int] = (0, 0)
        self._cells: List[Cell] = []

    def on_resize(self, event: events.Resize) -> None:
        self.rows = event.size.height
        self.cols = event.size.width
        self._cells = [BLANK] * (self.rows * self.cols)
        self.post_message(self.Resized(self.rows, self.cols))

    def apply(self, updates: Sequence[Update], cursor: Tuple[int, int]) -> None:
        """Write changed cells and refresh only the rows they touch."""

        self.cursor = cursor
        if not self.cols:
            return
        dirty = set()
        for index, cell in updates:
            if index < len(self._cells):
                self._cells[index] = cell
                dirty.add(index // self.cols)
        for y in sorted(dirty):
            self.refresh(Region(0, y, self.cols, 1))

    def render_line(self, y: int) -> Strip:
        if y >= self.rows or not self.cols:
            return Strip.blank(self.size.width)
        row = self._cells[y * self.cols : (y + 1) * self.cols]
        segments = [
            Segment("".join(cell.glyph for cell in run), CELL_STYLES[style])
            for style, run in groupby(row, key=lambda cell: cell.style)
        ]
        return Strip(segments, self.cols)


__all__ = ["FrameView", "CELL_STYLES"]
