"""Frame construction from document state and frame-to-frame diffing."""

from __future__ import annotations

from typing import List, Tuple

from termpad.buffer import Cursor, Document

from .frame import Cell, Frame, Style
from .viewport import ScrollOffset

Update = Tuple[int, Cell]


def glyph_for(char: str) -> str:
    """Map a document character onto a single displayable glyph."""

    if char == "\t":
        return " "
    if char.isprintable():
        return char
    return "?"


def build_frame(
    document: Document,
    cursor: Cursor,
    rows: int,
    cols: int,
    scroll: ScrollOffset,
) -> Frame:
    """Render the text visible through a ``rows`` x ``cols`` window.

    Screen row ``r`` shows document line ``r + scroll.line`` starting at
    column ``scroll.col``. Positions past the end of a line or of the
    document stay blank. The cell under the cursor gets ``Style.CURSOR``.
    """

    frame = Frame.blank(rows, cols)
    if rows <= 0 or cols <= 0:
        return frame

    text = document.text
    last_line = min(rows, document.line_count() - scroll.line)
    for r in range(max(last_line, 0)):
        line = document.line(r + scroll.line)
        start = line.start + scroll.col
        if start >= line.end:
            continue
        segment = text[start : min(line.end, start + cols)]
        base = r * cols
        for c, char in enumerate(segment):
            frame.cells[base + c] = Cell(glyph_for(char), Style.NORMAL)

    row, col = cursor.position(document)
    x, y = col - scroll.col, row - scroll.line
    if 0 <= x < cols and 0 <= y < rows:
        under = frame.get(x, y)
        frame.put(x, y, Cell(under.glyph, Style.CURSOR))
    return frame


def diff_and_emit(prev: Frame, next: Frame) -> List[Update]:
    """Return ``(index, cell)`` for every cell of ``next`` that changed.

    Identical frames produce an empty list, which tells the host to skip
    writing altogether. Frames of different sizes produce a full repaint.
    """

    if (prev.rows, prev.cols) != (next.rows, next.cols):
        return list(enumerate(next.cells))
    return [
        (i, cell)
        for i, (old, cell) in enumerate(zip(prev.cells, next.cells))
        if old != cell
    ]


__all__ = ["Update", "build_frame", "diff_and_emit", "glyph_for"]
