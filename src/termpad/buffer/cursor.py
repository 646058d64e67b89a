"""Single insertion point addressed by flat offset."""

from __future__ import annotations

from typing import Tuple

from .document import Document
from .validation import ensure_offset

Position = Tuple[int, int]  # (line, column)


class Cursor:
    """Flat offset into a document; line and column are always derived.

    The cursor never edits the document. Callers sequence the two: insert at
    the old offset then advance, or delete before the offset then retreat.
    """

    def __init__(self, offset: int = 0) -> None:
        self.offset = offset

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset})"

    def position(self, document: Document) -> Position:
        line = document.line_at(self.offset)
        return (line.index, self.offset - line.start)

    def place(self, document: Document, offset: int) -> None:
        self.offset = ensure_offset(document, offset)

    def move_horizontal(self, document: Document, delta: int) -> None:
        # Crossing a newline falls out of the clamp on the flat offset.
        self.offset = max(0, min(self.offset + delta, len(document)))

    def move_vertical(self, document: Document, delta: int) -> None:
        row, col = self.position(document)
        target_row = max(0, min(row + delta, document.line_count() - 1))
        if target_row == row:
            return
        target = document.line(target_row)
        self.offset = target.start + min(col, target.length)

    def move_to_line_home(self, document: Document) -> None:
        self.offset = document.line_at(self.offset).start

    def move_to_line_end(self, document: Document) -> None:
        self.offset = document.line_at(self.offset).end

    def move_to_document_top(self, document: Document) -> None:
        self.offset = document.line(0).start

    def move_to_document_bottom(self, document: Document) -> None:
        self.offset = document.line(document.line_count() - 1).start


__all__ = ["Cursor", "Position"]
