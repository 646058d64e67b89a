"""Line boundary bookkeeping for flat text content."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True, slots=True)
class Line:
    """One line of a document; ``end`` excludes the newline terminator."""

    start: int
    end: int
    index: int

    @property
    def length(self) -> int:
        return self.end - self.start


def scan_lines(text: str) -> List[Line]:
    """Compute line descriptors with a full pass over ``text``."""

    lines: List[Line] = []
    start = 0
    newline = text.find("\n")
    while newline != -1:
        lines.append(Line(start, newline, len(lines)))
        start = newline + 1
        newline = text.find("\n", start)
    lines.append(Line(start, len(text), len(lines)))
    return lines


class LineIndex:
    """Sorted line start offsets patched in place after single-char edits.

    Only the starts downstream of an edit move, so an edit costs
    ``O(lines after the edit point)`` instead of a full rescan of the text.
    """

    def __init__(self, text: str = "") -> None:
        self._starts: List[int] = [line.start for line in scan_lines(text)]
        self._length = len(text)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return len(self._starts)

    def line(self, index: int) -> Line:
        start = self._starts[index]
        if index + 1 < len(self._starts):
            end = self._starts[index + 1] - 1
        else:
            end = self._length
        return Line(start, end, index)

    def lines(self) -> List[Line]:
        return [self.line(index) for index in range(len(self._starts))]

    def index_of(self, offset: int) -> int:
        """Return the index of the line containing ``offset``."""

        return bisect_right(self._starts, offset) - 1

    def inserted(self, offset: int, char: str) -> None:
        """Account for ``char`` having been inserted before ``offset``."""

        row = self.index_of(offset)
        self._shift(row + 1, 1)
        if char == "\n":
            self._starts.insert(row + 1, offset + 1)
        self._length += 1

    def deleted(self, position: int, char: str) -> None:
        """Account for ``char`` having been removed from ``position``."""

        row = self.index_of(position)
        if char == "\n":
            # The removed newline terminated ``row``; the next line merges in.
            del self._starts[row + 1]
        self._shift(row + 1, -1)
        self._length -= 1

    def _shift(self, first: int, delta: int) -> None:
        starts = self._starts
        for i in range(first, len(starts)):
            starts[i] += delta


__all__ = ["Line", "LineIndex", "scan_lines"]
