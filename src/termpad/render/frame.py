"""Fixed-size grids of styled cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List


class Style(str, Enum):
    NORMAL = "normal"
    CURSOR = "cursor"
    STATUS = "status"
    GUTTER = "gutter"


@dataclass(frozen=True, slots=True)
class Cell:
    glyph: str = " "
    style: Style = Style.NORMAL


BLANK = Cell()


@dataclass(slots=True)
class Frame:
    """One rendered snapshot; cell ``i`` sits at ``(i % cols, i // cols)``."""

    rows: int
    cols: int
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = self.rows * self.cols
        if not self.cells:
            self.cells = [BLANK] * size
        elif len(self.cells) != size:
            raise ValueError(
                f"Frame of {self.rows}x{self.cols} needs {size} cells, "
                f"got {len(self.cells)}"
            )

    @classmethod
    def blank(cls, rows: int, cols: int) -> "Frame":
        return cls(rows=rows, cols=cols)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def index(self, x: int, y: int) -> int:
        return y * self.cols + x

    def get(self, x: int, y: int) -> Cell:
        return self.cells[self.index(x, y)]

    def put(self, x: int, y: int, cell: Cell) -> None:
        if 0 <= x < self.cols and 0 <= y < self.rows:
            self.cells[self.index(x, y)] = cell

    def write(self, x: int, y: int, text: str, style: Style = Style.NORMAL) -> None:
        """Write ``text`` left to right from ``(x, y)``, clipped to the row."""

        for i, glyph in enumerate(text):
            if x + i >= self.cols:
                break
            self.put(x + i, y, Cell(glyph, style))

    def blit(self, source: "Frame", *, left: int = 0, top: int = 0) -> None:
        """Copy ``source`` into this frame with its origin at ``(left, top)``."""

        for y in range(source.rows):
            for x in range(source.cols):
                self.put(left + x, top + y, source.cells[y * source.cols + x])

    def row_text(self, y: int) -> str:
        start = y * self.cols
        return "".join(cell.glyph for cell in self.cells[start : start + self.cols])


__all__ = ["Style", "Cell", "BLANK", "Frame"]
