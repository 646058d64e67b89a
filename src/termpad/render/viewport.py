"""Scroll bookkeeping that keeps the cursor inside the visible window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScrollOffset:
    """Document (line, column) drawn at the top-left visible cell."""

    line: int = 0
    col: int = 0


def _follow_axis(offset: int, target: int, extent: int) -> int:
    if extent <= 0:
        return offset
    if target < offset:
        return target
    if target >= offset + extent:
        return target - extent + 1
    return offset


def follow_cursor(
    scroll: ScrollOffset, line: int, col: int, rows: int, cols: int
) -> ScrollOffset:
    """Return the scroll offset after bringing ``(line, col)`` into view.

    Each axis moves independently and only as far as needed: up/left to the
    cursor, or down/right until the cursor is the last visible row/column.
    """

    return ScrollOffset(
        line=_follow_axis(scroll.line, line, rows),
        col=_follow_axis(scroll.col, col, cols),
    )


__all__ = ["ScrollOffset", "follow_cursor"]
