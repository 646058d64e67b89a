"""Single-step undo log of character edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from termpad.runtime import telemetry

from .document import Document


@dataclass(frozen=True, slots=True)
class Insert:
    """``char`` was inserted before ``offset``."""

    offset: int
    char: str


@dataclass(frozen=True, slots=True)
class Delete:
    """``char`` was removed from position ``offset``."""

    offset: int
    char: str


HistoryRecord = Union[Insert, Delete]


class HistoryLog:
    """LIFO of applied edits. Undone records are dropped; there is no redo."""

    def __init__(self) -> None:
        self._records: List[HistoryRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def can_undo(self) -> bool:
        return bool(self._records)

    def record(self, op: HistoryRecord) -> None:
        self._records.append(op)

    def undo(self, document: Document) -> Optional[int]:
        """Revert the newest record and return where the cursor belongs.

        Returns ``None`` (and leaves the document alone) when the log is empty.
        """

        if not self._records:
            return None
        op = self._records.pop()
        if isinstance(op, Insert):
            document.delete(op.offset + 1)
            cursor = op.offset
        else:
            document.insert(op.offset, op.char)
            cursor = op.offset + 1
        telemetry.record_event(
            "history.undo",
            level="debug",
            data={"op": type(op).__name__, "offset": op.offset, "left": len(self)},
        )
        return cursor


__all__ = ["HistoryLog", "HistoryRecord", "Insert", "Delete"]
