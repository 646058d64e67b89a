"""Document storage, cursor model, and undo log."""

from .cursor import Cursor, Position
from .document import Document
from .errors import EditorError, IoFailure, NoSuchLine, NoTarget, OutOfRange
from .history import Delete, HistoryLog, HistoryRecord, Insert
from .lines import Line, LineIndex, scan_lines
from .validation import ensure_line, ensure_offset

__all__ = [
    "Document",
    "Line",
    "LineIndex",
    "scan_lines",
    "Cursor",
    "Position",
    "HistoryLog",
    "HistoryRecord",
    "Insert",
    "Delete",
    "EditorError",
    "OutOfRange",
    "NoSuchLine",
    "NoTarget",
    "IoFailure",
    "ensure_offset",
    "ensure_line",
]
