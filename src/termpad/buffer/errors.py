"""Error taxonomy for document, cursor, and history operations."""

from __future__ import annotations

from typing import Optional


class EditorError(RuntimeError):
    """Base class for every failure raised by the editing core."""

    def __init__(
        self,
        message: str,
        *,
        offset: Optional[int] = None,
        line: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.offset = offset
        self.line = line


class OutOfRange(EditorError, IndexError):
    """An offset fell outside ``[0, len(document)]``.

    Only reachable through misuse of the document API; the session never
    produces one when cursor and document are driven together.
    """


class NoSuchLine(EditorError, IndexError):
    """A line index was ``>= line_count()``."""


class NoTarget(EditorError):
    """Save was requested before the document had a path."""


class IoFailure(EditorError):
    """Reading or writing the backing file failed."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "EditorError",
    "OutOfRange",
    "NoSuchLine",
    "NoTarget",
    "IoFailure",
]
