"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import NoSuchLine, OutOfRange

if TYPE_CHECKING:
    from .document import Document


def ensure_offset(document: "Document", offset: int) -> int:
    if offset < 0 or offset > len(document):
        raise OutOfRange(
            f"Offset {offset} outside [0, {len(document)}]", offset=offset
        )
    return offset


def ensure_line(document: "Document", index: int) -> int:
    if index < 0 or index >= document.line_count():
        raise NoSuchLine(
            f"Line {index} outside [0, {document.line_count()})", line=index
        )
    return index
