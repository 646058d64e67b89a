"""Flat character storage with a derived line index."""

from __future__ import annotations

from typing import Optional, Sequence

from termpad.runtime import telemetry

from .errors import IoFailure, NoTarget
from .lines import Line, LineIndex
from .validation import ensure_line, ensure_offset

# Undecodable bytes round-trip through lone surrogates, so a save writes back
# exactly the bytes that were loaded.
_ERRORS = "surrogateescape"


class Document:
    """Mutable text plus the line boundaries derived from it.

    ``content`` is the single source of truth; ``lines`` is patched after every
    single-character edit and always matches a full rescan of ``content``.
    """

    def __init__(
        self,
        content: str = "",
        *,
        path: Optional[str] = None,
        encoding: str = "utf-8",
    ) -> None:
        self._content = content
        self._index = LineIndex(content)
        self.path = path
        self.encoding = encoding
        self.version = 0
        self.dirty = False

    @classmethod
    def new_empty(cls, *, encoding: str = "utf-8") -> "Document":
        return cls("", encoding=encoding)

    @classmethod
    def open(cls, path: str, *, encoding: str = "utf-8") -> "Document":
        """Load ``path`` byte for byte.

        Raises ``IoFailure`` when the file cannot be read; falling back to an
        empty document is the caller's decision.
        """

        try:
            with open(path, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise IoFailure(
                f"Cannot open {path}: {exc.strerror or exc}", path=path
            ) from exc
        return cls(raw.decode(encoding, _ERRORS), path=path, encoding=encoding)

    @property
    def text(self) -> str:
        return self._content

    @property
    def lines(self) -> Sequence[Line]:
        return tuple(self._index.lines())

    def __len__(self) -> int:
        return len(self._content)

    def line_count(self) -> int:
        return len(self._index)

    def line(self, index: int) -> Line:
        ensure_line(self, index)
        return self._index.line(index)

    def line_text(self, index: int) -> str:
        line = self.line(index)
        return self._content[line.start : line.end]

    def line_at(self, offset: int) -> Line:
        """Return the line whose span (terminator included) holds ``offset``."""

        ensure_offset(self, offset)
        return self._index.line(self._index.index_of(offset))

    def insert(self, offset: int, char: str) -> None:
        """Insert ``char`` before ``offset``."""

        if len(char) != 1:
            raise ValueError(f"insert expects a single character, got {char!r}")
        ensure_offset(self, offset)
        self._content = self._content[:offset] + char + self._content[offset:]
        self._index.inserted(offset, char)
        self._touch()

    def delete(self, offset: int) -> Optional[str]:
        """Remove the character before ``offset`` and return it.

        A no-op returning ``None`` at offset 0.
        """

        ensure_offset(self, offset)
        if offset == 0:
            return None
        position = offset - 1
        removed = self._content[position]
        self._content = self._content[:position] + self._content[offset:]
        self._index.deleted(position, removed)
        self._touch()
        return removed

    def save(self) -> None:
        if self.path is None:
            raise NoTarget("Document has no file name")
        data = self._content.encode(self.encoding, _ERRORS)
        try:
            with open(self.path, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            telemetry.record_event(
                "document.save_failed",
                level="error",
                data={"path": self.path, "error": str(exc)},
            )
            raise IoFailure(
                f"Cannot write {self.path}: {exc.strerror or exc}", path=self.path
            ) from exc
        self.dirty = False
        telemetry.record_event(
            "document.saved", data={"path": self.path, "bytes": len(data)}
        )

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["Document"]
