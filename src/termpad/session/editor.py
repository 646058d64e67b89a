"""Editor session: owns the document, cursor, and undo log, and applies keys."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from termpad.buffer import (
    Cursor,
    Delete,
    Document,
    HistoryLog,
    Insert,
    IoFailure,
    NoTarget,
)
from termpad.config import EditorConfig
from termpad.render import ScrollOffset, follow_cursor, text_area
from termpad.runtime import telemetry

from .commands import Command, CommandResult, KeyCommand
from .prompt import FilenamePrompt

Handler = Callable[[KeyCommand], CommandResult]


@dataclass(slots=True)
class StatusMessage:
    """Transient message whose visibility is gated by elapsed wall time."""

    text: str = ""
    created: float = field(default_factory=time.monotonic)

    def visible(self, now: float, timeout: float) -> bool:
        return bool(self.text) and now - self.created < timeout


class SessionBus:
    """Minimal event bus the host subscribes to for save/undo/quit signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class EditorSession:
    """Single editing session; every key goes through ``dispatch``."""

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        config: Optional[EditorConfig] = None,
        bus: Optional[SessionBus] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or EditorConfig()
        if document is None:
            document = Document.new_empty(encoding=self.config.encoding)
        self.document = document
        self.cursor = Cursor()
        self.history = HistoryLog()
        self.scroll = ScrollOffset()
        self.bus = bus or SessionBus()
        self.prompt: Optional[FilenamePrompt] = None
        self.clock = clock
        self.status = StatusMessage(self.config.help_message, clock())
        self.screen_rows = 0
        self.screen_cols = 0
        self.logger = telemetry.get_logger("termpad.session")
        self._handlers: Dict[Command, Handler] = {
            Command.INSERT: self._insert,
            Command.NEWLINE: self._newline,
            Command.BACKSPACE: self._backspace,
            Command.DELETE: self._delete_forward,
            Command.UP: lambda _key: self._move(self.cursor.move_vertical, -1),
            Command.DOWN: lambda _key: self._move(self.cursor.move_vertical, 1),
            Command.LEFT: lambda _key: self._move(self.cursor.move_horizontal, -1),
            Command.RIGHT: lambda _key: self._move(self.cursor.move_horizontal, 1),
            Command.HOME: lambda _key: self._move(self.cursor.move_to_line_home),
            Command.END: lambda _key: self._move(self.cursor.move_to_line_end),
            Command.PAGE_UP: lambda _key: self._move(self.cursor.move_to_document_top),
            Command.PAGE_DOWN: lambda _key: self._move(
                self.cursor.move_to_document_bottom
            ),
            Command.SAVE: self._save,
            Command.UNDO: self._undo,
            Command.QUIT: self._quit,
            Command.CANCEL: lambda _key: CommandResult(consumed=False, status="noop"),
        }

    @classmethod
    def open(
        cls,
        path: Optional[str],
        *,
        config: Optional[EditorConfig] = None,
        bus: Optional[SessionBus] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "EditorSession":
        """Start a session on ``path``, or on an empty document.

        A file that cannot be read does not abort start-up: the session gets
        an empty document still bound to ``path`` and shows the error.
        """

        config = config or EditorConfig()
        if path is None:
            return cls(config=config, bus=bus, clock=clock)
        try:
            document = Document.open(path, encoding=config.encoding)
        except IoFailure as exc:
            telemetry.record_event(
                "document.open_failed",
                level="warning",
                data={"path": path, "error": str(exc)},
            )
            session = cls(
                Document(path=path, encoding=config.encoding),
                config=config,
                bus=bus,
                clock=clock,
            )
            session.set_status(str(exc))
            return session
        return cls(document, config=config, bus=bus, clock=clock)

    def set_status(self, text: str) -> None:
        self.status = StatusMessage(text, self.clock())

    def resize(self, rows: int, cols: int) -> None:
        self.screen_rows = rows
        self.screen_cols = cols
        self._follow_cursor()

    def dispatch(self, key: KeyCommand) -> CommandResult:
        """Apply one key to the session and keep the cursor in view."""

        with telemetry.span(
            name=f"session::{key.command.value}",
            component="session",
            metadata={"command": key.command.value, "offset": self.cursor.offset},
        ):
            if self.prompt is not None:
                result = self._prompt_key(key)
            else:
                result = self._handlers[key.command](key)
            self._follow_cursor()
        if result.quit:
            self.bus.emit("session.quit", None)
        return result

    def _insert_char(self, char: str) -> CommandResult:
        offset = self.cursor.offset
        self.document.insert(offset, char)
        self.history.record(Insert(offset, char))
        self.cursor.move_horizontal(self.document, 1)
        return CommandResult(consumed=True, status="edit")

    def _insert(self, key: KeyCommand) -> CommandResult:
        assert key.char is not None
        return self._insert_char(key.char)

    def _newline(self, key: KeyCommand) -> CommandResult:
        del key
        return self._insert_char("\n")

    def _backspace(self, key: KeyCommand) -> CommandResult:
        del key
        offset = self.cursor.offset
        removed = self.document.delete(offset)
        if removed is None:
            return CommandResult(consumed=True, status="noop")
        self.history.record(Delete(offset - 1, removed))
        self.cursor.move_horizontal(self.document, -1)
        return CommandResult(consumed=True, status="edit")

    def _delete_forward(self, key: KeyCommand) -> CommandResult:
        del key
        offset = self.cursor.offset
        if offset >= len(self.document):
            return CommandResult(consumed=True, status="noop")
        removed = self.document.delete(offset + 1)
        assert removed is not None
        self.history.record(Delete(offset, removed))
        return CommandResult(consumed=True, status="edit")

    def _move(self, motion: Callable[..., None], *args: int) -> CommandResult:
        motion(self.document, *args)
        return CommandResult(consumed=True, status="move")

    def _save(self, key: KeyCommand) -> CommandResult:
        del key
        try:
            self.document.save()
        except NoTarget:
            self.prompt = FilenamePrompt()
            self.bus.emit("session.prompt", self.prompt.label)
            return CommandResult(consumed=True, status="prompt")
        except IoFailure as exc:
            message = f"Save failed: {exc}"
            self.set_status(message)
            self.bus.emit("session.save_failed", message)
            return CommandResult(consumed=True, status="save_failed", message=message)
        message = f"Saved to: {self.document.path}"
        self.set_status(message)
        self.bus.emit("session.saved", self.document.path)
        return CommandResult(consumed=True, status="saved", message=message)

    def _undo(self, key: KeyCommand) -> CommandResult:
        del key
        target = self.history.undo(self.document)
        if target is None:
            return CommandResult(consumed=True, status="noop")
        self.cursor.place(self.document, target)
        self.bus.emit("session.undo", len(self.history))
        return CommandResult(consumed=True, status="undo")

    def _quit(self, key: KeyCommand) -> CommandResult:
        del key
        return CommandResult(consumed=True, status="quit", quit=True)

    def _prompt_key(self, key: KeyCommand) -> CommandResult:
        prompt = self.prompt
        assert prompt is not None
        if key.command is Command.QUIT:
            return self._quit(key)
        if key.command is Command.CANCEL:
            return self._close_prompt()
        if key.command is Command.NEWLINE:
            name = prompt.value.strip()
            if not name:
                return self._close_prompt()
            self.prompt = None
            self.document.path = name
            return self._save(key)
        if prompt.edit(key):
            return CommandResult(consumed=True, status="prompt")
        return CommandResult(consumed=False, status="prompt")

    def _close_prompt(self) -> CommandResult:
        self.prompt = None
        message = "Save cancelled"
        self.set_status(message)
        return CommandResult(consumed=True, status="prompt_cancel", message=message)

    def _follow_cursor(self) -> None:
        if self.screen_rows <= 0 or self.screen_cols <= 0:
            return
        area = text_area(
            self.screen_rows,
            self.screen_cols,
            line_count=self.document.line_count(),
            config=self.config,
        )
        line, col = self.cursor.position(self.document)
        self.scroll = follow_cursor(self.scroll, line, col, area.rows, area.cols)


__all__ = ["EditorSession", "SessionBus", "StatusMessage"]
