"""Host-side glue: Textual key names in, differential draw calls out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from termpad.render import Frame, Update, compose_screen, diff_and_emit
from termpad.session import Command, CommandResult, EditorSession, KeyCommand


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


KEY_COMMANDS: Dict[str, Command] = {
    "up": Command.UP,
    "down": Command.DOWN,
    "left": Command.LEFT,
    "right": Command.RIGHT,
    "home": Command.HOME,
    "end": Command.END,
    "pageup": Command.PAGE_UP,
    "pagedown": Command.PAGE_DOWN,
    "enter": Command.NEWLINE,
    "backspace": Command.BACKSPACE,
    "delete": Command.DELETE,
    "escape": Command.CANCEL,
    "ctrl+s": Command.SAVE,
    "ctrl+z": Command.UNDO,
    "ctrl+q": Command.QUIT,
}


def translate_key(key: str, character: Optional[str] = None) -> Optional[KeyCommand]:
    """Map a Textual key name (plus printable character) to a command."""

    command = KEY_COMMANDS.get(key)
    if command is not None:
        return KeyCommand(command)
    if key == "tab":
        return KeyCommand.insert("\t")
    if character and len(character) == 1 and character.isprintable():
        return KeyCommand.insert(character)
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the adapter to update the host UI."""

    draw: Callable[[Sequence[Update], Tuple[int, int]], None]
    exit: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds keys to an ``EditorSession`` and draws only what changed.

    The previously drawn frame lives here as a plain value: blank at start,
    replaced after every render, reset when the screen size changes.
    """

    def __init__(self, session: EditorSession, hooks: EditorUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.rows = 0
        self.cols = 0
        self._previous = Frame.blank(0, 0)
        self._subscribe_events()

    @property
    def previous_frame(self) -> Frame:
        return self._previous

    def resize(self, rows: int, cols: int) -> int:
        self.rows = max(rows, 0)
        self.cols = max(cols, 0)
        self._previous = Frame.blank(self.rows, self.cols)
        self.session.resize(self.rows, self.cols)
        self._log_state("resize ->", rows=self.rows, cols=self.cols)
        return self.render()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> CommandResult:
        """Translate a Textual key event into a command and dispatch it."""

        self._log_state("key ->", key=key, character=character)
        command = translate_key(key, character)
        if command is None:
            return CommandResult(consumed=False, status="unmapped")
        result = self.session.dispatch(command)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        if result.quit:
            self.hooks.exit()
            return result
        self.render()
        return result

    def process_timeouts(self) -> int:
        """Re-render so an expired status message disappears."""

        return self.render()

    def render(self, *, now: Optional[float] = None) -> int:
        """Draw the cells that differ from the previous frame.

        Returns the number of updated cells; zero means nothing was drawn.
        """

        screen = compose_screen(self.session, self.rows, self.cols, now=now)
        updates = diff_and_emit(self._previous, screen.frame)
        self._previous = screen.frame
        if updates:
            self.hooks.draw(updates, screen.cursor)
        return len(updates)

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (
            "session.saved",
            "session.save_failed",
            "session.prompt",
            "session.undo",
            "session.quit",
        ):
            bus.subscribe(
                event,
                lambda payload, name=event: self._log_state(
                    "event ->", event=name, payload=payload
                ),
            )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "offset": session.cursor.offset,
            "scroll": (session.scroll.line, session.scroll.col),
            "prompt": session.prompt is not None,
            "version": session.document.version,
        }


__all__ = [
    "EditorUIHooks",
    "KEY_COMMANDS",
    "TextualEditorAdapter",
    "translate_key",
]
