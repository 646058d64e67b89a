"""Executable Textual app that hosts the editor session."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the editor is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use termpad.adapters.textual.app"
    ) from exc

from termpad.config import EditorConfig
from termpad.render import Update
from termpad.runtime import telemetry
from termpad.session import EditorSession

from .controller import EditorUIHooks, TextualEditorAdapter
from .view import FrameView

TIMEOUT_POLL_SECONDS = 0.25


class TermpadApp(App[int]):
    """Full-screen editor; the whole screen is one ``FrameView``."""

    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    # Priority bindings so Textual's own defaults never swallow editor keys.
    BINDINGS = [
        Binding("ctrl+q", "editor_key('ctrl+q')", "Quit", priority=True),
        Binding("ctrl+s", "editor_key('ctrl+s')", "Save", priority=True),
        Binding("ctrl+z", "editor_key('ctrl+z')", "Undo", priority=True),
        Binding("tab", "editor_key('tab')", show=False, priority=True),
        Binding("escape", "editor_key('escape')", show=False, priority=True),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.logger = telemetry.get_logger("termpad.app")
        self.adapter = TextualEditorAdapter(
            session,
            EditorUIHooks(
                draw=self._draw,
                exit=lambda: self.exit(0),
                log=self._log_line,
            ),
        )

    def compose(self) -> ComposeResult:
        yield FrameView(id="frame")

    def on_mount(self) -> None:
        self.set_interval(TIMEOUT_POLL_SECONDS, self.adapter.process_timeouts)

    def on_frame_view_resized(self, message: FrameView.Resized) -> None:
        self.adapter.resize(message.rows, message.cols)

    async def on_key(self, event: events.Key) -> None:
        character = event.character if event.is_printable else None
        self.adapter.handle_textual_key(event.key, character=character)
        event.stop()
        event.prevent_default()

    def action_editor_key(self, key: str) -> None:
        self.adapter.handle_textual_key(key)

    def _draw(self, updates: Sequence[Update], cursor: Tuple[int, int]) -> None:
        self.query_one(FrameView).apply(updates, cursor)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a file in the terminal.")
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to open; omit to start with an empty, unnamed document",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    preset = os.environ.get("TERMPAD_LOG_PRESET")
    if preset:
        telemetry.configure(preset=preset)
    config = EditorConfig.from_env()
    session = EditorSession.open(args.path, config=config)
    app = TermpadApp(session)
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
