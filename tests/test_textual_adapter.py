from __future__ import annotations

from typing import List, Sequence, Tuple

from termpad.adapters.textual import EditorUIHooks, TextualEditorAdapter, translate_key
from termpad.buffer import Document
from termpad.render import Update
from termpad.session import Command, EditorSession, KeyCommand

Draw = Tuple[List[Update], Tuple[int, int]]


def make_adapter(
    text: str = "", *, draws: List[Draw] | None = None, **hooks: object
) -> TextualEditorAdapter:
    session = EditorSession(Document(text), clock=lambda: 100.0)
    sink = draws if draws is not None else []

    def draw(updates: Sequence[Update], cursor: Tuple[int, int]) -> None:
        sink.append((list(updates), cursor))

    return TextualEditorAdapter(session, EditorUIHooks(draw=draw, **hooks))


def test_translate_key_covers_editor_commands() -> None:
    assert translate_key("ctrl+s") == KeyCommand(Command.SAVE)
    assert translate_key("ctrl+z") == KeyCommand(Command.UNDO)
    assert translate_key("ctrl+q") == KeyCommand(Command.QUIT)
    assert translate_key("pagedown") == KeyCommand(Command.PAGE_DOWN)
    assert translate_key("enter") == KeyCommand(Command.NEWLINE)
    assert translate_key("tab") == KeyCommand.insert("\t")
    assert translate_key("a", "a") == KeyCommand.insert("a")
    assert translate_key("space", " ") == KeyCommand.insert(" ")
    assert translate_key("f5") is None
    assert translate_key("ctrl+b", "\x02") is None


def test_resize_paints_initial_screen() -> None:
    draws: List[Draw] = []
    adapter = make_adapter("hi", draws=draws)

    painted = adapter.resize(4, 12)

    assert painted > 0
    assert len(draws) == 1
    updates, cursor = draws[0]
    assert cursor == (4, 0)
    glyphs = {index: cell.glyph for index, cell in updates}
    assert glyphs[4] == "h"
    assert glyphs[5] == "i"


def test_keypress_draws_only_changed_cells() -> None:
    draws: List[Draw] = []
    adapter = make_adapter("", draws=draws)
    adapter.resize(4, 12)
    draws.clear()

    result = adapter.handle_textual_key("x", character="x")

    assert result.status == "edit"
    assert len(draws) == 1
    updates, cursor = draws[0]
    assert cursor == (5, 0)
    changed = {index for index, _ in updates}
    assert 4 in changed  # the new character
    assert 5 in changed  # cursor moved onto the next cell
    assert len(changed) < 4 * 12


def test_unchanged_frame_skips_drawing() -> None:
    draws: List[Draw] = []
    adapter = make_adapter("abc", draws=draws)
    adapter.resize(4, 12)
    adapter.render(now=100.0)
    draws.clear()

    assert adapter.render(now=100.0) == 0
    result = adapter.handle_textual_key("up")

    assert result.status == "move"
    assert draws == []


def test_expired_status_message_is_cleared_once() -> None:
    draws: List[Draw] = []
    adapter = make_adapter("abc", draws=draws)
    adapter.resize(4, 40)
    adapter.render(now=100.0)
    draws.clear()

    assert adapter.render(now=200.0) > 0
    assert adapter.render(now=200.0) == 0
    assert len(draws) == 1
    assert adapter.previous_frame.row_text(3).strip() == ""


def test_unmapped_key_is_ignored() -> None:
    draws: List[Draw] = []
    adapter = make_adapter("abc", draws=draws)
    adapter.resize(4, 12)
    draws.clear()

    result = adapter.handle_textual_key("f5")

    assert result.consumed is False
    assert result.status == "unmapped"
    assert draws == []


def test_quit_calls_exit_hook_without_drawing() -> None:
    draws: List[Draw] = []
    exits: List[bool] = []
    adapter = make_adapter("abc", draws=draws, exit=lambda: exits.append(True))
    adapter.resize(4, 12)
    draws.clear()

    result = adapter.handle_textual_key("ctrl+q")

    assert result.quit is True
    assert exits == [True]
    assert draws == []


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter("abc", log=logs.append)

    adapter.handle_textual_key("ctrl+z")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_adapter_logs_session_events(tmp_path) -> None:
    logs: List[str] = []
    adapter = make_adapter("abc", log=logs.append)
    adapter.session.document.path = str(tmp_path / "out.txt")

    adapter.handle_textual_key("ctrl+s")

    assert any("session.saved" in line for line in logs)
