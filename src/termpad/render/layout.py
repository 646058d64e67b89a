"""Full-screen composition: text area, line-number gutter, status rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from termpad.config import EditorConfig

from .frame import Cell, Frame, Style
from .renderer import build_frame

if TYPE_CHECKING:
    from termpad.session.editor import EditorSession

STATUS_ROWS = 2  # status bar + message line
NO_NAME = "[No Name]"


@dataclass(frozen=True, slots=True)
class TextArea:
    """Size of the document window; it starts at column ``gutter`` of row 0."""

    rows: int
    cols: int
    gutter: int


@dataclass(frozen=True, slots=True)
class Screen:
    frame: Frame
    cursor: Tuple[int, int]  # (x, y)


def text_area(
    rows: int, cols: int, *, line_count: int, config: EditorConfig
) -> TextArea:
    status_rows = STATUS_ROWS if rows > STATUS_ROWS else 0
    gutter = 0
    if config.show_gutter:
        gutter = max(config.gutter_width, len(str(line_count)) + 1)
        if cols - gutter < 1:
            gutter = 0
    return TextArea(
        rows=rows - status_rows, cols=max(cols - gutter, 0), gutter=gutter
    )


def status_bar_text(session: "EditorSession", cols: int) -> str:
    document = session.document
    config = session.config
    name = NO_NAME
    if document.path:
        name = document.path[: config.filename_width]
    if document.dirty:
        name = f"{name} [+]"
    line, _ = session.cursor.position(document)
    indicator = f"{line + 1} / {document.line_count()} "
    padding = " " * max(cols - len(name) - len(indicator), 0)
    return f"{name}{padding}{indicator}"[:cols]


def compose_screen(
    session: "EditorSession",
    rows: int,
    cols: int,
    *,
    now: Optional[float] = None,
) -> Screen:
    """Build the whole terminal grid for ``session`` and locate the cursor."""

    if rows <= 0 or cols <= 0:
        return Screen(frame=Frame.blank(max(rows, 0), max(cols, 0)), cursor=(0, 0))

    document = session.document
    scroll = session.scroll
    area = text_area(
        rows, cols, line_count=document.line_count(), config=session.config
    )
    frame = Frame.blank(rows, cols)
    frame.blit(
        build_frame(document, session.cursor, area.rows, area.cols, scroll),
        left=area.gutter,
    )
    if area.gutter:
        _draw_gutter(frame, session, area)

    line, col = session.cursor.position(document)
    cursor = (area.gutter + col - scroll.col, line - scroll.line)

    if area.rows < rows:
        bar = status_bar_text(session, cols).ljust(cols)
        frame.write(0, area.rows, bar, Style.STATUS)
        message_row = area.rows + 1
        prompt = session.prompt
        if prompt is not None:
            frame.write(0, message_row, prompt.render())
            caret = min(prompt.caret_column, cols - 1)
            under = frame.get(caret, message_row)
            frame.put(caret, message_row, Cell(under.glyph, Style.CURSOR))
            cursor = (caret, message_row)
        else:
            clock = session.clock() if now is None else now
            if session.status.visible(clock, session.config.status_timeout):
                frame.write(0, message_row, session.status.text)
    return Screen(frame=frame, cursor=cursor)


def _draw_gutter(frame: Frame, session: "EditorSession", area: TextArea) -> None:
    count = session.document.line_count()
    for r in range(area.rows):
        number = r + session.scroll.line
        if number < count:
            label = f"{str(number + 1).rjust(area.gutter - 1)} "
        else:
            label = " " * area.gutter
        frame.write(0, r, label, Style.GUTTER)


__all__ = ["STATUS_ROWS", "TextArea", "Screen", "text_area", "compose_screen"]
