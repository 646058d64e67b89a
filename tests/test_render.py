from __future__ import annotations

from termpad.buffer import Cursor, Document
from termpad.render import (
    Cell,
    Frame,
    ScrollOffset,
    Style,
    build_frame,
    diff_and_emit,
    follow_cursor,
    glyph_for,
)


def cursor_cells(frame: Frame) -> list[int]:
    return [i for i, cell in enumerate(frame) if cell.style is Style.CURSOR]


def test_identical_frames_emit_nothing() -> None:
    document = Document("ab\ncd")
    frame = build_frame(document, Cursor(1), 3, 4, ScrollOffset())

    assert diff_and_emit(frame, frame) == []
    assert diff_and_emit(Frame.blank(2, 2), Frame.blank(2, 2)) == []


def test_diff_reports_only_changed_cells() -> None:
    before = Frame.blank(2, 3)
    after = Frame.blank(2, 3)
    after.put(1, 1, Cell("x"))

    assert diff_and_emit(before, after) == [(4, Cell("x"))]


def test_diff_between_sizes_repaints_everything() -> None:
    updates = diff_and_emit(Frame.blank(1, 1), Frame.blank(2, 2))

    assert [index for index, _ in updates] == [0, 1, 2, 3]


def test_build_frame_maps_lines_to_rows() -> None:
    document = Document("ab\ncd")

    frame = build_frame(document, Cursor(4), 3, 4, ScrollOffset())

    assert frame.row_text(0) == "ab  "
    assert frame.row_text(1) == "cd  "
    assert frame.row_text(2) == "    "
    assert cursor_cells(frame) == [frame.index(1, 1)]
    assert frame.get(1, 1) == Cell("d", Style.CURSOR)


def test_build_frame_applies_scroll_offset() -> None:
    document = Document("\n".join(f"line{i}" for i in range(10)))

    frame = build_frame(document, Cursor(0), 2, 4, ScrollOffset(line=5, col=2))

    assert frame.row_text(0) == "ne5 "
    assert frame.row_text(1) == "ne6 "
    assert cursor_cells(frame) == []


def test_cursor_past_line_end_highlights_blank() -> None:
    document = Document("ab")

    frame = build_frame(document, Cursor(2), 1, 4, ScrollOffset())

    assert frame.get(2, 0) == Cell(" ", Style.CURSOR)


def test_build_frame_past_document_end_is_blank() -> None:
    document = Document("")

    frame = build_frame(document, Cursor(0), 2, 2, ScrollOffset(line=3))

    assert all(cell.glyph == " " for cell in frame)


def test_glyph_for_control_characters() -> None:
    assert glyph_for("a") == "a"
    assert glyph_for("\t") == " "
    assert glyph_for("\r") == "?"
    assert glyph_for("\x01") == "?"


def test_follow_cursor_scrolls_down_to_last_visible_row() -> None:
    scroll = follow_cursor(ScrollOffset(), line=10, col=0, rows=5, cols=10)

    assert scroll == ScrollOffset(line=6, col=0)


def test_follow_cursor_scrolls_up_to_cursor() -> None:
    scroll = follow_cursor(ScrollOffset(line=5, col=8), line=2, col=3, rows=5, cols=10)

    assert scroll == ScrollOffset(line=2, col=3)


def test_follow_cursor_keeps_visible_cursor_still() -> None:
    start = ScrollOffset(line=3, col=4)

    assert follow_cursor(start, line=5, col=10, rows=5, cols=10) == start


def test_follow_cursor_scrolls_right() -> None:
    scroll = follow_cursor(ScrollOffset(), line=0, col=12, rows=5, cols=10)

    assert scroll == ScrollOffset(line=0, col=3)
