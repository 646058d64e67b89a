"""Frame model, differential rendering, and screen layout."""

from .frame import BLANK, Cell, Frame, Style
from .layout import STATUS_ROWS, Screen, TextArea, compose_screen, text_area
from .renderer import Update, build_frame, diff_and_emit, glyph_for
from .viewport import ScrollOffset, follow_cursor

__all__ = [
    "BLANK",
    "Cell",
    "Frame",
    "Style",
    "Update",
    "build_frame",
    "diff_and_emit",
    "glyph_for",
    "ScrollOffset",
    "follow_cursor",
    "STATUS_ROWS",
    "Screen",
    "TextArea",
    "compose_screen",
    "text_area",
]
