"""Assemble one terminal frame from the editor state."""

from __future__ import annotations

from typing import List

from vin.buffer import EditorState, Row
from vin.config import FILENAME_DISPLAY_MAX, MODE_CONFIGS
from vin.syntax import Highlight, syntax_to_color

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
CLEAR_LINE = "\x1b[K"
INVERT_ON = "\x1b[7m"
INVERT_OFF = "\x1b[m"
DEFAULT_COLOR = "\x1b[39m"

FRAME_ENCODING = "latin-1"


def compose_frame(state: EditorState, rendered_column: int) -> bytes:
    """Return the bytes that repaint the screen for ``state``.

    ``state.viewport`` must already contain the cursor (see
    ``vin.view.coords.scroll``); nothing in ``state`` is modified here.
    """

    out: List[str] = [HIDE_CURSOR, CURSOR_HOME]
    draw_rows(state, out)
    draw_status_bar(state, out)
    draw_message_bar(state, out)
    out.append(cursor_escape(state, rendered_column))
    out.append(SHOW_CURSOR)
    return "".join(out).encode(FRAME_ENCODING, errors="replace")


def draw_rows(state: EditorState, out: List[str]) -> None:
    document = state.document
    for y in range(state.screen_rows):
        filerow = state.viewport.row_offset + y
        row = document.row(filerow)
        if row is None:
            out.append("~")
        else:
            draw_row(row, state.viewport.col_offset, state.screen_cols, out)
        out.append(CLEAR_LINE)
        out.append("\r\n")


def draw_row(row: Row, col_offset: int, width: int, out: List[str]) -> None:
    chars = row.rendered[col_offset : col_offset + width]
    marks = row.highlight[col_offset : col_offset + width]
    current_color = -1
    for ch, hl in zip(chars, marks):
        if hl == Highlight.NORMAL:
            if current_color != -1:
                out.append(DEFAULT_COLOR)
                current_color = -1
        else:
            color = syntax_to_color(hl)
            if color != current_color:
                out.append(f"\x1b[{color}m")
                current_color = color
        out.append(ch)
    out.append(DEFAULT_COLOR)


def status_line(state: EditorState) -> str:
    document = state.document
    name = (document.filename or "[No Name]")[:FILENAME_DISPLAY_MAX]
    modified = "(modified)" if document.dirty else ""
    label = MODE_CONFIGS[state.mode].label
    return f"{name} - {document.row_count} lines {modified} [{label}] "


def draw_status_bar(state: EditorState, out: List[str]) -> None:
    cols = state.screen_cols
    rstatus = str(state.line)
    width = max(0, cols - len(rstatus))
    out.append(INVERT_ON)
    out.append(status_line(state)[:width].ljust(width))
    out.append(rstatus)
    out.append(INVERT_OFF)
    out.append("\r\n")


def draw_message_bar(state: EditorState, out: List[str]) -> None:
    out.append(CLEAR_LINE)
    out.append(state.message)


def cursor_escape(state: EditorState, rendered_column: int) -> str:
    screen_y = state.line - state.viewport.row_offset + 1
    screen_x = rendered_column - state.viewport.col_offset + 1
    return f"\x1b[{screen_y};{screen_x}H"


__all__ = [
    "compose_frame",
    "draw_rows",
    "draw_row",
    "draw_status_bar",
    "draw_message_bar",
    "status_line",
    "cursor_escape",
]
