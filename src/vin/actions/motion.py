"""Cursor movement shared by Normal and Insert modes."""

from __future__ import annotations

from typing import Literal

from vin.buffer import EditorState
from vin.modes.base_mode import ModeContext, ModeResult

Direction = Literal["left", "right", "up", "down"]


def move_cursor(state: EditorState, direction: Direction) -> None:
    """Move one cell, wrapping horizontally across line ends.

    The column is snapped back to the length of the row the cursor lands on,
    and the line never goes past one-past-the-last row.
    """

    document = state.document
    line, col = state.cursor
    on_row = line < document.row_count

    if direction == "left":
        if col > 0:
            col -= 1
        elif line > 0:
            line -= 1
            col = document.row_len(line)
    elif direction == "right":
        if on_row and col < document.row_len(line):
            col += 1
        elif on_row and col == document.row_len(line):
            line += 1
            col = 0
    elif direction == "down":
        if line < document.row_count:
            line += 1
    elif direction == "up":
        if line > 0:
            line -= 1

    state.set_cursor(line, min(col, document.row_len(line)))


def move_to_line_start(state: EditorState) -> None:
    state.set_cursor(state.line, 0)


def move_to_line_end(state: EditorState) -> None:
    if state.line < state.document.row_count:
        state.set_cursor(state.line, state.document.row_len(state.line))


def move_to_bottom(state: EditorState) -> None:
    while state.line != state.document.row_count:
        move_cursor(state, "down")


def move_to_top(state: EditorState) -> None:
    state.set_cursor(0, min(state.column, state.document.row_len(0)))


def page(state: EditorState, direction: Literal["up", "down"]) -> None:
    """Jump to the top or bottom visible line, then one screen further."""

    if direction == "up":
        line = state.viewport.row_offset
    else:
        line = min(
            state.viewport.row_offset + state.screen_rows - 1,
            state.document.row_count,
        )
    state.set_cursor(line, min(state.column, state.document.row_len(line)))
    for _ in range(state.screen_rows):
        move_cursor(state, direction)


def _motion(direction: Direction):
    def handler(context: ModeContext, match) -> ModeResult:
        del match
        move_cursor(context.state, direction)
        return ModeResult(consumed=True, status="motion")

    handler.__name__ = f"move_{direction}"
    return handler


move_left = _motion("left")
move_right = _motion("right")
move_up = _motion("up")
move_down = _motion("down")


def line_start(context: ModeContext, match) -> ModeResult:
    del match
    move_to_line_start(context.state)
    return ModeResult(consumed=True, status="motion")


def line_end(context: ModeContext, match) -> ModeResult:
    del match
    move_to_line_end(context.state)
    return ModeResult(consumed=True, status="motion")


def goto_bottom(context: ModeContext, match) -> ModeResult:
    del match
    move_to_bottom(context.state)
    return ModeResult(consumed=True, status="motion")


def goto_top(context: ModeContext, match) -> ModeResult:
    del match
    move_to_top(context.state)
    return ModeResult(consumed=True, status="motion")


def page_up(context: ModeContext, match) -> ModeResult:
    del match
    page(context.state, "up")
    return ModeResult(consumed=True, status="motion")


def page_down(context: ModeContext, match) -> ModeResult:
    del match
    page(context.state, "down")
    return ModeResult(consumed=True, status="motion")


def next_line_start(context: ModeContext, match) -> ModeResult:
    """Move down one line and to column 0."""

    del match
    move_cursor(context.state, "down")
    move_to_line_start(context.state)
    return ModeResult(consumed=True, status="motion")


__all__ = [
    "move_cursor",
    "move_to_line_start",
    "move_to_line_end",
    "move_to_bottom",
    "move_to_top",
    "page",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "line_start",
    "line_end",
    "goto_bottom",
    "goto_top",
    "page_up",
    "page_down",
    "next_line_start",
]
