"""Edit operations applied at the cursor.

Each operation mutates the document through the bounds-checked ``Document``
methods and then moves the cursor. The document is fully re-rendered by the
time an operation returns.
"""

from __future__ import annotations

from vin.buffer import EditorState
from vin.modes.base_mode import ModeContext, ModeResult

from .motion import move_cursor


def insert_char(state: EditorState, ch: str) -> None:
    document = state.document
    line, col = state.cursor
    if line == document.row_count:
        document.insert_row(document.row_count, "")
    col = min(col, document.row_len(line))
    document.insert_char(line, col, ch)
    state.set_cursor(line, col + 1)


def delete_char(state: EditorState) -> None:
    """Delete before the cursor, joining onto the previous row at column 0."""

    document = state.document
    line, col = state.cursor
    if line >= document.row_count:
        return
    if line == 0 and col == 0:
        return
    if col == 0:
        previous_len = document.row_len(line - 1)
        current = document.row(line)
        assert current is not None
        document.append_text(line - 1, current.raw)
        document.delete_row(line)
        state.set_cursor(line - 1, previous_len)
    else:
        document.delete_char(line, col)
        state.set_cursor(line, col - 1)


def insert_newline(state: EditorState) -> None:
    document = state.document
    line, col = state.cursor
    if col == 0:
        document.insert_row(line, "")
    else:
        row = document.row(line)
        if row is None:
            document.insert_row(line, "")
        else:
            tail = row.raw[col:]
            document.insert_row(line + 1, tail)
            document.set_raw(line, row.raw[:col])
    state.set_cursor(line + 1, 0)


def newline_action(context: ModeContext, match) -> ModeResult:
    del match
    insert_newline(context.state)
    return ModeResult(consumed=True, status="edit")


def backspace_action(context: ModeContext, match) -> ModeResult:
    del match
    delete_char(context.state)
    return ModeResult(consumed=True, status="edit")


def forward_delete_action(context: ModeContext, match) -> ModeResult:
    del match
    move_cursor(context.state, "right")
    delete_char(context.state)
    return ModeResult(consumed=True, status="edit")


__all__ = [
    "insert_char",
    "delete_char",
    "insert_newline",
    "newline_action",
    "backspace_action",
    "forward_delete_action",
]
