"""Conversions between raw columns, rendered columns and the viewport."""

from __future__ import annotations

from vin.buffer import EditorState, Viewport


def raw_to_rendered(raw: str, raw_column: int, tab_stop: int) -> int:
    rendered = 0
    for ch in raw[: max(0, raw_column)]:
        if ch == "\t":
            rendered += tab_stop - rendered % tab_stop
        else:
            rendered += 1
    return rendered


def update_viewport(
    cursor_line: int,
    rendered_col: int,
    viewport_rows: int,
    viewport_cols: int,
    current: Viewport,
) -> Viewport:
    """Shift ``current`` by the least amount that keeps the cursor visible."""

    row_offset = current.row_offset
    col_offset = current.col_offset
    if cursor_line < row_offset:
        row_offset = cursor_line
    if cursor_line >= row_offset + viewport_rows:
        row_offset = cursor_line - viewport_rows + 1
    if rendered_col < col_offset:
        col_offset = rendered_col
    if rendered_col >= col_offset + viewport_cols:
        col_offset = rendered_col - viewport_cols + 1
    return Viewport(row_offset=row_offset, col_offset=col_offset)


def cursor_rendered_column(state: EditorState) -> int:
    line, col = state.cursor
    row = state.document.row(line)
    if row is None:
        return 0
    return raw_to_rendered(row.raw, col, state.document.tab_stop)


def scroll(state: EditorState) -> int:
    """Refresh ``state.viewport`` for the cursor; return its rendered column."""

    rendered = cursor_rendered_column(state)
    state.viewport = update_viewport(
        state.line, rendered, state.screen_rows, state.screen_cols, state.viewport
    )
    return rendered


__all__ = [
    "raw_to_rendered",
    "update_viewport",
    "cursor_rendered_column",
    "scroll",
]
