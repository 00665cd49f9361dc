from __future__ import annotations

import pytest

from vin.buffer import Document, EditorState, Viewport, render_tabs
from vin.view import cursor_rendered_column, raw_to_rendered, scroll, update_viewport


def test_tab_scenario() -> None:
    assert render_tabs("\tx", 4) == "    x"
    assert raw_to_rendered("\tx", 1, 4) == 4
    assert raw_to_rendered("\tx", 2, 4) == 5


@pytest.mark.parametrize("raw", ["", "abc", "\t", "a\tb", "\t\tx\t"])
def test_raw_to_rendered_bounds(raw: str) -> None:
    assert raw_to_rendered(raw, 0, 4) == 0
    assert raw_to_rendered(raw, len(raw), 4) == len(render_tabs(raw, 4))


def test_raw_to_rendered_mid_tab_stop() -> None:
    assert raw_to_rendered("ab\tc", 3, 4) == 4
    assert raw_to_rendered("abcd\tc", 5, 4) == 8


def test_update_viewport_only_moves_to_include_cursor() -> None:
    current = Viewport(row_offset=10, col_offset=0)

    assert update_viewport(12, 0, 5, 80, current) == current
    assert update_viewport(3, 0, 5, 80, current) == Viewport(3, 0)
    assert update_viewport(20, 0, 5, 80, current) == Viewport(16, 0)


def test_update_viewport_columns() -> None:
    current = Viewport(0, 0)

    assert update_viewport(0, 85, 5, 80, current) == Viewport(0, 6)
    assert update_viewport(0, 2, 5, 80, Viewport(0, 6)) == Viewport(0, 2)


def test_scroll_uses_rendered_column() -> None:
    document = Document(["\t" * 30 + "x"])
    state = EditorState(document=document, screen_rows=5, screen_cols=40)
    state.set_cursor(0, 30)

    rendered = scroll(state)

    assert rendered == 120
    assert cursor_rendered_column(state) == 120
    assert state.viewport == Viewport(0, 81)


def test_cursor_rendered_column_past_end_is_zero() -> None:
    state = EditorState(document=Document(["abc"]))
    state.set_cursor(1, 0)

    assert cursor_rendered_column(state) == 0
