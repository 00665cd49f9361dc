from __future__ import annotations

import pytest

from vin.buffer import Document, Row, clamp_cursor, render_tabs
from vin.syntax import C_PROFILE, Highlight


def make_document(*lines: str, **kwargs) -> Document:
    return Document(lines, **kwargs)


def test_render_tabs_expands_to_tab_stop() -> None:
    assert render_tabs("\tx", 4) == "    x"
    assert render_tabs("ab\tc", 4) == "ab  c"
    assert render_tabs("abcd\t", 4) == "abcd    "
    assert render_tabs("a\tb", 8) == "a       b"


@pytest.mark.parametrize("raw", ["", "plain", "\t", "a\tb\t\tc", "    \t"])
def test_render_is_never_shorter_and_stable(raw: str) -> None:
    rendered = render_tabs(raw, 4)

    assert len(rendered) >= len(raw)
    row = Row(raw)
    row.update(4, None)
    first = (row.rendered, list(row.highlight))
    row.update(4, None)
    assert (row.rendered, list(row.highlight)) == first


def test_new_document_is_clean_and_rendered() -> None:
    document = make_document("int a;", "\tb", syntax=C_PROFILE)

    assert document.dirty is False
    assert document.row_count == 2
    assert document.row(1).rendered == "    b"
    assert document.row(0).highlight[0] == Highlight.KEYWORD1
    assert all(len(row.highlight) == row.rsize for row in document.rows)


def test_insert_row_bounds() -> None:
    document = make_document("a")

    assert document.insert_row(5, "x") is None
    assert document.insert_row(-1, "x") is None
    assert document.dirty is False

    document.insert_row(1, "b")
    document.insert_row(0, "z")

    assert document.raw_lines() == ("z", "a", "b")
    assert document.dirty is True


def test_delete_row_out_of_range_is_noop() -> None:
    document = make_document("a", "b")

    assert document.delete_row(2) is None
    assert document.delete_row(-1) is None
    assert document.dirty is False

    removed = document.delete_row(0)

    assert removed is not None and removed.raw == "a"
    assert document.raw_lines() == ("b",)
    assert document.dirty is True


def test_insert_and_delete_char_restore_raw() -> None:
    document = make_document("hello")

    document.insert_char(0, 2, "X")
    assert document.row(0).raw == "heXllo"

    document.delete_char(0, 3)
    assert document.row(0).raw == "hello"


def test_insert_char_clamps_column() -> None:
    document = make_document("ab")

    document.insert_char(0, 99, "c")

    assert document.row(0).raw == "abc"


def test_delete_char_rejects_invalid_column() -> None:
    document = make_document("ab")

    assert document.delete_char(0, 0) is False
    assert document.delete_char(0, 3) is False
    assert document.delete_char(4, 1) is False
    assert document.row(0).raw == "ab"


def test_set_raw_rerenders_highlight() -> None:
    document = make_document("x", syntax=C_PROFILE)

    document.set_raw(0, "\tint")

    row = document.row(0)
    assert row.rendered == "    int"
    assert row.highlight[4:] == [Highlight.KEYWORD1] * 3
    assert len(row.highlight) == len(row.rendered)


def test_set_syntax_rehighlights_every_row() -> None:
    document = make_document("int a;", "return 1;")

    document.set_syntax(C_PROFILE)

    assert document.row(0).highlight[0] == Highlight.KEYWORD1
    assert document.row(1).highlight[0] == Highlight.KEYWORD2


def test_to_text_terminates_every_row() -> None:
    assert make_document("a", "", "b").to_text() == "a\n\nb\n"
    assert make_document().to_text() == ""


def test_invalid_tab_stop_rejected() -> None:
    with pytest.raises(ValueError):
        Document(tab_stop=0)


def test_clamp_cursor() -> None:
    document = make_document("abc", "d")

    assert clamp_cursor(document, (0, 10)) == (0, 3)
    assert clamp_cursor(document, (9, 4)) == (2, 0)
    assert clamp_cursor(document, (-1, -1)) == (0, 0)
