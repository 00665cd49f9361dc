from __future__ import annotations

from vin.buffer import Document, EditorState, Viewport
from vin.config import EditorMode
from vin.syntax import C_PROFILE
from vin.view import compose_frame, format_status, scroll, status_line
from vin.view.frame import cursor_escape, draw_row
from vin.view.status import StatusMessage


def make_state(*lines: str, **kwargs) -> EditorState:
    document = Document(lines, filename=kwargs.pop("filename", None), syntax=kwargs.pop("syntax", None))
    return EditorState(document=document, **kwargs)


def test_frame_layout_and_tildes() -> None:
    state = make_state("hello", screen_rows=3, screen_cols=20)
    state.set_message("Use :q to quit, :w to save")

    frame = compose_frame(state, scroll(state)).decode("latin-1")

    assert frame.startswith("\x1b[?25l\x1b[H")
    assert frame.endswith("\x1b[1;1H\x1b[?25h")
    assert "hello\x1b[39m\x1b[K\r\n~\x1b[K\r\n~\x1b[K\r\n" in frame
    assert "Use :q to quit, :w to save" in frame


def test_frame_does_not_mutate_state() -> None:
    state = make_state("a", "b", screen_rows=1, screen_cols=10)
    state.set_cursor(1, 0)
    state.viewport = Viewport(1, 0)
    before = (state.cursor, state.viewport, state.message, state.document.dirty)

    compose_frame(state, 0)

    assert (state.cursor, state.viewport, state.message, state.document.dirty) == before


def test_draw_row_emits_color_changes_lazily() -> None:
    state = make_state("int x = 12;", syntax=C_PROFILE)
    out: list[str] = []

    draw_row(state.document.row(0), 0, 80, out)
    text = "".join(out)

    assert text == "\x1b[94mint\x1b[39m x = \x1b[36m12\x1b[39m;\x1b[39m"


def test_draw_row_respects_column_offset() -> None:
    state = make_state("abcdef")
    out: list[str] = []

    draw_row(state.document.row(0), 2, 3, out)

    assert "".join(out) == "cde\x1b[39m"


def test_status_line_fields() -> None:
    state = make_state("a", "b", filename="a-really-long-file-name.c")
    state.document.insert_char(0, 0, "x")
    state.mode = EditorMode.INSERT

    line = status_line(state)

    assert line.startswith("a-really-long-file-n - 2 lines (modified) [INSERT]")


def test_status_bar_right_aligns_line_number() -> None:
    state = make_state("a", "b", "c", screen_rows=3, screen_cols=40)
    state.set_cursor(2, 0)

    frame = compose_frame(state, scroll(state)).decode("latin-1")

    status = frame.split("\x1b[7m", 1)[1].split("\x1b[m", 1)[0]
    assert len(status) == 40
    assert status.endswith(" 2")
    assert "[No Name] - 3 lines  [NORMAL]" in status


def test_status_bar_keeps_line_number_when_text_overflows() -> None:
    state = make_state("a", "b", screen_rows=2, screen_cols=20)
    state.set_cursor(1, 0)

    frame = compose_frame(state, scroll(state)).decode("latin-1")

    status = frame.split("\x1b[7m", 1)[1].split("\x1b[m", 1)[0]
    assert status == "[No Name] - 2 lines1"


def test_message_bar_is_not_cut_to_screen_width() -> None:
    state = make_state("x", screen_rows=1, screen_cols=20)
    state.set_message("Use :q to quit, :w to save")

    frame = compose_frame(state, scroll(state)).decode("latin-1")

    assert "\x1b[KUse :q to quit, :w to save\x1b[1;1H" in frame


def test_cursor_escape_is_viewport_relative() -> None:
    state = make_state("x" * 100, screen_rows=5, screen_cols=10)
    state.set_cursor(0, 50)
    rendered = scroll(state)

    assert state.viewport == Viewport(0, 41)
    assert cursor_escape(state, rendered) == "\x1b[1;10H"


def test_status_message_formatting() -> None:
    assert format_status("bytes written to disk", count=42) == "42 bytes written to disk"
    assert (
        format_status("Can't save! I/O error", error="Permission denied")
        == "Can't save! I/O error: Permission denied"
    )
    assert StatusMessage("Unsupported command", error="x").render() == "Unsupported command: x"
    assert len(format_status("y" * 200)) == 80


def test_message_truncated_on_state() -> None:
    state = make_state()

    state.set_message("z" * 100)

    assert len(state.message) == 80
