from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from vin.buffer import Document, EditorState, FileLoadError
from vin.config import EditorConfig, EditorMode
from vin.modes import KeyInput
from vin.session import EditorSession


def press(session: EditorSession, text: str) -> None:
    for ch in text:
        if ch == "\n":
            session.handle_key(KeyInput("ENTER"))
        elif ch == "\x1b":
            session.handle_key(KeyInput("ESC"))
        else:
            session.handle_key(KeyInput(ch, text=ch))


def test_new_session_shows_welcome_message() -> None:
    session = EditorSession()

    assert session.state.message == "Use :q to quit, :w to save"
    assert session.state.mode is EditorMode.NORMAL
    assert session.manager.active_mode is not None
    assert session.manager.active_mode.name == "normal"


def test_open_reads_file_with_configured_tab_stop(tmp_path: Path) -> None:
    path = tmp_path / "a.c"
    path.write_text("\tint x;\n")

    session = EditorSession.open(str(path), EditorConfig(tab_stop=2))

    row = session.state.document.row(0)
    assert row is not None
    assert row.rendered == "  int x;"
    assert session.state.document.filename == str(path)


def test_open_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileLoadError):
        EditorSession.open(str(tmp_path / "missing.txt"))


def test_handle_key_reports_action_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    session = EditorSession(EditorState(document=Document(["abc"])))

    def explode(key: KeyInput):
        raise RuntimeError("boom")

    monkeypatch.setattr(session.manager, "handle_key", explode)

    result = session.handle_key(KeyInput("x", text="x"))

    assert result.status == "error"
    assert session.state.message == "Error: boom"


def test_handle_key_keeps_cursor_in_bounds() -> None:
    session = EditorSession(EditorState(document=Document(["abc", "d"])))
    session.state.set_cursor(1, 1)

    press(session, "k$j")

    assert session.state.cursor == (1, 1)


def test_write_command_reports_byte_count(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("abc\n")
    session = EditorSession.open(str(path))
    events: List[object] = []
    session.bus.subscribe("command.write", events.append)

    press(session, "i!\x1b:w\n")

    assert path.read_text() == "!abc\n"
    assert session.state.message == "5 bytes written to disk"
    assert session.state.document.dirty is False
    assert events == [{"bytes": 5}]


def test_write_without_filename_reports_error() -> None:
    session = EditorSession()

    press(session, "ix\x1b:w\n")

    assert session.state.message == "Can't save! No filename."
    assert session.state.document.dirty is True


def test_unknown_command_message() -> None:
    session = EditorSession()

    press(session, ":wq\n")

    assert session.state.message == "Unsupported command: wq"
    assert session.state.mode is EditorMode.NORMAL
    assert session.quit_requested is False


def test_render_contains_status_and_message() -> None:
    session = EditorSession(EditorState(document=Document(["first"])))
    session.resize(6, 30)

    frame = session.render()

    assert isinstance(frame, bytes)
    assert b"first" in frame
    assert b"[No Name] - 1 lines" in frame
    assert b"[NORMAL]" in frame
    assert b"Use :q to quit" in frame


def test_mirror_reflects_state() -> None:
    session = EditorSession(EditorState(document=Document(["one", "two"])))
    press(session, "j")

    mirror = session.mirror()

    assert mirror.cursor == (1, 0)
    assert mirror.mode == "normal"
    assert mirror.text == "one\ntwo"


def test_write_of_unencodable_text_reports_save_error(tmp_path: Path) -> None:
    path = tmp_path / "wide.txt"
    path.write_text("abc\n")
    session = EditorSession.open(str(path))

    session.handle_key(KeyInput("i", text="i"))
    session.handle_key(KeyInput("€", text="€"))
    press(session, "\x1b:w\n")

    assert session.state.message == "Can't save! I/O error: cannot encode '€' as latin-1"
    assert session.state.document.dirty is True
    assert path.read_text() == "abc\n"


def test_new_session_uses_configured_tab_stop() -> None:
    session = EditorSession(config=EditorConfig(tab_stop=8))

    press(session, "i\tx")

    row = session.state.document.row(0)
    assert session.state.document.tab_stop == 8
    assert row is not None
    assert row.rendered == "        x"
