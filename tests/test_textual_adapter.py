from __future__ import annotations

from typing import List

from vin.adapters.textual.controller import TextualUIHooks, TextualVinAdapter
from vin.buffer import BufferMirror, Document, EditorState
from vin.session import EditorSession


def make_session(*lines: str) -> EditorSession:
    return EditorSession(EditorState(document=Document(lines)))


def test_adapter_updates_buffer_and_status() -> None:
    session = make_session("alpha")
    mirrors: List[BufferMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=mirrors.append,
        update_status=statuses.append,
    )
    adapter = TextualVinAdapter(session, hooks)

    adapter.handle_textual_key("i", text="i")
    adapter.handle_textual_key("x", text="x")
    adapter.handle_textual_key("ESC")

    assert mirrors[-1].text == "xalpha"
    assert mirrors[-1].mode == "normal"
    assert mirrors[-1].attributes["dirty"] == "1"
    assert any("[INSERT]" in status for status in statuses)
    assert "[NORMAL]" in statuses[-1]


def test_adapter_relays_command_events() -> None:
    session = make_session("alpha")
    messages: List[str] = []
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        show_message=messages.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualVinAdapter(session, hooks)

    adapter.handle_textual_key(":", text=":")
    adapter.handle_textual_key("w", text="w")
    adapter.handle_textual_key("x", text="x")

    assert messages[-1] == ":wx"

    adapter.handle_textual_key("ENTER")

    assert ("command.submit", "wx") in events
    assert ("command.error", "wx") in events
    assert messages[-1] == "Unsupported command: wx"


def test_adapter_requests_exit_on_quit() -> None:
    session = make_session("alpha")
    exits: List[bool] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        request_exit=lambda: exits.append(True),
    )
    adapter = TextualVinAdapter(session, hooks)

    for key in (":", "q"):
        adapter.handle_textual_key(key, text=key)
    adapter.handle_textual_key("ENTER")

    assert exits == [True]


def test_adapter_resize_refreshes_viewport() -> None:
    session = make_session(*[f"line {n}" for n in range(50)])
    mirrors: List[BufferMirror] = []
    adapter = TextualVinAdapter(session, TextualUIHooks(update_buffer=mirrors.append))

    adapter.resize(12, 40)
    adapter.handle_textual_key("G", text="G")

    assert session.state.screen_rows == 10
    assert mirrors[-1].cursor == (50, 0)
    assert mirrors[-1].viewport.row_offset == 41
