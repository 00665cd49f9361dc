"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use vin.adapters.textual.app"
    ) from exc

from vin.buffer import BufferMirror, FileLoadError
from vin.config import EditorConfig
from vin.session import EditorSession
from vin.syntax import Highlight

from .controller import TextualUIHooks, TextualVinAdapter

HIGHLIGHT_STYLES = {
    Highlight.NORMAL: "",
    Highlight.KEYWORD1: "bright_blue",
    Highlight.KEYWORD2: "bright_red",
    Highlight.COMMENT: "bright_black",
    Highlight.STRING: "cyan",
    Highlight.NUMBER: "cyan",
}

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "home": "HOME",
    "end": "END",
    "pageup": "PAGE_UP",
    "pagedown": "PAGE_DOWN",
}


def render_mirror(mirror: BufferMirror, rows: int, cols: int) -> Text:
    """Draw the visible window of ``mirror`` as styled rich text."""

    text = Text(no_wrap=True, overflow="crop")
    top = mirror.viewport.row_offset
    left = mirror.viewport.col_offset
    cursor_y = mirror.cursor[0] - top
    cursor_x = mirror.rendered_column - left
    for y in range(rows):
        index = top + y
        if index < len(mirror.rows):
            row = mirror.rows[index]
            visible = row.rendered[left : left + cols]
            marks = row.highlight[left : left + cols]
            for x, (ch, hl) in enumerate(zip(visible, marks)):
                style = HIGHLIGHT_STYLES[hl]
                if y == cursor_y and x == cursor_x:
                    style = f"{style} reverse".strip()
                text.append(ch, style=style)
            if y == cursor_y and cursor_x >= len(visible):
                text.append(" ", style="reverse")
        else:
            text.append(" " if y == cursor_y else "~", style="reverse" if y == cursor_y else "")
        if y < rows - 1:
            text.append("\n")
    return text


def normalize_key(
    event: "events.Key",
) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
    key = event.key
    if key in _NAMED_KEYS:
        return (_NAMED_KEYS[key], None, ())
    if key == "tab":
        return ("TAB", "\t", ())
    if key.startswith("ctrl+"):
        return (key.split("+", 1)[1], None, ("ctrl",))
    if event.character and event.is_printable:
        return (event.character, event.character, ())
    return None


class VinApp(App[None]):
    """Textual UI embedding an editor session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		overflow: hidden;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		text-style: reverse;
	}

	#message-line {
		height: 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualVinAdapter | None = None
        self._mirror: BufferMirror | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_message=self._show_message,
            request_exit=self.exit,
        )
        self.adapter = TextualVinAdapter(self.session, hooks)
        self.set_interval(0.1, self._process_timeouts)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.height, event.size.width)

    def _process_timeouts(self) -> None:
        if self.adapter:
            self.adapter.process_timeouts()

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._mirror = mirror
        if self._buffer_widget:
            state = self.session.state
            self._buffer_widget.update(
                render_mirror(mirror, state.screen_rows, state.screen_cols)
            )

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(Text(status))

    def _show_message(self, message: str) -> None:
        if self._message_widget:
            self._message_widget.update(Text(message))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vin-textual", description="Run the editor inside a Textual app."
    )
    parser.add_argument("filename", nargs="?", help="File to open")
    parser.add_argument("--tab-stop", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env()
    if args.tab_stop is not None:
        config = EditorConfig(
            tab_stop=args.tab_stop, pending_timeout_ms=config.pending_timeout_ms
        )
    try:
        session = EditorSession.open(args.filename, config)
    except FileLoadError as exc:
        print(f"vin-textual: {exc}")
        return 1
    VinApp(session).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
