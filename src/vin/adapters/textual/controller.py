"""Textual adapter that wires an editor session into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from vin.buffer import BufferMirror
from vin.modes import KeyInput, ModeResult
from vin.session import EditorSession
from vin.view import status_line


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_message: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop


_FORWARDED_EVENTS = (
    "command.start",
    "command.end",
    "command.submit",
    "command.write",
    "command.quit",
    "command.error",
)


class TextualVinAdapter:
    """Bridges an ``EditorSession`` and its bus events to a Textual surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Dispatch a key already translated to editor key names."""

        result = self.session.handle_key(
            KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        )
        self.refresh()
        if self.session.quit_requested:
            self.hooks.request_exit()
        return result

    def resize(self, rows: int, cols: int) -> None:
        self.session.resize(rows, cols)
        self.refresh()

    def process_timeouts(self) -> Dict[str, ModeResult]:
        """Forward expired timers and redraw when any fired."""

        results = self.session.process_timeouts()
        if results:
            self.refresh()
        return results

    def refresh(self) -> None:
        self.hooks.update_buffer(self.session.mirror())
        self.hooks.update_status(status_line(self.session.state))
        self.hooks.show_message(self.session.state.message)

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in _FORWARDED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self.hooks.handle_event(name, payload)
            )


__all__ = ["TextualVinAdapter", "TextualUIHooks"]
