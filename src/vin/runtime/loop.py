"""Single-threaded event loop driving an editor session.

Keys and resize notifications are both turned into events on one queue and
handled in order, so a resize never runs in the middle of a key's edit. A
signal handler may only call :meth:`EventLoop.request_resize`, which appends
to the queue and returns.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, Optional, Protocol, Tuple, Union

from vin.modes.base_mode import KeyInput
from vin.runtime import telemetry

if TYPE_CHECKING:
    from vin.session import EditorSession


@dataclass(frozen=True, slots=True)
class KeyPressed:
    key: KeyInput


@dataclass(frozen=True, slots=True)
class ResizeRequested:
    """Terminal size changed; ``None`` dimensions are queried from the source."""

    rows: Optional[int] = None
    cols: Optional[int] = None


Event = Union[KeyPressed, ResizeRequested]


class KeySource(Protocol):
    def poll_key(self) -> Optional[KeyInput]:
        """Return the next key, or ``None`` after a short idle tick."""

    def window_size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)`` of the terminal."""


class FrameSink(Protocol):
    def flush(self, frame: bytes) -> None:
        """Write one complete frame."""


class EventLoop:
    def __init__(
        self, session: "EditorSession", source: KeySource, sink: FrameSink
    ) -> None:
        self.session = session
        self.source = source
        self.sink = sink
        self._queue: Deque[Event] = deque()
        self.logger = telemetry.get_logger("vin.loop")

    def post(self, event: Event) -> None:
        self._queue.append(event)

    def request_resize(self) -> None:
        self._queue.append(ResizeRequested())

    @property
    def pending_events(self) -> int:
        return len(self._queue)

    def run(self) -> None:
        """Process events until the session asks to quit."""

        self.request_resize()
        redraw = True
        with telemetry.span("loop::run", component="loop"):
            while True:
                redraw = self.drain() or redraw
                if self.session.quit_requested:
                    break
                if redraw:
                    self.sink.flush(self.session.render())
                    redraw = False
                key = self.source.poll_key()
                if key is not None:
                    self.post(KeyPressed(key))
                elif self.session.process_timeouts():
                    redraw = True

    def drain(self) -> bool:
        """Dispatch every queued event; return whether any was handled."""

        handled = False
        while self._queue and not self.session.quit_requested:
            self.dispatch(self._queue.popleft())
            handled = True
        return handled

    def dispatch(self, event: Event) -> None:
        if isinstance(event, KeyPressed):
            self.session.handle_key(event.key)
        elif isinstance(event, ResizeRequested):
            if event.rows is None or event.cols is None:
                rows, cols = self.source.window_size()
            else:
                rows, cols = event.rows, event.cols
            self.session.resize(rows, cols)


__all__ = [
    "EventLoop",
    "Event",
    "KeyPressed",
    "ResizeRequested",
    "KeySource",
    "FrameSink",
]
