"""Normal mode: navigation and entry into the other modes."""

from __future__ import annotations

from typing import List

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode


class NormalMode(KeymapMode):
    """Resolves motions and mode switches.

    A partially typed sequence such as the first ``g`` of ``gg`` is mirrored
    into ``state.normal_buffer`` until it completes, times out, or is erased
    with Backspace.
    """

    name = "normal"

    def handle_key(self, key: KeyInput) -> ModeResult:
        if self._pending and key.key == "BACKSPACE":
            self._set_pending(self._pending[:-1])
            if self._pending:
                return self._pending_result(None)
            return ModeResult(consumed=True, status="pending_cleared")
        return super().handle_key(key)

    def _set_pending(self, tokens: List[str]) -> None:
        super()._set_pending(tokens)
        self.context.state.normal_buffer = "".join(tokens)
