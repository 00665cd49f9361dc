"""Insert mode: printable keys go into the document."""

from __future__ import annotations

from vin.actions.edit import insert_char

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode


class InsertMode(KeymapMode):
    name = "insert"

    def handle_unmapped(self, key: KeyInput) -> ModeResult:
        if not key.text or key.modifiers:
            return ModeResult(consumed=False, status="miss")
        for ch in key.text:
            insert_char(self.context.state, ch)
        return ModeResult(consumed=True, status="edit")
