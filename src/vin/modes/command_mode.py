"""Command-line mode: collects ``:`` commands in ``state.command_buffer``."""

from __future__ import annotations

from vin.actions.command import append_command_text

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode


class CommandMode(KeymapMode):
    name = "command"

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.state.command_buffer = ""
        self.context.state.set_message(":")
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: str | None) -> None:
        super().on_exit(next_mode)
        self.context.state.command_buffer = ""
        self.context.bus.emit("command.end", None)

    @property
    def current_command(self) -> str:
        return self.context.state.command_buffer

    def handle_unmapped(self, key: KeyInput) -> ModeResult:
        if not key.text or key.modifiers:
            return ModeResult(consumed=False, status="miss", message="unhandled")
        return append_command_text(self.context, key.text)
