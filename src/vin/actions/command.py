"""Actions that edit and evaluate the ``:`` command line."""

from __future__ import annotations

from typing import Callable, Dict

from vin.buffer import SaveError, save_document
from vin.modes.base_mode import ModeContext, ModeResult
from vin.runtime import telemetry
from vin.view.status import format_status

CommandHandler = Callable[[ModeContext], ModeResult]

UNSAVED_WARNING = "File has unsaved changes. Use :q! to force quit"


class UnsupportedCommand(RuntimeError):
    """Raised when the command line names no known command."""

    def __init__(self, command: str) -> None:
        super().__init__(command)
        self.command = command


def lookup_command(name: str) -> CommandHandler:
    try:
        return _COMMAND_HANDLERS[name]
    except KeyError:
        raise UnsupportedCommand(name) from None


def submit_command_line(context: ModeContext, match) -> ModeResult:
    del match
    state = context.state
    text = state.command_buffer
    state.command_buffer = ""
    context.bus.emit("command.submit", text)
    if not text:
        state.set_message("")
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")

    try:
        handler = lookup_command(text)
    except UnsupportedCommand as exc:
        return _unknown_command(context, exc.command)

    with telemetry.span(
        f"command::{text}", component="commands", metadata={"command": text}
    ):
        return handler(context)


def append_command_text(context: ModeContext, text: str) -> ModeResult:
    state = context.state
    state.command_buffer += text
    state.set_message(f":{state.command_buffer}")
    return ModeResult(consumed=True, status="editing")


def command_backspace(context: ModeContext, match) -> ModeResult:
    del match
    state = context.state
    if state.command_buffer:
        state.command_buffer = state.command_buffer[:-1]
        state.set_message(f":{state.command_buffer}")
        return ModeResult(consumed=True, status="editing")
    state.set_message("")
    return ModeResult(consumed=True, switch_to="normal", status="command_cancel")


def cancel_command_line(context: ModeContext, match) -> ModeResult:
    del match
    state = context.state
    state.command_buffer = ""
    state.set_message("")
    return ModeResult(consumed=True, switch_to="normal", status="command_cancel")


def _unknown_command(context: ModeContext, command: str) -> ModeResult:
    context.bus.emit("command.error", command)
    telemetry.record_event(
        "command.unsupported", level="warning", data={"command": command}
    )
    context.state.set_message(format_status("Unsupported command", error=command))
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status="command_error",
        message=command,
    )


def _handle_write(context: ModeContext) -> ModeResult:
    state = context.state
    try:
        count = save_document(state.document)
    except SaveError as exc:
        if state.document.filename:
            state.set_message(format_status("Can't save! I/O error", error=exc.reason))
        else:
            state.set_message("Can't save! No filename.")
        context.bus.emit("command.error", {"command": "w", "reason": exc.reason})
        return ModeResult(
            consumed=True, switch_to="normal", status="command_error", message="w"
        )
    state.set_message(format_status("bytes written to disk", count=count))
    context.bus.emit("command.write", {"bytes": count})
    return ModeResult(
        consumed=True, switch_to="normal", status="command_write", message="write"
    )


def _handle_quit(context: ModeContext, *, force: bool = False) -> ModeResult:
    state = context.state
    if state.document.dirty and not force:
        state.set_message(UNSAVED_WARNING)
        return ModeResult(
            consumed=True, switch_to="normal", status="command_refused", message="quit"
        )
    state.quit_requested = True
    context.bus.emit("command.quit", {"force": force})
    status = "command_quit_force" if force else "command_quit"
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status=status,
        message="quit!" if force else "quit",
    )


def _handle_force_quit(context: ModeContext) -> ModeResult:
    return _handle_quit(context, force=True)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "w": _handle_write,
    "q": _handle_quit,
    "q!": _handle_force_quit,
}


__all__ = [
    "UnsupportedCommand",
    "UNSAVED_WARNING",
    "lookup_command",
    "submit_command_line",
    "append_command_text",
    "command_backspace",
    "cancel_command_line",
]
