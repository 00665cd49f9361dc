"""Built-in key tables for Normal, Insert and Command modes."""

from __future__ import annotations

from dataclasses import replace

from vin.actions import command as command_actions
from vin.actions import core as core_actions
from vin.actions import edit as edit_actions
from vin.actions import motion as motion_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(id="core.noop", handler=core_actions.noop_action, description="Ignore key"),
    ActionRef(id="motion.left", handler=motion_actions.move_left),
    ActionRef(id="motion.right", handler=motion_actions.move_right),
    ActionRef(id="motion.up", handler=motion_actions.move_up),
    ActionRef(id="motion.down", handler=motion_actions.move_down),
    ActionRef(
        id="motion.line_start",
        handler=motion_actions.line_start,
        description="Move to column 0",
    ),
    ActionRef(
        id="motion.line_end",
        handler=motion_actions.line_end,
        description="Move past the last character",
    ),
    ActionRef(
        id="motion.next_line_start",
        handler=motion_actions.next_line_start,
        description="Move to the start of the next line",
    ),
    ActionRef(
        id="motion.goto_top",
        handler=motion_actions.goto_top,
        description="Move to the first line",
    ),
    ActionRef(
        id="motion.goto_bottom",
        handler=motion_actions.goto_bottom,
        description="Move below the last line",
    ),
    ActionRef(id="motion.page_up", handler=motion_actions.page_up),
    ActionRef(id="motion.page_down", handler=motion_actions.page_down),
    ActionRef(
        id="edit.newline",
        handler=edit_actions.newline_action,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.backspace",
        handler=edit_actions.backspace_action,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=edit_actions.forward_delete_action,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Evaluate the active command line",
    ),
    ActionRef(
        id="command.backspace",
        handler=command_actions.command_backspace,
        description="Erase the last command character",
    ),
    ActionRef(
        id="command.cancel",
        handler=command_actions.cancel_command_line,
        description="Abandon the command line",
    ),
)


def _bind(binding_id: str, mode: str, keys: tuple[str, ...], action_id: str) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
    )


_MOVEMENT_KEYS: tuple[tuple[str, str], ...] = (
    ("LEFT", "motion.left"),
    ("RIGHT", "motion.right"),
    ("UP", "motion.up"),
    ("DOWN", "motion.down"),
    ("HOME", "motion.line_start"),
    ("END", "motion.line_end"),
    ("PAGE_UP", "motion.page_up"),
    ("PAGE_DOWN", "motion.page_down"),
)

NORMAL_BINDINGS: tuple[Binding, ...] = (
    _bind("normal.enter_insert", "normal", ("i",), "core.enter_insert"),
    _bind("normal.enter_command", "normal", (":",), "core.enter_command"),
    _bind("normal.escape", "normal", ("ESC",), "core.noop"),
    _bind("normal.redraw", "normal", ("ctrl+l",), "core.noop"),
    _bind("normal.h", "normal", ("h",), "motion.left"),
    _bind("normal.j", "normal", ("j",), "motion.down"),
    _bind("normal.k", "normal", ("k",), "motion.up"),
    _bind("normal.l", "normal", ("l",), "motion.right"),
    _bind("normal.zero", "normal", ("0",), "motion.line_start"),
    _bind("normal.dollar", "normal", ("$",), "motion.line_end"),
    _bind("normal.G", "normal", ("G",), "motion.goto_bottom"),
    _bind("normal.gg", "normal", ("g", "g"), "motion.goto_top"),
    _bind("normal.enter", "normal", ("ENTER",), "motion.next_line_start"),
    _bind("normal.backspace", "normal", ("BACKSPACE",), "motion.left"),
    _bind("normal.ctrl_h", "normal", ("ctrl+h",), "motion.left"),
) + tuple(
    _bind(f"normal.{key.lower()}", "normal", (key,), action_id)
    for key, action_id in _MOVEMENT_KEYS
)

INSERT_BINDINGS: tuple[Binding, ...] = (
    _bind("insert.exit_escape", "insert", ("ESC",), "core.exit_to_normal"),
    _bind("insert.redraw", "insert", ("ctrl+l",), "core.noop"),
    _bind("insert.enter", "insert", ("ENTER",), "edit.newline"),
    _bind("insert.backspace", "insert", ("BACKSPACE",), "edit.backspace"),
    _bind("insert.ctrl_h", "insert", ("ctrl+h",), "edit.backspace"),
    _bind("insert.delete", "insert", ("DELETE",), "edit.delete_forward"),
) + tuple(
    _bind(f"insert.{key.lower()}", "insert", (key,), action_id)
    for key, action_id in _MOVEMENT_KEYS
)

COMMAND_BINDINGS: tuple[Binding, ...] = (
    _bind("command.exit_escape", "command", ("ESC",), "command.cancel"),
    _bind("command.submit_enter", "command", ("ENTER",), "command.submit_line"),
    _bind("command.backspace", "command", ("BACKSPACE",), "command.backspace"),
    _bind("command.ctrl_h", "command", ("ctrl+h",), "command.backspace"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    NORMAL_BINDINGS + INSERT_BINDINGS + COMMAND_BINDINGS
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    default_sequence_timeout_ms: int | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        registry.register_binding(
            _binding_with_timeout(binding, default_sequence_timeout_ms),
            replace=replace,
        )


def _binding_with_timeout(binding: Binding, timeout_ms: int | None) -> Binding:
    if timeout_ms is None:
        return binding
    sequence = KeySequence(binding.sequence.strokes, timeout_ms=timeout_ms)
    return replace(binding, sequence=sequence)


__all__ = [
    "load_default_keymaps",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "NORMAL_BINDINGS",
    "INSERT_BINDINGS",
    "COMMAND_BINDINGS",
]
