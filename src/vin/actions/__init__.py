"""Editing verbs, motions and commands bound to keys by the modes."""

from .core import enter_command_mode, enter_insert_mode, exit_to_normal_mode, noop_action
from .edit import delete_char, insert_char, insert_newline
from .motion import move_cursor, page
from .command import UnsupportedCommand, submit_command_line

__all__ = [
    "enter_insert_mode",
    "enter_command_mode",
    "exit_to_normal_mode",
    "noop_action",
    "insert_char",
    "delete_char",
    "insert_newline",
    "move_cursor",
    "page",
    "UnsupportedCommand",
    "submit_command_line",
]
