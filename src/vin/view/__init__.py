"""Coordinate mapping, status messages and frame composition."""

from .coords import cursor_rendered_column, raw_to_rendered, scroll, update_viewport
from .frame import compose_frame, status_line
from .status import StatusMessage, format_status

__all__ = [
    "raw_to_rendered",
    "update_viewport",
    "cursor_rendered_column",
    "scroll",
    "compose_frame",
    "status_line",
    "StatusMessage",
    "format_status",
]
