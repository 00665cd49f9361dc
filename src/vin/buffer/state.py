"""Cursor, viewport and the per-session editor state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from vin.config import STATUS_MESSAGE_MAX, EditorMode

from .document import Document

Cursor = Tuple[int, int]  # (line, raw column)


@dataclass(frozen=True, slots=True)
class Viewport:
    """Top-left corner of the visible window, in rows and rendered columns."""

    row_offset: int = 0
    col_offset: int = 0


@dataclass(slots=True)
class EditorState:
    """Everything one editing session mutates, owned by the event loop."""

    document: Document = field(default_factory=Document)
    cursor: Cursor = (0, 0)
    viewport: Viewport = field(default_factory=Viewport)
    screen_rows: int = 22
    screen_cols: int = 80
    mode: EditorMode = EditorMode.NORMAL
    command_buffer: str = ""
    normal_buffer: str = ""
    message: str = ""
    quit_requested: bool = False

    @property
    def line(self) -> int:
        return self.cursor[0]

    @property
    def column(self) -> int:
        return self.cursor[1]

    def set_cursor(self, line: int, col: int) -> None:
        self.cursor = (line, col)

    def set_message(self, text: str) -> None:
        self.message = text[:STATUS_MESSAGE_MAX]

    def resize(self, rows: int, cols: int) -> None:
        """Store a terminal size; two rows are reserved for the bars."""

        self.screen_rows = max(1, rows - 2)
        self.screen_cols = max(1, cols)
