"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import Document
from .state import Cursor


def clamp_cursor(document: Document, cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside the document.

    ``line`` may sit one past the last row; the column never exceeds the
    length of the row it lands on (and is 0 on the one-past-end line).
    """

    line, col = cursor
    line = max(0, min(line, document.row_count))
    col = max(0, min(col, document.row_len(line)))
    return (line, col)
