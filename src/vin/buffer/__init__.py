"""Row store, editor state and file access."""

from .document import Document
from .fileio import FileLoadError, SaveError, load_lines, open_document, save, save_document
from .row import Row, render_tabs
from .state import Cursor, EditorState, Viewport
from .sync import BufferMirror, RowView
from .validation import clamp_cursor

__all__ = [
    "Document",
    "Row",
    "render_tabs",
    "Cursor",
    "EditorState",
    "Viewport",
    "BufferMirror",
    "RowView",
    "FileLoadError",
    "SaveError",
    "load_lines",
    "save",
    "open_document",
    "save_document",
    "clamp_cursor",
]
