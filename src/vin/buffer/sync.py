"""Host-facing snapshot of the document and cursor."""

from __future__ import annotations

from dataclasses import dataclass, field

from vin.syntax import Highlight

from .state import Cursor, EditorState, Viewport


@dataclass(frozen=True, slots=True)
class RowView:
    rendered: str
    highlight: tuple[Highlight, ...]


@dataclass(slots=True)
class BufferMirror:
    """Read-only copy of what a host needs to draw the current state."""

    rows: tuple[RowView, ...]
    cursor: Cursor
    rendered_column: int
    mode: str
    message: str
    viewport: Viewport = field(default_factory=Viewport)
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(row.rendered for row in self.rows)

    @classmethod
    def capture(cls, state: EditorState, rendered_column: int) -> "BufferMirror":
        document = state.document
        return cls(
            rows=tuple(
                RowView(rendered=row.rendered, highlight=tuple(row.highlight))
                for row in document.rows
            ),
            cursor=state.cursor,
            rendered_column=rendered_column,
            mode=state.mode.value,
            message=state.message,
            viewport=state.viewport,
            attributes={
                "filename": document.filename or "",
                "dirty": "1" if document.dirty else "0",
            },
        )
