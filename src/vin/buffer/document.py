"""Row store: the ordered lines of one file plus its dirty flag."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from vin.config import DEFAULT_TAB_STOP
from vin.syntax import SyntaxProfile

from .row import Row


class Document:
    """Arena of rows addressed by line index.

    Every mutation goes through a bounds-checked method here. Invalid indices
    are ignored rather than raised, and every method that changes a row's
    ``raw`` text re-renders that row before returning.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        filename: Optional[str] = None,
        syntax: Optional[SyntaxProfile] = None,
        tab_stop: int = DEFAULT_TAB_STOP,
    ) -> None:
        if tab_stop <= 0:
            raise ValueError("tab_stop must be positive")
        self._rows: List[Row] = []
        self.filename = filename
        self.syntax = syntax
        self.tab_stop = tab_stop
        self.dirty = False
        for line in lines:
            self.insert_row(self.row_count, line)
        self.dirty = False

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Sequence[Row]:
        return tuple(self._rows)

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def row_len(self, index: int) -> int:
        row = self.row(index)
        return row.size if row is not None else 0

    def raw_lines(self) -> tuple[str, ...]:
        return tuple(row.raw for row in self._rows)

    def render_row(self, row: Row) -> None:
        row.update(self.tab_stop, self.syntax)

    def set_syntax(self, profile: Optional[SyntaxProfile]) -> None:
        self.syntax = profile
        for row in self._rows:
            self.render_row(row)

    def insert_row(self, index: int, text: str) -> Optional[Row]:
        if index < 0 or index > len(self._rows):
            return None
        row = Row(raw=text)
        self._rows.insert(index, row)
        self.render_row(row)
        self.dirty = True
        return row

    def delete_row(self, index: int) -> Optional[Row]:
        if index < 0 or index >= len(self._rows):
            return None
        row = self._rows.pop(index)
        self.dirty = True
        return row

    def set_raw(self, index: int, raw: str) -> bool:
        row = self.row(index)
        if row is None:
            return False
        row.raw = raw
        self.render_row(row)
        self.dirty = True
        return True

    def insert_char(self, index: int, at: int, ch: str) -> bool:
        """Insert ``ch`` at ``at``; positions past the end append."""

        row = self.row(index)
        if row is None:
            return False
        if at < 0 or at > row.size:
            at = row.size
        return self.set_raw(index, row.raw[:at] + ch + row.raw[at:])

    def delete_char(self, index: int, at: int) -> bool:
        """Delete the character immediately before ``at``."""

        row = self.row(index)
        if row is None or at <= 0 or at > row.size:
            return False
        return self.set_raw(index, row.raw[: at - 1] + row.raw[at:])

    def append_text(self, index: int, text: str) -> bool:
        row = self.row(index)
        if row is None:
            return False
        return self.set_raw(index, row.raw + text)

    def to_text(self) -> str:
        return "".join(f"{row.raw}\n" for row in self._rows)


__all__ = ["Document"]
