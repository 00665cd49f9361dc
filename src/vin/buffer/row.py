"""A single document line and its derived representations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from vin.syntax import Highlight, SyntaxProfile, highlight


def render_tabs(raw: str, tab_stop: int) -> str:
    """Expand each tab to spaces up to the next multiple of ``tab_stop``."""

    out: list[str] = []
    width = 0
    for ch in raw:
        if ch == "\t":
            out.append(" ")
            width += 1
            while width % tab_stop != 0:
                out.append(" ")
                width += 1
        else:
            out.append(ch)
            width += 1
    return "".join(out)


@dataclass(slots=True)
class Row:
    raw: str
    rendered: str = ""
    highlight: List[Highlight] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.raw)

    @property
    def rsize(self) -> int:
        return len(self.rendered)

    def update(self, tab_stop: int, profile: Optional[SyntaxProfile]) -> None:
        """Recompute ``rendered`` and ``highlight`` together from ``raw``."""

        self.rendered = render_tabs(self.raw, tab_stop)
        self.highlight = highlight(self.rendered, profile)


__all__ = ["Row", "render_tabs"]
