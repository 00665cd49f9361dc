"""Single-pass, per-row syntax classification."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional

from .profiles import SyntaxProfile

SEPARATORS = ",.()+-/*=~%<>[];"


class Highlight(IntEnum):
    NORMAL = 0
    KEYWORD1 = 1
    KEYWORD2 = 2
    COMMENT = 3
    STRING = 4
    NUMBER = 5


_COLORS = {
    Highlight.COMMENT: 90,
    Highlight.KEYWORD1: 94,
    Highlight.KEYWORD2: 91,
    Highlight.NUMBER: 36,
    Highlight.STRING: 36,
}


def is_separator(ch: str) -> bool:
    return not ch or ch.isspace() or ch == "\0" or ch in SEPARATORS


def syntax_to_color(hl: Highlight) -> int:
    return _COLORS.get(hl, 37)


def highlight(rendered: str, profile: Optional[SyntaxProfile]) -> List[Highlight]:
    """Classify every character of ``rendered``.

    The result always has ``len(rendered)`` entries. Strings only track the
    quote that opened them and a backslash swallows the next character
    unchecked; numbers are digits with an optional ``.`` continuation.
    """

    hl = [Highlight.NORMAL] * len(rendered)
    if profile is None:
        return hl

    scs = profile.singleline_comment_start
    length = len(rendered)
    i = 0
    prev_sep = True
    in_string = ""

    while i < length:
        ch = rendered[i]
        prev_hl = hl[i - 1] if i > 0 else Highlight.NORMAL

        if scs and not in_string and rendered.startswith(scs, i):
            hl[i:] = [Highlight.COMMENT] * (length - i)
            break

        if profile.highlight_strings:
            if in_string:
                hl[i] = Highlight.STRING
                if ch == "\\" and i + 1 < length:
                    hl[i + 1] = Highlight.STRING
                    i += 2
                    continue
                if ch == in_string:
                    in_string = ""
                i += 1
                prev_sep = True
                continue
            if ch in ('"', "'"):
                in_string = ch
                hl[i] = Highlight.STRING
                i += 1
                continue

        if profile.highlight_numbers:
            if (ch.isdigit() and (prev_sep or prev_hl == Highlight.NUMBER)) or (
                ch == "." and prev_hl == Highlight.NUMBER
            ):
                hl[i] = Highlight.NUMBER
                i += 1
                prev_sep = False
                continue

        if prev_sep:
            matched = _match_keyword(rendered, i, profile)
            if matched is not None:
                klen, mark = matched
                hl[i : i + klen] = [mark] * klen
                i += klen
                prev_sep = False
                continue

        prev_sep = is_separator(ch)
        i += 1

    return hl


def _match_keyword(
    rendered: str, i: int, profile: SyntaxProfile
) -> Optional[tuple[int, Highlight]]:
    for keyword in profile.keywords:
        token = keyword.text
        end = i + len(token)
        if not rendered.startswith(token, i):
            continue
        tail = rendered[end] if end < len(rendered) else ""
        if is_separator(tail):
            mark = Highlight.KEYWORD2 if keyword.secondary else Highlight.KEYWORD1
            return len(token), mark
    return None


__all__ = [
    "Highlight",
    "SEPARATORS",
    "highlight",
    "is_separator",
    "syntax_to_color",
]
