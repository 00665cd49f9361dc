"""Language profiles driving the highlighter."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Sequence

SECONDARY_MARKER = "|"


@dataclass(frozen=True, slots=True)
class Keyword:
    text: str
    secondary: bool = False

    @classmethod
    def parse(cls, entry: str) -> "Keyword":
        if entry.endswith(SECONDARY_MARKER):
            return cls(entry[: -len(SECONDARY_MARKER)], secondary=True)
        return cls(entry)


@dataclass(frozen=True, slots=True)
class SyntaxProfile:
    """Keyword lists and flags for one file type.

    Keywords ending in ``|`` are secondary. They are kept longest first so
    the highlighter can stop at the first hit.
    """

    filetype: str
    filematch: tuple[str, ...]
    keywords: tuple[Keyword, ...] = ()
    singleline_comment_start: str = ""
    highlight_numbers: bool = False
    highlight_strings: bool = False

    @classmethod
    def build(
        cls,
        filetype: str,
        *,
        filematch: Sequence[str],
        keywords: Sequence[str] = (),
        singleline_comment_start: str = "",
        highlight_numbers: bool = False,
        highlight_strings: bool = False,
    ) -> "SyntaxProfile":
        parsed = [Keyword.parse(entry) for entry in keywords if entry.strip("|")]
        parsed.sort(key=lambda keyword: len(keyword.text), reverse=True)
        return cls(
            filetype=filetype,
            filematch=tuple(filematch),
            keywords=tuple(parsed),
            singleline_comment_start=singleline_comment_start,
            highlight_numbers=highlight_numbers,
            highlight_strings=highlight_strings,
        )

    def matches(self, filename: str) -> bool:
        _, ext = os.path.splitext(filename)
        for pattern in self.filematch:
            if pattern.startswith("."):
                if ext and ext == pattern:
                    return True
            elif pattern in filename:
                return True
        return False


C_PROFILE = SyntaxProfile.build(
    "c",
    filematch=(".c", ".h", ".cpp"),
    keywords=(
        # Types.
        "int",
        "long",
        "double",
        "float",
        "char",
        "unsigned",
        "signed",
        "void",
        # Statements.
        "switch|",
        "if|",
        "while|",
        "for|",
        "break|",
        "continue|",
        "return|",
        "else|",
        "struct|",
        "union|",
        "typedef|",
        "static|",
        "enum|",
        "class|",
        "case|",
    ),
    singleline_comment_start="//",
    highlight_numbers=True,
    highlight_strings=True,
)

PYTHON_PROFILE = SyntaxProfile.build(
    "python",
    filematch=(".py",),
    keywords=(
        "def",
        "class",
        "lambda",
        "import",
        "from",
        "as",
        "return",
        "yield",
        "if",
        "elif",
        "else",
        "for",
        "while",
        "break",
        "continue",
        "try",
        "except",
        "finally",
        "raise",
        "with",
        "pass",
        "in",
        "is",
        "not",
        "and",
        "or",
        "None|",
        "True|",
        "False|",
        "self|",
    ),
    singleline_comment_start="#",
    highlight_numbers=True,
    highlight_strings=True,
)

HLDB: tuple[SyntaxProfile, ...] = (C_PROFILE, PYTHON_PROFILE)


def select_profile(
    filename: Optional[str], database: Sequence[SyntaxProfile] = HLDB
) -> Optional[SyntaxProfile]:
    if not filename:
        return None
    for profile in database:
        if profile.matches(filename):
            return profile
    return None


__all__ = [
    "Keyword",
    "SyntaxProfile",
    "C_PROFILE",
    "PYTHON_PROFILE",
    "HLDB",
    "select_profile",
]
