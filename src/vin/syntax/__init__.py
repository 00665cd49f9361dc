"""Language profiles and the per-row highlighter."""

from .highlighter import Highlight, highlight, is_separator, syntax_to_color
from .profiles import C_PROFILE, HLDB, PYTHON_PROFILE, Keyword, SyntaxProfile, select_profile

__all__ = [
    "Highlight",
    "highlight",
    "is_separator",
    "syntax_to_color",
    "Keyword",
    "SyntaxProfile",
    "C_PROFILE",
    "PYTHON_PROFILE",
    "HLDB",
    "select_profile",
]
