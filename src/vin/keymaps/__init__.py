"""Key-sequence tables and the trie resolver used by the modes.

The built-in tables live in :mod:`vin.keymaps.defaults`, which is imported
on demand because it pulls in the action modules.
"""

from .models import ActionRef, Binding, KeySequence, KeyStroke, stroke_token
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult

__all__ = [
    "ActionRef",
    "Binding",
    "KeySequence",
    "KeyStroke",
    "stroke_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
