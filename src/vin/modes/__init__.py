"""Mode state machine: Normal, Insert and Command modes.

``ModeManager`` lives in :mod:`vin.modes.mode_manager`; it loads the default
key tables, which import the action modules.
"""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .command_mode import CommandMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "CommandMode",
]
