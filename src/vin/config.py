"""Editor configuration, mode names and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

ENV_PREFIX = "VIN_"

DEFAULT_TAB_STOP = 4
DEFAULT_PENDING_TIMEOUT_MS = 1000
STATUS_MESSAGE_MAX = 80
FILENAME_DISPLAY_MAX = 20


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"


@dataclass(frozen=True)
class ModeConfig:
    """Display settings for a mode."""

    label: str


MODE_CONFIGS = {
    EditorMode.NORMAL: ModeConfig("NORMAL"),
    EditorMode.INSERT: ModeConfig("INSERT"),
    EditorMode.COMMAND: ModeConfig("COMMAND"),
}


@dataclass(slots=True)
class EditorConfig:
    tab_stop: int = DEFAULT_TAB_STOP
    pending_timeout_ms: int = DEFAULT_PENDING_TIMEOUT_MS
    welcome_message: str = "Use :q to quit, :w to save"

    def __post_init__(self) -> None:
        if self.tab_stop <= 0:
            raise ValueError("tab_stop must be positive")
        if self.pending_timeout_ms <= 0:
            raise ValueError("pending_timeout_ms must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        return cls(
            tab_stop=_env_int(env, "TAB_STOP", DEFAULT_TAB_STOP),
            pending_timeout_ms=_env_int(
                env, "PENDING_TIMEOUT_MS", DEFAULT_PENDING_TIMEOUT_MS
            ),
        )


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


__all__ = [
    "EditorConfig",
    "EditorMode",
    "ModeConfig",
    "MODE_CONFIGS",
    "DEFAULT_TAB_STOP",
    "STATUS_MESSAGE_MAX",
    "FILENAME_DISPLAY_MAX",
]
