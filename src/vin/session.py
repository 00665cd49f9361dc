"""One editing session: state, modes and key tables wired together."""

from __future__ import annotations

from typing import Dict, Optional

from vin.buffer import BufferMirror, Document, EditorState, clamp_cursor, open_document
from vin.config import EditorConfig
from vin.modes import CommandMode, InsertMode, KeyInput, ModeBus, ModeContext, ModeResult, NormalMode
from vin.modes.mode_manager import ModeManager
from vin.runtime import telemetry
from vin.view import compose_frame, scroll


def create_default_manager(
    state: EditorState, config: Optional[EditorConfig] = None
) -> ModeManager:
    """Build a ModeManager with the standard mode set and default keymaps."""

    config = config or EditorConfig()
    context = ModeContext(state=state, bus=ModeBus())
    manager = ModeManager(context, pending_timeout_ms=config.pending_timeout_ms)
    mode_options = {"default_pending_timeout_ms": config.pending_timeout_ms}
    manager.register_mode(NormalMode, **mode_options)
    manager.register_mode(InsertMode, **mode_options)
    manager.register_mode(CommandMode, **mode_options)
    return manager


class EditorSession:
    """Entry point hosts drive: feed keys and resizes, pull frames.

    ``handle_key`` never raises for any key; failures inside an action are
    logged and reported in the message bar.
    """

    def __init__(
        self,
        state: Optional[EditorState] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.state = state or EditorState(document=Document(tab_stop=self.config.tab_stop))
        self.manager = create_default_manager(self.state, self.config)
        self.logger = telemetry.get_logger("vin.session")
        if not self.state.message:
            self.state.set_message(self.config.welcome_message)

    @classmethod
    def open(
        cls, path: Optional[str], config: Optional[EditorConfig] = None
    ) -> "EditorSession":
        """Load ``path`` (raising ``FileLoadError``) and start a session on it."""

        config = config or EditorConfig()
        document = open_document(path, tab_stop=config.tab_stop)
        return cls(EditorState(document=document), config)

    @property
    def bus(self) -> ModeBus:
        return self.manager.context.bus

    @property
    def quit_requested(self) -> bool:
        return self.state.quit_requested

    def handle_key(self, key: KeyInput) -> ModeResult:
        try:
            result = self.manager.handle_key(key)
        except Exception as exc:
            self.logger.error(f"key dispatch failed for {key.key!r}: {exc}")
            self.state.set_message(f"Error: {exc}")
            result = ModeResult(consumed=True, status="error", message=str(exc))
        self.state.cursor = clamp_cursor(self.state.document, self.state.cursor)
        return result

    def process_timeouts(self) -> Dict[str, ModeResult]:
        return self.manager.process_timeouts()

    def resize(self, rows: int, cols: int) -> None:
        self.state.resize(rows, cols)
        telemetry.record_event(
            "viewport.resize",
            level="debug",
            data={"rows": self.state.screen_rows, "cols": self.state.screen_cols},
        )

    def render(self) -> bytes:
        """Scroll the viewport to the cursor and compose one frame."""

        rendered_column = scroll(self.state)
        return compose_frame(self.state, rendered_column)

    def mirror(self) -> BufferMirror:
        rendered_column = scroll(self.state)
        return BufferMirror.capture(self.state, rendered_column)


__all__ = ["EditorSession", "create_default_manager"]
