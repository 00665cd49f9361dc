"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import List

from vin.keymaps import KeymapResolver, ResolutionMatch, stroke_token
from vin.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return stroke_token(key.key, key.modifiers)


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


class KeymapMode(Mode):
    """Mode that feeds keys through the resolver before any fallback.

    Tokens accumulate while they form a prefix of a bound sequence. A key
    that breaks a pending prefix drops the prefix and is resolved again on
    its own.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        default_pending_timeout_ms: int = 1000,
    ) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"vin.modes.{self.name}")
        self._resolver = require_keymap_resolver(context)
        self._pending: List[str] = []
        self._default_timeout_ms = default_pending_timeout_ms

    @property
    def pending_tokens(self) -> tuple[str, ...]:
        return tuple(self._pending)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._set_pending([])

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        had_prefix = bool(self._pending)
        self._set_pending([*self._pending, token])
        result = self._resolver.resolve(self.name, tuple(self._pending))

        if result.status == "match" and result.match:
            self._set_pending([])
            return self._execute_match(result.match)

        if result.status == "pending":
            return self._pending_result(result.timeout_ms)

        self._set_pending([])
        if had_prefix:
            return self.handle_key(key)
        return self.handle_unmapped(key)

    def handle_unmapped(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss")

    def handle_timeout(self) -> ModeResult:
        if not self._pending:
            return ModeResult(consumed=False, status="timeout")

        tokens = tuple(self._pending)
        self._set_pending([])
        result = self._resolver.resolve(self.name, tokens)
        if result.status == "match" and result.match:
            return self._execute_match(result.match)
        return ModeResult(consumed=False, status="timeout", message="pending_timeout")

    def _pending_result(self, timeout_ms: int | None) -> ModeResult:
        return ModeResult(
            consumed=True,
            status="pending",
            message="awaiting_sequence",
            timeout_ms=timeout_ms or self._default_timeout_ms,
        )

    def _set_pending(self, tokens: List[str]) -> None:
        self._pending = tokens

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = [
    "KeymapMode",
    "key_to_token",
    "require_keymap_resolver",
]
