"""Typed construction of message-bar text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vin.config import STATUS_MESSAGE_MAX


@dataclass(frozen=True, slots=True)
class StatusMessage:
    subject: str
    count: Optional[int] = None
    error: Optional[str] = None

    def render(self) -> str:
        text = self.subject
        if self.count is not None:
            text = f"{self.count} {text}"
        if self.error:
            text = f"{text}: {self.error}"
        return text[:STATUS_MESSAGE_MAX]


def format_status(
    subject: str, *, count: Optional[int] = None, error: Optional[str] = None
) -> str:
    return StatusMessage(subject, count=count, error=error).render()


__all__ = ["StatusMessage", "format_status"]
