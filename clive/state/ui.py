"""UI state - info bar, fullscreen and transient status messages."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..config import MESSAGE_TIMEOUT_S
from ..logging import now


@dataclass
class StatusMessage:
    """A message shown in the info bar until it expires."""
    text: str
    is_error: bool = False
    shown_at: float = 0.0

    def expired(self, t: float) -> bool:
        return (t - self.shown_at) > MESSAGE_TIMEOUT_S


@dataclass
class UIState:
    """State for UI elements."""
    show_infobar: bool = True
    fullscreen: bool = False
    message: Optional[StatusMessage] = None
    quit_requested: bool = False

    def toggle_infobar(self) -> None:
        self.show_infobar = not self.show_infobar

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen

    def notify(self, text: str) -> None:
        self.message = StatusMessage(text, is_error=False, shown_at=now())

    def error(self, text: str) -> None:
        self.message = StatusMessage(text, is_error=True, shown_at=now())

    def expire_message(self, t: Optional[float] = None) -> bool:
        """Drop the message once its time is up. Returns True if dropped."""
        if self.message and self.message.expired(now() if t is None else t):
            self.message = None
            return True
        return False
