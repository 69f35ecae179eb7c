"""Input state - active mode and the Command mode text buffer."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..types import Mode


@dataclass
class InputState:
    """State for mode handling."""
    mode: Mode = Mode.NORMAL
    buffer: str = ""
    prefix: str = ":"
    # the trigger character also arrives as text right after the key press
    _swallow: Optional[str] = None

    def enter_command(self, prefix: str) -> None:
        """Switch to Command mode with an empty buffer."""
        self.mode = Mode.COMMAND
        self.buffer = ""
        self.prefix = prefix
        self._swallow = prefix

    def leave_command(self) -> str:
        """Back to Normal mode. Returns the discarded or confirmed buffer."""
        text = self.buffer
        self.mode = Mode.NORMAL
        self.buffer = ""
        self._swallow = None
        return text

    def append(self, text: str) -> None:
        if self._swallow is not None:
            swallow, self._swallow = self._swallow, None
            if not self.buffer and text.startswith(swallow):
                text = text[len(swallow):]
        self.buffer += text

    def backspace(self) -> None:
        self._swallow = None
        self.buffer = self.buffer[:-1]

    @property
    def display(self) -> str:
        """Prompt plus buffer, as shown in the info bar."""
        return f"{self.prefix}{self.buffer}"
