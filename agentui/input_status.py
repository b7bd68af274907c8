"""Small indicator showing whether input is being typed, sent, or was sent."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

from rich.text import Text

_SENT_RESET_SECONDS = 1.0
_TYPING_RESET_SECONDS = 5.0


class InputStatus(Enum):
    IDLE = "idle"
    TYPING = "typing"
    SENDING = "sending"
    SENT = "sent"


_DISPLAY = {
    InputStatus.IDLE: ("", "", "grey50"),
    InputStatus.TYPING: ("✎", "输入中", "cyan"),
    InputStatus.SENDING: ("⏳", "发送中", "yellow"),
    InputStatus.SENT: ("✓", "已发送", "green"),
}


class InputStatusIndicator:
    """Tracks the input status and when it last changed."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.status = InputStatus.IDLE
        self.status_updated = clock()

    def set_status(self, status: InputStatus) -> None:
        self.status = status
        self.status_updated = self._clock()

    def check_auto_reset(self) -> bool:
        """Return to idle after a transient state has lasted long enough."""
        elapsed = self._clock() - self.status_updated
        if self.status is InputStatus.SENT and elapsed > _SENT_RESET_SECONDS:
            self.status = InputStatus.IDLE
            return True
        if self.status is InputStatus.TYPING and elapsed > _TYPING_RESET_SECONDS:
            self.status = InputStatus.IDLE
            return True
        return False

    def display(self) -> tuple[str, str, str]:
        """Return (icon, label, colour) for the current status."""
        return _DISPLAY[self.status]

    def render(self) -> Optional[Text]:
        """Render the indicator, or None while idle."""
        self.check_auto_reset()
        if self.status is InputStatus.IDLE:
            return None
        icon, label, colour = self.display()
        return Text.assemble((icon, colour), " ", (label, colour))