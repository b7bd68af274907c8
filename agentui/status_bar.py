"""State shown in the bottom status bar."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StatusBar:
    """Session and activity information for the status bar."""

    session_id: str = "default"
    connected: bool = True
    tool_count: int = 6
    model: str = "glm-4-flash"
    is_streaming: bool = False
    status_message: str = "Ready"

    def set_status(self, msg: object) -> None:
        self.status_message = str(msg)

    def set_streaming(self, streaming: bool) -> None:
        self.is_streaming = streaming
        self.status_message = "Processing..." if streaming else "Ready"