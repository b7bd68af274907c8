"""Modal prompt asking the user to allow or deny a tool call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.panel import Panel
from rich.text import Text

from agentui.layout import Rect

_MAX_WIDTH = 60
_MAX_HEIGHT = 10


class PermissionResponse(Enum):
    ALLOW_ONCE = "allow_once"
    ALWAYS_ALLOW = "always_allow"
    DENY = "deny"


@dataclass
class PermissionPrompt:
    """State of the permission overlay."""

    tool_name: str = ""
    description: str = ""
    active: bool = False

    def show(self, tool_name: str, description: str) -> None:
        self.tool_name = tool_name
        self.description = description
        self.active = True

    def dismiss(self) -> None:
        self.active = False

    def prompt_area(self, area: Rect) -> Rect:
        """The centred rectangle the prompt occupies within ``area``."""
        width = min(_MAX_WIDTH, max(0, area.width - 4))
        height = min(_MAX_HEIGHT, max(0, area.height - 4))
        x = area.x + max(0, area.width - width) // 2
        y = area.y + max(0, area.height - height) // 2
        return Rect(x, y, width, height)

    def render(self, area: Rect) -> Optional[Panel]:
        """Build the overlay panel sized for ``area``, or None when inactive."""
        if not self.active:
            return None

        target = self.prompt_area(area)
        body = Text("\n").join(
            [
                Text("Permission Required", style="bold yellow"),
                Text(""),
                Text.assemble(("Tool: ", "grey50"), (self.tool_name, "bold white")),
                Text(""),
                Text(self.description, style="grey50"),
                Text(""),
                Text("[Y] Allow   [A] Always Allow   [N] Deny", style="cyan"),
            ]
        )
        return Panel(
            body,
            title="Security",
            border_style="yellow",
            width=target.width,
            height=target.height,
        )