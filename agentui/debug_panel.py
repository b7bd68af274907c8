"""Panel listing recent log entries, filtered by level and scrollable."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional

from rich.panel import Panel
from rich.text import Text

from agentui.layout import Rect

_DEFAULT_CAPACITY = 1000
_VISIBLE_LOG_COUNT = 10
_PAGE_SIZE = 10


class LevelFilter(IntEnum):
    """Log severities, least verbose first; also used as the panel's filter."""

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


_NEXT_FILTER = {
    LevelFilter.OFF: LevelFilter.ERROR,
    LevelFilter.ERROR: LevelFilter.WARN,
    LevelFilter.WARN: LevelFilter.INFO,
    LevelFilter.INFO: LevelFilter.DEBUG,
    LevelFilter.DEBUG: LevelFilter.TRACE,
    LevelFilter.TRACE: LevelFilter.OFF,
}

_LEVEL_COLOURS = {
    LevelFilter.ERROR: "red",
    LevelFilter.WARN: "yellow",
    LevelFilter.INFO: "green",
    LevelFilter.DEBUG: "cyan",
    LevelFilter.TRACE: "rgb(128,128,128)",
}

_MUTED = "bright_black"
_MODULE_COLOUR = "rgb(100,149,237)"


@dataclass
class LogEntry:
    """One log record shown in the panel."""

    level: LevelFilter
    message: str
    module: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)


class DebugPanel:
    """Bounded log buffer with level filtering and scrolling."""

    def __init__(self, max_entries: int = _DEFAULT_CAPACITY) -> None:
        self.max_entries = max_entries
        self.logs: deque[LogEntry] = deque()
        self.level_filter = LevelFilter.INFO
        self.scroll_offset = 0
        self.auto_scroll = True

    def add_log(self, entry: LogEntry) -> None:
        """Append an entry, dropping the oldest when full."""
        if len(self.logs) >= self.max_entries:
            self.logs.popleft()
            if self.scroll_offset > 0:
                self.scroll_offset -= 1
        self.logs.append(entry)
        if self.auto_scroll:
            self.scroll_to_bottom()

    def clear(self) -> None:
        self.logs.clear()
        self.scroll_offset = 0

    def set_level_filter(self, level: LevelFilter) -> None:
        self.level_filter = level

    def cycle_level_filter(self) -> None:
        self.level_filter = _NEXT_FILTER[self.level_filter]

    def level_filter_name(self) -> str:
        return self.level_filter.name

    def _max_offset(self) -> int:
        return max(0, len(self.logs) - _VISIBLE_LOG_COUNT)

    def scroll_up(self) -> None:
        if self.scroll_offset > 0:
            self.scroll_offset -= 1
            self.auto_scroll = False

    def scroll_down(self) -> None:
        if self.scroll_offset < self._max_offset():
            self.scroll_offset += 1

    def scroll_to_top(self) -> None:
        self.scroll_offset = 0
        self.auto_scroll = False

    def scroll_to_bottom(self) -> None:
        self.scroll_offset = self._max_offset()
        self.auto_scroll = True

    def page_up(self) -> None:
        self.scroll_offset = max(0, self.scroll_offset - _PAGE_SIZE)
        self.auto_scroll = False

    def page_down(self) -> None:
        self.scroll_offset = min(self.scroll_offset + _PAGE_SIZE, self._max_offset())

    def _filtered_logs(self) -> list[LogEntry]:
        return [entry for entry in self.logs if entry.level <= self.level_filter]

    def filtered_count(self) -> int:
        """Number of entries that pass the level filter."""
        return len(self._filtered_logs())

    def is_empty(self) -> bool:
        return not self._filtered_logs()

    def format_log_entry(self, entry: LogEntry) -> Text:
        """Format an entry as ``[HH:MM:SS.mmm] LEVEL [module] message``."""
        stamp = entry.timestamp.strftime("%H:%M:%S") + f".{entry.timestamp.microsecond // 1000:03d}"
        line = Text.assemble(
            ("[", _MUTED),
            (stamp, _MUTED),
            ("] ", _MUTED),
            (f"{entry.level.name:<5}", _LEVEL_COLOURS.get(entry.level, "")),
        )
        if entry.module is not None:
            line.append(f" [{entry.module}] ", style=_MODULE_COLOUR)
        else:
            line.append(" ")
        line.append(entry.message)
        return line

    def render(self, area: Rect) -> Panel:
        """Build the panel for ``area``, clamping the scroll offset to the content."""
        filtered = self._filtered_logs()
        visible_height = max(0, area.height - 2)
        log_count = len(filtered)

        max_offset = max(0, log_count - visible_height)
        if self.scroll_offset > max_offset:
            self.scroll_offset = max_offset

        start = self.scroll_offset
        visible = filtered[start:min(start + visible_height, log_count)]

        title = (
            f"Debug Panel [Level: {self.level_filter_name()}] [{log_count} logs] "
            "[F12:Close l:Level c:Clear]"
        )
        body = Text("\n").join(self.format_log_entry(entry) for entry in visible)
        return Panel(
            body,
            title=title,
            border_style=_MUTED,
            width=area.width,
            height=area.height,
        )