"""Mouse text selection over rendered panel lines."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import MutableSequence, Optional, Sequence, Union

from rich.segment import Segment
from rich.style import Style
from wcwidth import wcwidth

from agentui.layout import Rect

HIGHLIGHT_STYLE = Style(bgcolor="rgb(80,80,120)")

Line = Union[str, MutableSequence[Segment]]


@dataclass(frozen=True)
class TextPosition:
    """Logical position within rendered text content."""

    line: int
    column: int


class SelectionTarget(Enum):
    """The panel a selection belongs to."""

    CONVERSATION = "conversation"
    DEBUG_PANEL = "debug_panel"


@dataclass
class TextSelection:
    """An active text selection; the end starts at the start position."""

    start: TextPosition
    target: SelectionTarget
    end: Optional[TextPosition] = None
    dragging: bool = False

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = self.start

    def update_end(self, pos: TextPosition) -> None:
        self.end = pos

    def normalized(self) -> tuple[TextPosition, TextPosition]:
        """Return (first, last) in line-major order."""
        start, end = self.start, self.end
        if (start.line, start.column) <= (end.line, end.column):
            return start, end
        return end, start

    def is_empty(self) -> bool:
        return self.start == self.end


def mouse_to_text_position(
    mouse_x: int,
    mouse_y: int,
    area: Rect,
    content_line_count: int,
    scroll_offset: int,
) -> Optional[TextPosition]:
    """Map terminal coordinates to a position in a bordered panel's content."""
    content_x = max(0, mouse_x - (area.x + 1))
    content_y = max(0, mouse_y - (area.y + 1))
    content_width = max(0, area.width - 2)
    content_height = max(0, area.height - 2)

    if content_x > content_width or content_y > content_height:
        return None

    line_index = scroll_offset + content_y
    if line_index >= content_line_count:
        return None
    return TextPosition(line=line_index, column=content_x)


def _line_text(line: Line) -> str:
    if isinstance(line, str):
        return line
    return "".join(segment.text for segment in line)


def _display_width(text: str) -> int:
    return sum(max(0, wcwidth(char)) for char in text)


def _selected_lines(lines: Sequence[Line], selection: TextSelection) -> range:
    start, end = selection.normalized()
    last = min(end.line, max(0, len(lines) - 1))
    return range(start.line, last + 1) if lines else range(0)


def extract_selected_text(lines: Sequence[Line], selection: TextSelection) -> str:
    """Return the plain text covered by the selection, lines joined by newlines."""
    if selection.is_empty():
        return ""

    start, end = selection.normalized()
    line_range = _selected_lines(lines, selection)
    pieces = []
    for index in line_range:
        chars = _line_text(lines[index])
        length = len(chars)
        begin = min(start.column, length) if index == start.line else 0
        finish = min(end.column + 1, length) if index == end.line else length
        pieces.append(chars[begin:finish])
    return "\n".join(pieces)


def apply_selection_highlight(lines: Sequence[Line], selection: TextSelection) -> None:
    """Give every segment that overlaps the selection a highlight background, in place."""
    if selection.is_empty():
        return

    start, end = selection.normalized()
    for index in _selected_lines(lines, selection):
        line = lines[index]
        if isinstance(line, str):
            continue
        sel_start = start.column if index == start.line else 0
        sel_end = end.column + 1 if index == end.line else sys.maxsize

        offset = 0
        for position, segment in enumerate(line):
            span_start = offset
            span_end = offset + _display_width(segment.text)
            if span_end > sel_start and span_start < sel_end:
                style = (segment.style or Style()) + HIGHLIGHT_STYLE
                line[position] = Segment(segment.text, style, segment.control)
            offset = span_end