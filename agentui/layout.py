"""Screen layout for the terminal UI: fixed rows around a flexible conversation pane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_TITLE_HEIGHT = 3
_CONVERSATION_MIN = 10
_DEBUG_HEIGHT = 15
_INPUT_HEIGHT = 3
_INPUT_STATUS_HEIGHT = 1
_STATUS_HEIGHT = 1

_POPUP_HEIGHT = 10
_POPUP_WIDTH = 50
_POPUP_LEFT = 2


@dataclass(frozen=True)
class Rect:
    """A rectangle in terminal cell coordinates."""

    x: int
    y: int
    width: int
    height: int

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        """Return True when the cell (x, y) lies inside the rectangle."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass(frozen=True)
class LayoutAreas:
    """The areas each widget is drawn into."""

    title: Rect
    conversation: Rect
    debug: Optional[Rect]
    input: Rect
    input_status: Rect
    status: Rect
    popup: Optional[Rect]


def _split_vertical(area: Rect, lengths: list[Optional[int]], min_size: int) -> list[Rect]:
    """Split ``area`` into rows; the single ``None`` slot is flexible with a minimum size."""
    flex_index = lengths.index(None)
    fixed = sum(length for length in lengths if length is not None)
    flex = area.height - fixed

    if flex >= min_size:
        sizes = [flex if length is None else length for length in lengths]
    else:
        flex = min(min_size, area.height)
        remaining = area.height - flex
        sizes = []
        for index, length in enumerate(lengths):
            if index == flex_index:
                sizes.append(flex)
            else:
                size = min(length, remaining)
                remaining -= size
                sizes.append(size)

    rects = []
    y = area.y
    for size in sizes:
        rects.append(Rect(area.x, y, area.width, size))
        y += size
    return rects


def calculate_layout(size: Rect, show_debug: bool) -> LayoutAreas:
    """Compute the widget areas for a terminal of the given size."""
    if show_debug:
        lengths = [
            _TITLE_HEIGHT,
            None,
            _DEBUG_HEIGHT,
            _INPUT_HEIGHT,
            _INPUT_STATUS_HEIGHT,
            _STATUS_HEIGHT,
        ]
    else:
        lengths = [_TITLE_HEIGHT, None, _INPUT_HEIGHT, _INPUT_STATUS_HEIGHT, _STATUS_HEIGHT]

    chunks = _split_vertical(size, lengths, _CONVERSATION_MIN)

    if show_debug:
        title, conversation, debug, input_area, input_status, status = chunks
    else:
        title, conversation, input_area, input_status, status = chunks
        debug = None

    popup = Rect(
        x=_POPUP_LEFT,
        y=max(0, input_area.top() - (_POPUP_HEIGHT + 1)),
        width=min(_POPUP_WIDTH, max(0, size.width - 4)),
        height=_POPUP_HEIGHT,
    )

    return LayoutAreas(
        title=title,
        conversation=conversation,
        debug=debug,
        input=input_area,
        input_status=input_status,
        status=status,
        popup=popup,
    )