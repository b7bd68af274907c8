"""Line-editor helper combining @ file completion and bracket matching."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional, Union

from agentui.completer import Completion, FileReferenceCompleter

_OPEN_BRACKETS = "([{"
_CLOSE_BRACKETS = ")]}"


def _check_bracket(line: str, pos: int) -> Optional[tuple[str, int]]:
    """Find a bracket under or just before the cursor that could have a match."""
    if not line:
        return None
    if pos >= len(line):
        pos = len(line) - 1
        char = line[pos]
        return (char, pos) if char in _CLOSE_BRACKETS else None

    under_cursor = True
    while True:
        char = line[pos]
        if char in _CLOSE_BRACKETS:
            return None if pos == 0 else (char, pos)
        if char in _OPEN_BRACKETS:
            return None if pos + 1 == len(line) else (char, pos)
        if under_cursor and pos > 0:
            under_cursor = False
            pos -= 1
        else:
            return None


class FileReferenceHelper:
    """Completes @ file references and tracks brackets near the cursor."""

    def __init__(
        self,
        root: Union[str, os.PathLike] = ".",
        is_file: Optional[Callable[[Path], bool]] = None,
    ) -> None:
        self.completer = FileReferenceCompleter(root, is_file)
        self._bracket: Optional[tuple[str, int]] = None

    def complete(self, line: str, pos: int) -> tuple[int, list[Completion]]:
        return self.completer.complete(line, pos)

    def highlight(self, line: str, pos: int) -> str:
        """Track the bracket near the cursor and return the line without markup."""
        self._bracket = _check_bracket(line, max(pos, 0))
        return line

    def highlight_char(self, line: str, pos: int, force: bool) -> bool:
        """Return True when a bracket near the cursor calls for a redraw."""
        if force:
            self._bracket = None
            return False
        self._bracket = _check_bracket(line, pos)
        return self._bracket is not None