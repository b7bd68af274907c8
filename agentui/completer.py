"""Completion of @ file references in an input line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

_MAX_RESULTS = 20


@dataclass(frozen=True)
class Completion:
    """A completion candidate: what is shown and what is inserted."""

    display: str
    replacement: str


class FileReferenceCompleter:
    """Suggests files for the pattern following the last @ before the cursor."""

    def __init__(
        self,
        root: Union[str, os.PathLike] = ".",
        is_file: Optional[Callable[[Path], bool]] = None,
    ) -> None:
        self.root = Path(root)
        self._is_file = is_file or (lambda path: path.is_file())

    def search_files(self, pattern: str) -> list[str]:
        """Return up to 20 sorted relative paths of files whose path matches the pattern."""
        search_pattern = f"**/*{pattern}*" if pattern else "*"
        try:
            entries = list(self.root.glob(search_pattern))
        except (ValueError, NotImplementedError, OSError):
            return []

        matches = {
            entry.relative_to(self.root).as_posix()
            for entry in entries
            if self._is_file(entry)
        }
        return sorted(matches)[:_MAX_RESULTS]

    def complete(self, line: str, pos: int) -> tuple[int, list[Completion]]:
        """Return the start of the replaced text and the candidates for the cursor."""
        before_cursor = line[:pos]
        at_pos = before_cursor.rfind("@")
        if at_pos < 0:
            return 0, []
        pattern = before_cursor[at_pos + 1:]
        candidates = [Completion(path, path) for path in self.search_files(pattern)]
        return at_pos, candidates