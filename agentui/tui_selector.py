"""Full-screen file picker with type-to-filter."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

_MAX_FILES = 100


class TuiFileSelector:
    """Lists files matching a pattern and lets the user pick one."""

    def __init__(
        self,
        root: Union[str, os.PathLike] = ".",
        is_file: Optional[Callable[[Path], bool]] = None,
    ) -> None:
        self.root = Path(root)
        self._is_file = is_file or (lambda path: path.is_file())
        self.files: list[Path] = []
        self.filtered_indices: list[int] = []
        self.selected_idx = 0
        self.filter = ""
        self.choice: Optional[Path] = None

    def search(self, pattern: str) -> None:
        """Find files for ``pattern`` and reset the selection."""
        self.files = self._find_files(pattern)
        self.filtered_indices = list(range(len(self.files)))
        self.selected_idx = 0

    def _find_files(self, pattern: str) -> list[Path]:
        search_pattern = f"**/*{pattern}*" if pattern else "*"
        try:
            entries = list(self.root.glob(search_pattern))
        except (ValueError, NotImplementedError, OSError):
            return []
        matches = {
            entry.relative_to(self.root)
            for entry in entries
            if self._is_file(entry)
        }
        return sorted(matches)[:_MAX_FILES]

    def _apply_filter(self) -> None:
        if not self.filter:
            self.filtered_indices = list(range(len(self.files)))
            return
        needle = self.filter.lower()
        self.filtered_indices = [
            index
            for index, path in enumerate(self.files)
            if needle in path.as_posix().lower()
        ]

    def handle_key(self, key: str) -> bool:
        """Apply one key press; return True once the selector is finished.

        Keys are single characters or one of: esc, enter, up, down,
        backspace, home, end. The picked file, if any, is in ``choice``.
        """
        if key in ("q", "esc"):
            self.choice = None
            return True
        if key == "enter":
            if self.filtered_indices:
                self.choice = self.files[self.filtered_indices[self.selected_idx]]
                return True
        elif key == "down":
            if self.filtered_indices:
                self.selected_idx = min(self.selected_idx + 1, len(self.filtered_indices) - 1)
        elif key == "up":
            self.selected_idx = max(0, self.selected_idx - 1)
        elif key == "backspace":
            self.filter = self.filter[:-1]
            self._apply_filter()
            self.selected_idx = 0
        elif key == "home":
            self.selected_idx = 0
        elif key == "end":
            self.selected_idx = max(0, len(self.filtered_indices) - 1)
        elif len(key) == 1 and key.isascii() and key.isalnum():
            self.filter += key
            self._apply_filter()
            self.selected_idx = 0
        return False

    def render(self) -> Group:
        """Build the title box, file list and filter hint."""
        title = Text.assemble(
            ("文件选择器", "bold cyan"),
            " - ",
            ("↑↓", "green"),
            " 导游 ",
            ("Enter", "green"),
            " 选择 ",
            ("q/Esc", "yellow"),
            " 取消",
        )
        items = []
        for list_idx, file_idx in enumerate(self.filtered_indices):
            path = self.files[file_idx]
            style = "bold on bright_black" if list_idx == self.selected_idx else ""
            items.append(Text(path.name or path.as_posix(), style=style))

        hint = f"过滤: {self.filter}" if self.filter else "输入字符过滤..."
        return Group(
            Panel(title, border_style="cyan"),
            Panel(Text("\n").join(items), title=f"文件 ({len(self.filtered_indices)})"),
            Text(hint, style="yellow"),
        )

    def run(self) -> Optional[Path]:
        """Show the selector on the terminal and return the chosen file, or None."""
        if not self.files:
            return None
        console = Console()
        with console.screen() as screen, _raw_keys() as keys:
            screen.update(self.render())
            for key in keys:
                if self.handle_key(key):
                    return self.choice
                screen.update(self.render())
        return None


if sys.platform == "win32":
    import msvcrt

    _WIN_SPECIAL = {"H": "up", "P": "down", "G": "home", "O": "end", "S": "delete"}

    @contextmanager
    def _raw_keys() -> Iterator[Iterator[str]]:
        def keys() -> Iterator[str]:
            while True:
                char = msvcrt.getwch()
                if char in ("\x00", "\xe0"):
                    yield _WIN_SPECIAL.get(msvcrt.getwch(), "")
                elif char == "\r":
                    yield "enter"
                elif char == "\x1b":
                    yield "esc"
                elif char == "\x08":
                    yield "backspace"
                else:
                    yield char

        yield keys()

else:
    import select
    import termios
    import tty

    _CSI_KEYS = {"A": "up", "B": "down", "H": "home", "F": "end"}
    _TILDE_KEYS = {"1": "home", "7": "home", "4": "end", "8": "end", "3": "delete"}

    def _pending(fd: int) -> bool:
        ready, _, _ = select.select([fd], [], [], 0.05)
        return bool(ready)

    def _read_char(fd: int) -> str:
        return os.read(fd, 1).decode("utf-8", errors="replace")

    def _read_escape(fd: int) -> str:
        if not _pending(fd):
            return "esc"
        if _read_char(fd) not in ("[", "O"):
            return "esc"
        code = _read_char(fd)
        if code in _CSI_KEYS:
            return _CSI_KEYS[code]
        if code.isdigit():
            tail = _read_char(fd)
            if tail == "~":
                return _TILDE_KEYS.get(code, "")
        return ""

    @contextmanager
    def _raw_keys() -> Iterator[Iterator[str]]:
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)

        def keys() -> Iterator[str]:
            while True:
                char = _read_char(fd)
                if char == "":
                    return
                if char == "\x1b":
                    yield _read_escape(fd)
                elif char in ("\r", "\n"):
                    yield "enter"
                elif char in ("\x7f", "\x08"):
                    yield "backspace"
                else:
                    yield char

        try:
            tty.setraw(fd)
            yield keys()
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)