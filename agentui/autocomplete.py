"""File path autocomplete popup with filtering and directory navigation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from rich.panel import Panel
from rich.text import Text

from agentui.layout import Rect

IGNORED_DIRS = frozenset(
    {
        "node_modules",
        "target",
        ".git",
        "vendor",
        ".cargo",
        ".idea",
        ".vscode",
        "dist",
        "build",
        "out",
        "__pycache__",
        ".pytest_cache",
    }
)

_MAX_NAME_CHARS = 40
_TRUNCATED_CHARS = 37
_MAX_VISIBLE_ITEMS = 10
_POPUP_TITLE = "📁 文件选择"


@dataclass
class FileInfo:
    """A file or directory offered as a suggestion."""

    name: str
    path: Path
    is_dir: bool
    relative_path: str
    depth: int

    def icon(self) -> str:
        return "📁" if self.is_dir else "📄"


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return []


class FileAutocomplete:
    """Suggests files under a base directory, filtered by a path fragment."""

    def __init__(self, base_dir: Union[str, os.PathLike] = ".") -> None:
        self.base_path = Path(base_dir)
        self.root_path = Path(base_dir)
        self.filter = ""
        self.suggestions: list[FileInfo] = []
        self.selected_index = 0
        self.input_prefix = ""
        self.max_depth = 4
        self.max_results = 100
        self._refresh()

    def update_filter(self, filter: str) -> None:
        self.filter = filter
        self._refresh()

    def _refresh(self) -> None:
        self.suggestions = []
        self.selected_index = 0

        if self.base_path != self.root_path and self.base_path.root:
            self.suggestions.append(
                FileInfo(
                    name="..",
                    path=self.base_path / "..",
                    is_dir=True,
                    relative_path="..",
                    depth=0,
                )
            )

        if self.filter:
            self._scan_with_filter()
        else:
            self._scan_current_directory()

    def _scan_current_directory(self) -> None:
        for entry in _sorted_entries(self.base_path):
            name = entry.name
            if name.startswith("."):
                continue
            is_dir = _is_dir(entry)
            if is_dir and name.lower() in IGNORED_DIRS:
                continue
            path = Path(entry.path)
            self.suggestions.append(
                FileInfo(
                    name=name,
                    path=path,
                    is_dir=is_dir,
                    relative_path=_relative(path, self.root_path),
                    depth=1,
                )
            )
        self.suggestions.sort(key=lambda info: (not info.is_dir, info.name))

    def _walk(self, directory: Path, depth: int) -> Iterator[tuple[os.DirEntry, bool, int]]:
        show_hidden = self.filter.startswith(".")
        for entry in _sorted_entries(directory):
            if entry.name.startswith(".") and not show_hidden:
                continue
            is_dir = _is_dir(entry)
            if is_dir and entry.name.lower() in IGNORED_DIRS:
                continue
            yield entry, is_dir, depth
            if is_dir and depth < self.max_depth:
                yield from self._walk(Path(entry.path), depth + 1)

    def _scan_with_filter(self) -> None:
        needle = self.filter.lower()
        results: list[FileInfo] = []
        for entry, is_dir, depth in self._walk(self.base_path, 1):
            path = Path(entry.path)
            relative_path = _relative(path, self.root_path)
            if needle not in relative_path.lower():
                continue
            results.append(
                FileInfo(
                    name=entry.name,
                    path=path,
                    is_dir=is_dir,
                    relative_path=relative_path,
                    depth=depth,
                )
            )
            if len(results) >= self.max_results:
                break

        results.sort(key=lambda info: (not info.is_dir, info.depth, info.relative_path))
        self.suggestions = results

    def next(self) -> None:
        if self.suggestions:
            self.selected_index = (self.selected_index + 1) % len(self.suggestions)

    def prev(self) -> None:
        if self.suggestions:
            self.selected_index = (self.selected_index - 1) % len(self.suggestions)

    def get_selected(self) -> Optional[FileInfo]:
        if 0 <= self.selected_index < len(self.suggestions):
            return self.suggestions[self.selected_index]
        return None

    def enter_directory(self) -> Optional[str]:
        """Descend into the selected directory; return its name, or None for a file."""
        selected = self.get_selected()
        if selected is None or not selected.is_dir:
            return None
        self.base_path = selected.path
        self.input_prefix += selected.relative_path + "/"
        self.filter = ""
        self._refresh()
        return selected.name

    def parent_directory(self) -> bool:
        """Move up one directory; return False when already at the root."""
        if self.base_path == self.root_path:
            return False

        parent = self.base_path / ".."
        try:
            self.base_path = parent.resolve(strict=True)
        except OSError:
            self.base_path = Path(os.path.normpath(parent))

        slash = self.input_prefix.rfind("/")
        self.input_prefix = self.input_prefix[: slash + 1] if slash >= 0 else ""

        self.filter = ""
        self._refresh()
        return True

    def get_selected_path(self) -> Optional[str]:
        selected = self.get_selected()
        return selected.relative_path if selected is not None else None

    def is_empty(self) -> bool:
        return not self.suggestions

    def _display_name(self, info: FileInfo) -> str:
        if not self.filter:
            name = info.name
        elif info.depth > 0:
            name = f"├─ {info.relative_path}"
        else:
            name = info.relative_path
        if len(name) > _MAX_NAME_CHARS:
            name = name[:_TRUNCATED_CHARS] + "..."
        return name

    def _item(self, index: int, info: FileInfo) -> Text:
        selected = index == self.selected_index
        plain_style = "white" if selected else "grey70"
        display = self._display_name(info)

        line = Text()
        line.append(info.icon(), style="bright_blue" if selected else "yellow")
        line.append(" ")

        match_at = info.relative_path.lower().find(self.filter.lower()) if self.filter else -1
        if match_at < 0:
            line.append(display, style=plain_style)
        else:
            total = len(display)
            match_end = min(match_at + len(self.filter), total)
            if 0 < match_at <= total:
                line.append(display[:match_at], style=plain_style)
            if match_at < match_end:
                line.append(
                    display[match_at:match_end],
                    style="bold white" if selected else "bold green",
                )
            if match_end < total:
                line.append(display[match_end:], style=plain_style)

        if info.is_dir:
            line.append("/", style="cyan")
        return line

    def render(self, area: Rect) -> Optional[Panel]:
        """Build the popup for ``area``, or None when the area is too small."""
        if area.width < 10 or area.height < 3:
            return None

        if self.is_empty():
            message = Text.assemble(("📭", "white"), " ", ("无匹配文件", "white"))
            return Panel(
                message,
                title=_POPUP_TITLE,
                border_style="yellow",
                style="on black",
                width=area.width,
                height=area.height,
            )

        items = [self._item(index, info) for index, info in enumerate(self.suggestions)]
        height = min(area.height, min(len(items), _MAX_VISIBLE_ITEMS) + 2)
        title = f"{_POPUP_TITLE} {self.selected_index + 1}/{len(self.suggestions)}"
        return Panel(
            Text("\n").join(items),
            title=title,
            border_style="yellow",
            style="on black",
            width=area.width,
            height=height,
        )