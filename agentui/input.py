"""Multi-line text input with @ file reference autocompletion."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from rich.panel import Panel
from rich.text import Text

from agentui.autocomplete import FileAutocomplete

_AUTOCOMPLETE_TITLE = "📁 文件选择 | ↑↓:选择 Enter:确认 Esc:取消"
_NORMAL_TITLE = "💬 输入消息 | @:文件选择 Enter:发送 Shift+Enter:换行 | ESC:退出"


class InputMode(Enum):
    NORMAL = "normal"
    AUTOCOMPLETE = "autocomplete"


class CursorMove(Enum):
    UP = "up"
    DOWN = "down"
    BACK = "back"
    FORWARD = "forward"
    HEAD = "head"
    END = "end"


@dataclass(frozen=True)
class KeyEvent:
    """A key press.

    ``code`` is a single character for printable keys, otherwise one of:
    enter, backspace, delete, up, down, left, right, home, end, esc,
    pageup, pagedown, tab.
    """

    code: str
    shift: bool = False
    ctrl: bool = False

    @property
    def is_char(self) -> bool:
        return len(self.code) == 1


class TextArea:
    """Editable lines of text with a cursor at (row, column)."""

    def __init__(self) -> None:
        self.lines: list[str] = [""]
        self.row = 0
        self.col = 0

    @property
    def cursor(self) -> tuple[int, int]:
        return self.row, self.col

    def insert_char(self, c: str) -> None:
        if c == "\n":
            self.insert_newline()
            return
        line = self.lines[self.row]
        self.lines[self.row] = line[: self.col] + c + line[self.col:]
        self.col += 1

    def insert_str(self, s: str) -> None:
        for char in s:
            self.insert_char(char)

    def insert_newline(self) -> None:
        line = self.lines[self.row]
        self.lines[self.row] = line[: self.col]
        self.lines.insert(self.row + 1, line[self.col:])
        self.row += 1
        self.col = 0

    def delete_char(self) -> bool:
        """Delete the character before the cursor; return False at the very start."""
        line = self.lines[self.row]
        if self.col > 0:
            self.lines[self.row] = line[: self.col - 1] + line[self.col:]
            self.col -= 1
            return True
        if self.row > 0:
            previous = self.lines[self.row - 1]
            self.lines[self.row - 1] = previous + line
            del self.lines[self.row]
            self.row -= 1
            self.col = len(previous)
            return True
        return False

    def delete_next_char(self) -> bool:
        """Delete the character under the cursor; return False at the very end."""
        line = self.lines[self.row]
        if self.col < len(line):
            self.lines[self.row] = line[: self.col] + line[self.col + 1:]
            return True
        if self.row + 1 < len(self.lines):
            self.lines[self.row] = line + self.lines[self.row + 1]
            del self.lines[self.row + 1]
            return True
        return False

    def move_cursor(self, move: CursorMove) -> None:
        if move is CursorMove.UP:
            if self.row > 0:
                self.row -= 1
                self.col = min(self.col, len(self.lines[self.row]))
        elif move is CursorMove.DOWN:
            if self.row + 1 < len(self.lines):
                self.row += 1
                self.col = min(self.col, len(self.lines[self.row]))
        elif move is CursorMove.BACK:
            if self.col > 0:
                self.col -= 1
            elif self.row > 0:
                self.row -= 1
                self.col = len(self.lines[self.row])
        elif move is CursorMove.FORWARD:
            if self.col < len(self.lines[self.row]):
                self.col += 1
            elif self.row + 1 < len(self.lines):
                self.row += 1
                self.col = 0
        elif move is CursorMove.HEAD:
            self.col = 0
        elif move is CursorMove.END:
            self.col = len(self.lines[self.row])


_NORMAL_MOVES = {
    "up": CursorMove.UP,
    "down": CursorMove.DOWN,
    "left": CursorMove.BACK,
    "right": CursorMove.FORWARD,
    "home": CursorMove.HEAD,
    "end": CursorMove.END,
}


class InputWidget:
    """Input box that opens a file autocomplete popup when @ is typed."""

    def __init__(self, root: Union[str, os.PathLike] = ".") -> None:
        self.root = root
        self.textarea = TextArea()
        self.mode = InputMode.NORMAL
        self.ready_to_send = False
        self.autocomplete: Optional[FileAutocomplete] = None
        self.autocomplete_trigger_pos: Optional[int] = None
        self._browse_input: Optional[str] = None

    def set_mode(self, mode: InputMode) -> None:
        self.mode = mode

    def is_ready_to_send(self) -> bool:
        return self.ready_to_send

    def clear_send_flag(self) -> None:
        self.ready_to_send = False

    def text(self) -> str:
        return "\n".join(self.textarea.lines)

    def clear(self) -> None:
        self.textarea = TextArea()

    def insert_char(self, c: str) -> None:
        """Insert a character; an @ not following another @ starts autocompletion."""
        if c == "@":
            current = self.text()
            if not current.endswith("@"):
                self.mode = InputMode.AUTOCOMPLETE
                self.autocomplete = FileAutocomplete(self.root)
                self.autocomplete_trigger_pos = len(current)
                self.textarea.insert_char(c)
                return

        if self.mode is InputMode.AUTOCOMPLETE and self.autocomplete_trigger_pos is not None:
            current = self.text()
            if self.autocomplete is not None:
                self.autocomplete.update_filter(current[self.autocomplete_trigger_pos + 1:])

        self.textarea.insert_char(c)

    def handle_key_event(self, key_event: KeyEvent) -> bool:
        """Apply a key press; return True when the message should be sent."""
        if self.mode is InputMode.AUTOCOMPLETE:
            return self._handle_autocomplete_key(key_event)

        code = key_event.code
        if code == "enter":
            if key_event.shift:
                self.textarea.insert_newline()
            else:
                self.ready_to_send = True
                return True
        elif key_event.is_char:
            self.insert_char(code)
        elif code == "backspace":
            self.textarea.delete_char()
        elif code == "delete":
            self.textarea.delete_next_char()
        elif code in _NORMAL_MOVES:
            self.textarea.move_cursor(_NORMAL_MOVES[code])
        return False

    def _filter_text(self) -> str:
        text = self.text()
        trigger = self.autocomplete_trigger_pos
        if trigger is None or len(text) <= trigger + 1:
            return ""
        return text[trigger + 1:]

    def _start_browsing(self) -> None:
        if self._browse_input is None and self.autocomplete_trigger_pos is not None:
            self._browse_input = self._filter_text()

    def _restore_user_input(self, user_input: str) -> None:
        trigger = self.autocomplete_trigger_pos
        current = self.text()
        before_at = current[:trigger] if trigger is not None and trigger < len(current) else current
        self.clear()
        self.textarea.insert_str(before_at)
        self.textarea.insert_str(user_input)

    def _handle_autocomplete_key(self, key_event: KeyEvent) -> bool:
        code = key_event.code
        if code in ("up", "down"):
            self._start_browsing()
            if self.autocomplete is not None:
                if code == "up":
                    self.autocomplete.prev()
                else:
                    self.autocomplete.next()
            self._update_textarea_with_selection()
        elif code == "enter":
            if key_event.shift:
                self.textarea.insert_newline()
            elif self.autocomplete is not None:
                if self.autocomplete.enter_directory() is not None:
                    self._browse_input = None
                else:
                    self._exit_autocomplete()
        elif key_event.is_char:
            self._autocomplete_char(code)
        elif code == "backspace":
            self._autocomplete_backspace()
        else:
            self._exit_autocomplete()
            return self.handle_key_event(key_event)
        return False

    def _autocomplete_char(self, c: str) -> None:
        if self.autocomplete_trigger_pos is None:
            self.textarea.insert_char(c)
            self._exit_autocomplete()
            return
        if c == " ":
            self.textarea.insert_char(c)
            self._exit_autocomplete()
            return

        if self._browse_input is not None:
            user_input, self._browse_input = self._browse_input, None
            self._restore_user_input(user_input)

        self.textarea.insert_char(c)
        if self.autocomplete is not None:
            self.autocomplete.update_filter(self._filter_text())

    def _autocomplete_backspace(self) -> None:
        if self._browse_input is not None:
            user_input, self._browse_input = self._browse_input, None
            if self.autocomplete_trigger_pos is not None:
                self._restore_user_input(user_input)

        trigger = self.autocomplete_trigger_pos
        if trigger is None:
            self.textarea.delete_char()
            self._exit_autocomplete()
            return

        current = self.text()
        if len(current) <= trigger + 1:
            self.textarea.delete_char()
            self._exit_autocomplete()
            return

        after_at = current[trigger + 1:]
        if after_at.endswith("/") and len(after_at) > 1:
            if self.autocomplete is not None and self.autocomplete.parent_directory():
                for _ in range(len(after_at.rstrip("/")) + 1):
                    self.textarea.delete_char()
        else:
            self.textarea.delete_char()
            if self.autocomplete is not None:
                self.autocomplete.update_filter(self._filter_text())

    def _update_textarea_with_selection(self) -> None:
        trigger = self.autocomplete_trigger_pos
        if self.autocomplete is None or trigger is None:
            return
        selected_path = self.autocomplete.get_selected_path()
        if selected_path is None:
            return
        current = self.text()
        before_at = current[:trigger] if trigger < len(current) else current
        self.clear()
        self.textarea.insert_str(before_at)
        self.textarea.insert_char("@")
        self.textarea.insert_str(selected_path)

    def _exit_autocomplete(self) -> None:
        self.mode = InputMode.NORMAL
        self.autocomplete = None
        self.autocomplete_trigger_pos = None
        self._browse_input = None

    def is_autocomplete_active(self) -> bool:
        return self.mode is InputMode.AUTOCOMPLETE and self.autocomplete is not None

    def render(self) -> Panel:
        """Build the bordered input box."""
        if self.mode is InputMode.AUTOCOMPLETE:
            title = _AUTOCOMPLETE_TITLE
            border = "yellow"
        else:
            title = _NORMAL_TITLE
            border = "grey50" if not self.text().strip() else "cyan"
        return Panel(Text(self.text()), title=title, border_style=border)