"""Render Markdown into styled terminal lines."""

from __future__ import annotations

from typing import Iterable

from markdown_it import MarkdownIt
from markdown_it.token import Token
from rich.segment import Segment
from rich.style import Style

_HEADING_STYLE = Style(color="cyan", bold=True)
_FENCE_STYLE = Style(color="bright_black")
_CODE_LINE_STYLE = Style(color="cyan")
_QUOTE_STYLE = Style(color="bright_black", dim=True)
_TEXT_STYLE = Style(color="white")
_INLINE_CODE_STYLE = Style(color="yellow")
_BULLET_STYLE = Style(color="yellow")
_RULE_STYLE = Style(color="bright_black")

_RULE_MAX = 40

RenderedLine = list[Segment]

_PARSER = MarkdownIt("commonmark")


class _Renderer:
    """Walks the token stream and collects lines of segments."""

    def __init__(self, width: int) -> None:
        self.width = width
        self.lines: list[RenderedLine] = []
        self.current: RenderedLine = []
        self.quote_level = 0

    def flush(self) -> None:
        if self.current:
            self.lines.append(self.current)
            self.current = []

    def blank(self) -> None:
        self.lines.append([])

    def block(self, tokens: Iterable[Token]) -> None:
        for token in tokens:
            kind = token.type
            if kind == "paragraph_close":
                if not token.hidden:
                    self.flush()
                    self.blank()
            elif kind == "heading_open":
                self.flush()
                level = int(token.tag[1:])
                self.current.append(Segment("#" * level + " ", _HEADING_STYLE))
            elif kind == "heading_close":
                self.flush()
                self.blank()
            elif kind == "blockquote_open":
                self.quote_level += 1
                self.flush()
            elif kind == "blockquote_close":
                self.flush()
                self.quote_level = max(0, self.quote_level - 1)
                self.blank()
            elif kind in ("fence", "code_block"):
                self.code_block(token)
            elif kind == "list_item_open":
                self.flush()
                self.current.append(Segment("• ", _BULLET_STYLE))
            elif kind == "hr":
                self.flush()
                self.lines.append([Segment("─" * min(self.width, _RULE_MAX), _RULE_STYLE)])
            elif kind == "inline":
                self.inline(token.children or [])

    def code_block(self, token: Token) -> None:
        self.flush()
        info = token.info.strip() if token.type == "fence" else ""
        self.lines.append([Segment(f"```{info}", _FENCE_STYLE)])
        for line in token.content.splitlines():
            self.lines.append([Segment(f" {line}", _CODE_LINE_STYLE)])
        self.lines.append([Segment("```", _FENCE_STYLE)])
        self.blank()

    def inline(self, tokens: Iterable[Token]) -> None:
        for token in tokens:
            kind = token.type
            if kind == "text":
                self.text(token.content)
            elif kind == "code_inline":
                self.current.append(Segment(f"`{token.content}`", _INLINE_CODE_STYLE))
            elif kind in ("softbreak", "hardbreak"):
                self.flush()
            elif kind == "image":
                self.inline(token.children or [])

    def text(self, content: str) -> None:
        if self.quote_level > 0:
            self.current.append(Segment("│ " * self.quote_level, _QUOTE_STYLE))
            self.current.append(Segment(content, _QUOTE_STYLE))
        else:
            self.current.append(Segment(content, _TEXT_STYLE))


def render_markdown(markdown: str, width: int) -> list[RenderedLine]:
    """Render Markdown to a list of lines, each a list of styled segments."""
    renderer = _Renderer(width)
    renderer.block(_PARSER.parse(markdown))
    renderer.flush()
    return renderer.lines