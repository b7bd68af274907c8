import pytest

from agentui.completer import FileReferenceCompleter
from agentui.helper import FileReferenceHelper


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("")
    (tmp_path / "notes.md").write_text("")
    return tmp_path


def test_complete_delegates_to_completer(tree):
    helper = FileReferenceHelper(tree)
    line = "read @md"
    assert helper.complete(line, len(line)) == FileReferenceCompleter(tree).complete(
        line, len(line)
    )


def test_complete_finds_nested_file(tree):
    helper = FileReferenceHelper(tree)
    line = "@guide"
    start, candidates = helper.complete(line, len(line))
    assert start == 0
    assert [c.replacement for c in candidates] == ["docs/guide.md"]


def test_complete_without_at(tree):
    assert FileReferenceHelper(tree).complete("plain", 3) == (0, [])


def test_highlight_returns_line_unchanged(tree):
    line = "call(f[x]) @docs"
    assert FileReferenceHelper(tree).highlight(line, 3) == line


def test_highlight_char_open_bracket_under_cursor(tree):
    assert FileReferenceHelper(tree).highlight_char("(abc", 0, False) is True


def test_highlight_char_close_bracket_at_end(tree):
    assert FileReferenceHelper(tree).highlight_char("()", 2, False) is True


def test_highlight_char_bracket_before_cursor(tree):
    assert FileReferenceHelper(tree).highlight_char("a)b", 2, False) is True


def test_highlight_char_no_bracket(tree):
    assert FileReferenceHelper(tree).highlight_char("abc", 1, False) is False


def test_highlight_char_empty_line(tree):
    assert FileReferenceHelper(tree).highlight_char("", 0, False) is False


def test_highlight_char_open_bracket_at_end_has_no_match(tree):
    assert FileReferenceHelper(tree).highlight_char("ab(", 2, False) is False


def test_highlight_char_close_bracket_at_start_has_no_match(tree):
    assert FileReferenceHelper(tree).highlight_char(")ab", 0, False) is False


def test_highlight_char_forced_is_false(tree):
    assert FileReferenceHelper(tree).highlight_char("(abc)", 0, True) is False