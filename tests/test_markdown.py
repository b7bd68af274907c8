from agentui.markdown import render_markdown


def _plain(lines):
    return ["".join(segment.text for segment in line) for line in lines]


def test_render_simple_text():
    lines = render_markdown("Hello world", 80)
    assert len(lines) > 0
    assert _plain(lines)[0] == "Hello world"


def test_render_bold():
    lines = render_markdown("**bold text**", 80)
    assert len(lines) > 0
    assert _plain(lines)[0] == "bold text"


def test_render_code_block():
    lines = render_markdown("```rust\nfn main() {}\n```", 80)
    assert len(lines) > 0
    assert _plain(lines) == ["```rust", " fn main() {}", "```", ""]


def test_indented_code_block_has_bare_fence():
    lines = _plain(render_markdown("    let x = 1;\n", 80))
    assert lines[0] == "```"
    assert " let x = 1;" in lines


def test_paragraph_followed_by_blank_line():
    assert _plain(render_markdown("one\n\ntwo", 80)) == ["one", "", "two", ""]


def test_heading_prefix():
    lines = _plain(render_markdown("## Title", 80))
    assert lines == ["## Title", ""]


def test_soft_break_splits_lines():
    assert _plain(render_markdown("first\nsecond", 80))[:2] == ["first", "second"]


def test_tight_list_bullets():
    lines = _plain(render_markdown("- a\n- b", 80))
    assert lines == ["• a", "• b"]


def test_inline_code_is_backquoted():
    assert _plain(render_markdown("use `x` here", 80))[0] == "use `x` here"


def test_rule_width_is_capped():
    narrow = _plain(render_markdown("---", 10))
    wide = _plain(render_markdown("---", 200))
    assert narrow == ["─" * 10]
    assert wide == ["─" * 40]


def test_blockquote_prefix():
    lines = _plain(render_markdown("> quoted", 80))
    assert lines[0] == "│ quoted"
    assert lines[-1] == ""


def test_html_is_skipped():
    lines = _plain(render_markdown("a <b>x</b> c", 80))
    assert lines[0] == "a x c"


def test_empty_input_renders_nothing():
    assert render_markdown("", 80) == []