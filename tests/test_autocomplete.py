from pathlib import Path

import pytest

from agentui.autocomplete import FileAutocomplete, FileInfo
from agentui.layout import Rect


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "lib.rs").write_text("")
    (tmp_path / "src" / "main.rs").write_text("")
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "integration.rs").write_text("")
    (tmp_path / "README.md").write_text("")
    (tmp_path / ".hidden.txt").write_text("")
    (tmp_path / "target").mkdir()
    (tmp_path / "target" / "debug.txt").write_text("")
    (tmp_path / "Build").mkdir()
    (tmp_path / "Build" / "artifact.txt").write_text("")
    deep = tmp_path / "a" / "b" / "c" / "d"
    deep.mkdir(parents=True)
    (deep / "e.txt").write_text("")
    return tmp_path


def names(autocomplete):
    return [info.name for info in autocomplete.suggestions]


def test_empty_filter_lists_top_level_dirs_first(tree):
    autocomplete = FileAutocomplete(str(tree))
    assert names(autocomplete) == ["a", "src", "tests", "README.md"]
    assert all(info.depth == 1 for info in autocomplete.suggestions)


def test_recursive_search_finds_subdirectory_files(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("rs")
    paths = [info.relative_path for info in autocomplete.suggestions]
    assert "src/lib.rs" in paths
    assert "tests/integration.rs" in paths


def test_filter_with_relative_path(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("src")
    assert not autocomplete.is_empty()
    for info in autocomplete.suggestions:
        assert "src" in info.relative_path.lower()
    assert [info.relative_path for info in autocomplete.suggestions] == [
        "src",
        "src/lib.rs",
        "src/main.rs",
    ]


def test_filter_is_case_insensitive(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("readme")
    assert [info.relative_path for info in autocomplete.suggestions] == ["README.md"]


def test_depth_limit(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("d")
    paths = [info.relative_path for info in autocomplete.suggestions]
    assert all(info.depth <= 4 for info in autocomplete.suggestions)
    assert "a/b/c/d" in paths
    assert "a/b/c/d/e.txt" not in paths


def test_directory_sorting(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("s")
    flags = [info.is_dir for info in autocomplete.suggestions]
    assert flags == sorted(flags, reverse=True)
    assert True in flags and False in flags


def test_hidden_files_only_with_dot_filter(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("hidden")
    assert autocomplete.is_empty()
    autocomplete.update_filter(".hid")
    assert [info.relative_path for info in autocomplete.suggestions] == [".hidden.txt"]


def test_ignored_directories_are_skipped(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("debug")
    assert autocomplete.is_empty()
    autocomplete.update_filter("artifact")
    assert autocomplete.is_empty()


def test_max_results_limit(tmp_path):
    for number in range(5):
        (tmp_path / f"file{number}.txt").write_text("")
    autocomplete = FileAutocomplete(str(tmp_path))
    autocomplete.max_results = 3
    autocomplete.update_filter("file")
    assert len(autocomplete.suggestions) == 3


def test_next_and_prev_wrap(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.prev()
    assert autocomplete.get_selected().name == "README.md"
    autocomplete.next()
    assert autocomplete.get_selected().name == "a"
    autocomplete.next()
    assert autocomplete.get_selected_path() == "src"


def test_navigation_on_empty_list(tmp_path):
    autocomplete = FileAutocomplete(str(tmp_path))
    autocomplete.next()
    autocomplete.prev()
    assert autocomplete.selected_index == 0
    assert autocomplete.get_selected() is None
    assert autocomplete.get_selected_path() is None


def test_enter_directory(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.next()
    assert autocomplete.enter_directory() == "src"
    assert autocomplete.input_prefix == "src/"
    assert autocomplete.filter == ""
    assert [info.relative_path for info in autocomplete.suggestions] == [
        "..",
        "src/lib.rs",
        "src/main.rs",
    ]
    assert autocomplete.suggestions[0].is_dir


def test_enter_directory_on_file_returns_none(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.prev()
    assert autocomplete.enter_directory() is None
    assert autocomplete.base_path == tree


def test_parent_directory(tree):
    autocomplete = FileAutocomplete(str(tree))
    assert autocomplete.parent_directory() is False
    autocomplete.next()
    autocomplete.enter_directory()
    assert autocomplete.parent_directory() is True
    assert autocomplete.base_path == tree.resolve()
    assert "src" in names(autocomplete)


def test_file_info_icon():
    directory = FileInfo("src", Path("src"), True, "src", 1)
    document = FileInfo("a.txt", Path("a.txt"), False, "a.txt", 1)
    assert directory.icon() == "📁"
    assert document.icon() == "📄"


def test_render_too_small_area(tree):
    autocomplete = FileAutocomplete(str(tree))
    assert autocomplete.render(Rect(0, 0, 9, 10)) is None
    assert autocomplete.render(Rect(0, 0, 20, 2)) is None


def test_render_empty(tmp_path):
    autocomplete = FileAutocomplete(str(tmp_path))
    panel = autocomplete.render(Rect(0, 0, 40, 10))
    assert panel.title == "📁 文件选择"
    assert panel.renderable.plain == "📭 无匹配文件"


def test_render_lists_items(tree):
    autocomplete = FileAutocomplete(str(tree))
    panel = autocomplete.render(Rect(0, 0, 50, 20))
    assert panel.title == "📁 文件选择 1/4"
    assert panel.height == 6
    assert panel.renderable.plain.split("\n") == [
        "📁 a/",
        "📁 src/",
        "📁 tests/",
        "📄 README.md",
    ]


def test_render_filtered_shows_relative_paths(tree):
    autocomplete = FileAutocomplete(str(tree))
    autocomplete.update_filter("lib")
    panel = autocomplete.render(Rect(0, 0, 50, 20))
    assert panel.renderable.plain == "📄 ├─ src/lib.rs"


def test_render_truncates_long_names(tmp_path):
    long_name = "x" * 50 + ".txt"
    (tmp_path / long_name).write_text("")
    autocomplete = FileAutocomplete(str(tmp_path))
    panel = autocomplete.render(Rect(0, 0, 60, 20))
    assert panel.renderable.plain == "📄 " + "x" * 37 + "..."