import pytest

from agentui.layout import Rect, calculate_layout


def _rows(areas):
    rows = [areas.title, areas.conversation]
    if areas.debug is not None:
        rows.append(areas.debug)
    rows += [areas.input, areas.input_status, areas.status]
    return rows


def test_rect_edges():
    rect = Rect(2, 3, 4, 5)
    assert rect.top() == 3
    assert rect.bottom() == 8


def test_rect_contains_is_half_open():
    rect = Rect(2, 3, 4, 5)
    assert rect.contains(2, 3)
    assert rect.contains(5, 7)
    assert not rect.contains(6, 3)
    assert not rect.contains(2, 8)
    assert not rect.contains(1, 3)


@pytest.mark.parametrize("show_debug", [False, True])
def test_rows_are_contiguous_and_fill_height(show_debug):
    size = Rect(0, 0, 80, 50)
    areas = calculate_layout(size, show_debug)
    rows = _rows(areas)
    assert rows[0].top() == size.top()
    for upper, lower in zip(rows, rows[1:]):
        assert upper.bottom() == lower.top()
    assert rows[-1].bottom() == size.bottom()
    assert all(row.width == size.width for row in rows)


def test_fixed_row_heights_without_debug():
    areas = calculate_layout(Rect(0, 0, 80, 40), False)
    assert areas.debug is None
    assert areas.title.height == 3
    assert areas.input.height == 3
    assert areas.input_status.height == 1
    assert areas.status.height == 1


def test_debug_panel_has_fixed_height():
    areas = calculate_layout(Rect(0, 0, 80, 60), True)
    assert areas.debug is not None
    assert areas.debug.height == 15
    assert areas.conversation.bottom() == areas.debug.top()
    assert areas.debug.bottom() == areas.input.top()


def test_conversation_takes_remaining_space():
    small = calculate_layout(Rect(0, 0, 80, 30), False)
    large = calculate_layout(Rect(0, 0, 80, 60), False)
    assert large.conversation.height - small.conversation.height == 30
    assert small.input.height == large.input.height


def test_conversation_keeps_minimum_on_small_terminal():
    areas = calculate_layout(Rect(0, 0, 80, 12), True)
    assert areas.conversation.height == 10
    assert sum(row.height for row in _rows(areas)) == 12


def test_popup_sits_above_input():
    areas = calculate_layout(Rect(0, 0, 120, 40), False)
    assert areas.popup.height == 10
    assert areas.popup.width == 50
    assert areas.popup.bottom() < areas.input.top()


def test_popup_width_limited_by_terminal():
    size = Rect(0, 0, 30, 40)
    areas = calculate_layout(size, False)
    assert areas.popup.width == size.width - 4