import pytest

from obsidian_kit import colors
from obsidian_kit.slider import DragType, Slider


def make_slider(**kwargs):
    changes = []
    slider = Slider(on_change=changes.append, **kwargs)
    return slider, changes


def test_defaults():
    slider = Slider()
    assert (slider.value, slider.min_value, slider.max_value) == (0.0, 0.0, 1.0)
    assert slider.step == 1.0
    assert slider.drag_type is DragType.NONE


def test_position_at_ends_of_range():
    assert Slider(value=2.0, min_value=2.0, max_value=8.0).position() == 0.0
    assert Slider(value=8.0, min_value=2.0, max_value=8.0).position() == 1.0


def test_position_is_zero_for_empty_range():
    assert Slider(value=3.0, min_value=3.0, max_value=3.0).position() == 0.0


def test_formatted_uses_precision():
    assert Slider(value=3.14159, precision=2).formatted() == "3.14"
    assert Slider(value=7.0, precision=0).formatted() == "7"


def test_drag_without_start_does_nothing():
    slider, changes = make_slider(max_value=10.0)
    assert slider.drag(50.0, 100.0) is None
    assert changes == []


def test_drag_full_width_reaches_max():
    slider, changes = make_slider(value=0.0, max_value=10.0)
    slider.drag_start()
    assert slider.drag(100.0, 100.0) == 10.0
    assert changes == [10.0]


def test_drag_is_clamped_to_range():
    slider, changes = make_slider(value=5.0, max_value=10.0)
    slider.drag_start()
    assert slider.drag(1000.0, 100.0) == 10.0
    assert slider.drag(-1000.0, 100.0) == 0.0
    assert changes == [10.0, 0.0]


def test_drag_rounds_half_away_from_zero():
    slider, _ = make_slider(value=0.0, max_value=10.0, precision=0)
    slider.drag_start()
    assert slider.drag(25.0, 100.0) == 3.0


def test_drag_offset_is_value_at_start():
    slider, _ = make_slider(value=4.0, max_value=10.0)
    slider.drag_start()
    slider.value = 9.0
    assert slider.drag_offset == 4.0
    assert slider.drag(0.0, 100.0) == 4.0


def test_drag_with_inverted_range_raises():
    slider, _ = make_slider(min_value=1.0, max_value=0.0)
    slider.drag_start()
    with pytest.raises(ValueError):
        slider.drag(10.0, 100.0)


def test_drag_end_resets_state():
    slider, _ = make_slider(value=0.5)
    slider.drag_start()
    assert slider.drag_type is DragType.DRAGGING
    slider.drag_end()
    assert slider.drag_type is DragType.NONE
    assert slider.drag_offset == 0.5


def test_press_step_clamps_and_sets_hold_state():
    slider, changes = make_slider(value=0.5)
    assert slider.press_step(1.0) == 1.0
    assert slider.drag_type is DragType.HOLD_INCREMENT
    assert slider.press_step(-1.0) == 0.0
    assert slider.drag_type is DragType.HOLD_DECREMENT
    assert changes == [1.0, 0.0]
    slider.release_step()
    assert slider.drag_type is DragType.NONE


def test_drag_end_does_not_cancel_step_hold():
    slider, _ = make_slider(value=0.5)
    slider.press_step(1.0)
    slider.drag_end()
    assert slider.drag_type is DragType.HOLD_INCREMENT


def test_button_color_while_holding():
    slider, _ = make_slider(value=0.5)
    slider.press_step(1.0)
    assert slider.button_color(1.0, False, False) == colors.FOREGROUND
    assert slider.button_color(-1.0, False, False) == colors.TRANSPARENT
    assert slider.button_color(-1.0, True, False) == colors.U4


def test_button_color_while_dragging_is_transparent():
    slider, _ = make_slider()
    slider.drag_start()
    assert slider.button_color(1.0, True, True) == colors.TRANSPARENT


def test_button_color_on_hover():
    slider = Slider()
    assert slider.button_color(1.0, True, False) == colors.U4
    assert slider.button_color(1.0, False, True) == colors.TRANSPARENT
    assert slider.button_color(0.0, True, True) == colors.TRANSPARENT


def test_hovered_button_is_lighter():
    highlighted = Slider().button_color(-1.0, True, True)
    assert highlighted != colors.U4
    assert highlighted.alpha == colors.U4.alpha
    for lit, base in zip(highlighted.to_linear()[:3], colors.U4.to_linear()[:3]):
        assert lit > base