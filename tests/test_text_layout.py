import pytest

from obsidian_kit.text_layout import Glyph, Selection, caret_position, selection_rect


def _glyphs():
    return [
        Glyph((0.0, 20.0), (8.0, 16.0)),
        Glyph((10.0, 20.0), (8.0, 16.0)),
        Glyph((20.0, 20.0), (8.0, 16.0)),
    ]


def test_selection_single_is_empty():
    sel = Selection.single(3)
    assert sel.is_empty() is True
    assert sel.start() == sel.end() == 3


def test_selection_start_end_order():
    sel = Selection(cursor=1, anchor=4)
    assert sel.start() == 1
    assert sel.end() == 4
    backwards = Selection(cursor=4, anchor=1)
    assert (backwards.start(), backwards.end()) == (1, 4)
    assert backwards.is_empty() is False


def test_selection_range():
    assert list(Selection(3, 1).range()) == [1, 2]


def test_default_selection():
    assert Selection() == Selection.single(0)


def test_selection_rect_empty_is_none():
    assert selection_rect(_glyphs(), Selection.single(1)) is None


def test_selection_rect_values():
    rect = selection_rect(_glyphs(), Selection(0, 2))
    assert rect.min_x == 0.0
    assert rect.min_y == 4.0
    assert rect.max_x == 13.0
    assert rect.max_y == 20.0


def test_selection_rect_ignores_direction():
    glyphs = _glyphs()
    assert selection_rect(glyphs, Selection(0, 3)) == selection_rect(
        glyphs, Selection(3, 0)
    )


def test_selection_rect_height_is_glyph_height():
    rect = selection_rect(_glyphs(), Selection(1, 2))
    assert rect.height() == 16.0


def test_selection_rect_out_of_range():
    with pytest.raises(IndexError):
        selection_rect(_glyphs(), Selection(0, 5))


def test_caret_inside_text():
    left, top, height = caret_position(_glyphs(), 1)
    assert left == 5.0
    assert height == 16.0
    assert top == 20.0 - height


def test_caret_past_end_follows_last_glyph():
    glyphs = _glyphs()
    assert caret_position(glyphs, 3) == caret_position(glyphs, 10)
    left, _, _ = caret_position(glyphs, 3)
    assert left > caret_position(glyphs, 2)[0]


def test_caret_without_glyphs():
    with pytest.raises(ValueError):
        caret_position([], 0)