import pytest

from obsidian_kit.text_input import EditKey, TextEditor
from obsidian_kit.text_layout import Selection


def make_editor(value, selection, **kwargs):
    changes = []
    editor = TextEditor(
        value=value, selection=selection, on_change=changes.append, **kwargs
    )
    return editor, changes


def test_insert_char_replaces_selection():
    editor, changes = make_editor("hello", Selection(4, 1))
    result = editor.insert_char("J")
    assert changes == ["hJo"]
    assert result == changes[0]
    assert editor.selection.is_empty()
    assert editor.selection.cursor == changes[0].index("J") + 1


def test_insert_control_char_is_ignored():
    editor, changes = make_editor("abc", Selection.single(1))
    assert editor.insert_char("\n") is None
    assert changes == []
    assert editor.selection == Selection.single(1)


def test_insert_without_callback_keeps_selection():
    editor = TextEditor(value="abc", selection=Selection.single(1))
    result = editor.insert_char("z")
    assert "z" in result
    assert len(result) == len("abc") + 1
    assert editor.selection == Selection.single(1)


def test_insert_requires_single_character():
    editor, _ = make_editor("abc", Selection.single(0))
    with pytest.raises(ValueError):
        editor.insert_char("xy")


def test_disabled_editor_ignores_input():
    editor, changes = make_editor("abc", Selection.single(2), disabled=True)
    assert editor.insert_char("q") is None
    assert editor.key_press(EditKey.BACKSPACE) is False
    assert changes == []
    assert editor.selection == Selection.single(2)


def test_arrow_right_at_end_is_not_handled():
    editor, _ = make_editor("abc", Selection.single(3))
    assert editor.key_press(EditKey.ARROW_RIGHT) is False
    assert editor.selection == Selection.single(3)


def test_arrow_left_moves_cursor():
    editor, _ = make_editor("abc", Selection.single(3))
    assert editor.key_press(EditKey.ARROW_LEFT) is True
    assert editor.selection == Selection.single(3 - 1)


def test_shift_arrow_extends_selection():
    editor, _ = make_editor("abc", Selection.single(3))
    assert editor.key_press(EditKey.ARROW_LEFT, shift=True) is True
    assert editor.selection.anchor == 3
    assert editor.selection.cursor == 3 - 1
    assert not editor.selection.is_empty()


def test_home_and_end():
    editor, _ = make_editor("abcd", Selection.single(2))
    assert editor.key_press(EditKey.HOME) is True
    assert editor.selection == Selection.single(0)
    assert editor.key_press(EditKey.HOME) is False
    assert editor.key_press(EditKey.END) is True
    assert editor.selection == Selection.single(len("abcd"))


def test_vertical_arrows_are_swallowed():
    editor, changes = make_editor("abc", Selection.single(1))
    assert editor.key_press(EditKey.ARROW_UP) is True
    assert editor.key_press(EditKey.ARROW_DOWN) is True
    assert editor.selection == Selection.single(1)
    assert changes == []


def test_backspace_removes_previous_char():
    editor, changes = make_editor("abc", Selection.single(2))
    assert editor.key_press(EditKey.BACKSPACE) is True
    assert changes == ["ac"]
    assert editor.selection == Selection.single(2 - 1)


def test_backspace_at_start_changes_nothing():
    editor, changes = make_editor("abc", Selection.single(0))
    assert editor.key_press(EditKey.BACKSPACE) is True
    assert changes == []
    assert editor.selection == Selection.single(0)


def test_backspace_deletes_selection():
    editor, changes = make_editor("abc", Selection(0, 2))
    assert editor.key_press("Backspace") is True
    assert changes == ["c"]
    assert editor.selection == Selection.single(0)


def test_delete_removes_char_at_cursor():
    editor, changes = make_editor("abc", Selection.single(0))
    assert editor.key_press(EditKey.DELETE) is True
    assert len(changes[0]) == len("abc") - 1
    assert "a" not in changes[0]
    assert editor.selection == Selection.single(0)


def test_delete_at_end_changes_nothing():
    editor, changes = make_editor("abc", Selection.single(3))
    assert editor.key_press(EditKey.DELETE) is True
    assert changes == []


def test_delete_selection_collapses_to_start():
    editor, changes = make_editor("abcdef", Selection(4, 2))
    assert editor.key_press(EditKey.DELETE) is True
    assert len(changes[0]) == len("abcdef") - 2
    assert editor.selection == Selection.single(2)


def test_unknown_key_is_not_handled():
    editor, changes = make_editor("abc", Selection.single(1))
    assert editor.key_press("F1") is False
    assert changes == []


def test_selection_beyond_text_raises():
    editor, _ = make_editor("ab", Selection(0, 5))
    with pytest.raises(IndexError):
        editor.insert_char("x")


def test_edit_key_values_round_trip():
    for key in EditKey:
        assert EditKey(key.value) is key