"""Editing behaviour of a single-line text input field."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .text_layout import Selection

__all__ = ["EditKey", "TextEditor"]


class EditKey(Enum):
    """Keys that the text input reacts to."""

    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    HOME = "Home"
    END = "End"
    BACKSPACE = "Backspace"
    DELETE = "Delete"


@dataclass
class TextEditor:
    """Selection handling and edits of a controlled text input.

    The editor never changes ``value`` itself; edited text is reported
    through ``on_change`` and the owner is expected to store it back.
    """

    value: str = ""
    selection: Selection = field(default_factory=Selection)
    disabled: bool = False
    on_change: Callable[[str], None] | None = None

    def _replace_selection(self, selection: Selection, text: str) -> str:
        start, end = selection.start(), selection.end()
        if end > len(self.value):
            raise IndexError(
                f"selection {start}..{end} outside text of length {len(self.value)}"
            )
        return self.value[:start] + text + self.value[end:]

    def _emit(self, text: str) -> None:
        if self.on_change is not None:
            self.on_change(text)

    def insert_char(self, char: str) -> str | None:
        """Type ``char`` over the selection and return the new text.

        Control characters are ignored and None is returned, as it is when
        the input is disabled. The cursor moves past the typed character
        only when a change callback is set.
        """
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if self.disabled or unicodedata.category(char) == "Cc":
            return None
        sel = self.selection
        new_text = self._replace_selection(sel, char)
        if self.on_change is not None:
            self.on_change(new_text)
            self.selection = Selection.single(sel.start() + 1)
        return new_text

    def key_press(self, key: EditKey | str, shift: bool = False) -> bool:
        """Handle a key press; return whether the key was consumed."""
        if self.disabled:
            return False
        try:
            key = EditKey(key)
        except ValueError:
            return False

        sel = self.selection
        text_len = len(self.value)

        if key is EditKey.ARROW_LEFT:
            if sel.cursor <= 0:
                return False
            anchor = sel.anchor if shift else sel.cursor - 1
            self.selection = Selection(sel.cursor - 1, anchor)
            return True

        if key is EditKey.ARROW_RIGHT:
            if sel.cursor >= text_len:
                return False
            anchor = sel.anchor if shift else sel.cursor + 1
            self.selection = Selection(sel.cursor + 1, anchor)
            return True

        if key in (EditKey.ARROW_UP, EditKey.ARROW_DOWN):
            # Single-line input: vertical movement is swallowed.
            return True

        if key is EditKey.HOME:
            if sel.cursor <= 0:
                return False
            self.selection = Selection.single(0)
            return True

        if key is EditKey.END:
            if sel.cursor >= text_len:
                return False
            self.selection = Selection.single(text_len)
            return True

        if key is EditKey.BACKSPACE:
            if sel.is_empty():
                if sel.cursor > 0:
                    if sel.cursor - 1 >= text_len:
                        raise IndexError(
                            f"cursor {sel.cursor} outside text of length {text_len}"
                        )
                    self._emit(self.value[: sel.cursor - 1] + self.value[sel.cursor :])
                    self.selection = Selection.single(sel.cursor - 1)
            else:
                self._emit(self._replace_selection(sel, ""))
                self.selection = Selection.single(sel.start())
            return True

        # EditKey.DELETE
        if sel.is_empty():
            if sel.cursor < text_len:
                self._emit(self.value[: sel.cursor] + self.value[sel.cursor + 1 :])
                self.selection = Selection.single(sel.cursor)
        else:
            self._emit(self._replace_selection(sel, ""))
            self.selection = Selection.single(sel.start())
        return True