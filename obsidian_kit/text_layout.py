"""Text selection state and the geometry of selections and carets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .shapes import Rect

__all__ = ["Selection", "Glyph", "selection_rect", "caret_position"]


@dataclass(frozen=True)
class Selection:
    """A text selection between a moving ``cursor`` and a fixed ``anchor``."""

    cursor: int = 0
    anchor: int = 0

    @classmethod
    def single(cls, cursor: int) -> Selection:
        """A collapsed selection at ``cursor``."""
        return cls(cursor, cursor)

    def is_empty(self) -> bool:
        return self.cursor == self.anchor

    def start(self) -> int:
        return min(self.cursor, self.anchor)

    def end(self) -> int:
        return max(self.cursor, self.anchor)

    def range(self) -> range:
        """The selected character positions."""
        return range(self.start(), self.end())


@dataclass(frozen=True)
class Glyph:
    """A laid-out glyph: baseline position and size, in physical pixels."""

    position: tuple[float, float]
    size: tuple[float, float]


def selection_rect(glyphs: Sequence[Glyph], selection: Selection) -> Rect | None:
    """Rectangle covering the selected glyphs, or None for an empty selection."""
    if selection.is_empty():
        return None
    start, end = selection.start(), selection.end()
    if start < 0 or end > len(glyphs):
        raise IndexError(f"selection {start}..{end} outside {len(glyphs)} glyphs")
    first = glyphs[start]
    last = glyphs[end - 1]
    return Rect(
        first.position[0] * 0.5,
        min(first.position[1] - first.size[1], last.position[1] - last.size[1]),
        last.position[0] * 0.5 + last.size[0],
        max(first.position[1], last.position[1]),
    )


def caret_position(glyphs: Sequence[Glyph], index: int) -> tuple[float, float, float]:
    """Return the caret's (left, top, height) for a cursor at ``index``.

    A cursor past the last glyph sits just after it.
    """
    if not glyphs:
        raise ValueError("no glyphs to place the caret against")
    if index >= len(glyphs):
        glyph = glyphs[-1]
        x = glyph.position[0] + glyph.size[0]
    else:
        glyph = glyphs[index]
        x = glyph.position[0]
    y = glyph.position[1]
    height = glyph.size[1]
    return (x * 0.5, y - height, height)