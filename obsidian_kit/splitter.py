"""Draggable splitter bar between two panes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from . import colors
from .colors import Srgba
from .slider import _lighter

__all__ = ["SplitterDirection", "Splitter"]


class SplitterDirection(Enum):
    """Direction of the bar itself, not of the panes it separates."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def default(cls) -> SplitterDirection:
        """The default direction."""
        return cls.VERTICAL


@dataclass
class Splitter:
    """Drag state of a splitter bar; reports new split values through ``on_change``."""

    direction: SplitterDirection = SplitterDirection.VERTICAL
    on_change: Callable[[float], None] | None = None
    dragging: bool = False
    offset: float = 0.0

    def drag_start(self, value: float) -> None:
        """Begin a drag from the current split ``value``."""
        self.dragging = True
        self.offset = value

    def drag(self, distance: float | Sequence[float]) -> float | None:
        """Report the split value for a drag of ``distance`` pixels.

        ``distance`` is either the horizontal distance or an (x, y) pair,
        of which only x counts. Returns None when no drag is in progress.
        """
        if not self.dragging:
            return None
        dx = distance if isinstance(distance, (int, float)) else distance[0]
        value = float(dx) + self.offset
        if self.on_change is not None:
            self.on_change(value)
        return value

    def drag_end(self, value: float) -> None:
        """Finish (or cancel) a drag, remembering the current split ``value``."""
        self.dragging = False
        self.offset = value

    def bar_color(self, hovering: bool) -> Srgba:
        """Color of the bar's handle, brighter while hovered or dragged."""
        if self.dragging:
            return _lighter(colors.U3, 0.05)
        if hovering:
            return _lighter(colors.U3, 0.02)
        return colors.U3