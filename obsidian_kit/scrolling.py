"""Scroll areas, scrollbar thumbs and mouse-wheel routing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterable, Sequence

from .shapes import Rect

__all__ = [
    "ScrollUnit",
    "ScrollWheel",
    "ScrollArea",
    "DragMode",
    "ScrollDragState",
    "wheel_events",
    "handle_thumb_drag",
    "handle_track_click",
]


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand, like IEEE minNum."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand, like IEEE maxNum."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _div(a: float, b: float) -> float:
    """Floating-point division that yields inf or NaN instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _limit(value: float, upper: float) -> float:
    # The upper bound is applied first and the lower one last, so that a
    # negative range still yields zero.
    return _fmax(_fmin(value, upper), 0.0)


class ScrollUnit(Enum):
    """Unit in which a mouse-wheel delta is expressed."""

    LINE = "line"
    PIXEL = "pixel"


@dataclass(frozen=True)
class ScrollWheel:
    """Mouse-wheel event aimed at one entity."""

    target: Hashable
    delta: tuple[float, float]


@dataclass
class ScrollArea:
    """Scroll state of a clipped region and its content."""

    scroll_left: float = 0.0
    scroll_top: float = 0.0
    content_size: tuple[float, float] = (0.0, 0.0)
    visible_size: tuple[float, float] = (0.0, 0.0)
    id_scrollbar_x: Hashable | None = None
    id_scrollbar_y: Hashable | None = None

    def _max_scroll(self) -> tuple[float, float]:
        return (
            self.content_size[0] - self.visible_size[0],
            self.content_size[1] - self.visible_size[1],
        )

    def scroll_by(self, dx: float, dy: float) -> None:
        """Offset the scroll position, keeping it within the content."""
        max_x, max_y = self._max_scroll()
        self.scroll_left = _limit(self.scroll_left + dx, max_x)
        self.scroll_top = _limit(self.scroll_top + dy, max_y)

    def scroll_to(self, x: float, y: float) -> None:
        """Move to the given scroll position, clamped to the content."""
        max_x, max_y = self._max_scroll()
        self.scroll_left = _limit(x, max_x)
        self.scroll_top = _limit(y, max_y)

    def update_sizes(
        self,
        visible_size: Sequence[float],
        content_size: Sequence[float] | None,
    ) -> tuple[float, float] | None:
        """Record measured sizes and return the content's pixel offset.

        ``content_size`` is None when the area has no content child; the
        content size then becomes zero, the scroll position is left alone
        and None is returned. Otherwise the scroll position is clamped and
        the (left, top) offset to place the content at is returned.
        """
        self.visible_size = (float(visible_size[0]), float(visible_size[1]))
        if content_size is None:
            self.content_size = (0.0, 0.0)
            return None
        self.content_size = (float(content_size[0]), float(content_size[1]))
        max_x, max_y = self._max_scroll()
        self.scroll_left = _limit(self.scroll_left, max_x)
        self.scroll_top = _limit(self.scroll_top, max_y)
        return (-self.scroll_left, -self.scroll_top)

    def thumb_layout(
        self, vertical: bool, min_thumb_size: float
    ) -> tuple[float, float]:
        """Return the scrollbar thumb's (offset, size) as track percentages."""
        axis = 1 if vertical else 0
        visible = self.visible_size[axis]
        content = self.content_size[axis]
        scroll = self.scroll_top if vertical else self.scroll_left
        thumb_size = _fmin(
            _fmax(_div(visible, content), _div(min_thumb_size, visible)), 1.0
        )
        scroll_range = content - visible
        if scroll_range > 0.0:
            position = scroll * (1.0 - thumb_size) / scroll_range
        else:
            position = 0.0
        return (position * 100.0, thumb_size * 100.0)


class DragMode(Enum):
    """Which axis a scrollbar thumb drag controls."""

    NONE = "none"
    DRAG_X = "drag-x"
    DRAG_Y = "drag-y"


@dataclass(frozen=True)
class ScrollDragState:
    """Drag mode and the scroll position at the start of the drag."""

    mode: DragMode = DragMode.NONE
    offset: float = 0.0


def wheel_events(
    events: Iterable[tuple[ScrollUnit, Sequence[float]]],
    hovered: Iterable[Hashable] | None,
) -> list[ScrollWheel]:
    """Turn raw wheel events into one event per hovered entity.

    ``hovered`` holds the entities under the mouse pointer, or None when the
    mouse has no hover information. Line-based events are ignored.
    """
    if hovered is None:
        return []
    targets = list(hovered)
    result = []
    for unit, delta in events:
        if unit is not ScrollUnit.PIXEL:
            continue
        vector = (float(delta[0]), float(delta[1]))
        result.extend(ScrollWheel(target, vector) for target in targets)
    return result


def handle_thumb_drag(
    scroll_area: ScrollArea,
    drag_state: ScrollDragState,
    distance: Sequence[float],
) -> None:
    """Scroll in response to dragging the thumb by ``distance`` pixels."""
    dx, dy = float(distance[0]), float(distance[1])
    if drag_state.mode is DragMode.DRAG_Y:
        left = scroll_area.scroll_left
        if scroll_area.visible_size[1] > 0.0:
            top = (
                drag_state.offset
                + dy * scroll_area.content_size[0] / scroll_area.visible_size[1]
            )
        else:
            top = 0.0
        scroll_area.scroll_to(left, top)
    elif drag_state.mode is DragMode.DRAG_X:
        top = scroll_area.scroll_top
        if scroll_area.visible_size[0] > 0.0:
            left = (
                drag_state.offset
                + dx * scroll_area.content_size[1] / scroll_area.visible_size[0]
            )
        else:
            left = 0.0
        scroll_area.scroll_to(left, top)


def handle_track_click(
    scroll_area: ScrollArea,
    vertical: bool,
    position: Sequence[float],
    rect: Rect,
) -> None:
    """Page up or down when the track is clicked outside the thumb ``rect``."""
    x, y = float(position[0]), float(position[1])
    if vertical:
        page_size = scroll_area.visible_size[1]
        if y >= rect.max_y:
            scroll_area.scroll_by(0.0, page_size)
        elif y < rect.min_y:
            scroll_area.scroll_by(0.0, -page_size)
    else:
        page_size = scroll_area.visible_size[0]
        if x >= rect.max_x:
            scroll_area.scroll_by(page_size, 0.0)
        elif x < rect.min_x:
            scroll_area.scroll_by(-page_size, 0.0)