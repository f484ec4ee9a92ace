"""Horizontal slider: dragging, stepping buttons and display state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from . import colors
from .colors import Srgba

__all__ = ["DragType", "Slider"]


class DragType(Enum):
    """What the pointer is currently doing with the slider."""

    NONE = 0
    DRAGGING = 1
    HOLD_DECREMENT = 2
    HOLD_INCREMENT = 3


def _clamp(value: float, low: float, high: float) -> float:
    if not low <= high:
        raise ValueError(f"invalid slider range: min {low} > max {high}")
    if math.isnan(value):
        return value
    return max(low, min(value, high))


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _gamma_from_linear(value: float) -> float:
    if value <= 0.0:
        return value
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1.0 / 2.4) - 0.055


def _lighter(color: Srgba, amount: float) -> Srgba:
    red, green, blue, alpha = color.to_linear()
    luminance = red * 0.2126 + green * 0.7152 + blue * 0.0722
    if luminance == 0.0:
        return color
    adjustment = min(luminance + amount, 1.0) / luminance
    return Srgba(
        *(
            _gamma_from_linear(min(max(c * adjustment, 0.0), 1.0))
            for c in (red, green, blue)
        ),
        alpha,
    )


@dataclass
class Slider:
    """State of a horizontal slider with decrement and increment buttons.

    The slider is controlled: it never changes ``value`` itself, but reports
    new values through ``on_change`` and returns them.
    """

    value: float = 0.0
    min_value: float = 0.0
    max_value: float = 1.0
    precision: int = 0
    step: float = 1.0
    disabled: bool = False
    on_change: Callable[[float], None] | None = None
    drag_type: DragType = DragType.NONE
    drag_offset: float = 0.0

    def _emit(self, value: float) -> float:
        if self.on_change is not None:
            self.on_change(value)
        return value

    def position(self) -> float:
        """Fraction of the range covered by the current value."""
        if self.max_value > self.min_value:
            return (self.value - self.min_value) / (self.max_value - self.min_value)
        return 0.0

    def formatted(self) -> str:
        """The value printed with ``precision`` decimal places."""
        return f"{self.value:.{self.precision}f}"

    def drag_start(self) -> None:
        """Begin dragging, remembering the current value as the offset."""
        self.drag_type = DragType.DRAGGING
        self.drag_offset = self.value

    def drag(self, distance: float, width: float) -> float | None:
        """Report the value for a horizontal drag of ``distance`` pixels.

        ``width`` is the slider's on-screen width. Returns None when no drag
        is in progress.
        """
        if self.drag_type is not DragType.DRAGGING:
            return None
        low, high = self.min_value, self.max_value
        span = high - low
        if span > 0.0:
            new_value = self.drag_offset + _div(distance * span, width)
        else:
            new_value = low + span * 0.5
        rounding = 10.0 ** self.precision
        new_value = _round_half_away(new_value * rounding) / rounding
        return self._emit(_clamp(new_value, low, high))

    def drag_end(self) -> None:
        """Finish a drag of the slider body."""
        if self.drag_type is DragType.DRAGGING:
            self.drag_type = DragType.NONE
            self.drag_offset = self.value

    def press_step(self, step: float) -> float:
        """Press a step button: move the value by ``step`` within the range."""
        self.drag_type = DragType.HOLD_INCREMENT if step > 0.0 else DragType.HOLD_DECREMENT
        self.drag_offset = self.value
        return self._emit(_clamp(self.value + step, self.min_value, self.max_value))

    def release_step(self) -> None:
        """Release a step button."""
        self.drag_type = DragType.NONE
        self.drag_offset = self.value

    def button_color(
        self, step: float, hovering: bool, button_hovering: bool
    ) -> Srgba:
        """Icon color of the step button for ``step``.

        ``hovering`` tells whether the pointer is over the slider and
        ``button_hovering`` whether it is over this button.
        """
        if (self.drag_type is DragType.HOLD_INCREMENT and step > 0.0) or (
            self.drag_type is DragType.HOLD_DECREMENT and step < 0.0
        ):
            return colors.FOREGROUND
        if self.drag_type is DragType.DRAGGING:
            return colors.TRANSPARENT
        if hovering and step != 0.0:
            return _lighter(colors.U4, 0.1) if button_hovering else colors.U4
        return colors.TRANSPARENT