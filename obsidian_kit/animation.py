"""Eased transitions of animatable values: numbers, vectors and colors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from .colors import Srgba

__all__ = ["CubicSegment", "lerp", "AnimatedTransition", "DEFAULT_TIMING"]

T = TypeVar("T")

DEFAULT_TIMING = ((0.25, 0.1), (0.25, 1.0))

_MAX_ERROR = 1e-5
_MAX_ITERS = 8


def _bezier_coefficients(a: float, b: float) -> tuple[float, float, float, float]:
    # Polynomial form of a cubic Bezier running from 0 to 1 with controls a, b.
    return (0.0, 3.0 * a, 3.0 * (b - 2.0 * a), 3.0 * a - 3.0 * b + 1.0)


@dataclass(frozen=True)
class CubicSegment:
    """One cubic curve segment in polynomial form, used as an easing curve."""

    x_coeffs: tuple[float, float, float, float]
    y_coeffs: tuple[float, float, float, float]

    @classmethod
    def bezier(cls, p1: Sequence[float], p2: Sequence[float]) -> CubicSegment:
        """Easing curve from (0, 0) to (1, 1) with control points ``p1`` and ``p2``."""
        x1, y1 = float(p1[0]), float(p1[1])
        x2, y2 = float(p2[0]), float(p2[1])
        return cls(_bezier_coefficients(x1, x2), _bezier_coefficients(y1, y2))

    @staticmethod
    def _eval(c: tuple[float, float, float, float], t: float) -> float:
        return c[0] + t * (c[1] + t * (c[2] + t * c[3]))

    @staticmethod
    def _slope(c: tuple[float, float, float, float], t: float) -> float:
        return c[1] + t * (2.0 * c[2] + t * 3.0 * c[3])

    def position(self, t: float) -> tuple[float, float]:
        """Point on the curve at parameter ``t``."""
        return (self._eval(self.x_coeffs, t), self._eval(self.y_coeffs, t))

    def ease(self, t: float) -> float:
        """Eased value for time ``t``, clamped to [0, 1] first."""
        x = min(max(t, 0.0), 1.0)
        guess = x
        y = 0.0
        for _ in range(_MAX_ITERS):
            pos_x, y = self.position(guess)
            error = pos_x - x
            if abs(error) <= _MAX_ERROR:
                break
            slope = self._slope(self.x_coeffs, guess)
            if slope == 0.0:
                break
            guess -= error / slope
        return y


def lerp(origin: Any, target: Any, t: float) -> Any:
    """Interpolate between two numbers, vectors (sequences) or colors."""
    if isinstance(origin, Srgba):
        return origin.mix(target, t)
    if isinstance(origin, (int, float)):
        return origin + (target - origin) * t
    return tuple(lerp(a, b, t) for a, b in zip(origin, target))


class AnimatedTransition(Generic[T]):
    """Animates a value from ``origin`` to ``target`` over ``duration`` seconds."""

    def __init__(self, origin: T, target: T, duration: float, delay: float = 0.0) -> None:
        self.timing = CubicSegment.bezier(*DEFAULT_TIMING)
        self.origin = origin
        self.target = target
        self.duration = duration
        self.delay = delay
        self.clock = 0.0

    @property
    def finished(self) -> bool:
        """True once the delay and the whole duration have elapsed."""
        return self.clock >= self.delay + self.duration

    def with_delay(self, delay: float) -> AnimatedTransition[T]:
        """Set the initial delay."""
        self.delay = delay
        return self

    def with_timing(
        self, p1: Sequence[float], p2: Sequence[float]
    ) -> AnimatedTransition[T]:
        """Set the easing curve from two Bezier control points."""
        self.timing = CubicSegment.bezier(p1, p2)
        return self

    def restart(self, target: T) -> None:
        """Restart the clock towards a new target."""
        self.target = target
        self.clock = 0.0

    def advance(self, time: float) -> T | None:
        """Advance the clock by ``time`` seconds and return the current value.

        Returns None while the initial delay is still running.
        """
        self.clock += time
        if self.clock < self.delay:
            return None
        if self.duration > 0.0001:
            t = min((self.clock - self.delay) / self.duration, 1.0)
        else:
            t = 1.0
        return lerp(self.origin, self.target, self.timing.ease(t))

    def retarget(self, current: T, target: T, duration: float) -> bool:
        """Start again from ``current`` towards ``target``.

        Nothing changes if the transition already heads for ``target``;
        returns whether it was restarted.
        """
        if self.target == target:
            return False
        self.timing = CubicSegment.bezier(*DEFAULT_TIMING)
        self.origin = current
        self.target = target
        self.duration = duration
        self.delay = 0.0
        self.clock = 0.0
        self.advance(0.0)
        return True