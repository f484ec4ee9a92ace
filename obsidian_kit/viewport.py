"""Fitting a 3D camera viewport into the space left free by UI panels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "WindowResolution",
    "ViewportInset",
    "Viewport",
    "compute_viewport_inset",
    "compute_camera_viewport",
]

_U32_MAX = 2**32 - 1


def _to_u32(value: float) -> int:
    """Truncate to an unsigned 32-bit integer, saturating at the bounds."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


@dataclass(frozen=True)
class WindowResolution:
    """Window size in physical pixels and its scale factor."""

    physical_width: int
    physical_height: int
    scale_factor: float = 1.0


@dataclass(frozen=True)
class ViewportInset:
    """Margins, in logical pixels, kept free around the 3D view."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class Viewport:
    """Camera viewport in physical pixels."""

    physical_position: tuple[int, int]
    physical_size: tuple[int, int]


def compute_viewport_inset(
    element_center: Sequence[float] | None,
    element_size: Sequence[float] | None,
    resolution: WindowResolution,
) -> ViewportInset:
    """Inset that places the 3D view over a UI element.

    ``element_center`` and ``element_size`` are the element's logical
    center and size; with no element the inset is empty.
    """
    if element_center is None or element_size is None:
        return ViewportInset()
    cx, cy = float(element_center[0]), float(element_center[1])
    half_w, half_h = float(element_size[0]) / 2.0, float(element_size[1]) / 2.0
    min_x, min_y = cx - half_w, cy - half_h
    max_x, max_y = cx + half_w, cy + half_h
    sf = resolution.scale_factor
    return ViewportInset(
        left=min_x,
        right=float(resolution.physical_width) / sf - max_x,
        top=min_y,
        bottom=float(resolution.physical_height) / sf - max_y,
    )


def compute_camera_viewport(
    inset: ViewportInset, resolution: WindowResolution
) -> Viewport:
    """Physical camera viewport for the window minus ``inset``; at least 1x1."""
    sf = resolution.scale_factor
    left = inset.left * sf
    right = inset.right * sf
    top = inset.top * sf
    bottom = inset.bottom * sf
    width = max(float(resolution.physical_width) - left - right, 1.0)
    height = max(float(resolution.physical_height) - top - bottom, 1.0)
    return Viewport(
        physical_position=(_to_u32(left), _to_u32(top)),
        physical_size=(_to_u32(width), _to_u32(height)),
    )