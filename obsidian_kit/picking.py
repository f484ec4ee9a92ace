"""Picking backend that always reports a hit on a backdrop entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Mapping

__all__ = ["MAX_DEPTH", "HitData", "PointerHits", "update_hits"]

MAX_DEPTH = 3.4028234663852886e38


@dataclass(frozen=True)
class HitData:
    """A single hit: the camera that saw it, its depth and optional geometry."""

    camera: Hashable
    depth: float
    position: tuple[float, float, float] | None = None
    normal: tuple[float, float, float] | None = None


@dataclass
class PointerHits:
    """All hits for one pointer, reported with an ordering priority."""

    pointer: Hashable
    picks: list[tuple[Any, HitData]] = field(default_factory=list)
    order: float = 0.0


def update_hits(
    rays: Iterable[tuple[Hashable, Hashable]],
    camera_orders: Mapping[Hashable, int],
    backdrop: Any,
) -> list[PointerHits]:
    """Report a backdrop hit for every ray cast from a backdrop-pickable camera.

    ``rays`` yields ``(camera, pointer)`` pairs; ``camera_orders`` maps each
    backdrop-pickable camera to its render order. The hit is ordered one below
    the camera so it never hides other hits.
    """
    if backdrop is None:
        raise LookupError("no backdrop entity")
    hits = []
    for camera, pointer in rays:
        if camera not in camera_orders:
            continue
        hit = HitData(camera, MAX_DEPTH)
        hits.append(
            PointerHits(pointer, [(backdrop, hit)], float(camera_orders[camera]) - 1.0)
        )
    return hits