"""Builder for flat triangle-list meshes: rectangles, circles and polylines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, NamedTuple, Sequence

__all__ = [
    "F32_MAX",
    "Rect",
    "Mesh",
    "StrokeMarker",
    "PolygonOptions",
    "ShapeBuilder",
]

F32_MAX = 3.4028234663852886e38


class _V(NamedTuple):
    x: float
    y: float

    def __add__(self, other):  # type: ignore[override]
        return _V(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return _V(self.x - other.x, self.y - other.y)

    def __mul__(self, k):  # type: ignore[override]
        return _V(self.x * k, self.y * k)

    def __truediv__(self, k):
        if k == 0:
            return _V(math.nan, math.nan)
        return _V(self.x / k, self.y / k)

    def __neg__(self):
        return _V(-self.x, -self.y)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other) -> float:
        return (self - other).length()

    def normalize(self) -> _V:
        return self / self.length()


def _vec(p: Sequence[float]) -> _V:
    return _V(float(p[0]), float(p[1]))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its minimum and maximum corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass
class Mesh:
    """A triangle-list mesh with 3D positions and 32-bit indices."""

    positions: list[tuple[float, float, float]] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    topology: str = "triangle-list"

    @property
    def aabb(
        self,
    ) -> tuple[tuple[float, float, float], tuple[float, float, float]] | None:
        """Bounding box as (min, max), or None for an empty mesh."""
        if not self.positions:
            return None
        xs, ys, zs = zip(*self.positions)
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))


class StrokeMarker(Enum):
    """Marker drawn at the start or end of a stroke."""

    NONE = "none"
    ARROWHEAD = "arrowhead"


@dataclass
class PolygonOptions:
    """Options for stroking a polygon or polyline."""

    closed: bool = False
    dash_length: float = F32_MAX
    gap_length: float = 0.0
    start_marker: StrokeMarker = StrokeMarker.NONE
    end_marker: StrokeMarker = StrokeMarker.NONE


class ShapeBuilder:
    """Accumulates vertices and triangle indices for two-dimensional shapes."""

    topology = "triangle-list"

    def __init__(self, stroke_width: float = 1.0) -> None:
        self.vertices: list[tuple[float, float, float]] = []
        self.indices: list[int] = []
        self.stroke_width = stroke_width

    def with_stroke_width(self, stroke_width: float) -> ShapeBuilder:
        self.stroke_width = stroke_width
        return self

    def push_vertex(self, x: float, y: float, z: float) -> ShapeBuilder:
        self.vertices.append((x, y, z))
        return self

    def push_index(self, index: int) -> ShapeBuilder:
        self.indices.append(index)
        return self

    def push_indices(self, indices: Iterable[int]) -> ShapeBuilder:
        self.indices.extend(indices)
        return self

    def _offset(self, start: int, offsets: Iterable[int]) -> None:
        self.indices.extend(start + i for i in offsets)

    def stroke_rect(self, rect: Rect) -> ShapeBuilder:
        """Stroke the inside edge of ``rect`` with the current stroke width."""
        start = len(self.vertices)
        lw = self.stroke_width
        corners = [
            (rect.min_x + lw, rect.min_y + lw),
            (rect.min_x, rect.min_y),
            (rect.max_x - lw, rect.min_y + lw),
            (rect.max_x, rect.min_y),
            (rect.max_x - lw, rect.max_y - lw),
            (rect.max_x, rect.max_y),
            (rect.min_x + lw, rect.max_y - lw),
            (rect.min_x, rect.max_y),
        ]
        for x, y in corners:
            self.push_vertex(x, y, 0.0)
        self._offset(
            start,
            (0, 1, 2, 1, 3, 2, 2, 3, 4, 4, 3, 5,
             4, 5, 6, 5, 7, 6, 6, 1, 0, 6, 7, 1),
        )
        return self

    def fill_rect(self, rect: Rect) -> ShapeBuilder:
        start = len(self.vertices)
        self.push_vertex(rect.min_x, rect.min_y, 0.0)
        self.push_vertex(rect.max_x, rect.min_y, 0.0)
        self.push_vertex(rect.max_x, rect.max_y, 0.0)
        self.push_vertex(rect.min_x, rect.max_y, 0.0)
        self._offset(start, (0, 1, 2, 0, 2, 3))
        return self

    def stroke_circle(
        self, center: Sequence[float], radius: float, segments: int
    ) -> ShapeBuilder:
        cx, cy = _vec(center)
        start = len(self.vertices)
        step = 2.0 * math.pi / segments
        radius_inner = max(radius - self.stroke_width, 0.0)
        radius_outer = radius_inner + self.stroke_width
        for i in range(segments):
            angle = i * step
            c, s = math.cos(angle), math.sin(angle)
            nxt = (i + 1) % segments
            self.push_vertex(cx + radius_inner * c, cy + radius_inner * s, 0.0)
            self.push_vertex(cx + radius_outer * c, cy + radius_outer * s, 0.0)
            self._offset(
                start,
                (i * 2, i * 2 + 1, nxt * 2, i * 2 + 1, nxt * 2 + 1, nxt * 2),
            )
        return self

    def fill_circle(
        self, center: Sequence[float], radius: float, segments: int
    ) -> ShapeBuilder:
        cx, cy = _vec(center)
        start = len(self.vertices)
        step = 2.0 * math.pi / segments
        # The hub vertex sits at the origin, as the mesh format expects.
        self.push_vertex(0.0, 0.0, 0.0)
        for i in range(segments):
            angle = i * step
            self.push_vertex(
                cx + radius * math.cos(angle), cy + radius * math.sin(angle), 0.0
            )
            self._offset(start, (0, i + 1, (i + 1) % segments + 1))
        return self

    def fill_triangle(self, a, b, c) -> ShapeBuilder:
        start = len(self.vertices)
        for p in (a, b, c):
            x, y = _vec(p)
            self.push_vertex(x, y, 0.0)
        self._offset(start, (0, 1, 2))
        return self

    def fill_quad(self, a, b, c, d) -> ShapeBuilder:
        start = len(self.vertices)
        for p in (a, b, c, d):
            x, y = _vec(p)
            self.push_vertex(x, y, 0.0)
        self._offset(start, (0, 1, 2, 0, 2, 3))
        return self

    def stroke_polygon(
        self, vertices: Sequence[Sequence[float]], options: PolygonOptions | None = None
    ) -> ShapeBuilder:
        """Stroke a polyline or closed polygon, with optional dashes and markers."""
        options = options if options is not None else PolygonOptions()
        points = [_vec(p) for p in vertices]
        count = len(points)
        if count < 2:
            return self
        closed = options.closed and count > 2
        lw = self.stroke_width * 0.5
        dash_end = options.dash_length
        v0 = v1 = 0

        for i, vtx in enumerate(points):
            vtx_next = points[(i + 1) % count]
            length = vtx.distance(vtx_next)
            v_dir = (vtx_next - vtx) / length
            v_perp = _V(v_dir.y, -v_dir.x).normalize() * lw

            if i == 0:
                if closed:
                    v_dir_prev = (vtx - points[-1]).normalize()
                    dot = (v_dir + v_dir_prev).normalize().dot(v_dir_prev)
                    v_miter = _V(
                        v_dir_prev.y + v_dir.y, -v_dir_prev.x - v_dir.x
                    ).normalize() * lw / dot
                    v2 = self._push_point(vtx + v_miter)
                    v3 = self._push_point(vtx - v_miter)
                    self.push_indices((v0, v2, v1, v1, v2, v3))
                    v0, v1 = v2, v3
                else:
                    marker_length = min(
                        self._marker_length(options.start_marker), length * 0.4
                    )
                    self._fill_marker(
                        options.start_marker,
                        vtx + v_dir * marker_length,
                        -v_dir,
                        marker_length,
                    )
                    v0 = self._push_point(vtx + v_perp + v_dir * marker_length)
                    v1 = self._push_point(vtx - v_perp + v_dir * marker_length)
                    dash_end += marker_length

            marker_length = min(self._marker_length(options.end_marker), length * 0.4)
            if i == count - 2 and not closed:
                length -= marker_length

            while dash_end < length:
                v_dash_end = vtx + v_dir * min(dash_end, length)
                v2 = self._push_point(v_dash_end + v_perp)
                v3 = self._push_point(v_dash_end - v_perp)
                self.push_indices((v0, v2, v1, v1, v2, v3))
                if dash_end + options.gap_length < length:
                    v_dash_start = vtx + v_dir * (dash_end + options.gap_length)
                    v0 = self._push_point(v_dash_start + v_perp)
                    v1 = self._push_point(v_dash_start - v_perp)
                dash_end += options.dash_length + options.gap_length

            if dash_end - options.dash_length < length:
                if i < count - 2 or options.closed:
                    vtx_next2 = points[(i + 2) % count]
                    v_dir_next = (vtx_next2 - vtx_next).normalize()
                    dot = (v_dir_next + v_dir).normalize().dot(v_dir)
                    v_miter = _V(
                        v_dir.y + v_dir_next.y, -v_dir.x - v_dir_next.x
                    ).normalize() * lw / dot
                    v2 = self._push_point(vtx_next + v_miter)
                    v3 = self._push_point(vtx_next - v_miter)
                    self.push_indices((v0, v2, v1, v1, v2, v3))
                    v0, v1 = v2, v3
                else:
                    v_seg_end = vtx + v_dir * length
                    v2 = self._push_point(v_seg_end + v_perp)
                    v3 = self._push_point(v_seg_end - v_perp)
                    self.push_indices((v0, v2, v1, v1, v2, v3))
                    self._fill_marker(options.end_marker, v_seg_end, v_dir, marker_length)
                    break

            dash_end -= length
        return self

    def build(self) -> Mesh:
        """Return the accumulated shape as a mesh."""
        return Mesh(list(self.vertices), list(self.indices), self.topology)

    def _push_point(self, v: _V) -> int:
        index = len(self.vertices)
        self.vertices.append((v.x, v.y, 0.0))
        return index

    def _fill_marker(
        self, marker: StrokeMarker, position: _V, direction: _V, length: float
    ) -> None:
        if marker is StrokeMarker.ARROWHEAD:
            v_perp = _V(direction.y, -direction.x).normalize() * length
            tip = position + direction * length
            self.fill_triangle(tip, position - v_perp, position + v_perp)

    def _marker_length(self, marker: StrokeMarker) -> float:
        if marker is StrokeMarker.ARROWHEAD:
            return self.stroke_width * 2.0
        return 0.0