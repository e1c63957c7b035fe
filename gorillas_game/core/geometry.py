"""Small computational-geometry helpers used for silhouette hit tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

Point = Tuple[float, float]


def point_in_polygon(x: float, y: float, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting test; the polygon is implicitly closed."""

    inside = False
    count = len(polygon)
    j = count - 1
    for i in range(count):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y):
            cross_x = xi + (y - yi) * (xj - xi) / (yj - yi)
            if x < cross_x:
                inside = not inside
        j = i
    return inside


def point_segment_distance(x: float, y: float, a: Point, b: Point) -> float:
    ax, ay = a
    bx, by = b
    dx = bx - ax
    dy = by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(x - ax, y - ay)
    t = ((x - ax) * dx + (y - ay) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(x - (ax + t * dx), y - (ay + t * dy))


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.x, y - self.y) <= self.radius


@dataclass(frozen=True)
class QuadraticCurve:
    """Quadratic Bezier curve from ``start`` to ``end`` bent towards ``control``."""

    start: Point
    control: Point
    end: Point

    def point_at(self, t: float) -> Point:
        inv = 1.0 - t
        a = inv * inv
        b = 2.0 * inv * t
        c = t * t
        return (
            a * self.start[0] + b * self.control[0] + c * self.end[0],
            a * self.start[1] + b * self.control[1] + c * self.end[1],
        )

    def flatten(self, segments: int = 24) -> List[Point]:
        """Approximate the curve by a polyline of ``segments`` pieces."""

        segments = max(1, segments)
        return [self.point_at(i / segments) for i in range(segments + 1)]

    def distance_to(self, x: float, y: float, segments: int = 24) -> float:
        points = self.flatten(segments)
        return min(
            point_segment_distance(x, y, points[i], points[i + 1])
            for i in range(len(points) - 1)
        )

    def translated(self, dx: float, dy: float) -> "QuadraticCurve":
        return QuadraticCurve(
            (self.start[0] + dx, self.start[1] + dy),
            (self.control[0] + dx, self.control[1] + dy),
            (self.end[0] + dx, self.end[1] + dy),
        )


def bounding_box(points: Sequence[Point], padding: float = 0.0) -> Tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` grown by ``padding`` on every side."""

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs) - padding, min(ys) - padding, max(xs) + padding, max(ys) + padding


__all__ = [
    "Circle",
    "Point",
    "QuadraticCurve",
    "bounding_box",
    "point_in_polygon",
    "point_segment_distance",
]
