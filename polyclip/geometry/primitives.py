# polyclip/geometry/primitives.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass
class Bounds:
    """
    Axis aligned bounding box.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, pt: Point2D) -> bool:
        # Inclusive on both axes, exact comparison.
        return (
            self.min_x <= pt.x <= self.max_x
            and self.min_y <= pt.y <= self.max_y
        )

    @classmethod
    def from_points(cls, points: Iterable[Point2D]) -> "Bounds":
        pts = list(points)
        if not pts:
            raise ValueError("Cannot compute bounds from empty point list")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class Line:
    """
    Directed segment from start to end.

    The half-plane on the left of the start->end ray (cross product >= 0)
    counts as inside.
    """
    start: Point2D
    end: Point2D

    def cross_product(self, point: Point2D) -> float:
        edge_x = self.end.x - self.start.x
        edge_y = self.end.y - self.start.y
        to_x = point.x - self.start.x
        to_y = point.y - self.start.y
        return edge_x * to_y - edge_y * to_x

    def is_inside(self, point: Point2D) -> bool:
        return self.cross_product(point) >= 0

    def bounds(self) -> Bounds:
        return Bounds.from_points((self.start, self.end))

    def intersection(self, other: "Line") -> Optional[Point2D]:
        """
        Intersection point of two segments, or None.

        Solves the 2x2 system of the implicit line equations a*x + b*y = c.
        A zero determinant (parallel or collinear, overlapping included)
        gives None. The solved point must also fall within both segments'
        bounding boxes.
        """
        a1 = self.end.y - self.start.y
        b1 = self.start.x - self.end.x
        c1 = a1 * self.start.x + b1 * self.start.y

        a2 = other.end.y - other.start.y
        b2 = other.start.x - other.end.x
        c2 = a2 * other.start.x + b2 * other.start.y

        determinant = a1 * b2 - a2 * b1
        if determinant == 0:
            return None

        x = (b2 * c1 - b1 * c2) / determinant
        y = (a1 * c2 - a2 * c1) / determinant
        pt = Point2D(x, y)

        if self.bounds().contains(pt) and other.bounds().contains(pt):
            return pt
        return None


@dataclass(frozen=True, init=False)
class Polygon:
    """
    Simple polygon defined by ordered vertices.

    The vertex list is closed implicitly: the last vertex connects back to
    the first. Nothing is validated on construction, so polygons with fewer
    than three vertices are accepted as-is.
    """
    vertices: Tuple[Point2D, ...]

    def __init__(self, vertices: Sequence[Point2D]) -> None:
        # Own a tuple so a caller's list can not be mutated underneath us.
        object.__setattr__(self, "vertices", tuple(vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self.vertices)

    @property
    def is_degenerate(self) -> bool:
        return len(self.vertices) < 3

    def edges(self) -> Iterator[Line]:
        n = len(self.vertices)
        for i in range(n):
            yield Line(self.vertices[i], self.vertices[(i + 1) % n])

    def bounds(self) -> Bounds:
        return Bounds.from_points(self.vertices)
