# polyclip/geometry/classify.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from .primitives import Line, Point2D


class PointPosition(Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"

    @classmethod
    def of(cls, edge: Line, point: Point2D) -> "PointPosition":
        return cls.INSIDE if edge.is_inside(point) else cls.OUTSIDE


@dataclass(frozen=True)
class PointPositions:
    """
    Positions of a segment's two endpoints relative to one clip edge.

    output_vertices() applies the Sutherland-Hodgman edge rule:

      INSIDE  -> INSIDE   emit end
      INSIDE  -> OUTSIDE  emit the crossing point
      OUTSIDE -> INSIDE   emit the crossing point, then end
      OUTSIDE -> OUTSIDE  emit nothing

    When no crossing point can be computed (parallel lines, or a solution
    outside either segment) that step simply contributes nothing.
    """
    start: PointPosition
    end: PointPosition

    @classmethod
    def classify(cls, edge: Line, start: Point2D, end: Point2D) -> "PointPositions":
        return cls(PointPosition.of(edge, start), PointPosition.of(edge, end))

    def output_vertices(self, edge: Line, start: Point2D, end: Point2D) -> List[Point2D]:
        inside, outside = PointPosition.INSIDE, PointPosition.OUTSIDE
        out: List[Point2D] = []

        if self.start is inside and self.end is inside:
            out.append(end)
        elif self.start is inside and self.end is outside:
            crossing = edge.intersection(Line(start, end))
            if crossing is not None:
                out.append(crossing)
        elif self.start is outside and self.end is inside:
            crossing = edge.intersection(Line(start, end))
            if crossing is not None:
                out.append(crossing)
            out.append(end)

        return out


def clip_segment(edge: Line, start: Point2D, end: Point2D) -> List[Point2D]:
    """
    Vertices contributed by the segment start->end when clipped by edge.
    """
    return PointPositions.classify(edge, start, end).output_vertices(edge, start, end)
