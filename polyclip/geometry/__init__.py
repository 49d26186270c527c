# polyclip/geometry/__init__.py

from .primitives import Point2D, Bounds, Line, Polygon
from .classify import PointPosition, PointPositions, clip_segment

__all__ = [
    "Point2D",
    "Bounds",
    "Line",
    "Polygon",
    "PointPosition",
    "PointPositions",
    "clip_segment",
]
