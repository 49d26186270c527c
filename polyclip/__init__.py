"""
polyclip package init.

Re-exports the pieces most callers need: the geometry value types, the
clipping calculator and the result records.
"""

from .geometry import Point2D, Line, Polygon
from .results import ClipJob, ClipResult
from .engine import PolygonClippingCalculator, SutherlandHodgman

__all__ = [
    "Point2D",
    "Line",
    "Polygon",
    "ClipJob",
    "ClipResult",
    "PolygonClippingCalculator",
    "SutherlandHodgman",
]
