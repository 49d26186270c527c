# polyclip/engine/sutherland_hodgman.py

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..geometry import Point2D, Polygon, clip_segment
from .strategy import ClippingStrategy, register_strategy

logger = logging.getLogger(__name__)


def collapse_consecutive_duplicates(points: Iterable[Point2D]) -> List[Point2D]:
    """
    Drop every point equal to the one right before it.

    Only adjacent runs collapse. The last and first points are not compared
    and repeats further apart are kept.
    """
    out: List[Point2D] = []
    for pt in points:
        if out and out[-1] == pt:
            continue
        out.append(pt)
    return out


@register_strategy("sutherland_hodgman")
class SutherlandHodgman(ClippingStrategy):
    """
    Sutherland-Hodgman polygon clipping.

    The working vertex list starts as a copy of the input polygon and is
    re-clipped against each clip edge in turn. Correct only for convex clip
    polygons.

    Degenerate polygons are not rejected. A clip polygon with a single
    vertex yields one zero-length edge; results below a triangle are
    whatever the arithmetic gives.
    """

    def clip(self, clip_polygon: Polygon, input_polygon: Polygon) -> Optional[Polygon]:
        if clip_polygon.is_degenerate or input_polygon.is_degenerate:
            logger.warning(
                "Clipping degenerate polygon(s): clip has %d vertices, input has %d",
                len(clip_polygon),
                len(input_polygon),
            )

        current: List[Point2D] = list(input_polygon.vertices)

        for i, edge in enumerate(clip_polygon.edges()):
            next_vertices: List[Point2D] = []
            n = len(current)
            for j in range(n):
                start = current[j]
                end = current[(j + 1) % n]
                next_vertices.extend(clip_segment(edge, start, end))

            logger.debug("clip edge %d: %d -> %d vertices", i, n, len(next_vertices))
            current = next_vertices

        if not current:
            logger.debug("polygons do not intersect")
            return None

        result = Polygon(collapse_consecutive_duplicates(current))
        logger.debug("clipped polygon has %d vertices", len(result))
        return result
