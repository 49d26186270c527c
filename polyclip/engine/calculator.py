# polyclip/engine/calculator.py

from __future__ import annotations

from typing import Optional

from ..geometry import Polygon
from .strategy import ClippingStrategy, get_strategy
from .sutherland_hodgman import SutherlandHodgman


class PolygonClippingCalculator:
    """
    Entry point for callers. Holds one clipping strategy and forwards to it,
    so call sites do not depend on the concrete algorithm.
    """

    def __init__(self, strategy: Optional[ClippingStrategy] = None) -> None:
        self.strategy = strategy if strategy is not None else SutherlandHodgman()

    @classmethod
    def from_name(cls, name: str) -> "PolygonClippingCalculator":
        return cls(get_strategy(name))

    def clip(self, clip_polygon: Polygon, input_polygon: Polygon) -> Optional[Polygon]:
        return self.strategy.clip(clip_polygon, input_polygon)
