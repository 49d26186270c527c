# polyclip/engine/__init__.py

from .strategy import (
    ClippingStrategy,
    available_strategies,
    get_strategy,
    register_strategy,
)
from .sutherland_hodgman import SutherlandHodgman, collapse_consecutive_duplicates
from .calculator import PolygonClippingCalculator
from .run import run_clip

__all__ = [
    "ClippingStrategy",
    "available_strategies",
    "get_strategy",
    "register_strategy",
    "SutherlandHodgman",
    "collapse_consecutive_duplicates",
    "PolygonClippingCalculator",
    "run_clip",
]
