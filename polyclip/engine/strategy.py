# polyclip/engine/strategy.py

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Dict, Optional, Type

from ..geometry import Polygon


class ClippingStrategy(ABC):
    """
    Clips an input polygon against a clipping polygon.

    Implementations may assume a convex clipping polygon whose vertices are
    ordered so that its interior lies left of every directed edge.
    """
    name: ClassVar[str] = ""

    @abstractmethod
    def clip(self, clip_polygon: Polygon, input_polygon: Polygon) -> Optional[Polygon]:
        """
        Return the part of input_polygon inside clip_polygon, or None when
        nothing is left.
        """


StrategyType = Type[ClippingStrategy]

_REGISTRY: Dict[str, StrategyType] = {}


def register_strategy(name: str) -> Callable[[StrategyType], StrategyType]:
    """
    Class decorator used by strategy implementations to make themselves
    available by name.
    """
    def decorator(cls: StrategyType) -> StrategyType:
        cls.name = name
        _REGISTRY[name] = cls
        return cls
    return decorator


def get_strategy(name: str) -> ClippingStrategy:
    try:
        cls = _REGISTRY[name]
    except KeyError:
        raise KeyError(f"No clipping strategy registered under name: {name!r}")
    return cls()


def available_strategies() -> list[str]:
    return sorted(_REGISTRY)
