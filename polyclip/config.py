"""
Runtime settings for polyclip.

Everything here comes from environment variables. The library itself never
installs logging handlers; callers (see scripts/run_clip.py) opt in through
configure_logging().
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "POLYCLIP_LOG_LEVEL"
LOG_FORMAT_ENV = "POLYCLIP_LOG_FORMAT"
STRATEGY_ENV = "POLYCLIP_STRATEGY"

DEFAULT_STRATEGY = "sutherland_hodgman"
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_strategy_name() -> str:
    return os.getenv(STRATEGY_ENV) or DEFAULT_STRATEGY


def log_level(level: str | int | None = None) -> int:
    """Numeric level for level, POLYCLIP_LOG_LEVEL, or INFO."""
    value = level or os.getenv(LOG_LEVEL_ENV) or "INFO"
    if isinstance(value, int):
        return value
    resolved = logging.getLevelName(value.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    """
    Set the polyclip logger level and install a stderr handler if none exists.

    Only the "polyclip" logger's level changes; handlers already attached
    to the root logger are left alone.
    """
    logging.basicConfig(format=fmt or os.getenv(LOG_FORMAT_ENV) or _DEFAULT_LOG_FORMAT)
    logging.getLogger("polyclip").setLevel(log_level(level))


__all__ = [
    "DEFAULT_STRATEGY",
    "configure_logging",
    "default_strategy_name",
    "log_level",
]
