"""
Rendering configuration read from the environment.

Intent:
    Keep defaults that callers may want to tune per deployment in one place,
    validated the same way everywhere they are used.

Variables:
    FORMFRAG_DEFAULT_DECIMALS: precision given to new numeric elements
        (integer 0..20, default 2). ``set_decimals()`` still overrides it.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger("formfrag.config")

DEFAULT_DECIMALS = 2
MAX_DECIMALS = 20


@dataclass(frozen=True)
class RenderConfig:
    default_decimals: int


def _int_env(name: str, default: int, *, low: int, high: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")
    if value < low or value > high:
        raise ValueError(f"{name} out of range ({low}..{high}), got: {value}")
    return value


def load_render_config() -> RenderConfig:
    """Parse and validate rendering settings from environment variables."""
    decimals = _int_env(
        "FORMFRAG_DEFAULT_DECIMALS", DEFAULT_DECIMALS, low=0, high=MAX_DECIMALS
    )
    if decimals != DEFAULT_DECIMALS:
        logger.debug("Using default precision %d from environment", decimals)
    return RenderConfig(default_decimals=decimals)


__all__ = ["RenderConfig", "load_render_config", "DEFAULT_DECIMALS", "MAX_DECIMALS"]
