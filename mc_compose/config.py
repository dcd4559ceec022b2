"""Runtime knobs for the production pipeline."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from mc_sdk.loader import ThresholdsConfig, get_thresholds_config


def _env(name: str) -> str:
    value = os.getenv(name)
    return value.strip() if isinstance(value, str) else ""


def _float_env(name: str, default: float) -> float:
    raw = _env(name)
    if not raw:
        return default
    try:
        return min(100.0, max(0.0, float(raw)))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    raw = _env(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass
class ProductionConfig:
    """Quality thresholds and defaults, overridable via MC_* variables."""

    quality_threshold: float = 70.0
    full_quality_threshold: float = 80.0
    quick_quality_threshold: float = 60.0
    default_fps: int = 30

    @classmethod
    def from_env(cls, thresholds: Optional[ThresholdsConfig] = None) -> "ProductionConfig":
        production = (thresholds or get_thresholds_config()).production
        return cls(
            quality_threshold=_float_env("MC_QUALITY_THRESHOLD", production.default),
            full_quality_threshold=_float_env("MC_FULL_QUALITY_THRESHOLD", production.full),
            quick_quality_threshold=_float_env("MC_QUICK_QUALITY_THRESHOLD", production.quick),
            default_fps=_int_env("MC_DEFAULT_FPS", 30),
        )


__all__ = ["ProductionConfig"]
