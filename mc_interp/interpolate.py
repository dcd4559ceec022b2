"""Clamped linear interpolation helpers."""
from __future__ import annotations

from typing import Tuple

Range = Tuple[float, float]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def lerp(start: float, end: float, t: float) -> float:
    """Linear blend between ``start`` and ``end`` at ``t`` (not clamped)."""

    return start + (end - start) * t


def interpolate(value: float, input_range: Range, output_range: Range) -> float:
    """Map ``value`` from ``input_range`` onto ``output_range``.

    Values outside the input range are held at the matching output bound. A
    degenerate input range maps everything to the first output value.
    """

    in_min, in_max = input_range
    out_min, out_max = output_range
    if in_max == in_min:
        return float(out_min)
    low, high = (in_min, in_max) if in_min < in_max else (in_max, in_min)
    held = clamp(value, low, high)
    progress = (held - in_min) / (in_max - in_min)
    return lerp(out_min, out_max, progress)


__all__ = ["Range", "clamp", "interpolate", "lerp"]
