"""Easing functions mapping progress in [0, 1] to eased progress."""
from __future__ import annotations

import math
from typing import Callable, Dict, Optional

EasingFn = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t * t


def ease_out(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - ((-2.0 * t + 2.0) ** 3) / 2.0


def ease_out_cubic(t: float) -> float:
    return ease_out(t)


def spring(t: float) -> float:
    """Closed-form spring approximation ``1 - (1-t)^3 cos(2 pi t)``.

    This overshoots slightly past 1.0 mid-way and settles at exactly 1.0; it is
    not a simulated mass-spring-damper.
    """

    return 1.0 - (1.0 - t) ** 3 * math.cos(2.0 * math.pi * t)


EASINGS: Dict[str, EasingFn] = {
    "linear": linear,
    "easeIn": ease_in,
    "easeOut": ease_out,
    "easeInOut": ease_in_out,
    "easeOutCubic": ease_out_cubic,
    "spring": spring,
}


def get_easing(name: Optional[str], default: str = "easeInOut") -> EasingFn:
    """Resolve an easing by name; unknown or missing names use ``default``."""

    if name and name in EASINGS:
        return EASINGS[name]
    return EASINGS.get(default, ease_in_out)


def apply_easing(name: Optional[str], t: float, default: str = "easeInOut") -> float:
    progress = max(0.0, min(1.0, t))
    return get_easing(name, default)(progress)


__all__ = [
    "EASINGS",
    "EasingFn",
    "apply_easing",
    "ease_in",
    "ease_in_out",
    "ease_out",
    "ease_out_cubic",
    "get_easing",
    "linear",
    "spring",
]
