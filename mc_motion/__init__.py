"""Motion design presets and choreography."""
from __future__ import annotations

from .library import Choreography, MotionDesignLibrary
from .presets import EASING_CURVES, MOTION_PRESETS, EasingCurve, MotionPreset, MotionStyle

__all__ = [
    "EASING_CURVES",
    "MOTION_PRESETS",
    "Choreography",
    "EasingCurve",
    "MotionDesignLibrary",
    "MotionPreset",
    "MotionStyle",
]
