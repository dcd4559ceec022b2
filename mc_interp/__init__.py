"""Interpolation primitives shared by the animation engines."""
from __future__ import annotations

from .bezier import BezierCurve, bezier_point, bezier_tangent, curve_length, direction_angle, sample_curve
from .color import interpolate_color, kelvin_to_rgb, parse_color
from .easing import EASINGS, apply_easing, get_easing
from .interpolate import clamp, interpolate, lerp
from .prng import SeededRandom, seeded_random

__all__ = [
    "EASINGS",
    "BezierCurve",
    "SeededRandom",
    "apply_easing",
    "bezier_point",
    "bezier_tangent",
    "clamp",
    "curve_length",
    "direction_angle",
    "get_easing",
    "interpolate",
    "interpolate_color",
    "kelvin_to_rgb",
    "lerp",
    "parse_color",
    "sample_curve",
    "seeded_random",
]
