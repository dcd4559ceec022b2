"""Cubic Bézier evaluation: points, tangents, direction angles and sampling."""
from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
from pydantic import ConfigDict

from mc_sdk.models import PlanModel, Vec2


class BezierCurve(PlanModel):
    """One cubic segment defined by a start, two control points and an end."""

    model_config = ConfigDict(frozen=True)

    start: Vec2
    control_point1: Vec2
    control_point2: Vec2
    end: Vec2

    def points(self) -> Tuple[Vec2, Vec2, Vec2, Vec2]:
        return self.start, self.control_point1, self.control_point2, self.end


def bezier_point(curve: BezierCurve, t: float) -> Vec2:
    """Evaluate ``B(t)`` on the curve."""

    p0, p1, p2, p3 = curve.points()
    u = 1.0 - t
    a = u * u * u
    b = 3.0 * u * u * t
    c = 3.0 * u * t * t
    d = t * t * t
    return Vec2(
        x=a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        y=a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def bezier_tangent(curve: BezierCurve, t: float) -> Vec2:
    """Evaluate the derivative ``B'(t)``."""

    p0, p1, p2, p3 = curve.points()
    u = 1.0 - t
    a = 3.0 * u * u
    b = 6.0 * u * t
    c = 3.0 * t * t
    return Vec2(
        x=a * (p1.x - p0.x) + b * (p2.x - p1.x) + c * (p3.x - p2.x),
        y=a * (p1.y - p0.y) + b * (p2.y - p1.y) + c * (p3.y - p2.y),
    )


def direction_angle(curve: BezierCurve, t: float) -> float:
    """Heading of the curve at ``t`` in degrees."""

    tangent = bezier_tangent(curve, t)
    return math.degrees(math.atan2(tangent.y, tangent.x))


def _control_matrix(curve: BezierCurve) -> np.ndarray:
    return np.array([[point.x, point.y] for point in curve.points()], dtype=float)


def sample_curve(curve: BezierCurve, samples: int = 32) -> List[Tuple[float, float]]:
    """Return ``samples`` evenly spaced (in t) points along the curve."""

    if samples < 2:
        raise ValueError("samples must be at least 2")
    t = np.linspace(0.0, 1.0, samples)[:, None]
    u = 1.0 - t
    basis = np.hstack([u**3, 3.0 * u**2 * t, 3.0 * u * t**2, t**3])
    coords = basis @ _control_matrix(curve)
    return [(float(x), float(y)) for x, y in coords]


def curve_length(curve: BezierCurve, samples: int = 64) -> float:
    """Approximate arc length from a sampled polyline."""

    coords = np.array(sample_curve(curve, samples))
    deltas = np.diff(coords, axis=0)
    return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())


__all__ = [
    "BezierCurve",
    "bezier_point",
    "bezier_tangent",
    "curve_length",
    "direction_angle",
    "sample_curve",
]
