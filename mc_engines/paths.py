"""Per-element Bézier motion paths and their orchestration by element id."""
from __future__ import annotations

import math
import re
from typing import Dict, Iterator, Optional, Union

import structlog
from pydantic import Field, model_validator

from mc_interp.bezier import BezierCurve, bezier_point, direction_angle
from mc_interp.easing import apply_easing
from mc_interp.interpolate import lerp
from mc_sdk.models import PlanModel, Vec2

logger = structlog.get_logger(__name__)

_NUMBER = r"(-?\d+(?:\.\d+)?)"
_SEP = r"[,\s]+"
_SVG_PATTERN = re.compile(
    rf"M\s*{_NUMBER}{_SEP}{_NUMBER}\s*Q\s*{_NUMBER}{_SEP}{_NUMBER}\s+{_NUMBER}{_SEP}{_NUMBER}\s+{_NUMBER}{_SEP}{_NUMBER}"
)

STRAIGHT_LINE = BezierCurve(
    start=Vec2(x=0, y=0),
    control_point1=Vec2(x=100, y=0),
    control_point2=Vec2(x=200, y=0),
    end=Vec2(x=300, y=0),
)


class PathOptions(PlanModel):
    easing: str = "easeInOut"
    rotate_to_direction: bool = True
    scale_with_distance: bool = True
    min_scale: float = 0.5
    max_scale: float = 1.5


class PathState(PlanModel):
    x: float
    y: float
    rotation: float
    scale: float
    progress: float


def parse_svg_path(path: str) -> BezierCurve:
    """Read ``M x,y Q c1x,c1y c2x,c2y ex,ey`` into a curve.

    Anything that does not match falls back to a 300px straight line.
    """

    match = _SVG_PATTERN.search(path or "")
    if not match:
        logger.warning("paths.svg.unparsed", path=path)
        return STRAIGHT_LINE
    values = [float(group) for group in match.groups()]
    return BezierCurve(
        start=Vec2(x=values[0], y=values[1]),
        control_point1=Vec2(x=values[2], y=values[3]),
        control_point2=Vec2(x=values[4], y=values[5]),
        end=Vec2(x=values[6], y=values[7]),
    )


class CurvedPathAnimation(PlanModel):
    """One curve travelled over ``duration`` frames starting at ``start_frame``."""

    curve: BezierCurve
    start_frame: int = Field(default=0, ge=0)
    duration: int = Field(gt=0)
    options: PathOptions = Field(default_factory=PathOptions)

    @model_validator(mode="before")
    @classmethod
    def _accept_svg(cls, data: object) -> object:
        if isinstance(data, dict):
            curve = data.get("curve")
            if isinstance(curve, str):
                data = {**data, "curve": parse_svg_path(curve)}
        return data

    def _scale(self, t: float) -> float:
        if not self.options.scale_with_distance:
            return 1.0
        return lerp(self.options.min_scale, self.options.max_scale, t)

    def _rotation(self, t: float) -> float:
        if not self.options.rotate_to_direction:
            return 0.0
        return direction_angle(self.curve, t)

    def get_state(self, frame: float) -> PathState:
        """Position, heading and scale at an absolute frame.

        Outside the window the element rests at an endpoint with the min or
        max scale. Inside it, ``progress`` is the eased curve parameter.
        """

        local = frame - self.start_frame
        if local < 0:
            point = bezier_point(self.curve, 0.0)
            return PathState(x=point.x, y=point.y, rotation=0.0, scale=self.options.min_scale, progress=0.0)
        if local > self.duration:
            point = bezier_point(self.curve, 1.0)
            return PathState(
                x=point.x, y=point.y, rotation=self._rotation(1.0), scale=self.options.max_scale, progress=1.0
            )
        progress = local / self.duration
        t = apply_easing(self.options.easing, progress, "linear")
        point = bezier_point(self.curve, t)
        return PathState(x=point.x, y=point.y, rotation=self._rotation(t), scale=self._scale(t), progress=t)


def to_css_transform(state: PathState) -> str:
    return f"translate({state.x}px, {state.y}px) rotate({state.rotation}deg) scale({state.scale})"


def arc(start: Vec2, end: Vec2, height: float) -> BezierCurve:
    """Arc whose control points sit ``height`` above the chord midpoint."""

    mid_x = (start.x + end.x) / 2
    mid_y = (start.y + end.y) / 2 - height
    quarter = (end.x - start.x) / 4
    return BezierCurve(
        start=start,
        control_point1=Vec2(x=mid_x - quarter, y=mid_y),
        control_point2=Vec2(x=mid_x + quarter, y=mid_y),
        end=end,
    )


def s_curve(start: Vec2, end: Vec2, amplitude: float) -> BezierCurve:
    dx = end.x - start.x
    return BezierCurve(
        start=start,
        control_point1=Vec2(x=start.x + dx * 0.33, y=start.y + amplitude),
        control_point2=Vec2(x=start.x + dx * 0.66, y=end.y - amplitude),
        end=end,
    )


def circular_arc(center: Vec2, radius: float, start_angle: float = 0.0, end_angle: float = 360.0) -> BezierCurve:
    """Approximate a circular arc; control distance is ``radius * 0.552``."""

    start_rad = math.radians(start_angle)
    end_rad = math.radians(end_angle)
    start = Vec2(x=center.x + math.cos(start_rad) * radius, y=center.y + math.sin(start_rad) * radius)
    end = Vec2(x=center.x + math.cos(end_rad) * radius, y=center.y + math.sin(end_rad) * radius)
    reach = radius * 0.552
    return BezierCurve(
        start=start,
        control_point1=Vec2(
            x=start.x + math.cos(start_rad + math.pi / 2) * reach,
            y=start.y + math.sin(start_rad + math.pi / 2) * reach,
        ),
        control_point2=Vec2(
            x=end.x + math.cos(end_rad - math.pi / 2) * reach,
            y=end.y + math.sin(end_rad - math.pi / 2) * reach,
        ),
        end=end,
    )


def wave(start: Vec2, end: Vec2, amplitude: float, waves: int = 1) -> BezierCurve:
    """One wavelength of a wave spanning ``start``→``end`` in ``waves`` repeats.

    The caller chains segments for the remaining repeats.
    """

    if waves <= 0:
        raise ValueError("waves must be positive")
    length = (end.x - start.x) / waves
    return BezierCurve(
        start=start,
        control_point1=Vec2(x=start.x + length * 0.25, y=start.y + amplitude),
        control_point2=Vec2(x=start.x + length * 0.75, y=start.y - amplitude),
        end=Vec2(x=start.x + length, y=start.y),
    )


class MultiPathOrchestrator:
    """Independent path animations keyed by element id."""

    def __init__(self, paths: Optional[Dict[str, CurvedPathAnimation]] = None) -> None:
        self._paths: Dict[str, CurvedPathAnimation] = dict(paths or {})

    def add_path(self, element_id: str, animation: Union[CurvedPathAnimation, Dict[str, object]]) -> None:
        if not isinstance(animation, CurvedPathAnimation):
            animation = CurvedPathAnimation.model_validate(animation)
        self._paths[element_id] = animation

    def get_state_at_frame(self, element_id: str, frame: float) -> Optional[PathState]:
        animation = self._paths.get(element_id)
        if animation is None:
            return None
        return animation.get_state(frame)

    def get_all_states_at_frame(self, frame: float) -> Dict[str, PathState]:
        return {element_id: animation.get_state(frame) for element_id, animation in self._paths.items()}

    def paths(self) -> Dict[str, CurvedPathAnimation]:
        return dict(self._paths)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)


__all__ = [
    "STRAIGHT_LINE",
    "CurvedPathAnimation",
    "MultiPathOrchestrator",
    "PathOptions",
    "PathState",
    "arc",
    "circular_arc",
    "parse_svg_path",
    "s_curve",
    "to_css_transform",
    "wave",
]
