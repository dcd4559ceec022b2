"""Keyframed camera trajectories with orbital, tracking and dolly-zoom presets."""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import structlog
from pydantic import Field, model_validator

from mc_interp.easing import apply_easing, ease_out_cubic
from mc_interp.interpolate import lerp
from mc_sdk.models import PlanModel, Vec3

from .timeline import find_bracket, sort_keyframes

logger = structlog.get_logger(__name__)

DEFAULT_FOV = 60.0
DEFAULT_EASING = "easeInOut"
SHAKE_FREQUENCY = 20.0


class Rotation(PlanModel):
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


class CameraKeyframe(PlanModel):
    """Camera pose anchored at a frame; ``easing`` shapes the segment ending here."""

    frame: int = Field(ge=0)
    position: Vec3
    rotation: Optional[Rotation] = None
    fov: Optional[float] = None
    easing: Optional[str] = None


class CameraState(PlanModel):
    position: Vec3
    rotation: Rotation
    fov: float


def _raw_state(keyframe: CameraKeyframe) -> CameraState:
    return CameraState(
        position=keyframe.position.model_copy(),
        rotation=(keyframe.rotation or Rotation()).model_copy(),
        fov=keyframe.fov if keyframe.fov is not None else DEFAULT_FOV,
    )


class CameraPath(PlanModel):
    """Ordered camera keyframes; at least one is required."""

    fps: int = Field(default=30, gt=0)
    keyframes: List[CameraKeyframe] = Field(min_length=1)

    @model_validator(mode="after")
    def _sort_keyframes(self) -> "CameraPath":
        self.keyframes = sort_keyframes(self.keyframes, [kf.frame for kf in self.keyframes])
        return self

    def add_keyframe(self, keyframe: CameraKeyframe) -> "CameraPath":
        keyframes = list(self.keyframes) + [keyframe]
        self.keyframes = sort_keyframes(keyframes, [kf.frame for kf in keyframes])
        return self

    @property
    def duration_frames(self) -> int:
        return self.keyframes[-1].frame

    def get_state(self, frame: float) -> CameraState:
        """Camera pose at ``frame``, held at the boundary keyframes outside the path."""

        bracket = find_bracket(self.keyframes, [kf.frame for kf in self.keyframes], frame)
        if bracket.next is None:
            return _raw_state(bracket.prev)

        prev = _raw_state(bracket.prev)
        nxt = _raw_state(bracket.next)
        t = apply_easing(bracket.next.easing, bracket.progress, DEFAULT_EASING)
        return CameraState(
            position=Vec3(
                x=lerp(prev.position.x, nxt.position.x, t),
                y=lerp(prev.position.y, nxt.position.y, t),
                z=lerp(prev.position.z, nxt.position.z, t),
            ),
            rotation=Rotation(
                pitch=lerp(prev.rotation.pitch, nxt.rotation.pitch, t),
                yaw=lerp(prev.rotation.yaw, nxt.rotation.yaw, t),
                roll=lerp(prev.rotation.roll, nxt.rotation.roll, t),
            ),
            fov=lerp(prev.fov, nxt.fov, t),
        )

    def get_state_at_time(self, seconds: float) -> CameraState:
        return self.get_state(seconds * self.fps)


def to_css_transform(state: CameraState) -> str:
    """CSS transform string placing a scene relative to the camera."""

    pos = state.position
    rot = state.rotation
    return (
        f"perspective(1000px) translateZ({pos.z}px) translateX({pos.x}px) translateY({pos.y}px) "
        f"rotateX({rot.pitch}deg) rotateY({rot.yaw}deg) rotateZ({rot.roll}deg)"
    )


def _orbit_point(center: Vec3, radius: float, angle: float) -> Vec3:
    radians = math.radians(angle)
    return Vec3(
        x=center.x + math.cos(radians) * radius,
        y=center.y,
        z=center.z + math.sin(radians) * radius,
    )


def orbital_path(
    center: Vec3,
    radius: float,
    duration: int,
    *,
    start_angle: float = 180.0,
    end_angle: float = 270.0,
    fps: int = 30,
) -> CameraPath:
    """Circle ``center`` from ``start_angle`` to ``end_angle`` over ``duration`` frames."""

    if duration <= 0:
        raise ValueError("duration must be positive")
    keyframes = [
        CameraKeyframe(
            frame=0,
            position=_orbit_point(center, radius, start_angle),
            rotation=Rotation(yaw=-start_angle),
            easing="easeOut",
        ),
        CameraKeyframe(
            frame=duration,
            position=_orbit_point(center, radius, end_angle),
            rotation=Rotation(yaw=-end_angle),
        ),
    ]
    return CameraPath(fps=fps, keyframes=keyframes)


def _vertical_offset(track: Sequence[Tuple[int, float]], frame: int) -> float:
    if not track:
        return 0.0
    if frame <= track[0][0]:
        return track[0][1]
    for (f0, y0), (f1, y1) in zip(track, track[1:]):
        if f0 <= frame <= f1:
            return y0 if f1 == f0 else lerp(y0, y1, (frame - f0) / (f1 - f0))
    return track[-1][1]


def forward_tracking_path(
    start_z: float,
    end_z: float,
    duration: int,
    *,
    speed_variations: Sequence[Tuple[int, float]] = (),
    vertical_movement: Sequence[Tuple[int, float]] = (),
    fps: int = 30,
) -> CameraPath:
    """Dolly forward along z with optional speed bias and vertical drift.

    ``speed_variations`` are ``(frame, multiplier)`` pairs: a keyframe is placed
    on the straight z sweep with easeIn when the multiplier exceeds 1 and
    easeOut otherwise. ``vertical_movement`` is a ``(frame, y)`` track that is
    interpolated linearly and also anchors its own keyframes.
    """

    if duration <= 0:
        raise ValueError("duration must be positive")
    track = sorted((int(f), float(y)) for f, y in vertical_movement if 0 <= f <= duration)
    speeds = {int(f): float(m) for f, m in speed_variations if 0 < f < duration}
    inner = sorted(set(speeds) | {f for f, _ in track if 0 < f < duration})

    def _at(frame: int, easing: Optional[str]) -> CameraKeyframe:
        z = lerp(start_z, end_z, frame / duration)
        return CameraKeyframe(
            frame=frame,
            position=Vec3(x=0.0, y=_vertical_offset(track, frame), z=z),
            easing=easing,
        )

    keyframes = [_at(0, "easeInOut")]
    for frame in inner:
        multiplier = speeds.get(frame)
        easing = None if multiplier is None else ("easeIn" if multiplier > 1 else "easeOut")
        keyframes.append(_at(frame, easing))
    keyframes.append(_at(duration, None))
    logger.debug("camera.forward_tracking.built", keyframes=len(keyframes), duration=duration)
    return CameraPath(fps=fps, keyframes=keyframes)


def dolly_zoom_path(
    start_z: float,
    end_z: float,
    start_fov: float,
    end_fov: float,
    duration: int,
    *,
    fps: int = 30,
) -> CameraPath:
    """Move the camera while counter-zooming the field of view."""

    if duration <= 0:
        raise ValueError("duration must be positive")
    keyframes = [
        CameraKeyframe(frame=0, position=Vec3(z=start_z), fov=start_fov, easing="easeInOut"),
        CameraKeyframe(frame=duration, position=Vec3(z=end_z), fov=end_fov),
    ]
    return CameraPath(fps=fps, keyframes=keyframes)


def apply_shake(position: Vec3, frame: float, intensity: float, duration: float) -> Vec3:
    """Add decaying sinusoidal jitter to ``position`` for the first ``duration`` frames."""

    if duration <= 0 or frame > duration:
        return position
    decay = 1.0 - ease_out_cubic(max(0.0, frame) / duration)
    amount = intensity * decay
    return Vec3(
        x=position.x + math.sin(frame * SHAKE_FREQUENCY) * amount,
        y=position.y + math.cos(frame * SHAKE_FREQUENCY * 1.3) * amount,
        z=position.z + math.sin(frame * SHAKE_FREQUENCY * 0.7) * amount * 0.5,
    )


__all__ = [
    "DEFAULT_FOV",
    "CameraKeyframe",
    "CameraPath",
    "CameraState",
    "Rotation",
    "apply_shake",
    "dolly_zoom_path",
    "forward_tracking_path",
    "orbital_path",
    "to_css_transform",
]
