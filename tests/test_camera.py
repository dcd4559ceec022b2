"""Camera path keyframing and presets."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from mc_engines.camera import (
    DEFAULT_FOV,
    CameraKeyframe,
    CameraPath,
    apply_shake,
    dolly_zoom_path,
    forward_tracking_path,
    orbital_path,
    to_css_transform,
)
from mc_sdk.models import Vec3


def _keyframe(frame: int, z: float, **extra) -> CameraKeyframe:
    return CameraKeyframe(frame=frame, position=Vec3(z=z), **extra)


def test_state_is_held_outside_the_path() -> None:
    path = CameraPath(keyframes=[_keyframe(10, 0), _keyframe(100, -1000)])
    assert path.get_state(-5).position.z == 0
    assert path.get_state(0).position.z == 0
    assert path.get_state(100).position.z == -1000
    assert path.get_state(5000).position.z == -1000
    assert path.get_state(50).fov == DEFAULT_FOV


def test_midpoint_uses_default_ease_in_out() -> None:
    path = CameraPath(keyframes=[_keyframe(0, 0), _keyframe(100, -1000)])
    assert path.get_state(50).position.z == pytest.approx(-500)
    assert path.get_state(25).position.z == pytest.approx(-62.5)


def test_segment_easing_comes_from_the_target_keyframe() -> None:
    path = CameraPath(keyframes=[_keyframe(0, 0), _keyframe(100, -1000, easing="linear")])
    assert path.get_state(25).position.z == pytest.approx(-250)


def test_keyframes_are_sorted_and_time_lookup_uses_fps() -> None:
    path = CameraPath(fps=10, keyframes=[_keyframe(100, -1000, easing="linear"), _keyframe(0, 0)])
    assert [kf.frame for kf in path.keyframes] == [0, 100]
    assert path.duration_frames == 100
    assert path.get_state_at_time(5).position.z == pytest.approx(-500)


def test_duplicate_frames_cut_to_the_last_inserted() -> None:
    path = CameraPath(
        keyframes=[
            _keyframe(0, 0, easing="linear"),
            _keyframe(50, -100, easing="linear"),
            _keyframe(50, -900, easing="linear"),
            _keyframe(100, -1000, easing="linear"),
        ]
    )
    assert path.get_state(25).position.z == pytest.approx(-50)
    assert path.get_state(50).position.z == pytest.approx(-900)
    assert path.get_state(75).position.z == pytest.approx(-950)


def test_path_requires_a_keyframe() -> None:
    with pytest.raises(ValidationError):
        CameraPath(keyframes=[])


def test_orbital_path_endpoints() -> None:
    path = orbital_path(Vec3(), 400, 300)
    start = path.get_state(0)
    assert start.position.x == pytest.approx(-400)
    assert start.position.z == pytest.approx(0, abs=1e-9)
    assert start.rotation.yaw == pytest.approx(-180)

    end = path.get_state(300)
    assert end.position.x == pytest.approx(0, abs=1e-9)
    assert end.position.z == pytest.approx(-400)
    assert end.rotation.yaw == pytest.approx(-270)

    with pytest.raises(ValueError):
        orbital_path(Vec3(), 400, 0)


def test_forward_tracking_speed_and_vertical_tracks() -> None:
    path = forward_tracking_path(
        0,
        -1000,
        100,
        speed_variations=[(50, 1.5)],
        vertical_movement=[(0, 0.0), (50, -100.0), (100, 50.0)],
    )
    frames = [kf.frame for kf in path.keyframes]
    assert frames == [0, 50, 100]
    assert path.keyframes[1].easing == "easeIn"
    assert path.get_state(50).position.y == pytest.approx(-100)
    assert path.get_state(50).position.z == pytest.approx(-500)
    assert path.get_state(100).position.y == pytest.approx(50)


def test_slow_speed_variation_eases_out() -> None:
    path = forward_tracking_path(0, -1000, 100, speed_variations=[(40, 0.7)])
    assert path.keyframes[1].easing == "easeOut"
    assert path.keyframes[1].position.z == pytest.approx(-400)


def test_dolly_zoom_counter_zooms() -> None:
    path = dolly_zoom_path(0, -500, 40, 80, 60)
    assert path.get_state(0).fov == 40
    assert path.get_state(60).fov == 80
    assert path.get_state(30).fov == pytest.approx(60)


def test_shake_decays_to_nothing() -> None:
    origin = Vec3()
    assert apply_shake(origin, 120, 10, 60) == origin
    shaken = apply_shake(origin, 3, 10, 60)
    assert shaken != origin


def test_css_transform_mentions_every_axis() -> None:
    css = to_css_transform(orbital_path(Vec3(), 100, 10).get_state(0))
    for term in ("perspective(1000px)", "translateZ(", "translateX(", "rotateY(-180.0deg)"):
        assert term in css
