"""Parallax tiers and their transforms."""
from __future__ import annotations

import pytest

from mc_engines.parallax import (
    ParallaxConfig,
    ParallaxLayer,
    depth_fog,
    get_transform,
    layer_for_depth,
    layer_style,
    parallax_camera,
    sort_by_depth,
    space_scene,
)


def test_far_background_moves_slowly_and_shrinks() -> None:
    transform = get_transform(ParallaxConfig(layer=ParallaxLayer.far_background), 100, 50, -200)
    assert transform.x == pytest.approx(10)
    assert transform.y == pytest.approx(5)
    assert transform.z == pytest.approx(-20)
    assert transform.scale == pytest.approx(0.91)
    assert transform.opacity == 0.6
    assert transform.filter == "hue-rotate(210deg) saturate(0.7)"


def test_subject_tracks_camera_one_to_one() -> None:
    transform = get_transform(ParallaxConfig(layer=ParallaxLayer.subject), 100, 0, 0)
    assert transform.x == pytest.approx(100)
    assert transform.scale == pytest.approx(1.0)
    assert transform.opacity == 1.0


def test_foreground_blurs_and_overrides_win() -> None:
    foreground = get_transform(ParallaxConfig(layer=ParallaxLayer.foreground), 10, 0, 0)
    assert foreground.x == pytest.approx(15)
    assert foreground.filter == "blur(0.5px) saturate(1.15)"

    custom = ParallaxConfig(layer=ParallaxLayer.foreground, multiplier=2.0, opacity=0.3, blur=0, color_shift="")
    transform = get_transform(custom, 10, 0, 0)
    assert transform.x == pytest.approx(20)
    assert transform.opacity == 0.3
    assert transform.filter == ""


@pytest.mark.parametrize(
    ("z", "layer"),
    [
        (-5, ParallaxLayer.far_background),
        (-2, ParallaxLayer.mid_background),
        (-1, ParallaxLayer.environment),
        (0, ParallaxLayer.mid_ground),
        (1, ParallaxLayer.subject),
        (3, ParallaxLayer.foreground),
    ],
)
def test_layer_for_depth(z: float, layer: ParallaxLayer) -> None:
    assert layer_for_depth(z) is layer


def test_sort_by_depth_paints_back_to_front() -> None:
    scene = space_scene()
    ordered = sort_by_depth(list(reversed(list(scene.values()))))
    assert [config.layer for config in ordered] == list(ParallaxLayer)

    names = ["particles", "stars"]
    layers = {"particles": ParallaxLayer.foreground, "stars": ParallaxLayer.far_background}
    assert sort_by_depth(names, layers.__getitem__) == ["stars", "particles"]


def test_depth_fog_only_for_distant_layers() -> None:
    assert depth_fog(ParallaxLayer.subject) == "none"
    assert depth_fog(ParallaxLayer.far_background).startswith("linear-gradient(")


def test_layer_style_and_camera_push() -> None:
    transform = get_transform(ParallaxConfig(layer=ParallaxLayer.subject), 10, 20, 30)
    style = layer_style(transform, {"zIndex": 4})
    assert style["zIndex"] == 4
    assert style["transform"].startswith("translate3d(-10.0px, -20.0px, 30.0px)")
    assert parallax_camera(50, 0, 100, 0, -1000) == (0.0, 0.0, pytest.approx(-500))
