"""Color grading timelines and mood presets."""
from __future__ import annotations

import pytest

from mc_engines.grading import (
    ColorGrading,
    filter_string,
    get_mood_preset,
    merge_with_neutral,
    neutral_grade,
    overlays,
    reference_timeline,
    style_grading,
    temperature_grading,
)
from mc_sdk.models import PartialColorGrade


def test_empty_timeline_is_neutral() -> None:
    assert ColorGrading().get_grade_at_frame(42) == neutral_grade()


def test_exact_keyframe_returns_its_preset() -> None:
    grading = ColorGrading().add_keyframe(0, "space-blue").add_keyframe(100, "warm-energy")
    assert grading.get_grade_at_frame(0) == get_mood_preset("space-blue")
    assert grading.get_grade_at_frame(100) == get_mood_preset("warm-energy")
    assert grading.get_grade_at_frame(400) == get_mood_preset("warm-energy")


def test_partial_grades_blend_over_neutral() -> None:
    grading = ColorGrading()
    grading.add_keyframe(0, {"brightness": 100})
    grading.add_keyframe(100, PartialColorGrade(brightness=200))

    midpoint = grading.get_grade_at_frame(50)
    assert midpoint.brightness == pytest.approx(150)
    assert midpoint.saturation == pytest.approx(100)
    assert midpoint.shadows == "rgb(0, 0, 0)"


def test_colors_blend_channelwise() -> None:
    grading = ColorGrading()
    grading.add_keyframe(0, {"highlights": "#000000"})
    grading.add_keyframe(10, {"highlights": "#ffffff"})
    assert grading.get_grade_at_frame(5).highlights == "rgb(128, 128, 128)"


def test_unknown_mood_is_rejected() -> None:
    with pytest.raises(ValueError):
        get_mood_preset("sepia-dream")
    with pytest.raises(ValueError):
        ColorGrading().add_keyframe(0, "sepia-dream")


def test_merge_with_neutral_keeps_provided_fields() -> None:
    merged = merge_with_neutral(PartialColorGrade(vignette=0.5))
    assert merged.vignette == 0.5
    assert merged.temperature == neutral_grade().temperature


def test_reference_timeline_hard_cuts() -> None:
    grading = reference_timeline(1000)
    assert grading.get_grade_at_frame(0) == get_mood_preset("space-blue")
    assert grading.get_grade_at_frame(110) == get_mood_preset("warm-energy")
    assert grading.get_grade_at_frame(480) == get_mood_preset("space-blue")
    assert grading.get_grade_at_frame(1000) == get_mood_preset("warm-finale")


def test_style_grading_and_fallback() -> None:
    launch = style_grading("product-launch", 300)
    assert [kf.frame for kf in launch.keyframes] == [0, 90, 300]
    assert style_grading("unknown-style", 1000).keyframes == reference_timeline(1000).keyframes
    with pytest.raises(ValueError):
        style_grading("cinematic", 0)


def test_temperature_grading_sweeps_kelvin() -> None:
    grading = temperature_grading(3000, 7000, 100)
    assert grading.get_grade_at_frame(50).temperature == pytest.approx(5000)


def test_filter_and_overlays() -> None:
    assert filter_string(neutral_grade()) == ""
    dark = get_mood_preset("dramatic-dark")
    assert filter_string(dark) == "brightness(0.3) contrast(1.3) saturate(0.7)"

    layers = overlays(dark)
    assert [layer["kind"] for layer in layers] == ["temperature", "vignette"]
    assert layers[1]["opacity"] == 0.6
    assert [layer["kind"] for layer in overlays(neutral_grade())] == ["temperature"]
