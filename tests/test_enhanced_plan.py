"""Enhanced plan assembly: camera, character paths, parallax, grading, metadata."""
from __future__ import annotations

import json

import pytest

from mc_compose.config import ProductionConfig
from mc_compose.enhance import (
    camera_for_style,
    character_path,
    final_quality_score,
    generate_enhanced_plan,
    parallax_for_style,
    production_grade,
)
from mc_compose.models import EnhancedVideoPlan, EnhanceOptions
from mc_compose.orchestrator import ProductionOrchestrator
from mc_engines.parallax import ParallaxLayer
from mc_interp.prng import SeededRandom
from mc_sdk.models import Element, Vec3, VideoPlan


@pytest.fixture
def orchestrator() -> ProductionOrchestrator:
    return ProductionOrchestrator(config=ProductionConfig())


def test_full_enhancement_turns_on_every_subsystem(
    orchestrator: ProductionOrchestrator, simple_plan: VideoPlan
) -> None:
    enhanced = generate_enhanced_plan(simple_plan, orchestrator=orchestrator)
    metadata = enhanced.sophisticated_metadata

    assert isinstance(enhanced, EnhancedVideoPlan)
    assert metadata.video_style == "space-journey"
    assert metadata.active_subsystems == 4
    assert metadata.uses_forward_tracking and not metadata.uses_orbital_camera
    assert metadata.base_quality_score == 100
    assert metadata.final_quality_score == 100
    assert metadata.production_grade == "cinematic"

    assert set(enhanced.character_paths) == {"intro-hero", "features-phone", "outro-logo"}
    assert enhanced.camera_path.keyframes[-1].frame == enhanced.total_frames
    assert enhanced.camera_path.keyframes[-1].position.z == pytest.approx(-2000)
    assert enhanced.parallax_config["intro-bg"].layer is ParallaxLayer.far_background
    assert enhanced.parallax_config["intro-bg"].opacity == 0.4
    assert enhanced.color_grading.keyframes[0].frame == 0


def test_enhancement_is_deterministic(orchestrator: ProductionOrchestrator, simple_plan: VideoPlan) -> None:
    first = generate_enhanced_plan(simple_plan, EnhanceOptions(seed="launch"), orchestrator)
    second = generate_enhanced_plan(simple_plan, EnhanceOptions(seed="launch"), orchestrator)
    assert json.dumps(first.to_wire(), sort_keys=True) == json.dumps(second.to_wire(), sort_keys=True)

    reseeded = generate_enhanced_plan(simple_plan, EnhanceOptions(seed="other"), orchestrator)
    assert reseeded.character_paths["intro-hero"] != first.character_paths["intro-hero"]


def test_wire_format_uses_camel_case(orchestrator: ProductionOrchestrator, simple_plan: VideoPlan) -> None:
    wire = generate_enhanced_plan(simple_plan, orchestrator=orchestrator).to_wire()
    for key in ("cameraPath", "characterPaths", "parallaxConfig", "colorGrading", "sophisticatedMetadata"):
        assert key in wire
    assert wire["sophisticatedMetadata"]["productionGrade"] == "cinematic"
    assert wire["parallaxConfig"]["intro-bg"]["layer"] == "far-background"
    assert "processingTime" not in json.dumps(wire)


def test_disabled_subsystems_leave_a_basic_plan(orchestrator: ProductionOrchestrator, simple_plan: VideoPlan) -> None:
    options = EnhanceOptions(
        style="product-launch",
        enable_camera=False,
        enable_paths=False,
        enable_parallax=False,
        enable_grading=False,
        full_production=False,
    )
    enhanced = generate_enhanced_plan(simple_plan, options, orchestrator)
    metadata = enhanced.sophisticated_metadata
    assert enhanced.camera_path is None
    assert enhanced.character_paths == {}
    assert enhanced.parallax_config is None
    assert enhanced.color_grading is None
    assert metadata.active_subsystems == 0
    assert metadata.uses_orbital_camera is False
    assert metadata.production_grade == "basic"


def test_product_launch_orbits() -> None:
    camera = camera_for_style("product-launch", 300)
    assert camera.get_state(0).position.x == pytest.approx(-400)
    assert camera.get_state(300).position.x == pytest.approx(400)


def test_character_paths_alternate_shapes_and_jitter() -> None:
    arc_path = character_path(0, 0, 90)
    assert arc_path.curve.start.x == 100
    assert arc_path.curve.control_point1.y == arc_path.curve.control_point2.y
    assert (arc_path.options.min_scale, arc_path.options.max_scale) == (0.7, 1.3)

    s_path = character_path(0, 1, 90)
    assert s_path.curve.control_point1.y != s_path.curve.control_point2.y

    jittered = character_path(0, 0, 90, SeededRandom("prompt"))
    assert 80 <= jittered.curve.start.x <= 120
    assert jittered == character_path(0, 0, 90, SeededRandom("prompt"))


def test_parallax_falls_back_to_atmosphere_when_preset_lacks_a_tier(simple_plan: VideoPlan) -> None:
    scenes = [
        simple_plan.scenes[0].model_copy(
            update={"elements": [Element(id="hills", type="shape", position=Vec3(z=-2))]}
        )
    ]
    plan = simple_plan.model_copy(update={"scenes": scenes})

    configs = parallax_for_style(plan, "product-launch")
    assert configs["hills"].layer is ParallaxLayer.mid_background
    assert configs["hills"].opacity == 0.8
    assert parallax_for_style(plan, "space-journey")["hills"].opacity == 0.3


@pytest.mark.parametrize(
    ("active", "base", "score", "grade"),
    [
        (4, 72, 85, "cinematic"),
        (4, 70, 83, "professional"),
        (3, 70, 76, "professional"),
        (2, 70, 74, "enhanced"),
        (1, 90, 92, "basic"),
        (0, 40, 40, "basic"),
    ],
)
def test_quality_bonus_and_grade_ladder(active: int, base: int, score: int, grade: str) -> None:
    assert final_quality_score(base, active) == score
    assert production_grade(active, score) == grade


def test_final_score_is_capped() -> None:
    assert final_quality_score(98, 4) == 100
