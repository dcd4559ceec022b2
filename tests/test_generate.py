"""Prompt-seeded base plans and the prompt-to-enhanced-plan entry point."""
from __future__ import annotations

import json

import pytest

from mc_compose.config import ProductionConfig
from mc_compose.generate import (
    HEADLINES,
    generate_base_plan,
    generate_video,
    infer_content_type_from_prompt,
    infer_video_style,
)
from mc_compose.models import EnhanceOptions
from mc_compose.orchestrator import ProductionOrchestrator
from mc_interp.prng import prompt_id
from mc_sdk.models import TransitionType


@pytest.mark.parametrize(
    ("prompt", "style"),
    [
        ("Our GitHub year in review", "space-journey"),
        ("A trip through space", "space-journey"),
        ("Product launch teaser", "product-launch"),
        ("Quarterly data highlights", "data-story"),
        ("A quiet morning", "cinematic"),
    ],
)
def test_video_style_from_prompt(prompt: str, style: str) -> None:
    assert infer_video_style(prompt) == style


@pytest.mark.parametrize(
    ("prompt", "content_type"),
    [
        ("Our new product", "product"),
        ("Stats dashboard tour", "tech"),
        ("A journey home", "cinematic"),
        ("Hello there", "product"),
    ],
)
def test_content_type_from_prompt(prompt: str, content_type: str) -> None:
    assert infer_content_type_from_prompt(prompt) == content_type


def test_base_plan_shape() -> None:
    plan = generate_base_plan("Launch our new product", 12)

    assert plan.id == f"video-{prompt_id('Launch our new product')}"
    assert [scene.id for scene in plan.scenes] == ["scene-0", "scene-1", "scene-2"]
    assert sum(scene.duration for scene in plan.scenes) == pytest.approx(12)
    assert plan.scenes[0].start_time == 0
    assert plan.scenes[1].start_time == pytest.approx(plan.scenes[0].duration)
    assert plan.scenes[-1].transition is None
    assert all(
        scene.transition.type in (TransitionType.fade, TransitionType.slide, TransitionType.wipe)
        for scene in plan.scenes[:-1]
    )

    headline = plan.scenes[0].elements[0]
    assert headline.id == "element-0-1"
    assert headline.type == "text"
    assert headline.position.z == 1
    assert 35 <= headline.position.x <= 65
    topics = {template.format(topic="Launch our new product") for template in HEADLINES}
    assert headline.content in topics
    assert plan.style.typography.sizes["body"] == 18


@pytest.mark.parametrize(("prompt", "duration"), [("a", 17.5), ("a", 59), ("Launch our new product", 7.3)])
def test_base_plan_scenes_fill_the_duration_exactly(prompt: str, duration: float) -> None:
    plan = generate_base_plan(prompt, duration)
    assert sum(scene.duration for scene in plan.scenes) == pytest.approx(duration, abs=1e-6)
    assert plan.scenes[-1].end_time == pytest.approx(duration, abs=1e-6)


def test_base_plan_is_seeded_by_prompt() -> None:
    first = generate_base_plan("Launch our new product", 20)
    assert first == generate_base_plan("Launch our new product", 20)

    respaced = generate_base_plan("launch  OUR new product", 20)
    assert respaced.id == first.id
    assert [scene.duration for scene in respaced.scenes] == [scene.duration for scene in first.scenes]

    assert generate_base_plan("Something else", 20).id != first.id


def test_base_plan_resolution_and_validation() -> None:
    portrait = generate_base_plan("Vertical teaser", 6, aspect_ratio="9:16")
    assert (portrait.resolution.width, portrait.resolution.height) == (1080, 1920)
    assert len(portrait.scenes) == 2
    with pytest.raises(ValueError):
        generate_base_plan("Nothing", 0)


def test_generate_video_end_to_end() -> None:
    orchestrator = ProductionOrchestrator(config=ProductionConfig())
    enhanced = generate_video("Space journey through our GitHub history", 10, orchestrator=orchestrator)
    metadata = enhanced.sophisticated_metadata

    assert enhanced.id.startswith("video-")
    assert metadata.video_style == "space-journey"
    assert metadata.uses_curved_paths is False
    assert metadata.active_subsystems == 3
    assert metadata.production_grade == "professional"

    again = generate_video("Space journey through our GitHub history", 10, orchestrator=orchestrator)
    assert json.dumps(enhanced.to_wire(), sort_keys=True) == json.dumps(again.to_wire(), sort_keys=True)


def test_generate_video_respects_explicit_style_and_options() -> None:
    orchestrator = ProductionOrchestrator(config=ProductionConfig())
    enhanced = generate_video(
        "Space journey through our GitHub history",
        10,
        style="product-launch",
        options=EnhanceOptions(enable_grading=False),
        orchestrator=orchestrator,
    )
    metadata = enhanced.sophisticated_metadata
    assert metadata.video_style == "product-launch"
    assert metadata.uses_orbital_camera is True
    assert enhanced.color_grading is None
