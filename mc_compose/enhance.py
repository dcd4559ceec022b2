"""Enhanced plan assembly: camera, character paths, parallax and grading."""
from __future__ import annotations

import math
from typing import Dict, Optional

import structlog

from mc_engines.camera import CameraPath, forward_tracking_path, orbital_path
from mc_engines.grading import ColorGrading, style_grading
from mc_engines.parallax import (
    ATMOSPHERE,
    ParallaxConfig,
    interface_scene,
    layer_for_depth,
    space_scene,
)
from mc_engines.paths import CurvedPathAnimation, PathOptions, arc, s_curve
from mc_interp.prng import SeededRandom
from mc_sdk.models import Vec2, Vec3, VideoPlan

from .models import EnhancedVideoPlan, EnhanceOptions, ProductionGrade, ProductionOptions, SophisticatedMetadata
from .orchestrator import ProductionOrchestrator

logger = structlog.get_logger(__name__)

DEFAULT_STYLE = "space-journey"
CHARACTER_TYPES = frozenset({"image", "lottie", "phone-mockup", "laptop", "3d-model"})
ARC_HEIGHT = 150.0
S_CURVE_AMPLITUDE = 100.0
PATH_JITTER = 20.0
SUBSYSTEM_BONUS = 2
ALL_SUBSYSTEMS_BONUS = 5

# (minimum subsystems, minimum score, grade), checked in order
GRADE_LADDER = (
    (4, 85, "cinematic"),
    (3, 75, "professional"),
    (2, 65, "enhanced"),
)


def camera_for_style(style: str, total_frames: int, fps: int = 30) -> CameraPath:
    def at(fraction: float) -> int:
        return math.floor(total_frames * fraction)

    if style == "space-journey":
        return forward_tracking_path(
            0,
            -2000,
            total_frames,
            speed_variations=[(at(0.1), 1.5), (at(0.5), 0.7), (at(0.85), 1.2)],
            vertical_movement=[(0, 0.0), (at(0.3), -100.0), (total_frames, 50.0)],
            fps=fps,
        )
    if style == "product-launch":
        return orbital_path(Vec3(), 400, total_frames, start_angle=180, end_angle=360, fps=fps)
    if style in ("data-story", "cinematic"):
        return forward_tracking_path(
            0, -1500, total_frames, speed_variations=[(at(0.2), 0.8), (at(0.8), 1.0)], fps=fps
        )
    return forward_tracking_path(0, -1000, total_frames, fps=fps)


def is_character(element_type: str) -> bool:
    return element_type in CHARACTER_TYPES


def character_path(
    scene_index: int, element_index: int, duration: int, rng: Optional[SeededRandom] = None
) -> CurvedPathAnimation:
    """Arc for even ``element_index``, S-curve for odd, optionally jittered."""

    start = Vec2(x=100 + element_index * 200, y=150 + scene_index * 50)
    end = Vec2(x=700 + element_index * 100, y=200 + scene_index * 30)
    if rng is not None:
        slot = scene_index * 1000 + element_index
        start = Vec2(x=start.x + rng.uniform("path.start.x", -PATH_JITTER, PATH_JITTER, slot), y=start.y)
        end = Vec2(x=end.x, y=end.y + rng.uniform("path.end.y", -PATH_JITTER, PATH_JITTER, slot))
    curve = arc(start, end, ARC_HEIGHT) if element_index % 2 == 0 else s_curve(start, end, S_CURVE_AMPLITUDE)
    return CurvedPathAnimation(
        curve=curve,
        start_frame=0,
        duration=max(1, duration),
        options=PathOptions(easing="easeInOut", rotate_to_direction=True, min_scale=0.7, max_scale=1.3),
    )


def character_paths_for(plan: VideoPlan, rng: Optional[SeededRandom] = None) -> Dict[str, CurvedPathAnimation]:
    paths: Dict[str, CurvedPathAnimation] = {}
    for scene_index, scene in enumerate(plan.scenes):
        frames = math.floor(scene.duration * plan.fps)
        for element_index, element in enumerate(scene.elements):
            if is_character(element.type):
                paths[element.id] = character_path(scene_index, element_index, frames, rng)
    return paths


def parallax_for_style(plan: VideoPlan, style: str) -> Dict[str, ParallaxConfig]:
    """Per-element layer by depth, styled with the preset scene's atmospherics."""

    preset = space_scene() if style == "space-journey" else interface_scene()
    by_layer = {config.layer: config for config in preset.values()}
    configs: Dict[str, ParallaxConfig] = {}
    for element in plan.all_elements():
        layer = layer_for_depth(element.position.z)
        template = by_layer.get(layer)
        if template is None:
            atmosphere = ATMOSPHERE[layer]
            configs[element.id] = ParallaxConfig(layer=layer, opacity=atmosphere.opacity)
        else:
            configs[element.id] = template.model_copy()
    return configs


def final_quality_score(base: int, active: int) -> int:
    bonus = active * SUBSYSTEM_BONUS + (ALL_SUBSYSTEMS_BONUS if active == 4 else 0)
    return min(100, base + bonus)


def production_grade(active: int, score: int) -> ProductionGrade:
    for minimum, threshold, grade in GRADE_LADDER:
        if active >= minimum and score >= threshold:
            return grade  # type: ignore[return-value]
    return "basic"


def generate_enhanced_plan(
    plan: VideoPlan,
    options: Optional[EnhanceOptions] = None,
    orchestrator: Optional[ProductionOrchestrator] = None,
) -> EnhancedVideoPlan:
    opts = options or EnhanceOptions()
    orchestrator = orchestrator or ProductionOrchestrator()
    style = opts.style or DEFAULT_STYLE
    rng = SeededRandom(opts.seed or plan.id)

    if opts.full_production:
        optimized, report = orchestrator.full_production(plan, opts.content_type, opts.target_platform)
    else:
        optimized, report = orchestrator.produce(
            plan,
            ProductionOptions(
                content_type=opts.content_type, target_platform=opts.target_platform, motion_style=opts.motion_style
            ),
        )

    total_frames = max(1, optimized.total_frames)
    camera: Optional[CameraPath] = camera_for_style(style, total_frames, optimized.fps) if opts.enable_camera else None
    paths = character_paths_for(optimized, rng) if opts.enable_paths else {}
    parallax = parallax_for_style(optimized, style) if opts.enable_parallax else None
    grading: Optional[ColorGrading] = style_grading(style, total_frames) if opts.enable_grading else None

    active = sum((camera is not None, bool(paths), parallax is not None, grading is not None))
    score = final_quality_score(report.quality_score, active)
    metadata = SophisticatedMetadata(
        video_style=style,
        uses_orbital_camera=camera is not None and style == "product-launch",
        uses_forward_tracking=camera is not None and style != "product-launch",
        uses_curved_paths=bool(paths),
        uses_parallax=parallax is not None,
        uses_color_grading=grading is not None,
        active_subsystems=active,
        base_quality_score=report.quality_score,
        final_quality_score=score,
        production_grade=production_grade(active, score),
    )

    enhanced = EnhancedVideoPlan(
        **optimized.model_dump(),
        camera_path=camera,
        character_paths=paths,
        parallax_config=parallax,
        color_grading=grading,
        sophisticated_metadata=metadata,
    )
    logger.info(
        "enhance.completed",
        plan_id=enhanced.id,
        style=style,
        grade=metadata.production_grade,
        score=score,
        character_paths=len(paths),
        parallax_layers=len(parallax or {}),
    )
    return enhanced


__all__ = [
    "CHARACTER_TYPES",
    "camera_for_style",
    "character_path",
    "character_paths_for",
    "final_quality_score",
    "generate_enhanced_plan",
    "is_character",
    "parallax_for_style",
    "production_grade",
]
