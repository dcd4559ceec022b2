"""Content-type inference and rhythm-driven scene re-timing."""
from __future__ import annotations

from typing import List, Optional, Sequence

import structlog

from mc_sdk.loader import PacingConfig, PacingProfile, get_pacing_config
from mc_sdk.models import Scene, VideoPlan

logger = structlog.get_logger(__name__)

TECH_ELEMENT_TYPES = frozenset({"code-editor", "terminal", "laptop"})
DATA_ELEMENT_TYPES = frozenset({"data-viz", "chart", "stats-counter"})
PORTRAIT_RATIOS = frozenset({"portrait", "9:16", "4:5"})

RHYTHM_VARIANCE = 0.3
FAST_FACTOR = 0.8
FAST_FLOOR = 2.0
SLOW_FACTOR = 1.2
MIN_SCENE_DURATION = 1.0


def is_portrait(plan: VideoPlan) -> bool:
    if plan.aspect_ratio in PORTRAIT_RATIOS:
        return True
    return plan.resolution.height > plan.resolution.width


def has_element_type(plan: VideoPlan, types: frozenset) -> bool:
    return any(element.type in types for element in plan.all_elements())


def infer_content_type(plan: VideoPlan) -> str:
    """Guess the content type from duration, framing and element types."""

    if plan.duration < 30 and is_portrait(plan):
        return "social"
    if has_element_type(plan, TECH_ELEMENT_TYPES):
        return "tech"
    if has_element_type(plan, DATA_ELEMENT_TYPES):
        return "corporate"
    return "product"


def determine_pacing_profile(
    plan: VideoPlan,
    content_type: Optional[str] = None,
    config: Optional[PacingConfig] = None,
) -> PacingProfile:
    cfg = config or get_pacing_config()
    return cfg.profile(content_type or infer_content_type(plan))


def rhythm_duration(profile: PacingProfile, index: int) -> float:
    """Target duration of the scene at ``index`` for the profile's rhythm."""

    average = profile.avg_scene_duration
    if profile.rhythm == "variable":
        variance = average * RHYTHM_VARIANCE
        return average - variance if index % 2 == 0 else average + variance
    if profile.rhythm == "fast":
        return max(FAST_FLOOR, average * FAST_FACTOR)
    if profile.rhythm == "slow":
        return average * SLOW_FACTOR
    return average


def optimize_scene_pacing(scenes: Sequence[Scene], profile: PacingProfile, total_duration: float) -> List[Scene]:
    """Re-time scenes to the profile and re-stamp start times back to back.

    Each scene takes its rhythm duration, shortened so that every later scene
    still has its one-second floor before ``total_duration``. Scenes beyond
    the number of one-second slots the total can hold are dropped. The paced
    scenes therefore always end at or before the total.
    """

    slots = max(1, int(total_duration // MIN_SCENE_DURATION))
    kept = list(scenes[:slots])
    if len(kept) < len(scenes):
        logger.warning(
            "planner.pacing.dropped",
            dropped=[scene.id for scene in scenes[slots:]],
            total=total_duration,
        )

    paced: List[Scene] = []
    current = 0.0
    for index, scene in enumerate(kept):
        reserved = MIN_SCENE_DURATION * (len(kept) - index - 1)
        budget = total_duration - current - reserved
        duration = round(min(rhythm_duration(profile, index), budget), 6)
        paced.append(scene.model_copy(update={"start_time": round(current, 6), "duration": duration}))
        current += duration
    logger.debug(
        "planner.pacing.applied",
        rhythm=profile.rhythm,
        scenes=len(paced),
        total=round(current, 3),
        target=total_duration,
    )
    return paced


__all__ = [
    "DATA_ELEMENT_TYPES",
    "MIN_SCENE_DURATION",
    "TECH_ELEMENT_TYPES",
    "determine_pacing_profile",
    "has_element_type",
    "infer_content_type",
    "is_portrait",
    "optimize_scene_pacing",
    "rhythm_duration",
]
