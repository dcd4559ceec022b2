"""Multi-pass scene planner: pacing, perspective, transitions, composition, hook."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import structlog
from pydantic import BaseModel

from mc_sdk.loader import PacingConfig
from mc_sdk.models import AnimationPattern, AnimationType, Element, Scene, VideoPlan

from .arc import HOOK_FRACTION, analyze_narrative_arc
from .composition import optimize_scene_composition
from .pacing import determine_pacing_profile, infer_content_type, optimize_scene_pacing
from .perspective import add_camera_perspectives
from .transitions import TransitionPlan, apply_transition_choreography, choreograph_transitions

logger = structlog.get_logger(__name__)

HOOK_MAX_ANIMATION = 0.4
HOOK_STAGGER = 0.1


class PlannerOptions(BaseModel):
    content_type: Optional[str] = None
    enable_perspective: bool = True
    enable_transitions: bool = True
    enable_composition: bool = True
    enable_hook: bool = True


@dataclass
class PlanningTrace:
    content_type: str
    rhythm: str
    passes: List[str] = field(default_factory=list)
    arc: Dict[str, List[str]] = field(default_factory=dict)
    transitions: List[TransitionPlan] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "content_type": self.content_type,
            "rhythm": self.rhythm,
            "passes": list(self.passes),
            "arc": {phase: list(ids) for phase, ids in self.arc.items()},
            "transitions": [plan.as_dict() for plan in self.transitions],
        }


def hook_zoom_in(delay: float) -> AnimationPattern:
    return AnimationPattern(
        name="ZoomIn",
        type=AnimationType.scale,
        duration=HOOK_MAX_ANIMATION,
        delay=delay,
        easing="spring",
        properties={"from": {"scale": 0.8, "opacity": 0}, "to": {"scale": 1, "opacity": 1}},
    )


def _quicken(animation: AnimationPattern) -> AnimationPattern:
    return animation.model_copy(update={"duration": min(animation.duration, HOOK_MAX_ANIMATION), "easing": "spring"})


def enhance_hook(scenes: Sequence[Scene], total_duration: float) -> List[Scene]:
    """Tighten animations in scenes that end inside the opening hook window."""

    window = total_duration * HOOK_FRACTION
    enhanced: List[Scene] = []
    for scene in scenes:
        if scene.end_time > window:
            enhanced.append(scene)
            continue
        elements: List[Element] = []
        for index, element in enumerate(scene.elements):
            if element.animation is None:
                animation = hook_zoom_in(index * HOOK_STAGGER)
            else:
                animation = _quicken(element.animation)
            elements.append(element.model_copy(update={"animation": animation}))
        enhanced.append(
            scene.model_copy(
                update={"elements": elements, "animations": [_quicken(pattern) for pattern in scene.animations]}
            )
        )
    return enhanced


class ScenePlanner:
    """Applies the planning passes in a fixed order and records what ran."""

    def __init__(self, pacing: Optional[PacingConfig] = None) -> None:
        self._pacing = pacing

    def plan(self, plan: VideoPlan, options: Optional[PlannerOptions] = None) -> Tuple[VideoPlan, PlanningTrace]:
        opts = options or PlannerOptions()
        content_type = opts.content_type or infer_content_type(plan)
        profile = determine_pacing_profile(plan, content_type, self._pacing)
        trace = PlanningTrace(content_type=content_type, rhythm=profile.rhythm)

        scenes = optimize_scene_pacing(plan.scenes, profile, plan.duration)
        trace.passes.append("pacing")
        trace.arc = {
            phase.value: [scene.id for scene in bucket]
            for phase, bucket in analyze_narrative_arc(scenes, plan.duration).items()
        }

        if opts.enable_perspective:
            scenes = add_camera_perspectives(scenes, plan.duration)
            trace.passes.append("perspective")
        if opts.enable_transitions:
            trace.transitions = choreograph_transitions(scenes, plan.duration)
            scenes = apply_transition_choreography(scenes, trace.transitions)
            trace.passes.append("transitions")
        if opts.enable_composition:
            scenes = optimize_scene_composition(scenes)
            trace.passes.append("composition")
        if opts.enable_hook:
            scenes = enhance_hook(scenes, plan.duration)
            trace.passes.append("hook")

        logger.info(
            "planner.optimized",
            plan_id=plan.id,
            content_type=content_type,
            rhythm=profile.rhythm,
            passes=trace.passes,
            scenes=len(scenes),
        )
        return plan.model_copy(update={"scenes": scenes}), trace

    def optimize(self, plan: VideoPlan, options: Optional[PlannerOptions] = None) -> VideoPlan:
        optimized, _ = self.plan(plan, options)
        return optimized


__all__ = [
    "HOOK_MAX_ANIMATION",
    "PlannerOptions",
    "PlanningTrace",
    "ScenePlanner",
    "enhance_hook",
    "hook_zoom_in",
]
