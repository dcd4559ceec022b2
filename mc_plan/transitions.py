"""Phase-aware transition choreography between consecutive scenes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from mc_sdk.models import Scene, Transition, TransitionType

from .arc import ArcPhase, phase_for_scene

BUILD_TRANSITIONS = (TransitionType.slide, TransitionType.wipe, TransitionType.zoom, TransitionType.fade)


@dataclass(frozen=True)
class TransitionPlan:
    from_scene: str
    to_scene: str
    transition: Transition
    reasoning: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_scene,
            "to": self.to_scene,
            "transition": self.transition.model_dump(mode="json"),
            "reasoning": self.reasoning,
        }


def transition_for(phase: ArcPhase, index: int) -> Tuple[Transition, str]:
    """Return ``(transition, reasoning)`` for an outgoing scene."""

    if phase is ArcPhase.hook:
        return Transition(type=TransitionType.cut, duration=0.2), "Fast cut to maintain hook energy"
    if phase is ArcPhase.setup:
        return Transition(type=TransitionType.fade, duration=0.5), "Fade for smooth setup flow"
    if phase is ArcPhase.build:
        kind = BUILD_TRANSITIONS[index % len(BUILD_TRANSITIONS)]
        return Transition(type=kind, duration=0.4), "Varied transition to maintain interest"
    if phase is ArcPhase.climax:
        kind = TransitionType.zoom if index % 2 == 0 else TransitionType.wipe
        return Transition(type=kind, duration=0.6), "Dramatic transition for climax impact"
    return Transition(type=TransitionType.fade, duration=0.7), "Gentle fade for resolution"


def choreograph_transitions(scenes: Sequence[Scene], total_duration: float) -> List[TransitionPlan]:
    plans: List[TransitionPlan] = []
    for index in range(len(scenes) - 1):
        outgoing, incoming = scenes[index], scenes[index + 1]
        transition, reasoning = transition_for(phase_for_scene(outgoing, total_duration), index)
        plans.append(TransitionPlan(outgoing.id, incoming.id, transition, reasoning))
    return plans


def apply_transition_choreography(scenes: Sequence[Scene], plans: Sequence[TransitionPlan]) -> List[Scene]:
    """Set each scene's outgoing transition; the last scene keeps its own."""

    by_source: Dict[str, Transition] = {}
    for plan in plans:
        by_source.setdefault(plan.from_scene, plan.transition)
    return [
        scene.model_copy(update={"transition": by_source[scene.id]}) if scene.id in by_source else scene
        for scene in scenes
    ]


__all__ = [
    "BUILD_TRANSITIONS",
    "TransitionPlan",
    "apply_transition_choreography",
    "choreograph_transitions",
    "transition_for",
]
