"""Narrative arc segmentation by scene midpoint."""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence, Tuple

from mc_sdk.models import Scene


class ArcPhase(str, Enum):
    hook = "hook"
    setup = "setup"
    build = "build"
    climax = "climax"
    resolution = "resolution"


# upper bound (fraction of total duration, exclusive) for each phase
ARC_CUTOFFS: Tuple[Tuple[ArcPhase, float], ...] = (
    (ArcPhase.hook, 0.15),
    (ArcPhase.setup, 0.25),
    (ArcPhase.build, 0.70),
    (ArcPhase.climax, 0.85),
)

HOOK_FRACTION = ARC_CUTOFFS[0][1]


def phase_for_time(midpoint: float, total_duration: float) -> ArcPhase:
    if total_duration <= 0:
        raise ValueError("total_duration must be positive")
    for phase, cutoff in ARC_CUTOFFS:
        if midpoint < total_duration * cutoff:
            return phase
    return ArcPhase.resolution


def phase_for_scene(scene: Scene, total_duration: float) -> ArcPhase:
    return phase_for_time(scene.start_time + scene.duration / 2, total_duration)


def analyze_narrative_arc(scenes: Sequence[Scene], total_duration: float) -> Dict[ArcPhase, List[Scene]]:
    """Bucket scenes into the five arc phases, preserving order."""

    arc: Dict[ArcPhase, List[Scene]] = {phase: [] for phase in ArcPhase}
    for scene in scenes:
        arc[phase_for_scene(scene, total_duration)].append(scene)
    return arc


def scene_phases(scenes: Sequence[Scene], total_duration: float) -> List[ArcPhase]:
    return [phase_for_scene(scene, total_duration) for scene in scenes]


__all__ = [
    "ARC_CUTOFFS",
    "HOOK_FRACTION",
    "ArcPhase",
    "analyze_narrative_arc",
    "phase_for_scene",
    "phase_for_time",
    "scene_phases",
]
