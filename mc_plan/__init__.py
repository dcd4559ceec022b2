"""Scene planning passes for video plans."""
from __future__ import annotations

from .arc import ARC_CUTOFFS, ArcPhase, analyze_narrative_arc, phase_for_scene
from .composition import CompositionAnalysis, analyze_scene_composition, optimize_scene_composition
from .pacing import determine_pacing_profile, infer_content_type, optimize_scene_pacing
from .perspective import PERSPECTIVES, CameraPerspective, add_camera_perspectives
from .planner import PlannerOptions, PlanningTrace, ScenePlanner, enhance_hook
from .transitions import TransitionPlan, apply_transition_choreography, choreograph_transitions

__all__ = [
    "ARC_CUTOFFS",
    "PERSPECTIVES",
    "ArcPhase",
    "CameraPerspective",
    "CompositionAnalysis",
    "PlannerOptions",
    "PlanningTrace",
    "ScenePlanner",
    "TransitionPlan",
    "add_camera_perspectives",
    "analyze_narrative_arc",
    "analyze_scene_composition",
    "apply_transition_choreography",
    "choreograph_transitions",
    "determine_pacing_profile",
    "enhance_hook",
    "infer_content_type",
    "optimize_scene_composition",
    "optimize_scene_pacing",
    "phase_for_scene",
]
