"""Camera perspective presets chosen per narrative phase."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from mc_sdk.models import Scene

from .arc import ArcPhase, phase_for_scene


@dataclass(frozen=True)
class CameraPerspective:
    type: str
    focal_x: float
    focal_y: float
    zoom: float
    rotation: float
    description: str

    @property
    def origin(self) -> str:
        return f"{self.focal_x:g}% {self.focal_y:g}%"

    def style(self) -> Dict[str, object]:
        return {
            "perspective": self.type,
            "perspectiveOrigin": self.origin,
            "zoom": self.zoom,
            "rotation": self.rotation,
        }


PERSPECTIVES: Dict[str, CameraPerspective] = {
    p.type: p
    for p in (
        CameraPerspective("default", 50, 50, 1.0, 0, "Standard centered view"),
        CameraPerspective("close-up", 50, 40, 1.3, 0, "Zoomed in for detail and intimacy"),
        CameraPerspective("wide", 50, 50, 0.8, 0, "Pulled back establishing shot"),
        CameraPerspective("birds-eye", 50, 30, 0.9, -5, "Overhead perspective"),
        CameraPerspective("first-person", 50, 60, 1.1, 2, "Immersive viewer perspective"),
        CameraPerspective("inside", 50, 50, 1.2, 0, "Inside looking out"),
        CameraPerspective("dramatic", 40, 45, 1.15, 3, "Dutch angle for tension and drama"),
    )
}

BUILD_ROTATION = ("default", "close-up", "birds-eye", "first-person")


def perspective_for(phase: ArcPhase, index: int) -> CameraPerspective:
    """Perspective for the scene at plan position ``index`` within ``phase``."""

    if phase is ArcPhase.hook:
        name = "dramatic" if index % 2 == 0 else "close-up"
    elif phase is ArcPhase.setup:
        name = "wide"
    elif phase is ArcPhase.build:
        name = BUILD_ROTATION[index % len(BUILD_ROTATION)]
    elif phase is ArcPhase.climax:
        name = "inside" if index % 2 == 0 else "first-person"
    else:
        name = "default"
    return PERSPECTIVES[name]


def add_camera_perspectives(scenes: Sequence[Scene], total_duration: float) -> List[Scene]:
    """Stamp each element's style with its scene's perspective."""

    staged: List[Scene] = []
    for index, scene in enumerate(scenes):
        perspective = perspective_for(phase_for_scene(scene, total_duration), index)
        elements = [
            element.model_copy(update={"style": {**element.style, **perspective.style()}})
            for element in scene.elements
        ]
        staged.append(scene.model_copy(update={"elements": elements}))
    return staged


__all__ = ["BUILD_ROTATION", "PERSPECTIVES", "CameraPerspective", "add_camera_perspectives", "perspective_for"]
