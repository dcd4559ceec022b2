"""Frame-accurate animation engines: camera, curved paths, parallax, grading."""
from __future__ import annotations

from .camera import CameraKeyframe, CameraPath, CameraState, Rotation, apply_shake
from .grading import ColorGrading, filter_string, overlays
from .parallax import ParallaxConfig, ParallaxLayer, get_transform, sort_by_depth
from .paths import CurvedPathAnimation, MultiPathOrchestrator, PathOptions, PathState

__all__ = [
    "CameraKeyframe",
    "CameraPath",
    "CameraState",
    "ColorGrading",
    "CurvedPathAnimation",
    "MultiPathOrchestrator",
    "ParallaxConfig",
    "ParallaxLayer",
    "PathOptions",
    "PathState",
    "Rotation",
    "apply_shake",
    "filter_string",
    "get_transform",
    "overlays",
    "sort_by_depth",
]
