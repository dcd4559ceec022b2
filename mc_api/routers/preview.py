"""Frame-sampled previews of camera paths and color grading."""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from mc_api.utils import err, ok
from mc_compose.enhance import camera_for_style
from mc_compose.models import VideoStyle
from mc_engines.camera import CameraPath, forward_tracking_path, orbital_path, to_css_transform
from mc_engines.grading import ColorGrading, filter_string, get_mood_preset, overlays, style_grading
from mc_sdk.models import ColorGrade, Vec3

router = APIRouter()


def _sample_frames(total: int, samples: int) -> List[int]:
    steps = max(1, samples - 1)
    return sorted({round(total * step / steps) for step in range(samples)})


class CameraPreviewIn(BaseModel):
    kind: Literal["orbital", "forward"] = "orbital"
    style: Optional[VideoStyle] = None
    frames: int = Field(default=300, gt=0)
    samples: int = Field(default=5, ge=1, le=200)
    radius: float = 400.0
    start_angle: float = 180.0
    end_angle: float = 270.0
    start_z: float = 0.0
    end_z: float = -1000.0


@router.post("/preview/camera")
def preview_camera(payload: CameraPreviewIn):
    path: CameraPath
    if payload.style:
        path = camera_for_style(payload.style, payload.frames)
    elif payload.kind == "orbital":
        path = orbital_path(
            Vec3(), payload.radius, payload.frames, start_angle=payload.start_angle, end_angle=payload.end_angle
        )
    else:
        path = forward_tracking_path(payload.start_z, payload.end_z, payload.frames)

    samples: List[Dict[str, Any]] = []
    for frame in _sample_frames(payload.frames, payload.samples):
        state = path.get_state(frame)
        samples.append(
            {"frame": frame, "state": state.model_dump(mode="json"), "transform": to_css_transform(state)}
        )
    return ok({"path": path.model_dump(mode="json", by_alias=True, exclude_none=True), "samples": samples})


class GradingPreviewIn(BaseModel):
    style: Optional[str] = None
    mood: Optional[str] = None
    frames: int = Field(default=300, gt=0)
    samples: int = Field(default=5, ge=1, le=200)


def _describe(grade: ColorGrade) -> Dict[str, Any]:
    return {"grade": grade.model_dump(mode="json"), "filter": filter_string(grade), "overlays": overlays(grade)}


@router.post("/preview/grading")
def preview_grading(payload: GradingPreviewIn):
    if payload.mood:
        try:
            grade = get_mood_preset(payload.mood)
        except ValueError as exc:
            return err([str(exc)])
        return ok({"mood": payload.mood, **_describe(grade)})

    grading: ColorGrading = style_grading(payload.style or "space-journey", payload.frames)
    samples = [
        {"frame": frame, **_describe(grading.get_grade_at_frame(frame))}
        for frame in _sample_frames(payload.frames, payload.samples)
    ]
    return ok({"style": payload.style or "space-journey", "samples": samples})
