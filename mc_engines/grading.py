"""Color grading timelines built from mood presets."""
from __future__ import annotations

import math
from typing import Dict, List, Optional, Union

import structlog
from pydantic import Field, model_validator

from mc_interp.color import interpolate_color, kelvin_to_rgb
from mc_interp.interpolate import lerp
from mc_sdk.loader import get_mood_config
from mc_sdk.models import ColorGrade, PartialColorGrade, PlanModel

from .timeline import find_bracket, sort_keyframes

logger = structlog.get_logger(__name__)

NUMERIC_FIELDS = ("temperature", "tint", "saturation", "contrast", "brightness", "vignette")
COLOR_FIELDS = ("shadows", "midtones", "highlights")
TEMPERATURE_OVERLAY_OPACITY = 0.2


def mood_presets() -> Dict[str, ColorGrade]:
    return dict(get_mood_config().presets)


def neutral_grade() -> ColorGrade:
    return get_mood_config().presets["neutral"]


def get_mood_preset(name: str) -> ColorGrade:
    """Return a named mood preset; unknown names are caller errors."""

    presets = get_mood_config().presets
    if name not in presets:
        raise ValueError(f"unknown mood preset {name!r}; expected one of {sorted(presets)}")
    return presets[name]


def merge_with_neutral(partial: PartialColorGrade, base: Optional[ColorGrade] = None) -> ColorGrade:
    """Fill every unset field of ``partial`` from ``base`` (neutral by default)."""

    defaults = (base or neutral_grade()).model_dump()
    provided = partial.model_dump(exclude_none=True)
    return ColorGrade(**{**defaults, **provided})


class ColorGradeKeyframe(PlanModel):
    frame: int = Field(ge=0)
    grade: PartialColorGrade


def _as_partial(grade: Union[str, ColorGrade, PartialColorGrade, Dict[str, object]]) -> PartialColorGrade:
    if isinstance(grade, str):
        return PartialColorGrade(**get_mood_preset(grade).model_dump())
    if isinstance(grade, ColorGrade):
        return PartialColorGrade(**grade.model_dump())
    if isinstance(grade, PartialColorGrade):
        return grade
    return PartialColorGrade.model_validate(grade)


def blend_grades(start: ColorGrade, end: ColorGrade, t: float) -> ColorGrade:
    values: Dict[str, object] = {}
    for name in NUMERIC_FIELDS:
        values[name] = lerp(getattr(start, name), getattr(end, name), t)
    for name in COLOR_FIELDS:
        values[name] = interpolate_color(getattr(start, name), getattr(end, name), t)
    values["vignette"] = max(0.0, min(1.0, float(values["vignette"])))  # type: ignore[arg-type]
    return ColorGrade(**values)


class ColorGrading(PlanModel):
    """Keyframed grade timeline; an empty timeline grades as neutral."""

    keyframes: List[ColorGradeKeyframe] = Field(default_factory=list)

    @model_validator(mode="after")
    def _sort_keyframes(self) -> "ColorGrading":
        self.keyframes = sort_keyframes(self.keyframes, [kf.frame for kf in self.keyframes])
        return self

    def add_keyframe(
        self, frame: int, grade: Union[str, ColorGrade, PartialColorGrade, Dict[str, object]]
    ) -> "ColorGrading":
        """Append a keyframe from a preset name or a (partial) grade."""

        keyframes = list(self.keyframes) + [ColorGradeKeyframe(frame=frame, grade=_as_partial(grade))]
        self.keyframes = sort_keyframes(keyframes, [kf.frame for kf in keyframes])
        return self

    def get_grade_at_frame(self, frame: float) -> ColorGrade:
        if not self.keyframes:
            return neutral_grade()
        bracket = find_bracket(self.keyframes, [kf.frame for kf in self.keyframes], frame)
        prev = merge_with_neutral(bracket.prev.grade)
        if bracket.next is None:
            return prev
        return blend_grades(prev, merge_with_neutral(bracket.next.grade), bracket.progress)


def filter_string(grade: ColorGrade) -> str:
    """CSS filter terms for brightness, contrast and saturation only."""

    terms: List[str] = []
    if grade.brightness != 100:
        terms.append(f"brightness({grade.brightness / 100})")
    if grade.contrast != 100:
        terms.append(f"contrast({grade.contrast / 100})")
    if grade.saturation != 100:
        terms.append(f"saturate({grade.saturation / 100})")
    return " ".join(terms)


def overlays(grade: ColorGrade) -> List[Dict[str, object]]:
    """Translucent layers realizing temperature and vignette."""

    layers: List[Dict[str, object]] = [
        {
            "kind": "temperature",
            "backgroundColor": kelvin_to_rgb(grade.temperature),
            "mixBlendMode": "overlay",
            "opacity": TEMPERATURE_OVERLAY_OPACITY,
        }
    ]
    if grade.vignette > 0:
        layers.append(
            {
                "kind": "vignette",
                "background": f"radial-gradient(circle at center, transparent 30%, {grade.shadows} 100%)",
                "opacity": grade.vignette,
            }
        )
    return layers


REFERENCE_ACTS = (
    (0.0, "space-blue"),
    (0.11, "space-blue"),
    (0.11, "warm-energy"),
    (0.29, "warm-energy"),
    (0.30, "green-landscape"),
    (0.48, "green-landscape"),
    (0.48, "space-blue"),
    (0.72, "dramatic-dark"),
    (0.87, "warm-finale"),
    (1.0, "warm-finale"),
)

STYLE_ACTS: Dict[str, tuple] = {
    "product-launch": ((0.0, "space-blue"), (0.3, "warm-energy"), (1.0, "warm-finale")),
    "data-story": ((0.0, "space-blue"), (0.5, "green-landscape"), (1.0, "space-blue")),
    "cinematic": ((0.0, "dramatic-dark"), (0.2, "space-blue"), (0.7, "warm-energy"), (1.0, "warm-finale")),
}


def _timeline(acts: tuple, duration_frames: int) -> ColorGrading:
    if duration_frames <= 0:
        raise ValueError("duration_frames must be positive")
    grading = ColorGrading()
    for fraction, preset in acts:
        grading.add_keyframe(math.floor(duration_frames * fraction), preset)
    return grading


def reference_timeline(duration_frames: int) -> ColorGrading:
    """Five-act grade with hard cuts at 11% and 48%."""

    return _timeline(REFERENCE_ACTS, duration_frames)


def style_grading(style: str, duration_frames: int) -> ColorGrading:
    """Grading for a video style; unknown styles use the reference timeline."""

    acts = STYLE_ACTS.get(style)
    if acts is None:
        logger.debug("grading.style.fallback", style=style)
        return reference_timeline(duration_frames)
    return _timeline(acts, duration_frames)


def temperature_grading(start_kelvin: float, end_kelvin: float, duration_frames: int) -> ColorGrading:
    if duration_frames <= 0:
        raise ValueError("duration_frames must be positive")
    grading = ColorGrading()
    grading.add_keyframe(0, PartialColorGrade(temperature=start_kelvin))
    grading.add_keyframe(duration_frames, PartialColorGrade(temperature=end_kelvin))
    return grading


__all__ = [
    "ColorGradeKeyframe",
    "ColorGrading",
    "blend_grades",
    "filter_string",
    "get_mood_preset",
    "merge_with_neutral",
    "mood_presets",
    "neutral_grade",
    "overlays",
    "reference_timeline",
    "style_grading",
    "temperature_grading",
]
