"""Motion style presets and the easing-curve catalog."""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from mc_sdk.models import AnimationPattern, AnimationType


class MotionStyle(str, Enum):
    cinematic = "cinematic"
    tech = "tech"
    corporate = "corporate"
    creative = "creative"
    social = "social"
    minimal = "minimal"


class MotionPreset(BaseModel):
    """Default timing plus two canonical animations for a style."""

    style: MotionStyle
    name: str
    description: str
    default_duration: float
    easing: str
    animations: List[AnimationPattern] = Field(min_length=2, max_length=2)


class EasingCurve(BaseModel):
    name: str
    css_value: str
    description: str
    bezier: Optional[Tuple[float, float, float, float]] = None


def _pattern(
    name: str,
    kind: AnimationType,
    duration: float,
    easing: str,
    properties: Dict[str, object],
    delay: float = 0.0,
) -> AnimationPattern:
    return AnimationPattern(
        name=name, type=kind, duration=duration, easing=easing, delay=delay, properties=properties
    )


def _fade_in(**start: float) -> Dict[str, object]:
    return {"from": {"opacity": 0, **start}, "to": {"opacity": 1, **{key: 0 for key in start}}}


MOTION_PRESETS: Dict[MotionStyle, MotionPreset] = {
    MotionStyle.cinematic: MotionPreset(
        style=MotionStyle.cinematic,
        name="Cinematic",
        description="Slow, dramatic movements with smooth easing",
        default_duration=1.2,
        easing="easeInOut",
        animations=[
            _pattern("SlowReveal", AnimationType.fade, 1.5, "easeInOut", _fade_in(y=-30)),
            _pattern(
                "DramaticZoom",
                AnimationType.scale,
                2.0,
                "easeOut",
                {"from": {"scale": 1.2}, "to": {"scale": 1.0}},
                delay=0.5,
            ),
        ],
    ),
    MotionStyle.tech: MotionPreset(
        style=MotionStyle.tech,
        name="Tech",
        description="Sharp, precise movements with quick easing",
        default_duration=0.5,
        easing="easeOut",
        animations=[
            _pattern("DigitalSlide", AnimationType.slide, 0.6, "easeOut", _fade_in(x=-100)),
            _pattern("TechGlitch", AnimationType.custom, 0.3, "linear", {"glitchIntensity": 0.5, "chromaShift": 3}),
        ],
    ),
    MotionStyle.corporate: MotionPreset(
        style=MotionStyle.corporate,
        name="Corporate",
        description="Professional, smooth movements with medium pacing",
        default_duration=0.8,
        easing="easeInOut",
        animations=[
            _pattern("ProfessionalFade", AnimationType.fade, 0.8, "easeInOut", _fade_in()),
            _pattern("SmoothSlide", AnimationType.slide, 0.7, "easeInOut", _fade_in(y=20), delay=0.2),
        ],
    ),
    MotionStyle.creative: MotionPreset(
        style=MotionStyle.creative,
        name="Creative",
        description="Playful, bouncy movements with spring easing",
        default_duration=0.6,
        easing="spring",
        animations=[
            _pattern(
                "BouncyPop",
                AnimationType.scale,
                0.6,
                "spring",
                {"from": {"scale": 0, "rotation": -10}, "to": {"scale": 1, "rotation": 0}},
            ),
            _pattern(
                "PlayfulSpin",
                AnimationType.rotate,
                0.8,
                "spring",
                {"from": {"rotation": 0}, "to": {"rotation": 360}},
            ),
        ],
    ),
    MotionStyle.social: MotionPreset(
        style=MotionStyle.social,
        name="Social Media",
        description="Fast, energetic movements with punchy timing",
        default_duration=0.3,
        easing="easeOut",
        animations=[
            _pattern(
                "QuickPop",
                AnimationType.scale,
                0.3,
                "easeOut",
                {"from": {"scale": 0.5, "opacity": 0}, "to": {"scale": 1, "opacity": 1}},
            ),
            _pattern("FastSlide", AnimationType.slide, 0.25, "easeOut", _fade_in(x=50)),
        ],
    ),
    MotionStyle.minimal: MotionPreset(
        style=MotionStyle.minimal,
        name="Minimal",
        description="Subtle, understated movements focusing on content",
        default_duration=0.5,
        easing="easeOut",
        animations=[
            _pattern("SubtleFade", AnimationType.fade, 0.5, "easeOut", _fade_in()),
            _pattern("GentleSlide", AnimationType.slide, 0.6, "easeOut", _fade_in(y=10)),
        ],
    ),
}


EASING_CURVES: Dict[str, EasingCurve] = {
    curve.name: curve
    for curve in (
        EasingCurve(name="linear", css_value="linear", description="Constant speed throughout", bezier=(0, 0, 1, 1)),
        EasingCurve(name="easeIn", css_value="ease-in", description="Slow start, fast end", bezier=(0.42, 0, 1, 1)),
        EasingCurve(name="easeOut", css_value="ease-out", description="Fast start, slow end", bezier=(0, 0, 0.58, 1)),
        EasingCurve(
            name="easeInOut",
            css_value="ease-in-out",
            description="Slow start and end, fast middle",
            bezier=(0.42, 0, 0.58, 1),
        ),
        EasingCurve(
            name="spring",
            css_value="cubic-bezier(0.68, -0.55, 0.265, 1.55)",
            description="Bouncy, elastic movement",
            bezier=(0.68, -0.55, 0.265, 1.55),
        ),
        EasingCurve(
            name="bounce",
            css_value="cubic-bezier(0.68, -0.35, 0.265, 1.35)",
            description="Moderate bounce effect",
            bezier=(0.68, -0.35, 0.265, 1.35),
        ),
        EasingCurve(
            name="anticipate",
            css_value="cubic-bezier(0.36, 0, 0.66, -0.56)",
            description="Pulls back before moving forward",
            bezier=(0.36, 0, 0.66, -0.56),
        ),
        EasingCurve(
            name="overshoot",
            css_value="cubic-bezier(0.34, 1.56, 0.64, 1)",
            description="Goes past target then settles",
            bezier=(0.34, 1.56, 0.64, 1),
        ),
        EasingCurve(
            name="decelerate",
            css_value="cubic-bezier(0, 0, 0.2, 1)",
            description="Fast start with gradual slow down",
            bezier=(0, 0, 0.2, 1),
        ),
        EasingCurve(
            name="accelerate",
            css_value="cubic-bezier(0.4, 0, 1, 1)",
            description="Gradual speed up",
            bezier=(0.4, 0, 1, 1),
        ),
    )
}


__all__ = ["EASING_CURVES", "MOTION_PRESETS", "EasingCurve", "MotionPreset", "MotionStyle"]
