"""Motion design library: entrance/exit selection and choreography timing."""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Literal, Mapping, Sequence, Tuple, Union

import structlog

from mc_sdk.models import AnimationPattern, AnimationType, Element, Scene

from .presets import EASING_CURVES, MOTION_PRESETS, EasingCurve, MotionPreset, MotionStyle

logger = structlog.get_logger(__name__)

Choreography = Literal["sequential", "parallel", "staggered", "wave"]
StyleLike = Union[MotionStyle, str]

PRESET_STAGGER = 0.1
STAGGER_STEP = 0.1
WAVE_STEP = 0.08

# element type -> (name, kind, duration factor, easing or None for the style's, properties)
_ENTRANCES: Dict[str, Tuple[str, AnimationType, float, Union[str, None], Dict[str, Any]]] = {
    "text": (
        "TextFadeIn",
        AnimationType.fade,
        1.0,
        None,
        {"from": {"opacity": 0, "y": 20}, "to": {"opacity": 1, "y": 0}},
    ),
    "image": (
        "ImageZoom",
        AnimationType.scale,
        1.2,
        None,
        {"from": {"scale": 0.9, "opacity": 0}, "to": {"scale": 1, "opacity": 1}},
    ),
    "shape": ("ShapeExpand", AnimationType.scale, 0.8, "spring", {"from": {"scale": 0}, "to": {"scale": 1}}),
    "phone-mockup": (
        "PhoneRotateIn",
        AnimationType.custom,
        1.5,
        None,
        {"from": {"scale": 0.8, "rotateY": -30, "opacity": 0}, "to": {"scale": 1, "rotateY": 0, "opacity": 1}},
    ),
    "logo-grid": (
        "LogoStagger",
        AnimationType.fade,
        1.0,
        None,
        {"from": {"opacity": 0, "scale": 0.8}, "to": {"opacity": 1, "scale": 1}},
    ),
    "data-viz": ("ChartDraw", AnimationType.custom, 2.0, "easeOut", {"drawProgress": {"from": 0, "to": 1}}),
    "stats-counter": ("CountUp", AnimationType.custom, 2.5, "easeOut", {"count": {"from": 0, "to": 1}}),
}

_EXITS: Dict[str, Tuple[str, AnimationType, float, Dict[str, Any]]] = {
    "text": ("TextFadeOut", AnimationType.fade, 0.7, {"from": {"opacity": 1, "y": 0}, "to": {"opacity": 0, "y": -20}}),
    "image": (
        "ImageShrink",
        AnimationType.scale,
        0.8,
        {"from": {"scale": 1, "opacity": 1}, "to": {"scale": 0.8, "opacity": 0}},
    ),
    "default": ("FadeOut", AnimationType.fade, 0.6, {"from": {"opacity": 1}, "to": {"opacity": 0}}),
}


def _style(style: StyleLike) -> MotionStyle:
    return style if isinstance(style, MotionStyle) else MotionStyle(style)


class MotionDesignLibrary:
    """Stateless catalog of motion presets and choreography rules."""

    def get_preset(self, style: StyleLike) -> MotionPreset:
        return MOTION_PRESETS[_style(style)]

    def get_easing_curve(self, name: str) -> EasingCurve:
        """Named CSS easing curve; unknown names resolve to easeOut."""

        return EASING_CURVES.get(name) or EASING_CURVES["easeOut"]

    def apply_motion_preset(self, scene: Scene, style: StyleLike) -> Scene:
        """Alternate the style's two patterns across elements with a 0.1s stagger."""

        preset = self.get_preset(style)
        elements = [
            element.model_copy(
                update={
                    "animation": preset.animations[index % 2].model_copy(
                        update={"delay": index * PRESET_STAGGER}, deep=True
                    )
                }
            )
            for index, element in enumerate(scene.elements)
        ]
        return scene.model_copy(
            update={
                "elements": elements,
                "animations": [pattern.model_copy(deep=True) for pattern in preset.animations],
            }
        )

    def create_coordinated_animation(
        self,
        elements: Sequence[Element],
        choreography: Choreography,
        base: AnimationPattern,
    ) -> List[Element]:
        """Give every element ``base`` with a choreography-specific delay."""

        middle = len(elements) // 2
        coordinated: List[Element] = []
        for index, element in enumerate(elements):
            delay = base.delay
            if choreography == "sequential":
                delay += index * base.duration
            elif choreography == "staggered":
                delay += index * STAGGER_STEP
            elif choreography == "wave":
                delay += abs(index - middle) * WAVE_STEP
            elif choreography != "parallel":
                raise ValueError(f"unknown choreography {choreography!r}")
            animation = base.model_copy(update={"delay": delay}, deep=True)
            coordinated.append(element.model_copy(update={"animation": animation}))
        return coordinated

    def create_keyframe_animation(
        self,
        prop: str,
        keyframes: Sequence[Mapping[str, Any]],
        *,
        duration: float = 1.0,
        easing: str = "easeInOut",
        name: str | None = None,
    ) -> AnimationPattern:
        """Custom animation driving ``prop`` through keyframes ordered by ``time`` (0..1)."""

        ordered = sorted((dict(frame) for frame in keyframes), key=lambda frame: float(frame.get("time", 0.0)))
        return AnimationPattern(
            name=name or f"{prop}Keyframes",
            type=AnimationType.custom,
            duration=duration,
            easing=easing,
            properties={"property": prop, "keyframes": ordered},
        )

    def generate_entrance_animation(self, element: Element, style: StyleLike) -> AnimationPattern:
        preset = self.get_preset(style)
        name, kind, factor, easing, properties = _ENTRANCES.get(element.type, _ENTRANCES["text"])
        return AnimationPattern(
            name=name,
            type=kind,
            duration=preset.default_duration * factor,
            easing=easing or preset.easing,
            properties=copy.deepcopy(properties),
        )

    def generate_exit_animation(self, element: Element, style: StyleLike) -> AnimationPattern:
        preset = self.get_preset(style)
        name, kind, factor, properties = _EXITS.get(element.type, _EXITS["default"])
        return AnimationPattern(
            name=name,
            type=kind,
            duration=preset.default_duration * factor,
            easing="easeIn",
            properties=copy.deepcopy(properties),
        )

    def hook_animation(self) -> AnimationPattern:
        return AnimationPattern(
            name="AttentionGrabber",
            type=AnimationType.scale,
            duration=0.4,
            easing="spring",
            properties={
                "from": {"scale": 0, "rotation": -10, "opacity": 0},
                "to": {"scale": 1, "rotation": 0, "opacity": 1},
            },
        )

    def emphasis_animation(self) -> AnimationPattern:
        return AnimationPattern(
            name="Emphasize",
            type=AnimationType.scale,
            duration=0.3,
            easing="spring",
            properties={
                "from": {"scale": 1},
                "to": {"scale": 1.1},
                "keyframes": [
                    {"time": 0, "value": 1},
                    {"time": 0.5, "value": 1.1},
                    {"time": 1, "value": 1},
                ],
            },
        )

    def apply_animation_presets(self, scenes: Sequence[Scene], style: StyleLike) -> List[Scene]:
        """Assign every element its entrance animation for ``style``."""

        updated = [
            scene.model_copy(
                update={
                    "elements": [
                        element.model_copy(update={"animation": self.generate_entrance_animation(element, style)})
                        for element in scene.elements
                    ]
                }
            )
            for scene in scenes
        ]
        logger.debug(
            "motion.presets.applied",
            style=_style(style).value,
            scenes=len(updated),
            elements=sum(len(scene.elements) for scene in updated),
        )
        return updated


__all__ = ["Choreography", "MotionDesignLibrary", "StyleLike"]
