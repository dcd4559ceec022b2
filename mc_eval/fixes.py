"""Automatic fixes applied after a quality assessment."""
from __future__ import annotations

from typing import Dict, List

from mc_sdk.loader import PaletteRules, TypographyRules
from mc_sdk.models import Transition, TransitionType, VideoPlan

from .checks import effective_sizes

ROUND_ROBIN = (
    TransitionType.fade,
    TransitionType.slide,
    TransitionType.wipe,
    TransitionType.zoom,
    TransitionType.cut,
)
FIX_TRANSITION_DURATION = 0.5
H2_OVER_BODY = 1.5
H1_OVER_H2 = 1.4


def fix_palette(plan: VideoPlan, rules: PaletteRules) -> VideoPlan:
    palette: List[str] = list(plan.style.color_palette)
    if len(palette) > rules.max_colors:
        palette = palette[: rules.max_colors]
    elif len(palette) < rules.min_colors:
        palette = palette + list(rules.fallback_colors)
    else:
        return plan
    style = plan.style.model_copy(update={"color_palette": palette})
    return plan.model_copy(update={"style": style})


def fix_typography(plan: VideoPlan, rules: TypographyRules) -> VideoPlan:
    """Raise body to the floor, then restore a strict h1 > h2 > body ladder."""

    sizes = effective_sizes(plan.style, rules)
    if sizes["body"] < rules.min_body:
        sizes["body"] = rules.min_body
    if sizes["h2"] <= sizes["body"]:
        sizes["h2"] = sizes["body"] * H2_OVER_BODY
    if sizes["h1"] <= sizes["h2"]:
        sizes["h1"] = sizes["h2"] * H1_OVER_H2

    merged: Dict[str, float] = {**plan.style.typography.sizes, **sizes}
    if merged == plan.style.typography.sizes:
        return plan
    typography = plan.style.typography.model_copy(update={"sizes": merged})
    style = plan.style.model_copy(update={"typography": typography})
    return plan.model_copy(update={"style": style})


def fix_transitions(plan: VideoPlan) -> VideoPlan:
    """Give scenes without a transition one from the round-robin sequence."""

    scenes = [
        scene
        if scene.transition is not None
        else scene.model_copy(
            update={
                "transition": Transition(
                    type=ROUND_ROBIN[index % len(ROUND_ROBIN)], duration=FIX_TRANSITION_DURATION
                )
            }
        )
        for index, scene in enumerate(plan.scenes)
    ]
    return plan.model_copy(update={"scenes": scenes})


__all__ = ["ROUND_ROBIN", "fix_palette", "fix_transitions", "fix_typography"]
