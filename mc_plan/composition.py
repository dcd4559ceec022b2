"""Per-scene composition analysis and light-touch rebalancing."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Sequence

from mc_sdk.loader import DensityRules, get_thresholds_config
from mc_sdk.models import Element, Scene

CENTER_X = 50.0
NUDGE = 5.0
WEIGHT_PER_ELEMENT = 10

Balance = Literal["left", "right", "center", "balanced"]
Density = Literal["sparse", "balanced", "dense", "overcrowded"]


@dataclass
class CompositionAnalysis:
    element_count: int
    layer_distribution: Dict[float, int]
    visual_weight: int
    balance: Balance
    density: Density
    recommendations: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "element_count": self.element_count,
            "layer_distribution": {str(z): count for z, count in self.layer_distribution.items()},
            "visual_weight": self.visual_weight,
            "balance": self.balance,
            "density": self.density,
            "recommendations": list(self.recommendations),
        }


def _density(count: int, max_elements: int) -> Density:
    if count <= 2:
        return "sparse"
    if count <= 5:
        return "balanced"
    if count <= max_elements:
        return "dense"
    return "overcrowded"


def analyze_scene_composition(scene: Scene, rules: Optional[DensityRules] = None) -> CompositionAnalysis:
    rules = rules or get_thresholds_config().density
    elements = scene.elements

    layers: Dict[float, int] = {}
    for element in elements:
        layers[element.position.z] = layers.get(element.position.z, 0) + 1

    left = sum(1 for element in elements if element.position.x < CENTER_X)
    right = sum(1 for element in elements if element.position.x > CENTER_X)
    balance: Balance
    if abs(left - right) <= 1:
        balance = "balanced"
    else:
        balance = "left" if left > right else "right"

    density = _density(len(elements), rules.max_elements)

    recommendations: List[str] = []
    if density == "overcrowded":
        recommendations.append("Consider reducing element count for clarity")
    if balance in ("left", "right"):
        recommendations.append("Rebalance elements for better composition")
    if len(layers) == 1:
        recommendations.append("Add depth by using multiple z-layers")

    return CompositionAnalysis(
        element_count=len(elements),
        layer_distribution=layers,
        visual_weight=len(elements) * WEIGHT_PER_ELEMENT,
        balance=balance,
        density=density,
        recommendations=recommendations,
    )


def prioritize_elements(elements: Sequence[Element], keep: int) -> List[Element]:
    """Keep the ``keep`` highest-z elements in their original paint order."""

    ranked = sorted(range(len(elements)), key=lambda index: -elements[index].position.z)
    kept = sorted(ranked[:keep])
    return [elements[index] for index in kept]


def _nudge(element: Element, balance: Balance) -> Element:
    x = element.position.x
    if balance == "left" and x < CENTER_X:
        x = min(x + NUDGE, CENTER_X)
    elif balance == "right" and x > CENTER_X:
        x = max(x - NUDGE, CENTER_X)
    else:
        return element
    return element.model_copy(update={"position": element.position.model_copy(update={"x": x})})


def optimize_scene_composition(scenes: Sequence[Scene], rules: Optional[DensityRules] = None) -> List[Scene]:
    """Trim overcrowded scenes; otherwise nudge a lopsided side toward center."""

    rules = rules or get_thresholds_config().density
    optimized: List[Scene] = []
    for scene in scenes:
        analysis = analyze_scene_composition(scene, rules)
        if analysis.density == "overcrowded":
            elements = prioritize_elements(scene.elements, rules.overcrowded_keep)
        elif analysis.balance in ("left", "right"):
            elements = [_nudge(element, analysis.balance) for element in scene.elements]
        else:
            optimized.append(scene)
            continue
        optimized.append(scene.model_copy(update={"elements": elements}))
    return optimized


__all__ = [
    "CompositionAnalysis",
    "analyze_scene_composition",
    "optimize_scene_composition",
    "prioritize_elements",
]
