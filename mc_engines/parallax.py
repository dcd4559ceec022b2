"""2.5D parallax transforms driven by six fixed depth tiers."""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import BaseModel

from mc_interp.interpolate import interpolate
from mc_sdk.models import PlanModel

T = TypeVar("T")

DEFAULT_FOG_COLOR = "rgba(10, 14, 39, 0.3)"
FOG_THRESHOLD = 0.1


class ParallaxLayer(str, Enum):
    far_background = "far-background"
    mid_background = "mid-background"
    environment = "environment"
    mid_ground = "mid-ground"
    subject = "subject"
    foreground = "foreground"


LAYER_ORDER: Tuple[ParallaxLayer, ...] = tuple(ParallaxLayer)

DEFAULT_MULTIPLIERS: Dict[ParallaxLayer, float] = {
    ParallaxLayer.far_background: 0.1,
    ParallaxLayer.mid_background: 0.3,
    ParallaxLayer.environment: 0.6,
    ParallaxLayer.mid_ground: 0.8,
    ParallaxLayer.subject: 1.0,
    ParallaxLayer.foreground: 1.5,
}


class Atmosphere(BaseModel):
    opacity: float
    blur: float
    color_shift: str


ATMOSPHERE: Dict[ParallaxLayer, Atmosphere] = {
    ParallaxLayer.far_background: Atmosphere(opacity=0.6, blur=0, color_shift="hue-rotate(210deg) saturate(0.7)"),
    ParallaxLayer.mid_background: Atmosphere(opacity=0.8, blur=0, color_shift="hue-rotate(195deg) saturate(0.85)"),
    ParallaxLayer.environment: Atmosphere(opacity=0.9, blur=0, color_shift="saturate(0.95)"),
    ParallaxLayer.mid_ground: Atmosphere(opacity=0.95, blur=0, color_shift="saturate(1.0)"),
    ParallaxLayer.subject: Atmosphere(opacity=1.0, blur=0, color_shift="saturate(1.1)"),
    ParallaxLayer.foreground: Atmosphere(opacity=1.0, blur=0.5, color_shift="saturate(1.15)"),
}


class ParallaxConfig(PlanModel):
    """Layer assignment with optional per-element overrides."""

    layer: ParallaxLayer
    multiplier: Optional[float] = None
    opacity: Optional[float] = None
    blur: Optional[float] = None
    color_shift: Optional[str] = None

    def resolved_multiplier(self) -> float:
        return self.multiplier if self.multiplier is not None else DEFAULT_MULTIPLIERS[self.layer]


class ParallaxTransform(PlanModel):
    x: float
    y: float
    z: float
    scale: float
    opacity: float
    filter: str


def depth_scale(multiplier: float) -> float:
    return 1 - (1 - multiplier) * 0.1


def get_transform(config: ParallaxConfig, camera_x: float, camera_y: float, camera_z: float) -> ParallaxTransform:
    """Offset, scale and atmospherics of a layer for a camera position."""

    multiplier = config.resolved_multiplier()
    atmosphere = ATMOSPHERE[config.layer]
    opacity = config.opacity if config.opacity is not None else atmosphere.opacity
    blur = config.blur if config.blur is not None else atmosphere.blur
    color_shift = config.color_shift if config.color_shift is not None else atmosphere.color_shift

    filters: List[str] = []
    if blur > 0:
        filters.append(f"blur({blur}px)")
    if color_shift:
        filters.append(color_shift)

    return ParallaxTransform(
        x=camera_x * multiplier,
        y=camera_y * multiplier,
        z=camera_z * multiplier,
        scale=depth_scale(multiplier),
        opacity=opacity,
        filter=" ".join(filters),
    )


def layer_style(transform: ParallaxTransform, base: Optional[Mapping[str, object]] = None) -> Dict[str, object]:
    style: Dict[str, object] = dict(base or {})
    style.update(
        {
            "transform": f"translate3d({-transform.x}px, {-transform.y}px, {transform.z}px) scale({transform.scale})",
            "opacity": transform.opacity,
            "filter": transform.filter,
            "willChange": "transform",
        }
    )
    return style


def container_style() -> Dict[str, str]:
    return {
        "position": "relative",
        "width": "100%",
        "height": "100%",
        "overflow": "hidden",
        "perspective": "1000px",
        "perspectiveOrigin": "50% 50%",
    }


def depth_fog(target: Union[ParallaxLayer, ParallaxConfig], fog_color: str = DEFAULT_FOG_COLOR) -> str:
    """Gradient overlay for distant layers, ``none`` when fog would be negligible."""

    if isinstance(target, ParallaxConfig):
        multiplier = target.resolved_multiplier()
    else:
        multiplier = DEFAULT_MULTIPLIERS[ParallaxLayer(target)]
    if 1 - multiplier < FOG_THRESHOLD:
        return "none"
    return f"linear-gradient({fog_color} 0%, transparent 100%)"


def layer_for_depth(z: float) -> ParallaxLayer:
    """Map an element's stacking order onto a parallax tier."""

    if z <= -3:
        return ParallaxLayer.far_background
    if z <= -2:
        return ParallaxLayer.mid_background
    if z <= -1:
        return ParallaxLayer.environment
    if z < 1:
        return ParallaxLayer.mid_ground
    if z < 3:
        return ParallaxLayer.subject
    return ParallaxLayer.foreground


def _default_layer_of(item: object) -> ParallaxLayer:
    if isinstance(item, ParallaxConfig):
        return item.layer
    config = getattr(item, "parallax_config", None)
    if isinstance(config, ParallaxConfig):
        return config.layer
    raise TypeError(f"cannot determine parallax layer of {type(item).__name__}")


def sort_by_depth(items: Sequence[T], layer_of: Optional[Callable[[T], ParallaxLayer]] = None) -> List[T]:
    """Paint order from far-background to foreground; stable within a tier."""

    resolve = layer_of or _default_layer_of
    return sorted(items, key=lambda item: LAYER_ORDER.index(ParallaxLayer(resolve(item))))


def parallax_camera(frame: float, start_frame: float, end_frame: float, start_z: float, end_z: float) -> Tuple[float, float, float]:
    """Camera position for a straight push through the layers."""

    progress = interpolate(frame, (start_frame, end_frame), (0.0, 1.0))
    return 0.0, 0.0, interpolate(progress, (0.0, 1.0), (start_z, end_z))


def camera_drift(base_x: float, base_y: float, frame: float, intensity: float = 5.0) -> Tuple[float, float]:
    """Slow sinusoidal wander added to a camera position."""

    return (
        base_x + math.sin(frame * 0.02) * intensity,
        base_y + math.cos(frame * 0.015) * intensity * 0.6,
    )


def space_scene() -> Dict[str, ParallaxConfig]:
    return {
        "farStars": ParallaxConfig(
            layer=ParallaxLayer.far_background,
            opacity=0.4,
            color_shift="hue-rotate(210deg) saturate(0.6) brightness(0.8)",
        ),
        "nebula": ParallaxConfig(
            layer=ParallaxLayer.mid_background,
            opacity=0.3,
            blur=2,
            color_shift="hue-rotate(270deg) saturate(1.5) brightness(0.6)",
        ),
        "planets": ParallaxConfig(layer=ParallaxLayer.environment, opacity=0.9, color_shift="saturate(1.2)"),
        "floatingCards": ParallaxConfig(layer=ParallaxLayer.mid_ground, opacity=0.95),
        "mainCharacter": ParallaxConfig(layer=ParallaxLayer.subject, opacity=1.0),
        "closeParticles": ParallaxConfig(layer=ParallaxLayer.foreground, opacity=0.6, blur=0.5),
    }


def landscape_scene() -> Dict[str, ParallaxConfig]:
    return {
        "sky": ParallaxConfig(layer=ParallaxLayer.far_background, opacity=0.8),
        "distantMountains": ParallaxConfig(
            layer=ParallaxLayer.mid_background,
            opacity=0.85,
            color_shift="hue-rotate(195deg) saturate(0.7) brightness(0.9)",
        ),
        "terrain": ParallaxConfig(layer=ParallaxLayer.environment, opacity=0.95),
        "vegetation": ParallaxConfig(layer=ParallaxLayer.mid_ground, opacity=1.0),
        "characters": ParallaxConfig(layer=ParallaxLayer.subject, opacity=1.0),
        "foregroundGrass": ParallaxConfig(layer=ParallaxLayer.foreground, opacity=0.8, blur=1),
    }


def interface_scene() -> Dict[str, ParallaxConfig]:
    """Flatter layering for UI-heavy product and data videos."""

    return {
        "background": ParallaxConfig(layer=ParallaxLayer.far_background, opacity=0.5),
        "environment": ParallaxConfig(layer=ParallaxLayer.environment, opacity=0.9),
        "ui": ParallaxConfig(layer=ParallaxLayer.mid_ground, opacity=0.95),
        "characters": ParallaxConfig(layer=ParallaxLayer.subject, opacity=1.0),
        "effects": ParallaxConfig(layer=ParallaxLayer.foreground, opacity=0.7),
    }


__all__ = [
    "ATMOSPHERE",
    "DEFAULT_MULTIPLIERS",
    "LAYER_ORDER",
    "ParallaxConfig",
    "ParallaxLayer",
    "ParallaxTransform",
    "camera_drift",
    "container_style",
    "depth_fog",
    "depth_scale",
    "get_transform",
    "interface_scene",
    "landscape_scene",
    "layer_for_depth",
    "layer_style",
    "parallax_camera",
    "sort_by_depth",
    "space_scene",
]
