"""Pydantic models for video plans, color grades and quality reports."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PlanModel(BaseModel):
    """Base model using snake_case attributes and camelCase wire names."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class AnimationType(str, Enum):
    fade = "fade"
    slide = "slide"
    scale = "scale"
    rotate = "rotate"
    custom = "custom"


class TransitionType(str, Enum):
    fade = "fade"
    slide = "slide"
    wipe = "wipe"
    zoom = "zoom"
    cut = "cut"


class Severity(str, Enum):
    critical = "critical"
    warning = "warning"
    info = "info"


class Vec2(PlanModel):
    x: float = 0.0
    y: float = 0.0


class Vec3(PlanModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Size(PlanModel):
    width: float = 0.0
    height: float = 0.0


class Resolution(PlanModel):
    width: int = 1920
    height: int = 1080


class AnimationPattern(PlanModel):
    """Single named animation applied to an element or scene."""

    name: str
    type: AnimationType = AnimationType.fade
    duration: float = Field(default=0.5, ge=0.0)
    delay: float = Field(default=0.0, ge=0.0)
    easing: str = "easeOut"
    properties: Dict[str, Any] = Field(default_factory=dict)


class Transition(PlanModel):
    type: TransitionType
    duration: float = Field(default=0.5, ge=0.0)


class Element(PlanModel):
    """Positioned visual element inside a scene."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: str = "text"
    content: Optional[Any] = None
    position: Vec3 = Field(default_factory=Vec3)
    size: Size = Field(default_factory=Size)
    style: Dict[str, Any] = Field(default_factory=dict)
    animation: Optional[AnimationPattern] = None


class Scene(PlanModel):
    """Time slice of the plan holding ordered elements."""

    model_config = ConfigDict(extra="allow")

    id: str
    start_time: float = Field(default=0.0, ge=0.0)
    duration: float = Field(default=5.0, ge=0.0)
    description: str = ""
    elements: List[Element] = Field(default_factory=list)
    animations: List[AnimationPattern] = Field(default_factory=list)
    transition: Optional[Transition] = None

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration


class Typography(PlanModel):
    primary: str = "Inter"
    secondary: str = "Inter"
    sizes: Dict[str, float] = Field(default_factory=dict)


class GlobalStyle(PlanModel):
    color_palette: List[str] = Field(default_factory=list)
    typography: Typography = Field(default_factory=Typography)
    spacing: float = 24.0
    border_radius: float = 8.0


class VideoPlan(PlanModel):
    """Abstract video plan produced upstream of the pipeline."""

    model_config = ConfigDict(extra="allow")

    id: str = "plan"
    duration: float = Field(gt=0.0)
    fps: int = Field(default=30, gt=0)
    resolution: Resolution = Field(default_factory=Resolution)
    aspect_ratio: str = "16:9"
    scenes: List[Scene] = Field(min_length=1)
    style: GlobalStyle = Field(default_factory=GlobalStyle)

    @property
    def total_frames(self) -> int:
        return int(self.duration * self.fps)

    def all_elements(self) -> List[Element]:
        return [element for scene in self.scenes for element in scene.elements]

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-compatible camelCase representation."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ColorGrade(PlanModel):
    """Fully specified color grade."""

    temperature: float
    tint: float
    saturation: float
    contrast: float
    brightness: float
    shadows: str
    midtones: str
    highlights: str
    vignette: float = Field(ge=0.0, le=1.0)


class PartialColorGrade(PlanModel):
    """Color grade where any field may be left to the neutral default."""

    temperature: Optional[float] = None
    tint: Optional[float] = None
    saturation: Optional[float] = None
    contrast: Optional[float] = None
    brightness: Optional[float] = None
    shadows: Optional[str] = None
    midtones: Optional[str] = None
    highlights: Optional[str] = None
    vignette: Optional[float] = None


class QualityIssue(PlanModel):
    severity: Severity
    category: str
    message: str
    scene_id: Optional[str] = None
    element_id: Optional[str] = None


class QualityImprovement(PlanModel):
    category: str
    suggestion: str
    impact: Literal["high", "medium", "low"] = "medium"


class QualityReport(PlanModel):
    """Scored assessment of a plan."""

    score: int = Field(ge=0, le=100)
    overall: Literal["poor", "fair", "good", "excellent"]
    issues: List[QualityIssue] = Field(default_factory=list)
    improvements: List[QualityImprovement] = Field(default_factory=list)

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)


__all__ = [
    "AnimationPattern",
    "AnimationType",
    "ColorGrade",
    "Element",
    "GlobalStyle",
    "PartialColorGrade",
    "PlanModel",
    "QualityImprovement",
    "QualityIssue",
    "QualityReport",
    "Resolution",
    "Scene",
    "Severity",
    "Size",
    "Transition",
    "TransitionType",
    "Typography",
    "Vec2",
    "Vec3",
    "VideoPlan",
]
