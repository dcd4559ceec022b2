"""Production options, reports and the enhanced plan envelope."""
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import Field

from mc_engines.camera import CameraPath
from mc_engines.grading import ColorGrading
from mc_engines.parallax import ParallaxConfig
from mc_engines.paths import CurvedPathAnimation
from mc_motion.presets import MotionStyle
from mc_sdk.models import PlanModel, VideoPlan

Platform = Literal["youtube", "social", "presentation", "web"]
VideoStyle = Literal["space-journey", "product-launch", "data-story", "cinematic"]
ProductionGrade = Literal["basic", "enhanced", "professional", "cinematic"]


class ProductionOptions(PlanModel):
    emphasize_hook: bool = True
    allow_pov_changes: bool = True
    content_type: Optional[str] = None
    target_platform: Optional[Platform] = None
    motion_style: Optional[MotionStyle] = None
    enforce_quality: bool = True
    quality_threshold: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    enable_auto_composition: bool = True
    enable_intelligent_pacing: bool = True
    enable_transition_choreography: bool = True


class ProductionReport(PlanModel):
    plan_id: str
    motion_style: MotionStyle
    optimizations_applied: List[str] = Field(default_factory=list)
    initial_score: int
    quality_score: int
    quality_improvement: int
    quality_threshold: float
    processing_time: float = Field(description="milliseconds")
    warnings: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class EnhanceOptions(PlanModel):
    style: Optional[VideoStyle] = None
    seed: Optional[str] = None
    content_type: Optional[str] = None
    target_platform: Platform = "youtube"
    motion_style: Optional[MotionStyle] = None
    enable_camera: bool = True
    enable_paths: bool = True
    enable_parallax: bool = True
    enable_grading: bool = True
    full_production: bool = True


class SophisticatedMetadata(PlanModel):
    video_style: str
    uses_orbital_camera: bool
    uses_forward_tracking: bool
    uses_curved_paths: bool
    uses_parallax: bool
    uses_color_grading: bool
    active_subsystems: int = Field(ge=0, le=4)
    base_quality_score: int
    final_quality_score: int = Field(ge=0, le=100)
    production_grade: ProductionGrade


class EnhancedVideoPlan(VideoPlan):
    """Optimized plan plus the frame-driven enrichment layers."""

    camera_path: Optional[CameraPath] = None
    character_paths: Dict[str, CurvedPathAnimation] = Field(default_factory=dict)
    parallax_config: Optional[Dict[str, ParallaxConfig]] = None
    color_grading: Optional[ColorGrading] = None
    sophisticated_metadata: Optional[SophisticatedMetadata] = None


__all__ = [
    "EnhanceOptions",
    "EnhancedVideoPlan",
    "Platform",
    "ProductionGrade",
    "ProductionOptions",
    "ProductionReport",
    "SophisticatedMetadata",
    "VideoStyle",
]
