"""Production orchestration and enhanced plan assembly."""
from __future__ import annotations

from .config import ProductionConfig
from .enhance import generate_enhanced_plan
from .generate import generate_base_plan, generate_video, infer_content_type_from_prompt, infer_video_style
from .models import EnhancedVideoPlan, EnhanceOptions, ProductionOptions, ProductionReport, SophisticatedMetadata
from .orchestrator import ProductionOrchestrator, ProductionResult, infer_motion_style
from .trace import ProductionTrace

__all__ = [
    "EnhanceOptions",
    "EnhancedVideoPlan",
    "ProductionConfig",
    "ProductionOptions",
    "ProductionOrchestrator",
    "ProductionReport",
    "ProductionResult",
    "ProductionTrace",
    "SophisticatedMetadata",
    "generate_base_plan",
    "generate_enhanced_plan",
    "generate_video",
    "infer_content_type_from_prompt",
    "infer_motion_style",
    "infer_video_style",
]
