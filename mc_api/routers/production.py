"""Production pipeline endpoints: optimize, enhance and generate."""
from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from mc_api.utils import err, ok
from mc_compose.config import ProductionConfig
from mc_compose.enhance import generate_enhanced_plan
from mc_compose.generate import generate_video
from mc_compose.models import EnhanceOptions, ProductionOptions, VideoStyle
from mc_compose.orchestrator import ProductionOrchestrator
from mc_sdk.models import VideoPlan

logger = structlog.get_logger(__name__)
router = APIRouter()


class OptimizeRequest(BaseModel):
    plan: VideoPlan
    options: Optional[ProductionOptions] = None
    full: bool = False
    trace: bool = False


@router.post("/production/optimize")
def production_optimize(payload: OptimizeRequest):
    orchestrator = ProductionOrchestrator()
    options = payload.options
    if payload.full and options is None:
        options = ProductionOptions(
            target_platform="youtube", quality_threshold=orchestrator.config.full_quality_threshold
        )
    try:
        result = orchestrator.run(payload.plan, options)
    except ValueError as exc:
        logger.warning("api.production.optimize.failed", plan_id=payload.plan.id, error=str(exc))
        return err([str(exc)])
    data = {
        "plan": result.plan.to_wire(),
        "report": result.report.model_dump(mode="json", by_alias=True),
    }
    if payload.trace:
        data["trace"] = result.trace.as_dict()
    return ok(data, warnings=result.report.warnings)


class EnhanceRequest(BaseModel):
    plan: VideoPlan
    options: EnhanceOptions = Field(default_factory=EnhanceOptions)


@router.post("/production/enhance")
def production_enhance(payload: EnhanceRequest):
    try:
        enhanced = generate_enhanced_plan(payload.plan, payload.options)
    except ValueError as exc:
        return err([str(exc)])
    return ok(enhanced.to_wire())


class GenerateRequest(BaseModel):
    prompt: str = Field(min_length=1)
    duration: float = Field(default=30.0, gt=0.0)
    fps: Optional[int] = Field(default=None, gt=0)
    style: Optional[VideoStyle] = None
    aspect_ratio: str = "16:9"


@router.post("/production/generate")
def production_generate(payload: GenerateRequest):
    fps = payload.fps or ProductionConfig.from_env().default_fps
    try:
        enhanced = generate_video(
            payload.prompt,
            payload.duration,
            style=payload.style,
            fps=fps,
            aspect_ratio=payload.aspect_ratio,
        )
    except ValueError as exc:
        return err([str(exc)])
    return ok(enhanced.to_wire())
