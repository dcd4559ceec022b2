"""Five-phase production pipeline over planner, motion library and quality rules."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import structlog

from mc_eval.evaluator import QualityStandards
from mc_motion.library import MotionDesignLibrary
from mc_motion.presets import MotionStyle
from mc_plan.pacing import DATA_ELEMENT_TYPES, TECH_ELEMENT_TYPES, has_element_type
from mc_plan.planner import PlannerOptions, ScenePlanner
from mc_sdk.models import Severity, VideoPlan

from .config import ProductionConfig
from .models import Platform, ProductionOptions, ProductionReport
from .trace import ProductionTrace

logger = structlog.get_logger(__name__)

CONTENT_STYLES = {
    "product": MotionStyle.creative,
    "saas": MotionStyle.tech,
    "lifestyle": MotionStyle.social,
    "tech": MotionStyle.tech,
    "corporate": MotionStyle.corporate,
    "social": MotionStyle.social,
    "cinematic": MotionStyle.cinematic,
}

PLATFORM_STYLES = {
    "youtube": MotionStyle.creative,
    "social": MotionStyle.social,
    "presentation": MotionStyle.corporate,
    "web": MotionStyle.tech,
}

SHORT_VIDEO_SECONDS = 30
LONG_VIDEO_SECONDS = 90


def infer_motion_style(plan: VideoPlan, options: ProductionOptions) -> MotionStyle:
    if options.content_type in CONTENT_STYLES:
        return CONTENT_STYLES[options.content_type]
    if options.target_platform in PLATFORM_STYLES:
        return PLATFORM_STYLES[options.target_platform]
    if plan.duration < SHORT_VIDEO_SECONDS:
        return MotionStyle.social
    if plan.duration > LONG_VIDEO_SECONDS:
        return MotionStyle.cinematic
    if has_element_type(plan, TECH_ELEMENT_TYPES):
        return MotionStyle.tech
    if has_element_type(plan, DATA_ELEMENT_TYPES):
        return MotionStyle.corporate
    return MotionStyle.creative


@dataclass
class ProductionResult:
    plan: VideoPlan
    report: ProductionReport
    trace: ProductionTrace


class ProductionOrchestrator:
    """Runs assessment, planning, motion design, enforcement and polish."""

    def __init__(
        self,
        planner: Optional[ScenePlanner] = None,
        quality: Optional[QualityStandards] = None,
        motion: Optional[MotionDesignLibrary] = None,
        config: Optional[ProductionConfig] = None,
    ) -> None:
        self.planner = planner or ScenePlanner()
        self.quality = quality or QualityStandards()
        self.motion = motion or MotionDesignLibrary()
        self.config = config or ProductionConfig.from_env()

    def run(self, plan: VideoPlan, options: Optional[ProductionOptions] = None) -> ProductionResult:
        opts = options or ProductionOptions()
        started = time.perf_counter()
        trace = ProductionTrace(plan_id=plan.id)
        applied: List[str] = []
        warnings: List[str] = []
        recommendations: List[str] = []

        logger.info("production.started", plan_id=plan.id, scenes=len(plan.scenes), duration=plan.duration)

        # Phase 1: baseline, informational only
        initial = self.quality.assess(plan)
        trace.record("assessment", True, score=initial.score, overall=initial.overall)
        current = plan

        # Phase 2: scene planning
        if opts.enable_intelligent_pacing:
            planner_options = PlannerOptions(
                content_type=opts.content_type,
                enable_perspective=opts.allow_pov_changes,
                enable_transitions=opts.enable_transition_choreography,
                enable_composition=opts.enable_auto_composition,
                enable_hook=opts.emphasize_hook,
            )
            current, trace.planning = self.planner.plan(current, planner_options)
            applied.append("Advanced scene pacing and structure")
            applied.append("Narrative arc optimization")
            if opts.allow_pov_changes:
                applied.append("Camera perspective and POV changes")
            if opts.enable_transition_choreography:
                applied.append("Intelligent transition choreography")
            if opts.enable_auto_composition:
                applied.append("Scene composition balancing")
        trace.record("planning", opts.enable_intelligent_pacing)

        # Phase 3: motion design
        style = opts.motion_style or infer_motion_style(current, opts)
        scenes = self.motion.apply_animation_presets(current.scenes, style)
        base = self.motion.get_preset(style).animations[0]
        scenes = [
            scene.model_copy(
                update={"elements": self.motion.create_coordinated_animation(scene.elements, "staggered", base)}
            )
            if len(scene.elements) > 1
            else scene
            for scene in scenes
        ]
        current = current.model_copy(update={"scenes": scenes})
        applied.append(f"Professional {style.value} motion design")
        applied.append("Entrance and exit animations")
        applied.append("Coordinated multi-element animations")
        trace.record("motion", True, style=style.value)

        # Phase 4: quality enforcement
        threshold = opts.quality_threshold if opts.quality_threshold is not None else self.config.quality_threshold
        final_score = initial.score
        if opts.enforce_quality:
            current, report = self.quality.enforce(current)
            final_score = report.score
            warnings.extend(
                issue.message for issue in report.issues if issue.severity in (Severity.critical, Severity.warning)
            )
            recommendations.extend(improvement.suggestion for improvement in report.improvements)
            applied.extend(
                [
                    "Visual hierarchy optimization",
                    "Color harmony and palette optimization",
                    "Typography hierarchy enforcement",
                    "Transition variety optimization",
                ]
            )
            if final_score < threshold:
                warnings.append(
                    f"Quality score ({final_score}) is below threshold ({threshold:g}). Consider manual review."
                )
        trace.record("quality", opts.enforce_quality, score=final_score, threshold=threshold)

        # Phase 5: polish
        current = current.model_copy(
            update={
                "scenes": [
                    scene if scene.description else scene.model_copy(update={"description": f"Scene {index + 1}"})
                    for index, scene in enumerate(current.scenes)
                ]
            }
        )
        trace.record("polish", True)

        elapsed_ms = round((time.perf_counter() - started) * 1000, 3)
        report = ProductionReport(
            plan_id=current.id,
            motion_style=style,
            optimizations_applied=applied,
            initial_score=initial.score,
            quality_score=final_score,
            quality_improvement=final_score - initial.score if opts.enforce_quality else 0,
            quality_threshold=threshold,
            processing_time=elapsed_ms,
            warnings=warnings,
            recommendations=recommendations,
        )
        logger.info(
            "production.completed",
            plan_id=current.id,
            style=style.value,
            score=final_score,
            improvement=report.quality_improvement,
            optimizations=len(applied),
            warnings=len(warnings),
            elapsed_ms=elapsed_ms,
        )
        return ProductionResult(plan=current, report=report, trace=trace)

    def produce(
        self, plan: VideoPlan, options: Optional[ProductionOptions] = None
    ) -> Tuple[VideoPlan, ProductionReport]:
        result = self.run(plan, options)
        return result.plan, result.report

    def quick_optimize(self, plan: VideoPlan) -> VideoPlan:
        """Essential passes with the relaxed quick threshold; returns only the plan."""

        optimized, _ = self.produce(plan, ProductionOptions(quality_threshold=self.config.quick_quality_threshold))
        return optimized

    def full_production(
        self,
        plan: VideoPlan,
        content_type: Optional[str] = None,
        target_platform: Optional[Platform] = "youtube",
    ) -> Tuple[VideoPlan, ProductionReport]:
        options = ProductionOptions(
            content_type=content_type,
            target_platform=target_platform,
            emphasize_hook=True,
            allow_pov_changes=True,
            enforce_quality=True,
            enable_auto_composition=True,
            enable_intelligent_pacing=True,
            enable_transition_choreography=True,
            quality_threshold=self.config.full_quality_threshold,
        )
        return self.produce(plan, options)


__all__ = ["ProductionOrchestrator", "ProductionResult", "infer_motion_style"]
