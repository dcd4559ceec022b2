"""Quality scoring and enforcement for video plans."""
from __future__ import annotations

from typing import List, Optional, Tuple

import structlog

from mc_sdk.loader import ScoreBuckets, ThresholdsConfig, get_thresholds_config
from mc_sdk.models import QualityImprovement, QualityIssue, QualityReport, Severity, VideoPlan

from .checks import (
    analyze_color_harmony,
    analyze_typography,
    check_color,
    check_scene_density,
    check_transition_variety,
    check_typography,
    check_visual_hierarchy,
)
from .fixes import fix_palette, fix_transitions, fix_typography

logger = structlog.get_logger(__name__)

DENSITY_SUGGESTION = "Split crowded scenes or remove secondary elements to keep 6-8 per scene"


def bucket(score: int, buckets: ScoreBuckets) -> str:
    if score >= buckets.excellent:
        return "excellent"
    if score >= buckets.good:
        return "good"
    if score >= buckets.fair:
        return "fair"
    return "poor"


def score_issues(issues: List[QualityIssue], thresholds: ThresholdsConfig) -> int:
    critical = sum(1 for issue in issues if issue.severity == Severity.critical)
    warnings = sum(1 for issue in issues if issue.severity == Severity.warning)
    penalty = critical * thresholds.scoring.critical_penalty + warnings * thresholds.scoring.warning_penalty
    return max(0, 100 - penalty)


class QualityStandards:
    """Scores plans against production rules and applies safe fixes."""

    def __init__(self, thresholds: Optional[ThresholdsConfig] = None) -> None:
        self._thresholds = thresholds

    @property
    def thresholds(self) -> ThresholdsConfig:
        return self._thresholds or get_thresholds_config()

    def assess(self, plan: VideoPlan) -> QualityReport:
        cfg = self.thresholds
        harmony = analyze_color_harmony(plan.style, cfg.palette)
        typography = analyze_typography(plan.style, cfg.typography)
        density_issues = check_scene_density(plan, cfg.density)

        issues: List[QualityIssue] = []
        issues.extend(check_visual_hierarchy(plan))
        issues.extend(check_color(harmony))
        issues.extend(check_typography(typography))
        issues.extend(density_issues)
        issues.extend(check_transition_variety(plan, cfg.transitions))

        improvements: List[QualityImprovement] = []
        if harmony.suggestions:
            improvements.append(QualityImprovement(category="color", suggestion=harmony.suggestions[0], impact="high"))
        if typography.issues:
            improvements.append(
                QualityImprovement(category="typography", suggestion=typography.issues[0], impact="medium")
            )
        if any(issue.severity == Severity.warning for issue in density_issues):
            improvements.append(QualityImprovement(category="density", suggestion=DENSITY_SUGGESTION, impact="low"))

        score = score_issues(issues, cfg)
        report = QualityReport(
            score=score,
            overall=bucket(score, cfg.buckets),
            issues=issues,
            improvements=improvements,
        )
        logger.debug(
            "quality.assessed",
            plan_id=plan.id,
            score=report.score,
            overall=report.overall,
            critical=report.count(Severity.critical),
            warnings=report.count(Severity.warning),
        )
        return report

    def enforce(self, plan: VideoPlan) -> Tuple[VideoPlan, QualityReport]:
        """Assess ``plan`` then return the fixed plan with the pre-fix report."""

        cfg = self.thresholds
        report = self.assess(plan)
        fixed = fix_palette(plan, cfg.palette)
        fixed = fix_typography(fixed, cfg.typography)
        fixed = fix_transitions(fixed)
        logger.info("quality.enforced", plan_id=plan.id, score=report.score, overall=report.overall)
        return fixed, report


__all__ = ["QualityStandards", "bucket", "score_issues"]
