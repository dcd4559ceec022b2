"""Production quality scoring and fixes."""
from __future__ import annotations

from .checks import ColorHarmony, TypographyAnalysis, VisualHierarchy, analyze_visual_hierarchy, prominence
from .evaluator import QualityStandards, bucket, score_issues
from .fixes import fix_palette, fix_transitions, fix_typography

__all__ = [
    "ColorHarmony",
    "QualityStandards",
    "TypographyAnalysis",
    "VisualHierarchy",
    "analyze_visual_hierarchy",
    "bucket",
    "fix_palette",
    "fix_transitions",
    "fix_typography",
    "prominence",
    "score_issues",
]
