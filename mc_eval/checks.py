"""Individual quality checks over a video plan."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

from mc_interp.color import best_contrast
from mc_sdk.loader import DensityRules, PaletteRules, TransitionRules, TypographyRules
from mc_sdk.models import Element, GlobalStyle, QualityIssue, Scene, Severity, VideoPlan

PRIMARY_SHARE = 0.2
SECONDARY_SHARE = 0.5
TERTIARY_SHARE = 0.8

Rating = Literal["poor", "fair", "good", "excellent"]


def prominence(element: Element) -> float:
    """Area weighted by depth; elements further back (higher z) count less."""

    return element.size.width * element.size.height * (1 - element.position.z)


@dataclass
class VisualHierarchy:
    primary: List[Element]
    secondary: List[Element]
    tertiary: List[Element]
    background: List[Element]


def analyze_visual_hierarchy(scene: Scene) -> VisualHierarchy:
    ranked = sorted(scene.elements, key=prominence, reverse=True)
    count = len(ranked)
    cuts = [math.ceil(count * share) for share in (PRIMARY_SHARE, SECONDARY_SHARE, TERTIARY_SHARE)]
    return VisualHierarchy(
        primary=ranked[: cuts[0]],
        secondary=ranked[cuts[0] : cuts[1]],
        tertiary=ranked[cuts[1] : cuts[2]],
        background=ranked[cuts[2] :],
    )


def check_visual_hierarchy(plan: VideoPlan) -> List[QualityIssue]:
    issues: List[QualityIssue] = []
    for scene in plan.scenes:
        hierarchy = analyze_visual_hierarchy(scene)
        if not hierarchy.primary:
            issues.append(
                QualityIssue(
                    severity=Severity.warning,
                    category="visual-hierarchy",
                    message=f'Scene "{scene.id}" lacks a clear primary focus element',
                    scene_id=scene.id,
                )
            )
        if len(hierarchy.primary) > 2:
            issues.append(
                QualityIssue(
                    severity=Severity.info,
                    category="visual-hierarchy",
                    message=f'Scene "{scene.id}" has too many competing primary elements. Simplify for clarity.',
                    scene_id=scene.id,
                )
            )
        if len({element.position.z for element in scene.elements}) == 1:
            issues.append(
                QualityIssue(
                    severity=Severity.info,
                    category="visual-hierarchy",
                    message=f'Scene "{scene.id}" lacks depth. Use multiple z-layers for visual interest.',
                    scene_id=scene.id,
                )
            )
    return issues


@dataclass
class ColorHarmony:
    harmonious: bool
    palette_type: str
    contrast_ratio: float
    accessibility: Rating
    suggestions: List[str] = field(default_factory=list)


def _palette_type(size: int) -> str:
    if size == 1:
        return "monochromatic"
    if 2 <= size <= 3:
        return "analogous"
    if size == 4:
        return "triadic"
    return "mixed"


def _accessibility(ratio: float, rules: PaletteRules) -> Rating:
    if ratio >= 7.0:
        return "excellent"
    if ratio >= rules.min_contrast:
        return "good"
    if ratio >= rules.critical_contrast:
        return "fair"
    return "poor"


def analyze_color_harmony(style: GlobalStyle, rules: PaletteRules) -> ColorHarmony:
    palette = style.color_palette
    measured = best_contrast(palette)
    ratio = rules.min_contrast if measured is None else measured

    suggestions: List[str] = []
    if len(palette) > rules.max_colors:
        suggestions.append("Reduce color palette to 3-5 colors for better cohesion")
    if ratio < rules.min_contrast:
        suggestions.append("Increase contrast between text and background colors")
    if len(palette) < rules.min_colors:
        suggestions.append("Add complementary colors for visual interest")

    return ColorHarmony(
        harmonious=rules.min_colors <= len(palette) <= rules.max_colors,
        palette_type=_palette_type(len(palette)),
        contrast_ratio=round(ratio, 2),
        accessibility=_accessibility(ratio, rules),
        suggestions=suggestions,
    )


def check_color(harmony: ColorHarmony) -> List[QualityIssue]:
    issues: List[QualityIssue] = []
    if not harmony.harmonious:
        issues.append(
            QualityIssue(
                severity=Severity.warning,
                category="color",
                message="Color palette lacks harmony. Consider using complementary or analogous colors.",
            )
        )
    if harmony.accessibility == "poor":
        issues.append(
            QualityIssue(
                severity=Severity.critical,
                category="color",
                message="Insufficient color contrast for accessibility. Increase contrast between text and background.",
            )
        )
    elif harmony.accessibility == "fair":
        issues.append(
            QualityIssue(
                severity=Severity.warning,
                category="color",
                message=f"Color contrast ({harmony.contrast_ratio}:1) is below the recommended 4.5:1.",
            )
        )
    return issues


@dataclass
class TypographyAnalysis:
    primary_font: str
    secondary_font: str
    sizes: Dict[str, float]
    readability: Rating
    hierarchy_issues: List[str] = field(default_factory=list)
    readability_issue: Optional[str] = None

    @property
    def issues(self) -> List[str]:
        extra = [self.readability_issue] if self.readability_issue else []
        return self.hierarchy_issues + extra


def effective_sizes(style: GlobalStyle, rules: TypographyRules) -> Dict[str, float]:
    sizes = style.typography.sizes
    return {key: float(sizes.get(key) or default) for key, default in rules.default_sizes.items()}


def analyze_typography(style: GlobalStyle, rules: TypographyRules) -> TypographyAnalysis:
    sizes = effective_sizes(style, rules)
    hierarchy: List[str] = []
    if sizes["h1"] <= sizes["h2"]:
        hierarchy.append("H1 should be larger than H2 for proper hierarchy")
    if sizes["h2"] <= sizes["body"]:
        hierarchy.append("H2 should be larger than body text")

    readability: Rating = "good"
    readability_issue: Optional[str] = None
    if sizes["body"] < rules.critical_body:
        readability = "poor"
        readability_issue = f"Body text size is too small. Increase to at least {rules.critical_body:g}px"
    elif sizes["body"] < rules.min_body:
        readability = "fair"
        readability_issue = f"Consider increasing body text size to {rules.min_body:g}px or larger"
    elif sizes["body"] >= 18:
        readability = "excellent"

    return TypographyAnalysis(
        primary_font=style.typography.primary,
        secondary_font=style.typography.secondary,
        sizes=sizes,
        readability=readability,
        hierarchy_issues=hierarchy,
        readability_issue=readability_issue,
    )


def check_typography(analysis: TypographyAnalysis) -> List[QualityIssue]:
    issues = [
        QualityIssue(severity=Severity.warning, category="typography", message=message)
        for message in analysis.hierarchy_issues
    ]
    if analysis.readability_issue:
        severity = Severity.critical if analysis.readability == "poor" else Severity.info
        issues.append(QualityIssue(severity=severity, category="typography", message=analysis.readability_issue))
    return issues


def check_scene_density(plan: VideoPlan, rules: DensityRules) -> List[QualityIssue]:
    issues: List[QualityIssue] = []
    for scene in plan.scenes:
        count = len(scene.elements)
        if count > rules.max_elements:
            severity, message = (
                Severity.warning,
                f'Scene "{scene.id}" has too many elements ({count}). '
                f"Reduce to {rules.overcrowded_keep}-{rules.max_elements} for clarity.",
            )
        elif count == 0:
            severity, message = Severity.critical, f'Scene "{scene.id}" has no elements. Add content to this scene.'
        elif count == 1:
            severity, message = (
                Severity.info,
                f'Scene "{scene.id}" has only one element. Consider adding supporting elements.',
            )
        else:
            continue
        issues.append(QualityIssue(severity=severity, category="density", message=message, scene_id=scene.id))
    return issues


def check_transition_variety(plan: VideoPlan, rules: TransitionRules) -> List[QualityIssue]:
    kinds = [scene.transition.type.value for scene in plan.scenes if scene.transition is not None]
    if not kinds:
        return []
    dominant, uses = Counter(kinds).most_common(1)[0]
    if uses <= len(kinds) * rules.dominance_ratio:
        return []
    return [
        QualityIssue(
            severity=Severity.info,
            category="transitions",
            message=f'Transitions are repetitive ({uses} uses of "{dominant}"). Vary for visual interest.',
        )
    ]


__all__ = [
    "ColorHarmony",
    "TypographyAnalysis",
    "VisualHierarchy",
    "analyze_color_harmony",
    "analyze_typography",
    "analyze_visual_hierarchy",
    "check_color",
    "check_scene_density",
    "check_transition_variety",
    "check_typography",
    "check_visual_hierarchy",
    "effective_sizes",
    "prominence",
]
