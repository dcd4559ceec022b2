"""Quality assessment, scoring buckets and automatic fixes."""
from __future__ import annotations

import pytest

from mc_eval.checks import (
    analyze_color_harmony,
    analyze_typography,
    analyze_visual_hierarchy,
    check_scene_density,
    check_transition_variety,
    prominence,
)
from mc_eval.evaluator import QualityStandards, bucket
from mc_eval.fixes import fix_palette, fix_transitions, fix_typography
from mc_sdk.loader import ScoreBuckets, get_thresholds_config
from mc_sdk.models import (
    Element,
    GlobalStyle,
    Scene,
    Severity,
    Size,
    Transition,
    TransitionType,
    Typography,
    Vec3,
    VideoPlan,
)


@pytest.fixture(scope="module")
def thresholds():
    return get_thresholds_config()


def _style(palette=None, sizes=None) -> GlobalStyle:
    return GlobalStyle(color_palette=palette or [], typography=Typography(sizes=sizes or {}))


def test_clean_plan_scores_excellent(simple_plan: VideoPlan) -> None:
    report = QualityStandards().assess(simple_plan)
    assert report.score == 100
    assert report.overall == "excellent"
    assert report.count(Severity.critical) == 0
    assert report.improvements == []


def test_one_critical_and_two_warnings_score_sixty(weak_plan: VideoPlan) -> None:
    report = QualityStandards().assess(weak_plan)

    assert report.count(Severity.critical) == 1
    assert report.count(Severity.warning) == 2
    assert report.score == 60
    assert report.overall == "fair"
    assert [improvement.category for improvement in report.improvements] == ["color", "typography"]
    assert report.improvements[0].impact == "high"


@pytest.mark.parametrize(
    ("score", "expected"),
    [(100, "excellent"), (90, "excellent"), (89, "good"), (70, "good"), (50, "fair"), (49, "poor"), (0, "poor")],
)
def test_score_buckets(score: int, expected: str) -> None:
    assert bucket(score, ScoreBuckets()) == expected


def test_visual_hierarchy_ranks_by_prominence() -> None:
    big = Element(id="big", size=Size(width=800, height=600), position=Vec3(z=0))
    far = Element(id="far", size=Size(width=800, height=600), position=Vec3(z=0.9))
    small = Element(id="small", size=Size(width=100, height=100), position=Vec3(z=0))
    hierarchy = analyze_visual_hierarchy(Scene(id="s", elements=[small, far, big]))

    assert prominence(far) == pytest.approx(800 * 600 * 0.1)
    assert [element.id for element in hierarchy.primary] == ["big"]
    assert [element.id for element in hierarchy.secondary] == ["far"]
    assert [element.id for element in hierarchy.tertiary] == ["small"]
    assert hierarchy.background == []


def test_low_contrast_is_critical(thresholds) -> None:
    harmony = analyze_color_harmony(_style(["#777777", "#888888"]), thresholds.palette)
    assert harmony.accessibility == "poor"
    assert harmony.contrast_ratio < 3
    assert "Increase contrast between text and background colors" in harmony.suggestions


def test_middling_contrast_is_a_warning(simple_plan: VideoPlan) -> None:
    style = simple_plan.style.model_copy(update={"color_palette": ["#ffffff", "#3b82f6"]})
    report = QualityStandards().assess(simple_plan.model_copy(update={"style": style}))
    messages = [issue.message for issue in report.issues if issue.category == "color"]
    assert len(messages) == 1
    assert messages[0].startswith("Color contrast (3.")
    assert messages[0].endswith("is below the recommended 4.5:1.")


def test_contrast_defaults_when_palette_is_unreadable(thresholds) -> None:
    harmony = analyze_color_harmony(_style(["teal"]), thresholds.palette)
    assert harmony.contrast_ratio == pytest.approx(4.5)
    assert harmony.palette_type == "monochromatic"
    assert not harmony.harmonious


def test_typography_readability(thresholds) -> None:
    tiny = analyze_typography(_style(sizes={"body": 12}), thresholds.typography)
    assert tiny.readability == "poor"
    assert tiny.sizes == {"h1": 48.0, "h2": 36.0, "body": 12.0}

    small = analyze_typography(_style(sizes={"body": 15}), thresholds.typography)
    assert small.readability == "fair"

    inverted = analyze_typography(_style(sizes={"h1": 20, "h2": 20, "body": 20}), thresholds.typography)
    assert inverted.hierarchy_issues == [
        "H1 should be larger than H2 for proper hierarchy",
        "H2 should be larger than body text",
    ]
    assert inverted.readability == "excellent"


def test_scene_density_messages(thresholds) -> None:
    plan = VideoPlan(
        duration=10,
        scenes=[
            Scene(id="empty"),
            Scene(id="lonely", elements=[Element(id="a")]),
            Scene(id="crowded", elements=[Element(id=f"e{index}") for index in range(9)]),
        ],
    )
    issues = check_scene_density(plan, thresholds.density)
    assert [(issue.scene_id, issue.severity) for issue in issues] == [
        ("empty", Severity.critical),
        ("lonely", Severity.info),
        ("crowded", Severity.warning),
    ]
    assert issues[2].message == 'Scene "crowded" has too many elements (9). Reduce to 6-8 for clarity.'


def test_repetitive_transitions_are_flagged(thresholds) -> None:
    fade = Transition(type=TransitionType.fade)
    scenes = [Scene(id=f"s{index}", transition=fade) for index in range(4)]
    scenes.append(Scene(id="s4", transition=Transition(type=TransitionType.wipe)))
    issues = check_transition_variety(VideoPlan(duration=10, scenes=scenes), thresholds.transitions)
    assert len(issues) == 1
    assert issues[0].message == 'Transitions are repetitive (4 uses of "fade"). Vary for visual interest.'


def test_palette_fixes(thresholds, weak_plan: VideoPlan) -> None:
    trimmed = fix_palette(weak_plan, thresholds.palette)
    assert len(trimmed.style.color_palette) == 5

    sparse = weak_plan.model_copy(update={"style": _style(["#000000"])})
    padded = fix_palette(sparse, thresholds.palette)
    assert padded.style.color_palette == ["#000000", "#3b82f6", "#10b981"]


def test_typography_fix_restores_the_ladder(thresholds, weak_plan: VideoPlan) -> None:
    fixed = fix_typography(weak_plan, thresholds.typography)
    sizes = fixed.style.typography.sizes
    assert sizes["body"] == 16
    assert sizes["h2"] == 40
    assert sizes["h1"] == pytest.approx(56)

    body_only = weak_plan.model_copy(update={"style": _style(sizes={"body": 40})})
    sizes = fix_typography(body_only, thresholds.typography).style.typography.sizes
    assert sizes["h2"] == pytest.approx(60)
    assert sizes["h1"] == pytest.approx(84)


def test_transition_fix_round_robins_missing_ones(simple_plan: VideoPlan) -> None:
    scenes = list(simple_plan.scenes)
    scenes[1] = scenes[1].model_copy(update={"transition": Transition(type=TransitionType.zoom, duration=1.0)})
    fixed = fix_transitions(simple_plan.model_copy(update={"scenes": scenes}))
    assert [scene.transition.type for scene in fixed.scenes] == [
        TransitionType.fade,
        TransitionType.zoom,
        TransitionType.wipe,
    ]
    assert fixed.scenes[0].transition.duration == pytest.approx(0.5)


def test_enforce_returns_fixed_plan_with_prefix_report(weak_plan: VideoPlan) -> None:
    fixed, report = QualityStandards().enforce(weak_plan)
    assert report.score == 60
    assert len(fixed.style.color_palette) == 5
    assert all(scene.transition is not None for scene in fixed.scenes)
    assert QualityStandards().assess(fixed).score > report.score
