from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from conftest import plan_payload
from mc_sdk.cli import app

runner = CliRunner()

WEAK_STYLE = {
    "colorPalette": ["#000000", "#ffffff", "#3b82f6", "#10b981", "#f59e0b", "#ef4444"],
    "typography": {"sizes": {"h1": 30, "h2": 40, "body": 12}},
}


def _write_plan(tmp_path: Path, **overrides) -> Path:
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(plan_payload(**overrides)), encoding="utf-8")
    return path


def test_optimize_writes_plan_and_report(tmp_path: Path) -> None:
    plan_path = _write_plan(tmp_path)
    out = tmp_path / "optimized.json"

    result = runner.invoke(app, ["optimize", str(plan_path), "--content-type", "tech", "--out", str(out)])

    assert result.exit_code == 0, result.output
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["plan"]["id"] == "plan-demo"
    assert payload["report"]["motionStyle"] == "tech"
    assert payload["report"]["qualityThreshold"] == 70


def test_optimize_full_uses_stricter_threshold(tmp_path: Path) -> None:
    out = tmp_path / "full.json"
    result = runner.invoke(app, ["optimize", str(_write_plan(tmp_path)), "--full", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["report"]["qualityThreshold"] == 80


def test_score_prints_issues_and_improvements(tmp_path: Path) -> None:
    result = runner.invoke(app, ["score", str(_write_plan(tmp_path, style=WEAK_STYLE))])
    assert result.exit_code == 0, result.output
    assert "score: 60/100 (fair)" in result.stdout
    assert "- [critical] typography: Body text size is too small." in result.stdout
    assert "-- improvements --" in result.stdout


def test_unreadable_plan_exits_nonzero(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["score", str(broken)])
    assert result.exit_code == 1
    assert "Failed to read plan" in result.stdout


def test_enhance_and_generate_write_enhanced_plans(tmp_path: Path) -> None:
    enhanced_out = tmp_path / "enhanced.json"
    result = runner.invoke(
        app, ["enhance", str(_write_plan(tmp_path)), "--style", "data-story", "--seed", "s", "--out", str(enhanced_out)]
    )
    assert result.exit_code == 0, result.output
    enhanced = json.loads(enhanced_out.read_text(encoding="utf-8"))
    assert enhanced["sophisticatedMetadata"]["videoStyle"] == "data-story"

    generated_out = tmp_path / "generated.json"
    result = runner.invoke(
        app, ["generate", "-p", "Space tour of our stats", "-d", "8", "--out", str(generated_out)]
    )
    assert result.exit_code == 0, result.output
    generated = json.loads(generated_out.read_text(encoding="utf-8"))
    assert generated["sophisticatedMetadata"]["videoStyle"] == "space-journey"
    assert generated["duration"] == 8


def test_generate_rejects_bad_style(tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", "-p", "Anything", "--style", "vaporwave"])
    assert result.exit_code == 1
    assert "Generation failed" in result.stdout


def test_camera_previews() -> None:
    orbital = runner.invoke(app, ["camera", "orbital", "--frames", "100", "--samples", "3"])
    assert orbital.exit_code == 0, orbital.output
    assert "frame     0: x=  -400.00" in orbital.stdout
    assert "frame   100:" in orbital.stdout

    forward = runner.invoke(app, ["camera", "forward", "--frames", "0"])
    assert forward.exit_code == 1


def test_config_versions_lists_tables() -> None:
    result = runner.invoke(app, ["config", "versions"])
    assert result.exit_code == 0, result.output
    for name in ("pacing", "moods", "thresholds"):
        assert f"{name}: v1.0 sha256=" in result.stdout
