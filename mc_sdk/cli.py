"""Command line entry point for plan optimization, scoring and previews."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import typer

from mc_compose.enhance import generate_enhanced_plan
from mc_compose.generate import generate_video
from mc_compose.models import EnhanceOptions, ProductionOptions
from mc_compose.orchestrator import ProductionOrchestrator
from mc_engines.camera import CameraPath, forward_tracking_path, orbital_path
from mc_eval.evaluator import QualityStandards
from mc_sdk.models import Vec3, VideoPlan
from mc_sdk.versioning import config_versions

app = typer.Typer(help="Motion composer utilities")
camera_app = typer.Typer(help="Camera path previews")
config_app = typer.Typer(help="Config table commands")
app.add_typer(camera_app, name="camera")
app.add_typer(config_app, name="config")

# keep stdout clean for JSON output
structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))


def _read_plan(path: Path) -> VideoPlan:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return VideoPlan.model_validate(payload)
    except Exception as exc:  # noqa: BLE001 - surfaced to CLI
        typer.echo(f"Failed to read plan: {exc}")
        raise typer.Exit(code=1) from exc


def _emit(payload: Dict[str, Any], out: Optional[Path]) -> None:
    text = json.dumps(payload, indent=2, sort_keys=True)
    if out is None:
        typer.echo(text)
        return
    out.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"wrote {out}")


@app.command("optimize")
def optimize(
    plan_path: Path = typer.Argument(..., help="Path to a video plan JSON file"),
    full: bool = typer.Option(False, "--full", help="Run full production with the stricter threshold"),
    threshold: Optional[float] = typer.Option(None, "--threshold", help="Quality threshold override"),
    content_type: Optional[str] = typer.Option(None, "--content-type", help="Pacing profile to use"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the result here instead of stdout"),
) -> None:
    """Run the production pipeline over a plan."""

    plan = _read_plan(plan_path)
    orchestrator = ProductionOrchestrator()
    try:
        if full and threshold is None:
            optimized, report = orchestrator.full_production(plan, content_type)
        else:
            options = ProductionOptions(content_type=content_type, quality_threshold=threshold)
            optimized, report = orchestrator.produce(plan, options)
    except Exception as exc:  # noqa: BLE001 - surfaced to CLI
        typer.echo(f"Optimization failed: {exc}")
        raise typer.Exit(code=1) from exc
    _emit({"plan": optimized.to_wire(), "report": report.model_dump(mode="json", by_alias=True)}, out)


@app.command("score")
def score(plan_path: Path = typer.Argument(..., help="Path to a video plan JSON file")) -> None:
    """Print the quality score and issues without changing the plan."""

    report = QualityStandards().assess(_read_plan(plan_path))
    typer.echo(f"score: {report.score}/100 ({report.overall})")
    for issue in report.issues:
        typer.echo(f"- [{issue.severity.value}] {issue.category}: {issue.message}")
    if report.improvements:
        typer.echo("-- improvements --")
        for improvement in report.improvements:
            typer.echo(f"- ({improvement.impact}) {improvement.suggestion}")


@app.command("enhance")
def enhance(
    plan_path: Path = typer.Argument(..., help="Path to a video plan JSON file"),
    style: Optional[str] = typer.Option(None, "--style", help="space-journey, product-launch, data-story, cinematic"),
    seed: Optional[str] = typer.Option(None, "--seed", help="Seed for path jitter; defaults to the plan id"),
    out: Optional[Path] = typer.Option(None, "--out", "-o"),
) -> None:
    """Optimize a plan and attach camera, paths, parallax and grading."""

    plan = _read_plan(plan_path)
    try:
        enhanced = generate_enhanced_plan(plan, EnhanceOptions(style=style, seed=seed))
    except Exception as exc:  # noqa: BLE001 - surfaced to CLI
        typer.echo(f"Enhancement failed: {exc}")
        raise typer.Exit(code=1) from exc
    _emit(enhanced.to_wire(), out)


@app.command("generate")
def generate(
    prompt: str = typer.Option(..., "--prompt", "-p", help="Prompt describing the video"),
    duration: float = typer.Option(30.0, "--duration", "-d", help="Length in seconds"),
    fps: int = typer.Option(30, "--fps"),
    style: Optional[str] = typer.Option(None, "--style"),
    aspect_ratio: str = typer.Option("16:9", "--aspect-ratio"),
    out: Optional[Path] = typer.Option(None, "--out", "-o"),
) -> None:
    """Build a seeded base plan from a prompt and enhance it."""

    try:
        enhanced = generate_video(prompt, duration, style=style, fps=fps, aspect_ratio=aspect_ratio)
    except Exception as exc:  # noqa: BLE001 - surfaced to CLI
        typer.echo(f"Generation failed: {exc}")
        raise typer.Exit(code=1) from exc
    _emit(enhanced.to_wire(), out)


def _echo_samples(path: CameraPath, samples: int) -> None:
    last = path.duration_frames
    steps = max(1, samples - 1)
    for step in range(samples):
        frame = round(last * step / steps)
        state = path.get_state(frame)
        position = state.position
        typer.echo(
            f"frame {frame:>5}: x={position.x:9.2f} y={position.y:8.2f} z={position.z:9.2f} "
            f"yaw={state.rotation.yaw:7.2f} fov={state.fov:5.1f}"
        )


@camera_app.command("orbital")
def camera_orbital(
    radius: float = typer.Option(400.0, "--radius"),
    frames: int = typer.Option(300, "--frames", help="Path length in frames"),
    start_angle: float = typer.Option(180.0, "--start-angle"),
    end_angle: float = typer.Option(270.0, "--end-angle"),
    samples: int = typer.Option(5, "--samples", min=1),
) -> None:
    """Sample an orbital path around the origin."""

    try:
        path = orbital_path(Vec3(), radius, frames, start_angle=start_angle, end_angle=end_angle)
    except ValueError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    _echo_samples(path, samples)


@camera_app.command("forward")
def camera_forward(
    start_z: float = typer.Option(0.0, "--start-z"),
    end_z: float = typer.Option(-1000.0, "--end-z"),
    frames: int = typer.Option(300, "--frames", help="Path length in frames"),
    samples: int = typer.Option(5, "--samples", min=1),
) -> None:
    """Sample a forward tracking path."""

    try:
        path = forward_tracking_path(start_z, end_z, frames)
    except ValueError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    _echo_samples(path, samples)


@config_app.command("versions")
def versions() -> None:
    """Show version and digest for each config table."""

    for name, info in config_versions().items():
        if info["source"] == "absent":
            typer.echo(f"{name}: absent ({info['path']})")
        else:
            typer.echo(f"{name}: v{info['version']} sha256={info['sha256']}")


def main() -> None:  # pragma: no cover - console script shim
    app()


if __name__ == "__main__":  # pragma: no cover
    main()


__all__ = ["app", "main"]
