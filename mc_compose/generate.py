"""Seeded base-plan generator standing in for the upstream prompt interpreter."""
from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

import structlog

from mc_interp.prng import SeededRandom
from mc_sdk.models import (
    Element,
    GlobalStyle,
    Resolution,
    Scene,
    Size,
    Transition,
    TransitionType,
    Typography,
    Vec3,
    VideoPlan,
)

from .enhance import generate_enhanced_plan
from .models import EnhancedVideoPlan, EnhanceOptions, VideoStyle
from .orchestrator import ProductionOrchestrator

logger = structlog.get_logger(__name__)

SCENE_SECONDS = 5.0
LENGTH_WOBBLE = 0.2
X_SPREAD = 15.0
TOPIC_WORDS = 6

RESOLUTIONS: Dict[str, Tuple[int, int]] = {
    "16:9": (1920, 1080),
    "landscape": (1920, 1080),
    "9:16": (1080, 1920),
    "portrait": (1080, 1920),
    "1:1": (1080, 1080),
    "square": (1080, 1080),
    "4:5": (1080, 1350),
}

PALETTES: Tuple[Tuple[str, ...], ...] = (
    ("#3b82f6", "#1e293b", "#f1f5f9", "#10b981"),
    ("#0a0e27", "#3b82f6", "#f1f5f9", "#f59e0b"),
    ("#1c1917", "#f97316", "#fef3c7", "#10b981"),
    ("#111827", "#8b5cf6", "#f9fafb", "#22d3ee"),
)

HEADLINES = (
    "{topic}",
    "Introducing {topic}",
    "Why {topic} matters",
    "{topic}, reimagined",
    "Meet {topic}",
)

GENERATED_TRANSITIONS = (TransitionType.fade, TransitionType.slide, TransitionType.wipe)


def _has(prompt: str, *words: str) -> bool:
    lowered = prompt.lower()
    return any(word in lowered for word in words)


def infer_content_type_from_prompt(prompt: str) -> str:
    if _has(prompt, "product"):
        return "product"
    if _has(prompt, "data", "stats", "github"):
        return "tech"
    if _has(prompt, "journey"):
        return "cinematic"
    return "product"


def infer_video_style(prompt: str) -> VideoStyle:
    if _has(prompt, "github", "space"):
        return "space-journey"
    if _has(prompt, "product", "launch"):
        return "product-launch"
    if _has(prompt, "data", "stats"):
        return "data-story"
    return "cinematic"


def _topic(prompt: str) -> str:
    words = prompt.strip().split()[:TOPIC_WORDS]
    return " ".join(words) if words else "Your story"


def _scene_durations(rng: SeededRandom, count: int, total: float) -> List[float]:
    weights = [rng.uniform("scene.length", 1 - LENGTH_WOBBLE, 1 + LENGTH_WOBBLE, index) for index in range(count)]
    scale = total / sum(weights)
    durations = [round(weight * scale, 3) for weight in weights[:-1]]
    durations.append(round(total - sum(durations), 6))
    return durations


def generate_base_plan(prompt: str, duration: float, fps: int = 30, aspect_ratio: str = "16:9") -> VideoPlan:
    """Build a deterministic starter plan; equal prompts give equal plans."""

    if duration <= 0:
        raise ValueError("duration must be positive")
    rng = SeededRandom(prompt)
    count = max(1, math.ceil(duration / SCENE_SECONDS))
    durations = _scene_durations(rng, count, duration)
    topic = _topic(prompt)

    scenes: List[Scene] = []
    start = 0.0
    for index, length in enumerate(durations):
        headline = rng.choice("scene.headline", HEADLINES, index).format(topic=topic)
        x = round(50 + rng.uniform("scene.layout.x", -X_SPREAD, X_SPREAD, index), 2)
        transition = None
        if index < count - 1:
            transition = Transition(type=rng.choice("scene.transition", GENERATED_TRANSITIONS, index), duration=0.5)
        scenes.append(
            Scene(
                id=f"scene-{index}",
                start_time=round(start, 3),
                duration=length,
                description=f"Scene {index + 1}",
                elements=[
                    Element(
                        id=f"element-{index}-1",
                        type="text",
                        content=headline,
                        position=Vec3(x=x, y=50, z=1),
                        size=Size(width=400, height=100),
                        style={"fontSize": 48, "color": "#ffffff"},
                    )
                ],
                transition=transition,
            )
        )
        start += length

    width, height = RESOLUTIONS.get(aspect_ratio, RESOLUTIONS["16:9"])
    plan = VideoPlan(
        id=f"video-{rng.prompt_id}",
        duration=duration,
        fps=fps,
        resolution=Resolution(width=width, height=height),
        aspect_ratio=aspect_ratio,
        scenes=scenes,
        style=GlobalStyle(
            color_palette=list(rng.choice("style.palette", PALETTES)),
            typography=Typography(sizes={"h1": 64, "h2": 48, "h3": 36, "body": 18}),
        ),
    )
    logger.debug("generate.base_plan.built", plan_id=plan.id, scenes=count, duration=duration)
    return plan


def generate_video(
    prompt: str,
    duration: float,
    *,
    style: Optional[VideoStyle] = None,
    fps: int = 30,
    aspect_ratio: str = "16:9",
    options: Optional[EnhanceOptions] = None,
    orchestrator: Optional[ProductionOrchestrator] = None,
) -> EnhancedVideoPlan:
    """Prompt to enhanced plan, seeded entirely by the prompt text."""

    base = generate_base_plan(prompt, duration, fps=fps, aspect_ratio=aspect_ratio)
    given = options.model_dump() if options else {}
    opts = EnhanceOptions.model_validate(
        {
            **given,
            "style": style or given.get("style") or infer_video_style(prompt),
            "seed": prompt,
            "content_type": given.get("content_type") or infer_content_type_from_prompt(prompt),
        }
    )
    return generate_enhanced_plan(base, opts, orchestrator)


__all__ = [
    "HEADLINES",
    "PALETTES",
    "generate_base_plan",
    "generate_video",
    "infer_content_type_from_prompt",
    "infer_video_style",
]
