from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from mc_sdk.models import VideoPlan  # noqa: E402


def element(element_id: str, kind: str = "text", *, x: float = 50, z: float = 0, w: float = 400, h: float = 100):
    return {
        "id": element_id,
        "type": kind,
        "position": {"x": x, "y": 50, "z": z},
        "size": {"width": w, "height": h},
    }


def scene(scene_id: str, start: float, duration: float, elements: List[Dict[str, Any]], **extra: Any):
    return {"id": scene_id, "startTime": start, "duration": duration, "elements": elements, **extra}


def plan_payload(**overrides: Any) -> Dict[str, Any]:
    """Three 5s scenes with balanced, layered elements and a readable style."""

    payload: Dict[str, Any] = {
        "id": "plan-demo",
        "duration": 15,
        "fps": 30,
        "aspectRatio": "16:9",
        "scenes": [
            scene(
                "intro",
                0,
                5,
                [
                    element("intro-title", "text", x=50, z=1),
                    element("intro-hero", "image", x=30, z=0, w=600, h=400),
                    element("intro-bg", "shape", x=70, z=-3, w=200, h=200),
                ],
            ),
            scene(
                "features",
                5,
                5,
                [
                    element("features-phone", "phone-mockup", x=40, z=1, w=300, h=600),
                    element("features-copy", "text", x=60, z=0),
                ],
            ),
            scene(
                "outro",
                10,
                5,
                [
                    element("outro-logo", "image", x=50, z=1, w=200, h=200),
                    element("outro-cta", "text", x=50, z=0),
                ],
            ),
        ],
        "style": {
            "colorPalette": ["#0a0e27", "#3b82f6", "#f1f5f9"],
            "typography": {"primary": "Inter", "secondary": "Inter", "sizes": {"h1": 64, "h2": 48, "body": 18}},
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def plan_dict() -> Dict[str, Any]:
    return plan_payload()


@pytest.fixture
def simple_plan(plan_dict: Dict[str, Any]) -> VideoPlan:
    return VideoPlan.model_validate(plan_dict)


@pytest.fixture
def weak_plan() -> VideoPlan:
    """Six-color palette and inverted typography: one critical, two warnings."""

    payload = plan_payload(
        id="plan-weak",
        style={
            "colorPalette": ["#000000", "#ffffff", "#3b82f6", "#10b981", "#f59e0b", "#ef4444"],
            "typography": {"sizes": {"h1": 30, "h2": 40, "body": 12}},
        },
    )
    return VideoPlan.model_validate(payload)
