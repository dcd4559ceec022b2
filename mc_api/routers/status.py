"""Status endpoint exposing runtime metadata."""
from __future__ import annotations

import platform
import sys
import time

from fastapi import APIRouter

from mc_compose.config import ProductionConfig
from mc_sdk import __version__ as sdk_version
from mc_sdk.versioning import config_versions

_started = time.time()
router = APIRouter()


@router.get("/status")
def status() -> dict[str, object]:
    config = ProductionConfig.from_env()
    return {
        "ok": True,
        "data": {
            "sdk_version": sdk_version,
            "config_versions": config_versions(),
            "quality_thresholds": {
                "default": config.quality_threshold,
                "quick": config.quick_quality_threshold,
                "full": config.full_quality_threshold,
            },
            "default_fps": config.default_fps,
            "uptime_sec": round(time.time() - _started, 2),
            "build": {
                "python": sys.version.split()[0],
                "platform": platform.platform(),
            },
        },
        "warnings": [],
        "errors": [],
    }
