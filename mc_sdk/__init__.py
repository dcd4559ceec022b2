"""Shared models, config loading and version metadata."""
from __future__ import annotations

from .loader import (
    file_sha256,
    get_mood_config,
    get_pacing_config,
    get_thresholds_config,
    load_mood_config,
    load_pacing_config,
    load_thresholds_config,
    load_yaml,
)
from .models import QualityReport, Scene, VideoPlan
from .versioning import config_versions

__all__ = [
    "__version__",
    "QualityReport",
    "Scene",
    "VideoPlan",
    "config_versions",
    "file_sha256",
    "get_mood_config",
    "get_pacing_config",
    "get_thresholds_config",
    "load_mood_config",
    "load_pacing_config",
    "load_thresholds_config",
    "load_yaml",
]

__version__ = "0.1.0"
