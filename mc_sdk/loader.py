"""Helpers for loading pacing, mood and threshold tables from YAML."""
from __future__ import annotations

import hashlib
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Literal

import yaml
from pydantic import BaseModel, Field

from .models import ColorGrade

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
PACING_PATH = CONFIG_DIR / "pacing.yml"
MOODS_PATH = CONFIG_DIR / "moods.yml"
THRESHOLDS_PATH = CONFIG_DIR / "thresholds.yml"


class PacingProfile(BaseModel):
    """Pacing characteristics for one content type."""

    avg_scene_duration: float = Field(gt=0.0)
    transition_duration: float = Field(ge=0.0)
    rhythm: Literal["fast", "moderate", "slow", "variable"]
    energy: Literal["low", "medium", "high"]


class PacingConfig(BaseModel):
    version: str = "1.0"
    default: str = "product"
    profiles: Dict[str, PacingProfile]

    def profile(self, content_type: str) -> PacingProfile:
        """Return the profile for ``content_type`` or the default one."""

        return self.profiles.get(content_type) or self.profiles[self.default]


class MoodConfig(BaseModel):
    version: str = "1.0"
    presets: Dict[str, ColorGrade]


class ScoringWeights(BaseModel):
    critical_penalty: int = 20
    warning_penalty: int = 10


class ScoreBuckets(BaseModel):
    excellent: int = 90
    good: int = 70
    fair: int = 50


class PaletteRules(BaseModel):
    min_colors: int = 2
    max_colors: int = 5
    min_contrast: float = 4.5
    critical_contrast: float = 3.0
    fallback_colors: List[str] = Field(default_factory=lambda: ["#3b82f6", "#10b981"])


class TypographyRules(BaseModel):
    default_sizes: Dict[str, float] = Field(default_factory=lambda: {"h1": 48.0, "h2": 36.0, "body": 18.0})
    critical_body: float = 14.0
    min_body: float = 16.0


class DensityRules(BaseModel):
    max_elements: int = 8
    overcrowded_keep: int = 6


class TransitionRules(BaseModel):
    dominance_ratio: float = 0.6


class ProductionThresholds(BaseModel):
    default: float = 70.0
    quick: float = 60.0
    full: float = 80.0


class ThresholdsConfig(BaseModel):
    """Quality scoring and enforcement thresholds."""

    version: str = "1.0"
    scoring: ScoringWeights = Field(default_factory=ScoringWeights)
    buckets: ScoreBuckets = Field(default_factory=ScoreBuckets)
    palette: PaletteRules = Field(default_factory=PaletteRules)
    typography: TypographyRules = Field(default_factory=TypographyRules)
    density: DensityRules = Field(default_factory=DensityRules)
    transitions: TransitionRules = Field(default_factory=TransitionRules)
    production: ProductionThresholds = Field(default_factory=ProductionThresholds)


def load_yaml(path: Path | str) -> Dict[str, Any]:
    """Load a YAML file as a dictionary."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at root of {p}, got {type(data)!r}")
    return data


def file_sha256(path: Path) -> str:
    """Compute a SHA-256 digest for the supplied file path."""

    data = path.read_bytes()
    return hashlib.sha256(data).hexdigest()


def load_pacing_config(path: Path | str = PACING_PATH) -> PacingConfig:
    """Load pacing profiles from config/pacing.yml."""

    p = Path(path)
    config = PacingConfig(**load_yaml(p))
    if config.default not in config.profiles:
        raise ValueError(f"default pacing profile {config.default!r} is not defined in {p}")
    return config


def load_mood_config(path: Path | str = MOODS_PATH) -> MoodConfig:
    """Load mood presets from config/moods.yml."""

    p = Path(path)
    config = MoodConfig(**load_yaml(p))
    if "neutral" not in config.presets:
        raise ValueError(f"mood presets in {p} must define 'neutral'")
    return config


def load_thresholds_config(path: Path | str = THRESHOLDS_PATH) -> ThresholdsConfig:
    """Load quality thresholds; missing sections take their defaults."""

    p = Path(path)
    if not p.exists():
        return ThresholdsConfig()
    return ThresholdsConfig(**load_yaml(p))


@lru_cache(maxsize=1)
def get_pacing_config() -> PacingConfig:
    return load_pacing_config()


@lru_cache(maxsize=1)
def get_mood_config() -> MoodConfig:
    return load_mood_config()


@lru_cache(maxsize=1)
def get_thresholds_config() -> ThresholdsConfig:
    return load_thresholds_config()


__all__ = [
    "CONFIG_DIR",
    "MOODS_PATH",
    "PACING_PATH",
    "THRESHOLDS_PATH",
    "MoodConfig",
    "PacingConfig",
    "PacingProfile",
    "ThresholdsConfig",
    "file_sha256",
    "get_mood_config",
    "get_pacing_config",
    "get_thresholds_config",
    "load_mood_config",
    "load_pacing_config",
    "load_thresholds_config",
    "load_yaml",
]
