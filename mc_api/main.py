"""Motion Composer FastAPI application."""
from __future__ import annotations

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mc_compose.config import ProductionConfig
from mc_sdk import __version__, config_versions
from mc_sdk.loader import get_mood_config, get_pacing_config, get_thresholds_config

from .routers import health, preview, production, quality, status

structlog.configure(processors=[structlog.processors.JSONRenderer()])
logger = structlog.get_logger(__name__)


def _log_config_tables() -> None:
    pacing = get_pacing_config()
    moods = get_mood_config()
    thresholds = get_thresholds_config()
    logger.info(
        "config.tables.loaded",
        versions=config_versions(),
        pacing_profiles=sorted(pacing.profiles),
        default_profile=pacing.default,
        mood_presets=sorted(moods.presets),
        thresholds_version=thresholds.version,
    )


def _log_production_config() -> None:
    config = ProductionConfig.from_env()
    logger.info(
        "production.config.resolved",
        quality_threshold=config.quality_threshold,
        quick_threshold=config.quick_quality_threshold,
        full_threshold=config.full_quality_threshold,
        default_fps=config.default_fps,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - framework glue
    _log_config_tables()
    _log_production_config()
    yield


app = FastAPI(title="Motion Composer API", version=__version__, lifespan=lifespan)
app.include_router(health.router)
app.include_router(status.router)
app.include_router(production.router)
app.include_router(quality.router)
app.include_router(preview.router)


def _cors_enabled() -> bool:
    toggle = os.getenv("MC_API_ENABLE_CORS", "").strip().lower()
    return toggle in {"1", "true", "yes", "on"}


if _cors_enabled():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
