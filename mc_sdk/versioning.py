"""Version and digest reporting for the config tables."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

import yaml

from .loader import MOODS_PATH, PACING_PATH, THRESHOLDS_PATH, file_sha256, load_yaml

CONFIG_FILES: Dict[str, Path] = {
    "pacing": PACING_PATH,
    "moods": MOODS_PATH,
    "thresholds": THRESHOLDS_PATH,
}


def _declared_version(path: Path) -> str | None:
    try:
        raw = load_yaml(path)
    except (OSError, ValueError, yaml.YAMLError):
        return None
    version = raw.get("version")
    return str(version) if version is not None else None


def config_versions() -> dict[str, dict[str, object]]:
    """Return declared version and short digest for each config table.

    Tables absent on disk are reported with source ``absent`` and no digest.
    """

    out: dict[str, dict[str, object]] = {}
    for key, path in CONFIG_FILES.items():
        if not path.exists():
            out[key] = {"source": "absent", "path": str(path)}
            continue
        out[key] = {
            "source": "file",
            "version": _declared_version(path),
            "sha256": file_sha256(path)[:12],
            "path": str(path),
        }
    return out


__all__ = ["CONFIG_FILES", "config_versions"]
