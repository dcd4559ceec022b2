"""Config table loading, fallbacks and version reporting."""
from __future__ import annotations

from pathlib import Path

import pytest

from mc_sdk.loader import (
    get_mood_config,
    get_pacing_config,
    get_thresholds_config,
    load_mood_config,
    load_pacing_config,
    load_thresholds_config,
    load_yaml,
)
from mc_sdk.versioning import config_versions


def test_shipped_tables_load() -> None:
    pacing = get_pacing_config()
    assert pacing.default == "product"
    assert pacing.profile("social").rhythm == "fast"
    assert pacing.profile("unheard-of") == pacing.profiles["product"]

    moods = get_mood_config()
    assert {"neutral", "space-blue", "warm-energy", "dramatic-dark"} <= set(moods.presets)

    thresholds = get_thresholds_config()
    assert thresholds.scoring.critical_penalty == 20
    assert thresholds.density.max_elements == 8
    assert thresholds.production.full == 80


def test_missing_tables(tmp_path: Path) -> None:
    missing = tmp_path / "absent.yml"
    with pytest.raises(FileNotFoundError):
        load_pacing_config(missing)
    with pytest.raises(FileNotFoundError):
        load_mood_config(missing)
    assert load_thresholds_config(missing).palette.max_colors == 5


def test_partial_thresholds_keep_defaults(tmp_path: Path) -> None:
    path = tmp_path / "thresholds.yml"
    path.write_text("version: '2.0'\nscoring:\n  critical_penalty: 30\n", encoding="utf-8")
    config = load_thresholds_config(path)
    assert config.version == "2.0"
    assert config.scoring.critical_penalty == 30
    assert config.scoring.warning_penalty == 10
    assert config.typography.min_body == 16


def test_pacing_default_must_exist(tmp_path: Path) -> None:
    path = tmp_path / "pacing.yml"
    path.write_text(
        "default: missing\nprofiles:\n  product:\n    avg_scene_duration: 4\n    transition_duration: 0.5\n"
        "    rhythm: moderate\n    energy: medium\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_pacing_config(path)


def test_moods_require_neutral(tmp_path: Path) -> None:
    path = tmp_path / "moods.yml"
    path.write_text(
        "presets:\n  dusk:\n    temperature: 4000\n    tint: 0\n    saturation: 100\n    contrast: 100\n"
        "    brightness: 90\n    shadows: '#000'\n    midtones: '#444'\n    highlights: '#fff'\n    vignette: 0.2\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_mood_config(path)


def test_yaml_root_must_be_a_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml(path)


def test_config_versions_report_digests() -> None:
    versions = config_versions()
    assert set(versions) == {"pacing", "moods", "thresholds"}
    for info in versions.values():
        assert info["source"] == "file"
        assert info["version"] == "1.0"
        assert len(info["sha256"]) == 12
