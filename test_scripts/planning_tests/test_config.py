# Tests for settings loading
from __future__ import annotations

import json

import pytest

from release_planner.config import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("SCORING_CONFIG_FILE", raising=False)
    s = Settings(_env_file=None)
    cfg = s.scoring_config()
    assert cfg.weights.business_value == 0.35
    assert cfg.thresholds.urgent == 8.0
    assert cfg.default_job_size == 1.0


def test_settings_nested_env_override(monkeypatch):
    monkeypatch.setenv("WSJF_WEIGHTS__BUSINESS_VALUE", "1.5")
    s = Settings(_env_file=None)
    assert s.WSJF_WEIGHTS.business_value == 1.5
    assert s.WSJF_WEIGHTS.time_criticality == 0.25


def test_settings_loads_scoring_config_file(tmp_path):
    cfg_file = tmp_path / "scoring.json"
    cfg_file.write_text(
        json.dumps({"weights": {"business_value": 1, "time_criticality": 1, "risk_reduction": 1},
                    "thresholds": {"urgent": 10, "high": 6, "medium": 3}}),
        encoding="utf-8",
    )
    s = Settings(_env_file=None, SCORING_CONFIG_FILE=str(cfg_file))
    assert s.WSJF_WEIGHTS.risk_reduction == 1
    assert s.PRIORITY_THRESHOLDS.high == 6


def test_settings_missing_config_file_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings(_env_file=None, SCORING_CONFIG_FILE=str(tmp_path / "nope.json"))
