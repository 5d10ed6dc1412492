"""
Tests for activity_advisor/config.py.

What we test
------------
  - Defaults when the TOML is empty.
  - Explicit TOML values are applied; missing explicit path raises.
  - local.toml next to the config overrides it.
  - ACTIVITY_ADVISOR_* and GOOGLE_PLACES_API_KEY env overrides.
  - Sub-config validators (bounds, log level, timeout 0 → disabled).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from activity_advisor.config import (
    AppConfig,
    LoggingConfig,
    ParentActionConfig,
    SelectionConfig,
    VenueConfig,
    load_config,
)

_ENV_VARS = (
    "ACTIVITY_ADVISOR_LOG_LEVEL",
    "ACTIVITY_ADVISOR_MIN_FEASIBILITY",
    "ACTIVITY_ADVISOR_VENUE_RADIUS_M",
    "ACTIVITY_ADVISOR_DEBUG",
    "GOOGLE_PLACES_API_KEY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # keep a developer .env out of these tests
    monkeypatch.setattr("activity_advisor.config.load_dotenv", lambda **_: False)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_explicit_file(self, test_config_path):
        config = load_config(test_config_path)
        assert config.logging.level == "WARNING"
        assert config.venues.radius_meters == 3000
        assert config.venues.query_timeout_seconds == pytest.approx(2.0)
        assert config.selection.max_recommendations == 5

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.toml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == AppConfig()

    def test_local_override(self, test_config_path):
        (test_config_path.parent / "local.toml").write_text(
            "[venues]\nradius_meters = 8000\n", encoding="utf-8",
        )
        config = load_config(test_config_path)
        assert config.venues.radius_meters == 8000
        assert config.venues.query_timeout_seconds == pytest.approx(2.0)

    def test_env_overrides(self, test_config_path, monkeypatch):
        monkeypatch.setenv("ACTIVITY_ADVISOR_LOG_LEVEL", "debug")
        monkeypatch.setenv("ACTIVITY_ADVISOR_MIN_FEASIBILITY", "45")
        monkeypatch.setenv("ACTIVITY_ADVISOR_VENUE_RADIUS_M", "1500")
        monkeypatch.setenv("ACTIVITY_ADVISOR_DEBUG", "true")
        monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "secret")
        config = load_config(test_config_path)
        assert config.logging.level == "DEBUG"
        assert config.selection.min_feasibility == pytest.approx(45.0)
        assert config.venues.radius_meters == 1500
        assert config.debug is True
        assert config.venues.places_api_key == "secret"

    def test_toml_api_key_wins_over_env(self, tmp_path, monkeypatch):
        path = tmp_path / "keyed.toml"
        path.write_text('[venues]\nplaces_api_key = "from-toml"\n', encoding="utf-8")
        monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "from-env")
        assert load_config(path).venues.places_api_key == "from-toml"

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[selection]\nmin_feasibility = 150\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)


class TestSubConfigs:
    def test_selection_bounds(self):
        with pytest.raises(ValidationError):
            SelectionConfig(min_recommendations=6, max_recommendations=5)
        with pytest.raises(ValidationError):
            SelectionConfig(max_strength_picks=-1)

    def test_timeout_zero_disables(self):
        assert VenueConfig(query_timeout_seconds=0).query_timeout_seconds is None

    def test_venue_radius_positive(self):
        with pytest.raises(ValidationError):
            VenueConfig(radius_meters=0)

    def test_parent_action_cap(self):
        with pytest.raises(ValidationError):
            ParentActionConfig(max_actions=6)

    def test_log_level(self):
        assert LoggingConfig(level="info").level == "INFO"
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")
