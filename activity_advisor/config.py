"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``       committed static defaults
  2. ``config/local.toml``         optional local overrides (gitignored)
  3. ``.env``                      local secrets such as ``GOOGLE_PLACES_API_KEY``
  4. Environment variables         ``ACTIVITY_ADVISOR_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The selector, enricher, parent-action generator and CLI commands receive
sub-configs of an ``AppConfig`` instance, never raw dicts or individual
env var lookups scattered through the codebase.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class SelectionConfig(BaseModel):
    """DiverseSelector thresholds and set-size bounds."""

    model_config = ConfigDict(frozen=True)

    min_feasibility: float = 30.0
    fallback_pool_size: int = 15
    min_recommendations: int = 3
    max_recommendations: int = 5
    strength_min_score: float = 40.0
    max_strength_picks: int = 2
    weak_focus_count: int = 3

    @field_validator("min_feasibility")
    @classmethod
    def validate_min_feasibility(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"min_feasibility must be in [0, 100], got {v}.")
        return v

    @field_validator(
        "fallback_pool_size", "min_recommendations", "max_recommendations",
        "weak_focus_count",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"value must be >= 1, got {v}.")
        return v

    @field_validator("max_strength_picks")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"max_strength_picks must be >= 0, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "SelectionConfig":
        if self.min_recommendations > self.max_recommendations:
            raise ValueError(
                f"min_recommendations ({self.min_recommendations}) must be <= "
                f"max_recommendations ({self.max_recommendations})."
            )
        return self


class VenueConfig(BaseModel):
    """Venue search and re-ranking settings."""

    model_config = ConfigDict(frozen=True)

    radius_meters: int = 5000
    max_venues: int = 5
    query_timeout_seconds: Optional[float] = 10.0
    request_timeout_seconds: float = 15.0
    max_home_based_first: int = 2
    places_api_key: Optional[str] = None

    @field_validator("radius_meters", "max_venues")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"value must be >= 1, got {v}.")
        return v

    @field_validator("query_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        # 0 in TOML disables the per-query timeout.
        if v is not None and v <= 0:
            return None
        return v


class ParentActionConfig(BaseModel):
    """ParentActionGenerator limits."""

    model_config = ConfigDict(frozen=True)

    max_actions: int = 5
    weak_focus_count: int = 3
    strength_focus_count: int = 2

    @field_validator("max_actions")
    @classmethod
    def validate_max_actions(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError(f"max_actions must be in [1, 5], got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class OutputConfig(BaseModel):
    """Where report writers put their files."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"


class AppConfig(BaseModel):
    """Complete application configuration, the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    selection: SelectionConfig = SelectionConfig()
    venues: VenueConfig = VenueConfig()
    parent_actions: ParentActionConfig = ParentActionConfig()
    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file is
            absent the built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is None:
        config_path = root / "config" / "default.toml"
        explicit = False
    else:
        explicit = True

    config_path = Path(config_path)
    if config_path.exists():
        with open(config_path, "rb") as f:
            raw = tomllib.load(f)
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists() and local_config_path != config_path:
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply ACTIVITY_ADVISOR_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply ACTIVITY_ADVISOR_* env vars to the raw config dict.

    Supported overrides:
      ACTIVITY_ADVISOR_LOG_LEVEL        → raw["logging"]["level"]
      ACTIVITY_ADVISOR_MIN_FEASIBILITY  → raw["selection"]["min_feasibility"]
      ACTIVITY_ADVISOR_VENUE_RADIUS_M   → raw["venues"]["radius_meters"]
      ACTIVITY_ADVISOR_DEBUG            → raw["debug"]
      GOOGLE_PLACES_API_KEY             → raw["venues"]["places_api_key"]
    """
    if log_level := os.environ.get("ACTIVITY_ADVISOR_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if min_feas := os.environ.get("ACTIVITY_ADVISOR_MIN_FEASIBILITY"):
        raw.setdefault("selection", {})["min_feasibility"] = float(min_feas)

    if radius := os.environ.get("ACTIVITY_ADVISOR_VENUE_RADIUS_M"):
        raw.setdefault("venues", {})["radius_meters"] = int(radius)

    if debug := os.environ.get("ACTIVITY_ADVISOR_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    if api_key := os.environ.get("GOOGLE_PLACES_API_KEY"):
        raw.setdefault("venues", {}).setdefault("places_api_key", api_key)

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        selection=SelectionConfig(**raw.get("selection", {})),
        venues=VenueConfig(**raw.get("venues", {})),
        parent_actions=ParentActionConfig(**raw.get("parent_actions", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        output=OutputConfig(**raw.get("output", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
