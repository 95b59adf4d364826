# src/geobee/config/settings.py
"""
Library settings (Pydantic).

Settings are loaded from `src/geobee/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `GEOBEE_LOG_LEVEL`)
- an external YAML file via `GEOBEE_CONFIG_PATH`

Only ambient knobs live here (log level, default conversion rounding); the unit
table and Earth radius are fixed constants in `geobee.core`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from geobee.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geobee.config`."""
    text = resources.files("geobee.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "geobee"
    log_level: str = "INFO"


class ConversionSettings(BaseModel):
    decimals: int | None = Field(default=None, ge=1, le=9)
    round_up: bool = True


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    conversion: ConversionSettings = Field(default_factory=ConversionSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("GEOBEE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOBEE_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
