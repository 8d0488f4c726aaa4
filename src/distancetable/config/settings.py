# src/distancetable/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/distancetable/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `DISTANCETABLE_CONFIG_PATH`
- environment variables (e.g., `DISTANCETABLE_LOG_LEVEL`)

Design rule:
- The origin, grid bounds and earth radius live in YAML, not hard-coded in the table loop.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from distancetable.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `distancetable.config`."""
    text = resources.files("distancetable.config").joinpath(filename).read_text(encoding="utf-8")
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
    name: str = "DistanceTable"
    log_level: str = "INFO"


class OriginSettings(BaseModel):
    name: str = "Raleigh"
    lat: float = Field(35.78, ge=-90, le=90)
    lon: float = Field(-78.64, ge=-180, le=180)


class GeoSettings(BaseModel):
    earth_radius_miles: float = Field(3959, gt=0)


class AxisSettings(BaseModel):
    """Inclusive integer range walked by the table loops."""

    minimum: int
    maximum: int
    increment: int = Field(..., gt=0)

    @model_validator(mode="after")
    def _validate_order(self) -> "AxisSettings":
        if self.minimum > self.maximum:
            raise ValueError(
                f"axis minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )
        return self


class LatitudeAxisSettings(AxisSettings):
    minimum: int = Field(30, ge=-90, le=90)
    maximum: int = Field(50, ge=-90, le=90)
    increment: int = Field(10, gt=0)


class LongitudeAxisSettings(AxisSettings):
    minimum: int = Field(-120, ge=-180, le=180)
    maximum: int = Field(-70, ge=-180, le=180)
    increment: int = Field(5, gt=0)


class GridSettings(BaseModel):
    latitude: LatitudeAxisSettings = Field(default_factory=LatitudeAxisSettings)
    longitude: LongitudeAxisSettings = Field(default_factory=LongitudeAxisSettings)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    origin: OriginSettings = Field(default_factory=OriginSettings)
    geo: GeoSettings = Field(default_factory=GeoSettings)
    grid: GridSettings = Field(default_factory=GridSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("DISTANCETABLE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("DISTANCETABLE_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
