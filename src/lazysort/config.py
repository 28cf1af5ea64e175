"""Configuration helpers for YAML files and environment settings."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .pivot import PIVOT_RULES

# pivot and log_level fall back to LazySortSettings when left unset.
DEFAULTS: dict[str, Any] = {
    "pivot": None,
    "top": None,
    "order": "natural",
    "incomparable": None,
    "log_level": None,
}


def _merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    config = copy.deepcopy(DEFAULTS)
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            file_cfg = yaml.safe_load(fh) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        config = _merge_dict(config, file_cfg)
    if overrides:
        config = _merge_dict(config, {k: v for k, v in overrides.items() if v is not None})
    return config


class LazySortSettings(BaseSettings):
    """Environment driven defaults for the command line."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, populate_by_name=True)

    pivot: str = Field(default="middle", alias="LAZYSORT_PIVOT")
    log_level: str = Field(default="WARNING", alias="LAZYSORT_LOG_LEVEL")

    @field_validator("pivot")
    @classmethod
    def _known_pivot(cls, value: str) -> str:
        if value not in PIVOT_RULES:
            raise ValueError(f"unknown pivot rule {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def load_settings() -> LazySortSettings:
    """Return settings initialised from environment."""

    return LazySortSettings()
