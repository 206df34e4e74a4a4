"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from stream_regression.exceptions import ConfigError
from stream_regression.models import AppConfig


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Load config from defaults, yaml file, and explicit overrides."""
    payload: dict[str, Any] = {}

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file does not exist: {config_path}")
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config file is not valid YAML: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError("Config file must contain a top-level mapping.")
        payload.update(raw)

    if overrides:
        for key, value in overrides.items():
            if value is not None:
                payload[key] = value

    try:
        return AppConfig(**payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc

