"""Configuration loading helpers for snippet-scraper."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import ScrapeSettings

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")
CONFIG_ENV_VAR = "SNIPPET_SCRAPER_CONFIG"


def _read_file(path: Path) -> dict:
    if path.suffix not in CONFIG_EXTENSIONS:
        raise ValueError(f"Unsupported configuration format: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def locate_config(explicit: Path | None = None) -> Path | None:
    """Return the config file to use: explicit path first, then the environment."""

    if explicit is not None:
        return explicit.expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return None


def load_settings(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    return _read_file(path)


def resolve_settings(
    config_path: Path | None = None, overrides: Mapping[str, Any] | None = None
) -> ScrapeSettings:
    """Merge file values with command line overrides and validate.

    Overrides set to ``None`` are ignored so unset CLI options never mask the
    file.
    """

    payload: dict[str, Any] = {}
    path = locate_config(config_path)
    if path is not None:
        payload.update(load_settings(path))
    for key, value in (overrides or {}).items():
        if value is not None:
            payload[key] = value
    return ScrapeSettings.model_validate(payload)


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_EXTENSIONS",
    "load_settings",
    "locate_config",
    "resolve_settings",
]
