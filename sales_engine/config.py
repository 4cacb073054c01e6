"""Configuration management."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def get_default_config() -> dict[str, Any]:
    """Get default configuration."""

    return {
        "grading": {
            "excellent_above": 500.0,
            "good_from": 200.0,
        },
        "pipeline_weights": {
            "Todo": 0.1,
            "In Progress": 0.5,
            "Done": 1.0,
        },
        "forecast": {
            "horizon": 4,
        },
        "seed": {
            "fallback_count": 50,
        },
    }


def merge_config(overrides: dict[str, Any] | None) -> dict[str, Any]:
    """Merge user sections over the defaults, one level deep."""

    config = get_default_config()
    for section, values in (overrides or {}).items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def load_config(config_path: str) -> dict[str, Any]:
    """Load configuration from a YAML or JSON file, merged over defaults."""

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as handle:
        if path.suffix.lower() in (".yaml", ".yml"):
            payload = yaml.safe_load(handle)
        elif path.suffix.lower() == ".json":
            payload = json.load(handle)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    logger.debug("Loaded config sections %s from %s", sorted(payload), path)
    return merge_config(payload)
