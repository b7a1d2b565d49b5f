"""YAML config loader with environment overrides and runtime get/set."""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherchat.config.schema import AssistantConfig

# Environment variable -> dotted config key
ENV_OVERRIDES: dict[str, str] = {
    "OPENWEATHER_API_KEY": "openweather.api_key",
    "OPENWEATHER_BASE_URL": "openweather.base_url",
    "GEMINI_API_KEY": "gemini.api_key",
    "WEATHER_PROBABILITY_URL": "probability.base_url",
    "WEATHERCHAT_DEFAULT_CITY": "defaults.city",
}


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AssistantConfig:
    """Load and validate config from an optional YAML file.

    Values set in the environment win over the file; anything left unset
    falls back to the schema defaults.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    apply_env_overrides(raw, os.environ if environ is None else environ)
    return AssistantConfig(**raw)


def apply_env_overrides(raw: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Write non-empty environment values into the raw config dict in place."""
    for var, dotted_key in ENV_OVERRIDES.items():
        value = environ.get(var)
        if not value:
            continue
        section, field = dotted_key.split(".", 1)
        target = raw.setdefault(section, {})
        target[field] = value
    return raw


def get_config_value(config: AssistantConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'defaults.city'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: AssistantConfig, dotted_key: str, value: Any) -> AssistantConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AssistantConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return AssistantConfig(**data)


def redacted_dump(config: AssistantConfig) -> str:
    """JSON dump of the config with API keys masked."""
    data = json.loads(config.model_dump_json())
    for section in data.values():
        if isinstance(section, dict) and section.get("api_key"):
            section["api_key"] = "****" + section["api_key"][-4:]
    return json.dumps(data, indent=2)
