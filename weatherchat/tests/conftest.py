"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherchat.config.schema import AssistantConfig

OPENWEATHER_TEST_BASE = "https://test-owm.example.com/data/2.5"
PROBABILITY_TEST_BASE = "https://test-probability.example.com"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def test_config() -> AssistantConfig:
    """Config pointing every client at test hosts."""
    return AssistantConfig(
        openweather={"api_key": "test-owm-key", "base_url": OPENWEATHER_TEST_BASE},
        gemini={"api_key": "test-gemini-key"},
        probability={"base_url": PROBABILITY_TEST_BASE},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "openweather": {"units": "imperial"},
        "defaults": {"city": "Pune", "forecast_days": 3},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
