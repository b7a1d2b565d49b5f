"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"


class DatasetMode(StrEnum):
    COMBINED = "Combined"
    HISTORICAL = "Historical"
    FORECAST = "Forecast"


class OpenWeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = "https://api.openweathermap.org/data/2.5"
    units: UnitSystem = UnitSystem.METRIC
    timeout: float = Field(default=30.0, gt=0.0)


class GeminiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = False
    api_key: str = ""
    endpoint: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-1.5-flash:generateContent"
    )
    timeout: float = Field(default=30.0, gt=0.0)


class ProbabilityConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "http://localhost:8000"
    dataset_mode: DatasetMode = DatasetMode.COMBINED
    # Mumbai
    default_latitude: float = Field(default=19.0760, ge=-90.0, le=90.0)
    default_longitude: float = Field(default=72.8777, ge=-180.0, le=180.0)
    timeout: float = Field(default=30.0, gt=0.0)


class DefaultsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    city: str = "Mumbai"
    country: str = "IN"
    forecast_days: int = Field(default=5, ge=1, le=5)
    search_limit: int = Field(default=5, ge=1, le=50)


class AssistantConfig(BaseModel):
    model_config = {"extra": "forbid"}

    openweather: OpenWeatherConfig = OpenWeatherConfig()
    gemini: GeminiConfig = GeminiConfig()
    probability: ProbabilityConfig = ProbabilityConfig()
    defaults: DefaultsConfig = DefaultsConfig()
