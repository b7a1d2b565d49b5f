"""Weather provider and probability backend data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocationInfo:
    name: str
    country: str
    lat: float
    lon: float


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    description: str
    icon: str


@dataclass(frozen=True)
class DailyForecast:
    date: str  # YYYY-MM-DD
    temp_min: float
    temp_max: float
    humidity: float
    wind_speed: float
    description: str
    icon: str
    rain_probability: float  # 0..1, as the provider reports "pop"


@dataclass(frozen=True)
class WeatherSnapshot:
    location: LocationInfo
    current: CurrentConditions
    forecast: list[DailyForecast] = field(default_factory=list)


@dataclass(frozen=True)
class LocationMatch:
    name: str
    country: str
    lat: float
    lon: float


@dataclass(frozen=True)
class WeatherProbability:
    location: str
    date: str
    weather_event: str
    probability: float  # 0..100
    description: str


@dataclass(frozen=True)
class ProbabilityResult:
    success: bool
    data: list[WeatherProbability] = field(default_factory=list)
    error: str | None = None
