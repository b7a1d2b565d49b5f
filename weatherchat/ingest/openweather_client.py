"""OpenWeatherMap client: current conditions, forecast and geocoding.

One attempt per call, no retries; callers decide what to show on failure.
"""

import logging

import httpx

from weatherchat.config.schema import OpenWeatherConfig
from weatherchat.models.weather import (
    CurrentConditions,
    DailyForecast,
    LocationInfo,
    LocationMatch,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

# The forecast endpoint returns one entry every 3 hours
ENTRIES_PER_DAY = 8


class WeatherClientError(Exception):
    """Raised when the weather provider cannot produce a usable answer."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    def __init__(self, config: OpenWeatherConfig):
        self.base_url = config.base_url.rstrip("/")
        self.api_key = config.api_key
        self.units = config.units.value
        self.timeout = config.timeout
        if not self.api_key:
            logger.warning("OpenWeatherMap API key is empty; requests will be rejected")

    def _get(self, endpoint: str, params: dict, what: str) -> dict:
        url = f"{self.base_url}/{endpoint}"
        query = {**params, "appid": self.api_key}
        try:
            resp = httpx.get(url, params=query, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("%s request failed: %s", what, e)
            raise WeatherClientError(f"Failed to fetch {what}") from e
        if not resp.is_success:
            logger.error("%s returned HTTP %d for %s", what, resp.status_code, endpoint)
            raise WeatherClientError(
                f"Failed to fetch {what} (HTTP {resp.status_code})", resp.status_code
            )
        try:
            return resp.json()
        except ValueError as e:
            raise WeatherClientError(f"Failed to fetch {what}: invalid JSON") from e

    def get_current(self, city: str, country: str | None = None) -> WeatherSnapshot:
        """Current conditions for a city name, optionally qualified by country code."""
        location = f"{city},{country}" if country else city
        data = self._get(
            "weather", {"q": location, "units": self.units}, "global weather data"
        )
        return _parse_current(data, "global weather data")

    def get_forecast(
        self, city: str, country: str | None = None, days: int = 5
    ) -> WeatherSnapshot:
        """Daily forecast for a city, one sample per day.

        The 3-hourly list is cut to ``days`` days and every 8th entry kept;
        current conditions come from the first entry.
        """
        location = f"{city},{country}" if country else city
        data = self._get(
            "forecast", {"q": location, "units": self.units}, "global weather forecast"
        )
        try:
            entries = data["list"]
            daily = entries[: days * ENTRIES_PER_DAY][::ENTRIES_PER_DAY]
            forecast = [_parse_forecast_entry(item) for item in daily]
            city_info = data["city"]
            first = entries[0]
            return WeatherSnapshot(
                location=LocationInfo(
                    name=city_info["name"],
                    country=city_info.get("country", ""),
                    lat=city_info["coord"]["lat"],
                    lon=city_info["coord"]["lon"],
                ),
                current=CurrentConditions(
                    temperature=first["main"]["temp"],
                    humidity=first["main"]["humidity"],
                    pressure=first["main"]["pressure"],
                    wind_speed=first["wind"]["speed"],
                    description=first["weather"][0]["description"],
                    icon=first["weather"][0]["icon"],
                ),
                forecast=forecast,
            )
        except (KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected forecast payload: %s", e)
            raise WeatherClientError("Failed to fetch global weather forecast") from e

    def get_by_coordinates(self, lat: float, lon: float) -> WeatherSnapshot:
        data = self._get(
            "weather",
            {"lat": lat, "lon": lon, "units": self.units},
            "weather data for coordinates",
        )
        return _parse_current(data, "weather data for coordinates")

    def search_locations(self, query: str, limit: int = 5) -> list[LocationMatch]:
        """Geocode a place name, most populous matches first."""
        data = self._get(
            "find",
            {
                "q": query,
                "type": "like",
                "sort": "population",
                "cnt": limit,
                "units": self.units,
            },
            "location search",
        )
        try:
            return [
                LocationMatch(
                    name=item["name"],
                    country=item["sys"]["country"],
                    lat=item["coord"]["lat"],
                    lon=item["coord"]["lon"],
                )
                for item in data.get("list", [])
            ]
        except (KeyError, TypeError) as e:
            logger.error("Unexpected location search payload: %s", e)
            raise WeatherClientError("Failed to search locations") from e


def _parse_current(data: dict, what: str) -> WeatherSnapshot:
    try:
        return WeatherSnapshot(
            location=LocationInfo(
                name=data["name"],
                country=data.get("sys", {}).get("country", ""),
                lat=data["coord"]["lat"],
                lon=data["coord"]["lon"],
            ),
            current=CurrentConditions(
                temperature=data["main"]["temp"],
                humidity=data["main"]["humidity"],
                pressure=data["main"]["pressure"],
                wind_speed=data["wind"]["speed"],
                description=data["weather"][0]["description"],
                icon=data["weather"][0]["icon"],
            ),
        )
    except (KeyError, IndexError, TypeError) as e:
        logger.error("Unexpected %s payload: %s", what, e)
        raise WeatherClientError(f"Failed to fetch {what}") from e


def _parse_forecast_entry(item: dict) -> DailyForecast:
    return DailyForecast(
        date=item["dt_txt"].split(" ")[0],
        temp_min=item["main"]["temp_min"],
        temp_max=item["main"]["temp_max"],
        humidity=item["main"]["humidity"],
        wind_speed=item["wind"]["speed"],
        description=item["weather"][0]["description"],
        icon=item["weather"][0]["icon"],
        rain_probability=item.get("pop", 0),
    )
