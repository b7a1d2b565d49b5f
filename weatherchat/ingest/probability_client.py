"""Client for the local weather-probability backend.

The backend is an external service; only its request and response shapes
are known here.
"""

import logging
from datetime import date

import httpx

from weatherchat.config.defaults import PROBABILITY_EVENT_KEYS
from weatherchat.config.schema import ProbabilityConfig
from weatherchat.models.query import ParsedQuery
from weatherchat.models.weather import ProbabilityResult, WeatherProbability
from weatherchat.parsing.date_parser import format_date

logger = logging.getLogger(__name__)


class WeatherProbabilityError(Exception):
    """Raised internally when the backend answers with a non-success status."""


class ProbabilityClient:
    def __init__(self, config: ProbabilityConfig):
        self.base_url = config.base_url.rstrip("/")
        self.dataset_mode = config.dataset_mode.value
        self.latitude = config.default_latitude
        self.longitude = config.default_longitude
        self.timeout = config.timeout

    def build_request(self, parsed: ParsedQuery, today: date | None = None) -> dict:
        start_date = format_date(parsed.date, today)
        end_date = parsed.end_date if parsed.is_range and parsed.end_date else start_date
        return {
            "location": {
                "latitude": self.latitude,
                "longitude": self.longitude,
                "city_name": parsed.location,
            },
            "date_range": {"start_date": start_date, "end_date": end_date},
            "dataset_mode": self.dataset_mode,
        }

    def fetch(self, parsed: ParsedQuery, today: date | None = None) -> ProbabilityResult:
        """Ask the backend how likely the query's weather event is.

        Never raises; failures come back as an unsuccessful result.
        """
        body = self.build_request(parsed, today)
        url = f"{self.base_url}/weather/probability"
        try:
            resp = httpx.post(url, json=body, timeout=self.timeout)
            if not resp.is_success:
                raise WeatherProbabilityError(f"API Error: {resp.status_code}")
            data = resp.json()
        except (httpx.RequestError, ValueError, WeatherProbabilityError) as e:
            logger.error("Weather probability request failed: %s", e)
            return ProbabilityResult(success=False, error=str(e) or "Unknown error occurred")

        probabilities: list[WeatherProbability] = []
        event_key = PROBABILITY_EVENT_KEYS.get(parsed.weather_type, "rain")
        try:
            entry = (data.get("probabilities") or {}).get(event_key)
            if entry:
                probabilities.append(
                    WeatherProbability(
                        location=parsed.location,
                        date=body["date_range"]["start_date"],
                        weather_event=parsed.weather_type,
                        probability=entry.get("probability") or 0,
                        description=entry.get("description") or "",
                    )
                )
        except (AttributeError, TypeError) as e:
            logger.error("Unexpected weather probability payload: %s", e)
            return ProbabilityResult(success=False, error="Unexpected response")
        return ProbabilityResult(success=True, data=probabilities)
