"""Chat session: transcript state and the parse -> fetch -> format turn."""

import logging
from collections.abc import Callable

from weatherchat.config.schema import AssistantConfig
from weatherchat.ingest.gemini_client import GeminiClient, GeminiClientError
from weatherchat.ingest.openweather_client import OpenWeatherClient, WeatherClientError
from weatherchat.models.chat import AssistantReply, ChatMessage
from weatherchat.models.weather import WeatherSnapshot
from weatherchat.parsing.query_parser import extract_location, is_weather_query
from weatherchat.reporting.formatters import generate_weather_response, response_branch

logger = logging.getLogger(__name__)

WEATHER_CONFIDENCE = 0.9
FALLBACK_CONFIDENCE = 0.5
HELP_CONFIDENCE = 0.8
GENERATED_CONFIDENCE = 0.7
ERROR_CONFIDENCE = 0.0

FALLBACK_TEMPLATE = (
    "I'm having trouble getting weather data for {location}. Please try using "
    "the Global Weather tab to get real-time weather information."
)
HELP_TEXT = (
    "I'm a weather assistant! I can help you with weather information for any "
    "location. Try asking about weather in a specific city, or use the Global "
    "Weather tab to search for weather data worldwide."
)
ERROR_TEXT = (
    "I'm sorry, I encountered an error while processing your request. "
    "Please try again."
)


class ChatSession:
    """Append-only weather conversation.

    ``send`` runs one turn at a time; input arriving while a turn is in
    flight is ignored, so the transcript order is the submission order.
    """

    def __init__(
        self,
        weather_client: OpenWeatherClient,
        config: AssistantConfig,
        location: str | None = None,
        generator: GeminiClient | None = None,
        on_location_change: Callable[[str], None] | None = None,
    ):
        self.weather = weather_client
        self.config = config
        self.generator = generator
        self.on_location_change = on_location_change
        self.location = location or config.defaults.city
        self.is_loading = False
        self.error: str | None = None
        self._messages: list[ChatMessage] = [
            ChatMessage(
                text=(
                    "Hello! I'm your AI weather assistant powered by Gemini AI, "
                    "OpenWeatherMap, and WeatherAPI. I can help you with real-time "
                    "weather data, forecasts, and climate insights for "
                    f"{self.location}. What would you like to know?"
                ),
                is_user=False,
                confidence=1.0,
                sources=("Gemini AI", "OpenWeatherMap", "WeatherAPI"),
            )
        ]

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def send(self, text: str) -> ChatMessage | None:
        """Run one chat turn and return the assistant's message.

        Returns None when the input is blank or a turn is already running.
        """
        if not text.strip() or self.is_loading:
            return None

        self._messages.append(ChatMessage(text=text, is_user=True))
        self.is_loading = True
        self.error = None
        try:
            reply = self._respond(text)
            message = ChatMessage(
                text=reply.text,
                is_user=False,
                confidence=reply.confidence,
                sources=reply.sources,
            )
        except Exception as e:
            logger.exception("Chat turn failed")
            self.error = str(e) or "Failed to get response"
            message = ChatMessage(
                text=ERROR_TEXT, is_user=False, confidence=ERROR_CONFIDENCE
            )
        finally:
            self.is_loading = False

        self._messages.append(message)
        return message

    def _respond(self, query: str) -> AssistantReply:
        if not is_weather_query(query):
            return self._non_weather_reply(query)

        extracted = extract_location(query)
        if extracted:
            self._set_location(extracted)
        location = self.location

        try:
            snapshot = self._fetch_snapshot(query, location)
        except WeatherClientError as e:
            logger.warning("Weather lookup for %s failed: %s", location, e)
            return AssistantReply(
                text=FALLBACK_TEMPLATE.format(location=location),
                confidence=FALLBACK_CONFIDENCE,
                sources=("Fallback Response",),
            )

        return AssistantReply(
            text=generate_weather_response(query, snapshot, location),
            confidence=WEATHER_CONFIDENCE,
            sources=("OpenWeatherMap", "Real-time Data"),
        )

    def _fetch_snapshot(self, query: str, location: str) -> WeatherSnapshot:
        if response_branch(query) == "forecast":
            return self.weather.get_forecast(
                location, days=self.config.defaults.forecast_days
            )
        return self.weather.get_current(location)

    def _set_location(self, location: str) -> None:
        if location == self.location:
            return
        self.location = location
        if self.on_location_change is not None:
            self.on_location_change(location)

    def _non_weather_reply(self, query: str) -> AssistantReply:
        if self.generator is not None:
            try:
                return AssistantReply(
                    text=self.generator.generate(query),
                    confidence=GENERATED_CONFIDENCE,
                    sources=("Gemini AI",),
                )
            except GeminiClientError as e:
                logger.warning("Gemini unavailable, using canned reply: %s", e)
        return AssistantReply(
            text=HELP_TEXT, confidence=HELP_CONFIDENCE, sources=("Weather Assistant",)
        )


def build_session(config: AssistantConfig, **kwargs) -> ChatSession:
    """Wire a session to real clients from config."""
    generator = None
    if config.gemini.enabled:
        try:
            generator = GeminiClient(config.gemini)
        except GeminiClientError as e:
            logger.warning("Gemini disabled: %s", e)
    return ChatSession(
        OpenWeatherClient(config.openweather), config, generator=generator, **kwargs
    )
