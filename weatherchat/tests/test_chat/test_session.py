"""Tests for the chat session turn logic."""

import re
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from weatherchat.chat.session import (
    ERROR_TEXT,
    FALLBACK_TEMPLATE,
    HELP_TEXT,
    ChatSession,
    build_session,
)
from weatherchat.config.schema import AssistantConfig
from weatherchat.ingest.gemini_client import GeminiClient, GeminiClientError
from weatherchat.ingest.openweather_client import OpenWeatherClient, WeatherClientError
from weatherchat.models.weather import CurrentConditions, LocationInfo, WeatherSnapshot
from weatherchat.tests.conftest import OPENWEATHER_TEST_BASE

FALLBACK_RE = re.compile(
    r"^I'm having trouble getting weather data for .+\. Please try using the "
    r"Global Weather tab to get real-time weather information\.$"
)


def _snapshot(name: str = "Tokyo", temp: float = 32, humidity: float = 80) -> WeatherSnapshot:
    return WeatherSnapshot(
        location=LocationInfo(name=name, country="JP", lat=35.7, lon=139.7),
        current=CurrentConditions(
            temperature=temp, humidity=humidity, pressure=1008,
            wind_speed=4.1, description="clear sky", icon="01d",
        ),
    )


@pytest.fixture
def weather() -> MagicMock:
    client = MagicMock(spec=OpenWeatherClient)
    client.get_current.return_value = _snapshot()
    client.get_forecast.return_value = _snapshot()
    return client


@pytest.fixture
def session(weather: MagicMock) -> ChatSession:
    return ChatSession(weather, AssistantConfig())


class TestGreeting:
    def test_initial_message(self, session: ChatSession):
        assert len(session.messages) == 1
        greeting = session.messages[0]
        assert not greeting.is_user
        assert greeting.confidence == 1.0
        assert "Mumbai" in greeting.text
        assert greeting.sources == ("Gemini AI", "OpenWeatherMap", "WeatherAPI")

    def test_starting_location(self, weather: MagicMock):
        session = ChatSession(weather, AssistantConfig(), location="Delhi")
        assert session.location == "Delhi"
        assert "Delhi" in session.messages[0].text


class TestSend:
    def test_blank_input_ignored(self, session: ChatSession):
        assert session.send("   ") is None
        assert len(session.messages) == 1

    def test_ignored_while_loading(self, session: ChatSession):
        session.is_loading = True
        assert session.send("weather in Tokyo") is None
        assert len(session.messages) == 1

    def test_weather_reply(self, session: ChatSession, weather: MagicMock):
        reply = session.send("temperature in Tokyo")

        weather.get_current.assert_called_once_with("Tokyo")
        assert reply is not None
        assert reply.confidence == 0.9
        assert reply.sources == ("OpenWeatherMap", "Real-time Data")
        assert "quite warm" in reply.text
        assert "80%" in reply.text
        assert session.is_loading is False
        assert session.error is None

    def test_messages_appended_in_order(self, session: ChatSession):
        session.send("Tokyo")
        session.send("tell me a joke")
        texts = [(m.is_user, m.text) for m in session.messages]
        assert [t[0] for t in texts] == [False, True, False, True, False]
        assert texts[1][1] == "Tokyo"
        assert texts[3][1] == "tell me a joke"

    def test_single_word_location(self, session: ChatSession, weather: MagicMock):
        session.send("Bangalore")
        weather.get_current.assert_called_once_with("Bangalore")
        assert session.location == "Bangalore"

    def test_location_change_callback(self, weather: MagicMock):
        seen: list[str] = []
        session = ChatSession(weather, AssistantConfig(), on_location_change=seen.append)
        session.send("weather in Tokyo")
        session.send("weather in Tokyo")
        assert seen == ["Tokyo"]

    def test_default_location_when_none_extracted(self, session: ChatSession, weather: MagicMock):
        session.send("how windy is it")
        weather.get_current.assert_called_once_with("Mumbai")

    def test_previous_location_reused(self, session: ChatSession, weather: MagicMock):
        session.send("weather in Tokyo")
        session.send("is it windy")
        assert weather.get_current.call_args_list[-1].args == ("Tokyo",)

    def test_forecast_uses_forecast_endpoint(self, session: ChatSession, weather: MagicMock):
        session.send("forecast for Paris")
        weather.get_forecast.assert_called_once_with("Paris", days=5)
        weather.get_current.assert_not_called()

    def test_weather_forecast_uses_current_endpoint(
        self, session: ChatSession, weather: MagicMock
    ):
        reply = session.send("weather forecast for Paris")
        weather.get_current.assert_called_once_with("Paris")
        weather.get_forecast.assert_not_called()
        assert reply.text.startswith("Current weather in Paris:")

    def test_weather_failure_falls_back(self, session: ChatSession, weather: MagicMock):
        weather.get_current.side_effect = WeatherClientError("Failed", 500)
        reply = session.send("weather in Tokyo")

        assert reply is not None
        assert reply.text == FALLBACK_TEMPLATE.format(location="Tokyo")
        assert FALLBACK_RE.match(reply.text)
        assert reply.confidence == 0.5
        assert reply.sources == ("Fallback Response",)
        assert session.error is None

    def test_non_weather_query(self, session: ChatSession, weather: MagicMock):
        reply = session.send("tell me a joke")
        assert reply is not None
        assert reply.text == HELP_TEXT
        assert reply.confidence == 0.8
        weather.get_current.assert_not_called()

    def test_unexpected_error(self, session: ChatSession, weather: MagicMock):
        weather.get_current.side_effect = RuntimeError("boom")
        reply = session.send("weather in Tokyo")

        assert reply is not None
        assert reply.text == ERROR_TEXT
        assert reply.confidence == 0
        assert session.error == "boom"
        assert session.is_loading is False

    def test_error_cleared_on_next_send(self, session: ChatSession, weather: MagicMock):
        weather.get_current.side_effect = [RuntimeError("boom"), _snapshot()]
        session.send("weather in Tokyo")
        session.send("weather in Tokyo")
        assert session.error is None

    def test_messages_are_a_snapshot(self, session: ChatSession):
        messages = session.messages
        session.send("Tokyo")
        assert len(messages) == 1


class TestGenerator:
    def test_generated_answer(self, weather: MagicMock):
        generator = MagicMock(spec=GeminiClient)
        generator.generate.return_value = "Why did the cloud..."
        session = ChatSession(weather, AssistantConfig(), generator=generator)

        reply = session.send("tell me a joke")
        assert reply.text == "Why did the cloud..."
        assert reply.sources == ("Gemini AI",)

    def test_generator_failure_uses_help_text(self, weather: MagicMock):
        generator = MagicMock(spec=GeminiClient)
        generator.generate.side_effect = GeminiClientError("HTTP 500", 500)
        session = ChatSession(weather, AssistantConfig(), generator=generator)

        reply = session.send("tell me a joke")
        assert reply.text == HELP_TEXT
        assert reply.confidence == 0.8

    def test_generator_not_used_for_weather(self, weather: MagicMock):
        generator = MagicMock(spec=GeminiClient)
        session = ChatSession(weather, AssistantConfig(), generator=generator)
        session.send("weather in Tokyo")
        generator.generate.assert_not_called()


class TestBuildSession:
    def test_gemini_disabled_by_default(self, test_config: AssistantConfig):
        session = build_session(test_config)
        assert session.generator is None

    def test_gemini_enabled(self, test_config: AssistantConfig):
        config = test_config.model_copy(
            update={"gemini": test_config.gemini.model_copy(update={"enabled": True})}
        )
        assert isinstance(build_session(config).generator, GeminiClient)

    def test_gemini_enabled_without_key(self):
        config = AssistantConfig(gemini={"enabled": True})
        assert build_session(config).generator is None

    @respx.mock
    def test_http_failure_end_to_end(self, test_config: AssistantConfig):
        respx.get(url__startswith=f"{OPENWEATHER_TEST_BASE}/weather").mock(
            return_value=httpx.Response(503)
        )
        session = build_session(test_config)
        reply = session.send("what's the weather in Tokyo")

        assert FALLBACK_RE.match(reply.text)
        assert "Tokyo" in reply.text
        assert reply.confidence == 0.5

    @respx.mock
    def test_success_end_to_end(self, test_config: AssistantConfig, load_fixture):
        respx.get(url__startswith=f"{OPENWEATHER_TEST_BASE}/weather").mock(
            return_value=httpx.Response(200, json=load_fixture("openweather_current_tokyo.json"))
        )
        session = build_session(test_config)
        reply = session.send("what's the temperature in Tokyo")
        assert reply.text.startswith("The current temperature in Tokyo is 32°C, which is quite warm.")
