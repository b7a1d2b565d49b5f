"""Weather chat HTTP API: FastAPI app around a single ChatSession."""

from dataclasses import asdict
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from weatherchat.chat.session import ChatSession, build_session
from weatherchat.config.loader import load_config
from weatherchat.config.schema import AssistantConfig
from weatherchat.ingest.openweather_client import WeatherClientError


class ChatRequest(BaseModel):
    text: str


def create_app(
    config: AssistantConfig | None = None,
    session: ChatSession | None = None,
) -> FastAPI:
    config = config or load_config()
    session = session or build_session(config)
    weather = session.weather

    app = FastAPI(title="Weather Chat Assistant", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Chat endpoints ──────────────────────────────────────────────

    @app.post("/api/chat")
    def post_chat(req: ChatRequest):
        """Send one message; returns the assistant's reply."""
        if not req.text.strip():
            raise HTTPException(400, "Message text is empty")
        if session.is_loading:
            raise HTTPException(409, "A request is already in progress")
        reply = session.send(req.text)
        if reply is None:
            raise HTTPException(409, "Message was not accepted")
        return reply.to_dict()

    @app.get("/api/messages")
    def get_messages():
        """Full transcript, oldest first."""
        return [m.to_dict() for m in session.messages]

    @app.get("/api/status")
    def get_status():
        return {
            "location": session.location,
            "loading": session.is_loading,
            "error": session.error,
            "message_count": len(session.messages),
            "timestamp": datetime.now(UTC).isoformat(),
        }

    # ── Weather endpoints ───────────────────────────────────────────

    @app.get("/api/weather/{city}")
    def get_weather(city: str, country: str | None = None):
        try:
            return asdict(weather.get_current(city, country))
        except WeatherClientError as e:
            raise HTTPException(502, str(e)) from e

    @app.get("/api/forecast/{city}")
    def get_forecast(city: str, country: str | None = None, days: int | None = None):
        days = days or config.defaults.forecast_days
        try:
            return asdict(weather.get_forecast(city, country, days))
        except WeatherClientError as e:
            raise HTTPException(502, str(e)) from e

    @app.get("/api/locations")
    def get_locations(q: str, limit: int | None = None):
        limit = limit or config.defaults.search_limit
        try:
            return [asdict(m) for m in weather.search_locations(q, limit)]
        except WeatherClientError as e:
            raise HTTPException(502, str(e)) from e

    return app
