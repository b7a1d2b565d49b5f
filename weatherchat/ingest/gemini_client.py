"""Gemini generateContent client for free-form assistant answers."""

import logging

import httpx

from weatherchat.config.schema import GeminiConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a friendly weather assistant. Answer briefly. If the question "
    "is not about weather, answer it and suggest asking about the weather "
    "in a specific city."
)


class GeminiClientError(Exception):
    """Raised when Gemini returns an error or an empty answer."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GeminiClient:
    def __init__(self, config: GeminiConfig):
        if not config.api_key:
            raise GeminiClientError("GEMINI_API_KEY not set")
        self.api_key = config.api_key
        self.endpoint = config.endpoint
        self.timeout = config.timeout

    def generate(self, prompt: str) -> str:
        """Return the first candidate's text for a prompt."""
        body = {
            "contents": [{"parts": [{"text": f"{SYSTEM_PROMPT}\n\nUser: {prompt}"}]}],
        }
        try:
            resp = httpx.post(
                self.endpoint,
                params={"key": self.api_key},
                json=body,
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("Gemini request failed: %s", e)
            raise GeminiClientError(f"Request failed: {e}") from e
        if resp.status_code >= 400:
            logger.error("Gemini API %d: %s", resp.status_code, resp.text)
            raise GeminiClientError(f"HTTP {resp.status_code}", resp.status_code)

        try:
            parts = resp.json()["candidates"][0]["content"]["parts"]
            text = "".join(p.get("text", "") for p in parts).strip()
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GeminiClientError("Unexpected Gemini response") from e
        if not text:
            raise GeminiClientError("Empty Gemini response")
        return text
