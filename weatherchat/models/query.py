"""Parsed natural-language weather query."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedQuery:
    location: str
    date: str  # raw date term, e.g. "tomorrow" or "march 5"
    weather_type: str
    is_range: bool
    end_date: str | None = None  # YYYY-MM-DD
