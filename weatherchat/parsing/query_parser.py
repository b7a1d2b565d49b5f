"""Extract location, date and weather intent from free-text questions.

Location extraction is a cascade; the first rule that produces a candidate
wins:

1. the whole query is one capitalized word ("Bangalore")
2. a phrase template such as "weather in X" or "X forecast"
3. a known city name anywhere in the query
4. any capitalized word that is not a common English or weather word
"""

import re
from datetime import date, timedelta

from weatherchat.config.defaults import (
    COMMON_WORDS,
    KNOWN_CITIES,
    PROBABILITY_WEATHER_TYPES,
    WEATHER_KEYWORDS,
)
from weatherchat.models.query import ParsedQuery
from weatherchat.parsing.date_parser import (
    DATE_TERM_PATTERNS,
    MONTH_NAMES,
    WEEKDAY_NAMES,
    find_date_term,
    format_date,
)

_KW = "|".join(WEATHER_KEYWORDS)
_PLACE = r"([A-Za-z\s,.-]+?)"
_END = r"(?:\s|$|\.|,|\?)"

_SINGLE_WORD_RE = re.compile(r"^[A-Z][a-z]+$")

LOCATION_PATTERNS = [
    # "weather in [location]"
    re.compile(rf"(?:{_KW})\s+(?:in|at|for|of)\s+{_PLACE}{_END}", re.IGNORECASE),
    # "[location] weather"
    re.compile(rf"{_PLACE}(?:\s+(?:{_KW}))", re.IGNORECASE),
    # "what's the weather in [location]"
    re.compile(
        rf"(?:what's|whats|what is)\s+(?:the\s+)?(?:{_KW})\s+(?:in|at|for|of)\s+{_PLACE}{_END}",
        re.IGNORECASE,
    ),
    # "how is the weather in [location]"
    re.compile(
        rf"(?:how is|how's)\s+(?:the\s+)?(?:{_KW})\s+(?:in|at|for|of)\s+{_PLACE}{_END}",
        re.IGNORECASE,
    ),
    # "tell me the weather in [location]"
    re.compile(
        rf"(?:tell me|show me)\s+(?:the\s+)?(?:{_KW})\s+(?:in|at|for|of)\s+{_PLACE}{_END}",
        re.IGNORECASE,
    ),
]

_DISALLOWED_CHARS_RE = re.compile(r"[^\w\s,.-]")
_COMMON_WORD_RE = re.compile(
    r"\b(?:" + "|".join(sorted(COMMON_WORDS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)
_TITLE_WORD_RE = re.compile(r"\s+([A-Z][a-z]+)")

_CITY_PATTERNS = [
    (city, re.compile(rf"(?<![\w]){re.escape(city)}(?![\w])", re.IGNORECASE))
    for city in KNOWN_CITIES
]

_WEATHER_QUERY_RE = re.compile(_KW, re.IGNORECASE)

# Date terms that end a location in the "in X tomorrow" templates
_DATE_WORDS = "|".join(
    ["tomorrow", "today"] + WEEKDAY_NAMES + MONTH_NAMES
    + [r"\d{1,2}/\d{1,2}", r"\d{4}-\d{2}-\d{2}"]
)

PROBABILITY_LOCATION_PATTERNS = [
    re.compile(rf"\b(?:in|at|for)\s+([a-z\s]+?)(?:\s+(?:{_DATE_WORDS}))"),
    re.compile(
        rf"(?:weather|rain|sunny|cloudy|snow)\s+(?:in|at|for)\s+([a-z\s]+?)(?:\s+(?:{_DATE_WORDS}))"
    ),
    re.compile(rf"([a-z\s]+?)(?:\s+(?:{_DATE_WORDS}))"),
]

_TRAILING_FILLER_RE = re.compile(r"\s+(?:from|on|this|next|between)$")
_RANGE_RE = re.compile(r"\b(?:week|range|to)\b")
_END_DATE_RE = re.compile(r"\b(?:to|until|through)\s+(.+)$")
RANGE_DEFAULT_DAYS = 6


def _clean_location(raw: str) -> str:
    location = _DISALLOWED_CHARS_RE.sub("", raw).strip()
    location = _COMMON_WORD_RE.sub("", location)
    location = re.sub(r"\s{2,}", " ", location)
    return location.strip(" ,.-")


def _extend_title_case(query: str, end: int, location: str) -> str:
    """Append the title-case words that directly follow a captured place.

    The phrase templates stop at the first space, so "weather in New York"
    captures "New"; the rest of the name is picked up here.
    """
    pos = end
    while True:
        m = _TITLE_WORD_RE.match(query, pos)
        if m is None or m.group(1).lower() in COMMON_WORDS:
            return location
        location = f"{location} {m.group(1)}"
        pos = m.end()


def extract_location(query: str) -> str | None:
    """Best-effort place name from free text, or None."""
    clean_query = query.strip()

    if _SINGLE_WORD_RE.match(clean_query):
        return clean_query

    for pattern in LOCATION_PATTERNS:
        m = pattern.search(query)
        if m and m.group(1):
            location = _clean_location(m.group(1))
            if len(location) > 1:
                return _extend_title_case(query, m.end(1), location)

    for city, pattern in _CITY_PATTERNS:
        if pattern.search(query):
            return city

    for word in query.split():
        if len(word) > 2 and _SINGLE_WORD_RE.match(word) and word.lower() not in COMMON_WORDS:
            return word

    return None


def mentions_known_city(query: str) -> bool:
    return any(pattern.search(query) for _, pattern in _CITY_PATTERNS)


def is_weather_query(query: str) -> bool:
    """Whether a chat message should be answered with live weather data."""
    return bool(
        _WEATHER_QUERY_RE.search(query)
        or _SINGLE_WORD_RE.match(query.strip())
        or mentions_known_city(query)
    )


def detect_weather_type(query: str) -> str:
    lower = query.lower()
    for weather_type in PROBABILITY_WEATHER_TYPES:
        if weather_type in lower:
            return weather_type
    return "rain"


def parse_weather_query(query: str, today: date | None = None) -> ParsedQuery | None:
    """Parse a probability question such as "rain in pune tomorrow".

    Returns None unless both a location and a date term are present.
    """
    lower = query.lower()

    location = ""
    for pattern in PROBABILITY_LOCATION_PATTERNS:
        m = pattern.search(lower)
        if m:
            location = _TRAILING_FILLER_RE.sub("", m.group(1).strip())
            break

    date_term = find_date_term(lower)
    if not location or not date_term:
        return None

    is_range = bool(_RANGE_RE.search(lower))
    end_date = None
    if is_range:
        end_date = _range_end(lower, date_term, today)

    return ParsedQuery(
        location=location,
        date=date_term,
        weather_type=detect_weather_type(lower),
        is_range=is_range,
        end_date=end_date,
    )


def _range_end(lower: str, start_term: str, today: date | None) -> str:
    m = _END_DATE_RE.search(lower)
    if m:
        for pattern in DATE_TERM_PATTERNS:
            end = pattern.search(m.group(1))
            if end:
                return format_date(end.group(0), today)
    start = date.fromisoformat(format_date(start_term, today))
    return (start + timedelta(days=RANGE_DEFAULT_DAYS)).isoformat()
