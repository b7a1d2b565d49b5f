"""Convert natural-language date terms to ISO dates."""

import re
from datetime import date, timedelta

WEEKDAY_NAMES = [
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
]

MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

_MONTH_DAY_RE = re.compile(rf"({'|'.join(MONTH_NAMES)})\s+(\d{{1,2}})")
_SLASH_RE = re.compile(r"(\d{1,2})/(\d{1,2})")
_ISO_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Date terms as they appear inside a query, in priority order
DATE_TERM_PATTERNS = [
    re.compile(r"tomorrow|today"),
    re.compile(rf"{'|'.join(WEEKDAY_NAMES)}"),
    _MONTH_DAY_RE,
    _SLASH_RE,
    _ISO_RE,
]


def _rolled_date(year: int, month: int, day: int) -> date:
    """Build a date, letting out-of-range months and days spill forward.

    "february 30" lands on March 1st or 2nd and month 13 on next January.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def format_date(date_str: str, today: date | None = None) -> str:
    """Convert a date term to YYYY-MM-DD.

    Understands today/tomorrow, weekday names (next occurrence, today
    included), "month day" and M/D in the current year, and ISO dates,
    which pass through unchanged. Anything else means today.
    """
    today = today or date.today()
    term = date_str.strip().lower()

    if term == "today":
        return today.isoformat()
    if term == "tomorrow":
        return (today + timedelta(days=1)).isoformat()

    if term in WEEKDAY_NAMES:
        days_ahead = (WEEKDAY_NAMES.index(term) - today.weekday()) % 7
        return (today + timedelta(days=days_ahead)).isoformat()

    m = _MONTH_DAY_RE.search(term)
    if m:
        month = MONTH_NAMES.index(m.group(1)) + 1
        return _rolled_date(today.year, month, int(m.group(2))).isoformat()

    m = _SLASH_RE.search(term)
    if m:
        return _rolled_date(today.year, int(m.group(1)), int(m.group(2))).isoformat()

    if _ISO_RE.search(term):
        return date_str.strip()

    return today.isoformat()


def find_date_term(text: str) -> str | None:
    """Return the first date term found in lower-cased text, or None."""
    for pattern in DATE_TERM_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.group(0)
    return None
