"""Tests for natural-language date conversion."""

from datetime import date, timedelta

from weatherchat.parsing.date_parser import find_date_term, format_date

# A Monday
TODAY = date(2026, 10, 19)


class TestFormatDate:
    def test_today(self):
        assert format_date("today", TODAY) == "2026-10-19"

    def test_tomorrow(self):
        assert format_date("tomorrow", TODAY) == "2026-10-20"

    def test_tomorrow_uses_real_clock_by_default(self):
        expected = (date.today() + timedelta(days=1)).isoformat()
        assert format_date("tomorrow") == expected

    def test_case_insensitive(self):
        assert format_date("Tomorrow", TODAY) == "2026-10-20"

    def test_weekday_today_counts(self):
        assert format_date("monday", TODAY) == "2026-10-19"

    def test_weekday_later_this_week(self):
        assert format_date("friday", TODAY) == "2026-10-23"
        assert format_date("sunday", TODAY) == "2026-10-25"

    def test_weekday_wraps_to_next_week(self):
        tuesday = date(2026, 10, 20)
        assert format_date("monday", tuesday) == "2026-10-26"

    def test_month_day(self):
        assert format_date("march 5", TODAY) == "2026-03-05"

    def test_month_day_overflow_rolls_forward(self):
        assert format_date("february 30", TODAY) == "2026-03-02"

    def test_slash_date(self):
        assert format_date("12/25", TODAY) == "2026-12-25"

    def test_slash_month_overflow(self):
        assert format_date("13/1", TODAY) == "2027-01-01"

    def test_iso_unchanged(self):
        assert format_date("2024-03-05") == "2024-03-05"

    def test_unknown_defaults_to_today(self):
        assert format_date("someday", TODAY) == "2026-10-19"
        assert format_date("", TODAY) == "2026-10-19"


class TestFindDateTerm:
    def test_relative(self):
        assert find_date_term("rain in pune tomorrow") == "tomorrow"

    def test_weekday(self):
        assert find_date_term("sunny in goa on saturday") == "saturday"

    def test_month_day(self):
        assert find_date_term("snow in oslo on january 12") == "january 12"

    def test_slash(self):
        assert find_date_term("wind at chennai on 3/14") == "3/14"

    def test_iso(self):
        assert find_date_term("rain in pune on 2024-03-05") == "2024-03-05"

    def test_relative_wins_over_weekday(self):
        assert find_date_term("friday or tomorrow") == "tomorrow"

    def test_none(self):
        assert find_date_term("rain in pune") is None
