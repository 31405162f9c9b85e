"""Tests for ISO 8601 parsing and formatting."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from chronoline import ParseError
from chronoline.format import (
    IntervalText,
    format_date,
    format_datetime,
    parse_date,
    parse_datetime,
    parse_duration,
)


class TestParseDate:
    """Tests for parse_date()."""

    def test_valid(self) -> None:
        """Test parsing a calendar date."""
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("text", ["2024-2-1", "2023-02-29", "20240101", "2024-01-01T00:00"])
    def test_invalid(self, text: str) -> None:
        """Test that invalid dates raise ParseError."""
        with pytest.raises(ParseError):
            parse_date(text)


class TestParseDateTime:
    """Tests for parse_datetime()."""

    def test_minutes_only(self) -> None:
        """Test that seconds are optional."""
        assert parse_datetime("2024-01-15T14:30") == datetime(2024, 1, 15, 14, 30)

    def test_fraction(self) -> None:
        """Test fractional seconds padded to microseconds."""
        assert parse_datetime("2024-01-15T14:30:45.5") == datetime(2024, 1, 15, 14, 30, 45, 500000)

    @pytest.mark.parametrize(
        "text", ["2024-01-15", "2024-01-15T25:00", "2024-01-15T14:30Z", "2024-01-15T14:30+01:00"]
    )
    def test_invalid(self, text: str) -> None:
        """Test that invalid or zoned date-times raise ParseError."""
        with pytest.raises(ParseError):
            parse_datetime(text)


class TestParseDuration:
    """Tests for parse_duration()."""

    def test_time_part(self) -> None:
        """Test hours and minutes."""
        assert parse_duration("PT2H30M") == timedelta(hours=2, minutes=30)

    def test_days_and_time(self) -> None:
        """Test days combined with a time part."""
        assert parse_duration("P1DT12H") == timedelta(days=1, hours=12)

    def test_fractional_seconds(self) -> None:
        """Test fractional seconds."""
        assert parse_duration("PT0.25S") == timedelta(milliseconds=250)

    def test_negative(self) -> None:
        """Test a leading minus."""
        assert parse_duration("-PT1H") == timedelta(hours=-1)

    @pytest.mark.parametrize("text", ["P", "PT", "P1DT", "PT1Y"])
    def test_invalid(self, text: str) -> None:
        """Test that malformed durations raise ParseError."""
        with pytest.raises(ParseError):
            parse_duration(text)


class TestFormat:
    """Tests for format_date() and format_datetime()."""

    def test_format_date(self) -> None:
        """Test date formatting."""
        assert format_date(date(2024, 1, 5)) == "2024-01-05"

    def test_seconds_omitted_when_zero(self) -> None:
        """Test that zero seconds are not printed."""
        assert format_datetime(datetime(2024, 1, 15)) == "2024-01-15T00:00"

    def test_seconds_printed(self) -> None:
        """Test that non-zero seconds are printed."""
        assert format_datetime(datetime(2024, 1, 15, 9, 5, 7)) == "2024-01-15T09:05:07"

    def test_milliseconds(self) -> None:
        """Test millisecond precision output."""
        assert format_datetime(datetime(2024, 1, 15, 9, 5, 0, 250000)) == "2024-01-15T09:05:00.250"

    def test_microseconds(self) -> None:
        """Test microsecond precision output."""
        assert format_datetime(datetime(2024, 1, 15, 9, 5, 0, 1)) == "2024-01-15T09:05:00.000001"

    def test_round_trip(self) -> None:
        """Test that formatted date-times parse back to the same value."""
        value = datetime(2024, 1, 15, 23, 59, 59, 999999)
        assert parse_datetime(format_datetime(value)) == value


class TestIntervalText:
    """Tests for splitting the <start>/<end> notation."""

    def test_sides(self) -> None:
        """Test that both sides are exposed."""
        parts = IntervalText.split("2024-01-01/P1M")
        assert parts.start == "2024-01-01"
        assert parts.end == "P1M"
        assert parts.end_is_period
        assert not parts.start_is_infinite

    def test_negative_period_is_not_infinity(self) -> None:
        """Test that '-P1D' is a period, while '-' is infinity."""
        parts = IntervalText.split("-P1D/2024-01-01")
        assert parts.start_is_period
        assert not parts.start_is_infinite

    @pytest.mark.parametrize(
        "text",
        ["2024-01-01", "/2024-01-01", "2024-01-01/", "P1D/P2D", "P1D/-", "-/P1D"],
    )
    def test_invalid(self, text: str) -> None:
        """Test rejected notations."""
        with pytest.raises(ParseError):
            IntervalText.split(text)
