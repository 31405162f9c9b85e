"""Tests for the Period class and period arithmetic."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from chronoline import ParseError, Period
from chronoline.arithmetic import add_period, shift, subtract_period, unshift


class TestPeriodConstruction:
    """Tests for Period construction."""

    def test_default_is_zero(self) -> None:
        """Test that Period() is the zero period."""
        period = Period()
        assert period.is_zero
        assert not period
        assert period == Period.zero()

    def test_factories(self) -> None:
        """Test the of_* factory methods."""
        assert Period.of_years(2).years == 2
        assert Period.of_months(3).months == 3
        assert Period.of_weeks(4).weeks == 4
        assert Period.of_days(5).days == 5

    def test_totals(self) -> None:
        """Test total_months and total_days."""
        period = Period(years=1, months=2, weeks=3, days=4)
        assert period.total_months == 14
        assert period.total_days == 25

    def test_normalized(self) -> None:
        """Test normalization of months and days."""
        assert Period(months=14, days=10).normalized() == Period(
            years=1, months=2, weeks=1, days=3
        )


class TestPeriodBetween:
    """Tests for Period.between()."""

    def test_whole_year(self) -> None:
        """Test a full year."""
        assert Period.between(date(2024, 1, 1), date(2025, 1, 1)) == Period(years=1)

    def test_months_and_days(self) -> None:
        """Test a span of years, months and days."""
        assert Period.between(date(2024, 1, 15), date(2025, 3, 20)) == Period(
            years=1, months=2, days=5
        )

    def test_end_of_month_borrow(self) -> None:
        """Test borrowing days when the end day is smaller."""
        assert Period.between(date(2024, 1, 31), date(2024, 3, 1)) == Period(months=1, days=1)

    def test_same_date(self) -> None:
        """Test that equal dates give the zero period."""
        assert Period.between(date(2024, 5, 5), date(2024, 5, 5)).is_zero

    def test_adding_result_reaches_end(self) -> None:
        """Test that start + between(start, end) == end."""
        start, end = date(2023, 11, 30), date(2024, 2, 14)
        assert add_period(start, Period.between(start, end)) == end

    def test_reversed_dates(self) -> None:
        """Test a negative span, measured from the clamped month end."""
        assert Period.between(date(2024, 4, 30), date(2024, 1, 31)) == Period(
            months=-2, days=-29
        )
        assert Period.between(date(2025, 3, 20), date(2024, 1, 15)) == Period(
            years=-1, months=-2, days=-5
        )

    @pytest.mark.parametrize(
        "start, end",
        [
            (date(2024, 4, 30), date(2024, 1, 31)),
            (date(2024, 3, 31), date(2024, 2, 28)),
            (date(2023, 3, 31), date(2023, 2, 27)),
            (date(2024, 1, 31), date(2023, 11, 30)),
            (date(2024, 1, 31), date(2024, 3, 30)),
            (date(2024, 2, 29), date(2025, 2, 28)),
        ],
    )
    def test_adding_result_reaches_end_both_ways(self, start: date, end: date) -> None:
        """Test that start + between(start, end) == end in either direction."""
        assert add_period(start, Period.between(start, end)) == end
        assert add_period(end, Period.between(end, start)) == start


class TestPeriodArithmetic:
    """Tests for adding periods to timepoints."""

    def test_month_clamping_leap_year(self) -> None:
        """Test Jan 31 + 1 month clamps to Feb 29 in a leap year."""
        assert add_period(date(2024, 1, 31), Period(months=1)) == date(2024, 2, 29)

    def test_month_clamping_common_year(self) -> None:
        """Test Jan 31 + 1 month clamps to Feb 28 in a common year."""
        assert add_period(date(2023, 1, 31), Period(months=1)) == date(2023, 2, 28)

    def test_leap_day_plus_year(self) -> None:
        """Test Feb 29 + 1 year clamps to Feb 28."""
        assert add_period(date(2024, 2, 29), Period(years=1)) == date(2025, 2, 28)

    def test_months_applied_before_days(self) -> None:
        """Test that months are applied before days."""
        assert add_period(date(2024, 1, 31), Period(months=1, days=1)) == date(2024, 3, 1)

    def test_datetime_keeps_time(self) -> None:
        """Test that the time of day is preserved."""
        result = add_period(datetime(2024, 1, 31, 14, 30), Period(months=1))
        assert result == datetime(2024, 2, 29, 14, 30)

    def test_subtract(self) -> None:
        """Test subtracting a period."""
        assert subtract_period(date(2024, 3, 31), Period(months=1)) == date(2024, 2, 29)

    def test_operators_with_dates(self) -> None:
        """Test date + Period and date - Period."""
        assert date(2024, 1, 1) + Period(weeks=1) == date(2024, 1, 8)
        assert date(2024, 1, 8) - Period(weeks=1) == date(2024, 1, 1)

    def test_period_algebra(self) -> None:
        """Test addition, negation and scaling of periods."""
        assert Period(months=1) + Period(days=2) == Period(months=1, days=2)
        assert -Period(years=1) == Period(years=-1)
        assert Period(days=2) * 3 == Period(days=6)
        assert sum([Period(days=1), Period(days=2)]) == Period(days=3)

    def test_shift_accepts_timedelta_and_period(self) -> None:
        """Test shift and unshift with both kinds of amounts."""
        point = datetime(2024, 1, 31, 12)
        assert shift(point, timedelta(hours=12)) == datetime(2024, 2, 1)
        assert shift(point, Period(months=1)) == datetime(2024, 2, 29, 12)
        assert unshift(point, timedelta(days=1)) == datetime(2024, 1, 30, 12)
        assert unshift(point, Period(days=1)) == datetime(2024, 1, 30, 12)


class TestPeriodText:
    """Tests for Period parsing and formatting."""

    def test_str(self) -> None:
        """Test ISO 8601 output with weeks folded into days."""
        assert str(Period(years=1, months=2, weeks=1, days=3)) == "P1Y2M10D"
        assert str(Period()) == "P0D"

    def test_parse(self) -> None:
        """Test parsing every component."""
        assert Period.parse("P1Y2M3W4D") == Period(years=1, months=2, weeks=3, days=4)

    def test_parse_negative(self) -> None:
        """Test that a leading minus negates every component."""
        assert Period.parse("-P1M2D") == Period(months=-1, days=-2)

    @pytest.mark.parametrize("text", ["", "P", "1D", "PT1H", "P1H", "P1D2M"])
    def test_parse_invalid(self, text: str) -> None:
        """Test that malformed periods raise ParseError."""
        with pytest.raises(ParseError):
            Period.parse(text)

    def test_repr(self) -> None:
        """Test the repr shows every component."""
        assert repr(Period(days=1)) == "Period(years=0, months=0, weeks=0, days=1)"
