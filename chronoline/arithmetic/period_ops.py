"""Period arithmetic operations for timepoints.

This module provides functions for adding Period values to ``date`` and
``datetime`` timepoints, implementing month overflow clamping.

Clamping behavior:
    When adding a Period results in an invalid date (e.g., Jan 31 + 1 month),
    the day is clamped to the last valid day of the target month.

Examples:
    date(2024, 1, 31) + Period(months=1) -> date(2024, 2, 29)  # leap year
    date(2023, 1, 31) + Period(months=1) -> date(2023, 2, 28)
    date(2024, 3, 31) + Period(months=1) -> date(2024, 4, 30)
    date(2024, 2, 29) + Period(years=1)  -> date(2025, 2, 28)
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, TypeVar

from chronoline._internal.calendar import days_in_month
from chronoline._internal.constants import MONTHS_PER_YEAR

if TYPE_CHECKING:
    from chronoline.core.period import Period

P = TypeVar("P", _datetime.date, _datetime.datetime)


def add_period(point: P, period: Period) -> P:
    """Add a Period to a date or datetime, clamping the day if necessary.

    The components are applied in order:
    1. Years and months (day clamped to the target month)
    2. Weeks and days (as total_days)

    The time of a datetime is preserved.

    Args:
        point: The date or datetime to add to.
        period: The period to add.

    Returns:
        A new timepoint of the same type, offset by the period.

    Examples:
        >>> import datetime
        >>> from chronoline.core.period import Period
        >>> add_period(datetime.date(2024, 1, 31), Period(months=1))
        datetime.date(2024, 2, 29)

        >>> add_period(datetime.datetime(2024, 2, 29, 14, 30), Period(years=1))
        datetime.datetime(2025, 2, 28, 14, 30)
    """
    result = point

    if period.total_months != 0:
        total_months = point.year * MONTHS_PER_YEAR + (point.month - 1) + period.total_months
        year, month_index = divmod(total_months, MONTHS_PER_YEAR)
        month = month_index + 1
        day = min(point.day, days_in_month(year, month))
        result = point.replace(year=year, month=month, day=day)

    if period.total_days != 0:
        result = result + _datetime.timedelta(days=period.total_days)

    return result


def subtract_period(point: P, period: Period) -> P:
    """Subtract a Period from a date or datetime.

    This is equivalent to adding the negated period.

    Examples:
        >>> import datetime
        >>> from chronoline.core.period import Period
        >>> subtract_period(datetime.date(2024, 3, 31), Period(months=1))
        datetime.date(2024, 2, 29)
    """
    return add_period(point, -period)


def shift(point: P, amount: _datetime.timedelta | Period) -> P:
    """Move a timepoint by either an exact timedelta or a calendar Period."""
    if isinstance(amount, _datetime.timedelta):
        return point + amount
    return add_period(point, amount)


def unshift(point: P, amount: _datetime.timedelta | Period) -> P:
    """Move a timepoint backwards by a timedelta or a Period."""
    if isinstance(amount, _datetime.timedelta):
        return point - amount
    return subtract_period(point, amount)


__all__ = [
    "add_period",
    "subtract_period",
    "shift",
    "unshift",
]
