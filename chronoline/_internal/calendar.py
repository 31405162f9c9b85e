"""Calendar utilities for Chronoline.

This module provides internal functions for calendar calculations: leap
years, month lengths and ISO week boundaries.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

from chronoline._internal.constants import DAYS_IN_MONTH, DAYS_PER_WEEK


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def start_of_week(day: _datetime.date) -> _datetime.date:
    """Return the Monday of the ISO week containing ``day``."""
    return day - _datetime.timedelta(days=day.isoweekday() - 1)


def end_of_week(day: _datetime.date) -> _datetime.date:
    """Return the Sunday of the ISO week containing ``day``."""
    return day + _datetime.timedelta(days=DAYS_PER_WEEK - day.isoweekday())


def iso_week_bounds(year: int, week: int) -> tuple[_datetime.date, _datetime.date]:
    """Return the first (Monday) and last (Sunday) day of an ISO week.

    Args:
        year: The ISO week-numbering year.
        week: The ISO week number (1-52 or 53).

    Returns:
        A (monday, sunday) tuple.

    Raises:
        ValueError: If the week does not exist in that year.

    Examples:
        >>> iso_week_bounds(2024, 1)
        (datetime.date(2024, 1, 1), datetime.date(2024, 1, 7))
        >>> iso_week_bounds(2021, 53)
        Traceback (most recent call last):
        ...
        ValueError: Invalid week: 53
    """
    monday = _datetime.date.fromisocalendar(year, week, 1)
    return monday, monday + _datetime.timedelta(days=DAYS_PER_WEEK - 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "start_of_week",
    "end_of_week",
    "iso_week_bounds",
]
