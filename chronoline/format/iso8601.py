"""ISO 8601 formatting and parsing.

This module provides functions for converting timepoints, periods and
durations to and from ISO 8601 string representations.

Functions:
    parse_date / format_date: ``YYYY-MM-DD``
    parse_datetime / format_datetime: ``YYYY-MM-DDTHH:MM[:SS[.fffffff]]``
    parse_period: ``P1Y2M3W4D`` calendar periods
    parse_duration: ``PT2H30M``, ``P1DT12H`` exact durations

Only naive (local) date-times are supported: a timezone designator such as
``Z`` or ``+01:00`` is a parse error.

Examples:
    >>> parse_date("2024-01-15")
    datetime.date(2024, 1, 15)

    >>> parse_datetime("2024-01-15T14:30")
    datetime.datetime(2024, 1, 15, 14, 30)

    >>> format_datetime(datetime.datetime(2024, 1, 15, 14, 30, 45))
    '2024-01-15T14:30:45'
"""

from __future__ import annotations

import datetime
import re

from chronoline.core.period import Period
from chronoline.errors import ParseError

_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

_DATETIME_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"
    r"[Tt](\d{2}):(\d{2})"
    r"(?::(\d{2})(?:[.,](\d{1,6}))?)?$"
)

_PERIOD_PATTERN = re.compile(
    r"^([-+]?)P"
    r"(?:([-+]?\d+)Y)?"
    r"(?:([-+]?\d+)M)?"
    r"(?:([-+]?\d+)W)?"
    r"(?:([-+]?\d+)D)?$",
    re.IGNORECASE,
)

_DURATION_PATTERN = re.compile(
    r"^([-+]?)P"
    r"(?:([-+]?\d+)D)?"
    r"(?:T"
    r"(?:([-+]?\d+)H)?"
    r"(?:([-+]?\d+)M)?"
    r"(?:([-+]?\d+)(?:[.,](\d{1,6}))?S)?"
    r")?$",
    re.IGNORECASE,
)


def parse_date(s: str) -> datetime.date:
    """Parse an ISO 8601 calendar date.

    Args:
        s: A string like ``2024-01-15``.

    Returns:
        The parsed date.

    Raises:
        ParseError: If the string is not a valid date.
    """
    match = _DATE_PATTERN.match(s.strip())
    if match is None:
        raise ParseError(f"invalid ISO 8601 date: {s!r}. Expected YYYY-MM-DD")

    year, month, day = (int(group) for group in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError as e:
        raise ParseError(f"invalid ISO 8601 date: {s!r}: {e}") from e


def parse_datetime(s: str) -> datetime.datetime:
    """Parse an ISO 8601 local date-time.

    Seconds and fractional seconds (up to microseconds) are optional.

    Args:
        s: A string like ``2024-01-15T14:30`` or ``2024-01-15T14:30:45.5``.

    Returns:
        The parsed naive datetime.

    Raises:
        ParseError: If the string is not a valid local date-time.

    Examples:
        >>> parse_datetime("2024-01-15T14:30:45.5")
        datetime.datetime(2024, 1, 15, 14, 30, 45, 500000)
    """
    match = _DATETIME_PATTERN.match(s.strip())
    if match is None:
        raise ParseError(
            f"invalid ISO 8601 date-time: {s!r}. Expected YYYY-MM-DDTHH:MM[:SS[.ffffff]]"
        )

    year, month, day, hour, minute, second, fraction = match.groups()
    try:
        return datetime.datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second or 0),
            int((fraction or "0").ljust(6, "0")),
        )
    except ValueError as e:
        raise ParseError(f"invalid ISO 8601 date-time: {s!r}: {e}") from e


def parse_period(s: str) -> Period:
    """Parse an ISO 8601 period with year, month, week and day components.

    A leading sign negates every component.

    Raises:
        ParseError: If the string is not a valid period.

    Examples:
        >>> parse_period("P1Y2M3W4D")
        Period(years=1, months=2, weeks=3, days=4)
    """
    text = s.strip()
    match = _PERIOD_PATTERN.match(text)
    if match is None or all(group is None for group in match.groups()[1:]):
        raise ParseError(f"invalid ISO 8601 period: {s!r}")

    sign = -1 if match.group(1) == "-" else 1
    years, months, weeks, days = (int(group or 0) * sign for group in match.groups()[1:])
    return Period(years=years, months=months, weeks=weeks, days=days)


def parse_duration(s: str) -> datetime.timedelta:
    """Parse an ISO 8601 duration made of days and a time part.

    Raises:
        ParseError: If the string is not a valid duration.

    Examples:
        >>> parse_duration("PT2H30M")
        datetime.timedelta(seconds=9000)
        >>> parse_duration("P1DT12H")
        datetime.timedelta(days=1, seconds=43200)
    """
    text = s.strip()
    match = _DURATION_PATTERN.match(text)
    if match is None:
        raise ParseError(f"invalid ISO 8601 duration: {s!r}")

    sign_str, days, hours, minutes, seconds, fraction = match.groups()
    if all(group is None for group in (days, hours, minutes, seconds)):
        raise ParseError(f"invalid ISO 8601 duration: {s!r}")
    if text.upper().endswith("T"):
        raise ParseError(f"invalid ISO 8601 duration: {s!r}: empty time part")

    micros = int((fraction or "0").ljust(6, "0"))
    if seconds is not None and seconds.startswith("-"):
        micros = -micros

    result = datetime.timedelta(
        days=int(days or 0),
        hours=int(hours or 0),
        minutes=int(minutes or 0),
        seconds=int(seconds or 0),
        microseconds=micros,
    )
    return -result if sign_str == "-" else result


def format_date(value: datetime.date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.isoformat()


def format_datetime(value: datetime.datetime) -> str:
    """Format a naive datetime with the shortest exact representation.

    Seconds are omitted when zero; fractional seconds are printed in
    milliseconds or microseconds.

    Examples:
        >>> format_datetime(datetime.datetime(2024, 1, 15))
        '2024-01-15T00:00'
        >>> format_datetime(datetime.datetime(2024, 1, 15, 9, 5, 0, 250000))
        '2024-01-15T09:05:00.250'
    """
    text = f"{value.date().isoformat()}T{value.hour:02d}:{value.minute:02d}"
    if value.second == 0 and value.microsecond == 0:
        return text

    text += f":{value.second:02d}"
    if value.microsecond == 0:
        return text
    if value.microsecond % 1000 == 0:
        return f"{text}.{value.microsecond // 1000:03d}"
    return f"{text}.{value.microsecond:06d}"


__all__ = [
    "parse_date",
    "parse_datetime",
    "parse_period",
    "parse_duration",
    "format_date",
    "format_datetime",
]
