"""Textual forms of timepoints, periods and intervals.

Functions:
    parse_date / format_date: ISO 8601 calendar dates.
    parse_datetime / format_datetime: ISO 8601 local date-times.
    parse_period: ISO 8601 periods (``P1Y2M3W4D``).
    parse_duration: ISO 8601 durations with a time part (``PT2H``).

IntervalText splits the ``<start>/<end>`` interval notation used by
``DateInterval.parse`` and ``DateTimeInterval.parse``.
"""

from __future__ import annotations

from chronoline.format.iso8601 import (
    format_date,
    format_datetime,
    parse_date,
    parse_datetime,
    parse_duration,
    parse_period,
)
from chronoline.format.interval_text import IntervalText

__all__: list[str] = [
    "parse_date",
    "format_date",
    "parse_datetime",
    "format_datetime",
    "parse_period",
    "parse_duration",
    "IntervalText",
]
