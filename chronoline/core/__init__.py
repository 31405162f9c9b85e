"""Core temporal types.

This module provides the fundamental temporal types:
    - Period: Calendar-based amount of time (years, months, weeks, days)
    - DateTimeInterval: Span of local date-times, half-open [start, end)
    - DateInterval: Span of calendar days, closed [start, end]
"""

from __future__ import annotations

from chronoline.core.period import Period
from chronoline.core.datetime_interval import DateTimeInterval
from chronoline.core.date_interval import DateInterval

__all__: list[str] = [
    "Period",
    "DateTimeInterval",
    "DateInterval",
]
