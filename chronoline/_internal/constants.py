"""Internal constants for Chronoline.

These constants define the textual symbols and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

# Interval text format
INFINITY_SYMBOL: str = "-"
INTERVAL_SEPARATOR: str = "/"
PERIOD_PREFIX: str = "P"
TIME_DESIGNATOR: str = "T"

# Smallest representable step between two naive datetimes
RESOLUTION: _datetime.timedelta = _datetime.timedelta(microseconds=1)

ONE_DAY: _datetime.timedelta = _datetime.timedelta(days=1)
DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

MIDNIGHT: _datetime.time = _datetime.time.min

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "INFINITY_SYMBOL",
    "INTERVAL_SEPARATOR",
    "PERIOD_PREFIX",
    "TIME_DESIGNATOR",
    "RESOLUTION",
    "ONE_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIDNIGHT",
    "DAYS_IN_MONTH",
]
