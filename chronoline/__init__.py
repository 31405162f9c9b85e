"""Chronoline: interval algebra and timelines over local dates and times.

Chronoline models spans of time at two granularities and indexes values
that change over time.

Core Types:
    Period: Calendar-based amount of time (years, months, weeks, days)
    DateInterval: Closed span of calendar days [start, end]
    DateTimeInterval: Half-open span of local date-times [start, end)

Collections:
    Timeline: Ordered, non-overlapping mapping of intervals to values

Comparison:
    Equality: Strategy protocol for comparing values
    default_equals: Default value equality
    unique: Order-preserving deduplication with an equality strategy

Exceptions:
    ChronolineError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse a textual interval or period
    InvariantError: A domain invariant does not hold
    RangeConflictError: A timeline range intersects a stored range
    ImportConflictError: A bulk timeline import hit a conflicting range

Bounds are naive ``datetime.date`` and ``datetime.datetime`` values; ``None``
stands for an unbounded side.

Example:
    >>> from chronoline import DateInterval, Timeline
    >>> rates = Timeline.of(DateInterval.parse("2024-01-01/2024-06-30"), 0.2)
    >>> rates = rates.fill_blanks(DateInterval.parse("2024-01-01/2024-12-31"), 0.0)
    >>> list(rates.values())
    [0.2, 0.0]
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronoline.core.period import Period
from chronoline.core.datetime_interval import DateTimeInterval
from chronoline.core.date_interval import DateInterval

# Collections
from chronoline.collections.timeline import Timeline

# Comparison
from chronoline.comparison import Equality, default_equals, unique

# Exceptions
from chronoline.errors import (
    ChronolineError,
    ImportConflictError,
    InvariantError,
    ParseError,
    RangeConflictError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Period",
    "DateInterval",
    "DateTimeInterval",
    # Collections
    "Timeline",
    # Comparison
    "Equality",
    "default_equals",
    "unique",
    # Exceptions
    "ChronolineError",
    "ValidationError",
    "ParseError",
    "InvariantError",
    "RangeConflictError",
    "ImportConflictError",
]
