"""Bound helpers shared by the interval types.

A bound is an ``Optional`` timepoint where ``None`` means unbounded: an
absent start lies before every finite start, an absent end lies after every
finite end. The helpers here compare bounds against that convention.

The ``Temporal`` union lists every shape accepted where an interval is
expected; each interval class converts it with its own ``cast()``.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Iterable, Optional, TypeVar, Union

from chronoline._internal.constants import MIDNIGHT, ONE_DAY
from chronoline.errors import InvariantError

if TYPE_CHECKING:
    from chronoline.core.date_interval import DateInterval
    from chronoline.core.datetime_interval import DateTimeInterval

P = TypeVar("P", _datetime.date, _datetime.datetime)

Temporal = Union[_datetime.date, _datetime.datetime, "DateInterval", "DateTimeInterval"]
"""Any value that can be cast to an interval of either granularity."""

Range = Union[_datetime.date, "DateInterval", "DateTimeInterval"]
"""A value that denotes a span (not a single instant)."""


def midnight(day: _datetime.date) -> _datetime.datetime:
    """Return the first instant of a calendar day."""
    return _datetime.datetime.combine(day, MIDNIGHT)


def next_midnight(day: _datetime.date) -> _datetime.datetime:
    """Return the first instant of the day after ``day``.

    Raises:
        InvariantError: If ``day`` is the last representable date.
    """
    if day == _datetime.date.max:
        raise InvariantError(f"No day follows {day.isoformat()}.")
    return midnight(day + ONE_DAY)


def latest_start(*starts: Optional[P]) -> Optional[P]:
    """Return the latest of several starts, ignoring unbounded ones.

    Returns None only when every start is unbounded.
    """
    finite = [start for start in starts if start is not None]
    return max(finite) if finite else None


def earliest_end(*ends: Optional[P]) -> Optional[P]:
    """Return the earliest of several ends, ignoring unbounded ones."""
    finite = [end for end in ends if end is not None]
    return min(finite) if finite else None


def earliest_start(starts: Iterable[Optional[P]]) -> Optional[P]:
    """Return the earliest start, or None as soon as one start is unbounded."""
    result: Optional[P] = None
    for start in starts:
        if start is None:
            return None
        if result is None or start < result:
            result = start
    return result


def latest_end(ends: Iterable[Optional[P]]) -> Optional[P]:
    """Return the latest end, or None as soon as one end is unbounded."""
    result: Optional[P] = None
    for end in ends:
        if end is None:
            return None
        if result is None or end > result:
            result = end
    return result


def compare_bounds(
    start: Optional[P],
    end: Optional[P],
    other_start: Optional[P],
    other_end: Optional[P],
) -> int:
    """Order two intervals by start, then by end.

    An unbounded start sorts first, an unbounded end sorts last.

    Returns:
        -1, 0 or 1.
    """
    if start is None:
        if other_start is not None:
            return -1
    elif other_start is None:
        return 1
    elif start != other_start:
        return -1 if start < other_start else 1

    # At this point, both intervals have the same start
    if end is None:
        return 0 if other_end is None else 1
    if other_end is None:
        return -1
    if end == other_end:
        return 0
    return -1 if end < other_end else 1


__all__ = [
    "Temporal",
    "Range",
    "midnight",
    "latest_start",
    "earliest_end",
    "earliest_start",
    "latest_end",
    "compare_bounds",
]
