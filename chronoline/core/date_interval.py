"""DateInterval: a closed span of calendar dates.

This module provides the DateInterval class for representing bounded and
unbounded spans of calendar days with closed semantics [start, end]: both
the first and the last day belong to the interval.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Iterator, Optional

from chronoline._internal.calendar import end_of_week, iso_week_bounds, start_of_week
from chronoline._internal.constants import INFINITY_SYMBOL, ONE_DAY
from chronoline._internal.validation import validate_date, validate_order
from chronoline.arithmetic.period_ops import add_period, subtract_period
from chronoline.core.bounds import (
    Temporal,
    compare_bounds,
    earliest_end,
    earliest_start,
    latest_end,
    latest_start,
    next_midnight,
)
from chronoline.core.datetime_interval import DateTimeInterval
from chronoline.core.period import Period
from chronoline.errors import InvariantError, ParseError
from chronoline.format.interval_text import IntervalText
from chronoline.format.iso8601 import format_date, parse_date, parse_period


class DateInterval:
    """A span of calendar days, closed [start, end].

    Intervals can represent:
    - Bounded: DateInterval.between(start, end)
    - Open start: DateInterval.until(end)
    - Open end: DateInterval.since(start)
    - Forever: DateInterval.forever()
    - A single day: DateInterval.atomic(day)

    Because both bounds are inclusive, a DateInterval always covers at least
    one day and can never be empty.

    Attributes:
        start: First day of the interval, or None if unbounded.
        end: Last day of the interval, or None if unbounded.

    Examples:
        >>> from datetime import date
        >>> january = DateInterval.between(date(2024, 1, 1), date(2024, 1, 31))
        >>> date(2024, 1, 31) in january  # End is inclusive
        True
        >>> january.length_in_days()
        31
        >>> str(january)
        '2024-01-01/2024-01-31'
    """

    __slots__ = ("_start", "_end")

    def __init__(
        self,
        start: Optional[_datetime.date],
        end: Optional[_datetime.date],
    ) -> None:
        """Create a closed interval [start, end].

        Raises:
            ValidationError: If a bound is not a plain date.
            InvariantError: If start is after end.
        """
        validate_date(start, "start")
        validate_date(end, "end")
        validate_order(start, end)
        self._start = start
        self._end = end

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def between(
        cls,
        start: Optional[_datetime.date],
        end: Optional[_datetime.date],
    ) -> DateInterval:
        """Create a closed interval between two dates."""
        return cls(start, end)

    @classmethod
    def since(cls, start: _datetime.date) -> DateInterval:
        """Create an interval from the given day onwards."""
        return cls(start, None)

    @classmethod
    def until(cls, end: _datetime.date) -> DateInterval:
        """Create an interval up to and including the given day."""
        return cls(None, end)

    @classmethod
    def atomic(cls, day: _datetime.date) -> DateInterval:
        """Create an interval including only the given day."""
        return cls(day, day)

    @classmethod
    def forever(cls) -> DateInterval:
        return cls(None, None)

    @classmethod
    def for_week(cls, year: int, week: int) -> DateInterval:
        """Create the interval of an ISO week, from Monday to Sunday.

        Examples:
            >>> str(DateInterval.for_week(2024, 1))
            '2024-01-01/2024-01-07'
        """
        first, last = iso_week_bounds(year, week)
        return cls(first, last)

    @classmethod
    def cast(cls, temporal: Temporal) -> DateInterval:
        """Convert any temporal value to the DateInterval of the days it touches.

        Raises:
            TypeError: If temporal is not one of the supported types.
        """
        if isinstance(temporal, DateInterval):
            return temporal
        return cls(*_date_bounds(temporal))

    @classmethod
    def container_of(cls, *temporals: Optional[Temporal]) -> Optional[DateInterval]:
        """Return the smallest interval that encompasses every given temporal.

        Dates count as single days, datetimes as the day they fall on, and
        date-time intervals as the full days they touch. None values are
        skipped. Any unbounded side makes that side of the result unbounded.

        Returns:
            The container, or None if no temporal was given.

        Examples:
            >>> from datetime import date
            >>> str(DateInterval.container_of(date(2024, 3, 5), date(2024, 1, 2)))
            '2024-01-02/2024-03-05'
        """
        starts: list[Optional[_datetime.date]] = []
        ends: list[Optional[_datetime.date]] = []

        for temporal in temporals:
            if temporal is None:
                continue
            start, end = _date_bounds(temporal)
            starts.append(start)
            ends.append(end)

        if not starts:
            return None
        return cls(earliest_start(starts), latest_end(ends))

    @classmethod
    def disjoint_containers_of(cls, *temporals: Optional[Temporal]) -> list[DateInterval]:
        """Merge temporals into the minimal list of disjoint containers.

        Inputs are turned into date intervals and sorted; inputs that overlap
        or touch (no day in between) are merged. The result is in ascending
        order.

        An unbounded end terminates the merge: the running container is
        emitted with an unbounded end and every later input is absorbed.

        Examples:
            >>> from datetime import date
            >>> [str(c) for c in DateInterval.disjoint_containers_of(
            ...     date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 5))]
            ['2024-01-01/2024-01-02', '2024-01-05/2024-01-05']
        """
        date_ranges = sorted(cls.cast(temporal) for temporal in temporals if temporal is not None)
        if not date_ranges:
            return []

        containers: list[DateInterval] = []
        current_start = date_ranges[0]._start
        current_end = date_ranges[0]._end

        for date_range in date_ranges[1:]:
            if (
                current_end is not None
                and date_range._start is not None
                and (date_range._start - current_end).days > 1
            ):
                containers.append(cls(current_start, current_end))
                current_start, current_end = date_range._start, date_range._end
            elif current_end is None or date_range._end is None:
                containers.append(cls(current_start, None))
                return containers
            elif date_range._end > current_end:
                current_end = date_range._end

        containers.append(cls(current_start, current_end))
        return containers

    @classmethod
    def iterate_daily(cls, start: _datetime.date, end: _datetime.date) -> Iterator[_datetime.date]:
        """Yield every date from start to end, both inclusive."""
        return cls(start, end).iterate(Period.of_days(1))

    @classmethod
    def parse(cls, text: str) -> DateInterval:
        """Parse a textual interval such as ``2024-01-01/2024-01-31``.

        Either side may be the infinity symbol ``-``. Exactly one side may be
        a period, measured from the other side.

        Raises:
            ParseError: If the text is malformed or contradictory.

        Examples:
            >>> str(DateInterval.parse("2024-01-01/P1M"))
            '2024-01-01/2024-02-01'
            >>> str(DateInterval.parse("-/2024-01-31"))
            '-/2024-01-31'
        """
        parts = IntervalText.split(text)

        if parts.start_is_period:
            end = parse_date(parts.end)
            return cls(subtract_period(end, parse_period(parts.start)), end)

        start = None if parts.start_is_infinite else parse_date(parts.start)

        if parts.end_is_infinite:
            end = None
        elif parts.end_is_period:
            if start is None:
                raise ParseError(f"cannot process end period without start in {text!r}")
            end = add_period(start, parse_period(parts.end))
        else:
            end = parse_date(parts.end)

        return cls(start, end)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def start(self) -> Optional[_datetime.date]:
        """Return the first day, or None if unbounded."""
        return self._start

    @property
    def end(self) -> Optional[_datetime.date]:
        """Return the last day, or None if unbounded."""
        return self._end

    @property
    def finite_start(self) -> _datetime.date:
        """Return the first day, failing if it is unbounded.

        Raises:
            InvariantError: If the start is unbounded.
        """
        if self._start is None:
            raise InvariantError(f'The interval "{self}" does not have a finite start.')
        return self._start

    @property
    def finite_end(self) -> _datetime.date:
        """Return the last day, failing if it is unbounded.

        Raises:
            InvariantError: If the end is unbounded.
        """
        if self._end is None:
            raise InvariantError(f'The interval "{self}" does not have a finite end.')
        return self._end

    @property
    def is_finite(self) -> bool:
        return self._start is not None and self._end is not None

    @property
    def has_infinite_start(self) -> bool:
        return self._start is None

    @property
    def has_infinite_end(self) -> bool:
        return self._end is None

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def with_start(self, start: Optional[_datetime.date]) -> DateInterval:
        """Return a copy of this interval with the given first day."""
        return DateInterval(start, self._end)

    def with_end(self, end: Optional[_datetime.date]) -> DateInterval:
        """Return a copy of this interval with the given last day."""
        return DateInterval(self._start, end)

    def move(self, period: Period) -> DateInterval:
        """Move this interval along the calendar by the given period."""
        return DateInterval(
            None if self._start is None else add_period(self._start, period),
            None if self._end is None else add_period(self._end, period),
        )

    def expand(self, *temporals: Optional[Temporal]) -> DateInterval:
        """Return the container of this interval and the given temporals."""
        others = [temporal for temporal in temporals if temporal is not None]
        if not others:
            return self

        bounds = [_date_bounds(temporal) for temporal in (self, *others)]
        return DateInterval(
            earliest_start(start for start, _ in bounds),
            latest_end(end for _, end in bounds),
        )

    def to_full_weeks(self) -> DateInterval:
        """Widen this interval to whole ISO weeks, Monday to Sunday.

        Examples:
            >>> from datetime import date
            >>> str(DateInterval.between(date(2024, 1, 3), date(2024, 1, 9)).to_full_weeks())
            '2024-01-01/2024-01-14'
        """
        return DateInterval(
            None if self._start is None else start_of_week(self._start),
            None if self._end is None else end_of_week(self._end),
        )

    def find_intersection(self, other: Optional[DateInterval]) -> Optional[DateInterval]:
        """Return the days shared by both intervals, if any."""
        if other is None or not self.intersects(other):
            return None

        return DateInterval(
            latest_start(self._start, other._start),
            earliest_end(self._end, other._end),
        )

    # ------------------------------------------------------------------
    # Measures and iteration
    # ------------------------------------------------------------------

    def length_in_days(self) -> int:
        """Return the number of days in this interval, both bounds included.

        Raises:
            InvariantError: If the interval is unbounded.
        """
        if self._start is None or self._end is None:
            raise InvariantError("An infinite interval has no finite duration.")
        return (self._end - self._start).days + 1

    def period(self) -> Period:
        """Return the length of this interval in years, months and days.

        Raises:
            InvariantError: If the interval is unbounded.

        Examples:
            >>> from datetime import date
            >>> DateInterval.between(date(2024, 1, 1), date(2024, 12, 31)).period()
            Period(years=1, months=0, weeks=0, days=0)
        """
        if self._start is None or self._end is None:
            raise InvariantError("An infinite interval has no finite duration.")
        return Period.between(self._start, next_midnight(self._end).date())

    def iterate(self, period: Period) -> Iterator[_datetime.date]:
        """Yield start, start + period, ... up to and including the end.

        Raises:
            InvariantError: If the interval is unbounded, or the period does
                not move forward.
        """
        if self._start is None or self._end is None:
            raise InvariantError("Iterate is not supported for infinite interval.")

        current = self._start
        while True:
            yield current
            if current == self._end:
                return
            following = add_period(current, period)
            if following <= current:
                raise InvariantError(f"iteration period {period} does not move forward")
            if following > self._end:
                return
            current = following

    def days(self) -> list[_datetime.date]:
        """Return every day of this interval."""
        return list(self.iterate(Period.of_days(1)))

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    def is_before(self, day: _datetime.date) -> bool:
        """Is the last day of this interval before the given day?"""
        return self._end is not None and self._end < day

    def is_before_interval(self, other: DateInterval) -> bool:
        return self._end is not None and other._start is not None and self._end < other._start

    def is_after(self, day: _datetime.date) -> bool:
        """Is the first day of this interval after the given day?"""
        return self._start is not None and self._start > day

    def is_after_interval(self, other: DateInterval) -> bool:
        return self._start is not None and other._end is not None and self._start > other._end

    def contains(self, day: _datetime.date) -> bool:
        """Check whether the given day belongs to this interval."""
        return (self._start is None or self._start <= day) and (
            self._end is None or self._end >= day
        )

    def __contains__(self, day: _datetime.date) -> bool:
        return self.contains(day)

    def contains_interval(self, other: DateInterval) -> bool:
        """Check whether every day of the other interval belongs to this one."""
        return (
            self._start is None or (other._start is not None and self._start <= other._start)
        ) and (self._end is None or (other._end is not None and self._end >= other._end))

    def precedes(self, other: DateInterval) -> bool:
        """ALLEN-relation: at least one day lies between the two intervals."""
        return (
            self._end is not None
            and other._start is not None
            and (other._start - self._end).days > 1
        )

    def preceded_by(self, other: DateInterval) -> bool:
        return other.precedes(self)

    def meets(self, other: DateInterval) -> bool:
        """ALLEN-relation: the other interval starts the day after this one ends."""
        return (
            self._end is not None
            and other._start is not None
            and (other._start - self._end).days == 1
        )

    def met_by(self, other: DateInterval) -> bool:
        return other.meets(self)

    def overlaps(self, other: DateInterval) -> bool:
        """ALLEN-relation: this interval starts first and ends inside the other.

        With closed bounds, ending on the other's start day or last day
        still counts as overlapping.
        """
        return (
            other._start is not None
            and (self._start is None or self._start < other._start)
            and self._end is not None
            and self._end >= other._start
            and (other._end is None or self._end <= other._end)
        )

    def overlapped_by(self, other: DateInterval) -> bool:
        return other.overlaps(self)

    def finishes(self, other: DateInterval) -> bool:
        """ALLEN-relation: both last days are equal and this one starts later."""
        return (
            self._start is not None
            and (other._start is None or self._start > other._start)
            and self._end == other._end
        )

    def finished_by(self, other: DateInterval) -> bool:
        return other.finishes(self)

    def starts(self, other: DateInterval) -> bool:
        """ALLEN-relation: both first days are equal and this one ends earlier."""
        return (
            self._start == other._start
            and self._end is not None
            and (other._end is None or self._end < other._end)
        )

    def started_by(self, other: DateInterval) -> bool:
        return other.starts(self)

    def encloses(self, other: DateInterval) -> bool:
        """ALLEN-relation: this interval starts before and ends after the other."""
        return (
            other._start is not None
            and (self._start is None or self._start < other._start)
            and other._end is not None
            and (self._end is None or self._end > other._end)
        )

    def enclosed_by(self, other: DateInterval) -> bool:
        return other.encloses(self)

    def intersects(self, other: DateInterval) -> bool:
        """Check whether the two intervals share at least one day."""
        return (
            self._start is None or other._end is None or self._start <= other._end
        ) and (self._end is None or other._start is None or self._end >= other._start)

    def abuts(self, other: DateInterval) -> bool:
        """Check for neither overlap nor gap: exactly one of meets / met_by."""
        return self.meets(other) != self.met_by(other)

    def is_equal_to(self, other: Optional[DateInterval]) -> bool:
        if other is None:
            return False
        return self._start == other._start and self._end == other._end

    def compare_to(self, other: DateInterval) -> int:
        """Order by start (unbounded first), then by end (unbounded last)."""
        return compare_bounds(self._start, self._end, other._start, other._end)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((DateInterval, self._start, self._end))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __repr__(self) -> str:
        return f"DateInterval.parse({str(self)!r})"

    def __str__(self) -> str:
        start = INFINITY_SYMBOL if self._start is None else format_date(self._start)
        end = INFINITY_SYMBOL if self._end is None else format_date(self._end)
        return f"{start}/{end}"


def _date_bounds(temporal: Temporal) -> tuple[Optional[_datetime.date], Optional[_datetime.date]]:
    """Return the first and last day touched by a temporal."""
    if isinstance(temporal, DateInterval):
        return temporal.start, temporal.end
    if isinstance(temporal, DateTimeInterval):
        full_days = temporal.to_full_days()
        return (
            None if full_days.start is None else full_days.start.date(),
            None if full_days.end is None else full_days.end.date() - ONE_DAY,
        )
    # datetime before date: datetime is a subclass of date
    if isinstance(temporal, _datetime.datetime):
        return temporal.date(), temporal.date()
    if isinstance(temporal, _datetime.date):
        return temporal, temporal
    raise TypeError(f"cannot cast {type(temporal).__name__} to DateInterval")


__all__ = ["DateInterval"]
