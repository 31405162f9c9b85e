"""DateTimeInterval: a half-open span of local date-times.

This module provides the DateTimeInterval class for representing bounded and
unbounded spans of naive datetimes with half-open semantics [start, end).
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Iterator, Optional, Union

from chronoline._internal.constants import INFINITY_SYMBOL, MIDNIGHT, RESOLUTION
from chronoline._internal.validation import validate_datetime, validate_order
from chronoline.arithmetic.period_ops import shift, unshift
from chronoline.core.bounds import (
    Temporal,
    compare_bounds,
    earliest_end,
    earliest_start,
    latest_end,
    latest_start,
    midnight,
    next_midnight,
)
from chronoline.core.period import Period
from chronoline.errors import InvariantError, ParseError
from chronoline.format.interval_text import IntervalText, has_time_part
from chronoline.format.iso8601 import (
    format_datetime,
    parse_datetime,
    parse_duration,
    parse_period,
)

if TYPE_CHECKING:
    from chronoline.core.date_interval import DateInterval

Step = Union[_datetime.timedelta, Period]


class DateTimeInterval:
    """A span of local time, half-open [start, end).

    Intervals can represent:
    - Bounded: DateTimeInterval.between(start, end)
    - Open start: DateTimeInterval.until(end)
    - Open end: DateTimeInterval.since(start)
    - Forever: DateTimeInterval.forever()
    - Empty: DateTimeInterval.empty(timepoint), a zero-width interval
      anchored at a single instant

    The interval uses half-open semantics:
    - Start is inclusive (contained in the interval)
    - End is exclusive (not contained in the interval)

    This design makes intervals composable: [a,b) + [b,c) = [a,c)
    with no gap or overlap at the boundary.

    Instances are immutable; every transformation returns a new interval.

    Attributes:
        start: Start of interval (inclusive), or None if unbounded.
        end: End of interval (exclusive), or None if unbounded.

    Examples:
        >>> from datetime import datetime
        >>> i = DateTimeInterval.between(datetime(2024, 1, 1), datetime(2024, 1, 31))
        >>> datetime(2024, 1, 15) in i
        True
        >>> datetime(2024, 1, 31) in i  # End is exclusive
        False
        >>> str(i)
        '2024-01-01T00:00/2024-01-31T00:00'
    """

    __slots__ = ("_start", "_end")

    def __init__(
        self,
        start: Optional[_datetime.datetime],
        end: Optional[_datetime.datetime],
    ) -> None:
        """Create an interval [start, end).

        Args:
            start: Start of the interval (inclusive), None if unbounded.
            end: End of the interval (exclusive), None if unbounded.

        Raises:
            ValidationError: If a bound is not a naive datetime.
            InvariantError: If start is after end.
        """
        validate_datetime(start, "start")
        validate_datetime(end, "end")
        validate_order(start, end)
        self._start = start
        self._end = end

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def between(
        cls,
        start: Optional[_datetime.datetime],
        end: Optional[_datetime.datetime],
    ) -> DateTimeInterval:
        """Create a half-open interval between two timepoints."""
        return cls(start, end)

    @classmethod
    def empty(cls, timepoint: _datetime.datetime) -> DateTimeInterval:
        """Create a zero-width interval at the given timepoint.

        Examples:
            >>> from datetime import datetime
            >>> DateTimeInterval.empty(datetime(2024, 1, 1, 12)).is_empty
            True
        """
        return cls(timepoint, timepoint)

    @classmethod
    def since(cls, timepoint: _datetime.datetime) -> DateTimeInterval:
        """Create an interval [timepoint, infinity)."""
        return cls(timepoint, None)

    @classmethod
    def until(cls, timepoint: _datetime.datetime) -> DateTimeInterval:
        """Create an interval (-infinity, timepoint)."""
        return cls(None, timepoint)

    @classmethod
    def forever(cls) -> DateTimeInterval:
        """Create an interval without any bound."""
        return cls(None, None)

    @classmethod
    def day(cls, day: Union[_datetime.date, _datetime.datetime]) -> DateTimeInterval:
        """Create the interval from midnight to midnight of the given day.

        Examples:
            >>> from datetime import date
            >>> str(DateTimeInterval.day(date(2024, 2, 29)))
            '2024-02-29T00:00/2024-03-01T00:00'
        """
        calendar_day = day.date() if isinstance(day, _datetime.datetime) else day
        return cls(midnight(calendar_day), next_midnight(calendar_day))

    @classmethod
    def cast(cls, temporal: Temporal) -> DateTimeInterval:
        """Convert any temporal value to a DateTimeInterval.

        - a date becomes [midnight, next midnight)
        - a datetime becomes an empty interval at that instant
        - a DateInterval covers its days from midnight to midnight
        - a DateTimeInterval is returned as-is

        Raises:
            TypeError: If temporal is not one of the supported types.
        """
        from chronoline.core.date_interval import DateInterval

        if isinstance(temporal, DateTimeInterval):
            return temporal
        # datetime before date: datetime is a subclass of date
        if isinstance(temporal, _datetime.datetime):
            return cls.empty(temporal)
        if isinstance(temporal, _datetime.date):
            return cls.day(temporal)
        if isinstance(temporal, DateInterval):
            return cls(
                None if temporal.start is None else midnight(temporal.start),
                None if temporal.end is None else next_midnight(temporal.end),
            )
        raise TypeError(
            f"cannot cast {type(temporal).__name__} to {cls.__name__}"
        )

    @classmethod
    def container_of(cls, *temporals: Optional[Temporal]) -> Optional[DateTimeInterval]:
        """Return the smallest interval that encompasses every given temporal.

        None values are skipped. If any input is unbounded on one side, the
        result is unbounded on that side.

        Returns:
            The container, or None if no temporal was given.

        Examples:
            >>> from datetime import date, datetime
            >>> str(DateTimeInterval.container_of(date(2024, 1, 1), datetime(2024, 1, 5, 12)))
            '2024-01-01T00:00/2024-01-05T12:00'
            >>> DateTimeInterval.container_of(None) is None
            True
        """
        ranges = [cls.cast(temporal) for temporal in temporals if temporal is not None]
        if not ranges:
            return None

        return cls(
            earliest_start(time_range._start for time_range in ranges),
            latest_end(time_range._end for time_range in ranges),
        )

    @classmethod
    def parse(cls, text: str) -> DateTimeInterval:
        """Parse a textual interval such as ``2024-01-01T00:00/PT12H``.

        Either side may be the infinity symbol ``-``. Exactly one side may be
        a period (``P1D``) or a duration (``PT2H``), measured from the other
        side.

        Raises:
            ParseError: If the text is malformed or contradictory.

        Examples:
            >>> str(DateTimeInterval.parse("2024-01-01T00:00/P1M"))
            '2024-01-01T00:00/2024-02-01T00:00'
            >>> str(DateTimeInterval.parse("PT2H/2024-01-01T12:00"))
            '2024-01-01T10:00/2024-01-01T12:00'
            >>> DateTimeInterval.parse("-/-") == DateTimeInterval.forever()
            True
        """
        parts = IntervalText.split(text)

        if parts.start_is_period:
            end = parse_datetime(parts.end)
            return cls(unshift(end, _parse_step(parts.start)), end)

        start = None if parts.start_is_infinite else parse_datetime(parts.start)

        if parts.end_is_infinite:
            end = None
        elif parts.end_is_period:
            if start is None:
                raise ParseError(f"cannot process end period without start in {text!r}")
            end = shift(start, _parse_step(parts.end))
        else:
            end = parse_datetime(parts.end)

        return cls(start, end)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def start(self) -> Optional[_datetime.datetime]:
        """Return the start of the interval (inclusive), or None if unbounded."""
        return self._start

    @property
    def end(self) -> Optional[_datetime.datetime]:
        """Return the end of the interval (exclusive), or None if unbounded."""
        return self._end

    @property
    def inclusive_end(self) -> Optional[_datetime.datetime]:
        """Return the last instant inside the interval, or None if unbounded.

        This is the end minus the smallest representable step, meant for
        searching sorted intervals rather than for display.
        """
        return None if self._end is None else self._end - RESOLUTION

    @property
    def finite_start(self) -> _datetime.datetime:
        """Return the start, failing if it is unbounded.

        Raises:
            InvariantError: If the start is unbounded.
        """
        if self._start is None:
            raise InvariantError(f'The interval "{self}" does not have a finite start.')
        return self._start

    @property
    def finite_end(self) -> _datetime.datetime:
        """Return the end, failing if it is unbounded.

        Raises:
            InvariantError: If the end is unbounded.
        """
        if self._end is None:
            raise InvariantError(f'The interval "{self}" does not have a finite end.')
        return self._end

    @property
    def is_empty(self) -> bool:
        """Return True if start and end are the same instant."""
        return self._start is not None and self._end is not None and self._start == self._end

    @property
    def is_finite(self) -> bool:
        """Return True if both bounds are finite."""
        return self._start is not None and self._end is not None

    @property
    def has_infinite_start(self) -> bool:
        return self._start is None

    @property
    def has_infinite_end(self) -> bool:
        return self._end is None

    @property
    def is_full_days(self) -> bool:
        """Return True if both finite bounds fall on midnight."""
        return self.is_equal_to(self.to_full_days())

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def with_start(self, timepoint: Optional[_datetime.datetime]) -> DateTimeInterval:
        """Return a copy of this interval with the given start."""
        return DateTimeInterval(timepoint, self._end)

    def with_end(self, timepoint: Optional[_datetime.datetime]) -> DateTimeInterval:
        """Return a copy of this interval with the given end."""
        return DateTimeInterval(self._start, timepoint)

    def to_full_days(self) -> DateTimeInterval:
        """Widen this interval to whole days, from midnight to midnight.

        An end that already falls on midnight is kept, unless the interval
        is empty (an empty interval at midnight still covers that day).

        Examples:
            >>> from datetime import datetime
            >>> i = DateTimeInterval.between(datetime(2024, 1, 1, 8), datetime(2024, 1, 2, 17))
            >>> str(i.to_full_days())
            '2024-01-01T00:00/2024-01-03T00:00'
        """
        start = None if self._start is None else midnight(self._start.date())

        if self._end is None:
            end = None
        elif not self.is_empty and self._end.time() == MIDNIGHT:
            end = self._end
        else:
            end = next_midnight(self._end.date())

        return DateTimeInterval(start, end)

    def move(self, amount: Step) -> DateTimeInterval:
        """Move this interval along the time axis by a timedelta or a Period.

        Unbounded sides stay unbounded.
        """
        return DateTimeInterval(
            None if self._start is None else shift(self._start, amount),
            None if self._end is None else shift(self._end, amount),
        )

    def collapse(self) -> DateTimeInterval:
        """Return the empty interval anchored at this interval's start.

        Raises:
            InvariantError: If the start is unbounded.
        """
        if self._start is None:
            raise InvariantError("An interval with infinite start cannot be collapsed.")
        return DateTimeInterval(self._start, self._start)

    def expand(self, *temporals: Optional[Temporal]) -> DateTimeInterval:
        """Return the container of this interval and the given temporals."""
        others = [temporal for temporal in temporals if temporal is not None]
        if not others:
            return self

        ranges = [self, *(DateTimeInterval.cast(temporal) for temporal in others)]
        return DateTimeInterval(
            earliest_start(time_range._start for time_range in ranges),
            latest_end(time_range._end for time_range in ranges),
        )

    def find_intersection(self, temporal: Optional[Temporal]) -> Optional[DateTimeInterval]:
        """Return the common part of this interval and another, if any.

        The start of the result is the later of the two starts and its end
        the earlier of the two ends; an unbounded side puts no constraint.

        Returns:
            The intersection (which can be empty), or None if the intervals
            do not intersect.

        Examples:
            >>> a = DateTimeInterval.parse("2024-01-01T00:00/2024-01-10T00:00")
            >>> b = DateTimeInterval.parse("2024-01-05T00:00/-")
            >>> str(a.find_intersection(b))
            '2024-01-05T00:00/2024-01-10T00:00'
        """
        if temporal is None:
            return None

        other = DateTimeInterval.cast(temporal)
        if not self.intersects(other):
            return None

        return DateTimeInterval(
            latest_start(self._start, other._start),
            earliest_end(self._end, other._end),
        )

    # ------------------------------------------------------------------
    # Measures and iteration
    # ------------------------------------------------------------------

    def duration(self) -> _datetime.timedelta:
        """Return the exact length of this interval.

        Raises:
            InvariantError: If the interval is unbounded.
        """
        if self._start is None or self._end is None:
            raise InvariantError("Returning the duration with infinite boundary is not possible.")
        return self._end - self._start

    def iterate(self, step: Step) -> Iterator[_datetime.datetime]:
        """Yield start, start + step, start + 2 * step, ... while before the end.

        Raises:
            InvariantError: If the interval is unbounded, or the step does not
                move forward.
        """
        if self._start is None or self._end is None:
            raise InvariantError("Iterate is not supported for infinite intervals.")

        current = self._start
        while current < self._end:
            yield current
            following = shift(current, step)
            if following <= current:
                raise InvariantError(f"iteration step {step} does not move forward")
            current = following

    def slice(self, step: Step) -> Iterator[DateTimeInterval]:
        """Yield consecutive slices of at most ``step`` covering this interval.

        The last slice is clipped to the end and may be shorter.

        Examples:
            >>> from datetime import timedelta
            >>> i = DateTimeInterval.parse("2024-01-01T00:00/2024-01-01T05:00")
            >>> [str(s) for s in i.slice(timedelta(hours=2))][-1]
            '2024-01-01T04:00/2024-01-01T05:00'
        """
        for start in self.iterate(step):
            yield DateTimeInterval(start, min(shift(start, step), self.finite_end))

    def days(self) -> list[_datetime.date]:
        """Return every calendar date touched by this interval."""
        from chronoline.core.date_interval import DateInterval

        return DateInterval.cast(self).days()

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    def is_before(self, temporal: Temporal) -> bool:
        """Is the finite end of this interval before or at the other's start?"""
        if self._end is None:
            return False
        other = DateTimeInterval.cast(temporal)
        return other._start is not None and self._end <= other._start

    def is_after(self, temporal: Temporal) -> bool:
        """Is the finite start of this interval at or after the other's end?"""
        if self._start is None:
            return False
        other = DateTimeInterval.cast(temporal)
        return other._end is not None and self._start >= other._end

    def precedes(self, other: DateTimeInterval) -> bool:
        """ALLEN-relation: this interval ends before the other starts, with a gap."""
        return self._end is not None and other._start is not None and self._end < other._start

    def preceded_by(self, other: DateTimeInterval) -> bool:
        return other.precedes(self)

    def meets(self, other: DateTimeInterval) -> bool:
        """ALLEN-relation: this interval ends exactly where the other starts.

        Two empty intervals at the same instant are equal, not meeting.
        """
        return (
            self._end is not None
            and other._start is not None
            and self._end == other._start
            and not (self.is_empty and other.is_empty)
        )

    def met_by(self, other: DateTimeInterval) -> bool:
        return other.meets(self)

    def finishes(self, other: DateTimeInterval) -> bool:
        """ALLEN-relation: both ends are equal and this one starts later."""
        return (
            self._start is not None
            and (other._start is None or self._start > other._start)
            and self._end == other._end
        )

    def finished_by(self, other: DateTimeInterval) -> bool:
        return other.finishes(self)

    def starts(self, other: DateTimeInterval) -> bool:
        """ALLEN-relation: both starts are equal and this one ends earlier."""
        return (
            self._start == other._start
            and self._end is not None
            and (other._end is None or self._end < other._end)
        )

    def started_by(self, other: DateTimeInterval) -> bool:
        return other.starts(self)

    def encloses(self, other: DateTimeInterval) -> bool:
        """ALLEN-relation: this interval starts before and ends after the other."""
        return (
            other._start is not None
            and (self._start is None or self._start < other._start)
            and other._end is not None
            and (self._end is None or self._end > other._end)
        )

    def enclosed_by(self, other: DateTimeInterval) -> bool:
        return other.encloses(self)

    def overlaps(self, other: DateTimeInterval) -> bool:
        """ALLEN-relation: this interval starts first and ends inside the other."""
        return (
            other._start is not None
            and (self._start is None or self._start < other._start)
            and self._end is not None
            and self._end > other._start
            and (other._end is None or self._end < other._end)
        )

    def overlapped_by(self, other: DateTimeInterval) -> bool:
        return other.overlaps(self)

    def contains(self, temporal: Temporal) -> bool:
        """Check whether another temporal stays within the bounds of this one.

        - the other's start must not be before this start
        - the other's start must be before this end
        - the other's end must not be after this end

        An empty interval never contains anything. A datetime is contained
        when start <= point < end.
        """
        other = DateTimeInterval.cast(temporal)

        return (
            (self._start is None or (other._start is not None and other._start >= self._start))
            and (self._end is None or other._start is None or other._start < self._end)
            and (self._end is None or (other._end is not None and other._end <= self._end))
        )

    def __contains__(self, point: _datetime.datetime) -> bool:
        """Support ``point in interval`` syntax."""
        return self.contains(point)

    def intersects(self, temporal: Temporal) -> bool:
        """Check whether the two intervals share a common timepoint.

        One's start must be before the other's end and one's end must be
        after the other's start. An empty interval intersects only when it
        lies strictly inside a non-empty one (not at its start).

        This relation is symmetric.
        """
        other = DateTimeInterval.cast(temporal)

        return (
            self._start is None or other._end is None or self._start < other._end
        ) and (self._end is None or other._start is None or self._end > other._start)

    def sees(self, temporal: Temporal) -> bool:
        """Check whether the two intervals see each other.

        - if both intervals are empty, they must be equal
        - if one of them is empty, the non-empty one must contain it
        - otherwise, they must intersect

        Unlike intersects(), an empty interval exactly at the start of the
        other is seen. This relation is symmetric.
        """
        other = DateTimeInterval.cast(temporal)

        if self.is_empty:
            return other.is_equal_to(self) if other.is_empty else other.contains(self)
        if other.is_empty:
            return self.contains(other)
        return self.intersects(other)

    def abuts(self, other: DateTimeInterval) -> bool:
        """Check for neither overlap nor gap: exactly one of meets / met_by."""
        return self.meets(other) != self.met_by(other)

    def is_equal_to(self, temporal: Optional[Temporal]) -> bool:
        """Compare the bounds of this interval and another temporal."""
        if temporal is None:
            return False
        other = DateTimeInterval.cast(temporal)
        return self._start == other._start and self._end == other._end

    def compare_to(self, temporal: Temporal) -> int:
        """Order by start (unbounded first), then by end (unbounded last).

        Returns:
            -1, 0 or 1.
        """
        other = DateTimeInterval.cast(temporal)
        return compare_bounds(self._start, self._end, other._start, other._end)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimeInterval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((DateTimeInterval, self._start, self._end))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeInterval):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTimeInterval):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeInterval):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTimeInterval):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __repr__(self) -> str:
        return f"DateTimeInterval.parse({str(self)!r})"

    def __str__(self) -> str:
        """Return the ``<start>/<end>`` form, ``-`` standing for infinity."""
        start = INFINITY_SYMBOL if self._start is None else format_datetime(self._start)
        end = INFINITY_SYMBOL if self._end is None else format_datetime(self._end)
        return f"{start}/{end}"


def _parse_step(text: str) -> Step:
    if has_time_part(text):
        return parse_duration(text)
    return parse_period(text)


__all__ = ["DateTimeInterval"]
