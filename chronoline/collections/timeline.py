"""Timeline: a value that varies over time.

A Timeline is an immutable, ordered collection of ``(DateTimeInterval, value)``
pairs. Stored intervals never intersect and are never empty: each one is a
continuous stretch of time during which the value does not change.

Time not covered by any interval has no value. Storing ``None`` is allowed
and is distinct from having no value, but lookups that return ``None`` for
missing values cannot tell them apart.

Examples:
    >>> from datetime import date, datetime
    >>> prices = (
    ...     Timeline.empty()
    ...     .add(DateInterval.parse("2024-01-01/2024-01-31"), 10)
    ...     .add(DateInterval.parse("2024-02-01/-"), 12)
    ... )
    >>> prices.value_at(datetime(2024, 1, 15, 12))
    10
    >>> prices.value_at(date(2024, 3, 1))
    12
    >>> len(prices.simplify())
    2
"""

from __future__ import annotations

import datetime as _datetime
import logging
from itertools import pairwise
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from chronoline.comparison import Equality, default_equals
from chronoline.core.bounds import Range, midnight
from chronoline.core.date_interval import DateInterval
from chronoline.core.datetime_interval import DateTimeInterval
from chronoline.errors import ImportConflictError, InvariantError, RangeConflictError

logger = logging.getLogger(__name__)

V = TypeVar("V")
U = TypeVar("U")
A = TypeVar("A")

Item = Tuple[DateTimeInterval, V]

# Marks a sub-interval without any value, as opposed to a stored None
_MISSING: Any = object()


class Timeline(Generic[V]):
    """An immutable index of non-overlapping time ranges to values.

    Ranges can be given as a ``date`` (that whole day), a ``DateInterval``
    (those whole days) or a ``DateTimeInterval``; they are stored as
    half-open ``DateTimeInterval`` instances sorted by start.

    Every operation returns a new Timeline and leaves the original intact.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        """Create an empty timeline. Prefer Timeline.empty()."""
        self._items: Tuple[Item[V], ...] = ()

    @classmethod
    def _wrap(cls, items: Iterable[Item[U]]) -> Timeline[U]:
        # Items are assumed sorted and pairwise non-intersecting
        timeline: Timeline[U] = cls.__new__(cls)
        timeline._items = tuple(items)
        return timeline

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> Timeline[Any]:
        """Return a timeline without any value."""
        return cls()

    @classmethod
    def constant(cls, value: U) -> Timeline[U]:
        """Return a timeline holding the same value for all time."""
        return cls.of(DateTimeInterval.forever(), value)

    @classmethod
    def of(cls, time_range: Range, value: U) -> Timeline[U]:
        """Return a timeline holding a value for a single range.

        Examples:
            >>> from datetime import date
            >>> len(Timeline.of(date(2024, 1, 1), "holiday"))
            1
        """
        return cls.empty().add(time_range, value)

    @classmethod
    def import_values(
        cls,
        values: Union[Iterable[Any], Mapping[Any, Any]],
        extractor: Optional[Callable[[Any, Any], Any]] = None,
    ) -> Timeline[Any]:
        """Build a timeline from arbitrary values.

        Without an extractor, every value must be a range and is stored as
        its own value. With an extractor, it is called as
        ``extractor(value, key)`` (key being the index, or the key when
        ``values`` is a mapping) and may return:

        - a range: the value is stored for that range
        - an iterable of ranges: the value is stored for each of them
        - a mapping of ranges to new values: each new value is stored for
          its range

        Args:
            values: The values to import.
            extractor: Optional callable deriving ranges (and values).

        Returns:
            A timeline with every extracted range.

        Raises:
            ImportConflictError: On the first range intersecting one already
                imported. ``conflicting_values`` holds the original values
                imported so far over that range.

        Examples:
            >>> shifts = [
            ...     {"who": "ann", "when": "2024-01-01/2024-01-03"},
            ...     {"who": "bob", "when": "2024-01-04/2024-01-05"},
            ... ]
            >>> timeline = Timeline.import_values(
            ...     shifts, lambda shift, _: {DateInterval.parse(shift["when"]): shift["who"]}
            ... )
            >>> list(timeline.values())
            ['ann', 'bob']
        """
        timeline: Timeline[Any] = cls.empty()
        originals: Timeline[Any] = cls.empty()

        for time_range, value, original in _assemble_values(values, extractor):
            try:
                timeline = timeline.add(time_range, value)
                originals = originals.add(time_range, original)
            except RangeConflictError as e:
                logger.debug("Import conflict for %r over %s", original, e.conflicting_range)
                raise ImportConflictError(
                    DateTimeInterval.cast(time_range),
                    original,
                    originals.keep(time_range),
                    e,
                ) from e

        return timeline

    @classmethod
    def zip_all(cls, *timelines: Timeline[Any]) -> Timeline[Tuple[Any, ...]]:
        """Combine timelines into one whose values are tuples.

        The time axis is cut at every start and end found in any input. Each
        resulting sub-interval holds a tuple with one slot per input timeline,
        in input order; a slot is None where that timeline has no value.
        Sub-intervals where no timeline has a value are left out.

        Raises:
            InvariantError: If a sub-interval is covered by more than one
                item of an input timeline.

        Examples:
            >>> a = Timeline.of(DateInterval.parse("2024-01-01/2024-01-02"), "a")
            >>> b = Timeline.of(DateInterval.parse("2024-01-02/2024-01-03"), "b")
            >>> list(Timeline.zip_all(a, b).values())
            [('a', None), ('a', 'b'), (None, 'b')]
        """
        has_infinite_start = False
        has_infinite_end = False
        finite_boundaries: set[_datetime.datetime] = set()

        for timeline in timelines:
            for item_range, _ in timeline._items:
                if item_range.start is None:
                    has_infinite_start = True
                else:
                    finite_boundaries.add(item_range.start)
                if item_range.end is None:
                    has_infinite_end = True
                else:
                    finite_boundaries.add(item_range.end)

        boundaries: list[Optional[_datetime.datetime]] = []
        if has_infinite_start:
            boundaries.append(None)
        boundaries.extend(sorted(finite_boundaries))
        if has_infinite_end:
            boundaries.append(None)

        if len(boundaries) < 2:
            return cls.empty()

        items = []
        for start, end in pairwise(boundaries):
            sub_range = DateTimeInterval(start, end)
            found = [timeline._value_for(sub_range) for timeline in timelines]
            if all(value is _MISSING for value in found):
                continue
            items.append(
                (sub_range, tuple(None if value is _MISSING else value for value in found))
            )

        logger.debug(
            "Zipped %d timelines: kept %d of %d sub-intervals",
            len(timelines),
            len(items),
            len(boundaries) - 1,
        )
        return cls._wrap(items)

    @classmethod
    def merge(
        cls,
        *timelines: Timeline[Any],
        combiner: Optional[Callable[..., Any]] = None,
    ) -> Timeline[Any]:
        """Zip timelines and combine the values of each sub-interval.

        The combiner is called as ``combiner(*values, sub_interval)``, with
        None for timelines without a value there. By default the first
        value that is not None is kept.

        Examples:
            >>> base = Timeline.constant("default")
            >>> override = Timeline.of(DateInterval.parse("2024-01-01/2024-01-31"), "january")
            >>> [str(v) for v in Timeline.merge(override, base).values()]
            ['default', 'january', 'default']
        """
        combine = combiner if combiner is not None else _first_present
        return cls.zip_all(*timelines).map(
            lambda values, sub_range: combine(*values, sub_range)
        )

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def add(self, time_range: Range, value: U) -> Timeline[Union[V, U]]:
        """Return a new timeline with a value for the given range.

        Adding an empty range is a no-op.

        Raises:
            RangeConflictError: If the range intersects a stored range.
        """
        new_range = DateTimeInterval.cast(time_range)
        if new_range.is_empty:
            return self

        items = self._items
        low, high = 0, len(items)
        while low < high:
            middle = (low + high) // 2
            item_range = items[middle][0]
            if item_range.intersects(new_range):
                logger.debug("Rejected %s: intersects %s", new_range, item_range)
                raise RangeConflictError(new_range, item_range)
            if item_range.is_before(new_range):
                low = middle + 1
            else:
                high = middle

        return Timeline._wrap(items[:low] + ((new_range, value),) + items[low:])

    def fill_blanks(self, time_range: Range, value: V) -> Timeline[V]:
        """Return a new timeline where gaps within the range hold the value.

        Stored values are left untouched.
        """
        blanks = (
            self.keep(time_range)
            .zip(Timeline.of(time_range, value))
            .filter(lambda values, sub_range: not self.keep(sub_range))
        )
        return blanks.reduce(
            lambda timeline, values, sub_range: timeline.add(sub_range, values[1]),
            self,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def value_at(
        self,
        timepoint: _datetime.date,
        default: Optional[V] = None,
    ) -> Optional[V]:
        """Return the value at a timepoint, or ``default`` if there is none.

        A date stands for its midnight.
        """
        if not isinstance(timepoint, _datetime.datetime):
            timepoint = midnight(timepoint)

        items = self._items
        low, high = 0, len(items)
        while low < high:
            middle = (low + high) // 2
            item_range, value = items[middle]
            if item_range.contains(timepoint):
                return value
            if item_range.is_before(timepoint):
                low = middle + 1
            else:
                high = middle

        return default

    def keep(self, time_range: Range) -> Timeline[V]:
        """Return a timeline restricted to the given range.

        Items crossing a boundary of the range are truncated and keep their
        value; items outside of it are dropped.

        Examples:
            >>> t = Timeline.of(DateInterval.parse("2024-01-01/2024-01-31"), 1)
            >>> [str(r) for r in t.keep(DateInterval.parse("2024-01-20/2024-02-10")).intervals()]
            ['2024-01-20T00:00/2024-02-01T00:00']
        """
        keep_range = DateTimeInterval.cast(time_range)
        items = list(self._items)

        minimum = keep_range.start
        if minimum is not None:
            low, high = 0, len(items)
            while low < high:
                middle = (low + high) // 2
                item_range, value = items[middle]
                if item_range.contains(minimum):
                    items[middle] = (item_range.with_start(minimum), value)
                    low = middle
                    break
                if item_range.is_before(minimum):
                    low = middle + 1
                else:
                    high = middle
            items = items[low:]

        maximum = keep_range.inclusive_end
        if maximum is not None:
            low, high = 0, len(items)
            while low < high:
                middle = (low + high) // 2
                item_range, value = items[middle]
                if item_range.contains(maximum):
                    items[middle] = (item_range.with_end(keep_range.finite_end), value)
                    low = middle + 1
                    break
                if item_range.is_before(maximum):
                    low = middle + 1
                else:
                    high = middle
            items = items[:low]

        return Timeline._wrap(items)

    def _value_for(self, sub_range: DateTimeInterval) -> Any:
        """Return the single value covering a sub-range, or _MISSING."""
        items = self._items
        low, high = 0, len(items)
        while low < high:
            middle = (low + high) // 2
            item_range, value = items[middle]
            if item_range.intersects(sub_range):
                neighbours = items[max(middle - 1, 0) : middle] + items[middle + 1 : middle + 2]
                if any(other.intersects(sub_range) for other, _ in neighbours):
                    raise InvariantError("Found more than one value in this time range.")
                if not item_range.contains(sub_range):
                    raise InvariantError(
                        "Found one value in this time range, but it does not cover the entire range."
                    )
                return value
            if item_range.is_before(sub_range):
                low = middle + 1
            else:
                high = middle

        return _MISSING

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[V, DateTimeInterval], U]) -> Timeline[U]:
        """Apply ``fn(value, interval)`` to every value, keeping the intervals."""
        return Timeline._wrap((item_range, fn(value, item_range)) for item_range, value in self._items)

    def filter(
        self, predicate: Optional[Callable[[V, DateTimeInterval], bool]] = None
    ) -> Timeline[V]:
        """Keep the items for which ``predicate(value, interval)`` is true.

        Without a predicate, items with a falsy value are dropped.
        """
        if predicate is None:
            return Timeline._wrap(item for item in self._items if item[1])
        return Timeline._wrap(
            (item_range, value) for item_range, value in self._items if predicate(value, item_range)
        )

    def reduce(self, reducer: Callable[[Any, V, DateTimeInterval], A], initial: Any = None) -> A:
        """Fold the items in order with ``reducer(accumulator, value, interval)``."""
        accumulator = initial
        for item_range, value in self._items:
            accumulator = reducer(accumulator, value, item_range)
        return accumulator

    def simplify(self, equals: Optional[Equality[Any]] = None) -> Timeline[V]:
        """Merge consecutive items that meet and hold equal values.

        Args:
            equals: Equality strategy for values, default_equals if omitted.

        Examples:
            >>> t = Timeline.of(DateInterval.parse("2024-01-01/2024-01-02"), "x").add(
            ...     DateInterval.parse("2024-01-03/2024-01-04"), "x"
            ... )
            >>> [str(r) for r in t.simplify().intervals()]
            ['2024-01-01T00:00/2024-01-05T00:00']
        """
        is_equal = equals if equals is not None else default_equals
        items: list[Item[V]] = []

        for item_range, value in self._items:
            if items:
                last_range, last_value = items[-1]
                if last_range.meets(item_range) and is_equal(value, last_value):
                    items[-1] = (DateTimeInterval(last_range.start, item_range.end), value)
                    continue
            items.append((item_range, value))

        return Timeline._wrap(items)

    def zip(self, *others: Timeline[Any]) -> Timeline[Tuple[Any, ...]]:
        """Shorthand for ``Timeline.zip_all(self, *others)``."""
        return Timeline.zip_all(self, *others)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def items(self) -> Tuple[Item[V], ...]:
        """Return the ``(interval, value)`` pairs in order."""
        return self._items

    def intervals(self) -> Iterator[DateTimeInterval]:
        return (item_range for item_range, _ in self._items)

    def values(self) -> Iterator[V]:
        return (value for _, value in self._items)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Item[V]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeline):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._items:
            return "Timeline.empty()"
        pairs = ", ".join(f"({str(item_range)!r}, {value!r})" for item_range, value in self._items)
        return f"Timeline([{pairs}])"


def _is_range(candidate: Any) -> bool:
    return isinstance(candidate, (_datetime.date, DateInterval, DateTimeInterval))


def _assemble_values(
    values: Union[Iterable[Any], Mapping[Any, Any]],
    extractor: Optional[Callable[[Any, Any], Any]],
) -> Iterator[Tuple[Range, Any, Any]]:
    """Yield ``(range, value, original value)`` for every extracted range."""
    pairs = values.items() if isinstance(values, Mapping) else enumerate(values)

    for key, original in pairs:
        if extractor is None:
            yield original, original, original
            continue

        result = extractor(original, key)
        if isinstance(result, Mapping):
            for time_range, value in result.items():
                yield time_range, value, original
        elif _is_range(result):
            yield result, original, original
        else:
            for time_range in result:
                yield time_range, original, original


def _first_present(*arguments: Any) -> Any:
    # The last argument is the sub-interval
    return next((value for value in arguments[:-1] if value is not None), None)


__all__ = ["Timeline"]
