"""Chronoline exception hierarchy.

All Chronoline-specific exceptions inherit from ChronolineError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from chronoline.collections.timeline import Timeline
    from chronoline.core.datetime_interval import DateTimeInterval


class ChronolineError(Exception):
    """Base exception for all Chronoline errors."""

    pass


class ValidationError(ChronolineError):
    """Invalid input values.

    Raised when a timepoint has the wrong type for the interval axis.

    Examples:
        - A datetime given where a date is expected
        - A timezone-aware datetime (only naive timestamps are supported)
    """

    pass


class ParseError(ChronolineError):
    """Failed to parse a textual interval, timepoint or period.

    Examples:
        - Missing "/" separator in an interval
        - Periods on both sides of an interval
        - A period next to the infinity symbol
        - Malformed ISO 8601 date or period
    """

    pass


class InvariantError(ChronolineError):
    """A domain invariant does not hold.

    Examples:
        - Interval start after its end
        - Asking an unbounded interval for a finite duration or bound
        - A zipped sub-interval covered by more than one item of a timeline
    """

    pass


class RangeConflictError(ChronolineError):
    """A range added to a timeline intersects an existing range.

    Attributes:
        conflicting_range: The range that was being added.
        existing_range: The range already stored in the timeline.
    """

    def __init__(
        self,
        conflicting_range: DateTimeInterval,
        existing_range: DateTimeInterval,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message
            or f"range {conflicting_range} conflicts with existing range {existing_range}"
        )
        self.conflicting_range = conflicting_range
        self.existing_range = existing_range


class ImportConflictError(RangeConflictError):
    """A bulk import into a timeline hit a conflicting range.

    Carries the context of the failed import. The RangeConflictError that
    triggered it is chained as ``__cause__``.

    Attributes:
        time_range: The range extracted for the offending value.
        value: The offending original (untransformed) value.
        conflicting_values: Timeline of the already imported original values
            that intersect ``time_range``.
    """

    def __init__(
        self,
        time_range: DateTimeInterval,
        value: Any,
        conflicting_values: Timeline[Any],
        previous: RangeConflictError,
    ) -> None:
        super().__init__(
            previous.conflicting_range,
            previous.existing_range,
            f"cannot import {value!r} for {time_range}: "
            f"{len(conflicting_values)} imported value(s) already cover part of it",
        )
        self.time_range = time_range
        self.value = value
        self.conflicting_values = conflicting_values


__all__ = [
    "ChronolineError",
    "ValidationError",
    "ParseError",
    "InvariantError",
    "RangeConflictError",
    "ImportConflictError",
]
