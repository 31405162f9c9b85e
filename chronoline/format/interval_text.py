"""Textual interval notation ``<START>/<END>``.

Each side of the separator is either a timepoint literal, the infinity
symbol ``-``, or (on at most one side) an ISO 8601 period expressed
relative to the other, finite side:

    2024-01-01/2024-01-31      finite
    2024-01-01/-               since 2024-01-01
    -/2024-01-31               until 2024-01-31
    -/-                        forever
    2024-01-01/P1M             one month from the start
    P1W/2024-01-31             one week up to the end

This module only splits and validates the notation; each interval class
turns the sides into bounds of its own granularity.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronoline._internal.constants import (
    INFINITY_SYMBOL,
    INTERVAL_SEPARATOR,
    PERIOD_PREFIX,
    TIME_DESIGNATOR,
)
from chronoline.errors import ParseError


@dataclass(frozen=True)
class IntervalText:
    """The two sides of a textual interval."""

    text: str
    start: str
    end: str

    @classmethod
    def split(cls, text: str) -> IntervalText:
        """Split and validate a textual interval.

        Raises:
            ParseError: If the separator is missing, both sides are periods,
                or a period sits next to the infinity symbol.

        Examples:
            >>> IntervalText.split("2024-01-01/P1M").end_is_period
            True
            >>> IntervalText.split("P1D/P2D")
            Traceback (most recent call last):
            ...
            chronoline.errors.ParseError: interval 'P1D/P2D' can only have one period
        """
        stripped = text.strip()
        if INTERVAL_SEPARATOR not in stripped:
            raise ParseError(
                f"invalid interval {text!r}: expected <start>{INTERVAL_SEPARATOR}<end>"
            )

        start, end = stripped.split(INTERVAL_SEPARATOR, 1)
        parts = cls(text=text, start=start.strip(), end=end.strip())

        if not parts.start or not parts.end:
            raise ParseError(f"invalid interval {text!r}: empty boundary")
        if parts.start_is_period and parts.end_is_period:
            raise ParseError(f"interval {text!r} can only have one period")
        if (parts.start_is_period and parts.end_is_infinite) or (
            parts.start_is_infinite and parts.end_is_period
        ):
            raise ParseError(f"interval {text!r} cannot combine a period with infinity")

        return parts

    @property
    def start_is_period(self) -> bool:
        return _is_period(self.start)

    @property
    def end_is_period(self) -> bool:
        return _is_period(self.end)

    @property
    def start_is_infinite(self) -> bool:
        return self.start == INFINITY_SYMBOL

    @property
    def end_is_infinite(self) -> bool:
        return self.end == INFINITY_SYMBOL


def _is_period(side: str) -> bool:
    # A leading sign is allowed on periods ("-P1D"), but "-" alone is infinity
    return side.lstrip("+-").upper().startswith(PERIOD_PREFIX)


def has_time_part(period: str) -> bool:
    """Return True if a period literal carries a time part (``PT2H``)."""
    return TIME_DESIGNATOR in period.upper()


__all__ = ["IntervalText", "has_time_part"]
