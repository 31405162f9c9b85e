"""Calendar periods.

A Period counts years, months, weeks and days. Unlike a
``datetime.timedelta`` its exact length depends on where it is applied:
one month from January 31st lands on the last day of February.
"""

from __future__ import annotations

import datetime as _datetime

from chronoline._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR


class Period:
    """An amount of calendar time: years, months, weeks and days.

    Components are kept exactly as given (``Period(months=14)`` is not
    turned into a year and two months) and may be negative. Periods are
    immutable and hashable.

    Attributes:
        years: Years component.
        months: Months component.
        weeks: Weeks component.
        days: Days component.

    Examples:
        >>> Period(years=1, months=2).total_months
        14
        >>> import datetime
        >>> datetime.date(2024, 1, 31) + Period(months=1)
        datetime.date(2024, 2, 29)
        >>> str(Period(weeks=1, days=3))
        'P10D'
    """

    __slots__ = ("_years", "_months", "_weeks", "_days")

    def __init__(self, years: int = 0, months: int = 0, weeks: int = 0, days: int = 0) -> None:
        self._years = years
        self._months = months
        self._weeks = weeks
        self._days = days

    @classmethod
    def _of(cls, components: tuple[int, int, int, int]) -> Period:
        return cls(*components)

    def _components(self) -> tuple[int, int, int, int]:
        return (self._years, self._months, self._weeks, self._days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        return cls(weeks=weeks)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(days=days)

    @classmethod
    def zero(cls) -> Period:
        """Return the period of no time at all."""
        return cls()

    @classmethod
    def between(cls, start: _datetime.date, end: _datetime.date) -> Period:
        """Return the period between two dates, end exclusive.

        The result only uses years, months and days. All non-zero components
        share the sign of the difference, so that ``start + result == end``.

        Args:
            start: The start date (inclusive).
            end: The end date (exclusive).

        Returns:
            The Period from start to end.

        Examples:
            >>> import datetime
            >>> Period.between(datetime.date(2024, 1, 15), datetime.date(2025, 3, 20))
            Period(years=1, months=2, weeks=0, days=5)

            >>> Period.between(datetime.date(2024, 1, 31), datetime.date(2024, 3, 1))
            Period(years=0, months=1, weeks=0, days=1)
        """
        from chronoline.arithmetic.period_ops import add_period

        total_months = (end.year * MONTHS_PER_YEAR + end.month) - (
            start.year * MONTHS_PER_YEAR + start.month
        )
        day_offset = end.day - start.day

        # Step back one month when the day offset points the other way
        if total_months > 0 and day_offset < 0:
            total_months -= 1
        elif total_months < 0 and day_offset > 0:
            total_months += 1

        # Measure days from the clamped anchor, not from the raw day numbers
        anchor = add_period(start, cls(months=total_months))
        days = (end - anchor).days

        # Truncate toward zero so years and months keep the same sign
        years = abs(total_months) // MONTHS_PER_YEAR
        if total_months < 0:
            years = -years
        months = total_months - years * MONTHS_PER_YEAR

        return cls(years=years, months=months, days=days)

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse an ISO 8601 period such as ``P1Y2M3W4D``.

        Args:
            text: The text to parse.

        Returns:
            The parsed Period.

        Raises:
            ParseError: If text is not a valid ISO 8601 period.

        Examples:
            >>> Period.parse("P1Y2M")
            Period(years=1, months=2, weeks=0, days=0)
            >>> Period.parse("-P3D")
            Period(years=0, months=0, weeks=0, days=-3)
        """
        from chronoline.format.iso8601 import parse_period

        return parse_period(text)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        return self._days

    @property
    def total_months(self) -> int:
        """Years and months expressed in months; weeks and days are ignored.

        Examples:
            >>> Period(years=-1, months=3).total_months
            -9
        """
        return self._years * MONTHS_PER_YEAR + self._months

    @property
    def total_days(self) -> int:
        """Weeks and days expressed in days; years and months are ignored."""
        return self._weeks * DAYS_PER_WEEK + self._days

    @property
    def is_zero(self) -> bool:
        return not any(self._components())

    def normalized(self) -> Period:
        """Fold months into years and days into weeks.

        Examples:
            >>> Period(months=14, days=10).normalized()
            Period(years=1, months=2, weeks=1, days=3)
        """
        years, months = divmod(self.total_months, MONTHS_PER_YEAR)
        weeks, days = divmod(self.total_days, DAYS_PER_WEEK)
        return Period(years, months, weeks, days)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return Period._of(
            tuple(a + b for a, b in zip(self._components(), other._components()))  # type: ignore[arg-type]
        )

    def __radd__(self, other: object):
        """Support ``date + period`` and ``sum()`` over periods."""
        if isinstance(other, _datetime.date):
            from chronoline.arithmetic.period_ops import add_period

            return add_period(other, self)
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self + -other

    def __rsub__(self, other: object):
        """Support ``date - period``."""
        if isinstance(other, _datetime.date):
            from chronoline.arithmetic.period_ops import subtract_period

            return subtract_period(other, self)
        return NotImplemented

    def __neg__(self) -> Period:
        return self * -1

    def __mul__(self, other: object) -> Period:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Period._of(tuple(component * other for component in self._components()))  # type: ignore[arg-type]

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        """Compare component by component: ``Period(months=12) != Period(years=1)``."""
        if not isinstance(other, Period):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __bool__(self) -> bool:
        return not self.is_zero

    def __repr__(self) -> str:
        return "Period(years={}, months={}, weeks={}, days={})".format(*self._components())

    def __str__(self) -> str:
        """Return the ISO 8601 form, weeks folded into days (``P1Y2M10D``)."""
        text = "".join(
            f"{amount}{designator}"
            for amount, designator in (
                (self._years, "Y"),
                (self._months, "M"),
                (self.total_days, "D"),
            )
            if amount
        )
        return f"P{text}" if text else "P0D"


__all__ = ["Period"]
