"""Validation utilities for Chronoline.

This module provides the checks run by interval constructors: the type of
each bound and the ordering of start and end.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TypeVar

from chronoline.errors import InvariantError, ValidationError

P = TypeVar("P", _datetime.date, _datetime.datetime)


def validate_date(value: object, name: str) -> None:
    """Validate that a bound is a calendar date (and not a datetime).

    Args:
        value: The bound to validate, None meaning unbounded.
        name: Parameter name used in the error message.

    Raises:
        ValidationError: If value is neither None nor a plain date.
    """
    if value is None:
        return
    if isinstance(value, _datetime.datetime) or not isinstance(value, _datetime.date):
        raise ValidationError(
            f"{name} must be a date or None, got {type(value).__name__}"
        )


def validate_datetime(value: object, name: str) -> None:
    """Validate that a bound is a naive datetime.

    Args:
        value: The bound to validate, None meaning unbounded.
        name: Parameter name used in the error message.

    Raises:
        ValidationError: If value is not a datetime, or carries a timezone.
    """
    if value is None:
        return
    if not isinstance(value, _datetime.datetime):
        raise ValidationError(
            f"{name} must be a datetime or None, got {type(value).__name__}"
        )
    if value.tzinfo is not None:
        raise ValidationError(f"{name} must be a naive datetime, got {value.isoformat()}")


def validate_order(start: P | None, end: P | None) -> None:
    """Validate that start is not after end when both are bounded.

    Raises:
        InvariantError: If start > end.
    """
    if start is not None and end is not None and start > end:
        raise InvariantError(f"Start after end: {start.isoformat()} / {end.isoformat()}")


__all__ = [
    "validate_date",
    "validate_datetime",
    "validate_order",
]
