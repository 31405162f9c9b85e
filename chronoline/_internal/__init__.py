"""Internal utilities for Chronoline.

This module contains private implementation details:
    - Validation helpers
    - Constants and symbols
    - Calendar helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronoline._internal.calendar import days_in_month, is_leap_year
from chronoline._internal.validation import (
    validate_date,
    validate_datetime,
    validate_order,
)

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "validate_date",
    "validate_datetime",
    "validate_order",
]
