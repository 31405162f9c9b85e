"""Calendar arithmetic on timepoints.

Period Operations (from chronoline.arithmetic.period_ops):
    - add_period: Add a Period to a date or datetime with day clamping
    - subtract_period: Subtract a Period from a date or datetime
    - shift: Move a timepoint by a timedelta or a Period
    - unshift: Move a timepoint backwards by a timedelta or a Period
"""

from __future__ import annotations

from chronoline.arithmetic.period_ops import (
    add_period,
    shift,
    subtract_period,
    unshift,
)

__all__ = [
    "add_period",
    "subtract_period",
    "shift",
    "unshift",
]
