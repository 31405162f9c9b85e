"""Pluggable value equality.

Operations that need to decide whether two stored values are "the same"
(``Timeline.simplify``, ``unique``) accept an equality strategy: any
two-argument callable returning a bool. ``default_equals`` is used when no
strategy is given.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Protocol, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

# Method names probed by default_equals, in order of preference
_EQUALITY_METHODS = ("is_equal_to", "equals")


class Equality(Protocol[T_contra]):
    """A strategy deciding whether two values are equal."""

    def __call__(self, a: T_contra, b: T_contra, /) -> bool: ...


def default_equals(a: Any, b: Any) -> bool:
    """Compare two values the way domain objects expect to be compared.

    - identical objects are equal
    - objects of the same class exposing ``is_equal_to`` or ``equals``
      are compared with that method
    - values of different types are never equal
    - anything else falls back to ``==``

    Examples:
        >>> default_equals(1, 1)
        True
        >>> default_equals(1, 1.0)
        False
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    for name in _EQUALITY_METHODS:
        method = getattr(a, name, None)
        if callable(method):
            return bool(method(b))

    return bool(a == b)


def unique(values: Iterable[T], equals: Equality[T] = default_equals) -> List[T]:
    """Return the values without duplicates, keeping the first occurrence.

    Values do not need to be hashable; each one is checked against the
    values kept so far.
    """
    kept: List[T] = []
    for value in values:
        if not any(equals(value, seen) for seen in kept):
            kept.append(value)
    return kept


__all__ = ["Equality", "default_equals", "unique"]
