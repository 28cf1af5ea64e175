"""Three-way orderings and the comparators built on them."""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from numbers import Real
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: Any) -> "Ordering":
        """Interpret *value* as an ordering.

        Accepts members of this enum or any real number in the ``cmp``
        convention (negative, zero, positive).
        """

        if isinstance(value, Ordering):
            return value
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"Comparator returned {value!r}, expected an Ordering or a number")
        if isinstance(value, float) and math.isnan(value):
            raise TypeError("Comparator returned NaN")
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


class PartialOrdering(Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    INCOMPARABLE = "incomparable"

    def to_total(self) -> Ordering:
        if self is PartialOrdering.INCOMPARABLE:
            raise ValueError("Incomparable elements have no total ordering")
        return Ordering[self.name]


class IncomparablePlacement(Enum):
    FIRST = "first"
    LAST = "last"

    @classmethod
    def coerce(cls, value: "IncomparablePlacement | bool | str") -> "IncomparablePlacement":
        if isinstance(value, IncomparablePlacement):
            return value
        if isinstance(value, bool):
            return cls.FIRST if value else cls.LAST
        return cls(value)


PartialComparator = Callable[[T, T], PartialOrdering]


def natural_compare(a: Any, b: Any) -> Ordering:
    """Compare using the element type's own total order."""

    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def partial_compare(a: Any, b: Any) -> PartialOrdering:
    """Compare using the rich comparison operators without assuming totality."""

    if a < b:
        return PartialOrdering.LESS
    if a > b:
        return PartialOrdering.GREATER
    if a == b:
        return PartialOrdering.EQUAL
    return PartialOrdering.INCOMPARABLE


def resolve_partial(
    placement: IncomparablePlacement | bool | str,
    compare: PartialComparator = partial_compare,
) -> Callable[[Any, Any], Ordering]:
    """Turn a partial comparator into a total one biased by *placement*.

    Comparable pairs keep their real ordering. When exactly one side of an
    incomparable pair is unordered (incomparable even with itself, like NaN)
    that side goes first or last. Any other incomparable pair resolves to
    LESS for ``FIRST`` and GREATER for ``LAST``.
    """

    placement = IncomparablePlacement.coerce(placement)
    ahead = Ordering.LESS if placement is IncomparablePlacement.FIRST else Ordering.GREATER

    def _unordered(value: Any) -> bool:
        return compare(value, value) is PartialOrdering.INCOMPARABLE

    def _resolved(a: Any, b: Any) -> Ordering:
        result = compare(a, b)
        if result is not PartialOrdering.INCOMPARABLE:
            return result.to_total()
        a_unordered = _unordered(a)
        if a_unordered != _unordered(b):
            return ahead if a_unordered else ahead.reverse()
        return ahead

    return _resolved
