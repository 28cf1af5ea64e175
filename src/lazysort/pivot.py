"""Pivot selection rules for span partitioning."""

from __future__ import annotations

from typing import Callable

PivotRule = Callable[[int, int], int]


def middle_pivot(start: int, end: int) -> int:
    return start + (end - start) // 2


def first_pivot(start: int, end: int) -> int:  # noqa: ARG001
    return start


def last_pivot(start: int, end: int) -> int:  # noqa: ARG001
    return end - 1


PIVOT_RULES: dict[str, PivotRule] = {
    "middle": middle_pivot,
    "first": first_pivot,
    "last": last_pivot,
}


def get_pivot_rule(name: str) -> PivotRule:
    rule = PIVOT_RULES.get(name)
    if rule is None:
        raise ValueError(f"Unknown pivot rule {name!r}; expected one of {sorted(PIVOT_RULES)}")
    return rule
