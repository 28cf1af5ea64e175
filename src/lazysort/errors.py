"""Exceptions raised by the lazy sort engine."""

from __future__ import annotations


class LazySortError(Exception):
    """Base class for lazysort errors."""


class ComparatorError(LazySortError):
    """The comparator raised or returned something that is not an ordering.

    The original exception is available as ``__cause__``.
    """


class SortAbandonedError(LazySortError):
    """An iterator was advanced again after a comparator failure."""
