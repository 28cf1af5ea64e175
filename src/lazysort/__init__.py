"""Lazy quicksort adaptors for Python iterables."""

from .adapters import Sortable, lazy_sorted, lazy_sorted_by, lazy_sorted_partial
from .engine import LazySortIterator, SortState, SortStats
from .errors import ComparatorError, LazySortError, SortAbandonedError
from .ordering import (
    IncomparablePlacement,
    Ordering,
    PartialOrdering,
    natural_compare,
    partial_compare,
    resolve_partial,
)
from .pivot import first_pivot, get_pivot_rule, last_pivot, middle_pivot

__all__ = [
    "ComparatorError",
    "IncomparablePlacement",
    "LazySortError",
    "LazySortIterator",
    "Ordering",
    "PartialOrdering",
    "SortAbandonedError",
    "SortState",
    "SortStats",
    "Sortable",
    "first_pivot",
    "get_pivot_rule",
    "last_pivot",
    "lazy_sorted",
    "lazy_sorted_by",
    "lazy_sorted_partial",
    "middle_pivot",
    "natural_compare",
    "partial_compare",
    "resolve_partial",
]
