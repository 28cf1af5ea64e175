"""Entry points that configure the lazy sort engine with a comparison strategy."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .engine import LazySortIterator
from .ordering import IncomparablePlacement, PartialComparator, natural_compare, partial_compare, resolve_partial
from .pivot import PivotRule, middle_pivot

T = TypeVar("T")


def lazy_sorted(iterable: Iterable[T], *, pivot: PivotRule = middle_pivot) -> LazySortIterator[T]:
    """Lazily sort by the elements' natural total order."""

    return LazySortIterator(iterable, natural_compare, pivot=pivot)


def lazy_sorted_by(
    iterable: Iterable[T],
    compare: Callable[[T, T], Any],
    *,
    pivot: PivotRule = middle_pivot,
) -> LazySortIterator[T]:
    """Lazily sort with a caller supplied three-way comparator.

    *compare* may return an :class:`~lazysort.ordering.Ordering` or a
    ``cmp``-style number. It is not checked for consistency: an inconsistent
    comparator gives an unspecified order but every element is still
    emitted exactly once.
    """

    return LazySortIterator(iterable, compare, pivot=pivot)


def lazy_sorted_partial(
    iterable: Iterable[T],
    first: IncomparablePlacement | bool | str,
    *,
    compare: PartialComparator = partial_compare,
    pivot: PivotRule = middle_pivot,
) -> LazySortIterator[T]:
    """Lazily sort a partially ordered input.

    Incomparable elements are placed before (``first=True``) or after
    (``first=False``) the elements they cannot be compared with.
    """

    return LazySortIterator(iterable, resolve_partial(first, compare), pivot=pivot)


class Sortable(Generic[T]):
    """Wrap any finite iterable to expose the lazy sort entry points as methods.

    >>> list(Sortable([3, 1, 2]).sorted())
    [1, 2, 3]
    """

    def __init__(self, source: Iterable[T], *, pivot: PivotRule = middle_pivot) -> None:
        self._source = source
        self._pivot = pivot

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def sorted(self) -> LazySortIterator[T]:
        return lazy_sorted(self._source, pivot=self._pivot)

    def sorted_by(self, compare: Callable[[T, T], Any]) -> LazySortIterator[T]:
        return lazy_sorted_by(self._source, compare, pivot=self._pivot)

    def sorted_partial(self, first: IncomparablePlacement | bool | str) -> LazySortIterator[T]:
        return lazy_sorted_partial(self._source, first, pivot=self._pivot)
