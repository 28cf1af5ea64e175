"""Incremental quicksort exposed as an iterator."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, Union

from .errors import ComparatorError, SortAbandonedError
from .ordering import Ordering
from .pivot import PivotRule, middle_pivot

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range of buffer indices whose order is still unknown."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Settled:
    """Buffer index holding an element already in its final position."""

    index: int


WorkItem = Union[Span, Settled]


class SortState(Enum):
    ACTIVE = "active"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass
class SortStats:
    comparisons: int = 0
    swaps: int = 0
    partitions: int = 0
    emitted: int = 0
    max_depth: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


class LazySortIterator(Generic[T]):
    """Yield the elements of *iterable* in comparator order, sorting on demand.

    The input is drained into a buffer once. Every call to ``__next__``
    resumes a quicksort whose pending recursion lives on an explicit work
    stack, and stops as soon as the smallest unemitted element is settled.
    Taking the first ``k`` of ``n`` elements therefore costs roughly
    ``n + k log k`` comparisons instead of a full sort.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        compare: Callable[[T, T], Any],
        *,
        pivot: PivotRule = middle_pivot,
    ) -> None:
        self._data: list[T] = list(iterable)
        self._compare = compare
        self._pivot = pivot
        self._work: list[WorkItem] = [Span(0, len(self._data))] if self._data else []
        self._state = SortState.ACTIVE
        self.stats = SortStats(max_depth=len(self._work))
        logger.debug("Lazy sort initialised with %d elements", len(self._data))

    @property
    def state(self) -> SortState:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state is SortState.EXHAUSTED

    @property
    def remaining(self) -> int:
        if self._state is not SortState.ACTIVE:
            return 0
        return len(self._data) - self.stats.emitted

    def __length_hint__(self) -> int:
        return self.remaining

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._state is SortState.FAILED:
            raise SortAbandonedError("Iterator cannot be reused after a comparator failure")
        work = self._work
        while work:
            item = work.pop()
            if isinstance(item, Settled):
                return self._emit(item.index)
            size = len(item)
            if size == 0:
                continue
            if size == 1:
                return self._emit(item.start)
            chosen = self._pivot(item.start, item.end)
            if not item.start <= chosen < item.end:
                work.append(item)
                raise ValueError(f"Pivot rule returned {chosen}, outside [{item.start}, {item.end})")
            try:
                p = self._partition(item.start, item.end, chosen)
            except Exception as exc:
                self._state = SortState.FAILED
                logger.warning("Comparator failed while partitioning [%d, %d)", item.start, item.end)
                raise ComparatorError(f"Comparator failed: {exc}") from exc
            if p + 1 < item.end:
                work.append(Span(p + 1, item.end))
            work.append(Settled(p))
            if p > item.start:
                work.append(Span(item.start, p))
            if len(work) > self.stats.max_depth:
                self.stats.max_depth = len(work)
        if self._state is SortState.ACTIVE:
            self._state = SortState.EXHAUSTED
            logger.debug("Lazy sort exhausted after %d comparisons", self.stats.comparisons)
        raise StopIteration

    def _emit(self, index: int) -> T:
        self.stats.emitted += 1
        return self._data[index]

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]
        self.stats.swaps += 1

    def _partition(self, start: int, end: int, chosen: int) -> int:
        """Partition ``[start, end)`` around ``data[chosen]`` and return its final index.

        Lomuto scheme: the pivot is parked in the last slot and each other
        index is compared against it exactly once, so the loop terminates and
        permutes the span whatever the comparator answers.
        """

        last = end - 1
        if chosen != last:
            self._swap(chosen, last)
        data = self._data
        pivot_value = data[last]
        store = start
        for i in range(start, last):
            self.stats.comparisons += 1
            if Ordering.of(self._compare(data[i], pivot_value)) is Ordering.LESS:
                if i != store:
                    self._swap(i, store)
                store += 1
        if store != last:
            self._swap(store, last)
        self.stats.partitions += 1
        return store
