"""Orderable interval collections.

``SortableIntervals`` is the capability set the overlap validator needs: a
length, a start-order comparison, an end-before-start comparison for adjacent
elements, and a swap so callers can sort in place.
"""

from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from typing import Generic, overload

from typing_extensions import override

from spanscan.period import P


class SortableIntervals(ABC):

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def less(self, i: int, j: int) -> bool:
        """Return True if the element at ``i`` starts before the one at ``j``."""
        pass

    @abstractmethod
    def swap(self, i: int, j: int) -> None:
        pass

    @abstractmethod
    def end_before_start(self, i: int, j: int) -> bool:
        """Return True if the end of ``i`` is strictly before the start of ``j``.

        Only called for adjacent elements, with ``j == i + 1``.
        """
        pass


class PeriodIntervals(SortableIntervals, Sequence[P], Generic[P]):
    """Sortable view over a mutable sequence of periods.

    Wraps the caller's list without copying it; ``swap`` and
    ``sort_intervals`` reorder that list in place. Being a ``Sequence`` too,
    a validated instance can be handed directly to the range search.
    """

    def __init__(self, periods: MutableSequence[P]):
        self.periods: MutableSequence[P] = periods

    @override
    def __len__(self) -> int:
        return len(self.periods)

    @overload
    def __getitem__(self, index: int) -> P: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[P]: ...

    @override
    def __getitem__(self, index: int | slice) -> P | Sequence[P]:
        return self.periods[index]

    @override
    def less(self, i: int, j: int) -> bool:
        return self.periods[i].start < self.periods[j].start

    @override
    def swap(self, i: int, j: int) -> None:
        self.periods[i], self.periods[j] = self.periods[j], self.periods[i]

    @override
    def end_before_start(self, i: int, j: int) -> bool:
        return self.periods[i].end < self.periods[j].start

    @override
    def __repr__(self) -> str:
        return f"PeriodIntervals({self.periods!r})"


def sort_intervals(intervals: SortableIntervals) -> None:
    """Sort ``intervals`` in place by start, using only ``less`` and ``swap``.

    Heapsort: O(n log n) comparisons, no extra storage, not stable. Useful to
    repair a collection rejected as unsorted before validating it again.
    """
    n = len(intervals)

    def sift_down(root: int, size: int) -> None:
        while True:
            child = 2 * root + 1
            if child >= size:
                return
            if child + 1 < size and intervals.less(child, child + 1):
                child += 1
            if not intervals.less(root, child):
                return
            intervals.swap(root, child)
            root = child

    # Build a max-heap, then move the largest remaining element to the tail
    for root in range(n // 2 - 1, -1, -1):
        sift_down(root, n)
    for last in range(n - 1, 0, -1):
        intervals.swap(0, last)
        sift_down(0, last)
