"""Validation that a collection is sorted by start and free of overlaps."""

import logging

from spanscan.sortable import SortableIntervals

logger = logging.getLogger(__name__)


class OverlapError(ValueError):
    """Adjacent elements ``index`` and ``index + 1`` violate the ordering.

    Returned by ``check_overlap`` (and raised by ``ensure_no_overlap``) so the
    caller can locate the offending input.
    """

    edge: str

    def __init__(self, index: int):
        if type(self) is OverlapError:
            raise TypeError(
                "OverlapError cannot be created directly.\n"
                "Use NotSortedError or OverlappingError."
            )
        super().__init__(index)
        self.index: int = index
        self.later: int = index + 1

    def __str__(self) -> str:
        return f"[{self.later}].start must be after [{self.index}].{self.edge}"


class NotSortedError(OverlapError):
    """The later element does not start strictly after the earlier one."""

    edge = "start"


class OverlappingError(OverlapError):
    """The elements are in start order but the earlier one ends too late."""

    edge = "end"


def check_overlap(intervals: SortableIntervals) -> OverlapError | None:
    """Check that ``intervals`` is sorted by start and that no two overlap.

    Both conditions are verified in one pass over adjacent pairs. Returns the
    first violation found, or None when the collection is valid. Collections
    with fewer than two elements are always valid.

    Example:
        error = check_overlap(spanscan.PeriodIntervals(periods))
        if error is not None:
            print(f"bad input at index {error.later}: {error}")
    """
    for i in range(len(intervals) - 1):
        # Sortedness is checked on the fly
        if not intervals.less(i, i + 1):
            error: OverlapError = NotSortedError(i)
        elif not intervals.end_before_start(i, i + 1):
            error = OverlappingError(i)
        else:
            continue
        logger.debug("Rejected intervals: %s", error)
        return error
    return None


def ensure_no_overlap(intervals: SortableIntervals) -> None:
    """Like ``check_overlap``, but raise the violation instead of returning it.

    Raises:
        NotSortedError: If adjacent elements are out of start order
        OverlappingError: If adjacent elements intersect
    """
    error = check_overlap(intervals)
    if error is not None:
        raise error
