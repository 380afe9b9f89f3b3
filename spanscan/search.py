"""Binary search for the periods overlapping a query range."""

import bisect
import logging
from collections.abc import Iterator, Sequence

from spanscan.period import P, TimePeriod

logger = logging.getLogger(__name__)


def periods_overlap_range(
    periods: Sequence[TimePeriod], rng: TimePeriod
) -> tuple[int, int]:
    """Return the index range ``(i, j)`` of all periods overlapping ``rng``.

    ``periods[i:j]`` is exactly the set of periods that intersect ``rng``
    (see ``in_range``). When nothing overlaps, ``(0, 0)`` is returned.

    Requirements (not checked, see ``check_overlap``):
    - periods are sorted by start
    - periods do not overlap each other

    Note: Periods at either edge of the result may start before ``rng`` or
    end after it. Use ``truncate_period`` to clip them.
    """
    # In a sorted, disjoint sequence both starts and ends ascend, so each
    # bound is a lower-bound search over a monotonic predicate.
    i = bisect.bisect_left(periods, True, key=lambda p: p.end > rng.start)
    j = bisect.bisect_left(periods, True, lo=i, key=lambda p: p.start >= rng.end)

    if i >= j:
        logger.debug("No period of %d overlaps the range", len(periods))
        return 0, 0

    logger.debug("Periods [%d, %d) of %d overlap the range", i, j, len(periods))
    return i, j


def overlapping(periods: Sequence[P], rng: TimePeriod) -> Iterator[P]:
    """Yield the periods that overlap ``rng``, in sequence order.

    Same requirements as ``periods_overlap_range``.
    """
    i, j = periods_overlap_range(periods, rng)
    for index in range(i, j):
        yield periods[index]
