from .overlap import (
    NotSortedError,
    OverlapError,
    OverlappingError,
    check_overlap,
    ensure_no_overlap,
)
from .period import TimePeriod, in_range, period_duration, truncate_period
from .search import overlapping, periods_overlap_range
from .sortable import PeriodIntervals, SortableIntervals, sort_intervals

__all__ = [
    "TimePeriod",
    "SortableIntervals",
    "PeriodIntervals",
    "OverlapError",
    "NotSortedError",
    "OverlappingError",
    "check_overlap",
    "ensure_no_overlap",
    "periods_overlap_range",
    "overlapping",
    "in_range",
    "period_duration",
    "truncate_period",
    "sort_intervals",
]
