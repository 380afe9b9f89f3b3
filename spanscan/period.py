"""Time period contract and single-period helpers.

A period is anything exposing ``start`` and ``end`` instants on one timeline.
Instants only need to be comparable and subtractable, so ``datetime`` values,
integer Unix seconds and float timestamps all work.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class TimePeriod(Protocol):
    """Structural type for a period with resolved start and end instants.

    The end is not required to follow the start. Open-ended periods must be
    normalized by the caller (e.g. ``datetime.max``) before use.
    """

    @property
    def start(self) -> Any: ...

    @property
    def end(self) -> Any: ...


P = TypeVar("P", bound=TimePeriod)


def in_range(period: TimePeriod, rng: TimePeriod) -> bool:
    """Return True if ``period`` and ``rng`` share a non-empty intersection.

    Periods that only touch at a boundary (one ends where the other starts)
    do not overlap.
    """
    # negation of: period ends at or before rng starts, or starts at or after rng ends
    return period.start < rng.end and period.end > rng.start


def period_duration(period: TimePeriod) -> Any:
    """Signed length of ``period``; negative when the end precedes the start."""
    return period.end - period.start


def truncate_period(period: TimePeriod, rng: TimePeriod) -> tuple[Any, Any]:
    """Clip ``period`` to the bounds of ``rng``.

    Returns the ``(start, end)`` of the intersection. A period that does not
    overlap ``rng`` is returned as its own ``(start, end)``, unchanged.
    """
    start, end = period.start, period.end
    if not in_range(period, rng):
        return start, end
    if start < rng.start:
        start = rng.start
    if end > rng.end:
        end = rng.end
    return start, end
