"""Overlaying periods into non-overlapping segments.

``overlay()`` splits the timeline covered by a collection of periods into
segments during which a fixed set of the input periods is active. Each
segment is an Overlay, which is a period itself and can be fed back into the
algebra or into another overlay pass.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, NamedTuple

from calperiod.interval import Interval
from calperiod.period import as_interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Overlay:
    """A span of time together with every period covering it.

    ``elements`` are in the order the sweep discovered them, not sorted.
    """

    interval: Interval
    elements: tuple[Any, ...]

    def to_interval(self) -> Interval:
        return self.interval


class _Kind(IntEnum):
    # Ends sort before starts at the same instant: half-open periods that
    # merely touch never overlap.
    END = 0
    START = 1


class _Event(NamedTuple):
    at: datetime
    kind: _Kind
    index: int
    period: Any


def _events(intervals: list[tuple[Interval, Any]]) -> list[_Event]:
    events: list[_Event] = []
    for index, (interval, period) in enumerate(intervals):
        if interval.is_empty:
            continue
        events.append(_Event(interval.start, _Kind.START, index, period))
        events.append(_Event(interval.end, _Kind.END, index, period))
    events.sort(key=lambda event: (event.at, event.kind))
    return events


def overlay(periods: Iterable[Any]) -> list[Overlay]:
    """Decompose periods into chronological, non-overlapping segments.

    Algorithm: Sweep over the start and end events of all periods in time
    order, tracking the set of active periods and the instant it last
    changed. Whenever an event changes a non-empty active set, the segment
    since the last change is closed and tagged with the active set as it
    was before the change.

    Key invariant: for every input period, the durations of the segments
    listing it add up to that period's own duration.

    Example:
        >>> segments = overlay([Week(2025, 1), date(2025, 1, 1)])
        >>> [str(s.interval) for s in segments]
        ["2024-12-30 00:00 - 2025-01-01 00:00",
         "2025-01-01 00:00 - 2025-01-02 00:00",
         "2025-01-02 00:00 - 2025-01-06 00:00"]
    """
    items = list(periods)
    intervals = [(as_interval(period), period) for period in items]

    if not intervals:
        return []
    if len(intervals) == 1:
        interval, period = intervals[0]
        return [Overlay(interval, (period,))]

    segments: list[Overlay] = []
    active: dict[int, Any] = {}
    last_change: datetime | None = None

    for event in _events(intervals):
        if active and last_change is not None and event.at > last_change:
            segments.append(
                Overlay(
                    Interval(start=last_change, end=event.at),
                    tuple(active.values()),
                )
            )

        if event.kind is _Kind.START:
            active[event.index] = event.period
        else:
            del active[event.index]
        last_change = event.at

    logger.debug("Overlaid %d periods into %d segments", len(items), len(segments))
    return segments
