"""Interval algebra over periods.

Every operation accepts any period (Interval, Month, Week, date, ranges,
Overlay, ...) and works on its canonical interval. Results are always
canonical Interval objects. A list or tuple argument stands for a collection
of periods; anything else is a single period. Zero-length intervals never
appear in a result, and intervals with different open/closed conventions
raise IncompatibleIntervalKinds.
"""

from collections.abc import Sequence
from dataclasses import replace
from datetime import timedelta
from functools import cmp_to_key, reduce
from typing import Any, Literal, overload

from calperiod.interval import Interval, check_same_kind, compare
from calperiod.period import as_interval
from calperiod.util import SCALES

Unit = Literal["seconds", "minutes", "hours", "days", "weeks"]


def _is_collection(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _pair(a: Any, b: Any) -> tuple[Interval, Interval]:
    left, right = as_interval(a), as_interval(b)
    check_same_kind(left, right)
    return left, right


def overlaps(a: Any, b: Any) -> bool:
    """True if both periods share at least one instant."""
    left, right = _pair(a, b)
    return left.start < right.end and right.start < left.end


def contains(outer: Any, inner: Any) -> bool:
    """True if ``inner`` lies completely within ``outer``."""
    container, candidate = _pair(outer, inner)
    return candidate.start >= container.start and candidate.end <= container.end


def is_within(inner: Any, outer: Any) -> bool:
    return contains(outer, inner)


def _subtract(base: Interval, hole: Interval) -> list[Interval]:
    """Pieces of ``base`` not covered by ``hole``; never yields empty pieces."""
    if hole.is_empty or hole.end <= base.start or hole.start >= base.end:
        return [base]

    pieces: list[Interval] = []
    if base.start < hole.start:
        pieces.append(replace(base, end=hole.start))
    if hole.end < base.end:
        pieces.append(replace(base, start=hole.end))
    return pieces


def difference(base: Any, subtract: Any) -> list[Interval]:
    """Remove ``subtract`` from ``base``.

    For two single periods the result has zero pieces (fully covered), one
    (truncated on one side, or ``base`` unchanged when disjoint) or two (a
    hole strictly inside). With collections, every base period has every
    subtracted period removed in turn and the remaining pieces are
    concatenated in the order of the base periods.

    Example:
        >>> holes = [date(2024, 1, 1), date(2024, 1, 4), date(2024, 1, 7)]
        >>> [str(piece) for piece in difference(Week(2024, 1), holes)]
        ["2024-01-02 00:00 - 2024-01-04 00:00",
         "2024-01-05 00:00 - 2024-01-07 00:00"]
    """
    bases = base if _is_collection(base) else [base]
    holes = (
        [as_interval(s) for s in subtract]
        if _is_collection(subtract)
        else [as_interval(subtract)]
    )

    result: list[Interval] = []
    for period in bases:
        interval = as_interval(period)
        for hole in holes:
            check_same_kind(interval, hole)
        if interval.is_empty:
            continue
        remaining = [interval]
        for hole in holes:
            remaining = [piece for r in remaining for piece in _subtract(r, hole)]
            if not remaining:
                break
        result.extend(remaining)
    return result


@overload
def intersection(a: Sequence[Any]) -> Interval | None: ...


@overload
def intersection(a: Any, b: Any) -> Interval | None: ...


def intersection(a: Any, b: Any = None) -> Interval | None:
    """The span shared by all given periods, or None.

    Derived from difference: ``a - (a - b)``.
    """
    if b is None:
        if not _is_collection(a):
            raise TypeError(
                f"intersection() takes two periods or one list of periods.\n"
                f"Got a single {type(a).__name__}: {a!r}"
            )
        return _intersect_all(a)

    match difference(a, difference(a, b)):
        case []:
            return None
        case [shared]:
            return shared
        case pieces:
            raise AssertionError(f"intersection produced several pieces: {pieces!r}")


def _intersect_all(periods: Sequence[Any]) -> Interval | None:
    if not periods:
        raise ValueError(
            "intersection() requires at least one period.\n"
            "Example: intersection([Month(2025, 1), Week(2025, 5)])"
        )

    acc = as_interval(periods[0])
    for period in periods[1:]:
        shared = intersection(acc, period)
        if shared is None:
            return None
        acc = shared
    return acc


@overload
def union(a: Sequence[Any]) -> list[Interval]: ...


@overload
def union(a: Any, b: Any) -> Interval | tuple[Interval, Interval]: ...


def union(a: Any, b: Any = None) -> Any:
    """Merge periods.

    ``union(a, b)`` returns one merged interval when ``a`` and ``b`` overlap
    or touch, otherwise both intervals unchanged as a pair. ``union([...])``
    returns the sorted, pairwise disjoint list of merged spans.
    """
    if b is None:
        if not _is_collection(a):
            raise TypeError(
                f"union() takes two periods or one list of periods.\n"
                f"Got a single {type(a).__name__}: {a!r}"
            )
        return _union_all(a)

    left, right = _pair(a, b)
    if left.is_empty or right.is_empty:
        return right if left.is_empty else left
    if _touches(left, right):
        return _merge(left, right)
    return left, right


def _touches(a: Interval, b: Interval) -> bool:
    return a.start <= b.end and b.start <= a.end


def _merge(a: Interval, b: Interval) -> Interval:
    return Interval(start=min(a.start, b.start), end=max(a.end, b.end))


def _union_all(periods: Sequence[Any]) -> list[Interval]:
    ordered = [
        interval
        for interval in sorted((as_interval(p) for p in periods), key=cmp_to_key(compare))
        if not interval.is_empty
    ]

    def reducer(merged: list[Interval], nxt: Interval) -> list[Interval]:
        if merged and nxt.start <= merged[-1].end:
            merged[-1] = _merge(merged[-1], nxt)
        else:
            merged.append(nxt)
        return merged

    return reduce(reducer, ordered, [])


def begins_before(a: Any, b: Any) -> bool:
    left, right = _pair(a, b)
    return left.start < right.start


def begins_after(a: Any, b: Any) -> bool:
    left, right = _pair(a, b)
    return left.start > right.start


def ends_before(a: Any, b: Any) -> bool:
    left, right = _pair(a, b)
    return left.end < right.end


def ends_after(a: Any, b: Any) -> bool:
    left, right = _pair(a, b)
    return left.end > right.end


@overload
def duration(period: Any, unit: None = None) -> timedelta: ...


@overload
def duration(period: Any, unit: Unit) -> int: ...


def duration(period: Any, unit: Unit | None = None) -> timedelta | int:
    """Length of a period.

    Without a unit the result is a timedelta; with a unit it is the number of
    whole units, e.g. ``duration(date(2025, 1, 1), "hours") == 24``.
    """
    span = as_interval(period).duration
    if unit is None:
        return span
    if unit not in SCALES:
        raise ValueError(
            f"Unknown duration unit {unit!r}.\n"
            f"Valid units: {', '.join(SCALES)}"
        )
    return int(span.total_seconds()) // SCALES[unit]


def overlap_duration(a: Any, b: Any) -> timedelta:
    """How long ``a`` and ``b`` overlap."""
    rest = sum((piece.duration for piece in difference(a, b)), timedelta())
    return as_interval(a).duration - rest
