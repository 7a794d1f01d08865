from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Literal

from calperiod.errors import IncompatibleIntervalKinds
from calperiod.util import DEFAULT_TIMEZONE


def _as_timestamp(value: Any, edge: Literal["start", "end"]) -> datetime:
    """Coerce an interval bound to a naive datetime truncated to seconds.

    Accepts:
    - naive datetime: microseconds are dropped
    - date: midnight of that day

    Raises:
        TypeError: If the bound is aware or of an unsupported type
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            raise TypeError(
                f"Interval {edge} must be a naive (wall clock) datetime.\n"
                f"Got aware datetime: {value!r}\n"
                f"Hint: Convert aware datetimes with a base timezone first:\n"
                f"  from calperiod.zones import wall_clock_span\n"
                f"  wall_clock_span(start, end, tz={DEFAULT_TIMEZONE!r})"
            )
        return value.replace(microsecond=0)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise TypeError(
        f"Interval {edge} must be a datetime or date.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Canonical time range every period converts to.

    Bounds are naive wall-clock datetimes at second resolution. Intervals
    built by calperiod are always left-closed and right-open: ``start`` is
    covered, ``end`` is not. ``start == end`` is an empty interval.
    """

    start: datetime
    end: datetime
    left_open: bool = False
    right_open: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _as_timestamp(self.start, "start"))
        object.__setattr__(self, "end", _as_timestamp(self.end, "end"))
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start.isoformat()}) must be <= "
                f"end ({self.end.isoformat()})"
            )

    @classmethod
    def between(cls, start: datetime | date, end: datetime | date) -> "Interval":
        """Build ``[start, end)``. Dates stand for their midnight."""
        return cls(start=start, end=end)

    @classmethod
    def from_dates(cls, first: date, last: date) -> "Interval":
        """Interval covering the days ``first`` through ``last`` inclusively."""
        return cls(start=first, end=last + timedelta(days=1))

    @classmethod
    def on(cls, day: date, start: time, end: time) -> "Interval":
        """Interval for a shift on ``day``.

        An ``end`` that is not after ``start`` belongs to the following day,
        so ``Interval.on(d, time(22), time(6))`` is a night shift.
        """
        begin = datetime.combine(day, start)
        if start < end:
            finish = datetime.combine(day, end)
        else:
            finish = datetime.combine(day + timedelta(days=1), end)
        return cls(start=begin, end=finish)

    def to_interval(self) -> "Interval":
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        """Last day covered by the interval."""
        if self.end.time() == time.min and self.end > self.start:
            return self.end.date() - timedelta(days=1)
        return self.end.date()

    def __contains__(self, moment: datetime) -> bool:
        moment = _as_timestamp(moment, "start")
        after_start = moment > self.start if self.left_open else moment >= self.start
        before_end = moment < self.end if self.right_open else moment <= self.end
        return after_start and before_end

    def __lt__(self, other: "Interval") -> bool:
        return compare(self, other) < 0

    def __le__(self, other: "Interval") -> bool:
        return compare(self, other) <= 0

    def __gt__(self, other: "Interval") -> bool:
        return compare(self, other) > 0

    def __ge__(self, other: "Interval") -> bool:
        return compare(self, other) >= 0

    def __str__(self) -> str:
        """Human-friendly string showing the range with minute precision."""
        return f"{self.start:%Y-%m-%d %H:%M} - {self.end:%Y-%m-%d %H:%M}"

    def to_iso8601(self) -> str:
        return f"{self.start.isoformat()}/{self.end.isoformat()}"


def same_kind(a: Interval, b: Interval) -> bool:
    return a.left_open == b.left_open and a.right_open == b.right_open


def check_same_kind(a: Interval, b: Interval) -> None:
    if not same_kind(a, b):
        raise IncompatibleIntervalKinds(a, b)


def compare(a: Interval, b: Interval) -> int:
    """Order two intervals by start, then end.

    Returns -1, 0 or 1. Intervals with different open/closed conventions have
    no well-defined order and raise IncompatibleIntervalKinds.
    """
    if not isinstance(a, Interval) or not isinstance(b, Interval):
        raise TypeError(
            f"compare() expects two Interval objects.\n"
            f"Got: {type(a).__name__}, {type(b).__name__}\n"
            f"Hint: Convert periods first: compare(as_interval(a), as_interval(b))"
        )
    check_same_kind(a, b)
    left = (a.start, a.end)
    right = (b.start, b.end)
    if left == right:
        return 0
    return -1 if left < right else 1
