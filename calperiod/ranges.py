"""Ranges of days, months and weeks.

DateRange is an inclusive run of days. PeriodRange is the shared base of
MonthRange and WeekRange: a start element, a size and a direction,
enumerated lazily by shifting the start one step at a time.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from typing import (
    Any,
    ClassVar,
    Generic,
    Literal,
    Protocol,
    Self,
    TypeVar,
    overload,
    override,
)

from calperiod.errors import EmptyRange, UnsupportedStepSize
from calperiod.interval import Interval

Direction = Literal["forward", "backward"]

_DIRECTIONS: tuple[Direction, ...] = ("forward", "backward")


@dataclass(frozen=True)
class DateRange:
    """Days from ``first`` to ``last``, both inclusive, stepping by ``step``.

    A range whose ``last`` lies before ``first`` (for a positive step) is
    empty. Only ranges with a step of 1 are periods.
    """

    first: date
    last: date
    step: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.step, int) or self.step == 0:
            raise ValueError(f"DateRange step must be a non-zero integer, got {self.step!r}")

    def __len__(self) -> int:
        days = (self.last - self.first).days
        if (days < 0 and self.step > 0) or (days > 0 and self.step < 0):
            return 0
        return days // self.step + 1

    def __iter__(self) -> Iterator[date]:
        current = self.first
        for _ in range(len(self)):
            yield current
            current += timedelta(days=self.step)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date) or not len(self):
            return False
        offset = (day - self.first).days
        return offset % self.step == 0 and 0 <= offset // self.step < len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def to_interval(self) -> Interval:
        if self.step != 1:
            raise UnsupportedStepSize(self.step)
        if self.is_empty():
            raise EmptyRange(self)
        return Interval.from_dates(self.first, self.last)

    def __str__(self) -> str:
        return f"{self.first.isoformat()}/{self.last.isoformat()}"


class Steppable(Protocol):
    def shift(self, amount: int) -> Self: ...

    def diff(self, other: Any) -> int: ...

    @property
    def first_day(self) -> date: ...

    @property
    def last_day(self) -> date: ...


E = TypeVar("E", bound=Steppable)


@dataclass(frozen=True)
class PeriodRange(Generic[E]):
    """A run of ``size`` consecutive periods starting at ``start``.

    ``forward`` ranges step into the future, ``backward`` ranges into the
    past. ``size == 0`` is an empty range.
    """

    start: E
    size: int
    direction: Direction = "forward"

    element_type: ClassVar[type]

    def __post_init__(self) -> None:
        if not isinstance(self.start, self.element_type):
            raise TypeError(
                f"{type(self).__name__} start must be a "
                f"{self.element_type.__name__}, got {self.start!r}"
            )
        if self.direction not in _DIRECTIONS:
            raise ValueError(f"Invalid direction: {self.direction!r}")
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 0:
            raise ValueError(f"Invalid size: {self.size!r}")

    @classmethod
    def new(cls, start: E, stop: "E | int", direction: Direction | None = None) -> Self:
        """Create a range from ``start`` to ``stop`` or of size ``stop``.

        Without a direction, two endpoints span ``|diff| + 1`` elements and
        the direction follows the order of the endpoints, while a size builds
        a forward range. With a direction, an end lying the other way yields
        an empty range.
        """
        if direction is not None and direction not in _DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction!r}")

        if isinstance(stop, cls.element_type):
            steps = start.diff(stop)
            if direction is None:
                direction = "backward" if steps < 0 else "forward"
                return cls(start, abs(steps) + 1, direction)
            if direction == "backward":
                steps = -steps
            return cls(start, max(steps + 1, 0), direction)

        return cls(start, stop, direction or "forward")  # type: ignore[arg-type]

    @classmethod
    def forward(cls, start: E, stop: "E | int") -> Self:
        return cls.new(start, stop, "forward")

    @classmethod
    def backward(cls, start: E, stop: "E | int") -> Self:
        return cls.new(start, stop, "backward")

    @property
    def _step(self) -> int:
        return 1 if self.direction == "forward" else -1

    @property
    def earliest(self) -> E | None:
        """Earliest element, None for empty ranges."""
        if self.size == 0:
            return None
        if self.direction == "forward":
            return self.start
        return self.start.shift(-(self.size - 1))

    @property
    def latest(self) -> E | None:
        """Latest element, None for empty ranges."""
        if self.size == 0:
            return None
        if self.direction == "backward":
            return self.start
        return self.start.shift(self.size - 1)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[E]:
        current = self.start
        for _ in range(self.size):
            yield current
            current = current.shift(self._step)

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> list[E]: ...

    def __getitem__(self, index: int | slice) -> E | list[E]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self.size))]
        if index < 0:
            index += self.size
        if not 0 <= index < self.size:
            raise IndexError(f"{type(self).__name__} index out of range: {index}")
        return self.start.shift(index * self._step)

    def __contains__(self, item: object) -> bool:
        if self.size == 0 or not isinstance(item, self.element_type):
            return False
        return self.earliest <= item <= self.latest  # type: ignore[operator]

    def to_date_range(self) -> DateRange:
        """Inclusive DateRange from the earliest to the latest element.

        The result always steps by one day; for an empty range it is an empty
        DateRange anchored at the first day of ``start``.
        """
        if self.size == 0:
            first = self.start.first_day
            return DateRange(first, first - timedelta(days=1))
        return DateRange(self.earliest.first_day, self.latest.last_day)  # type: ignore[union-attr]

    def to_interval(self) -> Interval:
        return self.to_date_range().to_interval()

    @override
    def __str__(self) -> str:
        if self.size == 0:
            return f"{type(self).__name__}(empty from {self.start})"
        return f"{self.start}/{self.start.shift((self.size - 1) * self._step)}"
