"""The period capability.

A period is anything that can produce a canonical Interval. Concrete period
types implement ``to_interval()``; types that cannot carry the method (such
as ``datetime.date``) are adapted through ``as_interval.register``. The
algebra only ever talks to periods through ``as_interval``.
"""

from collections.abc import Mapping
from datetime import date, datetime
from functools import singledispatch
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from calperiod.errors import MissingPeriodField
from calperiod.interval import Interval


@runtime_checkable
class Period(Protocol):
    def to_interval(self) -> Interval: ...


@singledispatch
def as_interval(period: Any) -> Interval:
    """Convert a period to its canonical interval.

    Conversion errors (empty ranges, bad step sizes, ...) propagate unchanged.

    Raises:
        TypeError: If the value is not a period
    """
    if isinstance(period, Period):
        return period.to_interval()
    raise TypeError(
        f"{type(period).__name__!r} is not a period: {period!r}\n"
        f"Periods are Interval, Month, Week, date, DateRange, MonthRange, "
        f"WeekRange, Overlay or any object with a to_interval() method.\n"
        f"Hint: Register other types with @as_interval.register"
    )


@as_interval.register
def _(period: date) -> Interval:
    return Interval.from_dates(period, period)


@as_interval.register
def _(period: datetime) -> Interval:
    raise TypeError(
        f"A datetime is an instant, not a period: {period!r}\n"
        f"Hint: Use its date, or build an Interval.between(start, end)"
    )


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        if name not in value:
            raise MissingPeriodField(name, value)
        return value[name]
    try:
        return getattr(value, name)
    except AttributeError:
        raise MissingPeriodField(name, value) from None


def derive_interval(
    value: Any,
    start: str = "start",
    end: str = "end",
    interval: str | None = None,
) -> Interval:
    """Build the interval of an arbitrary record from two named fields.

    With ``interval`` set, that single field must hold a period and its
    interval is returned as-is. Otherwise ``start`` and ``end`` name the
    bounds: two dates describe whole days (end day inclusive), anything
    else is taken as ``[start, end)``.

    Fields are read as attributes, or as keys when ``value`` is a mapping.

    Raises:
        MissingPeriodField: If a named field does not exist
    """
    if interval is not None:
        return as_interval(_field(value, interval))

    first = _field(value, start)
    last = _field(value, end)
    if _is_day(first) and _is_day(last):
        return Interval.from_dates(first, last)
    return Interval.between(first, last)


def _is_day(value: Any) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


T = TypeVar("T", bound=type)


def periodic(
    cls: T | None = None,
    *,
    start: str = "start",
    end: str = "end",
    interval: str | None = None,
) -> T | Callable[[T], T]:
    """Class decorator adding a ``to_interval()`` method built on derive_interval.

    Example:
        >>> @periodic(start="from_date", end="to_date")
        ... @dataclass
        ... class Booking:
        ...     from_date: date
        ...     to_date: date
    """

    def decorate(klass: T) -> T:
        def to_interval(self: Any) -> Interval:
            return derive_interval(self, start=start, end=end, interval=interval)

        klass.to_interval = to_interval  # type: ignore[attr-defined]
        return klass

    if cls is None:
        return decorate
    return decorate(cls)
