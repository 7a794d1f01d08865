"""Calendar months."""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from calperiod.errors import InvalidMonthFormat, InvalidMonthIndex
from calperiod.interval import Interval
from calperiod.ranges import DateRange, PeriodRange

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")


@dataclass(frozen=True, order=True)
class Month:
    """A calendar month, ordered by (year, month)."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.month, bool)
            or not isinstance(self.month, int)
            or not 1 <= self.month <= 12
        ):
            raise InvalidMonthIndex(self.month)
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise TypeError(f"Month year must be an integer, got {self.year!r}")

    @classmethod
    def new(cls, year: int, month: int) -> "Month":
        return cls(year, month)

    @classmethod
    def from_day(cls, day: date | datetime) -> "Month":
        """Month containing ``day``. Aware datetimes use their own wall clock."""
        return cls(day.year, day.month)

    @classmethod
    def current(cls, tz: str | None = None) -> "Month":
        """The current month, in local time unless ``tz`` names a zone."""
        now = datetime.now(ZoneInfo(tz)) if tz else datetime.now()
        return cls.from_day(now)

    @classmethod
    def utc_current(cls) -> "Month":
        return cls.current("UTC")

    @classmethod
    def last(cls, tz: str | None = None) -> "Month":
        """The month before the current one."""
        return cls.current(tz).previous()

    @classmethod
    def utc_last(cls) -> "Month":
        return cls.last("UTC")

    @classmethod
    def upcoming(cls, tz: str | None = None) -> "Month":
        """The month after the current one."""
        return cls.current(tz).next()

    @classmethod
    def utc_upcoming(cls) -> "Month":
        return cls.upcoming("UTC")

    @classmethod
    def previous_of(cls, day: date | datetime) -> "Month":
        return cls.from_day(day).previous()

    @classmethod
    def next_of(cls, day: date | datetime) -> "Month":
        return cls.from_day(day).next()

    @classmethod
    def parse(cls, text: str) -> "Month":
        """Parse ``YYYY-MM`` (or ``YYYY-M``).

        Raises:
            InvalidMonthFormat: If the text is not a month literal
            InvalidMonthIndex: If the month is outside 1..12
        """
        match = _MONTH_PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidMonthFormat(text)
        return cls(int(match.group(1)), int(match.group(2)))

    def add(self, months: int) -> "Month":
        """Month ``months`` after this one (before, if negative)."""
        return Month.from_day(self.first_day + relativedelta(months=months))

    shift = add

    def previous(self) -> "Month":
        return self.add(-1)

    def next(self) -> "Month":
        return self.add(1)

    def diff(self, other: "Month") -> int:
        """Number of months to add to this month to arrive at ``other``."""
        return 12 * (other.year - self.year) + other.month - self.month

    def compare(self, other: "Month | date") -> int:
        """-1, 0 or 1; a date is compared through the month containing it."""
        if isinstance(other, date):
            other = Month.from_day(other)
        if self == other:
            return 0
        return -1 if self < other else 1

    @property
    def name(self) -> str:
        return calendar.month_name[self.month]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return self.first_day + relativedelta(months=1, days=-1)

    def to_dates(self) -> tuple[date, date]:
        return self.first_day, self.last_day

    def to_date_range(self) -> DateRange:
        return DateRange(self.first_day, self.last_day)

    def to_interval(self) -> Interval:
        return Interval.from_dates(self.first_day, self.last_day)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


class MonthRange(PeriodRange[Month]):
    """Consecutive months, e.g. ``MonthRange.forward(Month(2024, 1), Month(2024, 12))``."""

    element_type = Month
