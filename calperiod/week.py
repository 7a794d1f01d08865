"""ISO-8601 weeks.

Week 1 is the week containing the first Thursday of the year. Days are
computed with ISO triplet arithmetic, so a week 53 in a year that only has 52
weeks rolls over into week 1 of the following year.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from calperiod.errors import InvalidWeekday, InvalidWeekFormat, InvalidWeekIndex
from calperiod.interval import Interval
from calperiod.ranges import DateRange, PeriodRange

_WEEK_PATTERN = re.compile(r"^(\d{4})-W(\d{1,2})$")

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass(frozen=True, order=True)
class Week:
    year: int
    week: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.week, bool)
            or not isinstance(self.week, int)
            or not 1 <= self.week <= 53
        ):
            raise InvalidWeekIndex(self.week)
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise TypeError(f"Week year must be an integer, got {self.year!r}")

    @classmethod
    def new(cls, year: int, week: int) -> "Week":
        return cls(year, week)

    @classmethod
    def from_day(cls, day: date | datetime) -> "Week":
        """ISO week containing ``day``."""
        year, week, _ = day.isocalendar()
        return cls(year, week)

    @classmethod
    def current(cls, tz: str | None = None) -> "Week":
        now = datetime.now(ZoneInfo(tz)) if tz else datetime.now()
        return cls.from_day(now)

    @classmethod
    def utc_current(cls) -> "Week":
        return cls.current("UTC")

    @classmethod
    def last(cls, tz: str | None = None) -> "Week":
        """The week before the current one."""
        return cls.current(tz).previous()

    @classmethod
    def utc_last(cls) -> "Week":
        return cls.last("UTC")

    @classmethod
    def upcoming(cls, tz: str | None = None) -> "Week":
        """The week after the current one."""
        return cls.current(tz).next()

    @classmethod
    def utc_upcoming(cls) -> "Week":
        return cls.upcoming("UTC")

    @classmethod
    def previous_of(cls, day: date | datetime) -> "Week":
        return cls.from_day(day).previous()

    @classmethod
    def next_of(cls, day: date | datetime) -> "Week":
        return cls.from_day(day).next()

    @classmethod
    def parse(cls, text: str) -> "Week":
        """Parse ``YYYY-Www`` (or ``YYYY-Ww``).

        Raises:
            InvalidWeekFormat: If the text is not a week literal
            InvalidWeekIndex: If the week is outside 1..53
        """
        match = _WEEK_PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidWeekFormat(text)
        return cls(int(match.group(1)), int(match.group(2)))

    def weekday(self, day: int | str) -> date:
        """Date of a weekday in this week: 1 (Monday) .. 7 (Sunday) or a name."""
        if isinstance(day, str) and day.lower() in WEEKDAYS:
            day = WEEKDAYS.index(day.lower()) + 1
        if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 7:
            raise InvalidWeekday(day)
        monday = date.fromisocalendar(self.year, 1, 1)
        return monday + timedelta(weeks=self.week - 1, days=day - 1)

    @property
    def first_day(self) -> date:
        return self.weekday(1)

    @property
    def last_day(self) -> date:
        return self.weekday(7)

    def shift(self, weeks: int) -> "Week":
        """Week ``weeks`` after this one (before, if negative)."""
        return Week.from_day(self.first_day + timedelta(weeks=weeks))

    def previous(self) -> "Week":
        return self.shift(-1)

    def next(self) -> "Week":
        return self.shift(1)

    def diff(self, other: "Week") -> int:
        """Number of weeks to shift this week by to arrive at ``other``."""
        return (other.first_day - self.first_day).days // 7

    def before(self, other: "Week") -> bool:
        return self < other

    def after(self, other: "Week") -> bool:
        return self > other

    def compare(self, other: "Week") -> int:
        if self == other:
            return 0
        return -1 if self < other else 1

    def to_dates(self) -> tuple[date, date]:
        return self.first_day, self.last_day

    def to_date_range(self) -> DateRange:
        return DateRange(self.first_day, self.last_day)

    def to_interval(self) -> Interval:
        return Interval.from_dates(self.first_day, self.last_day)

    def __str__(self) -> str:
        return f"{self.year}-W{self.week:02d}"


class WeekRange(PeriodRange[Week]):
    element_type = Week
