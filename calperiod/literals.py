"""Parsing of period literals.

Supported literals:
- month: ``2019-07``
- ISO week: ``2019-W01``, or ``2019-W01-3`` for a single weekday (1=Monday)
- timestamp: ``2025-01-01T08:00:00`` or ``2025-01-01 08:00:00``, optionally
  with a UTC offset
- range: ``<left>/<right>`` with both sides of the same kind

Day, week and month ranges include their right-hand side; timestamp ranges
exclude it, like every Interval.
"""

import re
from datetime import date, datetime
from typing import Literal

from dateutil.parser import isoparse

from calperiod.errors import InvalidFormat, InvalidRangeFormat, InvalidWeekFormat
from calperiod.interval import Interval
from calperiod.month import Month, MonthRange
from calperiod.ranges import DateRange
from calperiod.util import DEFAULT_TIMEZONE
from calperiod.week import Week, WeekRange
from calperiod.zones import wall_clock_span

Granularity = Literal["day", "week", "month"]

_DATE = r"\d{4}-\d{2}-\d{2}"
_WEEK = r"\d{4}-W\d{1,2}"
_MONTH = r"\d{4}-\d{1,2}"
_TIMESTAMP = _DATE + r"[T ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}(?::?\d{2})?)?"

_WEEKDAY_PATTERN = re.compile(r"^(\d{4}-W\d{2})-(\d)$")


def _pair(kind: str) -> re.Pattern[str]:
    return re.compile(rf"^({kind})/({kind})$")


_DATE_RANGE = _pair(_DATE)
_WEEK_RANGE = _pair(_WEEK)
_MONTH_RANGE = _pair(_MONTH)
_TIMESTAMP_RANGE = _pair(_TIMESTAMP)


def parse_month(text: str) -> Month:
    return Month.parse(text)


def parse_week(text: str) -> Week | date:
    """Parse a week, or a single day when a weekday digit is appended.

    Example:
        >>> parse_week("2018-W05")
        Week(year=2018, week=5)
        >>> parse_week("2018-W05-1")
        datetime.date(2018, 1, 29)
    """
    match = _WEEKDAY_PATTERN.match(text) if isinstance(text, str) else None
    if match is not None:
        return Week.parse(match.group(1)).weekday(int(match.group(2)))
    return Week.parse(text)


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive unless the text carries an offset."""
    if not isinstance(text, str) or not re.fullmatch(_TIMESTAMP, text):
        raise InvalidFormat(text, "YYYY-MM-DDTHH:MM:SS or YYYY-MM-DD HH:MM:SS")
    return isoparse(text)


def parse_range(
    text: str,
    granularity: Granularity | None = None,
    tz: str = DEFAULT_TIMEZONE,
) -> DateRange | WeekRange | MonthRange | Interval:
    """Parse a ``<left>/<right>`` range literal.

    - ``2025-01-01/2025-01-20`` -> DateRange (step 1, empty when reversed)
    - ``2025-W01/2025-W03`` -> WeekRange
    - ``2025-01/2025-03`` -> MonthRange, or WeekRange with ``granularity="week"``
    - ``2025-01-01 08:00:00/2025-01-20T16:30:00`` -> Interval; ``--`` may be
      used instead of ``/``. Timestamps with UTC offsets are converted to
      wall time in ``tz``.

    Raises:
        InvalidRangeFormat: If the text matches none of the forms
    """
    if not isinstance(text, str):
        raise InvalidRangeFormat(text)
    if "/" not in text:
        text = text.replace("--", "/", 1)

    if match := _DATE_RANGE.match(text):
        if granularity not in (None, "day"):
            raise InvalidRangeFormat(text)
        first, last = (date.fromisoformat(side) for side in match.groups())
        return DateRange(first, last)

    if match := _WEEK_RANGE.match(text):
        if granularity not in (None, "week"):
            raise InvalidRangeFormat(text)
        first, last = (Week.parse(side) for side in match.groups())
        return WeekRange.new(first, last)

    if match := _MONTH_RANGE.match(text):
        if granularity == "week":
            first, last = (_week_without_marker(side) for side in match.groups())
            return WeekRange.new(first, last)
        if granularity not in (None, "month"):
            raise InvalidRangeFormat(text)
        first, last = (Month.parse(side) for side in match.groups())
        return MonthRange.new(first, last)

    if match := _TIMESTAMP_RANGE.match(text):
        start, end = (parse_timestamp(side) for side in match.groups())
        if start.tzinfo is None and end.tzinfo is None:
            return Interval.between(start, end)
        if start.tzinfo is not None and end.tzinfo is not None:
            return wall_clock_span(start, end, tz)
        raise InvalidRangeFormat(text)

    raise InvalidRangeFormat(text)


def _week_without_marker(text: str) -> Week:
    year, _, week = text.partition("-")
    try:
        return Week.parse(f"{year}-W{week}")
    except InvalidWeekFormat:
        raise InvalidWeekFormat(text) from None
