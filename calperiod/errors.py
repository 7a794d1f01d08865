"""Exception hierarchy for calperiod.

Every error derives from CalperiodError and additionally from the built-in
exception callers would expect (ValueError for bad values, TypeError for
incomparable intervals, KeyError for missing fields).
"""

from datetime import datetime
from typing import Any


class CalperiodError(Exception):
    """Base exception for all calperiod errors."""


# ---- Invariant violations on construction / conversion ----
class InvalidPeriod(CalperiodError, ValueError):
    """A period value violates its own invariants."""


class InvalidMonthIndex(InvalidPeriod):
    """Month outside 1..12."""

    def __init__(self, month: Any):
        self.month = month
        super().__init__(
            f"Month must be an integer between 1 and 12, but was {month!r}"
        )


class InvalidWeekIndex(InvalidPeriod):
    """Week outside 1..53."""

    def __init__(self, week: Any):
        self.week = week
        super().__init__(
            f"Week must be an integer between 1 and 53, but was {week!r}"
        )


class InvalidWeekday(InvalidPeriod):
    def __init__(self, weekday: Any):
        self.weekday = weekday
        super().__init__(
            f"Weekday must be an integer of range 1..7 or a valid weekday name, "
            f"but was {weekday!r}"
        )


class UnsupportedStepSize(InvalidPeriod):
    """A DateRange with a step other than 1 cannot become one interval."""

    def __init__(self, step: Any):
        self.step = step
        super().__init__(
            f"Only date ranges with a step size of 1 can be converted to an "
            f"interval, got step={step!r}.\n"
            f"Hint: convert the range to a list of dates first if the step "
            f"matters: list(date_range)"
        )


class EmptyRange(InvalidPeriod):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Empty range given: {value!r}\n"
            f"An empty range covers no time and has no interval."
        )


# ---- Malformed literals ----
class InvalidFormat(CalperiodError, ValueError):
    """A textual literal could not be parsed."""

    def __init__(self, text: Any, expected: str):
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid format: {text!r}\nExpected: {expected}")


class InvalidMonthFormat(InvalidFormat):
    def __init__(self, text: Any):
        super().__init__(text, "YYYY-MM (e.g. '2019-07')")


class InvalidWeekFormat(InvalidFormat):
    def __init__(self, text: Any):
        super().__init__(text, "YYYY-Www or YYYY-Www-D (e.g. '2018-W05', '2018-W05-1')")


class InvalidRangeFormat(InvalidFormat):
    def __init__(self, text: Any):
        super().__init__(
            text,
            "<left>/<right> with both sides dates (YYYY-MM-DD), weeks (YYYY-Www), "
            "months (YYYY-MM) or timestamps (YYYY-MM-DDTHH:MM:SS)",
        )


# ---- Comparison ----
class IncompatibleIntervalKinds(CalperiodError, TypeError):
    """Two intervals with different open/closed conventions were compared."""

    def __init__(self, left: Any, right: Any):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare intervals with different open/closed conventions.\n"
            f"Got: {left!r}\n"
            f"     {right!r}\n"
            f"Hint: calperiod only creates left-closed/right-open intervals; "
            f"rebuild both with Interval.between()"
        )


# ---- Derived periods ----
class MissingPeriodField(CalperiodError, KeyError):
    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(
            f"{type(value).__name__} has no field {field!r} to build an interval from"
        )

    def __str__(self) -> str:
        return str(self.args[0])


# ---- Timezones ----
class TimezoneResolutionError(CalperiodError):
    """A wall-clock time could not be resolved in a zone."""

    def __init__(self, zone: str, timestamp: datetime, mode: str = "wall"):
        self.zone = zone
        self.timestamp = timestamp
        self.mode = mode
        super().__init__(
            f"Could not resolve {timestamp.isoformat()} ({mode} time) in "
            f"timezone {zone!r}.\n"
            f"The local time does not exist, most likely because it falls into "
            f"a daylight saving time gap."
        )


__all__ = [
    "CalperiodError",
    "InvalidPeriod",
    "InvalidMonthIndex",
    "InvalidWeekIndex",
    "InvalidWeekday",
    "UnsupportedStepSize",
    "EmptyRange",
    "InvalidFormat",
    "InvalidMonthFormat",
    "InvalidWeekFormat",
    "InvalidRangeFormat",
    "IncompatibleIntervalKinds",
    "MissingPeriodField",
    "TimezoneResolutionError",
]
