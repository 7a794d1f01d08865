from .core import (
    begins_after,
    begins_before,
    contains,
    difference,
    duration,
    ends_after,
    ends_before,
    intersection,
    is_within,
    overlap_duration,
    overlaps,
    union,
)
from .errors import (
    CalperiodError,
    EmptyRange,
    IncompatibleIntervalKinds,
    InvalidFormat,
    InvalidMonthFormat,
    InvalidMonthIndex,
    InvalidPeriod,
    InvalidRangeFormat,
    InvalidWeekday,
    InvalidWeekFormat,
    InvalidWeekIndex,
    MissingPeriodField,
    TimezoneResolutionError,
    UnsupportedStepSize,
)
from .interval import Interval, compare
from .literals import parse_month, parse_range, parse_timestamp, parse_week
from .month import Month, MonthRange
from .overlay import Overlay, overlay
from .period import Period, as_interval, derive_interval, periodic
from .ranges import DateRange
from .week import Week, WeekRange
from .zones import localize, wall_clock_span

__all__ = [
    "Interval",
    "Period",
    "Month",
    "MonthRange",
    "Week",
    "WeekRange",
    "DateRange",
    "Overlay",
    "as_interval",
    "derive_interval",
    "periodic",
    "compare",
    "overlaps",
    "contains",
    "is_within",
    "difference",
    "intersection",
    "union",
    "begins_before",
    "begins_after",
    "ends_before",
    "ends_after",
    "duration",
    "overlap_duration",
    "overlay",
    "parse_month",
    "parse_week",
    "parse_range",
    "parse_timestamp",
    "localize",
    "wall_clock_span",
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
