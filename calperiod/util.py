"""Utility constants and defaults for calperiod.

Time unit constants represent durations in seconds.
DEFAULT_TIMEZONE is the base zone wall-clock times are recorded in when a
caller does not pass ``tz=`` explicitly.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

SCALES = {
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
}

DEFAULT_TIMEZONE = "Europe/Berlin"
