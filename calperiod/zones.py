"""Wall-clock handling in IANA timezones.

Intervals are naive wall-clock spans. This module turns aware datetimes into
such spans for a base timezone and attaches zones to naive wall-clock times,
refusing times that do not exist in the zone.
"""

import logging
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from dateutil import tz as dateutil_tz

from calperiod.errors import TimezoneResolutionError
from calperiod.interval import Interval
from calperiod.util import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)


def _require_aware(value: datetime, name: str) -> None:
    if value.tzinfo is None:
        raise TypeError(
            f"{name} must be a timezone-aware datetime.\n"
            f"Got naive datetime: {value!r}\n"
            f"Hint: Attach the zone the time was recorded in:\n"
            f"  localize(dt, tz={DEFAULT_TIMEZONE!r})"
        )


def now(tz: str = DEFAULT_TIMEZONE) -> datetime:
    """Current time in ``tz``, truncated to whole seconds."""
    return datetime.now(ZoneInfo(tz)).replace(microsecond=0)


def localize(naive: datetime, tz: str = DEFAULT_TIMEZONE) -> datetime:
    """Interpret a naive wall-clock time in ``tz``.

    Ambiguous times (the repeated hour when clocks go back) resolve to their
    first occurrence.

    Raises:
        TimezoneResolutionError: If the wall time falls into a DST gap
    """
    if naive.tzinfo is not None:
        raise TypeError(f"localize() expects a naive datetime, got {naive!r}")

    aware = naive.replace(tzinfo=ZoneInfo(tz), fold=0)
    if not dateutil_tz.datetime_exists(aware):
        raise TimezoneResolutionError(tz, naive, "wall")
    if dateutil_tz.datetime_ambiguous(aware):
        logger.debug(
            "%s is ambiguous in %s, using first occurrence", naive.isoformat(), tz
        )
    return aware


def to_zone(aware: datetime, tz: str = DEFAULT_TIMEZONE) -> datetime:
    _require_aware(aware, "to_zone() argument")
    return aware.astimezone(ZoneInfo(tz))


def _dst(value: datetime) -> timedelta:
    return value.dst() or timedelta()


def wall_clock_span(
    start: datetime, end: datetime, tz: str = DEFAULT_TIMEZONE
) -> Interval:
    """Interval between two aware datetimes, as wall time in ``tz``.

    When the span crosses a daylight saving switch the wall-clock end is
    moved by the DST offset, so the interval keeps the real elapsed time:
    a night shift from 22:00 to 06:00 across the spring-forward switch lasts
    seven hours, not eight.
    """
    _require_aware(start, "start")
    _require_aware(end, "end")

    local_start = to_zone(start, tz)
    local_end = to_zone(end, tz)

    start_dst = _dst(local_start)
    end_dst = _dst(local_end)
    if start_dst == end_dst:
        shift = timedelta()
    elif not start_dst:
        shift = -end_dst
    else:
        shift = start_dst

    return Interval(
        start=local_start.replace(tzinfo=None),
        end=local_end.replace(tzinfo=None) + shift,
    )
