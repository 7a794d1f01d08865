"""Tests for the period capability: as_interval, derive_interval and @periodic."""

from dataclasses import dataclass
from datetime import date, datetime

import pytest

from calperiod import (
    DateRange,
    EmptyRange,
    Interval,
    MissingPeriodField,
    Month,
    MonthRange,
    Period,
    UnsupportedStepSize,
    Week,
    as_interval,
    derive_interval,
    periodic,
)


def test_date_covers_one_day() -> None:
    assert as_interval(date(2025, 1, 1)) == Interval(
        start=datetime(2025, 1, 1), end=datetime(2025, 1, 2)
    )


def test_interval_converts_to_itself() -> None:
    interval = Interval.between(datetime(2025, 1, 1, 8), datetime(2025, 1, 1, 9))

    assert as_interval(interval) is interval


def test_month_and_week() -> None:
    assert as_interval(Month(2025, 2)) == Interval.between(
        date(2025, 2, 1), date(2025, 3, 1)
    )
    assert as_interval(Week(2018, 3)) == Interval.between(
        date(2018, 1, 15), date(2018, 1, 22)
    )


def test_date_range_with_unit_step() -> None:
    assert as_interval(DateRange(date(2025, 1, 1), date(2025, 1, 31))) == (
        Interval.between(date(2025, 1, 1), date(2025, 2, 1))
    )


def test_date_range_with_other_step_is_rejected() -> None:
    with pytest.raises(UnsupportedStepSize) as excinfo:
        as_interval(DateRange(date(2025, 1, 1), date(2025, 1, 31), 2))

    assert excinfo.value.step == 2
    assert isinstance(excinfo.value, ValueError)


def test_empty_date_range_is_rejected() -> None:
    with pytest.raises(EmptyRange, match="Empty range"):
        as_interval(DateRange(date(2025, 1, 1), date(2024, 12, 31)))


def test_month_range() -> None:
    months = MonthRange.forward(Month(2024, 1), Month(2077, 12))

    assert as_interval(months) == Interval.between(date(2024, 1, 1), date(2078, 1, 1))


def test_datetime_is_not_a_period() -> None:
    with pytest.raises(TypeError, match="instant"):
        as_interval(datetime(2025, 1, 1, 8))


def test_unknown_type_is_not_a_period() -> None:
    with pytest.raises(TypeError, match="is not a period"):
        as_interval("2025-01")


def test_protocol_is_runtime_checkable() -> None:
    assert isinstance(Month(2025, 1), Period)
    assert isinstance(Interval.between(date(2025, 1, 1), date(2025, 1, 2)), Period)
    assert not isinstance(date(2025, 1, 1), Period)


def test_registering_foreign_types() -> None:
    class Quarter:
        def __init__(self, year: int, quarter: int):
            self.year = year
            self.quarter = quarter

    @as_interval.register
    def _(period: Quarter) -> Interval:
        first = Month(period.year, 3 * period.quarter - 2)
        return Interval.between(first.first_day, first.add(3).first_day)

    assert as_interval(Quarter(2025, 1)) == Interval.between(
        date(2025, 1, 1), date(2025, 4, 1)
    )


class TestDeriveInterval:
    def test_default_fields(self) -> None:
        @dataclass
        class Absence:
            start: date
            end: date

        interval = derive_interval(Absence(date(2024, 1, 1), date(2024, 1, 31)))

        assert interval.start == datetime(2024, 1, 1)
        assert interval.end == datetime(2024, 2, 1)

    def test_custom_fields(self) -> None:
        @dataclass
        class Booking:
            from_date: date
            to_date: date

        interval = derive_interval(
            Booking(date(2024, 4, 1), date(2024, 4, 30)),
            start="from_date",
            end="to_date",
        )

        assert interval == Interval.between(date(2024, 4, 1), date(2024, 5, 1))

    def test_timestamps_are_end_exclusive(self) -> None:
        record = {
            "start": datetime(2024, 1, 1, 8),
            "end": datetime(2024, 1, 1, 16),
        }

        assert derive_interval(record) == Interval.between(
            datetime(2024, 1, 1, 8), datetime(2024, 1, 1, 16)
        )

    def test_interval_field_is_returned_as_is(self) -> None:
        @dataclass
        class Shift:
            interval: Interval
            other_field: str

        interval = Interval.between(date(2024, 5, 1), date(2024, 6, 1))

        assert derive_interval(Shift(interval, "test"), interval="interval") is interval

    def test_missing_default_field(self) -> None:
        @dataclass
        class Other:
            other_field: str

        with pytest.raises(MissingPeriodField, match="'start'"):
            derive_interval(Other("value"))

    def test_missing_custom_field_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            derive_interval({"start": date(2024, 1, 1)}, end="custom_end")

    def test_missing_interval_field(self) -> None:
        @dataclass
        class Other:
            other_field: str

        with pytest.raises(MissingPeriodField) as excinfo:
            derive_interval(Other("value"), interval="missing_key")

        assert excinfo.value.field == "missing_key"
        assert "Other has no field 'missing_key'" in str(excinfo.value)


class TestPeriodic:
    def test_decorator_without_arguments(self) -> None:
        @periodic
        @dataclass
        class Absence:
            start: date
            end: date

        absence = Absence(date(2024, 1, 1), date(2024, 1, 31))

        assert isinstance(absence, Period)
        assert as_interval(absence) == Interval.between(
            date(2024, 1, 1), date(2024, 2, 1)
        )

    def test_decorator_with_fields(self) -> None:
        @periodic(start="from_date", end="to_date")
        @dataclass
        class Booking:
            from_date: date
            to_date: date

        booking = Booking(date(2024, 4, 1), date(2024, 4, 30))

        assert booking.to_interval() == Interval.between(
            date(2024, 4, 1), date(2024, 5, 1)
        )

    def test_decorator_with_interval_field(self) -> None:
        @periodic(interval="month")
        @dataclass
        class Payroll:
            month: Month

        assert as_interval(Payroll(Month(2024, 2))) == as_interval(Month(2024, 2))

    def test_missing_field_raises_on_conversion(self) -> None:
        @periodic(start="custom_start")
        @dataclass
        class Broken:
            other_field: str

        with pytest.raises(MissingPeriodField):
            as_interval(Broken("value"))
