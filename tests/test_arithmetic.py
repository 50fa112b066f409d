# tests/test_arithmetic.py

import logging
import math

import pytest

from calhijri.arithmetic import (
    add_days,
    bulk_convert_dates,
    calculate_date_difference,
    get_month_boundaries,
    month_length,
    to_julian_day,
    try_date_difference,
)
from calhijri.convert import gregorian_to_hijri
from calhijri.core.errors import InputOutOfRange, UnsupportedCalendar
from calhijri.core.types import ErrorKind


def test_difference_sign_and_value():
    assert calculate_date_difference((2024, 1, 1), (2024, 6, 15)) == 166
    assert calculate_date_difference((2024, 6, 15), (2024, 1, 1)) == -166
    assert calculate_date_difference((2024, 6, 15), (2024, 6, 15)) == 0
    assert calculate_date_difference((1445, 9, 1), (1446, 9, 1), "hijri") == 355


def test_difference_accepts_calendar_dates():
    a = gregorian_to_hijri(2024, 1, 1).date
    b = gregorian_to_hijri(2024, 6, 15).date
    assert calculate_date_difference(a, b, "hijri") == 166


def test_invalid_difference_is_zero_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="calhijri.arithmetic"):
        assert calculate_date_difference((2024, 2, 30), (2024, 3, 1)) == 0
    assert "Date difference calculation error" in caplog.text

    assert try_date_difference((2024, 2, 30), (2024, 3, 1)) is None
    assert try_date_difference((2024, 1, 1), (2024, 1, 2), "lunar") is None
    assert try_date_difference((2024, 1, 1), (2024, 1, 2)) == 1


def test_to_julian_day():
    assert to_julian_day((2024, 1, 1), "gregorian") == 2460310.5
    with pytest.raises(InputOutOfRange):
        to_julian_day((2024, 2, 30), "gregorian")
    with pytest.raises(UnsupportedCalendar):
        to_julian_day(gregorian_to_hijri(2024, 1, 1).date, "gregorian")


def test_add_days():
    r = add_days((2024, 1, 1), 166)
    assert r.success and r.date.ymd == (2024, 6, 15)

    assert add_days((2024, 2, 28), 1).date.ymd == (2024, 2, 29)
    assert add_days((2024, 3, 1), -1).date.ymd == (2024, 2, 29)
    assert add_days((1445, 12, 29), 1, "hijri").date.ymd == (1445, 12, 30)
    assert add_days((1446, 12, 29), 1, "hijri").date.ymd == (1447, 1, 1)


def test_add_fractional_days_truncates_on_read():
    r = add_days((2024, 1, 1), 29.5)
    assert r.success
    assert r.date.ymd == (2024, 1, 30)
    assert r.date.julian_day == 2460339.5


@pytest.mark.parametrize("days", [True, "3", None, math.nan, math.inf])
def test_add_days_rejects_bad_counts(days):
    r = add_days((2024, 1, 1), days)
    assert not r.success
    assert r.kind == ErrorKind.INPUT_OUT_OF_RANGE


def test_add_days_failures():
    assert add_days((2024, 2, 30), 1).kind == ErrorKind.INPUT_OUT_OF_RANGE
    assert add_days((2024, 1, 1), 1, "julian").kind == ErrorKind.UNSUPPORTED_CALENDAR

    r = add_days((9999, 12, 31), 1)
    assert r.kind == ErrorKind.POST_CONVERSION_INVALID
    assert r.error.startswith("Date addition resulted in an invalid date")


@pytest.mark.parametrize("value, days, calendar", [
    ((2024, 1, 1), 1e20, "gregorian"),
    ((2024, 1, 1), -1e20, "gregorian"),
    ((2024, 1, 1), 1e300, "gregorian"),
    ((1445, 6, 15), 1e20, "hijri"),
    ((1445, 6, 15), -1e300, "hijri"),
])
def test_add_days_huge_counts_fail_cleanly(value, days, calendar):
    r = add_days(value, days, calendar)
    assert not r.success
    assert r.kind == ErrorKind.POST_CONVERSION_INVALID
    assert r.error.startswith("Date addition resulted in an invalid date")


def test_add_days_reaches_range_edges():
    assert add_days((9999, 12, 30), 1).date.ymd == (9999, 12, 31)
    assert add_days((1, 1, 2), -1).date.ymd == (1, 1, 1)
    assert add_days((1, 1, 1), -1).kind == ErrorKind.POST_CONVERSION_INVALID
    assert add_days((2000, 12, 28), 1, "hijri").date.ymd == (2000, 12, 29)
    assert add_days((1, 1, 1), -1, "hijri").kind == ErrorKind.POST_CONVERSION_INVALID


def test_month_length():
    assert month_length(2024, 2) == 29
    assert month_length(2023, 2) == 28
    assert month_length(1445, 12, "hijri") == 30
    assert month_length(1446, 12, "hijri") == 29


def test_month_boundaries():
    b = get_month_boundaries(2024, 2)
    assert b.total_days == 29
    assert b.first_day.date.ymd == (2024, 2, 1)
    assert b.last_day.date.ymd == (2024, 2, 29)

    b = get_month_boundaries(1445, 9, "hijri")
    assert b.total_days == 30
    assert b.first_day.date.ymd == (1445, 9, 1)
    assert b.first_day.date.calendar == "hijri"

    assert get_month_boundaries(1446, 12, "hijri").total_days == 29


def test_month_boundaries_invalid():
    b = get_month_boundaries(2024, 13)
    assert b.total_days == 0
    assert not b.first_day.success and not b.last_day.success
    assert b.first_day.kind == ErrorKind.INPUT_OUT_OF_RANGE

    b = get_month_boundaries(2024, 1, "lunar")
    assert b.total_days == 0
    assert b.first_day.kind == ErrorKind.UNSUPPORTED_CALENDAR

    # year out of range: length is known but the dates fail validation
    b = get_month_boundaries(10000, 1)
    assert not b.first_day.success


def test_bulk_convert_keeps_length_and_order():
    inputs = [(2024, 1, 1), "garbage", (2024, 2, 30), object(), "29/02/2024"]
    out = bulk_convert_dates(inputs, "gregorian", "hijri")

    assert len(out) == len(inputs)
    assert out[0].date.ymd == (1445, 6, 19)
    assert out[1].kind == ErrorKind.UNPARSABLE_TEXT
    assert out[2].kind == ErrorKind.INPUT_OUT_OF_RANGE
    assert out[3].kind == ErrorKind.INVALID_NATIVE_DATE
    assert out[4].date.ymd == (1445, 8, 19)


def test_bulk_convert_empty():
    assert bulk_convert_dates([], "gregorian", "hijri") == []
