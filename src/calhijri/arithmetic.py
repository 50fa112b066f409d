"""
calhijri.arithmetic
-------------------
Same-calendar day arithmetic and month queries on the Julian Day line.
"""

from __future__ import annotations

import logging
import math
import time
from numbers import Real
from typing import Any, Iterable, List, Optional

from .convert import calendar_kernel, convert_date, convert_ymd
from .core import time as civil_time
from .core.errors import CalhijriError, InputOutOfRange, UnsupportedCalendar
from .core.types import Calendar, CalendarDate, ConversionResult, ErrorKind, MonthBoundaries
from .engines.gregorian import gregorian_month_length, gregorian_to_jdn
from .engines.hijri import hijri_month_length, hijri_to_jdn
from .engines.specs import CIVIL, TABULAR

logger = logging.getLogger(__name__)


def to_julian_day(value: Any, calendar: Calendar) -> float:
    """Validated Julian Day of ``value`` in ``calendar``; raises CalhijriError subclasses."""
    if isinstance(value, CalendarDate) and value.calendar != calendar:
        raise UnsupportedCalendar(f"Expected a {calendar} date, got a {value.calendar} date")
    validate, to_jdn, _ = calendar_kernel(calendar)
    y, m, d = civil_time.to_ymd(value)
    v = validate(y, m, d)
    if not v.is_valid:
        raise InputOutOfRange(", ".join(v.errors))
    return to_jdn(y, m, d)


def julian_day_span(calendar: Calendar) -> tuple[float, float]:
    """Half-open [first, end) Julian Day range covered by the supported years of ``calendar``."""
    if calendar == "hijri":
        return hijri_to_jdn(TABULAR.min_year, 1, 1), hijri_to_jdn(TABULAR.max_year + 1, 1, 1)
    return gregorian_to_jdn(CIVIL.min_year, 1, 1), gregorian_to_jdn(CIVIL.max_year + 1, 1, 1)


def try_date_difference(date1: Any, date2: Any, calendar: Calendar = "gregorian") -> Optional[int]:
    """floor(JD(date2) - JD(date1)), or None when either input is invalid."""
    try:
        cal = civil_time.check_calendar(calendar)
        return int(math.floor(to_julian_day(date2, cal) - to_julian_day(date1, cal)))
    except CalhijriError as e:
        logger.warning("Date difference calculation error: %s", e)
        return None


def calculate_date_difference(date1: Any, date2: Any, calendar: Calendar = "gregorian") -> int:
    """
    Days from ``date1`` to ``date2`` (negative if ``date2`` is earlier).

    Never fails: invalid input is logged and yields 0, so it can sit inside
    sort keys and display code. Use ``try_date_difference`` to tell the two apart.
    """
    diff = try_date_difference(date1, date2, calendar)
    return 0 if diff is None else diff


def add_days(value: Any, days: Any, calendar: Calendar = "gregorian") -> ConversionResult:
    """
    Move ``value`` by ``days`` (fractional allowed, e.g. 29.5 for a mean
    Hijri month). The fraction is truncated only when reading the new date.
    """
    try:
        cal = civil_time.check_calendar(calendar)
        if isinstance(days, bool) or not isinstance(days, Real) or not math.isfinite(float(days)):
            return ConversionResult.fail(ErrorKind.INPUT_OUT_OF_RANGE, f"Invalid day count: {days!r}")
        jd = to_julian_day(value, cal) + float(days)
    except CalhijriError as e:
        return ConversionResult.fail(e.kind, str(e))

    first, end = julian_day_span(cal)
    if not first <= jd < end:
        return ConversionResult.fail(
            ErrorKind.POST_CONVERSION_INVALID,
            f"Date addition resulted in an invalid date: Julian Day {jd} is outside the supported {cal} years.",
        )

    validate, _, from_jdn = calendar_kernel(cal)
    try:
        out = from_jdn(jd)
        v = validate(out.year, out.month, out.day)
    except Exception as e:  # noqa: BLE001
        logger.exception("add_days failed for %r + %r (%s)", value, days, cal)
        return ConversionResult.fail(ErrorKind.UNEXPECTED, f"Date addition failed: {e}")
    if not v.is_valid:
        return ConversionResult.fail(
            ErrorKind.POST_CONVERSION_INVALID,
            f"Date addition resulted in an invalid date: {', '.join(v.errors)}",
        )
    return ConversionResult.ok(out, v.warnings)


def month_length(year: int, month: int, calendar: Calendar = "gregorian") -> int:
    if calendar == "hijri":
        return hijri_month_length(year, month)
    return gregorian_month_length(year, month)


def get_month_boundaries(year: Any, month: Any, calendar: Calendar = "gregorian") -> MonthBoundaries:
    try:
        cal = civil_time.check_calendar(calendar)
    except CalhijriError as e:
        err = ConversionResult.fail(e.kind, str(e))
        return MonthBoundaries(first_day=err, last_day=err, total_days=0)

    y, m = civil_time.as_int(year), civil_time.as_int(month)
    if y is None or m is None or not (1 <= m <= 12):
        err = ConversionResult.fail(
            ErrorKind.INPUT_OUT_OF_RANGE,
            f"Month boundary calculation failed: invalid month {year!r}/{month!r}",
        )
        return MonthBoundaries(first_day=err, last_day=err, total_days=0)

    total = month_length(y, m, cal)
    return MonthBoundaries(
        first_day=convert_ymd(y, m, 1, cal, cal),
        last_day=convert_ymd(y, m, total, cal, cal),
        total_days=total,
    )


def _convert_one(value: Any, from_calendar: Any, to_calendar: Any) -> ConversionResult:
    try:
        return convert_date(value, from_calendar, to_calendar)
    except Exception as e:  # noqa: BLE001
        logger.exception("Unexpected failure converting %r", value)
        return ConversionResult.fail(ErrorKind.UNEXPECTED, f"Conversion failed: {e}")


def bulk_convert_dates(dates: Iterable[Any], from_calendar: Any, to_calendar: Any) -> List[ConversionResult]:
    """One result per input, in order, whatever happens to the individual elements."""
    t0 = time.perf_counter()
    results = [_convert_one(d, from_calendar, to_calendar) for d in dates]
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    logger.debug("Bulk conversion of %d dates completed in %.3f ms", len(results), elapsed_ms)
    return results
