"""
calhijri.convert
----------------
Validated Gregorian <-> Hijri conversion through the Julian Day.

Every function here returns a ConversionResult (or None for ``hijri_to_date``);
expected bad input never raises.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Optional, Tuple

from .core import time as civil_time
from .core.errors import CalhijriError
from .core.types import Calendar, CalendarDate, ConversionResult, ErrorKind, ValidationResult
from .engines.gregorian import gregorian_to_jdn, jdn_to_gregorian
from .engines.hijri import hijri_to_jdn, jdn_to_hijri
from .engines.validate import validate_gregorian_date, validate_hijri_date

logger = logging.getLogger(__name__)

_LABEL = {"gregorian": "Gregorian", "hijri": "Hijri"}

_Validator = Callable[[Any, Any, Any], ValidationResult]


def calendar_kernel(calendar: Calendar) -> Tuple[_Validator, Callable[..., float], Callable[[float], CalendarDate]]:
    if calendar == "hijri":
        return validate_hijri_date, hijri_to_jdn, jdn_to_hijri
    return validate_gregorian_date, gregorian_to_jdn, jdn_to_gregorian


def _convert(year: Any, month: Any, day: Any, source: Calendar, target: Calendar) -> ConversionResult:
    src_validate, src_to_jdn, _ = calendar_kernel(source)
    tgt_validate, _, tgt_from_jdn = calendar_kernel(target)

    try:
        # 1. Fail fast on bad input
        validation = src_validate(year, month, day)
        if not validation.is_valid:
            return ConversionResult.fail(
                ErrorKind.INPUT_OUT_OF_RANGE,
                f"Invalid {_LABEL[source]} date: {', '.join(validation.errors)}",
            )

        # 2. Forward to the Julian Day and back out in the target calendar
        jd = src_to_jdn(int(year), int(month), int(day))
        out = tgt_from_jdn(jd)

        # 3. The result must satisfy its own calendar
        result_validation = tgt_validate(out.year, out.month, out.day)
        if not result_validation.is_valid:
            return ConversionResult.fail(
                ErrorKind.POST_CONVERSION_INVALID,
                f"Conversion resulted in invalid {_LABEL[target]} date: {', '.join(result_validation.errors)}",
            )

        warnings = validation.warnings
        if target != source:
            warnings = warnings + result_validation.warnings
        return ConversionResult.ok(out, warnings)
    except Exception as e:  # noqa: BLE001
        logger.exception("Unexpected failure converting %r/%r/%r from %s to %s", year, month, day, source, target)
        return ConversionResult.fail(ErrorKind.UNEXPECTED, f"Conversion failed: {e}")


def gregorian_to_hijri(year: Any, month: Any, day: Any) -> ConversionResult:
    return _convert(year, month, day, "gregorian", "hijri")


def hijri_to_gregorian(year: Any, month: Any, day: Any) -> ConversionResult:
    return _convert(year, month, day, "hijri", "gregorian")


def convert_ymd(year: Any, month: Any, day: Any, from_calendar: Any, to_calendar: Any) -> ConversionResult:
    """
    Same-calendar requests validate and relabel the date (day names, Julian Day).
    """
    try:
        source = civil_time.check_calendar(from_calendar)
        target = civil_time.check_calendar(to_calendar)
    except CalhijriError as e:
        return ConversionResult.fail(e.kind, str(e))
    return _convert(year, month, day, source, target)


def date_to_hijri(value: Any) -> ConversionResult:
    """``datetime.date`` / ``datetime.datetime`` / POSIX timestamp -> Hijri."""
    try:
        y, m, d = civil_time.native_to_ymd(value)
    except CalhijriError as e:
        return ConversionResult.fail(e.kind, str(e))
    return gregorian_to_hijri(y, m, d)


def hijri_to_date(year: Any, month: Any, day: Any) -> Optional[date]:
    """Hijri -> ``datetime.date``, or None when the date is invalid or unrepresentable."""
    result = hijri_to_gregorian(year, month, day)
    if not result.success:
        return None
    try:
        return result.date.to_date()
    except ValueError:
        # e.g. a Julian-only leap day such as 1500-02-29
        logger.debug("Hijri %s/%s/%s has no datetime.date counterpart", year, month, day)
        return None


def convert_date(value: Any, from_calendar: Any, to_calendar: Any) -> ConversionResult:
    """
    Converts a CalendarDate, (y, m, d) tuple, mapping, ``datetime.date`` or date string.

    Strings are parsed with the layouts of ``calhijri.parsing`` and read in
    ``from_calendar``.
    """
    try:
        source = civil_time.check_calendar(from_calendar)
        target = civil_time.check_calendar(to_calendar)
        if isinstance(value, CalendarDate) and value.calendar != source:
            return ConversionResult.fail(
                ErrorKind.UNSUPPORTED_CALENDAR,
                f"Date is a {_LABEL[value.calendar]} date, not {_LABEL[source]}",
            )
        if isinstance(value, str):
            from .parsing import parse_ymd
            y, m, d = parse_ymd(value)
        else:
            y, m, d = civil_time.to_ymd(value)
    except CalhijriError as e:
        return ConversionResult.fail(e.kind, str(e))
    return _convert(y, m, d, source, target)
