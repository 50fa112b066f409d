from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from . import awareness
from .arithmetic import add_days as _add_days
from .arithmetic import calculate_date_difference, get_month_boundaries, to_julian_day
from .attributes import standard as _standard  # noqa: F401
from .attributes.registry import compute_attributes
from .convert import convert_date
from .core import time as civil_time
from .core.errors import CalhijriError
from .core.types import (
    Calendar,
    CalendarDate,
    ConversionResult,
    CurrentDates,
    DayInfo,
    FormatStyle,
    Language,
    MonthBoundaries,
    ValidationResult,
)
from .engines.gregorian import jdn_to_gregorian
from .engines.hijri import jdn_to_hijri
from .engines.validate import validate_date
from .formatting import format_date as _format_date

# ============================================================
# Conversion / validation
# ============================================================

def convert(value: Any, from_calendar: Calendar, to_calendar: Calendar) -> ConversionResult:
    return convert_date(value, from_calendar, to_calendar)

def validate(year: Any, month: Any, day: Any, calendar: Calendar = "gregorian") -> ValidationResult:
    try:
        cal = civil_time.check_calendar(calendar)
    except CalhijriError as e:
        return ValidationResult.from_messages([str(e)])
    return validate_date(year, month, day, cal)

def format_date(d: CalendarDate, style: FormatStyle = "full", language: Optional[Language] = None) -> str:
    return _format_date(d, style, language)

# ============================================================
# Today / arithmetic
# ============================================================

def today(today: Optional[date] = None) -> CurrentDates:
    return awareness.get_current_dates(today)

def add_days(value: Any, days: Any, calendar: Calendar = "gregorian") -> ConversionResult:
    return _add_days(value, days, calendar)

def date_difference(date1: Any, date2: Any, calendar: Calendar = "gregorian") -> int:
    return calculate_date_difference(date1, date2, calendar)

def month_boundaries(year: Any, month: Any, calendar: Calendar = "gregorian") -> MonthBoundaries:
    return get_month_boundaries(year, month, calendar)

def is_ramadan(today: Optional[date] = None) -> bool:
    return awareness.is_currently_ramadan(today)

def days_until_ramadan(today: Optional[date] = None) -> int:
    return awareness.get_days_until_ramadan(today)

# ============================================================
# Day-level info
# ============================================================

def day_info(
    value: Any,
    *,
    calendar: Calendar = "gregorian",
    attributes: Sequence[str] = (),
) -> DayInfo:
    """
    Both calendar labels, the Julian Day and the Islamic events of one civil day.

    Unlike the conversion functions this raises (CalhijriError subclasses for
    bad dates, KeyError for unknown attribute names).
    """
    jd = to_julian_day(value, civil_time.check_calendar(calendar))
    h = jdn_to_hijri(jd)
    info = DayInfo(
        gregorian=jdn_to_gregorian(jd),
        hijri=h,
        julian_day=jd,
        events=awareness.events_on(h.year, h.month, h.day),
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info
