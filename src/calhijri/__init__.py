"""calhijri public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    convert,
    validate,
    format_date,
    today,
    add_days,
    date_difference,
    month_boundaries,
    is_ramadan,
    days_until_ramadan,
    day_info,
)
from .convert import gregorian_to_hijri, hijri_to_gregorian, date_to_hijri, hijri_to_date
from .arithmetic import bulk_convert_dates
from .parsing import parse_date_string
from .core.types import CalendarDate, ConversionResult, ErrorKind, ValidationResult

__all__ = [
    "convert",
    "validate",
    "format_date",
    "today",
    "add_days",
    "date_difference",
    "month_boundaries",
    "is_ramadan",
    "days_until_ramadan",
    "day_info",
    "gregorian_to_hijri",
    "hijri_to_gregorian",
    "date_to_hijri",
    "hijri_to_date",
    "bulk_convert_dates",
    "parse_date_string",
    "CalendarDate",
    "ConversionResult",
    "ErrorKind",
    "ValidationResult",
]
