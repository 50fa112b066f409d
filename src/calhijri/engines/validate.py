"""
calhijri.engines.validate
-------------------------
Leap-aware range checks. Messages are for display; branch on ``is_valid``.
"""

from __future__ import annotations

from typing import Any, List

from ..core import time as civil_time
from ..core.types import Calendar, ValidationResult
from .gregorian import gregorian_month_length, is_reform_gap
from .hijri import hijri_month_length
from .specs import CIVIL, TABULAR, GregorianParams, HijriParams
from .tables import GREGORIAN_MONTHS, HIJRI_MONTHS


def _check_integers(year: Any, month: Any, day: Any, errors: List[str]):
    y, m, d = civil_time.as_int(year), civil_time.as_int(month), civil_time.as_int(day)
    for label, raw, val in (("year", year, y), ("month", month, m), ("day", day, d)):
        if val is None:
            errors.append(f"Invalid {label}: {raw!r}. Must be an integer.")
    return y, m, d


def validate_gregorian_date(year: Any, month: Any, day: Any, params: GregorianParams = CIVIL) -> ValidationResult:
    errors: List[str] = []
    warnings: List[str] = []

    y, m, d = _check_integers(year, month, day, errors)
    if errors:
        return ValidationResult.from_messages(errors, warnings)

    if y < params.min_year or y > params.max_year:
        errors.append(f"Invalid year: {y}. Must be between {params.min_year} and {params.max_year}.")
    if m < 1 or m > 12:
        errors.append(f"Invalid month: {m}. Must be between 1 and 12.")
    if d < 1:
        errors.append(f"Invalid day: {d}. Must be at least 1.")

    if 1 <= m <= 12:
        max_days = gregorian_month_length(y, m, params)
        if d > max_days:
            errors.append(f"Invalid day: {d}. {GREGORIAN_MONTHS[m - 1].name} {y} has only {max_days} days.")
        elif is_reform_gap(y, m, d, params):
            errors.append(f"Invalid day: {d}. {GREGORIAN_MONTHS[m - 1].name} {y} skips days 5-14 (Gregorian reform).")

    if y < params.islamic_epoch_year:
        warnings.append(
            f"Date is before the Islamic epoch ({params.islamic_epoch_year} CE). Conversion may be less accurate."
        )
    if y > civil_time.today().year + params.future_horizon_years:
        warnings.append("Date is far in the future. Conversion accuracy may decrease over time.")

    return ValidationResult.from_messages(errors, warnings)


def validate_hijri_date(year: Any, month: Any, day: Any, params: HijriParams = TABULAR) -> ValidationResult:
    errors: List[str] = []
    warnings: List[str] = []

    y, m, d = _check_integers(year, month, day, errors)
    if errors:
        return ValidationResult.from_messages(errors, warnings)

    if y < params.min_year or y > params.max_year:
        errors.append(f"Invalid Hijri year: {y}. Must be between {params.min_year} and {params.max_year}.")
    if m < 1 or m > 12:
        errors.append(f"Invalid Hijri month: {m}. Must be between 1 and 12.")
    if d < 1:
        errors.append(f"Invalid day: {d}. Must be at least 1.")

    if 1 <= m <= 12:
        max_days = hijri_month_length(y, m, params)
        if d > max_days:
            ms = HIJRI_MONTHS[m - 1]
            errors.append(f"Invalid day: {d}. {ms.name} ({ms.name_ar}) {y} has only {max_days} days.")

    if y < 1:
        warnings.append("Date is before the Hijri epoch. Conversion may be inaccurate.")

    return ValidationResult.from_messages(errors, warnings)


def validate_date(year: Any, month: Any, day: Any, calendar: Calendar = "gregorian") -> ValidationResult:
    if calendar == "hijri":
        return validate_hijri_date(year, month, day)
    return validate_gregorian_date(year, month, day)
