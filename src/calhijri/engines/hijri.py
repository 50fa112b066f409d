"""
calhijri.engines.hijri
----------------------
Tabular Hijri date <-> Julian Day.

Years have 354 days, or 355 when (year mod 30) is a leap residue; the extra
day goes to Dhu al-Hijjah. Months alternate 30/29 starting with Muharram = 30.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.types import CalendarDate
from .gregorian import day_of_week, midnight
from .specs import TABULAR, HijriParams
from .tables import DHU_AL_HIJJAH, HIJRI_MONTHS, make_date


def is_hijri_leap_year(year: int, params: HijriParams = TABULAR) -> bool:
    return (year % params.cycle_years) in params.leap_residues


def hijri_year_length(year: int, params: HijriParams = TABULAR) -> int:
    return params.common_year_days + (1 if is_hijri_leap_year(year, params) else 0)


def hijri_month_length(year: int, month: int, params: HijriParams = TABULAR) -> int:
    if month == DHU_AL_HIJJAH and is_hijri_leap_year(year, params):
        return 30
    return HIJRI_MONTHS[month - 1].days


def days_before_year(year: int, params: HijriParams = TABULAR) -> int:
    """
    Days from 1 Muharram 1 AH to 1 Muharram of ``year``.

    Any run of ``cycle_years`` consecutive years holds every leap residue once,
    so whole cycles contribute ``cycle_days`` each; only the tail is summed.
    Works for year <= 0 as well (negative result).
    """
    cycles, rem = divmod(year - 1, params.cycle_years)
    start = cycles * params.cycle_years + 1
    return cycles * params.cycle_days + sum(hijri_year_length(y, params) for y in range(start, start + rem))


def days_before_month(year: int, month: int, params: HijriParams = TABULAR) -> int:
    return sum(hijri_month_length(year, m, params) for m in range(1, month))


def day_of_hijri_year(year: int, month: int, day: int, params: HijriParams = TABULAR) -> int:
    """1-based ordinal of the day within its Hijri year."""
    return days_before_month(year, month, params) + day


def hijri_to_jdn(year: int, month: int, day: int, params: HijriParams = TABULAR) -> float:
    """(y, m, d) AH -> JD at 0h. Pure; performs no validation."""
    return params.epoch_jd + days_before_year(year, params) + days_before_month(year, month, params) + (day - 1)


def jdn_to_ymd(jd: float, params: HijriParams = TABULAR) -> Tuple[int, int, int]:
    """Inverse of hijri_to_jdn. Any fraction of a day is truncated."""
    days = jd - params.epoch_jd

    # 1. Estimate the year from the mean length, then walk until it brackets `days`
    year = math.floor(days / params.mean_year_days) + 1
    start = days_before_year(year, params)
    while start > days:
        year -= 1
        start -= hijri_year_length(year, params)
    while start + hijri_year_length(year, params) <= days:
        start += hijri_year_length(year, params)
        year += 1

    # 2. Walk the months of that year
    rem = days - start
    month = 1
    for month in range(1, 13):
        ml = hijri_month_length(year, month, params)
        if rem < ml:
            break
        rem -= ml

    return int(year), month, int(math.floor(rem)) + 1


def jdn_to_hijri(jd: float, params: HijriParams = TABULAR) -> CalendarDate:
    y, m, d = jdn_to_ymd(jd, params)
    return make_date("hijri", y, m, d, day_of_week(jd), julian_day=midnight(jd))
