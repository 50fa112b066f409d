"""
calhijri.engines.gregorian
--------------------------
Civil (Gregorian) date <-> Julian Day, after Meeus, Astronomical Algorithms ch. 7.

Julian Days here are midnight values (x.5). Dates before the reform
(15 October 1582) are read on the Julian calendar, so the sequence of civil
labels is the one in historical use and 16 July 622 lands on the Hijri epoch.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.types import CalendarDate
from .specs import CIVIL, GregorianParams
from .tables import GREGORIAN_MONTHS, make_date


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0


def is_before_reform(year: int, month: int, day: int, params: GregorianParams = CIVIL) -> bool:
    return (year, month, day) < params.reform_ymd


def is_civil_leap_year(year: int, params: GregorianParams = CIVIL) -> bool:
    """Leap rule in force for February of ``year``."""
    if year < params.reform_ymd[0]:
        return is_julian_leap_year(year)
    return is_gregorian_leap_year(year)


def gregorian_month_length(year: int, month: int, params: GregorianParams = CIVIL) -> int:
    if month == 2 and is_civil_leap_year(year, params):
        return 29
    return GREGORIAN_MONTHS[month - 1].days


def is_reform_gap(year: int, month: int, day: int, params: GregorianParams = CIVIL) -> bool:
    """The ten labels 5..14 October 1582 were never used."""
    ry, rm, rd = params.reform_ymd
    return year == ry and month == rm and (rd - 10) <= day < rd


def day_of_week(jd: float) -> int:
    """0=Sunday .. 6=Saturday."""
    return int(math.floor(jd + 1.5)) % 7


def gregorian_to_jdn(year: int, month: int, day: int, params: GregorianParams = CIVIL) -> float:
    """(y, m, d) -> JD at 0h. Pure; performs no validation."""
    julian = is_before_reform(year, month, day, params)
    if month <= 2:
        year -= 1
        month += 12

    if julian:
        b = 0
    else:
        a = math.floor(year / 100)
        b = 2 - a + math.floor(a / 4)

    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def jdn_to_ymd(jd: float, params: GregorianParams = CIVIL) -> Tuple[int, int, int]:
    """Inverse of gregorian_to_jdn. Any fraction of a day is truncated."""
    jd = jd + 0.5
    z = math.floor(jd)
    f = jd - z

    if z < params.reform_jd + 0.5:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = math.floor(b - d - math.floor(30.6001 * e) + f)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return int(year), int(month), int(day)


def midnight(jd: float) -> float:
    """JD at 0h of the civil day containing ``jd``."""
    return math.floor(jd + 0.5) - 0.5


def jdn_to_gregorian(jd: float, params: GregorianParams = CIVIL) -> CalendarDate:
    y, m, d = jdn_to_ymd(jd, params)
    return make_date("gregorian", y, m, d, day_of_week(jd), julian_day=midnight(jd))
