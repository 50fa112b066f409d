"""
calhijri.awareness
------------------
"Today" in both calendars and the Islamic-calendar queries built on it.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Any, List, Optional, Tuple

from .core import time as civil_time
from .core.errors import CalhijriError, InputOutOfRange
from .core.types import CurrentDates, HijriMonthDay, HijriMonthGrid, IslamicEvent
from .engines.gregorian import gregorian_to_jdn, jdn_to_gregorian
from .engines.hijri import day_of_hijri_year, hijri_month_length, hijri_to_jdn, jdn_to_hijri
from .engines.tables import FRIDAY, HIJRI_MONTHS, ISLAMIC_EVENTS, RAMADAN, SATURDAY
from .engines.validate import validate_gregorian_date, validate_hijri_date

WEEKEND_DAYS = (FRIDAY, SATURDAY)


def get_current_dates(today: Optional[date] = None) -> CurrentDates:
    """
    One clock read, one Julian Day, both calendars: the two labels always
    describe the same civil day.
    """
    now = today if today is not None else civil_time.today()
    jd = gregorian_to_jdn(now.year, now.month, now.day)
    return CurrentDates(gregorian=jdn_to_gregorian(jd), hijri=jdn_to_hijri(jd), julian_day=jd)


def is_currently_ramadan(today: Optional[date] = None) -> bool:
    return get_current_dates(today).hijri.month == RAMADAN


def get_days_until_ramadan(today: Optional[date] = None) -> int:
    """
    Days from today to the next 1 Ramadan (0 on 1 Ramadan itself). Once past
    1 Ramadan the count runs to next year's, so the result is in [0, 365].
    """
    now = get_current_dates(today)
    h = now.hijri
    year = h.year
    if h.month > RAMADAN or (h.month == RAMADAN and h.day > 1):
        year += 1
    start = hijri_to_jdn(year, RAMADAN, 1)
    return max(0, int(math.floor(start - now.julian_day)))


def get_days_remaining_in_hijri_month(today: Optional[date] = None) -> int:
    h = get_current_dates(today).hijri
    return hijri_month_length(h.year, h.month) - h.day


def events_on(year: int, month: int, day: int) -> Tuple[IslamicEvent, ...]:
    """Events of the fixed table falling on Hijri (year, month, day)."""
    return tuple(e for e in ISLAMIC_EVENTS if e.hijri_month == month and e.hijri_day == day)


def get_upcoming_islamic_events(limit: int = 5, today: Optional[date] = None) -> List[IslamicEvent]:
    """Events still ahead (today included) in the current Hijri year, soonest first."""
    h = get_current_dates(today).hijri
    current = day_of_hijri_year(h.year, h.month, h.day)

    ahead = [
        (day_of_hijri_year(h.year, e.hijri_month, e.hijri_day), e)
        for e in ISLAMIC_EVENTS
    ]
    ahead = [(doy, e) for doy, e in ahead if doy >= current]
    ahead.sort(key=lambda t: t[0])
    return [e for _, e in ahead[: max(0, limit)]]


def is_jumuah(value: Any) -> bool:
    """True if ``value`` (a ``datetime.date`` or y/m/d) falls on a Friday."""
    try:
        y, m, d = civil_time.to_ymd(value)
    except CalhijriError:
        return False
    if not validate_gregorian_date(y, m, d).is_valid:
        return False
    return jdn_to_gregorian(gregorian_to_jdn(y, m, d)).day_of_week == FRIDAY


def get_next_jumuah(today: Optional[date] = None) -> date:
    """The next Friday strictly after today."""
    now = today if today is not None else civil_time.today()
    # date.weekday(): Monday=0 .. Friday=4
    ahead = (4 - now.weekday()) % 7
    return now + timedelta(days=ahead or 7)


def get_hijri_calendar_month(year: int, month: int, today: Optional[date] = None) -> HijriMonthGrid:
    """Every day of a Hijri month with its Gregorian date and weekend flag (Friday/Saturday)."""
    v = validate_hijri_date(year, month, 1)
    if not v.is_valid:
        raise InputOutOfRange(", ".join(v.errors))
    year, month = civil_time.as_int(year), civil_time.as_int(month)
    today_jd = get_current_dates(today).julian_day
    first = hijri_to_jdn(year, month, 1)

    days = []
    for day in range(1, hijri_month_length(year, month) + 1):
        jd = first + (day - 1)
        g = jdn_to_gregorian(jd)
        days.append(HijriMonthDay(
            day=day,
            gregorian=g,
            is_today=(jd == today_jd),
            is_weekend=g.day_of_week in WEEKEND_DAYS,
        ))

    ms = HIJRI_MONTHS[month - 1]
    return HijriMonthGrid(year=year, month=month, month_name=ms.name, month_name_ar=ms.name_ar, days=tuple(days))


def get_business_days_in_hijri_month(year: int, month: int) -> int:
    """Days of the month that are neither Friday/Saturday nor a holiday event."""
    count = 0
    for cell in get_hijri_calendar_month(year, month).days:
        if cell.is_weekend:
            continue
        if any(e.is_holiday for e in events_on(year, month, cell.day)):
            continue
        count += 1
    return count
