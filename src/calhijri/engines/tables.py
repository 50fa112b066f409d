"""
calhijri.engines.tables
-----------------------
Static month, weekday and event tables. Built once at import, never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.types import Calendar, CalendarDate, IslamicEvent


@dataclass(frozen=True)
class MonthSpec:
    name: str
    name_ar: str
    days: int  # common-year length


@dataclass(frozen=True)
class DayName:
    name: str
    name_ar: str
    short: str
    short_ar: str


GREGORIAN_MONTHS: Tuple[MonthSpec, ...] = (
    MonthSpec("January", "يناير", 31),
    MonthSpec("February", "فبراير", 28),  # 29 in leap years
    MonthSpec("March", "مارس", 31),
    MonthSpec("April", "أبريل", 30),
    MonthSpec("May", "مايو", 31),
    MonthSpec("June", "يونيو", 30),
    MonthSpec("July", "يوليو", 31),
    MonthSpec("August", "أغسطس", 31),
    MonthSpec("September", "سبتمبر", 30),
    MonthSpec("October", "أكتوبر", 31),
    MonthSpec("November", "نوفمبر", 30),
    MonthSpec("December", "ديسمبر", 31),
)

HIJRI_MONTHS: Tuple[MonthSpec, ...] = (
    MonthSpec("Muharram", "محرم", 30),
    MonthSpec("Safar", "صفر", 29),
    MonthSpec("Rabi' al-Awwal", "ربيع الأول", 30),
    MonthSpec("Rabi' al-Thani", "ربيع الثاني", 29),
    MonthSpec("Jumada al-Awwal", "جمادى الأولى", 30),
    MonthSpec("Jumada al-Thani", "جمادى الثانية", 29),
    MonthSpec("Rajab", "رجب", 30),
    MonthSpec("Sha'ban", "شعبان", 29),
    MonthSpec("Ramadan", "رمضان", 30),
    MonthSpec("Shawwal", "شوال", 29),
    MonthSpec("Dhu al-Qi'dah", "ذو القعدة", 30),
    MonthSpec("Dhu al-Hijjah", "ذو الحجة", 29),  # 30 in leap years
)

# Sunday first: index == day_of_week.
DAY_NAMES: Tuple[DayName, ...] = (
    DayName("Sunday", "الأحد", "Sun", "ح"),
    DayName("Monday", "الإثنين", "Mon", "ن"),
    DayName("Tuesday", "الثلاثاء", "Tue", "ث"),
    DayName("Wednesday", "الأربعاء", "Wed", "ر"),
    DayName("Thursday", "الخميس", "Thu", "خ"),
    DayName("Friday", "الجمعة", "Fri", "ج"),
    DayName("Saturday", "السبت", "Sat", "س"),
)

FRIDAY = 5
SATURDAY = 6
RAMADAN = 9
DHU_AL_HIJJAH = 12

ISLAMIC_EVENTS: Tuple[IslamicEvent, ...] = (
    IslamicEvent("Islamic New Year", "رأس السنة الهجرية", 1, 1, True,
                 "Beginning of the Islamic calendar year", "بداية السنة الهجرية"),
    IslamicEvent("Day of Ashura", "يوم عاشوراء", 1, 10, True,
                 "Day of remembrance in Islam", "يوم ذكرى في الإسلام"),
    IslamicEvent("Mawlid an-Nabi", "المولد النبوي", 3, 12, True,
                 "Birthday of Prophet Muhammad", "مولد النبي محمد صلى الله عليه وسلم"),
    IslamicEvent("Isra and Mi'raj", "الإسراء والمعراج", 7, 27, True,
                 "Night Journey of Prophet Muhammad", "ليلة الإسراء والمعراج"),
    IslamicEvent("Ramadan Begins", "بداية رمضان", 9, 1, True,
                 "Beginning of the holy month of fasting", "بداية شهر الصيام المبارك"),
    IslamicEvent("Laylat al-Qadr", "ليلة القدر", 9, 27, True,
                 "Night of Power (approximate date)", "ليلة القدر (تاريخ تقريبي)"),
    IslamicEvent("Eid al-Fitr", "عيد الفطر", 10, 1, True,
                 "Festival of Breaking the Fast", "عيد الفطر المبارك"),
    IslamicEvent("Eid al-Adha", "عيد الأضحى", 12, 10, True,
                 "Festival of Sacrifice", "عيد الأضحى المبارك"),
)


def month_table(calendar: Calendar) -> Tuple[MonthSpec, ...]:
    return HIJRI_MONTHS if calendar == "hijri" else GREGORIAN_MONTHS


def make_date(
    calendar: Calendar,
    year: int,
    month: int,
    day: int,
    day_of_week: int,
    julian_day: Optional[float] = None,
) -> CalendarDate:
    """Attach month and weekday labels to a kernel (y, m, d)."""
    ms = month_table(calendar)[month - 1]
    dn = DAY_NAMES[day_of_week]
    return CalendarDate(
        calendar=calendar,
        year=year,
        month=month,
        day=day,
        month_name=ms.name,
        month_name_ar=ms.name_ar,
        day_of_week=day_of_week,
        day_of_week_name=dn.name,
        day_of_week_name_ar=dn.name_ar,
        is_valid=True,
        julian_day=julian_day,
    )
