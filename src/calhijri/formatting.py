"""
calhijri.formatting
-------------------
Arabic / English rendering of CalendarDate values. Never raises.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from .arithmetic import try_date_difference
from .awareness import get_current_dates
from .convert import convert_date, date_to_hijri
from .core import time as civil_time
from .core.errors import CalhijriError
from .core.types import Calendar, CalendarDate, FormatStyle, Language
from .engines.tables import HIJRI_MONTHS

INVALID_DATE = {"ar": "تاريخ غير صحيح", "en": "Invalid Date"}
INVALID_RELATIVE = {"ar": "تاريخ غير صحيح", "en": "Invalid date"}

YEAR_SUFFIX = {
    "hijri": {"ar": "هـ", "en": " AH"},
    "gregorian": {"ar": " م", "en": " CE"},
}

STYLE_ALIASES = {"month_year": "monthYear", "month-year": "monthYear"}


def _lang(language: Any) -> Language:
    return "ar" if language == "ar" else "en"


def _render(d: Any, style: Any, language: Any, calendar: Calendar) -> str:
    lang = _lang(language)
    if not isinstance(d, CalendarDate) or not d.is_valid:
        return INVALID_DATE[lang]

    style = STYLE_ALIASES.get(style, style)
    month_name = d.month_name_ar if lang == "ar" else d.month_name

    if style == "numeric":
        return f"{d.day:02d}/{d.month:02d}/{d.year}"
    if style == "short":
        return f"{d.day} {month_name} {d.year}"
    if style == "monthYear":
        return f"{month_name} {d.year}"

    # full (also the fallback for unknown styles)
    day_name = d.day_of_week_name_ar if lang == "ar" else d.day_of_week_name
    return f"{day_name} {d.day} {month_name} {d.year}{YEAR_SUFFIX[calendar][lang]}"


def format_hijri_date(d: Any, style: FormatStyle = "full", language: Language = "ar") -> str:
    return _render(d, style, language, "hijri")


def format_gregorian_date(d: Any, style: FormatStyle = "full", language: Language = "en") -> str:
    return _render(d, style, language, "gregorian")


def format_date(d: Any, style: FormatStyle = "full", language: Optional[Language] = None) -> str:
    """Dispatch on ``d.calendar``; default language is Arabic for Hijri, English for Gregorian."""
    if not isinstance(d, CalendarDate):
        return INVALID_DATE[_lang(language or "en")]
    if d.calendar == "hijri":
        return format_hijri_date(d, style, language or "ar")
    return format_gregorian_date(d, style, language or "en")


def format_hijri_for_legal_document(value: Any, language: Language = "ar") -> str:
    """
    Contract wording for a Gregorian ``datetime.date`` (or a Hijri CalendarDate):

    ar: "15 من شهر محرم لعام 1446 هجرية"
    en: "15 Muharram 1446 AH"
    """
    lang = _lang(language)
    if isinstance(value, CalendarDate) and value.calendar == "hijri":
        h = value
    else:
        res = date_to_hijri(value)
        if not res.success:
            return INVALID_DATE[lang]
        h = res.date

    if lang == "ar":
        return f"{h.day} من شهر {h.month_name_ar} لعام {h.year} هجرية"
    return f"{h.day} {HIJRI_MONTHS[h.month - 1].name} {h.year} AH"


def get_relative_date_description(
    target: Any,
    calendar: Calendar = "gregorian",
    language: Language = "ar",
    today: Optional[date] = None,
) -> str:
    """
    "Today" / "Tomorrow" / "Yesterday" within a day, "In N days" / "N days ago"
    within a week, otherwise the short formatted date.
    """
    lang = _lang(language)
    try:
        cal = civil_time.check_calendar(calendar)
    except CalhijriError:
        return INVALID_RELATIVE[lang]

    target_res = convert_date(target, cal, cal)
    if not target_res.success:
        return INVALID_RELATIVE[lang]

    now = get_current_dates(today)
    current = now.hijri if cal == "hijri" else now.gregorian
    diff = try_date_difference(current, target_res.date, cal)
    if diff is None:
        return INVALID_RELATIVE[lang]

    if diff == 0:
        return "اليوم" if lang == "ar" else "Today"
    if diff == 1:
        return "غداً" if lang == "ar" else "Tomorrow"
    if diff == -1:
        return "أمس" if lang == "ar" else "Yesterday"
    if 0 < diff <= 7:
        return f"خلال {diff} أيام" if lang == "ar" else f"In {diff} days"
    if -7 <= diff < 0:
        return f"منذ {-diff} أيام" if lang == "ar" else f"{-diff} days ago"

    if cal == "hijri":
        return format_hijri_date(target_res.date, "short", lang)
    return format_gregorian_date(target_res.date, "short", lang)
