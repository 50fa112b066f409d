from __future__ import annotations
from typing import Any, Dict

from ..engines.hijri import day_of_hijri_year as _doy, is_hijri_leap_year
from ..engines.tables import FRIDAY, SATURDAY
from .registry import hijri_ymd, register_attribute

def weekday(info) -> Dict[str, Any]:
    # 0=Sunday..6=Saturday, same as CalendarDate.day_of_week
    g = info.gregorian
    return {"weekday": g.day_of_week, "weekday_name": g.day_of_week_name, "weekday_name_ar": g.day_of_week_name_ar}

def events(info) -> Dict[str, Any]:
    return {
        "events": [e.name for e in info.events],
        "is_holiday": any(e.is_holiday for e in info.events),
    }

def jumuah(info) -> Dict[str, Any]:
    return {"is_jumuah": info.gregorian.day_of_week == FRIDAY}

def weekend(info) -> Dict[str, Any]:
    return {"is_weekend": info.gregorian.day_of_week in (FRIDAY, SATURDAY)}

def hijri_leap_year(info) -> Dict[str, Any]:
    return {"hijri_leap_year": is_hijri_leap_year(info.hijri.year)}

def day_of_hijri_year(info) -> Dict[str, Any]:
    return {"day_of_hijri_year": _doy(*hijri_ymd(info))}

register_attribute("weekday", weekday)
register_attribute("events", events)
register_attribute("jumuah", jumuah)
register_attribute("weekend", weekend)
register_attribute("hijri_leap_year", hijri_leap_year)
register_attribute("day_of_hijri_year", day_of_hijri_year)
