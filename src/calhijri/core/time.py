"""
Adapter boundary between loosely typed caller values and the engine's
strict (year, month, day) integers, plus the one place the clock is read.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from numbers import Integral, Real
from typing import Any, Mapping, Optional, Tuple

from .errors import InputOutOfRange, InvalidNativeDate, UnsupportedCalendar
from .types import CALENDARS, Calendar


def today() -> date:
    """Local civil date. The only clock read in the package."""
    return date.today()


def as_int(value: Any) -> Optional[int]:
    """Integral value of ``value`` or None (bools, NaN, 2.5 and strings are rejected)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        f = float(value)
        if math.isfinite(f) and f.is_integer():
            return int(f)
    return None


def check_calendar(name: Any) -> Calendar:
    if isinstance(name, str) and name.lower() in CALENDARS:
        return name.lower()  # type: ignore[return-value]
    raise UnsupportedCalendar(f"Unknown calendar '{name}'. Available: {list(CALENDARS)}")


def native_to_ymd(value: Any) -> Tuple[int, int, int]:
    """
    ``datetime.date`` / ``datetime.datetime`` / finite POSIX timestamp -> civil (y, m, d).

    Timestamps are read in local time, the way ``date.fromtimestamp`` does.
    """
    if isinstance(value, (datetime, date)):
        return value.year, value.month, value.day
    if isinstance(value, Real) and not isinstance(value, bool):
        ts = float(value)
        if not math.isfinite(ts):
            raise InvalidNativeDate(f"Invalid timestamp: {value}")
        try:
            d = date.fromtimestamp(ts)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidNativeDate(f"Timestamp out of range: {value}") from e
        return d.year, d.month, d.day
    raise InvalidNativeDate(f"Invalid date value provided: {value!r}")


def to_ymd(value: Any) -> Tuple[int, int, int]:
    """
    Accepts a CalendarDate, (y, m, d) sequence, mapping with year/month/day,
    or any object with integral ``year``/``month``/``day`` attributes
    (``datetime.date`` included). Range checks are left to the validators.
    """
    if isinstance(value, Mapping):
        parts = tuple(value.get(k) for k in ("year", "month", "day"))
    elif isinstance(value, (tuple, list)):
        if len(value) != 3:
            raise InputOutOfRange(f"Expected (year, month, day), got {len(value)} values")
        parts = tuple(value)
    elif all(hasattr(value, k) for k in ("year", "month", "day")):
        parts = (value.year, value.month, value.day)
    else:
        raise InvalidNativeDate(f"Invalid date value provided: {value!r}")

    out = tuple(as_int(p) for p in parts)
    if any(p is None for p in out):
        raise InputOutOfRange(f"Year, month and day must be integers, got {parts!r}")
    return out  # type: ignore[return-value]
