"""
calhijri.parsing
----------------
Free-text numeric dates in five fixed layouts.
"""

from __future__ import annotations

import re
from typing import Any, Tuple

from .convert import gregorian_to_hijri, hijri_to_gregorian
from .core.errors import CalhijriError, UnparsableText
from .core.types import ConversionResult

ARABIC_INDIC_DIGITS = dict(zip(map(ord, "٠١٢٣٤٥٦٧٨٩"), "0123456789"))
PERSIAN_DIGITS = dict(zip(map(ord, "۰۱۲۳۴۵۶۷۸۹"), "0123456789"))
_DIGITS = {**ARABIC_INDIC_DIGITS, **PERSIAN_DIGITS}

_NOISE_RE = re.compile(r"[^0-9/\-.]")

# (name, pattern, year_first)
LAYOUTS: Tuple[Tuple[str, "re.Pattern[str]", bool], ...] = (
    ("DD/MM/YYYY", re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$", re.ASCII), False),
    ("YYYY/MM/DD", re.compile(r"^(\d{4})/(\d{1,2})/(\d{1,2})$", re.ASCII), True),
    ("DD-MM-YYYY", re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$", re.ASCII), False),
    ("YYYY-MM-DD", re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", re.ASCII), True),
    ("DD.MM.YYYY", re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$", re.ASCII), False),
)

SUPPORTED_FORMATS = ", ".join(name for name, _, _ in LAYOUTS)


def clean(text: str) -> str:
    """Normalize Eastern Arabic digits and drop everything but digits and / - ."""
    return _NOISE_RE.sub("", text.strip().translate(_DIGITS))


def parse_ymd(text: Any) -> Tuple[int, int, int]:
    """Day-first layouts are read as DD/MM, never MM/DD."""
    if not isinstance(text, str):
        raise UnparsableText(f"Expected a date string, got {type(text).__name__}")

    cleaned = clean(text)
    for _, pattern, year_first in LAYOUTS:
        match = pattern.match(cleaned)
        if match:
            a, b, c = (int(g) for g in match.groups())
            return (a, b, c) if year_first else (c, b, a)

    raise UnparsableText(f"Unable to parse date string: {text}. Supported formats: {SUPPORTED_FORMATS}")


def parse_date_string(text: Any, assume_hijri: bool = False) -> ConversionResult:
    """
    Parse ``text`` and convert it out of the assumed calendar:
    Gregorian text yields a Hijri date, Hijri text a Gregorian one.
    """
    try:
        y, m, d = parse_ymd(text)
    except CalhijriError as e:
        return ConversionResult.fail(e.kind, str(e))

    if assume_hijri:
        return hijri_to_gregorian(y, m, d)
    return gregorian_to_hijri(y, m, d)
