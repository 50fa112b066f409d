# tests/test_parsing.py

import pytest

from calhijri.core.errors import UnparsableText
from calhijri.core.types import ErrorKind
from calhijri.parsing import clean, parse_date_string, parse_ymd


@pytest.mark.parametrize("text", [
    "15/06/2024",
    "2024/06/15",
    "15-06-2024",
    "2024-06-15",
    "15.06.2024",
    "2024-6-15",
    " 15/6/2024 ",
])
def test_supported_layouts(text):
    assert parse_ymd(text) == (2024, 6, 15)


def test_eastern_digits_and_noise():
    assert clean("١٥/٠٦/٢٠٢٤") == "15/06/2024"
    assert parse_ymd("١٥/٠٦/٢٠٢٤") == (2024, 6, 15)
    assert parse_ymd("۱۵/۰۶/۲۰۲۴") == (2024, 6, 15)
    assert parse_ymd("15/06/2024 م") == (2024, 6, 15)
    assert parse_ymd("1446/01/01 هـ") == (1446, 1, 1)


def test_day_first_is_not_month_first():
    # 06/15 is read as day 6 of month 15
    assert parse_ymd("06/15/2024") == (2024, 15, 6)
    r = parse_date_string("06/15/2024")
    assert r.kind == ErrorKind.INPUT_OUT_OF_RANGE


@pytest.mark.parametrize("text", ["", "June 15", "2024/06", "15/06/24", "15/06-2024", "2024.06.15"])
def test_unparsable(text):
    with pytest.raises(UnparsableText) as ei:
        parse_ymd(text)
    msg = str(ei.value)
    assert msg.startswith(f"Unable to parse date string: {text}.")
    for layout in ("DD/MM/YYYY", "YYYY/MM/DD", "DD-MM-YYYY", "YYYY-MM-DD", "DD.MM.YYYY"):
        assert layout in msg


def test_non_string():
    with pytest.raises(UnparsableText):
        parse_ymd(20240615)


def test_parse_date_string_converts():
    r = parse_date_string("15/06/2024")
    assert r.success
    assert r.date.calendar == "hijri"
    assert r.date.ymd == (1445, 12, 8)

    r = parse_date_string("01/01/1446", assume_hijri=True)
    assert r.success
    assert r.date.calendar == "gregorian"
    assert r.date.ymd == (2024, 7, 8)


def test_parse_date_string_failures():
    r = parse_date_string("garbage")
    assert not r.success
    assert r.kind == ErrorKind.UNPARSABLE_TEXT
    assert r.error.startswith("Unable to parse date string: garbage")

    r = parse_date_string("30/02/1446", assume_hijri=True)
    assert r.kind == ErrorKind.INPUT_OUT_OF_RANGE
