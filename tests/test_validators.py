# tests/test_validators.py

from datetime import date
from unittest.mock import patch

import pytest

from calhijri.core.types import ValidationResult
from calhijri.engines.hijri import is_hijri_leap_year
from calhijri.engines.validate import validate_date, validate_gregorian_date, validate_hijri_date


@pytest.fixture
def fixed_today():
    with patch("calhijri.core.time.today") as mock:
        mock.return_value = date(2024, 1, 1)
        yield mock


def test_gregorian_leap_day():
    assert validate_gregorian_date(2024, 2, 29).is_valid
    v = validate_gregorian_date(2023, 2, 29)
    assert not v.is_valid
    assert v.errors == ("Invalid day: 29. February 2023 has only 28 days.",)


def test_century_and_julian_leap_days():
    assert not validate_gregorian_date(1900, 2, 29).is_valid
    assert validate_gregorian_date(2000, 2, 29).is_valid
    # Julian calendar before the reform
    assert validate_gregorian_date(1500, 2, 29).is_valid


def test_reform_gap():
    assert validate_gregorian_date(1582, 10, 4).is_valid
    assert validate_gregorian_date(1582, 10, 15).is_valid
    v = validate_gregorian_date(1582, 10, 10)
    assert not v.is_valid
    assert "Gregorian reform" in v.errors[0]


def test_structural_errors_accumulate():
    v = validate_gregorian_date(0, 13, 0)
    assert not v.is_valid
    assert "Invalid year: 0. Must be between 1 and 9999." in v.errors
    assert "Invalid month: 13. Must be between 1 and 12." in v.errors
    assert "Invalid day: 0. Must be at least 1." in v.errors


@pytest.mark.parametrize("args", [(2.5, 1, 1), (2024, True, 1), ("2024", 1, 1), (2024, 1, float("nan"))])
def test_non_integers_rejected(args):
    v = validate_gregorian_date(*args)
    assert not v.is_valid
    assert "Must be an integer" in v.errors[0]


def test_integral_floats_accepted():
    assert validate_gregorian_date(2024.0, 2.0, 29.0).is_valid


def test_gregorian_warnings(fixed_today):
    v = validate_gregorian_date(500, 1, 1)
    assert v.is_valid
    assert any("before the Islamic epoch" in w for w in v.warnings)

    v = validate_gregorian_date(2200, 1, 1)
    assert v.is_valid
    assert any("far in the future" in w for w in v.warnings)

    assert validate_gregorian_date(2024, 6, 15).warnings == ()


def test_hijri_month_lengths():
    v = validate_hijri_date(1446, 2, 30)
    assert not v.is_valid
    assert v.errors == ("Invalid day: 30. Safar (صفر) 1446 has only 29 days.",)

    assert validate_hijri_date(1446, 1, 30).is_valid
    assert validate_hijri_date(1445, 12, 30).is_valid
    assert not validate_hijri_date(1446, 12, 30).is_valid


def test_dhu_al_hijjah_30_exactly_in_leap_years():
    for y in range(1, 2001):
        assert validate_hijri_date(y, 12, 30).is_valid == is_hijri_leap_year(y), y


def test_hijri_bounds():
    assert validate_hijri_date(1, 1, 1).is_valid
    assert validate_hijri_date(2000, 12, 29).is_valid

    v = validate_hijri_date(2001, 1, 1)
    assert v.errors == ("Invalid Hijri year: 2001. Must be between 1 and 2000.",)

    v = validate_hijri_date(1446, 13, 1)
    assert "Invalid Hijri month: 13. Must be between 1 and 12." in v.errors

    v = validate_hijri_date(0, 1, 1)
    assert not v.is_valid
    assert any("before the Hijri epoch" in w for w in v.warnings)


def test_validate_date_dispatch():
    assert validate_date(1446, 2, 30, "gregorian").is_valid
    assert not validate_date(1446, 2, 30, "hijri").is_valid


def test_validation_result_invariant():
    with pytest.raises(ValueError):
        ValidationResult(is_valid=True, errors=("boom",))
    with pytest.raises(ValueError):
        ValidationResult(is_valid=False)
    assert ValidationResult.from_messages([], ["w"]).is_valid
