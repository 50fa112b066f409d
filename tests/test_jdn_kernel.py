# tests/test_jdn_kernel.py

import random

import pytest

from calhijri.engines import gregorian as greg
from calhijri.engines import hijri
from calhijri.engines.specs import HIJRI_EPOCH_JD, TABULAR, HijriParams

# --- Fixed anchors (JD at 0h) ---

GREGORIAN_ANCHORS = [
    # (y, m, d), jd, day_of_week (0=Sunday)
    ((2000, 1, 1), 2451544.5, 6),
    ((2024, 1, 1), 2460310.5, 1),
    ((2024, 6, 15), 2460476.5, 6),
    ((2024, 7, 8), 2460499.5, 1),
    ((1582, 10, 15), 2299160.5, 5),
    ((1582, 10, 4), 2299159.5, 4),
    ((622, 7, 16), 1948439.5, 5),
]

HIJRI_ANCHORS = [
    ((1, 1, 1), 1948439.5),
    ((1445, 6, 19), 2460310.5),
    ((1445, 8, 19), 2460369.5),
    ((1445, 9, 1), 2460380.5),
    ((1445, 12, 8), 2460476.5),
    ((1446, 1, 1), 2460499.5),
    ((1446, 1, 15), 2460513.5),
    ((1446, 9, 1), 2460735.5),
]


@pytest.mark.parametrize("ymd,jd,dow", GREGORIAN_ANCHORS)
def test_gregorian_anchor(ymd, jd, dow):
    assert greg.gregorian_to_jdn(*ymd) == jd
    assert greg.jdn_to_ymd(jd) == ymd
    assert greg.day_of_week(jd) == dow


@pytest.mark.parametrize("ymd,jd", HIJRI_ANCHORS)
def test_hijri_anchor(ymd, jd):
    assert hijri.hijri_to_jdn(*ymd) == jd
    assert hijri.jdn_to_ymd(jd) == ymd


def test_epoch_is_friday_16_july_622():
    d = hijri.jdn_to_hijri(HIJRI_EPOCH_JD)
    assert d.ymd == (1, 1, 1)
    assert d.day_of_week_name == "Friday"
    assert greg.jdn_to_gregorian(HIJRI_EPOCH_JD).ymd == (622, 7, 16)


def test_reform_is_consecutive():
    # Thursday 4 October 1582 (Julian) is followed by Friday 15 October 1582
    jd = greg.gregorian_to_jdn(1582, 10, 4)
    assert greg.jdn_to_ymd(jd + 1) == (1582, 10, 15)


def test_leap_rules():
    assert greg.is_gregorian_leap_year(2000)
    assert greg.is_gregorian_leap_year(2024)
    assert not greg.is_gregorian_leap_year(1900)
    assert not greg.is_gregorian_leap_year(2023)

    # February follows the Julian rule before the reform
    assert greg.gregorian_month_length(1500, 2) == 29
    assert greg.gregorian_month_length(1900, 2) == 28
    assert greg.gregorian_month_length(2024, 2) == 29


def test_hijri_cycle_shape():
    leaps = [y for y in range(1, 31) if hijri.is_hijri_leap_year(y)]
    assert len(leaps) == 11
    assert sum(hijri.hijri_year_length(y) for y in range(1, 31)) == 10631
    assert TABULAR.cycle_days == 10631

    assert hijri.is_hijri_leap_year(1445)
    assert not hijri.is_hijri_leap_year(1446)
    assert hijri.hijri_month_length(1445, 12) == 30
    assert hijri.hijri_month_length(1446, 12) == 29
    assert [hijri.hijri_month_length(1446, m) for m in range(1, 12)] == [30, 29] * 5 + [30]


def test_days_before_year_matches_summation():
    assert hijri.days_before_year(1) == 0
    assert hijri.days_before_year(1445) == 511705
    for y in (2, 31, 61, 1000, 1446):
        assert hijri.days_before_year(y) == sum(hijri.hijri_year_length(k) for k in range(1, y))


def test_day_of_hijri_year():
    assert hijri.day_of_hijri_year(1446, 1, 1) == 1
    assert hijri.day_of_hijri_year(1445, 9, 1) == 237
    assert hijri.day_of_hijri_year(1445, 12, 30) == 355


def test_fraction_of_a_day_is_truncated():
    jd = greg.gregorian_to_jdn(2024, 1, 1)
    assert greg.jdn_to_ymd(jd + 0.999) == (2024, 1, 1)
    assert hijri.jdn_to_ymd(jd + 0.999) == (1445, 6, 19)
    assert greg.midnight(jd + 0.7) == jd


def test_random_days_round_trip_and_stay_contiguous():
    random.seed(42)
    start = greg.gregorian_to_jdn(622, 7, 16)
    end = greg.gregorian_to_jdn(2500, 12, 31)

    for _ in range(1500):
        jd = start + random.randint(0, int(end - start) - 1)

        g = greg.jdn_to_ymd(jd)
        h = hijri.jdn_to_ymd(jd)
        assert greg.gregorian_to_jdn(*g) == jd
        assert hijri.hijri_to_jdn(*h) == jd

        # the next civil day is the next label in both calendars
        h2 = hijri.jdn_to_ymd(jd + 1)
        if h2[2] != 1:
            assert h2 == (h[0], h[1], h[2] + 1)
        else:
            assert h[2] == hijri.hijri_month_length(h[0], h[1])


def test_hijri_params_reject_bad_cycle():
    with pytest.raises(ValueError):
        HijriParams(epoch_jd=HIJRI_EPOCH_JD, leap_residues=(2, 2))
    with pytest.raises(ValueError):
        HijriParams(epoch_jd=HIJRI_EPOCH_JD, leap_residues=(31,))


def test_hijri_params_mean_year_matches_cycle():
    assert TABULAR.mean_year_days == pytest.approx(TABULAR.cycle_days / TABULAR.cycle_years, abs=1e-5)
    assert not hasattr(TABULAR, "mean_month_days")
