from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Tuple

from calhijri.convert import date_to_hijri, gregorian_to_hijri, hijri_to_date, hijri_to_gregorian
from calhijri.core import time as civil_time
from calhijri.engines.hijri import is_hijri_leap_year
from calhijri.engines.validate import validate_gregorian_date, validate_hijri_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuiteCase:
    test: str
    passed: bool
    message: str


@dataclass(frozen=True)
class SuiteReport:
    passed: int
    failed: int
    details: Tuple[SuiteCase, ...]


def gregorian_leap_day() -> bool:
    return validate_gregorian_date(2024, 2, 29).is_valid and not validate_gregorian_date(2023, 2, 29).is_valid


def hijri_month_boundary() -> bool:
    # Safar has 29 days, Muharram 30
    return not validate_hijri_date(1446, 2, 30).is_valid and validate_hijri_date(1446, 1, 30).is_valid


def hijri_leap_dhu_al_hijjah() -> bool:
    return all(
        validate_hijri_date(y, 12, 30).is_valid == is_hijri_leap_year(y)
        for y in (1445, 1446)
    )


def round_trip_stability() -> bool:
    h = gregorian_to_hijri(2024, 6, 15)
    if not h.success:
        return False
    g = hijri_to_gregorian(*h.date.ymd)
    return g.success and g.date.ymd == (2024, 6, 15)


def current_date_round_trip(today: Optional[date] = None) -> bool:
    now = today if today is not None else civil_time.today()
    h = date_to_hijri(now)
    if not h.success:
        return False
    return hijri_to_date(*h.date.ymd) == now


CHECKS: Tuple[Tuple[str, Callable[[], bool]], ...] = (
    ("Gregorian Leap Year Validation", gregorian_leap_day),
    ("Hijri Month Boundary Validation", hijri_month_boundary),
    ("Hijri Leap Year Dhu al-Hijjah", hijri_leap_dhu_al_hijjah),
    ("Round-trip Conversion Accuracy", round_trip_stability),
    ("Current Date Conversion", current_date_round_trip),
)


def run_validation_suite(checks=CHECKS) -> SuiteReport:
    details: List[SuiteCase] = []
    for name, fn in checks:
        try:
            ok = bool(fn())
            details.append(SuiteCase(name, ok, "Test passed" if ok else "Test failed"))
        except Exception as e:  # noqa: BLE001
            logger.exception("Validation check %r raised", name)
            details.append(SuiteCase(name, False, str(e)))

    passed = sum(1 for c in details if c.passed)
    return SuiteReport(passed=passed, failed=len(details) - passed, details=tuple(details))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Run the calendar validation suite.")
    p.parse_args(argv)

    report = run_validation_suite()
    for c in report.details:
        print(f"{'PASS' if c.passed else 'FAIL'}  {c.test}: {c.message}")
    print(f"\npassed={report.passed} failed={report.failed}")
    return 0 if report.failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
