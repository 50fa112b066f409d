"""
Anchor checks of Gregorian -> Hijri conversion, within +-1 year and month
and +-2 days of the expected Hijri date.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from calhijri.convert import gregorian_to_hijri

logger = logging.getLogger(__name__)

YMD = Tuple[int, int, int]

ANCHORS: Tuple[Tuple[str, YMD, YMD], ...] = (
    ("Islamic Epoch", (622, 7, 16), (1, 1, 1)),
    ("Modern Date 1", (2024, 1, 1), (1445, 6, 19)),
    ("Leap Year Test", (2024, 2, 29), (1445, 8, 19)),
)

YEAR_TOL, MONTH_TOL, DAY_TOL = 1, 1, 2


@dataclass(frozen=True)
class CaseResult:
    test: str
    passed: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class AccuracyReport:
    passed: int
    failed: int
    results: Tuple[CaseResult, ...]


def _within(got: YMD, expected: YMD) -> bool:
    return (
        abs(got[0] - expected[0]) <= YEAR_TOL
        and abs(got[1] - expected[1]) <= MONTH_TOL
        and abs(got[2] - expected[2]) <= DAY_TOL
    )


def check_anchor(name: str, greg: YMD, expected: YMD) -> CaseResult:
    res = gregorian_to_hijri(*greg)
    if not res.success:
        return CaseResult(name, False, res.error)
    got = res.date.ymd
    if _within(got, expected):
        return CaseResult(name, True)
    return CaseResult(
        name, False,
        f"Expected {expected[0]}/{expected[1]}/{expected[2]}, got {got[0]}/{got[1]}/{got[2]}",
    )


def check_conversion_accuracy(anchors=ANCHORS) -> AccuracyReport:
    results: List[CaseResult] = []
    for name, greg, expected in anchors:
        try:
            results.append(check_anchor(name, greg, expected))
        except Exception as e:  # noqa: BLE001
            logger.exception("Accuracy check %r raised", name)
            results.append(CaseResult(name, False, str(e)))

    passed = sum(1 for r in results if r.passed)
    return AccuracyReport(passed=passed, failed=len(results) - passed, results=tuple(results))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check Gregorian -> Hijri conversion against fixed anchor dates.")
    p.parse_args(argv)

    report = check_conversion_accuracy()
    for r in report.results:
        status = "PASS" if r.passed else "FAIL"
        print(f"{status}  {r.test}" + (f"  ({r.error})" if r.error else ""))
    print(f"\npassed={report.passed} failed={report.failed}")
    return 0 if report.failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
