"""
calhijri.engines.specs
----------------------
Pure data parameters for the two civil calendars. These are the only
configuration the engine has: frozen, validated once at import, shared
read-only by every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# ============================================================
# HIJRI (TABULAR) CONSTANTS
# ============================================================

# 1 Muharram 1 AH = 16 July 622 (civil), at midnight.
HIJRI_EPOCH_JD = 1948439.5

# Positions (year mod 30) of the 11 leap years of the 30-year cycle.
HIJRI_LEAP_RESIDUES = (2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29)


# ============================================================
# GREGORIAN CONSTANTS
# ============================================================

# First day of the Gregorian reform; earlier civil dates are Julian.
GREGORIAN_REFORM_YMD = (1582, 10, 15)
GREGORIAN_REFORM_JD = 2299160.5


@dataclass(frozen=True)
class HijriParams:
    """
    Tabular Hijri calendar: a fixed 30-year cycle of 354/355-day years.
    """
    epoch_jd: float
    leap_residues: Tuple[int, ...]

    cycle_years: int = 30
    mean_year_days: float = 354.36667

    min_year: int = 1
    max_year: int = 2000

    def __post_init__(self) -> None:
        if self.cycle_years <= 0:
            raise ValueError("cycle_years must be positive")
        if len(set(self.leap_residues)) != len(self.leap_residues):
            raise ValueError("leap_residues must be distinct")
        if any(not (0 <= r < self.cycle_years) for r in self.leap_residues):
            raise ValueError("leap_residues must lie in 0..cycle_years-1")
        if not (1 <= self.min_year <= self.max_year):
            raise ValueError("Require 1 <= min_year <= max_year")

    @property
    def common_year_days(self) -> int:
        return 354

    @property
    def cycle_days(self) -> int:
        """Days in one full cycle: 30*354 + 11 = 10631 for the standard cycle."""
        return self.cycle_years * self.common_year_days + len(self.leap_residues)


@dataclass(frozen=True)
class GregorianParams:
    """
    Civil (Gregorian from the reform onward) calendar bounds and warnings.
    """
    reform_ymd: Tuple[int, int, int]
    reform_jd: float

    min_year: int = 1
    max_year: int = 9999

    islamic_epoch_year: int = 622   # warn below this
    future_horizon_years: int = 100  # warn beyond current year + this

    def __post_init__(self) -> None:
        if not (1 <= self.min_year <= self.max_year):
            raise ValueError("Require 1 <= min_year <= max_year")
        y, m, d = self.reform_ymd
        if not (1 <= m <= 12 and 1 <= d <= 31):
            raise ValueError("reform_ymd must be a calendar date")
        if self.future_horizon_years < 0:
            raise ValueError("future_horizon_years must be >= 0")


TABULAR = HijriParams(epoch_jd=HIJRI_EPOCH_JD, leap_residues=HIJRI_LEAP_RESIDUES)
CIVIL = GregorianParams(reform_ymd=GREGORIAN_REFORM_YMD, reform_jd=GREGORIAN_REFORM_JD)
