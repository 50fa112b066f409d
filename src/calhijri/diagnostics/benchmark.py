from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import List, Tuple

from calhijri.arithmetic import bulk_convert_dates

# Hijri -> Gregorian leg is capped, as a sample is enough to time it
HIJRI_SAMPLE_CAP = 500


@dataclass(frozen=True)
class BenchmarkReport:
    gregorian_to_hijri_ms: float
    hijri_to_gregorian_ms: float
    average_per_conversion_ms: float
    conversions: int


def sample_dates(n: int) -> List[Tuple[int, int, int]]:
    """Deterministic valid Gregorian dates (day <= 28) spread from 2000 on."""
    return [(2000 + i // 365, i % 12 + 1, i % 28 + 1) for i in range(n)]


def benchmark_conversions(iterations: int = 1000) -> BenchmarkReport:
    if iterations < 1:
        raise ValueError("iterations must be >= 1")

    t0 = time.perf_counter()
    forward = bulk_convert_dates(sample_dates(iterations), "gregorian", "hijri")
    g2h_ms = (time.perf_counter() - t0) * 1000.0

    hijri = [r.date.ymd for r in forward if r.success][: min(iterations, HIJRI_SAMPLE_CAP)]

    t0 = time.perf_counter()
    backward = bulk_convert_dates(hijri, "hijri", "gregorian")
    h2g_ms = (time.perf_counter() - t0) * 1000.0

    total = len(forward) + len(backward)
    return BenchmarkReport(
        gregorian_to_hijri_ms=g2h_ms,
        hijri_to_gregorian_ms=h2g_ms,
        average_per_conversion_ms=(g2h_ms + h2g_ms) / total,
        conversions=total,
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Time bulk Gregorian <-> Hijri conversions.")
    p.add_argument("--N", type=int, default=1000, help="Number of Gregorian dates to convert.")
    args = p.parse_args(argv)

    r = benchmark_conversions(args.N)
    print(f"gregorian -> hijri : {r.gregorian_to_hijri_ms:.3f} ms")
    print(f"hijri -> gregorian : {r.hijri_to_gregorian_ms:.3f} ms")
    print(f"per conversion     : {r.average_per_conversion_ms:.5f} ms  ({r.conversions} conversions)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
