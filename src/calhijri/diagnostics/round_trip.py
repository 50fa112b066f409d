from __future__ import annotations

import argparse
import random

from calhijri.convert import convert_ymd
from calhijri.core.types import Calendar
from calhijri.engines.gregorian import gregorian_to_jdn, jdn_to_gregorian
from calhijri.engines.hijri import jdn_to_hijri
from calhijri.parsing import parse_ymd


def parse_date(s: str) -> float:
    y, m, d = parse_ymd(s)
    return gregorian_to_jdn(y, m, d)


def random_jd(start: float, end: float) -> float:
    return start + random.randint(0, int(end - start))


def _label(calendar: Calendar, jd: float):
    return (jdn_to_hijri(jd) if calendar == "hijri" else jdn_to_gregorian(jd)).ymd


def roundtrip_test(
    source: Calendar,
    target: Calendar,
    N: int,
    start: float,
    end: float,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jd = random_jd(start, end)
        d0 = _label(source, jd)

        fwd = convert_ymd(*d0, source, target)
        back = convert_ymd(*fwd.date.ymd, target, source) if fwd.success else fwd
        if not back.success or back.date.ymd != d0 or back.date.julian_day != jd:
            failures += 1
            print(f"\nFAIL ({source} -> {target} -> {source})")
            print("jd:", jd)
            print("d0:", d0)
            print("forward:", fwd)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian <-> hijri.")
    p.add_argument("--N", type=int, default=2000, help="Trials per direction.")
    p.add_argument("--start", type=str, default="0622-07-16", help="Start date YYYY-MM-DD (Gregorian).")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD (Gregorian).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per direction.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    directions = [
        ("gregorian", "hijri"),
        ("hijri", "gregorian"),
        ("gregorian", "gregorian"),
        ("hijri", "hijri"),
    ]

    total_fail = 0
    for source, target in directions:
        print(f"Testing {source} -> {target} ...")
        total_fail += roundtrip_test(source, target, N=args.N, start=start, end=end, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
