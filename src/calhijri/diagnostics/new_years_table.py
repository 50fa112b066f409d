from __future__ import annotations

import argparse
from typing import List, Tuple

from calhijri.convert import hijri_to_gregorian
from calhijri.core.types import CalendarDate
from calhijri.engines.hijri import hijri_year_length
from calhijri.engines.tables import RAMADAN


def mmdd(d: CalendarDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def iso(d: CalendarDate) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def year_rows(Y0: int, Y1: int) -> List[Tuple[int, CalendarDate, CalendarDate, int]]:
    """(hijri_year, 1 Muharram, 1 Ramadan, year length) per Hijri year."""
    rows = []
    for Y in range(Y0, Y1 + 1):
        new_year = hijri_to_gregorian(Y, 1, 1)
        ramadan = hijri_to_gregorian(Y, RAMADAN, 1)
        if not (new_year.success and ramadan.success):
            raise SystemExit(f"Hijri year {Y} is out of range: {new_year.error or ramadan.error}")
        rows.append((Y, new_year.date, ramadan.date, hijri_year_length(Y)))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian dates of 1 Muharram and 1 Ramadan for a range of Hijri years."
    )
    p.add_argument("--from-year", type=int, default=1440)
    p.add_argument("--to-year", type=int, default=1460)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=3,
        help="After the table, list the Ramadan starts that fall in this Gregorian month (default: 3=March).",
    )
    args = p.parse_args(argv)

    fmt = mmdd if args.dates == "mmdd" else iso

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "1 Muharram", "1 Ramadan", "Days"]
    colw = [5, 10, 10, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[int, CalendarDate]] = []
    for Y, new_year, ramadan, length in year_rows(Y0, Y1):
        print("  ".join([str(Y).ljust(colw[0]), fmt(new_year).ljust(colw[1]), fmt(ramadan).ljust(colw[2]), str(length)]))
        if ramadan.month == args.list_month:
            hits.append((Y, ramadan))

    print(f"\nRamadan starts in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    for Y, d in hits:
        print(f"{iso(d)}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
