from __future__ import annotations

import argparse

from calhijri.awareness import get_hijri_calendar_month
from calhijri.arithmetic import month_length
from calhijri.engines.gregorian import gregorian_to_jdn, jdn_to_gregorian
from calhijri.engines.hijri import jdn_to_hijri
from calhijri.engines.tables import GREGORIAN_MONTHS


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def to_weeks(pad: int, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    """Lay cells out Sunday-first, ``pad`` blanks before the first day."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(pad)]
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def hijri_month_calendar(Y: int, M: int) -> list[list[tuple[str, str]]]:
    grid = get_hijri_calendar_month(Y, M)
    cells = []
    for d in grid.days:
        g = d.gregorian
        top = f"{d.day:2d}" + ("*" if d.is_weekend else "")
        cells.append(cell(top, f"{g.month:02d}-{g.day:02d}"))

    weeks = to_weeks(grid.days[0].gregorian.day_of_week, cells)
    first, last = grid.days[0].gregorian, grid.days[-1].gregorian
    title = f"Hijri month  {grid.month_name} {Y} AH  ({first.year}-{first.month:02d}-{first.day:02d} .. {last.year}-{last.month:02d}-{last.day:02d})"
    print_grid(title, weeks)
    return weeks


def gregorian_month_calendar(gy: int, gm: int) -> list[list[tuple[str, str]]]:
    jd0 = gregorian_to_jdn(gy, gm, 1)
    cells = []
    for i in range(month_length(gy, gm, "gregorian")):
        g = jdn_to_gregorian(jd0 + i)
        if g.month != gm:
            break  # October 1582 has only 21 days
        h = jdn_to_hijri(jd0 + i)
        cells.append(cell(f"{g.day:2d}", f"{h.month:02d}-{h.day:02d}"))

    weeks = to_weeks(jdn_to_gregorian(jd0).day_of_week, cells)
    print_grid(f"Gregorian month  {GREGORIAN_MONTHS[gm - 1].name} {gy}", weeks)
    return weeks


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hijri-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--hijri", nargs=2, type=int, metavar=("Y", "M"),
                   help="Hijri month to print: Y M (e.g. 1446 9)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 3)")
    args = p.parse_args(argv)

    if not args.hijri and not args.greg:
        hijri_month_calendar(1446, 9)
        gregorian_month_calendar(2025, 3)
        return 0

    if args.hijri:
        Y, M = args.hijri
        if not 1 <= M <= 12:
            raise SystemExit("Hijri month must be in 1..12")
        hijri_month_calendar(Y, M)

    if args.greg:
        gy, gm = args.greg
        if not 1 <= gm <= 12:
            raise SystemExit("Gregorian month must be in 1..12")
        gregorian_month_calendar(gy, gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
