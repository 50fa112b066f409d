from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from datetime import date
from typing import Tuple

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    from calhijri.core.errors import UnparsableText
    from calhijri.parsing import parse_ymd

    try:
        return parse_ymd(s)
    except UnparsableText as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _parse_today(s: str) -> date:
    try:
        return date(*_parse_ymd(s))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid date: {s}") from e


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_result(res, language: str) -> int:
    from calhijri.formatting import format_date

    if not res.success:
        print(f"error ({res.kind.value}): {res.error}", file=sys.stderr)
        return 1
    d = res.date
    print(f"{d.year:04d}-{d.month:02d}-{d.day:02d}  {format_date(d, 'full', language)}")
    for w in res.warnings:
        print(f"warning: {w}", file=sys.stderr)
    return 0


def cmd_convert(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri convert", description="Convert a date between Gregorian and Hijri")
    p.add_argument("date", help="DD/MM/YYYY, YYYY-MM-DD, ... (Arabic-Indic digits allowed)")
    p.add_argument("--from", dest="from_calendar", choices=["gregorian", "hijri"], default="gregorian")
    p.add_argument("--to", dest="to_calendar", choices=["gregorian", "hijri"], default=None,
                   help="target calendar (default: the other one)")
    p.add_argument("--lang", choices=["ar", "en"], default="en")
    args = p.parse_args(argv)

    target = args.to_calendar
    if target is None:
        target = "hijri" if args.from_calendar == "gregorian" else "gregorian"

    res = calhijri.convert(args.date, args.from_calendar, target)
    return _print_result(res, args.lang)


def cmd_day(argv: list[str]) -> int:
    import calhijri
    from calhijri.core.errors import CalhijriError

    p = argparse.ArgumentParser(prog="calhijri day", description="Gregorian -> Hijri day info")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--calendar", choices=["gregorian", "hijri"], default="gregorian",
                   help="calendar the date is given in")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        info = calhijri.day_info(args.date, calendar=args.calendar, attributes=tuple(args.attr))
    except (CalhijriError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(info)
    return 0


def cmd_today(argv: list[str]) -> int:
    from calhijri.awareness import get_current_dates, get_days_remaining_in_hijri_month
    from calhijri.formatting import format_gregorian_date, format_hijri_date

    p = argparse.ArgumentParser(prog="calhijri today", description="Today in both calendars")
    p.add_argument("--lang", choices=["ar", "en"], default="en")
    p.add_argument("--today", type=_parse_today, default=None, help="override today's date (YYYY-MM-DD)")
    args = p.parse_args(argv)

    now = get_current_dates(args.today)
    print(f"Gregorian: {format_gregorian_date(now.gregorian, 'full', args.lang)}")
    print(f"Hijri    : {format_hijri_date(now.hijri, 'full', args.lang)}")
    print(f"JD       : {now.julian_day}")
    print(f"Days left in {now.hijri.month_name}: {get_days_remaining_in_hijri_month(args.today)}")
    return 0


def cmd_ramadan(argv: list[str]) -> int:
    from calhijri.awareness import get_days_until_ramadan, get_upcoming_islamic_events, is_currently_ramadan

    p = argparse.ArgumentParser(prog="calhijri ramadan", description="Ramadan countdown and upcoming events")
    p.add_argument("--today", type=_parse_today, default=None, help="override today's date (YYYY-MM-DD)")
    p.add_argument("--events", type=int, default=5, help="number of upcoming events to list")
    args = p.parse_args(argv)

    if is_currently_ramadan(args.today):
        print("It is Ramadan.")
    else:
        print(f"Days until Ramadan: {get_days_until_ramadan(args.today)}")
    for e in get_upcoming_islamic_events(args.events, args.today):
        print(f"  {e.hijri_day:2d}/{e.hijri_month:02d}  {e.name} ({e.name_ar})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calhijri", description="Gregorian / Hijri calendar toolkit CLI.")
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("day", help="Gregorian -> Hijri day info")
    sub.add_parser("today", help="Today in both calendars")
    sub.add_parser("ramadan", help="Days until Ramadan and upcoming events")

    # diagnostics
    sub.add_parser("pretty-month", help="Print Hijri/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print 1 Muharram / 1 Ramadan table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["accuracy", "validation-suite", "benchmark", "round-trip", "drift-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _configure_logging(args.log_level)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "ramadan":
        return cmd_ramadan(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calhijri.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("calhijri.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "accuracy": "calhijri.diagnostics.accuracy",
            "validation-suite": "calhijri.diagnostics.validation_suite",
            "benchmark": "calhijri.diagnostics.benchmark",
            "round-trip": "calhijri.diagnostics.round_trip",
            "drift-scatter": "calhijri.diagnostics.drift_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
