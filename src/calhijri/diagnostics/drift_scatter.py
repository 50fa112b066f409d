#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

from calhijri.engines.gregorian import gregorian_to_jdn, jdn_to_gregorian
from calhijri.engines.hijri import hijri_to_jdn
from calhijri.engines.tables import RAMADAN


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calhijri[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calhijri[diagnostics]"') from e


def gregorian_day_of_year(jd: float) -> Tuple[int, int]:
    """(Gregorian year, day-of-year with Jan 1 = 1) of the civil day ``jd``."""
    g = jdn_to_gregorian(jd)
    return g.year, int(jd - gregorian_to_jdn(g.year, 1, 1)) + 1


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int, *, month: int = RAMADAN):
    """x = Gregorian year, y = day-of-year on which 1 ``month`` falls, one point per Hijri year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years, dtype=float)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        gy, doy = gregorian_day_of_year(hijri_to_jdn(int(Y), month, 1))
        x[i] = float(gy)
        y[i] = float(doy)

    return x, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of where 1 Ramadan falls in the Gregorian year.")
    p.add_argument("--from-year", type=int, default=1300, help="First Hijri year.")
    p.add_argument("--to-year", type=int, default=1500, help="Last Hijri year.")
    p.add_argument("--month", type=int, default=RAMADAN, help="Hijri month whose first day is plotted (default: 9).")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="ramadan_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")
    if not 1 <= args.month <= 12:
        raise SystemExit("--month must be in 1..12")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title(f"1st of Hijri month {args.month} across the Gregorian year")

    x, y = build_series(np, args.from_year, args.to_year, month=args.month)
    ax.scatter(x, y, s=12, marker="o", c="tab:green", linewidths=0.0, alpha=0.5)

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="0.30", linewidth=1.8)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
