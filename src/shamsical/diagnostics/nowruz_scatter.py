#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

from ..engines.converter import nowruz


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "shamsical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "shamsical[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian year and day-of-March of Nowruz (Feb 29 counts as day 0)."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        gy, gm, gd = nowruz(int(Y))
        x[i] = gy
        y[i] = float(gd if gm == 3 else gd - 29)
    return x, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian day of Nowruz across Solar Hijri years.")
    p.add_argument("--from-year", type=int, default=1300)
    p.add_argument("--to-year", type=int, default=1500)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.from_year < 1:
        raise SystemExit("--from-year must be >= 1")
    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.from_year, args.to_year)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=12, marker="o", c="tab:blue", linewidths=0.0, alpha=0.6)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day of March")
    ax.set_title("Nowruz (1 Farvardin) in the Gregorian calendar")

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    print(f"Range: March {int(y.min())} .. March {int(y.max())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
