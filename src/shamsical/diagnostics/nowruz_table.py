from __future__ import annotations

import argparse

from ..engines.converter import nowruz
from ..engines.leap import is_solar_hijri_leap
from ..engines.weekday import weekday_name


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the Gregorian date of Nowruz for a range of Solar Hijri years.")
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1425)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian date (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y0 < 1:
        raise SystemExit("--from-year must be >= 1")
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Nowruz", "Weekday", "Leap"]
    colw = [5, 10, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        gy, gm, gd = nowruz(Y)
        d = f"{gm:02d}-{gd:02d}" if args.dates == "mmdd" else f"{gy:04d}-{gm:02d}-{gd:02d}"
        row = [str(Y), d, weekday_name(gy, gm, gd), "yes" if is_solar_hijri_leap(Y) else ""]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
