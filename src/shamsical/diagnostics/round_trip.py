from __future__ import annotations

import argparse
import random
from typing import List, Optional, Tuple

from ..core.time import from_jdn, to_jdn
from ..engines.converter import gregorian_to_solar_hijri, solar_hijri_to_gregorian
from ..engines.month_length import solar_hijri_month_length

Ymd = Tuple[int, int, int]


def _next_solar_hijri(jy: int, jm: int, jd: int) -> Ymd:
    if jd < solar_hijri_month_length(jy, jm):
        return jy, jm, jd + 1
    if jm < 12:
        return jy, jm + 1, 1
    return jy + 1, 1, 1


def sweep(start_year: int, end_year: int, *, max_failures: int = 5) -> List[str]:
    """
    Walk every Gregorian day of [start_year, end_year] and check that

      - Gregorian -> Solar Hijri -> Gregorian is the identity,
      - consecutive Gregorian days map to consecutive Solar Hijri days.

    Returns failure descriptions (empty on success).
    """
    failures: List[str] = []
    first = to_jdn(start_year, 1, 1)
    last = to_jdn(end_year, 12, 31)

    prev: Optional[Ymd] = None
    for jdn in range(first, last + 1):
        g = from_jdn(jdn)
        sh = gregorian_to_solar_hijri(*g)
        back = solar_hijri_to_gregorian(*sh)
        if back != g:
            failures.append(f"round trip {g} -> {sh} -> {back}")
        if prev is not None and _next_solar_hijri(*prev) != sh:
            failures.append(f"not consecutive at {g}: {prev} then {sh}")
        if len(failures) >= max_failures:
            break
        prev = sh
    return failures


def random_trials(start_year: int, end_year: int, n: int, seed: int) -> List[str]:
    rng = random.Random(seed)
    failures: List[str] = []
    first = to_jdn(start_year, 1, 1)
    last = to_jdn(end_year, 12, 31)
    for _ in range(n):
        g = from_jdn(rng.randint(first, last))
        sh = gregorian_to_solar_hijri(*g)
        back = solar_hijri_to_gregorian(*sh)
        if back != g:
            failures.append(f"round trip {g} -> {sh} -> {back}")
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip and continuity checks: gregorian -> solar hijri -> gregorian.")
    p.add_argument("--start", type=int, default=1000, help="First Gregorian year.")
    p.add_argument("--end", type=int, default=3000, help="Last Gregorian year.")
    p.add_argument("--random", type=int, default=0, metavar="N",
                   help="Run N random trials instead of the exhaustive sweep.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.start < 1:
        raise SystemExit("--start must be >= 1")
    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    if args.random:
        failures = random_trials(args.start, args.end, args.random, args.seed)
    else:
        failures = sweep(args.start, args.end, max_failures=args.max_failures)

    for f in failures[: args.max_failures]:
        print("FAIL", f)
    if failures:
        print(f"Round-trip failures: {len(failures)}")
        return 1
    print("All round-trip tests passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
