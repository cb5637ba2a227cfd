from __future__ import annotations

from datetime import date
import argparse

import ethiocal
from ethiocal.engines.calendar_math import is_ethiopian_leap_traditional


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Meskerem 1 (Ethiopian New Year) table with Pagume lengths."
    )
    p.add_argument("--from-year", type=int, default=2008)
    p.add_argument("--to-year", type=int, default=2024)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format for the New Year column (default: iso).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Meskerem 1", "UTC instant", "Pagume", "y%4==3"]
    colw = [6, 12, 22, 7, 6]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    mismatches: list[int] = []
    for Y in range(Y0, Y1 + 1):
        ny = ethiocal.new_year_day(Y)
        pagume = ethiocal.days_in_pagume(Y)
        trad = is_ethiopian_leap_traditional(Y)
        if trad != ethiocal.is_ethiopian_leap(Y):
            mismatches.append(Y)
        row = [
            str(Y),
            fmt(ny["date"]),
            ny["instant"].strftime("%Y-%m-%dT%H:%M:%SZ"),
            str(pagume),
            "leap" if trad else "",
        ]
        print("  ".join(v.ljust(w) for v, w in zip(row, colw)))

    if mismatches:
        print(f"\nLeap rule disagreements (Pagume length vs y%4==3): {', '.join(map(str, mismatches))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
