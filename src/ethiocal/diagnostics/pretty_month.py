from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import ethiocal
from ethiocal.locales import WEEKDAY_NAMES, resolve_locale


def dow_header(locale: str = "en", w: int = 6) -> str:
    names = WEEKDAY_NAMES[resolve_locale(locale)].short
    return " ".join(n[:w].ljust(w) for n in names).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def layout_weeks(pad: int, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    """Lay cells out Monday-first, `pad` blank cells before the first one."""
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


def render_grid(title: str, weeks: list[list[tuple[str, str]]], locale: str = "en") -> str:
    header = dow_header(locale)
    lines = [title, header, "-" * len(header)]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def ethiopian_month_calendar(Y: int, M: int, locale: str = "en") -> str:
    rows = ethiocal.month_days(Y, M)
    cells = [cell(f"{r['day']:2d}", f"{r['date'].month:02d}-{r['date'].day:02d}") for r in rows]
    weeks = layout_weeks(rows[0]["weekday"], cells)

    name = ethiocal.MONTH_NAMES[resolve_locale(locale)][M - 1]
    title = (
        f"Ethiopian month  {name} {Y} EC [{ethiocal.ETHIOPIAN_MONTH_NAMES[M - 1]}]"
        f"  ({rows[0]['date']} .. {rows[-1]['date']})"
    )
    return render_grid(title, weeks, locale)


def gregorian_month_calendar(gy: int, gm: int, locale: str = "en") -> str:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        e = ethiocal.ethiopian_from_gregorian_date(d)
        cells.append(cell(f"{d.day:2d}", f"{e.month:02d}-{e.day:02d}"))
        d += timedelta(days=1)
    weeks = layout_weeks(first.weekday(), cells)  # Monday=0

    title = f"Gregorian month  {gy}-{gm:02d}"
    return render_grid(title, weeks, locale)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print an Ethiopian-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--eth", nargs=2, type=int, metavar=("Y", "M"),
                   help="Ethiopian month to print: Y M (e.g. 2017 13)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 9)")
    p.add_argument("--locale", default="en", help="en|am|om|so (default: en)")
    args = p.parse_args(argv)

    if not args.eth and not args.greg:
        # sensible default demo: the turn of EC 2017 -> 2018
        print(ethiopian_month_calendar(2017, 13, args.locale))
        print(gregorian_month_calendar(2025, 9, args.locale))
        return 0

    if args.eth:
        Y, M = args.eth
        print(ethiopian_month_calendar(Y, M, args.locale))

    if args.greg:
        gy, gm = args.greg
        print(gregorian_month_calendar(gy, gm, args.locale))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
