from __future__ import annotations

import argparse
from datetime import date, datetime, timezone
import logging
import sys
import re
import importlib
import inspect
from typing import Union


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

logger = logging.getLogger(__name__)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_when(s: str) -> Union[date, datetime]:
    """YYYY-MM-DD, or an ISO datetime (naive values are taken as UTC)."""
    if _DATE_RE.match(s):
        return _parse_ymd(s)
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _parse_clock(s: str) -> tuple[int, int, int]:
    m = _TIME_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"invalid time {s!r}, expected HH:MM[:SS]")
    return int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)


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


def _add_format_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--locale", default="en", help="en|am|om|so (default: en)")
    p.add_argument("--time-format", choices=("24h", "12h"), default="24h")
    p.add_argument("--pattern", default=None, help="Token pattern, e.g. \"EEE, dd MMMM yyyy 'EC' HH:mm\"")


def cmd_day(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal day", description="Gregorian -> Ethiopian")
    p.add_argument("when", help="YYYY-MM-DD or ISO datetime (naive = UTC)")
    _add_format_args(p)
    args = p.parse_args(argv)

    when = _parse_when(args.when)
    if isinstance(when, datetime):
        value = ethiocal.to_ethiopian_datetime(when)
        include_time = True
    else:
        value = ethiocal.ethiopian_from_gregorian_date(when)
        include_time = False

    print(value)
    print(ethiocal.format(
        value,
        locale=args.locale,
        time_format=args.time_format,
        include_time=include_time,
        pattern=args.pattern,
    ))
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal to-gregorian", description="Ethiopian -> Gregorian (UTC)")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--time", type=_parse_clock, default=None, help="Ethiopian clock HH:MM[:SS]")
    _add_format_args(p)
    args = p.parse_args(argv)

    d = ethiocal.EthiopianDate(args.year, args.month, args.day)
    value = d.at(*args.time) if args.time is not None else d

    print(ethiocal.format(
        value,
        locale=args.locale,
        time_format=args.time_format,
        include_time=args.time is not None,
        pattern=args.pattern,
    ))
    print(ethiocal.to_gregorian_instant(value).isoformat())
    return 0


def _dispatch(argv: list[str]) -> int:
    # Shortcut: `ethiocal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="ethiocal", description="Ethiopian calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian date or instant -> Ethiopian", add_help=False)
    sub.add_parser("to-gregorian", help="Ethiopian date(-time) -> UTC instant", add_help=False)
    sub.add_parser("pretty-month", help="Print Ethiopian/Gregorian month grids (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print Meskerem 1 table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-rules"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    logger.debug("command %s, args %s", args.cmd, rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("ethiocal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("ethiocal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "ethiocal.diagnostics.round_trip",
            "leap-rules": "ethiocal.diagnostics.leap_rules",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    from ethiocal.core.errors import OutOfRangeFieldError

    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except OutOfRangeFieldError as e:
        print(f"ethiocal: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
