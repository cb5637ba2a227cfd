"""
ethiocal.engines.formatter
--------------------------
Locale-aware display strings for Ethiopian dates and date-times.

Default layout:  "<Weekday>, <DD> <MonthName> <Year> EC [<Time>]"

Pattern tokens (optional FormatOptions.pattern):

    yyyy yy        year (full / last two digits)
    MMMM MMM       month name / first three characters of it
    MM M           month zero-padded / plain number
    dd d           day zero-padded / plain
    EEEE EEE EEEEE weekday long / short / narrow
    HH H hh h      hour 24h padded / plain, 12h padded / plain
    mm ss a        minute, second, AM|PM
    '...'          literal text; '' is a single quote, in or out of it
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Optional

from ..core.types import EthiopianDate, EthiopianDateTime, EthiopianValue, TimeFormat, WeekdayStyle
from ..locales import DEFAULT_LOCALE, MONTH_NAMES, WEEKDAY_NAMES, resolve_locale, short_month_name
from .converter import to_gregorian_instant, weekday_index

_TOKEN_RE = re.compile(r"'(?:[^']|'')*'|yyyy|yy|MMMM|MMM|MM|M|dd|d|EEEEE|EEEE|EEE|HH|H|hh|h|mm|ss|a")


@dataclass(frozen=True)
class FormatOptions:
    locale: str = DEFAULT_LOCALE
    time_format: TimeFormat = "24h"
    include_time: bool = False
    weekday: WeekdayStyle = "long"
    pattern: Optional[str] = None

    def __post_init__(self) -> None:
        if self.time_format not in ("12h", "24h"):
            raise ValueError("time_format must be '12h' or '24h'")
        if self.weekday not in ("short", "long", "narrow"):
            raise ValueError("weekday must be 'short', 'long' or 'narrow'")


def _as_datetime(value: EthiopianValue) -> EthiopianDateTime:
    if isinstance(value, EthiopianDate):
        return value.start_of_day()
    return value


def _twelve_hour(hour: int) -> int:
    return hour % 12 or 12


def _meridiem(hour: int) -> str:
    return "PM" if hour >= 12 else "AM"


def format_time(value: EthiopianDateTime, time_format: TimeFormat = "24h") -> str:
    if time_format == "24h":
        return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if time_format == "12h":
        return (
            f"{_twelve_hour(value.hour):02d}:{value.minute:02d}:{value.second:02d} "
            f"{_meridiem(value.hour)}"
        )
    raise ValueError("time_format must be '12h' or '24h'")


def _render_pattern(pattern: str, value: EthiopianDateTime, locale: str) -> str:
    weekdays = WEEKDAY_NAMES[locale]
    wd = weekday_index(value)
    fields = {
        "yyyy": str(value.year),
        "yy": f"{value.year % 100:02d}",
        "MMMM": MONTH_NAMES[locale][value.month - 1],
        "MMM": short_month_name(value.month, locale),
        "MM": f"{value.month:02d}",
        "M": str(value.month),
        "dd": f"{value.day:02d}",
        "d": str(value.day),
        "EEEEE": weekdays.narrow[wd],
        "EEEE": weekdays.long[wd],
        "EEE": weekdays.short[wd],
        "HH": f"{value.hour:02d}",
        "H": str(value.hour),
        "hh": f"{_twelve_hour(value.hour):02d}",
        "h": str(_twelve_hour(value.hour)),
        "mm": f"{value.minute:02d}",
        "ss": f"{value.second:02d}",
        "a": _meridiem(value.hour),
    }

    def sub(m: "re.Match[str]") -> str:
        tok = m.group(0)
        if tok.startswith("'"):
            body = tok[1:-1]
            return body.replace("''", "'") if body else "'"
        return fields[tok]

    return _TOKEN_RE.sub(sub, pattern)


def format(value: EthiopianValue, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
    """
    Render an Ethiopian date(-time) for display.

    Keyword overrides are applied on top of `options`, e.g.
    format(d, locale="am", include_time=True). Unknown locales fall back to
    English with an UnsupportedLocaleWarning. Date-only values render the
    start-of-day time when include_time is requested.
    """
    opts = options or FormatOptions()
    if overrides:
        opts = replace(opts, **overrides)

    locale = resolve_locale(opts.locale)
    dt = _as_datetime(value)

    if opts.pattern is not None:
        return _render_pattern(opts.pattern, dt, locale)

    weekday = WEEKDAY_NAMES[locale].style(opts.weekday)[weekday_index(dt)]
    month = MONTH_NAMES[locale][dt.month - 1]
    out = f"{weekday}, {dt.day:02d} {month} {dt.year} EC"
    if opts.include_time:
        out += f" {format_time(dt, opts.time_format)}"
    return out


def format_gregorian(value: EthiopianValue) -> str:
    """UTC instant of `value` as 'YYYY-MM-DD HH:MM:SS'."""
    return to_gregorian_instant(value).isoformat(sep=" ")[:19]
