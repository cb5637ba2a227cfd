from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from .core.time import as_utc, from_jdn
from .core.types import EthiopianDate, EthiopianDateTime, EthiopianValue
from .engines.calendar_math import (
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    check_field,
    days_in_month,
    days_in_pagume,
    days_in_year,
    is_ethiopian_leap,
    is_gregorian_leap,
    new_year_gregorian_date,
    new_year_jdn,
)
from .engines.converter import (
    add_days,
    ethiopian_from_gregorian_date,
    gregorian_date_of,
    paired_jdn,
    to_ethiopian_datetime,
    to_gregorian_instant,
    weekday_index,
)
from .engines.formatter import FormatOptions, format, format_gregorian, format_time

__all__ = [
    "to_gregorian_instant",
    "to_ethiopian_datetime",
    "format",
    "format_time",
    "format_gregorian",
    "FormatOptions",
    "is_ethiopian_leap",
    "is_gregorian_leap",
    "days_in_pagume",
    "days_in_month",
    "days_in_year",
    "new_year_gregorian_date",
    "ethiopian_from_gregorian_date",
    "gregorian_date_of",
    "add_days",
    "weekday_index",
    "today",
    "is_within",
    "new_year_day",
    "month_bounds",
    "month_days",
    "prev_month",
    "next_month",
    "first_day_of_month",
    "last_day_of_month",
]


def today(now: Optional[datetime] = None) -> EthiopianDateTime:
    """Current Ethiopian date-time; `now` defaults to the system clock in UTC."""
    return to_ethiopian_datetime(now if now is not None else datetime.now(timezone.utc))


def is_within(
    value: EthiopianValue,
    *,
    min_instant: Optional[datetime] = None,
    max_instant: Optional[datetime] = None,
) -> bool:
    """
    True iff the UTC instant of `value` lies inside the closed [min, max] window.

    Bounds must be timezone-aware; naive bounds raise ValueError.
    """
    lo = as_utc(min_instant) if min_instant is not None else None
    hi = as_utc(max_instant) if max_instant is not None else None
    t = to_gregorian_instant(value)
    if lo is not None and t < lo:
        return False
    if hi is not None and t > hi:
        return False
    return True


# ============================================================
# Year / month level helpers
# ============================================================

def new_year_day(Y: int, *, as_date: bool = True) -> Dict[str, Any]:
    check_field("year", Y, MIN_YEAR, MAX_YEAR)
    jdn = new_year_jdn(Y)
    out: Dict[str, Any] = {
        "Y": Y,
        "jdn": jdn,
        "is_leap": is_ethiopian_leap(Y),
        "prev_pagume_days": days_in_pagume(Y - 1),
        "instant": to_gregorian_instant(EthiopianDate(Y, 1, 1)),
    }
    if as_date:
        out["date"] = from_jdn(jdn)
    return out


def month_bounds(Y: int, M: int, *, as_date: bool = True) -> Dict[str, Any]:
    n_days = days_in_month(Y, M)
    first_jdn = paired_jdn(EthiopianDate(Y, M, 1))
    last_jdn = first_jdn + n_days - 1

    out: Dict[str, Any] = {"Y": Y, "M": M, "days": n_days, "first_jdn": first_jdn, "last_jdn": last_jdn}
    if as_date:
        out["first_date"] = from_jdn(first_jdn)
        out["last_date"] = from_jdn(last_jdn)
    return out


def month_days(Y: int, M: int) -> List[Dict[str, Any]]:
    """One row per day of an Ethiopian month, with its paired Gregorian date."""
    b = month_bounds(Y, M, as_date=False)
    rows = []
    for day in range(1, b["days"] + 1):
        jdn = b["first_jdn"] + day - 1
        d = EthiopianDate(Y, M, day)
        rows.append({
            "day": day,
            "date": from_jdn(jdn),
            "jdn": jdn,
            "weekday": weekday_index(d),
        })
    return rows


def prev_month(Y: int, M: int) -> Dict[str, int]:
    check_field("month", M, 1, MONTHS_PER_YEAR)
    if M == 1:
        return {"Y": Y - 1, "M": MONTHS_PER_YEAR}
    return {"Y": Y, "M": M - 1}


def next_month(Y: int, M: int) -> Dict[str, int]:
    check_field("month", M, 1, MONTHS_PER_YEAR)
    if M == MONTHS_PER_YEAR:
        return {"Y": Y + 1, "M": 1}
    return {"Y": Y, "M": M + 1}


def first_day_of_month(Y: int, M: int) -> date:
    return month_bounds(Y, M)["first_date"]


def last_day_of_month(Y: int, M: int) -> date:
    return month_bounds(Y, M)["last_date"]
