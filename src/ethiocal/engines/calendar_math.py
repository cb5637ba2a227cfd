"""
ethiocal.engines.calendar_math
------------------------------
Leap predicates, month lengths and the Gregorian anchor of Meskerem 1.

Meskerem 1 of EC year y falls in Gregorian year y + 7, on 11 September, or
on 12 September when Gregorian year y + 8 is leap. Two consecutive anchors
are therefore 365 + is_gregorian_leap(y + 9) days apart, which fixes the
length of Pagume: EC year y is leap exactly when y + 9 is a Gregorian leap
year. For New Years in 1899-2097 (EC 1892-2090) this is the traditional
y % 4 == 3 rule.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.errors import OutOfRangeFieldError
from ..core.time import from_jdn, ymd_to_jdn

MIN_YEAR = 1
# Last EC year whose every Gregorian instant fits in datetime (years 1-9999).
MAX_YEAR = 9991

MONTHS_PER_YEAR = 13
DAYS_PER_MONTH = 30
PAGUME = 13


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_ethiopian_leap(year: int) -> bool:
    """True iff Pagume of EC `year` has six days."""
    return is_gregorian_leap(year + 9)


def is_ethiopian_leap_traditional(year: int) -> bool:
    """The bare 4-year cycle; agrees with is_ethiopian_leap for EC 1892-2090."""
    return year % 4 == 3


def days_in_pagume(year: int) -> int:
    return 6 if is_ethiopian_leap(year) else 5


def days_in_month(year: int, month: int) -> int:
    check_field("month", month, 1, MONTHS_PER_YEAR)
    if month == PAGUME:
        return days_in_pagume(year)
    return DAYS_PER_MONTH


def days_in_year(year: int) -> int:
    return 12 * DAYS_PER_MONTH + days_in_pagume(year)


def new_year_jdn(year: int) -> int:
    """JDN of Meskerem 1 of EC `year`. Pure integer arithmetic, no range limit."""
    sep_day = 12 if is_gregorian_leap(year + 8) else 11
    return ymd_to_jdn(year + 7, 9, sep_day)


def new_year_gregorian_date(year: int) -> date:
    """Gregorian date of Meskerem 1 of EC `year`."""
    check_field("year", year, MIN_YEAR)
    return from_jdn(new_year_jdn(year))


def check_field(field: str, value: int, low: int, high: Optional[int] = None) -> None:
    if value < low or (high is not None and value > high):
        raise OutOfRangeFieldError(field, value, low, high)


def validate_date(year: int, month: int, day: int) -> None:
    check_field("year", year, MIN_YEAR, MAX_YEAR)
    check_field("month", month, 1, MONTHS_PER_YEAR)
    check_field("day", day, 1, days_in_month(year, month))


def validate_clock(hour: int, minute: int, second: int) -> None:
    check_field("hour", hour, 0, 23)
    check_field("minute", minute, 0, 59)
    check_field("second", second, 0, 59)


def day_of_year(month: int, day: int) -> int:
    """Zero-based offset of (month, day) from Meskerem 1."""
    return (month - 1) * DAYS_PER_MONTH + (day - 1)
