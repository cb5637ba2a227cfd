"""ethiocal public API.

Ethiopian <-> Gregorian conversion with East Africa Time clocks, and
locale-aware formatting. Most users only need the names re-exported here.
"""

from .api import (
    to_gregorian_instant,
    to_ethiopian_datetime,
    format,
    format_time,
    format_gregorian,
    FormatOptions,
    is_ethiopian_leap,
    is_gregorian_leap,
    days_in_pagume,
    days_in_month,
    days_in_year,
    new_year_gregorian_date,
    ethiopian_from_gregorian_date,
    gregorian_date_of,
    add_days,
    weekday_index,
    today,
    is_within,
    new_year_day,
    month_bounds,
    month_days,
    prev_month,
    next_month,
    first_day_of_month,
    last_day_of_month,
)
from .core.errors import EthiocalError, OutOfRangeFieldError, UnsupportedLocaleWarning
from .core.types import EthiopianDate, EthiopianDateTime
from .locales import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    ETHIOPIAN_MONTH_NAMES,
    SUPPORTED_LOCALES,
    DEFAULT_LOCALE,
    resolve_locale,
    short_month_name,
)

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
    "EthiopianDate",
    "EthiopianDateTime",
    "EthiocalError",
    "OutOfRangeFieldError",
    "UnsupportedLocaleWarning",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "ETHIOPIAN_MONTH_NAMES",
    "short_month_name",
    "SUPPORTED_LOCALES",
    "DEFAULT_LOCALE",
    "resolve_locale",
]
