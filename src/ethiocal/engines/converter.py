"""
ethiocal.engines.converter
--------------------------
Exact mapping between Ethiopian civil date-times and UTC instants.

Every conversion goes through one linear timestamp (JDN + seconds), so the
clock offsets and the calendar day are never adjusted independently:

    UTC = paired Gregorian day + Ethiopian clock + 6 h (diurnal) - 3 h (EAT)

The "paired" Gregorian day of an Ethiopian day is the one on whose 06:00 EAT
the Ethiopian day begins.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Tuple, TypeVar

from ..core.errors import OutOfRangeFieldError
from ..core.time import (
    DIURNAL_OFFSET_SECONDS,
    EAT_OFFSET_SECONDS,
    SECONDS_PER_DAY,
    as_utc,
    from_jdn,
    seconds_of_day,
    to_jdn,
    utc_datetime,
    weekday_sunday_first,
)
from ..core.types import EthiopianDate, EthiopianDateTime, EthiopianValue
from .calendar_math import DAYS_PER_MONTH, MAX_YEAR, MIN_YEAR, day_of_year, new_year_jdn

logger = logging.getLogger(__name__)

V = TypeVar("V", EthiopianDate, EthiopianDateTime)


# ---------------------------------------------------------
# Calendar day <-> JDN
# ---------------------------------------------------------

def paired_jdn(value: EthiopianValue) -> int:
    """JDN of the Gregorian day paired with the Ethiopian date of `value`."""
    return new_year_jdn(value.year) + day_of_year(value.month, value.day)


def ethiopian_ymd_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Inverse of paired_jdn on the calendar-day level."""
    if jdn < new_year_jdn(MIN_YEAR):
        raise OutOfRangeFieldError("year", MIN_YEAR - 1, MIN_YEAR, MAX_YEAR)

    g_year = from_jdn(jdn).year
    # Meskerem 1 of EC g_year - 7 falls in September of g_year.
    year = g_year - 8
    if jdn >= new_year_jdn(g_year - 7):
        year += 1

    days_since = jdn - new_year_jdn(year)
    return year, days_since // DAYS_PER_MONTH + 1, days_since % DAYS_PER_MONTH + 1


# ---------------------------------------------------------
# Forward: Ethiopian civil date-time -> UTC instant
# ---------------------------------------------------------

def to_gregorian_instant(value: EthiopianValue) -> datetime:
    """
    Convert an Ethiopian date(-time) to an aware UTC datetime.

    Date-only values are taken at the start of the Ethiopian day.
    """
    if isinstance(value, EthiopianDate):
        value = value.start_of_day()

    clock = value.hour * 3600 + value.minute * 60 + value.second
    eat_seconds = clock + DIURNAL_OFFSET_SECONDS
    out = utc_datetime(paired_jdn(value), eat_seconds - EAT_OFFSET_SECONDS)
    logger.debug("to_gregorian_instant %s -> %s", value, out.isoformat())
    return out


# ---------------------------------------------------------
# Inverse: UTC instant -> Ethiopian civil date-time
# ---------------------------------------------------------

def to_ethiopian_datetime(instant: datetime) -> EthiopianDateTime:
    """
    Convert an aware datetime to an Ethiopian civil date-time.

    Sub-second precision is dropped. Naive datetimes raise ValueError.
    """
    utc = as_utc(instant)
    eat_seconds = seconds_of_day(utc) + EAT_OFFSET_SECONDS
    carry, clock = divmod(eat_seconds - DIURNAL_OFFSET_SECONDS, SECONDS_PER_DAY)

    year, month, day = ethiopian_ymd_from_jdn(to_jdn(utc.date()) + carry)
    hour, rem = divmod(clock, 3600)
    minute, second = divmod(rem, 60)

    out = EthiopianDateTime(year, month, day, hour, minute, second)
    logger.debug("to_ethiopian_datetime %s -> %s", utc.isoformat(), out)
    return out


# ---------------------------------------------------------
# Calendar-day helpers
# ---------------------------------------------------------

def ethiopian_from_gregorian_date(d: date) -> EthiopianDate:
    """Ethiopian date paired with a Gregorian calendar date (no clock involved)."""
    return EthiopianDate(*ethiopian_ymd_from_jdn(to_jdn(d)))


def gregorian_date_of(value: EthiopianValue) -> date:
    return from_jdn(paired_jdn(value))


def add_days(value: V, days: int) -> V:
    """Shift by whole Ethiopian days, keeping any clock fields."""
    year, month, day = ethiopian_ymd_from_jdn(paired_jdn(value) + days)
    if isinstance(value, EthiopianDateTime):
        return EthiopianDateTime(year, month, day, value.hour, value.minute, value.second)
    return EthiopianDate(year, month, day)


def weekday_index(value: EthiopianValue) -> int:
    """Monday-first weekday index (0=Mon..6=Sun) of an Ethiopian date."""
    return (weekday_sunday_first(paired_jdn(value)) + 6) % 7
