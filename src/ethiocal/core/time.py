from __future__ import annotations
from datetime import date, datetime, time, timedelta, timezone

# East Africa Time: the fixed civil offset of the Ethiopian clock.
EAT_OFFSET_SECONDS = 3 * 3600
EAT = timezone(timedelta(seconds=EAT_OFFSET_SECONDS), "EAT")

# The Ethiopian day starts at 06:00 on the EAT clock.
DIURNAL_OFFSET_SECONDS = 6 * 3600

SECONDS_PER_DAY = 86400


def ymd_to_jdn(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) to Julian Day Number."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return ymd_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)


def weekday_sunday_first(jdn: int) -> int:
    """0=Sun..6=Sat."""
    return (jdn + 1) % 7


def as_utc(dt: datetime) -> datetime:
    """Normalise an aware datetime to UTC. Naive datetimes are rejected."""
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        raise ValueError("datetime must be timezone-aware")
    return dt.astimezone(timezone.utc)


def seconds_of_day(dt: datetime) -> int:
    """Whole seconds since civil midnight; sub-second precision is dropped."""
    return dt.hour * 3600 + dt.minute * 60 + dt.second


def utc_datetime(jdn: int, seconds: int) -> datetime:
    """Aware UTC datetime for a JDN plus a second count that may exceed one day."""
    carry, secs = divmod(seconds, SECONDS_PER_DAY)
    hh, rem = divmod(secs, 3600)
    mm, ss = divmod(rem, 60)
    return datetime.combine(from_jdn(jdn + carry), time(hh, mm, ss), tzinfo=timezone.utc)
