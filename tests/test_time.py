# tests/test_time.py

import pytest
import random
from datetime import date, datetime, timedelta, timezone

from ethiocal.core import time as t
from ethiocal.engines.calendar_math import MAX_YEAR, MIN_YEAR, new_year_jdn


def test_jdn_round_trip_over_supported_years():
    first = new_year_jdn(MIN_YEAR)
    last = new_year_jdn(MAX_YEAR + 1) - 1
    rng = random.Random(2016)
    samples = [first, last] + [rng.randint(first, last) for _ in range(3000)]
    for jdn in samples:
        d = t.from_jdn(jdn)
        assert t.to_jdn(d) == jdn
        assert t.from_jdn(jdn + 1) - d == timedelta(days=1)
    assert t.from_jdn(first) == date(8, 9, 11)


def test_known_epochs():
    assert t.to_jdn(date(2000, 1, 1)) == 2451545
    assert t.ymd_to_jdn(1970, 1, 1) == 2440588
    assert t.from_jdn(2460200) == date(2023, 9, 12)


def test_weekday_sunday_first():
    # 2023-09-10 was a Sunday
    sunday = t.to_jdn(date(2023, 9, 10))
    assert [t.weekday_sunday_first(sunday + k) for k in range(7)] == [0, 1, 2, 3, 4, 5, 6]


def test_as_utc_requires_aware():
    with pytest.raises(ValueError):
        t.as_utc(datetime(2023, 9, 12, 3, 0))
    eat = datetime(2023, 9, 12, 6, 0, tzinfo=t.EAT)
    assert t.as_utc(eat) == datetime(2023, 9, 12, 3, 0, tzinfo=timezone.utc)
    assert t.as_utc(eat).tzinfo is timezone.utc


def test_utc_datetime_carries_into_next_day():
    jdn = t.to_jdn(date(2023, 9, 12))
    assert t.utc_datetime(jdn, 25 * 3600) == datetime(2023, 9, 13, 1, 0, tzinfo=timezone.utc)
    assert t.utc_datetime(jdn, -1) == datetime(2023, 9, 11, 23, 59, 59, tzinfo=timezone.utc)


def test_seconds_of_day_drops_microseconds():
    dt = datetime(2023, 9, 12, 3, 2, 1, 999999, tzinfo=timezone.utc)
    assert t.seconds_of_day(dt) == 3 * 3600 + 2 * 60 + 1


def test_eat_offset():
    assert t.EAT.utcoffset(None) == timedelta(hours=3)
    assert t.DIURNAL_OFFSET_SECONDS - t.EAT_OFFSET_SECONDS == 3 * 3600
