from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from ethiocal import EthiopianDate, EthiopianDateTime, OutOfRangeFieldError
from ethiocal.core.time import EAT
from ethiocal.engines.calendar_math import MAX_YEAR, days_in_month, days_in_pagume
from ethiocal.engines.converter import (
    add_days,
    ethiopian_from_gregorian_date,
    gregorian_date_of,
    to_ethiopian_datetime,
    to_gregorian_instant,
    weekday_index,
)

UTC = timezone.utc
ONE_SECOND = timedelta(seconds=1)


def test_new_year_2016_known_instant():
    e = EthiopianDateTime(2016, 1, 1, 0, 0, 0)
    t = to_gregorian_instant(e)
    assert t == datetime(2023, 9, 12, 3, 0, 0, tzinfo=UTC)
    assert t.tzinfo is UTC
    assert to_ethiopian_datetime(t) == e


def test_date_only_is_start_of_day():
    assert to_gregorian_instant(EthiopianDate(2016, 1, 1)) == datetime(2023, 9, 12, 3, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "sample",
    [
        EthiopianDateTime(2014, 4, 10, 12, 30, 15),
        EthiopianDateTime(2015, 1, 1, 0, 0, 0),
        EthiopianDateTime(2016, 13, 5, 23, 59, 59),
        EthiopianDateTime(2015, 13, 6, 21, 0, 0),
    ],
)
def test_round_trip_samples(sample):
    assert to_ethiopian_datetime(to_gregorian_instant(sample)) == sample


def test_round_trip_full_leap_cycle():
    hours = (0, 5, 17, 18, 20, 21, 23)
    for y in range(2008, 2021):
        for m in range(1, 14):
            for d in range(1, days_in_month(y, m) + 1):
                for h in hours:
                    e = EthiopianDateTime(y, m, d, h, 59 - h, h)
                    assert to_ethiopian_datetime(to_gregorian_instant(e)) == e


def test_round_trip_random_full_range():
    rng = random.Random(42)
    for _ in range(5000):
        y = rng.randint(1, MAX_YEAR)
        m = rng.randint(1, 13)
        d = rng.randint(1, days_in_month(y, m))
        e = EthiopianDateTime(y, m, d, rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59))
        assert to_ethiopian_datetime(to_gregorian_instant(e)) == e


def test_instant_round_trip_hourly_across_new_year():
    t0 = datetime(2023, 9, 5, 0, 0, 7, tzinfo=UTC)
    for k in range(24 * 14):
        t = t0 + timedelta(hours=k)
        assert to_gregorian_instant(to_ethiopian_datetime(t)) == t


def test_consecutive_days_are_one_day_apart():
    e = EthiopianDateTime(2011, 12, 25, 22, 0, 0)
    prev = to_gregorian_instant(e)
    for _ in range(20):
        e = add_days(e, 1)
        t = to_gregorian_instant(e)
        assert t - prev == timedelta(days=1)
        prev = t


def test_new_year_boundary():
    for y in range(2008, 2021):
        ny = to_gregorian_instant(EthiopianDateTime(y + 1, 1, 1, 0, 0, 0))
        before = to_ethiopian_datetime(ny - ONE_SECOND)
        after = to_ethiopian_datetime(ny + ONE_SECOND)
        assert before == EthiopianDateTime(y, 13, days_in_pagume(y), 23, 59, 59)
        assert after == EthiopianDateTime(y + 1, 1, 1, 0, 0, 1)


def test_hour_rollover_lands_on_next_gregorian_day():
    base = EthiopianDateTime(2016, 1, 1, 0, 0, 0)
    t0 = to_gregorian_instant(base)
    t22 = to_gregorian_instant(base.with_hour(22))
    assert t22.date() == t0.date() + timedelta(days=1)
    assert t22 == datetime(2023, 9, 13, 1, 0, tzinfo=UTC)
    assert to_gregorian_instant(base.with_hour(20)) == datetime(2023, 9, 12, 23, 0, tzinfo=UTC)
    assert to_gregorian_instant(base.with_hour(21)) == datetime(2023, 9, 13, 0, 0, tzinfo=UTC)


def test_eat_clock_mapping():
    # 06:00 EAT starts the Ethiopian day; 05:59 EAT is the last hour of the previous one.
    assert to_ethiopian_datetime(datetime(2023, 9, 12, 6, 0, tzinfo=EAT)) == EthiopianDateTime(2016, 1, 1, 0, 0, 0)
    assert to_ethiopian_datetime(datetime(2023, 9, 13, 5, 59, 59, tzinfo=EAT)) == EthiopianDateTime(2016, 1, 1, 23, 59, 59)
    assert to_ethiopian_datetime(datetime(2023, 9, 12, 18, 30, tzinfo=EAT)).hour == 12


def test_rejects_naive_datetime():
    with pytest.raises(ValueError):
        to_ethiopian_datetime(datetime(2023, 9, 12, 3, 0))


def test_sub_second_precision_is_dropped():
    t = datetime(2023, 9, 12, 3, 0, 0, 999999, tzinfo=UTC)
    assert to_ethiopian_datetime(t) == EthiopianDateTime(2016, 1, 1, 0, 0, 0)


def test_range_limits():
    first = to_gregorian_instant(EthiopianDate(1, 1, 1))
    assert first == datetime(8, 9, 11, 3, 0, tzinfo=UTC)
    assert to_ethiopian_datetime(first) == EthiopianDateTime(1, 1, 1, 0, 0, 0)
    with pytest.raises(OutOfRangeFieldError):
        to_ethiopian_datetime(first - ONE_SECOND)
    with pytest.raises(OutOfRangeFieldError):
        to_ethiopian_datetime(datetime(1, 1, 1, tzinfo=UTC))

    last = EthiopianDateTime(MAX_YEAR, 13, days_in_pagume(MAX_YEAR), 23, 59, 59)
    t = to_gregorian_instant(last)
    assert to_ethiopian_datetime(t) == last
    with pytest.raises(OutOfRangeFieldError):
        to_ethiopian_datetime(t + ONE_SECOND)
    with pytest.raises(OutOfRangeFieldError):
        to_ethiopian_datetime(datetime(9999, 12, 31, 23, 59, 59, tzinfo=UTC))


def test_calendar_day_mapping():
    assert ethiopian_from_gregorian_date(date(2023, 9, 12)) == EthiopianDate(2016, 1, 1)
    assert ethiopian_from_gregorian_date(date(2023, 9, 11)) == EthiopianDate(2015, 13, 6)
    assert gregorian_date_of(EthiopianDate(2016, 1, 1)) == date(2023, 9, 12)
    # Genna (Tahsas 29) and Timket (Tir 11)
    assert gregorian_date_of(EthiopianDate(2017, 4, 29)) == date(2025, 1, 7)
    assert gregorian_date_of(EthiopianDate(2016, 5, 11)) == date(2024, 1, 20)


def test_add_days_keeps_type_and_clock():
    assert add_days(EthiopianDate(2015, 13, 6), 1) == EthiopianDate(2016, 1, 1)
    assert add_days(EthiopianDate(2016, 1, 1), -1) == EthiopianDate(2015, 13, 6)
    assert add_days(EthiopianDateTime(2016, 12, 30, 7, 8, 9), 6) == EthiopianDateTime(2017, 1, 1, 7, 8, 9)


def test_weekday_index():
    assert weekday_index(EthiopianDate(2016, 1, 1)) == 1   # 2023-09-12, Tuesday
    assert weekday_index(EthiopianDate(2017, 1, 1)) == 2   # 2024-09-11, Wednesday
    assert weekday_index(EthiopianDateTime(2016, 1, 1, 23, 0, 0)) == 1
