from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Literal, Union

from ..engines.calendar_math import validate_clock, validate_date

TimeFormat = Literal["12h", "24h"]
WeekdayStyle = Literal["short", "long", "narrow"]


@dataclass(frozen=True, order=True)
class EthiopianDate:
    """A date-only Ethiopian calendar value (no clock attached)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        validate_date(self.year, self.month, self.day)

    def at(self, hour: int, minute: int = 0, second: int = 0) -> "EthiopianDateTime":
        return EthiopianDateTime(self.year, self.month, self.day, hour, minute, second)

    def start_of_day(self) -> "EthiopianDateTime":
        """The default-time policy: 00:00:00 on the Ethiopian clock."""
        return self.at(0, 0, 0)

    def with_year(self, year: int) -> "EthiopianDate":
        return replace(self, year=year)

    def with_month(self, month: int) -> "EthiopianDate":
        return replace(self, month=month)

    def with_day(self, day: int) -> "EthiopianDate":
        return replace(self, day=day)

    @property
    def is_pagume(self) -> bool:
        return self.month == 13


@dataclass(frozen=True, order=True)
class EthiopianDateTime:
    """
    An Ethiopian civil date with an Ethiopian-clock time of day.

    hour 0 is the start of the Ethiopian day, i.e. 06:00 on the EAT clock.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def __post_init__(self) -> None:
        validate_date(self.year, self.month, self.day)
        validate_clock(self.hour, self.minute, self.second)

    def date(self) -> EthiopianDate:
        return EthiopianDate(self.year, self.month, self.day)

    def with_year(self, year: int) -> "EthiopianDateTime":
        return replace(self, year=year)

    def with_month(self, month: int) -> "EthiopianDateTime":
        return replace(self, month=month)

    def with_day(self, day: int) -> "EthiopianDateTime":
        return replace(self, day=day)

    def with_hour(self, hour: int) -> "EthiopianDateTime":
        return replace(self, hour=hour)

    def with_minute(self, minute: int) -> "EthiopianDateTime":
        return replace(self, minute=minute)

    def with_second(self, second: int) -> "EthiopianDateTime":
        return replace(self, second=second)

    def with_time(self, hour: int, minute: int = 0, second: int = 0) -> "EthiopianDateTime":
        return replace(self, hour=hour, minute=minute, second=second)

    @property
    def is_pagume(self) -> bool:
        return self.month == 13


EthiopianValue = Union[EthiopianDate, EthiopianDateTime]
