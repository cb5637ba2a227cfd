from __future__ import annotations

from typing import Optional


class EthiocalError(Exception):
    """Base error."""


class OutOfRangeFieldError(EthiocalError, ValueError):
    """Raised when a calendar or clock field lies outside its valid range."""

    def __init__(self, field: str, value: int, low: int, high: Optional[int] = None):
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        if high is None:
            msg = f"{field}={value} out of range (must be >= {low})"
        else:
            msg = f"{field}={value} out of range [{low}, {high}]"
        super().__init__(msg)


class UnsupportedLocaleWarning(UserWarning):
    """Emitted when an unknown locale is replaced by the default one."""
