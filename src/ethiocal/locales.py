"""Month and weekday names for the bundled locales.

All tables are immutable module data. Weekday tuples are Monday-first.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .core.errors import UnsupportedLocaleWarning
from .engines.calendar_math import check_field

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES: Tuple[str, ...] = ("en", "am", "om", "so")


@dataclass(frozen=True)
class WeekdayNames:
    short: Tuple[str, ...]
    long: Tuple[str, ...]
    narrow: Tuple[str, ...]

    def __post_init__(self) -> None:
        for style in ("short", "long", "narrow"):
            if len(getattr(self, style)) != 7:
                raise ValueError(f"{style} weekday table must have 7 entries")

    def style(self, name: str) -> Tuple[str, ...]:
        if name not in ("short", "long", "narrow"):
            raise ValueError("weekday style must be 'short', 'long' or 'narrow'")
        return getattr(self, name)


MONTH_NAMES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "en": (
        "September", "October", "November", "December",
        "January", "February", "March",
        "April", "May", "June",
        "July", "August", "Pagume",
    ),
    "am": (
        "መስከረም", "ጥቅምት", "ህዳር", "ታኅሣሥ", "ጥር", "የካቲት", "መጋቢት",
        "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜን",
    ),
    "om": (
        "Fulbaana", "Onkololeessa", "Sadaasa", "Muddee", "Amajjii", "Guraandhala",
        "Bitootessa", "Ebla", "Caamsa", "Waxabajjii", "Adoolessa", "Hagayya", "Pagumee",
    ),
    "so": (
        "Sebteembar", "Oktoobar", "Noofembar", "Diseembar", "Janaayo", "Febraayo",
        "Maarso", "Abriil", "Maajo", "Juun", "Luuliyo", "Agoosto", "Pagume",
    ),
})

WEEKDAY_NAMES: Mapping[str, WeekdayNames] = MappingProxyType({
    "en": WeekdayNames(
        short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
        long=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
        narrow=("M", "T", "W", "T", "F", "S", "S"),
    ),
    "am": WeekdayNames(
        short=("ሰኞ", "ማክሰ", "ረቡ", "ሐሙ", "ዓርብ", "ቅዳ", "እሑ"),
        long=("ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ", "እሑድ"),
        narrow=("ሰ", "ማ", "ረ", "ሐ", "ዓ", "ቅ", "እ"),
    ),
    "om": WeekdayNames(
        short=("Wiix", "Kibx", "Roob", "Kami", "Jima", "Sanb", "Dilb"),
        long=("Wiixata", "Kibxata", "Roobii", "Kamiisa", "Jimaata", "Sanbata", "Dilbata"),
        narrow=("W", "K", "R", "K", "J", "S", "D"),
    ),
    "so": WeekdayNames(
        short=("Isn", "Tal", "Arb", "Kha", "Jim", "Sab", "Axa"),
        long=("Isniin", "Talaado", "Arbaco", "Khamiis", "Jimco", "Sabti", "Axad"),
        narrow=("I", "T", "A", "K", "J", "S", "A"),
    ),
})

# Transliterated Ethiopian month names, independent of locale.
ETHIOPIAN_MONTH_NAMES: Tuple[str, ...] = (
    "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
    "Miyazia", "Ginbot", "Sene", "Hamle", "Nehasse", "Pagume",
)


def resolve_locale(name: Optional[str]) -> str:
    """
    Map a locale name onto a bundled locale.

    Matching is case-insensitive and region tags are ignored ("am-ET" -> "am").
    Anything else falls back to DEFAULT_LOCALE with an UnsupportedLocaleWarning.
    """
    if name is None:
        return DEFAULT_LOCALE
    key = name.strip().lower().replace("_", "-")
    if key in SUPPORTED_LOCALES:
        return key
    lang = key.split("-", 1)[0]
    if lang in SUPPORTED_LOCALES:
        return lang

    logger.warning("Unsupported locale %r, falling back to %r", name, DEFAULT_LOCALE)
    warnings.warn(
        f"Locale {name!r} is not supported (available: {', '.join(SUPPORTED_LOCALES)}); "
        f"using {DEFAULT_LOCALE!r}",
        UnsupportedLocaleWarning,
        stacklevel=3,
    )
    return DEFAULT_LOCALE


def month_name(month: int, locale: str = DEFAULT_LOCALE) -> str:
    check_field("month", month, 1, 13)
    return MONTH_NAMES[resolve_locale(locale)][month - 1]


def weekday_name(index: int, locale: str = DEFAULT_LOCALE, style: str = "long") -> str:
    """Name for a Monday-first weekday index."""
    check_field("weekday", index, 0, 6)
    return WEEKDAY_NAMES[resolve_locale(locale)].style(style)[index]


def short_month_name(month: int, locale: str = DEFAULT_LOCALE) -> str:
    """First three characters of the month name ("Sep", "መስከ", "Pag")."""
    return month_name(month, locale)[:3]
