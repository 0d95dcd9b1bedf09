"""Extract a calendar date from informal task text.

Strategies run in a fixed priority order and the first one that produces a
valid date wins. Several patterns can match overlapping parts of the same
text (``"2024-03-05 (05/03/24)"``), so the order below is part of the
contract and must not be rearranged.

Day/month digit forms are always read day-first. A two-digit year maps
``00-40`` to ``2000-2040`` and ``41-99`` to ``1941-1999``.
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)

TWO_DIGIT_YEAR_PIVOT = 40

MONTH_NAMES = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

# Monday=0 to match ``date.weekday()``
WEEKDAY_NAMES = {
    "monday": 0,
    "mon": 0,
    "tuesday": 1,
    "tue": 1,
    "tues": 1,
    "wednesday": 2,
    "wed": 2,
    "thursday": 3,
    "thu": 3,
    "thur": 3,
    "thurs": 3,
    "friday": 4,
    "fri": 4,
    "saturday": 5,
    "sat": 5,
    "sunday": 6,
    "sun": 6,
}

_MONTH_ALT = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:tember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
_WEEKDAY_ALT = "|".join(sorted(WEEKDAY_NAMES, key=len, reverse=True))

# A digit group must not continue an adjacent number, a dotted version or a
# previous date part.
_NUMERIC_START = r"(?<![\d.])(?<!\d[/-])"

_ISO_RE = re.compile(r"(?<!\d)(\d{4})-(\d{2})-(\d{2})(?!\d)")
_DMY_LONG_RE = re.compile(
    _NUMERIC_START + r"(\d{1,2})([/-])(\d{1,2})\2(\d{4})(?!\d)"
)
_DMY_SHORT_RE = re.compile(
    _NUMERIC_START + r"(\d{1,2})([/-])(\d{1,2})\2(\d{2})(?!\d)"
)
_DM_RE = re.compile(_NUMERIC_START + r"(\d{1,2})[/-](\d{1,2})(?![/-]?\d)")
_MONTH_DAY_RE = re.compile(
    rf"\b(?:(?P<month_first>{_MONTH_ALT})\.?\s+(?P<day_after>\d{{1,2}})(?:st|nd|rd|th)?"
    rf"|(?P<day_first>\d{{1,2}})(?:st|nd|rd|th)?\s+(?:of\s+)?(?P<month_after>{_MONTH_ALT}))\b",
    re.IGNORECASE,
)
_NEXT_WEEKDAY_RE = re.compile(rf"\bnext\s+({_WEEKDAY_ALT})\b", re.IGNORECASE)
_TODAY_RE = re.compile(r"\btoday\b", re.IGNORECASE)
_TOMORROW_RE = re.compile(r"\btomorrow\b", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class DateMatch:
    """A resolved date together with the strategy and text that produced it."""

    date: datetime.date
    strategy: str
    text: str


def expand_two_digit_year(value: int) -> int:
    """Expand a two-digit year using the fixed ``40`` pivot."""

    if value <= TWO_DIGIT_YEAR_PIVOT:
        return 2000 + value
    return 1900 + value


def _safe_date(year: int, month: int, day: int) -> Optional[datetime.date]:
    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


def _iso_dates(text: str, reference: datetime.date) -> Iterator[DateMatch]:
    for match in _ISO_RE.finditer(text):
        year, month, day = (int(part) for part in match.groups())
        resolved = _safe_date(year, month, day)
        if resolved is not None:
            yield DateMatch(resolved, "iso", match.group(0))


def _day_month_long_year(text: str, reference: datetime.date) -> Iterator[DateMatch]:
    for match in _DMY_LONG_RE.finditer(text):
        day, _, month, year = match.groups()
        resolved = _safe_date(int(year), int(month), int(day))
        if resolved is not None:
            yield DateMatch(resolved, "day_month_year", match.group(0))


def _day_month_short_year(text: str, reference: datetime.date) -> Iterator[DateMatch]:
    for match in _DMY_SHORT_RE.finditer(text):
        day, _, month, year = match.groups()
        resolved = _safe_date(expand_two_digit_year(int(year)), int(month), int(day))
        if resolved is not None:
            yield DateMatch(resolved, "day_month_short_year", match.group(0))


def _day_month(text: str, reference: datetime.date) -> Iterator[DateMatch]:
    for match in _DM_RE.finditer(text):
        day, month = match.groups()
        resolved = _safe_date(reference.year, int(month), int(day))
        if resolved is not None:
            yield DateMatch(resolved, "day_month", match.group(0))


def _month_name(text: str, reference: datetime.date) -> Iterator[DateMatch]:
    for match in _MONTH_DAY_RE.finditer(text):
        month_name = match.group("month_first") or match.group("month_after")
        day = match.group("day_after") or match.group("day_first")
        month = MONTH_NAMES[month_name.lower()]
        resolved = _safe_date(reference.year, month, int(day))
        if resolved is not None:
            yield DateMatch(resolved, "month_name", match.group(0))


def next_weekday(reference: datetime.date, weekday: int) -> datetime.date:
    """Return the first ``weekday`` strictly after ``reference``."""

    days_ahead = (weekday - reference.weekday()) % 7 or 7
    return reference + datetime.timedelta(days=days_ahead)


def _next_weekday(text: str, reference: datetime.date) -> Iterator[DateMatch]:
    match = _NEXT_WEEKDAY_RE.search(text)
    if match:
        weekday = WEEKDAY_NAMES[match.group(1).lower()]
        yield DateMatch(next_weekday(reference, weekday), "next_weekday", match.group(0))


def _relative_day(text: str, reference: datetime.date) -> Iterator[DateMatch]:
    match = _TODAY_RE.search(text)
    if match:
        yield DateMatch(reference, "today", match.group(0))
        return
    match = _TOMORROW_RE.search(text)
    if match:
        yield DateMatch(
            reference + datetime.timedelta(days=1), "tomorrow", match.group(0)
        )


Strategy = Callable[[str, datetime.date], Iterator[DateMatch]]

STRATEGIES: tuple[Strategy, ...] = (
    _iso_dates,
    _day_month_long_year,
    _day_month_short_year,
    _day_month,
    _month_name,
    _next_weekday,
    _relative_day,
)


def match_date(
    text: Optional[str], reference: datetime.date
) -> Optional[DateMatch]:
    """Return the first date any strategy can extract from ``text``."""

    if not text:
        return None

    for strategy in STRATEGIES:
        found = next(strategy(text, reference), None)
        if found is not None:
            logger.debug(
                "Resolved %r via %s -> %s", found.text, found.strategy, found.date
            )
            return found
    return None


def resolve_date(
    text: Optional[str], reference: datetime.date
) -> Optional[datetime.date]:
    """Extract a calendar date from ``text`` relative to ``reference``.

    Day/month expressions without a year take ``reference.year``.
    """

    found = match_date(text, reference)
    return found.date if found is not None else None


__all__ = [
    "DateMatch",
    "MONTH_NAMES",
    "STRATEGIES",
    "TWO_DIGIT_YEAR_PIVOT",
    "WEEKDAY_NAMES",
    "expand_two_digit_year",
    "match_date",
    "next_weekday",
    "resolve_date",
]
