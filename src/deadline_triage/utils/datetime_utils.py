"""Date and datetime parsing helpers shared by the engine and the HTTP layer."""

from __future__ import annotations

import datetime
import re
from typing import Optional

from dateutil import parser as _dateutil_parser

_CALENDAR_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_calendar_date(value: Optional[str]) -> Optional[datetime.date]:
    """Parse a structured deadline field into a calendar date.

    Accepts ``YYYY-MM-DD`` and full ISO-8601 timestamps (the date part is
    kept as written). Anything else, including an empty string, yields None.

    Args:
        value: Raw deadline field

    Returns:
        The calendar date, or None if the value is not a date
    """
    if value is None:
        return None

    candidate = value.strip()
    if not candidate:
        return None

    match = _CALENDAR_DATE_RE.match(candidate)
    if match is None:
        return None

    if match.end() == len(candidate):
        try:
            return datetime.date.fromisoformat(candidate)
        except ValueError:
            return None

    # Only a full timestamp may follow the date part.
    if candidate[match.end()] not in "Tt ":
        return None

    parsed = parse_client_datetime(candidate)
    return parsed.date() if parsed is not None else None


def parse_client_datetime(value: Optional[str]) -> Optional[datetime.datetime]:
    """Parse an ISO-8601 timestamp reported by a client.

    The result keeps the wall-clock fields exactly as sent; no timezone
    conversion is applied.

    Args:
        value: ISO-8601 date or datetime string

    Returns:
        Parsed datetime, or None if parsing fails
    """
    if not value:
        return None

    try:
        return _dateutil_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        return None


def wall_clock_date(value: Optional[str]) -> Optional[datetime.date]:
    """Return the calendar date a client timestamp names, if any."""

    parsed = parse_client_datetime(value)
    return parsed.date() if parsed is not None else None


__all__ = ["parse_calendar_date", "parse_client_datetime", "wall_clock_date"]
