"""Reference-time resolution for triage requests."""

from __future__ import annotations

import datetime as _dt
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..utils.datetime_utils import parse_client_datetime

logger = logging.getLogger(__name__)

def _local_timezone() -> _dt.tzinfo:
    """Return the host timezone as configured right now."""
    return _dt.datetime.now().astimezone().tzinfo or _dt.timezone.utc


class ReferenceSource(str, Enum):
    """Where the reference date of a triage request came from."""

    CLIENT = "client"
    SERVER = "server"


def resolve_timezone(
    timezone_name: Optional[str],
    fallback: Optional[_dt.tzinfo] = None,
) -> _dt.tzinfo:
    """Resolve ``timezone_name`` to a tzinfo, falling back to sensible defaults."""

    if timezone_name:
        try:
            return ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r; using fallback", timezone_name)

    if fallback is not None:
        return fallback

    return _local_timezone()


@dataclass(slots=True)
class TimeSnapshot:
    """Snapshot of the current moment in UTC and a target timezone."""

    tzinfo: _dt.tzinfo
    now_utc: _dt.datetime
    now_local: _dt.datetime

    @property
    def date(self) -> _dt.date:
        return self.now_local.date()

    @property
    def iso_local(self) -> str:
        return self.now_local.isoformat()


def create_time_snapshot(
    timezone_name: Optional[str] = None,
    *,
    fallback: Optional[_dt.tzinfo] = None,
) -> TimeSnapshot:
    """Return a TimeSnapshot for ``timezone_name``."""

    tzinfo = resolve_timezone(timezone_name, fallback)
    now_utc = _dt.datetime.now(_dt.timezone.utc)
    now_local = now_utc.astimezone(tzinfo)
    return TimeSnapshot(tzinfo=tzinfo, now_utc=now_utc, now_local=now_local)


@dataclass(frozen=True, slots=True)
class ReferenceMoment:
    """The day a triage request is evaluated against."""

    date: _dt.date
    source: ReferenceSource
    raw: Optional[str] = None

    @property
    def from_client(self) -> bool:
        return self.source is ReferenceSource.CLIENT


def resolve_reference(
    user_date_time: Optional[str],
    *,
    server_timezone: Optional[str] = None,
) -> ReferenceMoment:
    """Return the reference day for a request.

    The client's local wall-clock timestamp is preferred and its date is taken
    as written. Without one, server time in ``server_timezone`` is used, so
    client and server may disagree about which day it is near midnight.
    """

    if user_date_time:
        parsed = parse_client_datetime(user_date_time)
        if parsed is not None:
            return ReferenceMoment(
                date=parsed.date(),
                source=ReferenceSource.CLIENT,
                raw=user_date_time,
            )
        logger.warning(
            "Unparseable client timestamp %r; falling back to server time",
            user_date_time,
        )
    else:
        logger.info("No client timestamp supplied; using server time")

    snapshot = create_time_snapshot(server_timezone)
    return ReferenceMoment(
        date=snapshot.date,
        source=ReferenceSource.SERVER,
        raw=snapshot.iso_local,
    )


__all__ = [
    "ReferenceMoment",
    "ReferenceSource",
    "TimeSnapshot",
    "create_time_snapshot",
    "resolve_reference",
    "resolve_timezone",
]
