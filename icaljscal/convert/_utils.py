"""
Shared datetime, duration and URL utilities for JSCalendar ↔ iCalendar conversion.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from icaljscal.constants import (
    BASIC_MEETING_FEATURES,
    EXTENDED_MEETING_FEATURES,
    FULL_FEATURED_PROVIDERS,
    VIRTUAL_MEETING_PROVIDERS,
)
from icaljscal.lib.error import weirdness

log = logging.getLogger("icaljscal")

_DURATION_COMPONENT = re.compile(r"([0-9]+)([HMS])")
_DURATION_FACTORS = {"H": 3600, "M": 60, "S": 1}

_WIRE_DATETIME = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})"
)


def format_duration(duration: int | float | timedelta) -> str:
    """Format a number of seconds as an hour/minute/second duration.

    Fractional seconds are truncated.  Hours are not folded into days.

    Examples:
        5400               → "PT1H30M"
        timedelta(hours=25) → "PT25H"
        0                  → "PT0S"

    Negative input (an end before its start) is clamped to ``"PT0S"``;
    :func:`parse_duration` ignores signs, so a signed form would not
    survive the way back.
    """
    if isinstance(duration, timedelta):
        total_seconds = int(duration.total_seconds())
    else:
        total_seconds = int(duration)

    if total_seconds < 0:
        weirdness(f"negative duration of {total_seconds} seconds, using PT0S")
        total_seconds = 0

    hours, rem = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rem, 60)

    parts = []
    if hours:
        parts.append(f"{hours}H")
    if minutes:
        parts.append(f"{minutes}M")
    if seconds:
        parts.append(f"{seconds}S")

    return "PT" + ("".join(parts) or "0S")


def parse_duration(duration_str: str | None) -> int:
    """Parse a duration string into seconds, leniently.

    The string is scanned left to right: every run of digits directly
    followed by ``H``, ``M`` or ``S`` adds hours, minutes or seconds to
    the total.  Everything else (``P``, ``T``, signs, day or week
    components, garbage) is skipped.  This never raises; completely
    non-conforming input gives 0.

    Examples:
        "PT1H30M" → 5400
        "P1DT2H"  → 7200   (the day component is ignored)
        "bogus"   → 0
    """
    if not duration_str or not isinstance(duration_str, str):
        return 0
    return sum(
        int(value) * _DURATION_FACTORS[unit]
        for value, unit in _DURATION_COMPONENT.findall(duration_str)
    )


def local_time_zone() -> tzinfo:
    return tzlocal.get_localzone()


def resolve_time_zone(identifier: str | None) -> tzinfo:
    """Look up an IANA time zone, falling back to the local system zone."""
    if identifier:
        if identifier.upper() in ("UTC", "Z"):
            return timezone.utc
        try:
            return ZoneInfo(identifier)
        except (ZoneInfoNotFoundError, ValueError):
            log.debug(f"Unknown time zone {identifier!r}, using the local time zone")
    return local_time_zone()


def as_aware_datetime(dt: datetime | date) -> datetime:
    """Pin a DTSTART/DTEND value to an instant.

    Floating datetimes are taken to be in the local system zone, and dates
    (all-day values) to start at local midnight.
    """
    if not isinstance(dt, datetime):
        dt = datetime(dt.year, dt.month, dt.day)
    if dt.tzinfo is None or dt.utcoffset() is None:
        dt = dt.replace(tzinfo=local_time_zone())
    return dt


def time_zone_identifier(dt_prop) -> str | None:
    """Find the IANA identifier of a DTSTART/DTEND property, if any.

    The ``TZID`` parameter wins over whatever tzinfo the parser attached.
    """
    tzid = dt_prop.params.get("TZID")
    if tzid:
        return str(tzid)
    dt = dt_prop.dt
    if not isinstance(dt, datetime) or dt.tzinfo is None:
        return None
    for attr in ("key", "zone"):
        name = getattr(dt.tzinfo, attr, None)
        if name:
            return str(name)
    if dt.utcoffset() == timedelta(0):
        return "UTC"
    return None


def format_wire_datetime(dt: datetime | date) -> str:
    """Format an instant as an internet date-time in UTC.

    Example: ``2024-01-15T09:00:00Z``
    """
    return as_aware_datetime(dt).astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_wire_datetime(dt_str: str | None) -> datetime | None:
    """Parse an internet date-time with explicit offset or ``Z``.

    Returns ``None`` for anything else, including date-times without an
    offset.
    """
    if not isinstance(dt_str, str) or not _WIRE_DATETIME.fullmatch(dt_str):
        return None
    if dt_str.endswith("Z"):
        dt_str = dt_str[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(dt_str)
    except ValueError:
        return None


def is_virtual_meeting_url(url: str | None) -> bool:
    """Whether ``url`` points to one of the known online meeting providers."""
    if not url:
        return False
    return any(provider in url for provider in VIRTUAL_MEETING_PROVIDERS)


def infer_virtual_features(url: str) -> list[str]:
    features = list(BASIC_MEETING_FEATURES)
    if any(provider in url for provider in FULL_FEATURED_PROVIDERS):
        features.extend(EXTENDED_MEETING_FEATURES)
    return features
