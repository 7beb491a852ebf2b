"""
Timezone utilities for fuel log dates.

Fuel log dates are stored and returned as ISO-8601 strings in UTC. Clients
may send naive or offset-aware strings; these helpers bring both to a
timezone-aware UTC datetime.
"""

from datetime import datetime, timezone as tz
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Returns:
        Current UTC time with tzinfo set
    """
    return datetime.now(tz.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is timezone-aware in UTC.

    Args:
        dt: A datetime that may or may not have timezone info

    Returns:
        Timezone-aware datetime in UTC, or None if input was None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Assume naive datetimes are already UTC
        return dt.replace(tzinfo=tz.utc)

    return dt.astimezone(tz.utc)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into an aware UTC datetime.

    Accepts the trailing 'Z' that JavaScript's toISOString() produces.

    Returns:
        Aware UTC datetime, or None if the value is empty or unparseable

    Examples:
        >>> parse_iso_datetime('2024-03-01T08:30:00Z')
        datetime.datetime(2024, 3, 1, 8, 30, tzinfo=datetime.timezone.utc)
        >>> parse_iso_datetime('yesterday') is None
        True
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'

    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        return None
