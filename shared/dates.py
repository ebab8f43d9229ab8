"""
ISO-8601 formatting and time zone helpers.
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def to_iso8601_string(value: datetime) -> str:
    """
    Format a datetime as UTC ISO-8601 to the second, e.g. 2025-06-14T10:30:00Z.

    Naive datetimes are taken as local time.
    """
    return value.astimezone(timezone.utc).strftime(ISO8601_FORMAT)


def to_iso8601_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def to_time_zone(utc_value: datetime, time_zone_id: str) -> datetime:
    """
    Convert a UTC datetime to the given IANA time zone.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If time_zone_id is unknown
    """
    if utc_value.tzinfo is None:
        utc_value = utc_value.replace(tzinfo=timezone.utc)
    return utc_value.astimezone(ZoneInfo(time_zone_id))
