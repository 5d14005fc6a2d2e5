"""Datetime utilities for SigninID SDK."""

from __future__ import annotations

from datetime import datetime, timezone


def parse_iso_timestamp(timestamp_str: str) -> datetime:
    """Parse an ISO 8601 timestamp string to datetime.

    Handles both 'Z' suffix and '+00:00' timezone formats. Timestamps
    without an offset are taken as UTC.

    Args:
        timestamp_str: ISO 8601 formatted timestamp string.

    Returns:
        A timezone-aware datetime object.
    """
    if timestamp_str.endswith("Z"):
        timestamp_str = timestamp_str[:-1] + "+00:00"
    parsed = datetime.fromisoformat(timestamp_str)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_iso_timestamp(value: datetime) -> str:
    """Format a datetime as a UTC ISO 8601 string with millisecond precision.

    The output looks like ``2024-01-15T10:30:00.000Z``. Naive datetimes
    are taken as UTC.

    Args:
        value: The datetime to format.

    Returns:
        The formatted timestamp.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def serialize_timestamp(value: datetime | str | None) -> str | None:
    """Serialize a date bound for use as a query parameter.

    Strings are passed through untouched, datetimes go through
    ``format_iso_timestamp``.
    """
    if isinstance(value, datetime):
        return format_iso_timestamp(value)
    return value


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
