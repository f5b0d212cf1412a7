"""
Date Utilities
==============

Common date/time handling utilities for timestamps, conversions, and timezone-aware operations.
"""

import math
from datetime import UTC, datetime

# Epoch values at or above this magnitude are treated as milliseconds.
_EPOCH_MS_THRESHOLD = 100_000_000_000


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    Args:
        dt: Datetime object (timezone-aware or naive assumed UTC)

    Returns:
        Timezone-aware datetime in UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_unix_ms(dt: datetime) -> int:
    """
    Convert datetime to Unix timestamp in milliseconds.

    Args:
        dt: Datetime object (timezone-aware or naive assumed UTC)

    Returns:
        Unix timestamp in milliseconds
    """
    return int(ensure_utc(dt).timestamp() * 1000)


def from_unix_ms(timestamp_ms: int | float) -> datetime:
    """
    Convert Unix timestamp in milliseconds to datetime (UTC).

    Args:
        timestamp_ms: Unix timestamp in milliseconds

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)


def utc_now() -> datetime:
    """
    Get current time in UTC.

    Returns:
        Current UTC datetime
    """
    return datetime.now(UTC)


def truncate_to_day(dt: datetime) -> datetime:
    """
    Truncate datetime to start of day (00:00:00).

    Args:
        dt: Datetime to truncate

    Returns:
        Datetime at 00:00:00 in same timezone
    """
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def month_start(dt: datetime) -> datetime:
    """
    Truncate datetime to the first instant of its calendar month.

    Args:
        dt: Datetime to truncate

    Returns:
        Datetime at day 1, 00:00:00 in same timezone
    """
    return truncate_to_day(dt).replace(day=1)


def next_month_start(dt: datetime) -> datetime:
    """First instant of the calendar month after the one containing ``dt``."""
    start = month_start(dt)
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


def parse_timestamp(value: object) -> datetime | None:
    """
    Parse a transaction timestamp from any of the shapes the history feed emits.

    Accepts datetimes (naive values are assumed UTC), ISO-8601 strings
    (including a trailing ``Z``), and Unix epoch values in seconds or
    milliseconds, given as numbers or numeric strings.

    Args:
        value: Raw timestamp value

    Returns:
        Timezone-aware UTC datetime, or None if the value cannot be parsed
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return ensure_utc(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # Numeric strings first: fromisoformat also reads compact dates such
        # as "17010101", which would swallow epoch values.
        try:
            value = float(text)
        except ValueError:
            try:
                return ensure_utc(datetime.fromisoformat(text))
            except ValueError:
                return None

    if isinstance(value, int | float):
        if not math.isfinite(value):
            return None
        try:
            if abs(value) >= _EPOCH_MS_THRESHOLD:
                return from_unix_ms(value)
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    return None
