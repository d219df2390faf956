"""
utils/time_utils.py

Purpose: Time and expiry helpers

- Timezone-aware "now"
- Code expiry calculation and checks
- ISO timestamps for API responses
"""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """
    Returns the current time as a timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def calculate_expiry(issued_at: datetime, ttl_seconds: float) -> datetime:
    """
    Calculates the absolute expiry timestamp for a code.
    """
    return issued_at + timedelta(seconds=ttl_seconds)


def has_expired(expires_at: datetime, now: datetime) -> bool:
    """
    A code is still valid at the exact instant it expires.
    """
    return expires_at < now


def to_iso_timestamp(dt: datetime) -> str:
    """
    Formats a datetime as ISO-8601 UTC with millisecond precision.

    Example: 2026-01-31T09:15:02.123Z
    """
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
