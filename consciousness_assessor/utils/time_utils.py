"""
Time utilities for assessment timestamps.

Timestamps are always UTC and rendered with millisecond precision and a
``Z`` suffix (``2026-10-19T12:00:00.000Z``), the form most JSON consumers
produce natively. The exact string is part of the proof hash input, so
every timestamp must go through ``to_iso_timestamp``.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def to_iso_timestamp(dt: datetime) -> str:
    """Render ``dt`` as an ISO-8601 UTC string with millisecond precision.

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt: Datetime to render.

    Returns:
        String of the form ``YYYY-MM-DDTHH:MM:SS.mmmZ``.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
