"""Timestamps for the draft window and the persistence boundary.

The domain layer only handles aware datetimes. Columns store them naive, in
the configured ``APP_TIMEZONE``.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from notifyhub.config import get_settings


@lru_cache(maxsize=1)
def _app_timezone() -> tzinfo:
    name = get_settings().app_timezone.strip()
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Read naive values as app-local time; convert aware ones to it."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=_app_timezone())
    return value.astimezone(_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` as app-local wall time without ``tzinfo``, ready for a column."""

    localized = ensure_app_timezone(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)
