"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "Asia/Kolkata"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)
EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The timezone is resolved from ``APP_TIMEZONE``. Unknown names fall back to
    ``UTC±HH:MM`` offsets and finally to ``Asia/Kolkata``.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return _resolve_timezone(tz_name)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Return the current localized time without attaching ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def epoch_in_app_timezone() -> datetime:
    """Return the "beginning of time" sentinel expressed in the app timezone."""

    return EPOCH.astimezone(get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in the configured timezone.

    Naive values are assumed to already be app-local, which is how every
    timestamp column is written.
    """

    if value is None:
        return None

    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` localized to the app timezone but without ``tzinfo``.

    Timestamp columns are declared without timezone so the same comparison works
    on SQLite and PostgreSQL.
    """

    localized = ensure_app_timezone(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)


def _resolve_timezone(tz_name: str) -> tzinfo:
    if tz_name.upper() in {"UTC", "Z"}:
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    try:
        return ZoneInfo(_DEFAULT_TIMEZONE)
    except ZoneInfoNotFoundError:
        # No tz database on the host; use the fixed IST offset.
        return timezone(timedelta(hours=5, minutes=30))
