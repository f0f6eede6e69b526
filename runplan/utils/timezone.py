"""Helpers for deciding the current calendar day in the configured timezone."""

from datetime import date, datetime, timezone
import zoneinfo

from runplan.config.settings import get_training_timezone


def utc_now() -> datetime:
    """Get the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def local_today(user_timezone: str | None = None, now: datetime | None = None) -> date:
    """Get today's date in the given timezone (or the configured training timezone).

    All week and day comparisons are made on these local calendar dates, so a run
    at 23:30 in Dublin never lands in the next UTC day's training week.
    """
    tz = zoneinfo.ZoneInfo(user_timezone or get_training_timezone())
    now = now or utc_now()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(tz).date()
