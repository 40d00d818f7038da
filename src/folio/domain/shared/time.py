"""Time utilities for the domain layer."""

from datetime import date, datetime, time, timezone


def today_utc() -> date:
    """Return current date in UTC."""
    return datetime.now(tz=timezone.utc).date()


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def end_of_day_utc(day: date) -> datetime:
    """Return the last instant of ``day`` in UTC."""
    return datetime.combine(day, time.max, tzinfo=timezone.utc)
