"""UTC helpers for aggregate timestamps."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Treat naive datetimes (as SQLite returns them) as UTC."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)
