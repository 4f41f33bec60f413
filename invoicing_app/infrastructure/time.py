from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 text, the form timestamps are stored in."""
    return (moment or utcnow()).isoformat()
