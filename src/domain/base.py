from datetime import UTC, datetime


def utc_now() -> datetime:
    # Stored as naive UTC; SQLite drops tzinfo anyway
    return datetime.now(UTC).replace(tzinfo=None)
