"""Time utilities for timezone-aware UTC datetimes and ISO strings."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime; the engine's only clock reading."""
    return datetime.now(UTC)


def iso_timestamp(value: datetime) -> str:
    """Render a datetime the way the platform stores timestamps (``...T..:..:..mmmZ``)."""
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def iso_date_part(timestamp: str | None) -> str | None:
    """Return the date portion of an ISO timestamp by splitting on ``T``."""
    if timestamp is None:
        return None
    return timestamp.split("T")[0]
