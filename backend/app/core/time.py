"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MS = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def to_epoch_ms(value: datetime) -> int:
    return (value - EPOCH) // ONE_MS


def from_epoch_ms(value: int | float) -> datetime:
    return EPOCH + timedelta(milliseconds=value)


def isoformat_z(value: datetime) -> str:
    """Render a UTC datetime the way browsers do: millisecond precision and a trailing Z."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
