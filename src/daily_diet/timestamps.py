"""Conversions between meal timestamps and their stored/wire forms."""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


def normalize(value: datetime) -> datetime:
    """Return an aware UTC datetime truncated to millisecond precision.

    Naive values are read as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def to_epoch_ms(value: datetime) -> int:
    """Convert a datetime to integer epoch milliseconds."""
    return (normalize(value) - EPOCH) // _ONE_MS


def from_epoch_ms(value: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=int(value))


def to_iso(value: datetime) -> str:
    """Format as ISO-8601 UTC with milliseconds, e.g. 2024-01-02T03:04:05.678Z."""
    return normalize(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")
