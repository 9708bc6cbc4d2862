"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix: 2026-02-09T08:30:00.000Z."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def date_tag(value: datetime) -> str:
    """Compact UTC date used inside business numbers: 20260209."""
    return value.astimezone(timezone.utc).strftime("%Y%m%d")


def iso_date(value: datetime) -> str:
    """UTC calendar date: 2026-02-09."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d")
