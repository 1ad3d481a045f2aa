"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return a naive UTC datetime for storage in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat_utc(value: datetime | None) -> str | None:
    """Render a stored naive-UTC datetime as an ISO-8601 string with a ``Z`` suffix."""
    if value is None:
        return None
    return value.isoformat(timespec="milliseconds") + "Z"
