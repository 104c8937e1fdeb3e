"""UTC time helpers."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Union

Instant = Union[datetime, int, float]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_epoch_seconds(value: Instant) -> float:
    """
    Convert a datetime or a Unix timestamp to epoch seconds.

    Naive datetimes are read as UTC.
    """
    if isinstance(value, bool):
        raise TypeError("Expected a datetime or a Unix timestamp, got bool")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, (int, float)):
        try:
            seconds = float(value)
        except OverflowError as exc:
            raise ValueError("Timestamp is out of range") from exc
        if not math.isfinite(seconds):
            raise ValueError("Timestamp must be a finite number")
        return seconds
    raise TypeError(f"Expected a datetime or a Unix timestamp, got {type(value).__name__}")


def from_epoch_seconds(seconds: int) -> datetime:
    """Return the aware UTC datetime for whole Unix seconds."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def parse_instant(text: str) -> datetime:
    """
    Parse an ISO-8601 instant, accepting a trailing `Z` for UTC.
    """
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_instant(value: datetime) -> str:
    """Render an aware datetime as `YYYY-MM-DDTHH:MM:SSZ`."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
