"""Utility helpers for time conversion."""

from .time import Instant, format_instant, from_epoch_seconds, parse_instant, to_epoch_seconds, utc_now

__all__ = ["Instant", "utc_now", "to_epoch_seconds", "from_epoch_seconds", "parse_instant", "format_instant"]
