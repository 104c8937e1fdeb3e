from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ...domain.ports import Clock
from ...utils.time import utc_now


class SystemClock(Clock):
    """Reads the live UTC wall clock."""

    def now(self) -> datetime:
        return utc_now()


@dataclass(frozen=True)
class FixedClock(Clock):
    """
    Always returns the same instant. Naive datetimes are read as UTC.
    """
    instant: datetime

    def now(self) -> datetime:
        if self.instant.tzinfo is None:
            return self.instant.replace(tzinfo=timezone.utc)
        return self.instant
