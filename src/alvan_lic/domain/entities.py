from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from .constants import SECONDS_PER_HOUR


@dataclass(frozen=True, slots=True)
class LicenseDetails:
    """
    Human-oriented breakdown of the time left on a license.
    """
    remaining_days: int
    remaining_hours: int
    remaining_minutes: int
    total_duration_hours: int
    percentage_remaining: int


@dataclass(frozen=True, slots=True)
class LicenseInfo:
    """
    Result of a successful verification.

    Built relative to the `current_time` given to the verifier; never
    cached. A returned record is always valid: expired licenses raise.
    """
    issued_at: datetime
    expires_at: datetime
    hours_remaining: float
    is_valid: bool = True

    # --- Read-only shortcuts ----------------------------------------------

    @property
    def issued_timestamp(self) -> int:
        return int(self.issued_at.timestamp())

    @property
    def expires_timestamp(self) -> int:
        return int(self.expires_at.timestamp())

    @property
    def total_hours(self) -> float:
        return (self.expires_timestamp - self.issued_timestamp) / SECONDS_PER_HOUR

    def details(self) -> LicenseDetails:
        hours = self.hours_remaining
        total = self.total_hours
        return LicenseDetails(
            remaining_days=math.floor(hours / 24),
            remaining_hours=math.floor(hours % 24),
            remaining_minutes=math.floor((hours % 1) * 60),
            total_duration_hours=math.floor(total),
            # round half up
            percentage_remaining=math.floor(hours / total * 100 + 0.5),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "issued_at": self.issued_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "hours_remaining": self.hours_remaining,
        }
