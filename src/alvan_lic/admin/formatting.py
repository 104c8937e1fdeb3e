from __future__ import annotations

import math

from ..domain.constants import LicenseDuration


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration(hours: float) -> str:
    """Render a duration in hours with the largest unit that fits."""
    if hours < LicenseDuration.ONE_HOUR.value:
        return _plural(_round(hours * 60), "minute")
    if hours < LicenseDuration.ONE_DAY.value:
        return _plural(_round(hours), "hour")
    if hours < LicenseDuration.ONE_WEEK.value:
        return _plural(_round(hours / LicenseDuration.ONE_DAY.value), "day")
    if hours < LicenseDuration.ONE_MONTH.value:
        return _plural(_round(hours / LicenseDuration.ONE_WEEK.value), "week")
    if hours < LicenseDuration.ONE_YEAR.value:
        return _plural(_round(hours / LicenseDuration.ONE_MONTH.value), "month")
    return _plural(_round(hours / LicenseDuration.ONE_YEAR.value), "year")
