from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ...domain.constants import LICENSE_PREFIX, LicenseDuration
from ...domain.entities import LicenseDetails, LicenseInfo
from ...domain.exceptions import LicenseError
from ...domain.ports import Clock
from ...utils.time import Instant
from .license_factory import LicenseGenerator, LicenseValidator

_MIN_ENCODED_LENGTH = 10
_ENCODED_RE = re.compile(r"[A-Za-z0-9_-]+")


# --------------------------------------------------------------------------- #
# Presets
# --------------------------------------------------------------------------- #


class QuickLicense:
    """Issue keys for the common durations."""

    def __init__(self, secret_key: str | bytes, *, clock: Optional[Clock] = None) -> None:
        self._generator = LicenseGenerator(secret_key, clock=clock)

    def _generate(self, duration: LicenseDuration) -> str:
        return self._generator.generate_key(duration.value)

    def one_hour(self) -> str:
        return self._generate(LicenseDuration.ONE_HOUR)

    def one_day(self) -> str:
        return self._generate(LicenseDuration.ONE_DAY)

    def one_week(self) -> str:
        return self._generate(LicenseDuration.ONE_WEEK)

    def one_month(self) -> str:
        return self._generate(LicenseDuration.ONE_MONTH)

    def one_year(self) -> str:
        return self._generate(LicenseDuration.ONE_YEAR)


def create_quick_license(secret_key: str | bytes, *, clock: Optional[Clock] = None) -> QuickLicense:
    return QuickLicense(secret_key, clock=clock)


def generate_multiple_licenses(
        secret_key: str | bytes,
        durations: Iterable[float],
        *,
        clock: Optional[Clock] = None,
) -> List[str]:
    generator = LicenseGenerator(secret_key, clock=clock)
    return [generator.generate_key(hours) for hours in durations]


# --------------------------------------------------------------------------- #
# Inspection
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class LicenseCheck:
    """Outcome of `validate_license_with_details`."""
    valid: bool
    info: Optional[LicenseInfo] = None
    error: Optional[LicenseError] = None
    details: Optional[LicenseDetails] = None


def validate_license_with_details(
        license_key: str,
        secret_key: str | bytes,
        current_time: Optional[Instant] = None,
        *,
        clock: Optional[Clock] = None,
) -> LicenseCheck:
    """
    Validate a key and report the result instead of raising.

    Only LicenseError is turned into a failed check; a bad secret still
    raises at construction.
    """
    validator = LicenseValidator(secret_key, clock=clock)
    try:
        if current_time is None:
            info = validator.validate_key(license_key)
        else:
            info = validator.validate_key_at_time(license_key, current_time)
    except LicenseError as exc:
        return LicenseCheck(valid=False, error=exc)

    return LicenseCheck(valid=True, info=info, details=info.details())


def has_valid_license_format(license_key: object) -> bool:
    """
    Cheap shape check: prefix plus a plausible base64url body.
    Does not decode or verify anything.
    """
    if not isinstance(license_key, str) or not license_key:
        return False
    if not license_key.startswith(LICENSE_PREFIX):
        return False

    encoded = license_key[len(LICENSE_PREFIX):]
    if len(encoded) < _MIN_ENCODED_LENGTH:
        return False
    return _ENCODED_RE.fullmatch(encoded) is not None
