from __future__ import annotations

from typing import Optional

from ...admin.env import settings_from_env
from ...adapters.hmac.signer import HmacSha256Signer
from ...adapters.system.clock import SystemClock
from ...application.use_cases.issue import IssueLicenseUseCase
from ...application.use_cases.verify import VerifyLicenseUseCase
from ...domain.entities import LicenseInfo
from ...domain.ports import Clock
from ...domain.value_objects import SecretKey
from ...utils.time import Instant


class LicenseGenerator:
    """
    Framework-agnostic facade for issuing license keys.

    Binds a secret and a clock; the clock is only read by `generate_key`.

        generator = LicenseGenerator("my-secret-key")
        key = generator.generate_key(24)   # "alvan-..."
    """

    def __init__(self, secret_key: str | bytes, *, clock: Optional[Clock] = None) -> None:
        self._issue = IssueLicenseUseCase(signer=HmacSha256Signer(SecretKey(secret_key)))
        self._clock: Clock = clock or SystemClock()

    def generate_key(self, hours: float) -> str:
        """Issue a key valid for `hours` from now."""
        return self._issue.execute(hours, self._clock.now())

    def generate_key_with_timestamp(self, hours: float, issued_at: Instant) -> str:
        """Issue a key valid for `hours` from `issued_at`."""
        return self._issue.execute(hours, issued_at)


class LicenseValidator:
    """
    Framework-agnostic facade for offline license validation.

        validator = LicenseValidator("my-secret-key")
        info = validator.validate_key(key)   # raises LicenseError
    """

    def __init__(self, secret_key: str | bytes, *, clock: Optional[Clock] = None) -> None:
        self._verify = VerifyLicenseUseCase(signer=HmacSha256Signer(SecretKey(secret_key)))
        self._clock: Clock = clock or SystemClock()

    def validate_key(self, license_key: str) -> LicenseInfo:
        """Validate against the current time of the bound clock."""
        return self._verify.execute(license_key, self._clock.now())

    def validate_key_at_time(self, license_key: str, current_time: Instant) -> LicenseInfo:
        """Validate against an explicit point in time."""
        return self._verify.execute(license_key, current_time)


# --------------------------------------------------------------------------- #
# Collaborator contract
# --------------------------------------------------------------------------- #


def issue_license(secret_key: str | bytes, hours: float, issued_at: Instant) -> str:
    return LicenseGenerator(secret_key).generate_key_with_timestamp(hours, issued_at)


def verify_license(secret_key: str | bytes, license_key: str, current_time: Instant) -> LicenseInfo:
    return LicenseValidator(secret_key).validate_key_at_time(license_key, current_time)


# --------------------------------------------------------------------------- #
# Settings-driven factories
# --------------------------------------------------------------------------- #


def _resolve_secret(secret_key: str | bytes | None) -> str | bytes:
    if secret_key is not None:
        return secret_key
    return settings_from_env().secret_key


def create_license_generator(
        secret_key: str | bytes | None = None,
        *,
        clock: Optional[Clock] = None,
) -> LicenseGenerator:
    """
    Build a LicenseGenerator, falling back to ALVAN_LIC_SECRET_KEY and then
    to the default testing secret when no key is given.
    """
    return LicenseGenerator(_resolve_secret(secret_key), clock=clock)


def create_license_validator(
        secret_key: str | bytes | None = None,
        *,
        clock: Optional[Clock] = None,
) -> LicenseValidator:
    """Counterpart of `create_license_generator`."""
    return LicenseValidator(_resolve_secret(secret_key), clock=clock)
