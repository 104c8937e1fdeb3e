from __future__ import annotations

from dataclasses import dataclass

from ..domain.constants import DEFAULT_SECRET_KEY, LicenseDuration

DEFAULT_HEADER_NAME = "X-License-Key"
DEFAULT_COOKIE_NAME = "license_key"


@dataclass(slots=True)
class LicenseSettings:
    """
    Issuer / validator wiring settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    secret_key: str | bytes
    default_hours: float = LicenseDuration.ONE_DAY.value

    # FastAPI integration
    header_name: str = DEFAULT_HEADER_NAME
    cookie_name: str = DEFAULT_COOKIE_NAME

    @property
    def uses_default_secret(self) -> bool:
        return self.secret_key == DEFAULT_SECRET_KEY
