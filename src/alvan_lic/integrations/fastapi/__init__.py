from __future__ import annotations

from typing import Optional

from .deps import FastAPILicensing
from .security import extract_license_key_from_request, license_key_scheme
from ..common.license_factory import create_license_validator
from ...admin.env import settings_from_env
from ...admin.settings import DEFAULT_COOKIE_NAME, DEFAULT_HEADER_NAME
from ...domain.ports import Clock


def create_fastapi_licensing(
    *,
    secret_key: str | bytes | None = None,
    clock: Optional[Clock] = None,
) -> FastAPILicensing:
    """
    High-level helper for FastAPI apps:

    - Builds a LicenseValidator (secret from the argument or the environment)
    - Wraps it in FastAPILicensing, exposing dependencies like:

        licensing.get_license
        licensing.get_optional_license
    """
    if secret_key is None:
        settings = settings_from_env(require_secret=True)
        secret_key = settings.secret_key
        header_name, cookie_name = settings.header_name, settings.cookie_name
    else:
        header_name, cookie_name = DEFAULT_HEADER_NAME, DEFAULT_COOKIE_NAME

    return FastAPILicensing(
        validator=create_license_validator(secret_key, clock=clock),
        header_name=header_name,
        cookie_name=cookie_name,
    )


__all__ = [
    "FastAPILicensing",
    "create_fastapi_licensing",
    "extract_license_key_from_request",
    "license_key_scheme",
]
