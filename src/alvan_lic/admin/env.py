from __future__ import annotations

import logging
import math
import os

from ..domain.constants import DEFAULT_SECRET_KEY, LicenseDuration
from .settings import DEFAULT_COOKIE_NAME, DEFAULT_HEADER_NAME, LicenseSettings

logger = logging.getLogger(__name__)

ENV_SECRET_KEY = "ALVAN_LIC_SECRET_KEY"
ENV_DEFAULT_HOURS = "ALVAN_LIC_DEFAULT_HOURS"
ENV_HEADER_NAME = "ALVAN_LIC_HEADER_NAME"
ENV_COOKIE_NAME = "ALVAN_LIC_COOKIE_NAME"


def settings_from_env(*, require_secret: bool = False) -> LicenseSettings:
    def _str(key: str, default: str) -> str:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        return raw.strip()

    def _hours(key: str, default: float) -> float:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError as exc:
            raise RuntimeError(f"{key} must be a number, got {raw!r}") from exc
        if not math.isfinite(value) or value <= 0:
            raise RuntimeError(f"{key} must be greater than 0, got {raw!r}")
        return value

    secret = os.getenv(ENV_SECRET_KEY)
    if secret is None or not secret.strip():
        if require_secret:
            raise RuntimeError(f"Missing license settings: {ENV_SECRET_KEY}")
        logger.warning("%s is not set; falling back to the default testing secret", ENV_SECRET_KEY)
        secret = DEFAULT_SECRET_KEY

    return LicenseSettings(
        secret_key=secret,
        default_hours=_hours(ENV_DEFAULT_HOURS, LicenseDuration.ONE_DAY.value),
        header_name=_str(ENV_HEADER_NAME, DEFAULT_HEADER_NAME),
        cookie_name=_str(ENV_COOKIE_NAME, DEFAULT_COOKIE_NAME),
    )
