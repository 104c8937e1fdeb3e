"""
alvan_lic.admin

License administration utilities:

- LicenseSettings: secret, default duration and HTTP wiring.
- settings_from_env: env-driven settings for the CLI and factories.
- format_duration: human-readable durations for CLI output.

The `alvan-cli` entry point lives in `alvan_lic.admin.cli`.
"""

from __future__ import annotations

from .env import settings_from_env
from .formatting import format_duration
from .settings import LicenseSettings

__all__ = [
    "LicenseSettings",
    "settings_from_env",
    "format_duration",
]
