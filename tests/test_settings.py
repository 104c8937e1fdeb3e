# tests/test_settings.py
import logging
from datetime import datetime, timezone

import pytest

from alvan_lic import DEFAULT_SECRET_KEY, LicenseValidator, create_license_generator, create_license_validator
from alvan_lic.admin import LicenseSettings, format_duration, settings_from_env

ISSUED = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

ENV_VARS = (
    "ALVAN_LIC_SECRET_KEY",
    "ALVAN_LIC_DEFAULT_HOURS",
    "ALVAN_LIC_HEADER_NAME",
    "ALVAN_LIC_COOKIE_NAME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_env(caplog):
    with caplog.at_level(logging.WARNING, logger="alvan_lic.admin.env"):
        settings = settings_from_env()

    assert settings.secret_key == DEFAULT_SECRET_KEY
    assert settings.uses_default_secret
    assert settings.default_hours == 24
    assert settings.header_name == "X-License-Key"
    assert settings.cookie_name == "license_key"
    assert "ALVAN_LIC_SECRET_KEY is not set" in caplog.text


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("ALVAN_LIC_SECRET_KEY", "env-secret")
    monkeypatch.setenv("ALVAN_LIC_DEFAULT_HOURS", "48")
    monkeypatch.setenv("ALVAN_LIC_HEADER_NAME", "X-App-License")
    monkeypatch.setenv("ALVAN_LIC_COOKIE_NAME", "app_license")

    settings = settings_from_env(require_secret=True)
    assert settings == LicenseSettings(
        secret_key="env-secret",
        default_hours=48.0,
        header_name="X-App-License",
        cookie_name="app_license",
    )
    assert not settings.uses_default_secret


def test_require_secret(monkeypatch):
    with pytest.raises(RuntimeError, match="ALVAN_LIC_SECRET_KEY"):
        settings_from_env(require_secret=True)

    monkeypatch.setenv("ALVAN_LIC_SECRET_KEY", "   ")
    with pytest.raises(RuntimeError):
        settings_from_env(require_secret=True)


@pytest.mark.parametrize("raw", ["abc", "0", "-1", "nan", "inf"])
def test_invalid_default_hours(monkeypatch, raw):
    monkeypatch.setenv("ALVAN_LIC_DEFAULT_HOURS", raw)
    with pytest.raises(RuntimeError, match="ALVAN_LIC_DEFAULT_HOURS"):
        settings_from_env()


def test_factories_fall_back_to_env_secret(monkeypatch):
    monkeypatch.setenv("ALVAN_LIC_SECRET_KEY", "env-secret")

    key = create_license_generator().generate_key_with_timestamp(24, ISSUED)
    assert LicenseValidator("env-secret").validate_key_at_time(key, ISSUED).is_valid
    assert create_license_validator().validate_key_at_time(key, ISSUED).is_valid


def test_factories_fall_back_to_default_secret():
    key = create_license_generator().generate_key_with_timestamp(1, ISSUED)
    assert LicenseValidator(DEFAULT_SECRET_KEY).validate_key_at_time(key, ISSUED).is_valid


def test_factories_reject_empty_explicit_secret():
    with pytest.raises(ValueError):
        create_license_generator("")
    with pytest.raises(ValueError):
        create_license_validator("  ")


@pytest.mark.parametrize(
    "hours, expected",
    [
        (1 / 60, "1 minute"),
        (0.5, "30 minutes"),
        (1, "1 hour"),
        (18.0, "18 hours"),
        (24, "1 day"),
        (48, "2 days"),
        (168, "1 week"),
        (500, "3 weeks"),
        (720, "1 month"),
        (8760, "1 year"),
        (17520, "2 years"),
    ],
)
def test_format_duration(hours, expected):
    assert format_duration(hours) == expected


def test_settings_accept_bytes_secret():
    settings = LicenseSettings(secret_key=b"bytes-secret")
    assert not settings.uses_default_secret

    key = create_license_generator(settings.secret_key).generate_key_with_timestamp(1, ISSUED)
    assert LicenseValidator("bytes-secret").validate_key_at_time(key, ISSUED).is_valid
