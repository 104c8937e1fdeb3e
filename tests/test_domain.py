# tests/test_domain.py
import dataclasses
from datetime import datetime, timezone

import pytest

from alvan_lic.domain.constants import LicenseDuration, LicenseErrorKind
from alvan_lic.domain.entities import LicenseInfo
from alvan_lic.domain.exceptions import LicenseError
from alvan_lic.domain.value_objects import LicensePayload, SecretKey


def test_secret_key_value_object():
    secret = SecretKey("k")
    assert secret.as_bytes() == b"k"
    assert SecretKey(b"raw-bytes").as_bytes() == b"raw-bytes"

    # untrimmed value is the key
    assert SecretKey("  padded  ").as_bytes() == b"  padded  "

    for empty in ("", "   ", "\t\n", b"", b"  "):
        with pytest.raises(ValueError):
            SecretKey(empty)

    with pytest.raises(TypeError):
        SecretKey(123)


def test_secret_key_is_hidden_from_repr():
    secret = SecretKey("super-secret-value")
    assert "super-secret-value" not in repr(secret)


def test_secret_key_recommended_length():
    assert not SecretKey("short").is_recommended_length
    assert SecretKey("x" * 32).is_recommended_length


def test_license_payload_invariants():
    payload = LicensePayload(issued_at=10, expires_at=20)
    assert payload.duration_seconds == 10

    with pytest.raises(ValueError):
        LicensePayload(issued_at=0, expires_at=20)
    with pytest.raises(ValueError):
        LicensePayload(issued_at=-5, expires_at=20)
    with pytest.raises(ValueError):
        LicensePayload(issued_at=20, expires_at=20)
    with pytest.raises(ValueError):
        LicensePayload(issued_at=20, expires_at=10)


def test_license_error_named_constructors():
    assert LicenseError.invalid_format().kind is LicenseErrorKind.INVALID_FORMAT
    assert LicenseError.invalid_signature().kind is LicenseErrorKind.INVALID_SIGNATURE
    assert LicenseError.expired().kind is LicenseErrorKind.EXPIRED

    cause = ValueError("boom")
    err = LicenseError.invalid_data("Timestamps must be positive", cause)
    assert err.kind is LicenseErrorKind.INVALID_DATA
    assert str(err) == "Invalid license data: Timestamps must be positive"
    assert err.cause is cause

    assert str(LicenseError.decode_error("bad")) == "Base64 decoding error: bad"
    assert str(LicenseError.time_parse_error("bad")) == "Time parsing error: bad"


def test_license_error_kind_values_are_stable():
    assert [kind.value for kind in LicenseErrorKind] == [
        "INVALID_FORMAT",
        "INVALID_SIGNATURE",
        "EXPIRED",
        "INVALID_DATA",
        "BASE64_ERROR",
        "TIME_ERROR",
    ]


def test_license_duration_presets():
    assert LicenseDuration.ONE_HOUR.value == 1
    assert LicenseDuration.ONE_DAY.value == 24
    assert LicenseDuration.ONE_WEEK.value == 168
    assert LicenseDuration.ONE_MONTH.value == 720
    assert LicenseDuration.ONE_YEAR.value == 8760


def _info(hours_remaining: float, total_hours: int) -> LicenseInfo:
    issued = datetime(2024, 1, 1, tzinfo=timezone.utc)
    expires = datetime.fromtimestamp(issued.timestamp() + total_hours * 3600, tz=timezone.utc)
    return LicenseInfo(issued_at=issued, expires_at=expires, hours_remaining=hours_remaining)


def test_license_info_shortcuts():
    info = _info(18.0, 24)
    assert info.is_valid
    assert info.issued_timestamp == 1704067200
    assert info.expires_timestamp == 1704067200 + 24 * 3600
    assert info.total_hours == 24.0
    assert info.as_dict() == {
        "is_valid": True,
        "issued_at": "2024-01-01T00:00:00+00:00",
        "expires_at": "2024-01-02T00:00:00+00:00",
        "hours_remaining": 18.0,
    }


def test_license_info_is_immutable():
    info = _info(1.0, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.hours_remaining = 5.0


def test_license_info_details():
    details = _info(18.0, 24).details()
    assert details.remaining_days == 0
    assert details.remaining_hours == 18
    assert details.remaining_minutes == 0
    assert details.total_duration_hours == 24
    assert details.percentage_remaining == 75

    details = _info(30.5, 48).details()
    assert details.remaining_days == 1
    assert details.remaining_hours == 6
    assert details.remaining_minutes == 30
    assert details.total_duration_hours == 48
    assert details.percentage_remaining == 64
