# src/alvan_lic/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import RECOMMENDED_SECRET_KEY_LENGTH


# --- Key material --------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SecretKey:
    """
    Shared secret used as the HMAC key.

    Validation only looks at the trimmed value; the raw value (untrimmed)
    is what gets fed to HMAC, so issuer and verifier must be given the
    exact same string or bytes.
    """
    value: str | bytes = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, (str, bytes)):
            raise TypeError("Secret key must be str or bytes")
        if not self.value.strip():
            raise ValueError("Secret key cannot be empty")

    def as_bytes(self) -> bytes:
        if isinstance(self.value, bytes):
            return self.value
        return self.value.encode("utf-8")

    @property
    def is_recommended_length(self) -> bool:
        return len(self.as_bytes()) >= RECOMMENDED_SECRET_KEY_LENGTH


# --- Signed payload ------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LicensePayload:
    """
    The `(issued_at, expires_at)` pair that gets signed, in whole Unix seconds.
    """
    issued_at: int
    expires_at: int

    def __post_init__(self) -> None:
        if self.issued_at <= 0 or self.expires_at <= 0:
            raise ValueError("Timestamps must be positive")
        if self.expires_at <= self.issued_at:
            raise ValueError("Expiration time must be after issued time")

    @property
    def duration_seconds(self) -> int:
        return self.expires_at - self.issued_at
