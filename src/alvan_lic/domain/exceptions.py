from __future__ import annotations

from typing import Optional

from .constants import LicenseErrorKind


class LicenseError(Exception):
    """
    Raised when a license key fails verification.

    There is one error type; `kind` tells the failures apart. `cause`
    holds the lower-level exception when one triggered the failure.
    Messages never include the secret, the token or any signature bytes.
    """

    def __init__(
        self,
        message: str,
        kind: LicenseErrorKind = LicenseErrorKind.INVALID_DATA,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"LicenseError(kind={self.kind.name}, message={self.message!r})"

    # ---- named constructors ---------------------------------------------

    @classmethod
    def invalid_format(cls, message: str = "Invalid license key format") -> "LicenseError":
        return cls(message, LicenseErrorKind.INVALID_FORMAT)

    @classmethod
    def invalid_signature(cls, message: str = "Invalid license signature") -> "LicenseError":
        return cls(message, LicenseErrorKind.INVALID_SIGNATURE)

    @classmethod
    def expired(cls, message: str = "License has expired") -> "LicenseError":
        return cls(message, LicenseErrorKind.EXPIRED)

    @classmethod
    def invalid_data(cls, message: str, cause: Optional[BaseException] = None) -> "LicenseError":
        return cls(f"Invalid license data: {message}", LicenseErrorKind.INVALID_DATA, cause)

    @classmethod
    def decode_error(cls, message: str, cause: Optional[BaseException] = None) -> "LicenseError":
        return cls(f"Base64 decoding error: {message}", LicenseErrorKind.DECODE_ERROR, cause)

    @classmethod
    def time_parse_error(cls, message: str, cause: Optional[BaseException] = None) -> "LicenseError":
        return cls(f"Time parsing error: {message}", LicenseErrorKind.TIME_PARSE_ERROR, cause)
