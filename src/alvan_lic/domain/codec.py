"""
Canonical byte layout and text encoding of license tokens.

    token   = "alvan-" + base64url_nopad(payload || b"." || signature)
    payload = b"<issued_at>:<expires_at>"   (base-10 Unix seconds)

The payload bytes are what gets signed, so `encode_payload` must stay
byte-for-byte deterministic.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Tuple

from .constants import LICENSE_PREFIX, PAYLOAD_SEPARATOR, TOKEN_SEPARATOR
from .exceptions import LicenseError
from .value_objects import LicensePayload

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")
_TIMESTAMP_RE = re.compile(r"-?[0-9]+")


# --- Payload -------------------------------------------------------------


def encode_payload(issued_at: int, expires_at: int) -> bytes:
    return f"{issued_at:d}{PAYLOAD_SEPARATOR}{expires_at:d}".encode("utf-8")


def _parse_timestamp(part: str) -> int:
    if not _TIMESTAMP_RE.fullmatch(part):
        raise LicenseError.time_parse_error("Invalid timestamp format")
    try:
        return int(part)
    except ValueError as exc:
        # e.g. more digits than int() accepts
        raise LicenseError.time_parse_error("Invalid timestamp format", exc) from exc


def decode_payload(data: bytes) -> LicensePayload:
    """
    Parse payload bytes back into a `LicensePayload`.

    Raises:
        LicenseError(INVALID_FORMAT)   wrong number of parts, not UTF-8
        LicenseError(TIME_PARSE_ERROR) a part is not a base-10 integer
        LicenseError(INVALID_DATA)     non-positive or mis-ordered timestamps
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LicenseError.invalid_format("Payload is not valid UTF-8") from exc

    parts = text.split(PAYLOAD_SEPARATOR)
    if len(parts) != 2:
        raise LicenseError.invalid_format("Invalid payload format")

    issued_at = _parse_timestamp(parts[0])
    expires_at = _parse_timestamp(parts[1])

    try:
        return LicensePayload(issued_at=issued_at, expires_at=expires_at)
    except ValueError as exc:
        raise LicenseError.invalid_data(str(exc), exc) from exc


# --- Text encoding -------------------------------------------------------


def to_text(data: bytes) -> str:
    encoded = base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    return f"{LICENSE_PREFIX}{encoded}"


def from_text(text: str) -> bytes:
    """
    Reverse `to_text`.

    Raises:
        LicenseError(INVALID_FORMAT)  not a non-empty string with the prefix
        LicenseError(DECODE_ERROR)    remainder is not canonical base64url
    """
    if not isinstance(text, str) or not text:
        raise LicenseError.invalid_format("License key must be a non-empty string")
    if not text.startswith(LICENSE_PREFIX):
        raise LicenseError.invalid_format(f'License key must start with "{LICENSE_PREFIX}"')

    encoded = text[len(LICENSE_PREFIX):]
    if not _BASE64URL_RE.fullmatch(encoded):
        raise LicenseError.decode_error("License key contains characters outside the base64url alphabet")

    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise LicenseError.decode_error("Failed to decode license key", exc) from exc

    # Unused trailing bits let several strings decode to the same bytes.
    if to_text(data) != text:
        raise LicenseError.decode_error("License key is not canonically encoded")

    return data


# --- Token framing -------------------------------------------------------


def encode_token(payload: bytes, signature: bytes) -> str:
    return to_text(payload + TOKEN_SEPARATOR + signature)


def split_token(data: bytes) -> Tuple[bytes, bytes]:
    """Split decoded token bytes at the first separator into (payload, signature)."""
    index = data.find(TOKEN_SEPARATOR)
    if index == -1:
        raise LicenseError.invalid_format("Missing separator in license data")
    return data[:index], data[index + 1:]
