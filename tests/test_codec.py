# tests/test_codec.py
import pytest

from alvan_lic.domain import codec
from alvan_lic.domain.constants import LicenseErrorKind
from alvan_lic.domain.exceptions import LicenseError
from alvan_lic.domain.value_objects import LicensePayload


def _kind(func, *args) -> LicenseErrorKind:
    with pytest.raises(LicenseError) as exc_info:
        func(*args)
    return exc_info.value.kind


# --- payload ---------------------------------------------------------------


def test_encode_payload_is_canonical():
    assert codec.encode_payload(1704110400, 1704196800) == b"1704110400:1704196800"
    assert codec.encode_payload(1, 2) == b"1:2"


def test_decode_payload():
    assert codec.decode_payload(b"1704110400:1704196800") == LicensePayload(1704110400, 1704196800)


@pytest.mark.parametrize("raw", [b"12", b"1:2:3", b"", b"\xff\xfe:1"])
def test_decode_payload_format_errors(raw):
    assert _kind(codec.decode_payload, raw) is LicenseErrorKind.INVALID_FORMAT


@pytest.mark.parametrize("raw", [b"abc:5", b":5", b"5:", b" 1:5", b"+1:5", b"1.5:9", b"1_0:20"])
def test_decode_payload_time_errors(raw):
    assert _kind(codec.decode_payload, raw) is LicenseErrorKind.TIME_PARSE_ERROR


@pytest.mark.parametrize("raw", [b"0:5", b"-5:10", b"5:-1", b"10:5", b"5:5"])
def test_decode_payload_data_errors(raw):
    assert _kind(codec.decode_payload, raw) is LicenseErrorKind.INVALID_DATA


# --- text ------------------------------------------------------------------


def test_to_text_is_prefixed_url_safe_and_unpadded():
    assert codec.to_text(b"hello") == "alvan-aGVsbG8"
    assert codec.to_text(b"\xfb\xff") == "alvan--_8"
    assert codec.to_text(b"") == "alvan-"


def test_from_text_reverses_to_text():
    assert codec.from_text("alvan-aGVsbG8") == b"hello"
    assert codec.from_text("alvan--_8") == b"\xfb\xff"
    assert codec.from_text("alvan-") == b""


@pytest.mark.parametrize("text", ["", "not-alvan-prefixed", "invalid-license", "ALVAN-aGVsbG8", None, 42])
def test_from_text_format_errors(text):
    assert _kind(codec.from_text, text) is LicenseErrorKind.INVALID_FORMAT


@pytest.mark.parametrize(
    "text",
    [
        "alvan-aGVsb",        # length is 1 more than a multiple of 4
        "alvan-aGVs$G8",      # outside the alphabet
        "alvan-+/8",          # standard alphabet, not url-safe
        "alvan-aGVsbG8=",     # padding is never emitted
        "alvan-aGVs bG8",
        "alvan--_9",          # trailing bits set
    ],
)
def test_from_text_decode_errors(text):
    assert _kind(codec.from_text, text) is LicenseErrorKind.DECODE_ERROR


# --- framing ---------------------------------------------------------------


def test_split_token_uses_first_separator():
    assert codec.split_token(b"1:2.sig.nature") == (b"1:2", b"sig.nature")
    assert codec.split_token(b"1:2.") == (b"1:2", b"")


def test_split_token_requires_separator():
    assert _kind(codec.split_token, b"fake:data:here") is LicenseErrorKind.INVALID_FORMAT


def test_encode_token_round_trip():
    token = codec.encode_token(b"1:2", b"\x00" * 32)
    assert token.startswith("alvan-")
    assert codec.split_token(codec.from_text(token)) == (b"1:2", b"\x00" * 32)
