from enum import Enum


VERSION = "1.0.0"

LICENSE_PREFIX = "alvan-"

# Byte placed between payload and signature, and the separator inside the payload.
TOKEN_SEPARATOR = b"."
PAYLOAD_SEPARATOR = ":"

SIGNATURE_SIZE = 32
SECONDS_PER_HOUR = 3600

# Testing / CLI fallback only. Never ship licenses signed with it.
DEFAULT_SECRET_KEY = "alvan-default-secret-key-2024"

MIN_SECRET_KEY_LENGTH = 1
RECOMMENDED_SECRET_KEY_LENGTH = 32
MAX_HOURS = 1_000_000  # ~114 years


class LicenseDuration(Enum):
    ONE_HOUR = 1
    ONE_DAY = 24
    ONE_WEEK = 168
    ONE_MONTH = 720
    ONE_YEAR = 8760


class LicenseErrorKind(Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    EXPIRED = "EXPIRED"
    INVALID_DATA = "INVALID_DATA"
    DECODE_ERROR = "BASE64_ERROR"
    TIME_PARSE_ERROR = "TIME_ERROR"
