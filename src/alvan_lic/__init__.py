"""
alvan_lic

Offline, time-limited license keys: HMAC-SHA256 signed, base64url
encoded, verifiable without any server.

    from alvan_lic import LicenseGenerator, LicenseValidator

    key = LicenseGenerator("secret").generate_key(24)
    info = LicenseValidator("secret").validate_key(key)
"""

from .domain.constants import (
    DEFAULT_SECRET_KEY,
    LICENSE_PREFIX,
    MAX_HOURS,
    MIN_SECRET_KEY_LENGTH,
    RECOMMENDED_SECRET_KEY_LENGTH,
    VERSION,
    LicenseDuration,
    LicenseErrorKind,
)

__version__ = VERSION

from .domain.entities import LicenseDetails, LicenseInfo
from .domain.exceptions import LicenseError
from .domain.value_objects import LicensePayload, SecretKey
from .domain.ports import Clock, LicenseSigner

from .application.use_cases.issue import IssueLicenseUseCase
from .application.use_cases.verify import VerifyLicenseUseCase

from .adapters.hmac.signer import HmacSha256Signer
from .adapters.system.clock import FixedClock, SystemClock

from .integrations.common.license_factory import (
    LicenseGenerator,
    LicenseValidator,
    create_license_generator,
    create_license_validator,
    issue_license,
    verify_license,
)
from .integrations.common.helpers import (
    LicenseCheck,
    QuickLicense,
    create_quick_license,
    generate_multiple_licenses,
    has_valid_license_format,
    validate_license_with_details,
)

__all__ = [
    "__version__",
    # constants
    "LICENSE_PREFIX",
    "VERSION",
    "DEFAULT_SECRET_KEY",
    "MIN_SECRET_KEY_LENGTH",
    "RECOMMENDED_SECRET_KEY_LENGTH",
    "MAX_HOURS",
    "LicenseDuration",
    # domain core
    "LicenseInfo",
    "LicenseDetails",
    "LicensePayload",
    "SecretKey",
    "LicenseSigner",
    "Clock",
    # errors
    "LicenseError",
    "LicenseErrorKind",
    # use cases
    "IssueLicenseUseCase",
    "VerifyLicenseUseCase",
    # adapters
    "HmacSha256Signer",
    "SystemClock",
    "FixedClock",
    # facades
    "LicenseGenerator",
    "LicenseValidator",
    "create_license_generator",
    "create_license_validator",
    "issue_license",
    "verify_license",
    # helpers
    "QuickLicense",
    "create_quick_license",
    "generate_multiple_licenses",
    "LicenseCheck",
    "validate_license_with_details",
    "has_valid_license_format",
]
