from __future__ import annotations

import logging
from dataclasses import dataclass

from ...domain import codec
from ...domain.constants import SECONDS_PER_HOUR
from ...domain.entities import LicenseInfo
from ...domain.exceptions import LicenseError
from ...domain.ports import LicenseSigner
from ...utils.time import Instant, from_epoch_seconds, to_epoch_seconds

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VerifyLicenseUseCase:
    """
    Application use case: license key -> LicenseInfo.

    Runs a fixed sequence of gates, each of which either passes or raises:

      1. format     prefix present
      2. decode     base64url body
      3. structure  payload / signature separator
      4. signature  constant-time HMAC check
      5. payload    timestamps parse and are consistent
      6. temporal   current_time < expires_at

    The signature is checked before the payload is interpreted, so
    malformed timestamps can only be reported for keys that were signed
    with the right secret.

    The current time is always passed in; this class never reads a clock.
    """

    signer: LicenseSigner

    def execute(self, token: str, current_time: Instant) -> LicenseInfo:
        """
        Verify `token` as of `current_time`.

        Raises:
            LicenseError with the kind of the first gate that failed
        """
        now = to_epoch_seconds(current_time)
        try:
            return self._verify(token, now)
        except LicenseError as exc:
            logger.debug("License key rejected: %s", exc.kind.value)
            raise

    # ------------------------------------------------------------------ #
    # Gates
    # ------------------------------------------------------------------ #

    def _verify(self, token: str, now: float) -> LicenseInfo:
        # 1 + 2
        data = codec.from_text(token)

        # 3
        payload_bytes, provided_signature = codec.split_token(data)

        # 4
        if not self.signer.verify(payload_bytes, provided_signature):
            raise LicenseError.invalid_signature("License signature verification failed")

        # 5
        payload = codec.decode_payload(payload_bytes)
        try:
            issued_at = from_epoch_seconds(payload.issued_at)
            expires_at = from_epoch_seconds(payload.expires_at)
        except (OverflowError, OSError, ValueError) as exc:
            raise LicenseError.time_parse_error("Invalid timestamp values", exc) from exc

        # 6
        if now >= payload.expires_at:
            raise LicenseError.expired("License has expired")

        hours_remaining = max(0.0, (payload.expires_at - now) / SECONDS_PER_HOUR)
        return LicenseInfo(
            issued_at=issued_at,
            expires_at=expires_at,
            hours_remaining=hours_remaining,
            is_valid=True,
        )
