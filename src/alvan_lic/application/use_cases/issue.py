from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ...domain import codec
from ...domain.constants import SECONDS_PER_HOUR
from ...domain.ports import LicenseSigner
from ...domain.value_objects import LicensePayload
from ...utils.time import Instant, from_epoch_seconds, to_epoch_seconds

logger = logging.getLogger(__name__)


def _check_hours(hours: float) -> float:
    if isinstance(hours, bool) or not isinstance(hours, (int, float)):
        raise ValueError("Hours must be a number")
    if not math.isfinite(hours) or hours <= 0:
        raise ValueError("Hours must be greater than 0")
    return float(hours)


@dataclass(slots=True)
class IssueLicenseUseCase:
    """
    Application use case:
    - Build the payload for `issued_at + hours`
    - Sign it via the LicenseSigner port
    - Encode payload, separator and signature as a license key

    Pure: the same inputs always produce the same key.
    """

    signer: LicenseSigner

    def execute(self, hours: float, issued_at: Instant) -> str:
        """
        Issue a license key valid for `hours` starting at `issued_at`.

        Both timestamps are floored to whole seconds before signing.

        Raises:
            ValueError for a non-positive duration or an unusable issuance time
            TypeError  for an issuance time of the wrong type
        """
        duration = _check_hours(hours)
        payload = self._build_payload(duration, issued_at)

        payload_bytes = codec.encode_payload(payload.issued_at, payload.expires_at)
        signature = self.signer.sign(payload_bytes)
        token = codec.encode_token(payload_bytes, signature)

        logger.debug(
            "Issued license key (issued_at=%d, expires_at=%d)",
            payload.issued_at,
            payload.expires_at,
        )
        return token

    # ------------------------------------------------------------------ #
    # Internal
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_payload(hours: float, issued_at: Instant) -> LicensePayload:
        raw = to_epoch_seconds(issued_at)
        end = raw + hours * SECONDS_PER_HOUR
        if not math.isfinite(end):
            raise ValueError("Expiration time is out of range")

        issued = math.floor(raw)
        expires = math.floor(end)

        if issued <= 0:
            raise ValueError("Invalid issued timestamp")

        try:
            from_epoch_seconds(expires)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError("Expiration time is out of range") from exc

        return LicensePayload(issued_at=issued, expires_at=expires)
