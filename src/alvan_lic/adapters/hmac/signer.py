import hashlib
import hmac

from ...domain.ports import LicenseSigner
from ...domain.value_objects import SecretKey


class HmacSha256Signer(LicenseSigner):
    """
    Adapter implementing the LicenseSigner port with HMAC-SHA256.

    Holds the key bytes for its whole lifetime and never exposes them.
    Safe to share between threads: every call only reads the key.
    """

    def __init__(self, secret: SecretKey) -> None:
        self._key = secret.as_bytes()

    def __repr__(self) -> str:
        return "HmacSha256Signer()"

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def sign(self, message: bytes) -> bytes:
        return hmac.new(self._key, message, hashlib.sha256).digest()

    def verify(self, message: bytes, signature: bytes) -> bool:
        # compare_digest returns False on length mismatch without
        # short-circuiting on the first differing byte.
        return hmac.compare_digest(signature, self.sign(message))
