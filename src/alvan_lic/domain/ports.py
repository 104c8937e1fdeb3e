from __future__ import annotations

from datetime import datetime
from typing import Protocol


class LicenseSigner(Protocol):
    """
    Port for producing and checking payload signatures.

    Implementations live in the adapters layer (e.g. HMAC-SHA256) and are
    the only objects that hold key material.
    """

    def sign(self, message: bytes) -> bytes:
        """Return the signature of `message`."""
        ...

    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Check `signature` against `message`.

        Must compare in constant time and must return False (not raise)
        when the lengths differ.
        """
        ...


class Clock(Protocol):
    """
    Port for reading the current wall-clock time.

    The verification core never calls this; only the convenience
    wrappers do, so tests can pin time with a fixed implementation.
    """

    def now(self) -> datetime:
        ...
