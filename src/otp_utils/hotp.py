"""
HMAC-based one-time password generation (RFC 4226).
"""

import logging
import secrets

from cryptography.hazmat.primitives import hmac

from .config import HmacOneTimePasswordConfig

logger = logging.getLogger(__name__)

MIN_COUNTER = -(2**63)
MAX_COUNTER = 2**63 - 1


def counter_to_message(counter: int) -> bytes:
    """
    Encode a counter as the 8-byte big-endian HMAC message.

    Negative counters use their two's complement representation.

    Raises:
        ValueError: If the counter does not fit into a signed 64-bit integer.
    """
    if not MIN_COUNTER <= counter <= MAX_COUNTER:
        raise ValueError(f"counter must fit into a signed 64-bit integer, got {counter}")
    return counter.to_bytes(8, "big", signed=True)


def dynamic_truncate(digest: bytes) -> int:
    """
    Apply the RFC 4226 dynamic truncation to an HMAC digest.

    The low nibble of the last byte selects a 4-byte window; its most
    significant bit is cleared, so the result is a non-negative 31-bit integer.
    """
    offset = digest[-1] & 0x0F
    return int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF


class HmacOneTimePasswordGenerator:
    """Generates and validates counter-based one-time passwords."""

    def __init__(self, secret: bytes, config: HmacOneTimePasswordConfig):
        self._secret = bytes(secret)
        self.config = config

    def generate(self, counter: int) -> str:
        """
        Generate the code for the given counter.

        Args:
            counter: Moving factor, e.g. an event counter or a time step number.

        Returns:
            A string of exactly `config.code_digits` decimal digits, left-padded
            with zeros. Empty if `code_digits` is 0.
        """
        code_digits = self.config.code_digits
        if code_digits <= 0:
            return ""

        message = counter_to_message(counter)
        mac = hmac.HMAC(self._secret, self.config.hmac_algorithm.hash_algorithm())
        mac.update(message)
        digest = mac.finalize()

        code_int = dynamic_truncate(digest) % 10**code_digits
        logger.debug(
            f"Generated {code_digits}-digit code for counter {counter} "
            f"using {self.config.hmac_algorithm.name}"
        )
        return str(code_int).zfill(code_digits)

    def is_valid(self, code: str, counter: int) -> bool:
        """Check whether `code` is the code for `counter`."""
        expected = self.generate(counter)
        return secrets.compare_digest(str(code).encode("utf-8"), expected.encode("utf-8"))
