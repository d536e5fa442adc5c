"""
Google Authenticator compatible TOTP codes.
"""

import base64
from typing import Union

from .config import TimeBasedOneTimePasswordConfig, TimeUnit
from .hmac_algorithm import HmacAlgorithm
from .random_secret import RandomSecretGenerator
from .totp import TimeBasedOneTimePasswordGenerator, Timestamp

RANDOM_SECRET_BYTES = 10


def decode_base32_secret(base32_secret: Union[str, bytes]) -> bytes:
    """
    Decode a Base32 secret, tolerating lowercase letters and missing padding.

    Raises:
        binascii.Error: If the secret is not valid Base32.
    """
    if isinstance(base32_secret, bytes):
        base32_secret = base32_secret.decode("ascii")
    secret = base32_secret.strip()
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)
    return base64.b32decode(secret, casefold=True)


class GoogleAuthenticator:
    """TOTP generator using the Google Authenticator settings: SHA1, 30 seconds, 6 digits."""

    CONFIG = TimeBasedOneTimePasswordConfig(
        time_step=30,
        time_step_unit=TimeUnit.SECONDS,
        code_digits=6,
        hmac_algorithm=HmacAlgorithm.SHA1,
    )

    def __init__(self, base32_secret: Union[str, bytes]):
        self._totp = TimeBasedOneTimePasswordGenerator(decode_base32_secret(base32_secret), self.CONFIG)

    def generate(self, timestamp: Timestamp) -> str:
        return self._totp.generate(timestamp)

    def is_valid(self, code: str, timestamp: Timestamp) -> bool:
        return self._totp.is_valid(code, timestamp)

    @staticmethod
    def create_random_secret() -> str:
        """
        Create a random secret for Google Authenticator.

        Ten random bytes encode to exactly 16 Base32 characters without padding.
        """
        random_secret = RandomSecretGenerator().create_random_secret(RANDOM_SECRET_BYTES)
        return base64.b32encode(random_secret).decode("ascii")
