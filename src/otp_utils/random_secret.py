"""
Cryptographically secure random secrets.
"""

import secrets
from typing import Union

from .hmac_algorithm import HmacAlgorithm


class RandomSecretGenerator:
    """
    Creates random secrets from the operating system's CSPRNG.

    `secrets` draws from `os.urandom`, which is safe to share between threads.
    Failures of the random source propagate to the caller.
    """

    def create_random_secret(self, length: Union[int, HmacAlgorithm]) -> bytes:
        """
        Create a random secret.

        Args:
            length: Number of bytes, or an HMAC algorithm whose digest length
                is used as the number of bytes.

        Returns:
            The random bytes.
        """
        if isinstance(length, HmacAlgorithm):
            length = length.hash_bytes
        if length < 0:
            raise ValueError("length must be zero or a positive integer")
        return secrets.token_bytes(length)
