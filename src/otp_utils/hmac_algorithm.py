"""
HMAC algorithms supported by the one-time password generators.
"""

from enum import Enum

from cryptography.hazmat.primitives import hashes


class HmacAlgorithm(Enum):
    """Hash functions usable as the HMAC primitive, with their digest length in bytes."""

    SHA1 = ("sha1", 20)
    SHA256 = ("sha256", 32)
    SHA512 = ("sha512", 64)

    def __init__(self, hash_name: str, hash_bytes: int):
        self.hash_name = hash_name
        self.hash_bytes = hash_bytes

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return a fresh `cryptography` hash object for this algorithm."""
        return _HASHES[self.hash_name]()

    @classmethod
    def from_name(cls, name: str) -> "HmacAlgorithm":
        """
        Look up an algorithm by name.

        Accepts the member name or the hash name in any case, with or without
        a dash (e.g. "SHA256", "sha-256", "sha256").

        Raises:
            ValueError: If no algorithm matches.
        """
        normalized = name.strip().upper().replace("-", "")
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unsupported HMAC algorithm: {name}") from exc


_HASHES = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}
