
"""
commitment.py
Implements the HMAC commitment scheme used by the fair exchange: a secret value is bound to a
public digest before the counterparty contributes, then key and value are revealed for verification.
Related modules:
- random_source.py: Supplies fresh HMAC keys.
- exchange.py: Commits to each party's secret number.
"""

import binascii
import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional

from .random_source import SecureRandomSource

MIN_KEY_SIZE = 16


@dataclass(frozen=True)
class Commitment:
    """
    A key and the digest HMAC(key, value). Only the digest is disclosed until reveal.
    Fields:
        key (bytes): Random HMAC key.
        digest (str): Lowercase hex digest.
    """
    key: bytes
    digest: str

    @property
    def key_hex(self) -> str:
        return self.key.hex()


def encode_value(secret_value: int) -> bytes:
    """Byte encoding of a committed integer: its decimal string, so any HMAC tool can reproduce the digest."""
    return str(secret_value).encode("ascii")


class CommitmentScheme:
    """
    HMAC-based commit/verify. HMAC keeps the value hidden without the key and binds it once the digest is public.
    """
    def __init__(self, random_source: Optional[SecureRandomSource] = None, key_size: int = 32, hash_name: str = "sha3_256"):
        """
        Args:
            random_source (SecureRandomSource, optional): Key source.
            key_size (int): Key length in bytes (at least 16).
            hash_name (str): hashlib algorithm name for the HMAC.
        Raises:
            ValueError: If key_size is too small or hash_name is unknown.
        """
        if key_size < MIN_KEY_SIZE:
            raise ValueError(f"key_size must be at least {MIN_KEY_SIZE} bytes")
        if hash_name not in hashlib.algorithms_available:
            raise ValueError(f"unknown hash algorithm: {hash_name}")
        self.random_source = random_source or SecureRandomSource()
        self.key_size = key_size
        self.hash_name = hash_name

    def digest(self, key: bytes, secret_value: int) -> str:
        """Deterministic hex HMAC of secret_value under key."""
        return hmac.new(key, encode_value(secret_value), self.hash_name).hexdigest()

    def commit(self, secret_value: int) -> Commitment:
        """
        Commit to a value with a freshly drawn key.
        Args:
            secret_value (int): Value to bind.
        Returns:
            Commitment: Key and digest.
        """
        key = self.random_source.token_bytes(self.key_size)
        return Commitment(key=key, digest=self.digest(key, secret_value))

    def verify(self, key: bytes, secret_value: int, digest: str) -> bool:
        """
        Check a revealed key and value against a published digest.
        Args:
            key (bytes): Revealed key.
            secret_value (int): Revealed value.
            digest (str): Digest published before the reveal (hex, any case).
        Returns:
            bool: True if the digest matches, False otherwise (including malformed input).
        """
        if not isinstance(key, (bytes, bytearray)) or not isinstance(digest, str):
            return False
        if isinstance(secret_value, bool) or not isinstance(secret_value, int):
            return False
        try:
            published = binascii.unhexlify(digest)
        except (binascii.Error, ValueError):
            return False
        expected = hmac.new(bytes(key), encode_value(secret_value), self.hash_name).digest()
        return hmac.compare_digest(expected, published)
