
"""
random_source.py
Defines SecureRandomSource, which draws unbiased integers from the operating system's cryptographically secure byte stream.
Related modules:
- commitment.py: Draws HMAC keys from the same source.
- exchange.py: Draws each party's secret number with uniform().
"""

import secrets
from typing import Callable, Optional


class EntropySourceError(RuntimeError):
    """
    Raised when the secure entropy source cannot deliver bytes. Fatal; never retried.
    """
    pass


class SecureRandomSource:
    """
    Small service object owning only a handle to a secure byte reader (secrets.token_bytes by default).
    Tests inject a deterministic reader through read_bytes.
    """
    def __init__(self, read_bytes: Optional[Callable[[int], bytes]] = None):
        """
        Args:
            read_bytes (callable, optional): Function n -> n random bytes. Defaults to secrets.token_bytes.
        """
        self._read_bytes = read_bytes or secrets.token_bytes

    def token_bytes(self, n: int) -> bytes:
        """
        Read exactly n bytes from the entropy source.
        Args:
            n (int): Number of bytes.
        Returns:
            bytes: Random bytes.
        Raises:
            EntropySourceError: If the source fails or returns a short read.
        """
        try:
            data = self._read_bytes(n)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(f"secure random source unavailable: {e}") from e
        if len(data) != n:
            raise EntropySourceError(f"secure random source returned {len(data)} bytes, expected {n}")
        return bytes(data)

    def uniform(self, range_: int) -> int:
        """
        Draw an integer uniformly from [0, range_) by rejection sampling.
        Raw values v >= space - (space mod range_) are discarded and redrawn, so every residue is equally likely.
        space is 256 for ranges up to 256, and 256**k for the smallest k that covers larger ranges.
        Args:
            range_ (int): Exclusive upper bound, must be > 1.
        Returns:
            int: Value in [0, range_).
        Raises:
            ValueError: If range_ is not an integer greater than 1.
            EntropySourceError: If the entropy source fails.
        """
        if isinstance(range_, bool) or not isinstance(range_, int) or range_ < 2:
            raise ValueError(f"range must be an integer greater than 1, got {range_!r}")
        num_bytes = max(1, ((range_ - 1).bit_length() + 7) // 8)
        space = 256 ** num_bytes
        limit = space - (space % range_)
        while True:
            value = int.from_bytes(self.token_bytes(num_bytes), "big")
            if value < limit:
                return value % range_
