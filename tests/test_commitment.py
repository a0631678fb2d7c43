import hashlib
import hmac
import unittest
from fair_dice.fairness.commitment import CommitmentScheme, Commitment
from fair_dice.fairness.random_source import SecureRandomSource


def flip_bit(data: bytes, bit: int) -> bytes:
    b = bytearray(data)
    b[bit // 8] ^= 1 << (bit % 8)
    return bytes(b)


class TestCommitmentScheme(unittest.TestCase):
    """
    Tests for the HMAC commitment:
      - verify() accepts every fresh commitment.
      - Any single-bit change of key, value or digest is rejected (binding).
      - Different values under one key give different digests.
    """

    def setUp(self):
        self.scheme = CommitmentScheme()

    def test_commit_then_verify(self):
        for value in (0, 1, 5, 255, 10 ** 12, -7):
            c = self.scheme.commit(value)
            self.assertIsInstance(c, Commitment)
            self.assertEqual(len(c.key), 32)
            self.assertEqual(len(c.digest), 64)
            self.assertTrue(self.scheme.verify(c.key, value, c.digest))

    def test_digest_is_hmac_sha3_256_of_decimal_value(self):
        key = bytes(range(32))
        expected = hmac.new(key, b"5", hashlib.sha3_256).hexdigest()
        self.assertEqual(self.scheme.digest(key, 5), expected)
        self.assertEqual(self.scheme.digest(key, 5), self.scheme.digest(key, 5))

    def test_fresh_key_per_commit(self):
        a = self.scheme.commit(3)
        b = self.scheme.commit(3)
        self.assertNotEqual(a.key, b.key)
        self.assertNotEqual(a.digest, b.digest)

    def test_key_bit_flip_rejected(self):
        c = self.scheme.commit(4)
        for bit in range(0, len(c.key) * 8, 7):
            self.assertFalse(self.scheme.verify(flip_bit(c.key, bit), 4, c.digest))

    def test_value_bit_flip_rejected(self):
        c = self.scheme.commit(4)
        for bit in range(16):
            self.assertFalse(self.scheme.verify(c.key, 4 ^ (1 << bit), c.digest))

    def test_digest_bit_flip_rejected(self):
        c = self.scheme.commit(4)
        raw = bytes.fromhex(c.digest)
        for bit in range(0, len(raw) * 8, 5):
            self.assertFalse(self.scheme.verify(c.key, 4, flip_bit(raw, bit).hex()))

    def test_no_collisions_under_one_key(self):
        key = self.scheme.random_source.token_bytes(32)
        digests = {self.scheme.digest(key, v) for v in range(10_000)}
        self.assertEqual(len(digests), 10_000)

    def test_digest_case_insensitive_and_malformed(self):
        c = self.scheme.commit(2)
        self.assertTrue(self.scheme.verify(c.key, 2, c.digest.upper()))
        self.assertFalse(self.scheme.verify(c.key, 2, "not hex"))
        self.assertFalse(self.scheme.verify(c.key, 2, c.digest[:-1]))
        self.assertFalse(self.scheme.verify(c.key.hex(), 2, c.digest))
        self.assertFalse(self.scheme.verify(c.key, "2", c.digest))

    def test_key_from_injected_source(self):
        scheme = CommitmentScheme(SecureRandomSource(lambda n: b"\x01" * n), key_size=16)
        c = scheme.commit(1)
        self.assertEqual(c.key, b"\x01" * 16)
        self.assertEqual(c.key_hex, "01" * 16)

    def test_rejects_short_key_and_unknown_hash(self):
        with self.assertRaises(ValueError):
            CommitmentScheme(key_size=8)
        with self.assertRaises(ValueError):
            CommitmentScheme(hash_name="not-a-hash")


if __name__ == '__main__':
    unittest.main()
