import unittest
from unittest import mock
from collections import Counter
from fair_dice.fairness.random_source import SecureRandomSource, EntropySourceError

# chi-square critical values at p = 0.001, keyed by degrees of freedom
CHI2_CRITICAL_001 = {1: 10.828, 5: 20.515, 6: 22.458}


class ScriptedBytes:
    """Byte reader returning queued chunks, for deterministic draws."""
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.calls = 0

    def __call__(self, n):
        self.calls += 1
        chunk = self.chunks.pop(0)
        assert len(chunk) == n
        return chunk


class TestSecureRandomSource(unittest.TestCase):
    """
    Tests for `SecureRandomSource.uniform`:
      - Output is uniform over [0, r) (chi-square goodness of fit on 100,000 samples).
      - Raw bytes at or above 256 - (256 mod r) are rejected and redrawn.
      - Entropy failures surface as EntropySourceError.
    """

    def _chi_square(self, r, samples=100_000):
        source = SecureRandomSource()
        counts = Counter(source.uniform(r) for _ in range(samples))
        self.assertEqual(set(counts), set(range(r)))
        expected = samples / r
        return sum((counts[v] - expected) ** 2 / expected for v in range(r))

    def test_uniform_range_2(self):
        self.assertLess(self._chi_square(2), CHI2_CRITICAL_001[1])

    def test_uniform_range_6(self):
        self.assertLess(self._chi_square(6), CHI2_CRITICAL_001[5])

    def test_uniform_range_7(self):
        self.assertLess(self._chi_square(7), CHI2_CRITICAL_001[6])

    def test_biased_bytes_are_rejected(self):
        # 256 - 256 % 6 == 252, so 255 and 252 are redrawn
        reader = ScriptedBytes([b"\xff", b"\xfc", b"\xfb"])
        source = SecureRandomSource(reader)
        self.assertEqual(source.uniform(6), 251 % 6)
        self.assertEqual(reader.calls, 3)

    def test_no_rejection_for_power_of_two(self):
        reader = ScriptedBytes([b"\xff"])
        self.assertEqual(SecureRandomSource(reader).uniform(2), 1)

    def test_range_3_rejects_255(self):
        reader = ScriptedBytes([b"\xff", b"\xfe"])
        self.assertEqual(SecureRandomSource(reader).uniform(3), 254 % 3)

    def test_ranges_above_256_use_wider_draws(self):
        # two bytes: 65536 - 65536 % 1000 == 65000
        reader = ScriptedBytes([b"\xff\xff", b"\x00\x07"])
        self.assertEqual(SecureRandomSource(reader).uniform(1000), 7)

    def test_invalid_range(self):
        source = SecureRandomSource()
        for bad in (1, 0, -5, True, 2.0):
            with self.assertRaises(ValueError):
                source.uniform(bad)

    def test_entropy_failure(self):
        def broken(n):
            raise OSError("no entropy")
        with self.assertRaises(EntropySourceError):
            SecureRandomSource(broken).uniform(6)
        with self.assertRaises(EntropySourceError):
            SecureRandomSource(broken).token_bytes(32)

    def test_short_read(self):
        with self.assertRaises(EntropySourceError):
            SecureRandomSource(lambda n: b"").token_bytes(4)

    def test_default_reader_is_secrets(self):
        with mock.patch("fair_dice.fairness.random_source.secrets.token_bytes", return_value=b"\x05") as reader:
            self.assertEqual(SecureRandomSource().uniform(6), 5)
        reader.assert_called_once_with(1)

    def test_token_bytes_length(self):
        self.assertEqual(len(SecureRandomSource().token_bytes(32)), 32)


if __name__ == '__main__':
    unittest.main()
