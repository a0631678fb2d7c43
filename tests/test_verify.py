import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from UI.verify import main
from fair_dice.fairness.commitment import CommitmentScheme


def run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue()


class TestVerifyCommand(unittest.TestCase):
    def setUp(self):
        self.commitment = CommitmentScheme().commit(3)

    def test_match(self):
        code, out = run([self.commitment.key_hex, "3", self.commitment.digest])
        self.assertEqual(code, 0)
        self.assertIn("OK", out)

    def test_mismatch(self):
        code, out = run([self.commitment.key_hex, "4", self.commitment.digest])
        self.assertEqual(code, 1)
        self.assertIn("MISMATCH", out)

    def test_bad_key(self):
        code, _ = run(["zz", "3", self.commitment.digest])
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
