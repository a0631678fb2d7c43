import dataclasses
import unittest
from fair_dice.core.die import Die


class TestDie(unittest.TestCase):
    """
    Tests for the `Die` model:
      - Exactly six integer faces are required; repeats and negatives are allowed.
      - `roll` returns the face at a position and fails outside [0, 6) for every die.
      - Dice are immutable after construction.
    """

    DICE = [
        Die([2, 2, 4, 4, 9, 9]),
        Die([1, 1, 6, 6, 8, 8]),
        Die([-3, 0, 0, 7, 7, 100]),
        Die([5, 5, 5, 5, 5, 5]),
    ]

    def test_roll_returns_face_at_index(self):
        d = Die([1, 2, 3, 4, 5, 6])
        for i in range(6):
            self.assertEqual(d.roll(i), i + 1)

    def test_roll_out_of_range_for_every_die(self):
        for d in self.DICE:
            for bad in (-1, -6, 6, 7, 100):
                with self.assertRaises(IndexError):
                    d.roll(bad)

    def test_roll_rejects_non_integer_index(self):
        d = self.DICE[0]
        with self.assertRaises(IndexError):
            d.roll(True)
        with self.assertRaises(IndexError):
            d.roll(1.0)

    def test_wrong_face_count(self):
        with self.assertRaises(ValueError):
            Die([1, 2, 3, 4, 5])
        with self.assertRaises(ValueError):
            Die([1, 2, 3, 4, 5, 6, 7])

    def test_non_integer_faces(self):
        with self.assertRaises(ValueError):
            Die([1, 2, 3, 4, 5, "6"])
        with self.assertRaises(ValueError):
            Die([1, 2, 3, 4, 5, True])

    def test_faces_are_read_only(self):
        d = Die([1, 2, 3, 4, 5, 6])
        self.assertIsInstance(d.faces, tuple)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            d.faces = (6, 5, 4, 3, 2, 1)

    def test_label(self):
        self.assertEqual(Die([-3, 0, 0, 7, 7, 100]).label(), "-3,0,0,7,7,100")
        self.assertEqual(str(Die([2, 2, 4, 4, 9, 9])), "2,2,4,4,9,9")


if __name__ == '__main__':
    unittest.main()
