
"""
probability.py
Computes pairwise win probabilities for a set of non-transitive dice.
Entry [i][j] is the probability that die i shows a strictly higher face than die j when both are rolled uniformly.
Related modules:
- die.py: Faces being compared.
- agents/: The computer picks its die from this matrix.
- UI/table.py: Renders the matrix for the help screen.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, List, Optional, Sequence, Tuple

from .die import Die

MIN_DICE = 3


@dataclass(frozen=True)
class ProbabilityMatrix:
    """
    N x N table of win counts over all face pairs. The diagonal holds None (no self-comparison).
    Fields:
        dice (tuple[Die]): Dice in row/column order.
        win_counts (tuple[tuple[int|None]]): Winning face pairs for each ordered pair.
        digits (int): Rounding used by probability().
    """
    dice: Tuple[Die, ...]
    win_counts: Tuple[Tuple[Optional[int], ...], ...]
    digits: int = 4

    @property
    def size(self) -> int:
        return len(self.dice)

    def outcomes(self, i: int, j: int) -> int:
        return len(self.dice[i].faces) * len(self.dice[j].faces)

    def wins(self, i: int, j: int) -> Optional[int]:
        return self.win_counts[i][j]

    def exact(self, i: int, j: int) -> Optional[Fraction]:
        """Unrounded probability that die i beats die j, None on the diagonal."""
        if i == j:
            return None
        return Fraction(self.win_counts[i][j], self.outcomes(i, j))

    def probability(self, i: int, j: int) -> Optional[float]:
        """Probability that die i beats die j rounded to `digits`, None on the diagonal."""
        if i == j:
            return None
        return round(self.win_counts[i][j] / self.outcomes(i, j), self.digits)

    def rows(self) -> List[List[Optional[float]]]:
        return [[self.probability(i, j) for j in range(self.size)] for i in range(self.size)]

    def best_against(self, j: int, candidates: Iterable[int]) -> int:
        """
        Pick the candidate die with the highest chance of beating die j. Ties go to the lowest index.
        Args:
            j (int): Opponent die index.
            candidates (iterable[int]): Die indices to choose from (j excluded).
        Returns:
            int: Chosen die index.
        """
        pool = sorted(c for c in candidates if c != j)
        if not pool:
            raise ValueError("no candidate dice to choose from")
        return max(pool, key=lambda c: (self.exact(c, j), -c))


def count_wins(a: Die, b: Die) -> int:
    """Number of face pairs (fa, fb) with fa > fb."""
    return sum(1 for fa in a.faces for fb in b.faces if fa > fb)


def compute_win_probabilities(dice: Sequence[Die], digits: int = 4) -> ProbabilityMatrix:
    """
    Enumerate all face combinations for every ordered pair of distinct dice.
    Pure function of the faces: no randomness and no shared state.
    Args:
        dice (sequence[Die]): At least three dice.
        digits (int): Rounding applied by ProbabilityMatrix.probability.
    Returns:
        ProbabilityMatrix: Pairwise win counts.
    Raises:
        ValueError: If fewer than three dice are given.
    """
    dice = tuple(dice)
    if len(dice) < MIN_DICE:
        raise ValueError(f"at least {MIN_DICE} dice are required, got {len(dice)}")
    counts = tuple(
        tuple(None if i == j else count_wins(dice[i], dice[j]) for j in range(len(dice)))
        for i in range(len(dice))
    )
    return ProbabilityMatrix(dice=dice, win_counts=counts, digits=digits)
