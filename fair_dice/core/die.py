
"""
die.py
Defines the Die model: a fixed ordered sequence of six integer faces, indexable by roll position.
Related modules:
- parser.py: Builds Die instances from command-line tokens.
- probability.py: Compares faces of Die pairs.
- engine.py: Rolls the chosen dice with indices produced by fair exchanges.
"""

from dataclasses import dataclass
from typing import Tuple

FACES_PER_DIE = 6


@dataclass(frozen=True)
class Die:
    """
    A six-sided die with arbitrary integer faces (faces may repeat or be negative).
    Args:
        faces (iterable[int]): Exactly six integers, in roll order.
    """
    faces: Tuple[int, ...]

    def __post_init__(self):
        faces = tuple(self.faces)
        if len(faces) != FACES_PER_DIE:
            raise ValueError(f"a die must have exactly {FACES_PER_DIE} faces, got {len(faces)}")
        for face in faces:
            if isinstance(face, bool) or not isinstance(face, int):
                raise ValueError(f"die faces must be integers, got {face!r}")
        object.__setattr__(self, "faces", faces)

    def roll(self, index: int) -> int:
        """
        Return the face at a roll position.
        Args:
            index (int): Position in [0, 6).
        Returns:
            int: Face value.
        Raises:
            IndexError: If index is outside [0, 6).
        """
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < FACES_PER_DIE):
            raise IndexError(f"roll index must be in [0, {FACES_PER_DIE}), got {index!r}")
        return self.faces[index]

    def label(self) -> str:
        """Comma-separated faces, the same form the user types on the command line."""
        return ",".join(str(f) for f in self.faces)

    def __str__(self) -> str:
        return self.label()
