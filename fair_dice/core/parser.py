
"""
parser.py
Validates command-line dice specifications and turns them into Die instances.
Related modules:
- die.py: Die model produced here.
- config.py: Supplies the minimum number of dice.
"""

from typing import List, Optional, Sequence

from .config import GameConfig
from .die import Die, FACES_PER_DIE


class DiceValidationError(ValueError):
    """
    Raised when the dice given on the command line are malformed or too few.
    """
    pass


def parse_die(token: str) -> Die:
    """
    Parse a single comma-separated die specification such as "2,2,4,4,9,9".
    Args:
        token (str): Raw command-line token.
    Returns:
        Die: The parsed die.
    Raises:
        DiceValidationError: If the token is not exactly six integers.
    """
    parts = [p.strip() for p in token.split(",")]
    try:
        faces = [int(p) for p in parts]
    except ValueError:
        faces = None
    if faces is None or len(faces) != FACES_PER_DIE:
        raise DiceValidationError(
            f'Invalid die "{token}". Each die must have {FACES_PER_DIE} integers separated by commas, '
            f"e.g. 2,2,4,4,9,9."
        )
    return Die(faces)


def parse_dice(tokens: Sequence[str], config: Optional[GameConfig] = None) -> List[Die]:
    """
    Parse all dice given on the command line.
    Args:
        tokens (sequence[str]): One token per die.
        config (GameConfig, optional): Supplies min_dice (default 3).
    Returns:
        list[Die]: Parsed dice, in command-line order.
    Raises:
        DiceValidationError: If fewer than min_dice tokens are given or any token is malformed.
    """
    config = config or GameConfig()
    if len(tokens) < config.min_dice:
        raise DiceValidationError(
            f"At least {config.min_dice} dice are required, got {len(tokens)}. "
            f"Example: 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"
        )
    return [parse_die(token) for token in tokens]
