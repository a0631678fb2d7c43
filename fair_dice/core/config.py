
"""
config.py
Defines the GameConfig dataclass, which centralizes all rule options and numeric constraints for the fair dice game.
Related modules:
- engine.py: Uses GameConfig to drive the exchanges and dice selection.
- parser.py: Uses GameConfig for dice validation.
- commitment.py: Key size and hash name come from here.
"""

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options and numeric constraints for a non-transitive dice game.
    Fields:
        faces_per_die (int): Faces each die must have (always 6).
        min_dice (int): Minimum number of dice on the command line.
        key_size (int): HMAC key length in bytes.
        hash_name (str): hashlib name of the HMAC digest.
        probability_digits (int): Rounding applied to win probabilities.
        first_move_range (int): Range of the exchange deciding who moves first.
        help_token (str): Console token that shows the rules and table.
        cancel_token (str): Console token that ends the game.
        agent (str): Name of the computer agent in AGENT_MAP.
        rounds (int|None): Rounds to play (None plays until cancelled).
    """
    faces_per_die: int = 6
    min_dice: int = 3
    key_size: int = 32
    hash_name: str = "sha3_256"
    probability_digits: int = 4
    first_move_range: int = 2
    help_token: str = "?"
    cancel_token: str = "X"
    agent: str = "optimal"
    # None keeps offering rounds until the user cancels
    rounds: Optional[int] = 1
