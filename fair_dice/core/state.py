
"""
state.py
Defines all game state dataclasses for the fair dice game: PlayerState, PublicState, GameState.
Related modules:
- engine.py: Mutates and reads GameState during play.
- config.py: GameConfig is part of GameState.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .config import GameConfig
from .die import Die


@dataclass
class PlayerState:
    """
    Stores the state of one side of the table.
    Fields:
        name (str): "user" or "computer".
        die_index (int|None): Index of the chosen die.
        roll_index (int|None): Face position produced by the roll exchange.
        roll_value (int|None): Face value rolled.
    """
    name: str
    die_index: Optional[int] = None
    roll_index: Optional[int] = None
    roll_value: Optional[int] = None


@dataclass
class PublicState:
    """
    Stores state visible to both sides.
    Fields:
        round_index (int): Current round number.
        status (str): NOT_STARTED | FIRST_MOVE | DICE_SELECTION | ROLLING | ENDED | CANCELLED.
        first_mover (str|None): Who picked a die first.
        winner (str|None): Winner of the round, None on a draw or before the end.
        draw (bool): True if the round ended with equal faces.
    """
    round_index: int = 0
    status: str = "NOT_STARTED"
    first_mover: Optional[str] = None
    winner: Optional[str] = None
    draw: bool = False


@dataclass
class GameState:
    """
    Composite state for the entire game: config, dice, both players and public state.
    Fields:
        config (GameConfig): Game configuration.
        dice (tuple[Die]): Dice available at the table.
        players (tuple): (user, computer) PlayerState.
        public (PublicState): Public game state.
    """
    config: GameConfig
    dice: Tuple[Die, ...]
    players: Tuple[PlayerState, PlayerState]
    public: PublicState = field(default_factory=PublicState)
