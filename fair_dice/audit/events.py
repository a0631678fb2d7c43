
"""
events.py
Defines the GameEvent dataclass for recording the commitments, reveals and results of a game session.
Used by recorder.py and the CLI to keep a verifiable transcript in memory.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class GameEvent:
    """
    Represents a single event in the game (e.g., commitment published, roll result, round ended).
    Fields:
        game_id (str): Unique session identifier.
        event_type (str): Type of event (e.g., 'CommitmentRevealed').
        payload (dict): Event-specific data.
    """
    game_id: str
    event_type: str
    payload: Dict[str, Any]

    @classmethod
    def from_engine(cls, game_id: str, event: Dict[str, Any]) -> "GameEvent":
        """Wrap an engine event dict, moving its 'type' key into event_type."""
        payload = {k: v for k, v in event.items() if k != "type"}
        return cls(game_id=game_id, event_type=event["type"], payload=payload)
