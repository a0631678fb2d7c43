
"""
recorder.py
Implements in-memory event recording for game sessions. Nothing is written to disk.
Related modules:
- events.py: Defines GameEvent type.
- serializer.py: Used for dumping the transcript as JSON.
"""

from typing import List, Optional
from .events import GameEvent


class InMemoryRecorder:
    """
    Records GameEvent objects in memory for later retrieval.
    Methods:
        record(event): Add a new event.
        events(event_type): Get recorded events, optionally of one type.
        reveals(): Get the CommitmentRevealed events.
    """
    def __init__(self):
        self._events: List[GameEvent] = []

    def record(self, event: GameEvent) -> None:
        """Add a new event to the recorder."""
        self._events.append(event)

    def events(self, event_type: Optional[str] = None):
        """Return recorded events as a list, optionally filtered by type."""
        if event_type is None:
            return list(self._events)
        return [e for e in self._events if e.event_type == event_type]

    def reveals(self):
        """Return the CommitmentRevealed events, the ones a user can check independently."""
        return self.events("CommitmentRevealed")
