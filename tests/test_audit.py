import unittest
from fair_dice.audit.events import GameEvent
from fair_dice.audit.recorder import InMemoryRecorder
from fair_dice.audit import serializer


class TestAudit(unittest.TestCase):
    def test_from_engine_event(self):
        ev = GameEvent.from_engine("g1", {"type": "RollResult", "player": "user", "value": 9})
        self.assertEqual(ev.event_type, "RollResult")
        self.assertEqual(ev.payload, {"player": "user", "value": 9})

    def test_recorder_filters(self):
        rec = InMemoryRecorder()
        rec.record(GameEvent("g1", "CommitmentPublished", {"digest": "ab"}))
        rec.record(GameEvent("g1", "CommitmentRevealed", {"own_number": 1}))
        self.assertEqual(len(rec.events()), 2)
        self.assertEqual([e.event_type for e in rec.reveals()], ["CommitmentRevealed"])

    def test_serializer_handles_dataclasses_and_bytes(self):
        data = serializer.loads(serializer.dumps([GameEvent("g1", "X", {"key": b"\x01\xff"})]))
        self.assertEqual(data[0]["event_type"], "X")
        self.assertEqual(data[0]["payload"]["key"], "01ff")


if __name__ == '__main__':
    unittest.main()
