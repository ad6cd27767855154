"""
Session history tracking.
Captures deals, missions and completions during a play session.
"""

from dataclasses import dataclass, asdict
from typing import Optional
import json
from pathlib import Path


@dataclass
class SessionEvent:
    """Single event in a session."""
    mission_number: int
    event_type: str  # "mission", "deal", "mission_complete"
    data: dict
    timestamp: int = 0  # event sequence number


def _plain(value):
    """JSON-friendly form of a resolved mission parameter."""
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, (int, float, str)) or value is None:
        return value
    return str(value)


class SessionHistory:
    """Captures what happened in a play session."""

    def __init__(self, session_name: str = "session"):
        self.events: list[SessionEvent] = []
        self.metadata = {"session": session_name}
        self.mission_number = 0
        self._event_counter = 0

    def add_event(self, event_type: str, data: dict):
        """Add an event to the history."""
        self.events.append(SessionEvent(
            mission_number=self.mission_number,
            event_type=event_type,
            data=data,
            timestamp=self._event_counter
        ))
        self._event_counter += 1

    def add_mission(self, task):
        """Log a newly requested mission."""
        self.mission_number += 1
        self.add_event(
            event_type="mission",
            data={
                "kind": task.kind.name,
                "text": task.text,
                "params": {k: _plain(v) for k, v in task.params.items()}
            }
        )

    def add_deal(self, hand, completed: bool):
        """Log a dealt hand and whether it completed the current mission."""
        self.add_event(
            event_type="deal",
            data={
                "hand": [str(c) for c in hand],
                "size": len(hand),
                "completed": completed
            }
        )
        if completed and not self.mission_completed():
            self.add_event(event_type="mission_complete", data={"deals": self.deals_this_mission()})

    def mission_completed(self) -> bool:
        """Whether the latest mission already has a completion event."""
        return any(e.event_type == "mission_complete" and e.mission_number == self.mission_number
                   for e in self.events)

    def deals_this_mission(self) -> int:
        """Number of deals since the latest mission was requested."""
        return sum(1 for e in self.events
                   if e.event_type == "deal" and e.mission_number == self.mission_number)

    def recent(self, n: int = 10) -> list[SessionEvent]:
        return self.events[-n:]

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "metadata": self.metadata,
            "events": [asdict(e) for e in self.events],
            "summary": self._generate_summary()
        }

    def _generate_summary(self) -> dict:
        deals = [e for e in self.events if e.event_type == "deal"]
        completed = {e.mission_number for e in self.events if e.event_type == "mission_complete"}
        missions = [e for e in self.events if e.event_type == "mission"]

        kinds: dict[str, int] = {}
        for e in missions:
            kinds[e.data["kind"]] = kinds.get(e.data["kind"], 0) + 1

        return {
            "missions": len(missions),
            "missions_completed": len(completed),
            "deals": len(deals),
            "winning_deals": sum(1 for e in deals if e.data.get("completed")),
            "missions_by_kind": kinds,
        }

    def save(self, filepath: str):
        """Save session history to JSON."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: str) -> 'SessionHistory':
        """Load session history from JSON."""
        with open(filepath, encoding='utf-8') as f:
            data = json.load(f)

        history = cls(session_name=data["metadata"]["session"])
        history.metadata = data["metadata"]

        for event_data in data["events"]:
            history.events.append(SessionEvent(**event_data))
            history._event_counter = max(history._event_counter, event_data["timestamp"] + 1)
            history.mission_number = max(history.mission_number, event_data["mission_number"])

        return history

    def last_mission(self) -> Optional[SessionEvent]:
        return next((e for e in reversed(self.events) if e.event_type == "mission"), None)
