"""Data models for parcel tracking - platform-agnostic."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class TrackingEvent:
    """Represents a single tracking event."""

    step_number: int
    event_date: str
    event_time: str
    description: str
    location: str = ""
    # Set when the date header could not be parsed and today was used instead
    date_inferred: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the record handed to the store."""
        return {
            "step_number": self.step_number,
            "event_date": self.event_date,
            "event_time": self.event_time,
            "description": self.description,
            "location": self.location,
        }


@dataclass
class TrackingQueryResult:
    """Outcome of one handshake and query cycle for a tracking number."""

    tracking_number: str
    events: List[TrackingEvent] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether the portal returned any events."""
        return bool(self.events)


@dataclass(frozen=True)
class FormTokens:
    """Hidden ASP.NET form state for a single handshake/query cycle."""

    view_state: str
    view_state_generator: str
    event_validation: str
