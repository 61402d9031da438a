"""Persistence interface for deliveries, events and refresh metadata."""

from dataclasses import dataclass
from itertools import count
from typing import Dict, List, Optional, Protocol

from .models import TrackingEvent


@dataclass
class Delivery:
    """A tracked parcel."""

    id: int
    name: str
    tracking_number: str


@dataclass
class StoredEvent:
    """A persisted tracking event row."""

    id: int
    delivery_id: int
    step_number: int
    event_date: str
    event_time: str
    description: str
    location: str


class TrackingStore(Protocol):
    """Operations the refresh layer needs from a store."""

    def list_deliveries(self) -> List[Delivery]:
        ...

    def delete_events(self, delivery_id: int) -> None:
        ...

    def insert_events(self, delivery_id: int, events: List[TrackingEvent]) -> None:
        ...

    def get_events(self, delivery_id: int) -> List[StoredEvent]:
        ...

    def get_meta(self, key: str) -> Optional[str]:
        ...

    def set_meta(self, key: str, value: str) -> None:
        ...


class MemoryTrackingStore:
    """In-memory TrackingStore."""

    def __init__(self):
        self._deliveries: Dict[int, Delivery] = {}
        self._events: Dict[int, List[StoredEvent]] = {}
        self._meta: Dict[str, str] = {}
        self._delivery_ids = count(1)
        self._event_ids = count(1)

    def add_delivery(self, name: str, tracking_number: str) -> Delivery:
        """Add a delivery; tracking numbers are unique."""
        for delivery in self._deliveries.values():
            if delivery.tracking_number == tracking_number:
                raise ValueError(f"Tracking number {tracking_number} already exists")

        delivery = Delivery(next(self._delivery_ids), name, tracking_number)
        self._deliveries[delivery.id] = delivery
        return delivery

    def remove_delivery(self, delivery_id: int) -> bool:
        """Remove a delivery and its events."""
        self._events.pop(delivery_id, None)
        return self._deliveries.pop(delivery_id, None) is not None

    def list_deliveries(self) -> List[Delivery]:
        return list(self._deliveries.values())

    def delete_events(self, delivery_id: int) -> None:
        self._events.pop(delivery_id, None)

    def insert_events(self, delivery_id: int, events: List[TrackingEvent]) -> None:
        rows = self._events.setdefault(delivery_id, [])
        for event in events:
            rows.append(StoredEvent(id=next(self._event_ids), delivery_id=delivery_id, **event.to_dict()))

    def get_events(self, delivery_id: int) -> List[StoredEvent]:
        """Return events newest step first."""
        return sorted(
            self._events.get(delivery_id, []), key=lambda e: e.step_number, reverse=True
        )

    def get_meta(self, key: str) -> Optional[str]:
        return self._meta.get(key)

    def set_meta(self, key: str, value: str) -> None:
        self._meta[key] = value
