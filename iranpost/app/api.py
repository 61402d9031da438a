"""Platform-agnostic API interface for parcel tracking."""

import logging
from typing import List

from .models import TrackingEvent
from .store import TrackingStore

_LOGGER = logging.getLogger(__name__)


class ParcelTrackingAPI:
    """Platform-agnostic API for parcel tracking."""

    def __init__(self, backend, store: TrackingStore):
        """Initialize with a backend implementation and a store."""
        self._backend = backend
        self._store = store

    async def fetch_events(self, tracking_number: str) -> List[TrackingEvent]:
        """Fetch the current event history for a tracking number.

        Args:
            tracking_number: The tracking number to look up

        Returns:
            Events sorted by step number, empty if nothing was found
        """
        result = await self._backend.track(tracking_number)
        return result.events

    async def refresh_delivery(self, delivery_id: int, tracking_number: str) -> List[TrackingEvent]:
        """Replace the stored events of a delivery with a fresh fetch.

        An empty fetch still clears the previously stored events.

        Args:
            delivery_id: The store id of the delivery
            tracking_number: The delivery's tracking number

        Returns:
            The events that were stored
        """
        events = await self.fetch_events(tracking_number)

        self._store.delete_events(delivery_id)
        if not events:
            _LOGGER.info("No events for %s, cleared stored history", tracking_number)
            return events

        self._store.insert_events(delivery_id, events)
        return events
