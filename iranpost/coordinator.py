"""Refresh coordinator for Iran Post deliveries."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from .app.api import ParcelTrackingAPI
from .app.models import TrackingEvent
from .app.store import TrackingStore
from .const import DEFAULT_UPDATE_INTERVAL, META_LAST_REFRESH

_LOGGER = logging.getLogger(__name__)


class TrackingRefreshCoordinator:
    """Class to manage refreshing all stored deliveries."""

    def __init__(
        self,
        api: ParcelTrackingAPI,
        store: TrackingStore,
        update_interval: int = DEFAULT_UPDATE_INTERVAL,
    ) -> None:
        """Initialize coordinator."""
        self.api = api
        self.store = store
        self.update_interval = timedelta(seconds=update_interval)
        self._last_error: Optional[str] = None
        self._last_message: Optional[str] = None

    @property
    def last_error(self) -> Optional[str]:
        """Most recent per-delivery error, cleared by a clean refresh."""
        return self._last_error

    @property
    def last_message(self) -> Optional[str]:
        """Summary of the last batch refresh."""
        return self._last_message

    def last_refresh(self) -> Optional[datetime]:
        """Time of the last completed batch refresh, if any."""
        value = self.store.get_meta(META_LAST_REFRESH)
        if not value:
            return None
        try:
            last_refresh = datetime.fromisoformat(value)
        except ValueError:
            _LOGGER.warning("Ignoring unparseable %s value: %s", META_LAST_REFRESH, value)
            return None
        if last_refresh.tzinfo is None:
            last_refresh = last_refresh.replace(tzinfo=timezone.utc)
        return last_refresh

    def is_refresh_due(self, now: Optional[datetime] = None) -> bool:
        """Check whether the last refresh is older than the update interval."""
        last_refresh = self.last_refresh()
        if last_refresh is None:
            return True
        now = now or datetime.now(timezone.utc)
        return now - last_refresh > self.update_interval

    async def async_refresh_all(self) -> Dict[str, List[TrackingEvent]]:
        """Refresh every delivery, one at a time.

        The portal is a session-bound form, so deliveries are never
        refreshed concurrently. A failure for one delivery does not stop
        the others.

        Returns:
            Events per tracking number for the deliveries that refreshed
        """
        results = {}
        error_count = 0

        for delivery in self.store.list_deliveries():
            try:
                results[delivery.tracking_number] = await self.api.refresh_delivery(
                    delivery.id, delivery.tracking_number
                )
            except Exception as err:
                error_count += 1
                error_msg = f"Error updating {delivery.tracking_number}: {err}"
                _LOGGER.error(error_msg)
                self._last_error = error_msg
                # Continue with other deliveries
                continue

        self.store.set_meta(META_LAST_REFRESH, datetime.now(timezone.utc).isoformat())

        if error_count == 0:
            self._last_message = f"Successfully updated {len(results)} deliveries"
            self._last_error = None
        else:
            self._last_message = f"Updated {len(results)} deliveries, {error_count} errors"

        _LOGGER.info(self._last_message)
        return results

    async def async_refresh_if_due(
        self, now: Optional[datetime] = None
    ) -> Optional[Dict[str, List[TrackingEvent]]]:
        """Refresh all deliveries if the update interval has elapsed."""
        if not self.is_refresh_due(now):
            _LOGGER.debug("Refresh not due yet")
            return None
        return await self.async_refresh_all()
