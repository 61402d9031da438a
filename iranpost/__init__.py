"""The Iran Post tracking integration."""

import logging
from typing import Optional

import aiohttp

from .app.api import ParcelTrackingAPI
from .app.store import TrackingStore
from .coordinator import TrackingRefreshCoordinator
from .post.adapter import IranPostAdapter, IranPostBackend
from .post.client import IranPostClient

_LOGGER = logging.getLogger(__name__)


def create_coordinator(
    store: TrackingStore, session: Optional[aiohttp.ClientSession] = None
) -> TrackingRefreshCoordinator:
    """Wire the client, adapter, backend and API layers around a store."""
    client = IranPostClient(session)
    adapter = IranPostAdapter()
    backend = IranPostBackend(client, adapter)
    api = ParcelTrackingAPI(backend, store)

    _LOGGER.debug("Created Iran Post coordinator")
    return TrackingRefreshCoordinator(api, store)
