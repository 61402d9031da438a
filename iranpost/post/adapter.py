"""Iran Post response adapter - Converts result pages to TrackingEvent models."""

import logging
import re
from datetime import date
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from ..app.dates import format_gregorian_date, parse_jalali_phrase
from ..app.models import TrackingEvent, TrackingQueryResult
from ..const import CSS_DATA_CELL, CSS_DATA_ROW, CSS_HEADER_CELL, CSS_ROW
from .client import HandshakeError, IranPostClient

_LOGGER = logging.getLogger(__name__)

_STEP_PATTERN = re.compile(r"\d+")


class IranPostAdapter:
    """Adapter for converting tracking result HTML to TrackingEvent models."""

    @staticmethod
    def _parse_step(text: str) -> Optional[int]:
        """Read the leading step number of a cell."""
        match = _STEP_PATTERN.match(text)
        if not match:
            return None
        step = int(match.group())
        return step if step > 0 else None

    @staticmethod
    def _resolve_date(date_text: str, today: date) -> Tuple[str, bool]:
        """Normalize a header phrase.

        Returns:
            Tuple of (YYYY-MM-DD, inferred) where inferred means today was used
        """
        parsed = parse_jalali_phrase(date_text)
        if parsed is None:
            _LOGGER.warning("Could not parse event date %r, using today", date_text)
            parsed, inferred = today, True
        else:
            inferred = False
        return format_gregorian_date(parsed.year, parsed.month, parsed.day), inferred

    @staticmethod
    def parse_events(html: str, today: Optional[date] = None) -> List[TrackingEvent]:
        """Parse tracking events from a result page.

        Header rows carry a date that applies to every following data row
        until the next header.

        Args:
            html: Raw result page
            today: Fallback date for unparseable headers (defaults to today)

        Returns:
            Events sorted by step number
        """
        today = today or date.today()
        soup = BeautifulSoup(html, "html.parser")
        events = []
        date_text = ""

        for row in soup.select(f".{CSS_ROW}, .{CSS_DATA_ROW}"):
            header = row.select_one(f".{CSS_HEADER_CELL}")
            if header is not None:
                date_text = header.get_text().strip()

            if CSS_DATA_ROW not in (row.get("class") or []):
                continue

            cells = row.select(f".{CSS_DATA_CELL}")
            if len(cells) < 4:
                continue

            step_number = IranPostAdapter._parse_step(cells[0].get_text().strip())
            description = cells[1].get_text().strip()
            location = cells[2].get_text().strip()
            event_time = cells[3].get_text().strip()

            if not (step_number and description and event_time):
                continue

            event_date, inferred = IranPostAdapter._resolve_date(date_text, today)
            events.append(
                TrackingEvent(
                    step_number=step_number,
                    event_date=event_date,
                    event_time=event_time,
                    description=description,
                    location=location or "",
                    date_inferred=inferred,
                )
            )

        # The portal does not guarantee document order matches step order
        events.sort(key=lambda e: e.step_number)
        return events


class IranPostBackend:
    """Backend implementation that App Layer uses."""

    def __init__(self, client: IranPostClient, adapter: IranPostAdapter):
        """Initialize backend with client and adapter.

        Args:
            client: IranPostClient instance
            adapter: IranPostAdapter instance
        """
        self._client = client
        self._adapter = adapter

    async def track(self, tracking_number: str) -> TrackingQueryResult:
        """Run handshake, query and parse for one tracking number."""
        try:
            tokens = await self._client.acquire_tokens()
        except HandshakeError as err:
            _LOGGER.error("Handshake failed for %s: %s", tracking_number, err)
            return TrackingQueryResult(tracking_number)

        try:
            html = await self._client.query_tracking(tracking_number, tokens)
            if html is None:
                return TrackingQueryResult(tracking_number)
            events = self._adapter.parse_events(html)
        except Exception as err:
            _LOGGER.error("Failed to track %s: %s", tracking_number, err)
            return TrackingQueryResult(tracking_number)

        _LOGGER.info("Parsed %d events for %s", len(events), tracking_number)
        return TrackingQueryResult(tracking_number, events)
