"""Iran Post client - Direct HTTP communication with the tracking portal."""

import asyncio
import logging
from typing import Dict, Optional, Tuple

import aiohttp
from bs4 import BeautifulSoup

from ..app.models import FormTokens
from ..const import (
    BASE_HEADERS,
    CONNECT_TIMEOUT,
    CSS_ALERT,
    FIELD_EVENT_ARGUMENT,
    FIELD_EVENT_TARGET,
    FIELD_EVENT_VALIDATION,
    FIELD_SEARCH,
    FIELD_VIEWSTATE,
    FIELD_VIEWSTATE_ENCRYPTED,
    FIELD_VIEWSTATE_GENERATOR,
    FIELD_VOTE_REASON,
    FIELD_VOTE_TEL,
    NOT_FOUND_PHRASE,
    READ_TIMEOUT,
    REQUEST_TIMEOUT,
    SEARCH_BUTTON_TARGET,
    TRACKING_ORIGIN,
    TRACKING_URL,
)

_LOGGER = logging.getLogger(__name__)


class IranPostError(Exception):
    """Base error for the tracking portal."""


class HandshakeError(IranPostError):
    """The landing page could not be fetched or lacks the form state."""


class QueryError(IranPostError):
    """The tracking search request was rejected by the portal."""


class IranPostClient:
    """Client for the Iran Post tracking web form."""

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        url: str = TRACKING_URL,
        origin: str = TRACKING_ORIGIN,
    ):
        """Initialize Iran Post client.

        Args:
            session: Optional aiohttp session (will create one per request if not provided)
            url: Tracking portal URL, used for both the GET and the POST
            origin: Origin header sent with the search POST
        """
        self._session = session
        self._url = url
        self._origin = origin
        self._headers = dict(BASE_HEADERS)
        self._timeout = aiohttp.ClientTimeout(
            total=REQUEST_TIMEOUT,
            connect=CONNECT_TIMEOUT,
            sock_read=READ_TIMEOUT,
        )

    async def _request(
        self,
        method: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, str]] = None,
    ) -> Tuple[int, str]:
        """Make one HTTP request to the portal.

        Args:
            method: HTTP method (GET or POST)
            headers: Request headers
            data: Form fields, sent URL-encoded

        Returns:
            Tuple of (status, body text)

        Raises:
            aiohttp.ClientError: On network errors
            asyncio.TimeoutError: When the client timeout expires
        """
        # Use provided session or create a temporary one
        use_temporary_session = self._session is None
        session = self._session or aiohttp.ClientSession()

        try:
            async with session.request(
                method,
                self._url,
                headers=headers,
                data=data,
                timeout=self._timeout,
            ) as response:
                return response.status, await response.text()
        finally:
            # Only close session if we created it (not if it was provided)
            if use_temporary_session:
                await session.close()

    async def acquire_tokens(self) -> FormTokens:
        """Fetch the landing page and extract the ASP.NET form state.

        Returns:
            FormTokens for a single search request

        Raises:
            HandshakeError: If the page is unreachable or a hidden field is missing
        """
        try:
            status, html = await self._request("GET", self._headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise HandshakeError(f"Failed to fetch form data: {err}") from err

        if not 200 <= status < 300:
            raise HandshakeError(f"Failed to fetch form data: {status}")

        soup = BeautifulSoup(html, "html.parser")
        values = {}
        for field_id in (FIELD_VIEWSTATE, FIELD_VIEWSTATE_GENERATOR, FIELD_EVENT_VALIDATION):
            element = soup.find(id=field_id)
            value = element.get("value") if element else None
            if not value:
                raise HandshakeError(f"Could not extract {field_id} from landing page")
            values[field_id] = value

        return FormTokens(
            view_state=values[FIELD_VIEWSTATE],
            view_state_generator=values[FIELD_VIEWSTATE_GENERATOR],
            event_validation=values[FIELD_EVENT_VALIDATION],
        )

    @staticmethod
    def build_search_form(tracking_number: str, tokens: FormTokens) -> Dict[str, str]:
        """Build the postback fields for the search button."""
        return {
            FIELD_EVENT_TARGET: SEARCH_BUTTON_TARGET,
            FIELD_EVENT_ARGUMENT: "",
            FIELD_VIEWSTATE: tokens.view_state,
            FIELD_VIEWSTATE_GENERATOR: tokens.view_state_generator,
            FIELD_VIEWSTATE_ENCRYPTED: "",
            FIELD_EVENT_VALIDATION: tokens.event_validation,
            FIELD_SEARCH: tracking_number,
            FIELD_VOTE_REASON: "",
            FIELD_VOTE_TEL: "",
        }

    async def _post_search(self, tracking_number: str, tokens: FormTokens) -> str:
        """Submit the search form and return the response body.

        Raises:
            QueryError: On network errors or a non-success status
        """
        headers = {
            **self._headers,
            "Referer": self._url,
            "Origin": self._origin,
            "Content-Type": "application/x-www-form-urlencoded",
        }
        try:
            status, html = await self._request(
                "POST", headers, data=self.build_search_form(tracking_number, tokens)
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise QueryError(f"Tracking request failed: {err}") from err

        if not 200 <= status < 300:
            raise QueryError(f"Tracking request failed with status {status}")
        return html

    async def query_tracking(self, tracking_number: str, tokens: FormTokens) -> Optional[str]:
        """Search for a tracking number.

        Args:
            tracking_number: The tracking number to search
            tokens: Form state from acquire_tokens

        Returns:
            Raw result HTML, or None if the portal has no record or the request failed
        """
        try:
            html = await self._post_search(tracking_number, tokens)
        except QueryError as err:
            _LOGGER.error("Post tracking request for %s failed: %s", tracking_number, err)
            return None

        soup = BeautifulSoup(html, "html.parser")
        alert_text = " ".join(
            element.get_text(strip=True) for element in soup.select(CSS_ALERT)
        )
        if NOT_FOUND_PHRASE in alert_text:
            _LOGGER.info("No tracking data found for %s", tracking_number)
            return None

        return html
