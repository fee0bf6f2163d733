"""HTTP client for MVG API requests.

Implements the HttpTransport port with aiohttp. Every call performs exactly
one GET request; retries and timeouts are left to aiohttp's defaults.
"""

import asyncio
import logging
from typing import TYPE_CHECKING

import aiohttp

from mvg_client.adapters.api_request_logger import log_api_request
from mvg_client.adapters.mvg_api.constants import DEFAULT_HEADERS
from mvg_client.domain.errors import TransportError
from mvg_client.domain.models import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class MvgHttpClient:
    """HTTP client for MVG API requests."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        user_agent: str | None = None,
        log_requests: bool | None = None,
    ) -> None:
        """Initialize with optional aiohttp session.

        Without a session, each request opens and closes its own.
        """
        self._session = session
        self._headers = dict(DEFAULT_HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent
        self._log_requests = log_requests

    async def get(self, url: str) -> bytes:
        """Perform a GET request and return the raw response body.

        Raises:
            TransportError: On connection failures or a non-2xx status.
        """
        log_api_request("GET", url, headers=self._headers, enabled=self._log_requests)

        if self._session is not None:
            return await self._get_with_session(self._session, url)

        async with aiohttp.ClientSession() as session:
            return await self._get_with_session(session, url)

    async def _get_with_session(self, session: "ClientSession", url: str) -> bytes:
        try:
            async with session.get(url, headers=self._headers) as response:
                return await self._read_response(response, url)
        except aiohttp.ClientError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(ErrorDetails(reason=str(e) or type(e).__name__), url) from e
        except asyncio.TimeoutError as e:
            logger.warning(f"Request to {url} timed out")
            raise TransportError(ErrorDetails(reason="Request timed out"), url) from e

    async def _read_response(self, response: "ClientResponse", url: str) -> bytes:
        """Return the body of a successful response."""
        if not 200 <= response.status < 300:
            reason = response.reason or "Unexpected status"
            logger.warning(
                f"MVG API returned status {response.status} for {url} "
                f"(Content-Type: {response.headers.get('Content-Type', 'unknown')})"
            )
            raise TransportError(ErrorDetails(status_code=response.status, reason=reason), url)

        body = await response.read()
        logger.debug(f"Received {len(body)} bytes from {url}")
        return body
