"""HTTP transport port."""

from typing import Protocol


class HttpTransport(Protocol):
    """Port for performing a single HTTP GET request."""

    async def get(self, url: str) -> bytes:
        """Return the response body, or raise TransportError."""
        ...
