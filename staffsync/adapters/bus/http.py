"""HTTP bus adapter.

Implements BusPort by POSTing each message to a webhook endpoint.
"""

import logging

import httpx

from staffsync.core.ports import BusPort

logger = logging.getLogger(__name__)


class HttpBus(BusPort):
    """Delivers bus messages as JSON POST requests."""

    def __init__(
        self,
        url: str,
        token: str = "",
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize HTTP bus adapter.

        Args:
            url: Endpoint that receives the messages.
            token: Optional bearer token sent with every request.
            timeout_seconds: Per-request timeout.
            client: Pre-built client (used by tests); created lazily otherwise.
        """
        if not url:
            raise ValueError("url must be a non-empty string")
        self.url = url
        self.token = token
        self.timeout_seconds = timeout_seconds
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self._client = httpx.AsyncClient(
                headers=headers,
                timeout=self.timeout_seconds,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def send(self, message: str) -> None:
        """POST a message to the endpoint.

        Raises:
            httpx.RequestError: If the endpoint cannot be reached.
            httpx.HTTPStatusError: If the endpoint answers with an error status.
        """
        try:
            client = await self._get_client()
            response = await client.post(self.url, json={"message": message})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Bus endpoint rejected message: {e.response.status_code}",
                extra={"url": self.url, "response": e.response.text},
            )
            raise
        except httpx.RequestError as e:
            logger.error(f"Failed to deliver bus message: {e}", extra={"url": self.url})
            raise
