"""
Async HTTP Transport for gtrending.

Handles async HTTP communication with the trending API using the httpx
async client. Response handling is shared with the sync transport.
"""

import time
from typing import Any

import httpx

from gtrending.exceptions import TransportError
from gtrending.logging import log_http_request
from gtrending.transport import USER_AGENT, handle_response


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for GET requests against the trending API.

    Handles:
    - Joining request paths (with their query string) onto the base URL
    - Mapping network failures and non-2xx responses to TransportError
    - Mapping unparseable bodies to DecodeError
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://hackertab.pupubird.com")
            timeout: Request timeout in seconds
            http_client: Preconfigured httpx.AsyncClient to use instead of creating
                one. The caller keeps ownership and must close it.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        )

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def url_for(self, path: str) -> str:
        """Return the absolute URL for an API path such as ``/languages``."""
        return f"{self.base_url}{path}"

    async def get_json(self, path: str) -> Any:
        """
        Make a GET request and return the parsed JSON body.

        Args:
            path: API path including any query string (e.g., "/repositories?language=")

        Returns:
            Parsed JSON response

        Raises:
            TransportError: On network errors or non-2xx responses
            DecodeError: If the body is not valid JSON
        """
        url = self.url_for(path)
        log_http_request("GET", url)
        started = time.monotonic()

        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise TransportError("TIMEOUT", f"GET {url} timed out: {e}") from e
        except httpx.RequestError as e:
            raise TransportError("CONNECTION_ERROR", f"GET {url} failed: {e}") from e

        elapsed_ms = (time.monotonic() - started) * 1000
        return handle_response(response, url, elapsed_ms)
