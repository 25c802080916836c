"""
HTTP Transport for gtrending.

Handles HTTP communication with the trending API, JSON parsing of responses
and mapping of failures into typed exceptions. Requests are never retried.
"""

import time
from typing import Any

import httpx

from gtrending.exceptions import (
    DecodeError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from gtrending.logging import log_http_request, log_http_response, shorten_body

USER_AGENT = "gtrending-python/0.1.0"


class HTTPTransport:
    """
    HTTP transport layer for GET requests against the trending API.

    Handles:
    - Joining request paths (with their query string) onto the base URL
    - Mapping network failures and non-2xx responses to TransportError
    - Mapping unparseable bodies to DecodeError
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://hackertab.pupubird.com")
            timeout: Request timeout in seconds
            http_client: Preconfigured httpx.Client to use instead of creating one.
                The caller keeps ownership and must close it.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        )

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        """Return the absolute URL for an API path such as ``/languages``."""
        return f"{self.base_url}{path}"

    def get_json(self, path: str) -> Any:
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
            response = self._client.get(url)
        except httpx.TimeoutException as e:
            raise TransportError("TIMEOUT", f"GET {url} timed out: {e}") from e
        except httpx.RequestError as e:
            raise TransportError("CONNECTION_ERROR", f"GET {url} failed: {e}") from e

        elapsed_ms = (time.monotonic() - started) * 1000
        return handle_response(response, url, elapsed_ms)


def handle_response(response: httpx.Response, url: str, elapsed_ms: float) -> Any:
    """
    Turn an HTTP response into parsed JSON or raise the matching error.

    Shared by the sync and async transports.
    """
    if not response.is_success:
        log_http_response(response.status_code, url, elapsed_ms)
        raise parse_error_response(response)

    try:
        body = response.json()
    except ValueError as e:
        raise DecodeError(
            f"response from {url} is not valid JSON: {shorten_body(response.text)}"
        ) from e

    log_http_response(response.status_code, url, elapsed_ms, body)
    return body


def parse_error_response(response: httpx.Response) -> TransportError:
    """
    Parse a non-2xx response into a typed exception.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate TransportError subclass
    """
    status_code = response.status_code
    message = f"HTTP {status_code} from {response.request.url}"
    detail = shorten_body(response.text)
    if detail:
        message = f"{message}: {detail}"

    if status_code == 404:
        return NotFoundError("NOT_FOUND", message, status_code)
    elif status_code == 429:
        retry_after: int | None
        try:
            retry_after = int(response.headers["Retry-After"])
        except (KeyError, ValueError):
            retry_after = None
        return RateLimitedError("RATE_LIMITED", message, retry_after, status_code)
    elif status_code >= 500:
        return ServerError("SERVER_ERROR", message, status_code)
    else:
        return TransportError(f"HTTP_{status_code}", message, status_code)
