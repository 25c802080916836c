"""
gtrending async client.

Provides the async interface for fetching trending repositories and
developers.
"""

from typing import Any

import httpx

from gtrending.async_clients import (
    AsyncDevelopersClient,
    AsyncLanguagesClient,
    AsyncRepositoriesClient,
)
from gtrending.async_transport import AsyncHTTPTransport
from gtrending.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, load_env_settings
from gtrending.exceptions import ConfigurationError
from gtrending.query import InvalidFilterPolicy
from gtrending.types.developers import TrendingDeveloper
from gtrending.types.repositories import TrendingRepository
from gtrending.validation import AsyncValidator


class AsyncGTrendingClient:
    """
    Async client for the GitHub trending API.

    Aggregates the async resource clients around one shared transport.
    Uses httpx for async HTTP operations.

    Example:
        ```python
        import asyncio
        from gtrending import AsyncGTrendingClient

        async def main():
            async with AsyncGTrendingClient() as client:
                repos = await client.fetch_repositories(since="monthly")
                devs = await client.fetch_developers(language="go")

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        filter_policy: InvalidFilterPolicy | str = InvalidFilterPolicy.OMIT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the async client.

        Args:
            base_url: Base URL for API requests (default: https://hackertab.pupubird.com)
            timeout: Request timeout in seconds (default: 30.0)
            filter_policy: What to do with filter values that fail validation
            http_client: Preconfigured httpx.AsyncClient (optional)

        Raises:
            ConfigurationError: If base_url, timeout or filter_policy is invalid
        """
        if not base_url:
            raise ConfigurationError("base_url must not be empty")
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")
        try:
            policy = InvalidFilterPolicy(filter_policy)
        except ValueError:
            raise ConfigurationError(
                f"Invalid filter_policy: {filter_policy!r}"
            ) from None

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.filter_policy = policy

        self._transport = AsyncHTTPTransport(
            base_url=self.base_url,
            timeout=timeout,
            http_client=http_client,
        )

        self.languages = AsyncLanguagesClient(self._transport)
        self.validator = AsyncValidator(self.languages)
        self.repositories = AsyncRepositoriesClient(
            self._transport, self.validator, policy
        )
        self.developers = AsyncDevelopersClient(self._transport, self.validator, policy)

    @classmethod
    def from_env(
        cls,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "AsyncGTrendingClient":
        """
        Create an async client from environment variables.

        Raises:
            ConfigurationError: If an environment variable has an invalid value
        """
        return cls(http_client=http_client, **load_env_settings(timeout))

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def fetch_repositories(
        self,
        language: str | None = None,
        spoken_language_code: str | None = None,
        since: str | None = None,
    ) -> list[TrendingRepository]:
        """Shortcut for ``await client.repositories.fetch(...)``."""
        return await self.repositories.fetch(language, spoken_language_code, since)

    async def fetch_developers(
        self,
        language: str | None = None,
        since: str | None = None,
    ) -> list[TrendingDeveloper]:
        """Shortcut for ``await client.developers.fetch(...)``."""
        return await self.developers.fetch(language, since)

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGTrendingClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
