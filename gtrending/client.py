"""
gtrending main client.

Provides the primary interface for fetching trending repositories and
developers.
"""

import os
from typing import Any

import httpx

from gtrending.clients import DevelopersClient, LanguagesClient, RepositoriesClient
from gtrending.exceptions import ConfigurationError
from gtrending.query import InvalidFilterPolicy
from gtrending.transport import HTTPTransport
from gtrending.types.developers import TrendingDeveloper
from gtrending.types.repositories import TrendingRepository
from gtrending.validation import Validator

DEFAULT_BASE_URL = "https://hackertab.pupubird.com"
DEFAULT_TIMEOUT = 30.0


def load_env_settings(timeout: float | None = None) -> dict[str, Any]:
    """
    Read client settings from environment variables.

    Environment variables:
        GTRENDING_BASE_URL: Base URL for API (optional, default: https://hackertab.pupubird.com)
        GTRENDING_TIMEOUT: Request timeout in seconds (optional, default: 30)
        GTRENDING_FILTER_POLICY: "omit", "as_absent" or "raise" (optional, default: omit)

    Args:
        timeout: Explicit timeout, takes precedence over GTRENDING_TIMEOUT

    Returns:
        Keyword arguments for the client constructors

    Raises:
        ConfigurationError: If a variable has an invalid value
    """
    base_url = os.environ.get("GTRENDING_BASE_URL") or DEFAULT_BASE_URL

    if timeout is None:
        raw_timeout = os.environ.get("GTRENDING_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid GTRENDING_TIMEOUT: {raw_timeout}. Must be a number of seconds"
                ) from None
        else:
            timeout = DEFAULT_TIMEOUT

    if timeout <= 0:
        raise ConfigurationError(f"Timeout must be positive, got {timeout}")

    raw_policy = (os.environ.get("GTRENDING_FILTER_POLICY") or "omit").lower()
    try:
        policy = InvalidFilterPolicy(raw_policy)
    except ValueError:
        choices = ", ".join(p.value for p in InvalidFilterPolicy)
        raise ConfigurationError(
            f"Invalid GTRENDING_FILTER_POLICY: {raw_policy}. Must be one of: {choices}"
        ) from None

    return {"base_url": base_url, "timeout": timeout, "filter_policy": policy}


class GTrendingClient:
    """
    Main client for the GitHub trending API.

    Aggregates the resource clients around one shared HTTP transport.

    Example:
        ```python
        from gtrending import GTrendingClient

        with GTrendingClient() as client:
            for repo in client.fetch_repositories(language="python", since="weekly"):
                print(repo.full_name, repo.current_period_stars)

            devs = client.developers.fetch(language="rust")
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        filter_policy: InvalidFilterPolicy | str = InvalidFilterPolicy.OMIT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Base URL for API requests (default: https://hackertab.pupubird.com)
            timeout: Request timeout in seconds (default: 30.0)
            filter_policy: What to do with filter values that fail validation
                (default: omit them from the query)
            http_client: Preconfigured httpx.Client, e.g. one built on
                httpx.MockTransport for tests (optional)

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

        self._transport = HTTPTransport(
            base_url=self.base_url,
            timeout=timeout,
            http_client=http_client,
        )

        self.languages = LanguagesClient(self._transport)
        self.validator = Validator(self.languages)
        self.repositories = RepositoriesClient(self._transport, self.validator, policy)
        self.developers = DevelopersClient(self._transport, self.validator, policy)

    @classmethod
    def from_env(
        cls,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> "GTrendingClient":
        """
        Create a client from environment variables.

        See load_env_settings for the variables read.

        Raises:
            ConfigurationError: If an environment variable has an invalid value
        """
        return cls(http_client=http_client, **load_env_settings(timeout))

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def fetch_repositories(
        self,
        language: str | None = None,
        spoken_language_code: str | None = None,
        since: str | None = None,
    ) -> list[TrendingRepository]:
        """Shortcut for ``client.repositories.fetch(...)``."""
        return self.repositories.fetch(language, spoken_language_code, since)

    def fetch_developers(
        self,
        language: str | None = None,
        since: str | None = None,
    ) -> list[TrendingDeveloper]:
        """Shortcut for ``client.developers.fetch(...)``."""
        return self.developers.fetch(language, since)

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GTrendingClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
