"""Async trending repositories resource client."""

from typing import TYPE_CHECKING

from gtrending.decoding import decode_repositories
from gtrending.query import (
    LANGUAGE_KEY,
    SINCE_KEY,
    SPOKEN_LANGUAGE_KEY,
    InvalidFilterPolicy,
    check_filter,
    repositories_query,
)
from gtrending.types.repositories import TrendingRepository

if TYPE_CHECKING:
    from gtrending.async_transport import AsyncHTTPTransport
    from gtrending.validation import AsyncValidator


class AsyncRepositoriesClient:
    """Async client for trending repositories."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        validator: "AsyncValidator",
        filter_policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT,
    ) -> None:
        """
        Initialize the async repositories client.

        Args:
            transport: Async HTTP transport for making requests
            validator: Validator used to check filter values before the request
            filter_policy: What to do with filter values that fail validation
        """
        self.transport = transport
        self.validator = validator
        self.filter_policy = InvalidFilterPolicy(filter_policy)

    async def fetch(
        self,
        language: str | None = None,
        spoken_language_code: str | None = None,
        since: str | None = None,
    ) -> list[TrendingRepository]:
        """
        Fetch trending repositories.

        Lookups run one after another before ``/repositories`` is requested.

        Args:
            language: Programming language to filter by, e.g. "python"
            spoken_language_code: Spoken language to filter by, e.g. "en"
            since: One of "daily", "weekly", "monthly" (default: "daily")

        Returns:
            TrendingRepository list in upstream rank order
        """
        policy = self.filter_policy

        language_valid = check_filter(
            LANGUAGE_KEY,
            language,
            language is None
            or await self.validator.is_valid_programming_language(language),
            policy,
        )
        since_valid = check_filter(
            SINCE_KEY,
            since,
            since is None or self.validator.is_valid_time_range(since),
            policy,
        )
        spoken_language_valid = check_filter(
            SPOKEN_LANGUAGE_KEY,
            spoken_language_code,
            spoken_language_code is None
            or await self.validator.is_valid_spoken_language(spoken_language_code),
            policy,
        )

        query = repositories_query(
            language,
            since,
            spoken_language_code,
            language_valid=language_valid,
            since_valid=since_valid,
            spoken_language_valid=spoken_language_valid,
            policy=self.filter_policy,
        )

        return decode_repositories(
            await self.transport.get_json(f"/repositories{query}")
        )
