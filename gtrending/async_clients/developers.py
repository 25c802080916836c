"""Async trending developers resource client."""

from typing import TYPE_CHECKING

from gtrending.decoding import decode_developers
from gtrending.query import (
    LANGUAGE_KEY,
    SINCE_KEY,
    InvalidFilterPolicy,
    check_filter,
    developers_query,
)
from gtrending.types.developers import TrendingDeveloper

if TYPE_CHECKING:
    from gtrending.async_transport import AsyncHTTPTransport
    from gtrending.validation import AsyncValidator


class AsyncDevelopersClient:
    """Async client for trending developers."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        validator: "AsyncValidator",
        filter_policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT,
    ) -> None:
        self.transport = transport
        self.validator = validator
        self.filter_policy = InvalidFilterPolicy(filter_policy)

    async def fetch(
        self,
        language: str | None = None,
        since: str | None = None,
    ) -> list[TrendingDeveloper]:
        """
        Fetch trending developers.

        Args:
            language: Programming language to filter by, e.g. "rust"
            since: One of "daily", "weekly", "monthly" (default: "daily")

        Returns:
            TrendingDeveloper list in upstream rank order
        """
        language_valid = check_filter(
            LANGUAGE_KEY,
            language,
            language is None
            or await self.validator.is_valid_programming_language(language),
            self.filter_policy,
        )
        since_valid = check_filter(
            SINCE_KEY,
            since,
            since is None or self.validator.is_valid_time_range(since),
            self.filter_policy,
        )

        query = developers_query(
            language,
            since,
            language_valid=language_valid,
            since_valid=since_valid,
            policy=self.filter_policy,
        )

        return decode_developers(await self.transport.get_json(f"/developers{query}"))
