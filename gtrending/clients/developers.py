"""Trending developers resource client."""

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
    from gtrending.transport import HTTPTransport
    from gtrending.validation import Validator


class DevelopersClient:
    """Client for trending developers."""

    def __init__(
        self,
        transport: "HTTPTransport",
        validator: "Validator",
        filter_policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT,
    ) -> None:
        """
        Initialize the developers client.

        Args:
            transport: HTTP transport for making requests
            validator: Validator used to check filter values before the request
            filter_policy: What to do with filter values that fail validation
        """
        self.transport = transport
        self.validator = validator
        self.filter_policy = InvalidFilterPolicy(filter_policy)

    def fetch(
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

        Raises:
            TransportError: On network errors or non-2xx responses
            DecodeError: If a response does not match the expected schema
            ValidationError: If a filter is invalid and the policy is RAISE
        """
        language_valid = check_filter(
            LANGUAGE_KEY,
            language,
            language is None or self.validator.is_valid_programming_language(language),
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

        return decode_developers(self.transport.get_json(f"/developers{query}"))
