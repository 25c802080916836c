"""Trending repositories resource client."""

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
    from gtrending.transport import HTTPTransport
    from gtrending.validation import Validator


class RepositoriesClient:
    """Client for trending repositories."""

    def __init__(
        self,
        transport: "HTTPTransport",
        validator: "Validator",
        filter_policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT,
    ) -> None:
        """
        Initialize the repositories client.

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
        spoken_language_code: str | None = None,
        since: str | None = None,
    ) -> list[TrendingRepository]:
        """
        Fetch trending repositories.

        Filters that are given are validated first, in order: language
        (``GET /languages``), since (local), spoken language
        (``GET /spoken_languages``). Only then is ``/repositories`` requested.

        Args:
            language: Programming language to filter by, e.g. "python"
            spoken_language_code: Spoken language to filter by, e.g. "en"
            since: One of "daily", "weekly", "monthly" (default: "daily")

        Returns:
            TrendingRepository list in upstream rank order

        Raises:
            TransportError: On network errors or non-2xx responses
            DecodeError: If a response does not match the expected schema
            ValidationError: If a filter is invalid and the policy is RAISE
        """
        policy = self.filter_policy

        # Under RAISE, an invalid filter stops before the next lookup runs
        language_valid = check_filter(
            LANGUAGE_KEY,
            language,
            language is None or self.validator.is_valid_programming_language(language),
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
            or self.validator.is_valid_spoken_language(spoken_language_code),
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

        return decode_repositories(self.transport.get_json(f"/repositories{query}"))
