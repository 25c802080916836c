"""
Filter validation against the upstream lookup lists.

Language and spoken-language checks fetch the lookup list on every call;
nothing is cached. Lookup failures propagate as exceptions rather than
being reported as "invalid".
"""

from typing import TYPE_CHECKING

from gtrending.logging import log_filter_decision
from gtrending.query import LANGUAGE_KEY, SINCE_KEY, SPOKEN_LANGUAGE_KEY, TIME_RANGES
from gtrending.types.languages import ProgrammingLanguage, SpokenLanguage

if TYPE_CHECKING:
    from gtrending.async_clients.languages import AsyncLanguagesClient
    from gtrending.clients.languages import LanguagesClient


def is_valid_time_range(since: str) -> bool:
    """Return True if ``since`` is one of daily, weekly, monthly (case-sensitive)."""
    valid = since in TIME_RANGES
    log_filter_decision(SINCE_KEY, since, valid)
    return valid


def match_programming_language(
    name: str, languages: list[ProgrammingLanguage]
) -> bool:
    """Case-insensitive exact match of ``name`` against the display names."""
    wanted = name.lower()
    return any(language.name.lower() == wanted for language in languages)


def match_spoken_language(code: str, languages: list[SpokenLanguage]) -> bool:
    """Case-insensitive exact match of ``code`` against display names or codes."""
    wanted = code.lower()
    return any(
        language.name.lower() == wanted or language.url_param.lower() == wanted
        for language in languages
    )


class Validator:
    """Validates filter values using a live LanguagesClient."""

    def __init__(self, languages: "LanguagesClient") -> None:
        self.languages = languages

    def is_valid_programming_language(self, name: str) -> bool:
        """
        Check a programming language against ``GET /languages``.

        Args:
            name: Language name, e.g. "python" or "C++"

        Returns:
            True if some entry's name equals ``name`` ignoring case

        Raises:
            TransportError: If the lookup list cannot be fetched
            DecodeError: If the lookup list is malformed
        """
        valid = match_programming_language(
            name, self.languages.list_programming_languages()
        )
        log_filter_decision(LANGUAGE_KEY, name, valid)
        return valid

    def is_valid_spoken_language(self, code: str) -> bool:
        """
        Check a spoken language against ``GET /spoken_languages``.

        Both forms are accepted: the display name ("English") and the
        ``url_param`` code sent upstream ("en").

        Args:
            code: Spoken language name or code

        Returns:
            True if some entry's name or url_param equals ``code`` ignoring case

        Raises:
            TransportError: If the lookup list cannot be fetched
            DecodeError: If the lookup list is malformed
        """
        valid = match_spoken_language(code, self.languages.list_spoken_languages())
        log_filter_decision(SPOKEN_LANGUAGE_KEY, code, valid)
        return valid

    def is_valid_time_range(self, since: str) -> bool:
        return is_valid_time_range(since)


class AsyncValidator:
    """Validates filter values using a live AsyncLanguagesClient."""

    def __init__(self, languages: "AsyncLanguagesClient") -> None:
        self.languages = languages

    async def is_valid_programming_language(self, name: str) -> bool:
        """Check a programming language against ``GET /languages``."""
        valid = match_programming_language(
            name, await self.languages.list_programming_languages()
        )
        log_filter_decision(LANGUAGE_KEY, name, valid)
        return valid

    async def is_valid_spoken_language(self, code: str) -> bool:
        """
        Check a spoken language against ``GET /spoken_languages``.

        Matches the display name ("English") or the url_param code ("en").
        """
        valid = match_spoken_language(
            code, await self.languages.list_spoken_languages()
        )
        log_filter_decision(SPOKEN_LANGUAGE_KEY, code, valid)
        return valid

    def is_valid_time_range(self, since: str) -> bool:
        return is_valid_time_range(since)
