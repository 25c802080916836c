"""Async lookup lists resource client."""

from typing import TYPE_CHECKING

from gtrending.decoding import decode_programming_languages, decode_spoken_languages
from gtrending.types.languages import ProgrammingLanguage, SpokenLanguage

if TYPE_CHECKING:
    from gtrending.async_transport import AsyncHTTPTransport


class AsyncLanguagesClient:
    """Async client for the programming and spoken language lookup lists."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async languages client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list_programming_languages(self) -> list[ProgrammingLanguage]:
        """Fetch the programming languages the upstream can filter by."""
        return decode_programming_languages(
            await self.transport.get_json("/languages")
        )

    async def list_spoken_languages(self) -> list[SpokenLanguage]:
        """Fetch the spoken languages the upstream can filter by."""
        return decode_spoken_languages(
            await self.transport.get_json("/spoken_languages")
        )
