"""Lookup lists resource client."""

from typing import TYPE_CHECKING

from gtrending.decoding import decode_programming_languages, decode_spoken_languages
from gtrending.types.languages import ProgrammingLanguage, SpokenLanguage

if TYPE_CHECKING:
    from gtrending.transport import HTTPTransport


class LanguagesClient:
    """Client for the programming and spoken language lookup lists."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the languages client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_programming_languages(self) -> list[ProgrammingLanguage]:
        """
        Fetch the programming languages the upstream can filter by.

        The list is fetched on every call.

        Returns:
            List of ProgrammingLanguage entries in upstream order

        Raises:
            TransportError: On network errors or non-2xx responses
            DecodeError: If the response does not match the expected schema
        """
        return decode_programming_languages(self.transport.get_json("/languages"))

    def list_spoken_languages(self) -> list[SpokenLanguage]:
        """
        Fetch the spoken languages the upstream can filter by.

        The list is fetched on every call.

        Returns:
            List of SpokenLanguage entries in upstream order

        Raises:
            TransportError: On network errors or non-2xx responses
            DecodeError: If the response does not match the expected schema
        """
        return decode_spoken_languages(self.transport.get_json("/spoken_languages"))
