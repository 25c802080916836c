"""Lookup list entries used to validate filters."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProgrammingLanguage:
    """A programming language the upstream can filter by."""

    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class SpokenLanguage:
    """A spoken language; ``url_param`` is the code sent as ``spoken_lang_code``."""

    url_param: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"url_param": self.url_param, "name": self.name}
