"""Trending developer data models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FeaturedRepo:
    """The popular repository shown next to a trending developer."""

    name: str
    description: str | None
    url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
        }
        if self.url is not None:
            data["url"] = self.url
        return data


@dataclass(frozen=True)
class TrendingDeveloper:
    """A trending developer."""

    username: str
    name: str
    type: str  # "user" or "organization"
    url: str
    avatar: str
    repo: FeaturedRepo

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "name": self.name,
            "type": self.type,
            "url": self.url,
            "avatar": self.avatar,
            "repo": self.repo.to_dict(),
        }
