"""Trending repository data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Contributor:
    """A user listed as having built a trending repository."""

    username: str
    href: str
    avatar: str
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "username": self.username,
            "href": self.href,
            "avatar": self.avatar,
        }
        if self.name is not None:
            data["name"] = self.name
        return data


@dataclass(frozen=True)
class TrendingRepository:
    """A trending repository, in upstream rank order."""

    author: str
    name: str
    url: str
    description: str | None
    language: str | None
    avatar: str
    stars: int
    forks: int
    current_period_stars: int
    language_color: str | None = None
    built_by: tuple[Contributor, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        """Repository name as ``author/name``."""
        return f"{self.author}/{self.name}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the upstream JSON shape."""
        data: dict[str, Any] = {
            "author": self.author,
            "name": self.name,
            "avatar": self.avatar,
            "url": self.url,
            "description": self.description,
            "language": self.language,
            "stars": self.stars,
            "forks": self.forks,
            "currentPeriodStars": self.current_period_stars,
            "builtBy": [contributor.to_dict() for contributor in self.built_by],
        }
        if self.language_color is not None:
            data["languageColor"] = self.language_color
        return data
