"""gtrending type definitions.

This module exports all data model types returned by the client.
"""

from gtrending.types.developers import FeaturedRepo, TrendingDeveloper
from gtrending.types.languages import ProgrammingLanguage, SpokenLanguage
from gtrending.types.repositories import Contributor, TrendingRepository

__all__ = [
    # Repository types
    "TrendingRepository",
    "Contributor",
    # Developer types
    "TrendingDeveloper",
    "FeaturedRepo",
    # Lookup types
    "ProgrammingLanguage",
    "SpokenLanguage",
]
