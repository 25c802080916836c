"""gtrending resource clients."""

from gtrending.clients.developers import DevelopersClient
from gtrending.clients.languages import LanguagesClient
from gtrending.clients.repositories import RepositoriesClient

__all__ = [
    "LanguagesClient",
    "RepositoriesClient",
    "DevelopersClient",
]
