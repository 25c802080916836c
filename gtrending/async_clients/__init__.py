"""gtrending async resource clients."""

from gtrending.async_clients.developers import AsyncDevelopersClient
from gtrending.async_clients.languages import AsyncLanguagesClient
from gtrending.async_clients.repositories import AsyncRepositoriesClient

__all__ = [
    "AsyncLanguagesClient",
    "AsyncRepositoriesClient",
    "AsyncDevelopersClient",
]
