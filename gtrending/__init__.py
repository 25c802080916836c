"""gtrending - Python client for the GitHub trending API."""

from gtrending.async_client import AsyncGTrendingClient
from gtrending.client import GTrendingClient
from gtrending.exceptions import (
    ConfigurationError,
    DecodeError,
    GTrendingError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
    ValidationError,
)
from gtrending.logging import configure_logging, get_logger
from gtrending.query import TIME_RANGES, InvalidFilterPolicy, QueryBuilder
from gtrending.transport import HTTPTransport
from gtrending.types import (
    Contributor,
    FeaturedRepo,
    ProgrammingLanguage,
    SpokenLanguage,
    TrendingDeveloper,
    TrendingRepository,
)
from gtrending.validation import Validator, is_valid_time_range

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "GTrendingClient",
    "AsyncGTrendingClient",
    # Types
    "TrendingRepository",
    "Contributor",
    "TrendingDeveloper",
    "FeaturedRepo",
    "ProgrammingLanguage",
    "SpokenLanguage",
    # Query building and validation
    "InvalidFilterPolicy",
    "QueryBuilder",
    "TIME_RANGES",
    "Validator",
    "is_valid_time_range",
    # Exceptions
    "GTrendingError",
    "ConfigurationError",
    "TransportError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "DecodeError",
    "ValidationError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
