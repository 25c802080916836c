"""gtrending testing utilities.

Provides a mock client, an in-memory upstream and fixtures for testing
applications that use gtrending.
"""

from gtrending.testing.fixtures import (
    create_mock_contributor,
    create_mock_developer,
    create_mock_repository,
)
from gtrending.testing.http import FAKE_BASE_URL, FakeTrendingAPI
from gtrending.testing.mock import MockCall, MockGTrendingClient, MockResponse

__all__ = [
    # Mock client
    "MockGTrendingClient",
    "MockCall",
    "MockResponse",
    # Fake upstream
    "FakeTrendingAPI",
    "FAKE_BASE_URL",
    # Helper functions
    "create_mock_repository",
    "create_mock_developer",
    "create_mock_contributor",
]
