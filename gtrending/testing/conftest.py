"""
Pytest plugin for gtrending testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["gtrending.testing.conftest"]

Or import the fixtures directly:

    from gtrending.testing.fixtures import mock_client, sample_repository
"""

# Re-export all fixtures for pytest auto-discovery
from gtrending.testing.fixtures import (
    fake_api,
    mock_client,
    mock_client_with_repositories,
    sample_contributor,
    sample_developer,
    sample_developers_payload,
    sample_programming_languages,
    sample_repositories_payload,
    sample_repository,
    sample_spoken_languages,
)

__all__ = [
    "mock_client",
    "fake_api",
    "sample_repositories_payload",
    "sample_developers_payload",
    "sample_contributor",
    "sample_repository",
    "sample_developer",
    "sample_programming_languages",
    "sample_spoken_languages",
    "mock_client_with_repositories",
]
