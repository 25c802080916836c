"""Shared fixtures for the gtrending test suite."""

from gtrending.testing.fixtures import (  # noqa: F401
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
