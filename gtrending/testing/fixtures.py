"""
Pytest fixtures for gtrending testing.

Provides common fixtures for testing applications that use gtrending.
"""

from typing import Any, Generator

import pytest

from gtrending.testing.http import FakeTrendingAPI
from gtrending.testing.mock import MockGTrendingClient
from gtrending.types.developers import FeaturedRepo, TrendingDeveloper
from gtrending.types.languages import ProgrammingLanguage, SpokenLanguage
from gtrending.types.repositories import Contributor, TrendingRepository


# ============================================================================
# Sample Payloads (upstream JSON shape)
# ============================================================================

SAMPLE_REPOSITORIES_PAYLOAD: list[dict[str, Any]] = [
    {
        "author": "pallets",
        "name": "flask",
        "avatar": "https://github.com/pallets.png",
        "url": "https://github.com/pallets/flask",
        "description": "The Python micro framework for building web applications.",
        "language": "Python",
        "languageColor": "#3572A5",
        "stars": 61240,
        "forks": 15890,
        "currentPeriodStars": 112,
        "builtBy": [
            {
                "username": "davidism",
                "href": "https://github.com/davidism",
                "avatar": "https://avatars.githubusercontent.com/u/1242887",
            }
        ],
    },
    {
        "author": "rust-lang",
        "name": "rust",
        "avatar": "https://github.com/rust-lang.png",
        "url": "https://github.com/rust-lang/rust",
        "description": "Empowering everyone to build reliable and efficient software.",
        "language": "Rust",
        "languageColor": "#dea584",
        "stars": "89,012",
        "forks": "11,874",
        "currentPeriodStars": "305",
        "builtBy": [],
    },
    {
        "author": "torvalds",
        "name": "linux",
        "avatar": "https://github.com/torvalds.png",
        "url": "https://github.com/torvalds/linux",
        "description": None,
        "language": "C",
        "stars": 170333,
        "forks": 51232,
        "currentPeriodStars": 998,
        "builtBy": [],
    },
]

SAMPLE_DEVELOPERS_PAYLOAD: list[dict[str, Any]] = [
    {
        "username": "sindresorhus",
        "name": "Sindre Sorhus",
        "type": "user",
        "url": "https://github.com/sindresorhus",
        "avatar": "https://avatars.githubusercontent.com/u/170270",
        "repo": {
            "name": "awesome",
            "description": "Awesome lists about all kinds of interesting topics",
            "url": "https://github.com/sindresorhus/awesome",
        },
    },
    {
        "username": "tokio-rs",
        "name": "Tokio",
        "type": "organization",
        "url": "https://github.com/tokio-rs",
        "avatar": "https://avatars.githubusercontent.com/u/20248544",
        "repo": {
            "repo_name": "tokio",
            "description": None,
        },
    },
]

SAMPLE_LANGUAGES_PAYLOAD: list[dict[str, Any]] = [
    {"id": "c", "name": "C"},
    {"id": "c++", "name": "C++"},
    {"id": "go", "name": "Go"},
    {"id": "python", "name": "Python"},
    {"id": "rust", "name": "Rust"},
]

SAMPLE_SPOKEN_LANGUAGES_PAYLOAD: list[dict[str, Any]] = [
    {"url_param": "en", "name": "English"},
    {"url_param": "zh", "name": "Chinese"},
    {"url_param": "de", "name": "German"},
]


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGTrendingClient, None, None]:
    """
    Provide a MockGTrendingClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repositories.configure_fetch(response=[my_repo])
            result = my_function(mock_client)
            assert mock_client.was_called("repositories.fetch")
        ```
    """
    client = MockGTrendingClient()
    yield client
    client.reset()


@pytest.fixture
def fake_api() -> FakeTrendingAPI:
    """
    Provide a FakeTrendingAPI loaded with the sample payloads.

    Example:
        ```python
        def test_fetch(fake_api):
            client = GTrendingClient(base_url=FAKE_BASE_URL, http_client=fake_api.client())
            assert len(client.fetch_repositories()) == 3
        ```
    """
    return FakeTrendingAPI(
        repositories=[dict(item) for item in SAMPLE_REPOSITORIES_PAYLOAD],
        developers=[dict(item) for item in SAMPLE_DEVELOPERS_PAYLOAD],
        languages=list(SAMPLE_LANGUAGES_PAYLOAD),
        spoken_languages=list(SAMPLE_SPOKEN_LANGUAGES_PAYLOAD),
    )


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repositories_payload() -> list[dict[str, Any]]:
    """Provide the raw ``/repositories`` JSON array."""
    return [dict(item) for item in SAMPLE_REPOSITORIES_PAYLOAD]


@pytest.fixture
def sample_developers_payload() -> list[dict[str, Any]]:
    """Provide the raw ``/developers`` JSON array."""
    return [dict(item) for item in SAMPLE_DEVELOPERS_PAYLOAD]


@pytest.fixture
def sample_contributor() -> Contributor:
    """Provide a sample Contributor object."""
    return create_mock_contributor()


@pytest.fixture
def sample_repository() -> TrendingRepository:
    """Provide a sample TrendingRepository object."""
    return create_mock_repository(
        built_by=(create_mock_contributor(),),
    )


@pytest.fixture
def sample_developer() -> TrendingDeveloper:
    """Provide a sample TrendingDeveloper object."""
    return create_mock_developer()


@pytest.fixture
def sample_programming_languages() -> list[ProgrammingLanguage]:
    """Provide the sample programming language lookup list."""
    return [ProgrammingLanguage(**item) for item in SAMPLE_LANGUAGES_PAYLOAD]


@pytest.fixture
def sample_spoken_languages() -> list[SpokenLanguage]:
    """Provide the sample spoken language lookup list."""
    return [SpokenLanguage(**item) for item in SAMPLE_SPOKEN_LANGUAGES_PAYLOAD]


@pytest.fixture
def mock_client_with_repositories(
    mock_client: MockGTrendingClient,
    sample_repository: TrendingRepository,
) -> MockGTrendingClient:
    """
    Provide a MockGTrendingClient whose repositories.fetch returns one repository.

    Example:
        ```python
        def test_digest(mock_client_with_repositories):
            repos = mock_client_with_repositories.fetch_repositories()
            assert repos[0].full_name == "test-author/test-repo"
        ```
    """
    mock_client.repositories.configure_fetch(response=[sample_repository])
    return mock_client


# ============================================================================
# Helper Functions (not fixtures)
# ============================================================================


def create_mock_contributor(
    username: str = "test-user",
    **kwargs: Any,
) -> Contributor:
    """
    Create a Contributor with customizable fields.

    Args:
        username: GitHub username
        **kwargs: Additional fields to override

    Returns:
        Contributor object
    """
    defaults: dict[str, Any] = {
        "href": f"https://github.com/{username}",
        "avatar": f"https://github.com/{username}.png",
        "name": None,
    }
    defaults.update(kwargs)
    return Contributor(username=username, **defaults)


def create_mock_repository(
    author: str = "test-author",
    name: str = "test-repo",
    **kwargs: Any,
) -> TrendingRepository:
    """
    Create a TrendingRepository with customizable fields.

    The url defaults to ``https://github.com/{author}/{name}``.

    Args:
        author: Repository owner
        name: Repository name
        **kwargs: Additional fields to override

    Returns:
        TrendingRepository object
    """
    defaults: dict[str, Any] = {
        "url": f"https://github.com/{author}/{name}",
        "description": None,
        "language": "Python",
        "avatar": f"https://github.com/{author}.png",
        "stars": 0,
        "forks": 0,
        "current_period_stars": 0,
        "language_color": None,
        "built_by": (),
    }
    defaults.update(kwargs)
    return TrendingRepository(author=author, name=name, **defaults)


def create_mock_developer(
    username: str = "test-user",
    **kwargs: Any,
) -> TrendingDeveloper:
    """
    Create a TrendingDeveloper with customizable fields.

    Args:
        username: GitHub username
        **kwargs: Additional fields to override

    Returns:
        TrendingDeveloper object
    """
    defaults: dict[str, Any] = {
        "name": "Test User",
        "type": "user",
        "url": f"https://github.com/{username}",
        "avatar": f"https://github.com/{username}.png",
        "repo": FeaturedRepo(
            name="test-repo",
            description=None,
            url=f"https://github.com/{username}/test-repo",
        ),
    }
    defaults.update(kwargs)
    return TrendingDeveloper(username=username, **defaults)


__all__ = [
    # Sample payloads
    "SAMPLE_REPOSITORIES_PAYLOAD",
    "SAMPLE_DEVELOPERS_PAYLOAD",
    "SAMPLE_LANGUAGES_PAYLOAD",
    "SAMPLE_SPOKEN_LANGUAGES_PAYLOAD",
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
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
    # Helper functions
    "create_mock_contributor",
    "create_mock_repository",
    "create_mock_developer",
]
