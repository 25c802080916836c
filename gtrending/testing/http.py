"""
In-memory trending API for tests.

FakeTrendingAPI serves configurable JSON payloads through
``httpx.MockTransport`` so the real clients, transports and decoders can be
exercised without network access. Every request is recorded.
"""

from typing import Any

import httpx

REPOSITORIES_PATH = "/repositories"
DEVELOPERS_PATH = "/developers"
LANGUAGES_PATH = "/languages"
SPOKEN_LANGUAGES_PATH = "/spoken_languages"

FAKE_BASE_URL = "https://trending.test"


class FakeTrendingAPI:
    """
    Fake upstream for the four trending endpoints.

    Example:
        ```python
        api = FakeTrendingAPI(repositories=[...], languages=[{"id": "python", "name": "Python"}])
        client = GTrendingClient(base_url=FAKE_BASE_URL, http_client=api.client())

        client.fetch_repositories(language="python")
        assert api.paths == [
            "/languages",
            "/repositories?language=python&since=daily&spoken_lang_code=",
        ]
        ```
    """

    def __init__(
        self,
        repositories: list[dict[str, Any]] | None = None,
        developers: list[dict[str, Any]] | None = None,
        languages: list[dict[str, Any]] | None = None,
        spoken_languages: list[dict[str, Any]] | None = None,
    ) -> None:
        self.payloads: dict[str, Any] = {
            REPOSITORIES_PATH: repositories if repositories is not None else [],
            DEVELOPERS_PATH: developers if developers is not None else [],
            LANGUAGES_PATH: languages if languages is not None else [],
            SPOKEN_LANGUAGES_PATH: (
                spoken_languages if spoken_languages is not None else []
            ),
        }
        self.requests: list[httpx.Request] = []
        # path -> (status, body, headers) or an exception to raise
        self._overrides: dict[str, tuple[int, bytes, dict[str, str]] | Exception] = {}

    def set_payload(self, path: str, payload: Any) -> None:
        """Serve ``payload`` as JSON for ``path``."""
        self._overrides.pop(path, None)
        self.payloads[path] = payload

    def fail(
        self, path: str, status_code: int = 500, text: str = "", **headers: str
    ) -> None:
        """Answer requests for ``path`` with an error status."""
        self._overrides[path] = (status_code, text.encode("utf-8"), headers)

    def fail_with(self, path: str, error: Exception) -> None:
        """Raise ``error`` (e.g. httpx.ConnectError) for requests to ``path``."""
        self._overrides[path] = error

    def respond_raw(self, path: str, content: bytes, status_code: int = 200) -> None:
        """Answer requests for ``path`` with a raw, possibly non-JSON body."""
        self._overrides[path] = (status_code, content, {})

    @property
    def paths(self) -> list[str]:
        """Requested paths with their raw query string, in request order."""
        return [request.url.raw_path.decode("ascii") for request in self.requests]

    def count(self, path: str) -> int:
        """Number of requests made to ``path`` (query string ignored)."""
        return sum(1 for request in self.requests if request.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        override = self._overrides.get(path)
        if isinstance(override, Exception):
            raise override
        if override is not None:
            status_code, content, headers = override
            return httpx.Response(status_code, content=content, headers=headers)

        if path not in self.payloads:
            return httpx.Response(404, text=f"no route for {path}")
        return httpx.Response(200, json=self.payloads[path])

    def client(self) -> httpx.Client:
        """Return an httpx.Client wired to this fake."""
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def async_client(self) -> httpx.AsyncClient:
        """Return an httpx.AsyncClient wired to this fake."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
