#!/usr/bin/env python3
"""
Basic gtrending usage example.

This example runs offline against the in-memory fake upstream.
Run with: python examples/basic_usage.py
"""

from gtrending import ConfigurationError, GTrendingClient, GTrendingError
from gtrending.query import InvalidFilterPolicy
from gtrending.testing import FAKE_BASE_URL, FakeTrendingAPI
from gtrending.testing.fixtures import (
    SAMPLE_DEVELOPERS_PAYLOAD,
    SAMPLE_LANGUAGES_PAYLOAD,
    SAMPLE_REPOSITORIES_PAYLOAD,
    SAMPLE_SPOKEN_LANGUAGES_PAYLOAD,
)

print("=== gtrending Basic Usage Example ===\n")

# 1. Exception hierarchy
print("1. Testing exception classes...")
try:
    GTrendingClient(base_url="")
except GTrendingError as e:
    assert isinstance(e, ConfigurationError)
    print(f"   Caught GTrendingError: {e}")
    print(f"   Code: {e.code}, Message: {e.message}")

print("\n   OK: Exception classes working\n")

api = FakeTrendingAPI(
    repositories=SAMPLE_REPOSITORIES_PAYLOAD,
    developers=SAMPLE_DEVELOPERS_PAYLOAD,
    languages=SAMPLE_LANGUAGES_PAYLOAD,
    spoken_languages=SAMPLE_SPOKEN_LANGUAGES_PAYLOAD,
)

# 2. Trending repositories
print("2. Fetching trending repositories...")
with GTrendingClient(base_url=FAKE_BASE_URL, http_client=api.client()) as client:
    repos = client.fetch_repositories(language="python", since="weekly")
    for repo in repos:
        print(f"   {repo.full_name}: {repo.stars} stars (+{repo.current_period_stars})")

    print(f"   Requests made: {api.paths}")
    assert api.paths[-1] == "/repositories?language=python&since=weekly&spoken_lang_code="

print("\n   OK: Repositories fetched\n")

# 3. Invalid filters under each policy
print("3. Invalid filter handling...")
for policy in InvalidFilterPolicy:
    api.requests.clear()
    with GTrendingClient(
        base_url=FAKE_BASE_URL, http_client=api.client(), filter_policy=policy
    ) as client:
        try:
            client.fetch_repositories(language="cobol")
            print(f"   {policy.value}: {api.paths[-1]}")
        except GTrendingError as e:
            print(f"   {policy.value}: raised {e}")

print("\n   OK: Filter policies working\n")

# 4. Trending developers
print("4. Fetching trending developers...")
with GTrendingClient(base_url=FAKE_BASE_URL, http_client=api.client()) as client:
    for dev in client.fetch_developers(since="monthly"):
        print(f"   {dev.username} ({dev.type}): {dev.repo.name}")

print("\n   OK: Developers fetched\n")

print("=== All checks passed ===")
