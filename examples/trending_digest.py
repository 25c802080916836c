#!/usr/bin/env python3
"""
gtrending - Trending Digest Example

Prints a short digest of trending repositories and developers from the
live upstream:
1. List the programming languages the upstream knows
2. Fetch trending repositories for a language
3. Fetch trending developers for the same language

Run with: python examples/trending_digest.py [language] [since]
"""

import logging
import sys

from gtrending import GTrendingClient
from gtrending.exceptions import GTrendingError, RateLimitedError
from gtrending.logging import configure_logging


def main() -> None:
    """Print the trending digest."""
    language = sys.argv[1] if len(sys.argv) > 1 else "python"
    since = sys.argv[2] if len(sys.argv) > 2 else "daily"

    # Log every request, including the lookup list fetches
    configure_logging(level=logging.WARNING, http_level=logging.DEBUG)

    print(f"=== Trending {language} ({since}) ===\n")

    with GTrendingClient.from_env() as client:
        try:
            languages = client.languages.list_programming_languages()
            print(f"1. Upstream knows {len(languages)} programming languages\n")

            print("2. Repositories")
            for repo in client.fetch_repositories(language=language, since=since)[:10]:
                description = repo.description or ""
                print(f"   {repo.full_name:<40} {repo.stars:>8} stars  {description[:50]}")

            print("\n3. Developers")
            for dev in client.fetch_developers(language=language, since=since)[:10]:
                print(f"   {dev.username:<25} {dev.repo.name}")

        except RateLimitedError as e:
            wait = f" (retry after {e.retry_after}s)" if e.retry_after else ""
            print(f"Rate limited{wait}")
            sys.exit(1)
        except GTrendingError as e:
            print(f"Error: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
