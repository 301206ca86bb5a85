"""Sets up the githubkit client used to read releases and repository files."""

from typing import TypeAlias

import structlog
from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy, UnauthAuthStrategy

logger = structlog.get_logger(__name__)

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy] | GitHub[UnauthAuthStrategy]


def get_github_client(github_pat_token: str | None, github_api_url: str) -> GitHubClient:
    """Returns a GitHub client, authenticated with a PAT when one is given.

    Public repositories can be read anonymously, at the cost of a much lower
    rate limit. Supports custom base URL for GitHub Enterprise Server (GHES).
    """
    if github_pat_token:
        # Disable HTTP caching to always get fresh data
        return GitHub(auth=TokenAuthStrategy(github_pat_token), base_url=github_api_url, http_cache=False)
    logger.info("No GitHub token configured, using unauthenticated client", github_api_url=github_api_url)
    return GitHub(auth=UnauthAuthStrategy(), base_url=github_api_url, http_cache=False)
