"""Contains utility functions for GitHub repository URLs and links."""

import re

from release_notes_resolver.utils.constants import GITHUB_REFERENCE_URL_PATTERN, REPOSITORY_URL_PATTERN

_MARKDOWN_REFERENCE_PATTERN = re.compile(rf"(?<!\(){GITHUB_REFERENCE_URL_PATTERN}")


def parse_repository_url(repository_url: str | None) -> tuple[str, str] | None:
    """Extract the owner and repository name from a GitHub repository URL.

    Accepts the forms found in package manifests, e.g.
    ``https://github.com/owner/repo``, ``git+https://github.com/owner/repo.git``
    and ``git@github.com:owner/repo.git``.

    Returns:
        ``(owner, repo)`` or None if the URL does not point at a GitHub repository.
    """
    if not repository_url:
        return None
    match = REPOSITORY_URL_PATTERN.search(repository_url.strip())
    if match is None:
        return None
    owner, repo = match.groups()
    return owner, repo


def format_github_links(text: str) -> str:
    """Convert GitHub PR/issue URLs to compact markdown links.

    ``https://github.com/owner/repo/pull/123`` becomes ``[#123](https://github.com/owner/repo/pull/123)``.
    URLs already wrapped in a markdown link target are left alone.
    """
    return _MARKDOWN_REFERENCE_PATTERN.sub(lambda m: f"[#{m.group(1)}]({m.group(0)})", text)
