"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field
from enum import Enum


class Ecosystem(str, Enum):
    """Package manager ecosystems whose lock files are analyzed."""

    COMPOSER = "composer"
    NPM = "npm"


class FetcherKind(str, Enum):
    """Release notes sources, named for configuring the resolver order."""

    LOCAL = "local"
    REMOTE_CHANGELOG = "remote_changelog"
    RELEASES_API = "releases_api"


DEFAULT_FETCHER_ORDER: tuple[FetcherKind, ...] = (
    FetcherKind.LOCAL,
    FetcherKind.REMOTE_CHANGELOG,
    FetcherKind.RELEASES_API,
)
"""Fastest source first: local file, then the hosted changelog, then the releases API."""


class OutputFormat(str, Enum):
    """Ways the CLI can render a resolved release collection."""

    MARKDOWN = "markdown"
    SUMMARY = "summary"
    JSON = "json"


@dataclass
class ResolveConfig:
    """Configuration for a single release notes lookup."""

    package: str
    from_version: str
    to_version: str
    repository_url: str
    ecosystem: Ecosystem = Ecosystem.COMPOSER
    local_path: str | None = None
    include_prerelease: bool = False
    fetchers: list[FetcherKind] = field(default_factory=lambda: list(DEFAULT_FETCHER_ORDER))
