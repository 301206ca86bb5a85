"""Utility modules for shared functionality."""

from .constants import (
    CHANGELOG_FILENAMES,
    CHANGELOG_HEADER_PATTERNS,
    DEFAULT_BRANCHES,
    GITHUB_REFERENCE_URL_PATTERN,
    REPOSITORY_URL_PATTERN,
)
from .retry import retry_on_rate_limit

__all__ = [
    "CHANGELOG_FILENAMES",
    "CHANGELOG_HEADER_PATTERNS",
    "DEFAULT_BRANCHES",
    "GITHUB_REFERENCE_URL_PATTERN",
    "REPOSITORY_URL_PATTERN",
    "retry_on_rate_limit",
]
