"""Shared constants used across the application."""

import re

# Release Notes Constants
# -----------------------

CHANGELOG_FILENAMES: tuple[str, ...] = (
    "CHANGELOG.md",
    "CHANGELOG",
    "HISTORY.md",
    "HISTORY",
    "CHANGES.md",
    "CHANGES",
    "NEWS.md",
    "NEWS",
)
"""Changelog filenames to look for, in order of preference."""

DEFAULT_BRANCHES: tuple[str, ...] = ("main", "master")
"""Branches tried after the version tags when reading a remote changelog."""

RELEASES_PER_PAGE = 100
"""Number of releases requested from the releases API in a single call."""

# Regex Patterns
REPOSITORY_URL_PATTERN = re.compile(r"(?:^|[/@.])github\.com[:/]([^/\s]+)/([^/\s]+?)(?:\.git)?/?$", re.IGNORECASE)
"""Pattern to extract owner/repo from GitHub URLs (https, git+https, ssh and scp-like forms)."""

GITHUB_REFERENCE_URL_PATTERN = r"https?://github\.com/[^/\s]+/[^/\s]+/(?:pull|issues)/(\d+)"
"""Pattern to match GitHub pull request and issue URLs inside release note text."""

CHANGELOG_VERSION = r"v?(\d+\.\d+\.\d+(?:[.-][\w.]+)?)"
"""Version token as it appears in a changelog header."""

CHANGELOG_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # ## [1.0.0] - 2023-05-21
    re.compile(rf"^##\s+\[{CHANGELOG_VERSION}\]\s+-\s+(\d{{4}}-\d{{2}}-\d{{2}})"),
    # ## 1.0.0 - 2023-05-21
    re.compile(rf"^##\s+{CHANGELOG_VERSION}\s+-\s+(\d{{4}}-\d{{2}}-\d{{2}})"),
    # ## 1.0.0 (2023-05-21)
    re.compile(rf"^##\s+{CHANGELOG_VERSION}\s+\((\d{{4}}-\d{{2}}-\d{{2}})\)"),
    # ## 1.0.0
    re.compile(rf"^##\s+{CHANGELOG_VERSION}\s*$"),
)
"""Release header shapes, tried in priority order; the first match wins."""

CHANGELOG_DATE_FORMAT = "%Y-%m-%d"
"""Date format used in changelog release headers."""
