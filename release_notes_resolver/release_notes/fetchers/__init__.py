"""Release notes fetchers, one per kind of source."""

from .base import ReleaseNotesFetcher
from .local import LocalChangelogFetcher
from .releases_api import ReleasesApiFetcher
from .remote_changelog import RemoteChangelogFetcher

__all__ = [
    "ReleaseNotesFetcher",
    "LocalChangelogFetcher",
    "RemoteChangelogFetcher",
    "ReleasesApiFetcher",
]
