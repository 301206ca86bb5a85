"""Release notes resolution and changelog parsing."""

from .exceptions import FetchError, InvalidVersionError, ParseError, ReleaseNotesError
from .fetchers import LocalChangelogFetcher, ReleaseNotesFetcher, ReleasesApiFetcher, RemoteChangelogFetcher
from .markdown import MarkdownWriter
from .models import ReleaseCollection, ReleaseEntry
from .output import ReleaseNotesReport, ReleaseRecord
from .parser import ChangelogParser
from .resolver import ReleaseNotesResolver, build_resolver
from .sections import SectionKind
from .versions import NormalizedVersion, VersionRange, in_range, is_prerelease, normalize, strip_prefix

__all__ = [
    "ReleaseNotesError",
    "InvalidVersionError",
    "FetchError",
    "ParseError",
    "NormalizedVersion",
    "VersionRange",
    "normalize",
    "is_prerelease",
    "in_range",
    "strip_prefix",
    "SectionKind",
    "ReleaseEntry",
    "ReleaseCollection",
    "MarkdownWriter",
    "ReleaseRecord",
    "ReleaseNotesReport",
    "ChangelogParser",
    "ReleaseNotesFetcher",
    "LocalChangelogFetcher",
    "RemoteChangelogFetcher",
    "ReleasesApiFetcher",
    "ReleaseNotesResolver",
    "build_resolver",
]
