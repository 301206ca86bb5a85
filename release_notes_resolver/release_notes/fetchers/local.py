"""Fetches release notes from a changelog file in a locally installed package."""

from pathlib import Path

import structlog

from release_notes_resolver.configuration.models import Ecosystem, FetcherKind
from release_notes_resolver.utils.constants import CHANGELOG_FILENAMES

from ..exceptions import FetchError, InvalidVersionError, ReleaseNotesError
from ..models import ReleaseCollection
from ..parser import ChangelogParser
from ..versions import normalize, strip_prefix
from .base import ReleaseNotesFetcher

logger = structlog.get_logger(__name__)


class LocalChangelogFetcher(ReleaseNotesFetcher):
    """Reads CHANGELOG-style files from vendor/<package> or node_modules/<package>.

    This is the fastest fetcher since it needs no network access. A local
    changelog may be older than the version being asked about; when it does
    not document ``to_version`` nothing is returned so a remote source can
    answer instead.
    """

    kind = FetcherKind.LOCAL

    def __init__(self, parser: ChangelogParser | None = None) -> None:
        """Initialize with the changelog parser to delegate to."""
        self.parser = parser or ChangelogParser()

    def supports(self, repository_url: str, local_path: str | None) -> bool:
        return local_path is not None and Path(local_path).is_dir()

    async def fetch(
        self,
        package: str,
        from_version: str,
        to_version: str,
        repository_url: str,
        ecosystem: Ecosystem,
        local_path: str | None,
        include_prerelease: bool,
    ) -> ReleaseCollection | None:
        if local_path is None or not Path(local_path).is_dir():
            return None

        try:
            content = self._read_changelog(Path(local_path))
            if content is None:
                logger.debug("No local changelog found", package=package, local_path=local_path)
                return None
            result = self.parser.parse(content, from_version, to_version, include_prerelease)
        except ReleaseNotesError as exc:
            logger.warning("Failed to read local changelog", package=package, local_path=local_path, error=str(exc))
            return None

        if not any(_same_version(release.tag_name, to_version) for release in result):
            logger.info(
                "Local changelog does not document the requested version, deferring",
                package=package,
                to_version=to_version,
                ecosystem=ecosystem.value,
            )
            return None

        logger.info("Found release notes in local changelog", package=package, releases=len(result))
        return result

    def _read_changelog(self, directory: Path) -> str | None:
        """Return the content of the first non-empty known changelog file."""
        for filename in CHANGELOG_FILENAMES:
            path = directory / filename
            if not path.is_file():
                continue
            try:
                content = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as exc:
                raise FetchError(f"Changelog {path} is not valid UTF-8") from exc
            except OSError as exc:
                raise FetchError(f"Could not read changelog {path}: {exc}") from exc
            if not content.strip():
                return None
            logger.debug("Found local changelog", path=str(path))
            return content
        return None


def _same_version(tag_name: str, version: str) -> bool:
    try:
        return normalize(tag_name) == normalize(version)
    except InvalidVersionError:
        return strip_prefix(tag_name) == strip_prefix(version)
