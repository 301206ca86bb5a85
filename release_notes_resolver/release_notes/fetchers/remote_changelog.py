"""Fetches release notes from a changelog file hosted in the package's GitHub repository."""

import structlog

from release_notes_resolver.configuration.models import Ecosystem, FetcherKind
from release_notes_resolver.github.abc import RepositoryHostClientBase
from release_notes_resolver.utils.constants import CHANGELOG_FILENAMES, DEFAULT_BRANCHES
from release_notes_resolver.utils.github import parse_repository_url

from ..exceptions import ReleaseNotesError
from ..models import ReleaseCollection
from ..parser import ChangelogParser
from ..versions import strip_prefix
from .base import ReleaseNotesFetcher

logger = structlog.get_logger(__name__)


def candidate_refs(version: str) -> list[str]:
    """Refs to read the changelog from: the version tag (with and without 'v'), then default branches.

    Repositories tag releases either as ``v7.10.0`` or ``7.10.0``.
    """
    bare = strip_prefix(version)
    refs = [f"v{bare}" if bare[:1].isdigit() else bare, bare, *DEFAULT_BRANCHES]
    return list(dict.fromkeys(refs))


class RemoteChangelogFetcher(ReleaseNotesFetcher):
    """Reads CHANGELOG-style files from the package's GitHub repository."""

    kind = FetcherKind.REMOTE_CHANGELOG

    def __init__(self, client: RepositoryHostClientBase, parser: ChangelogParser | None = None) -> None:
        """Initialize with a repository host client and the changelog parser to delegate to."""
        self.client = client
        self.parser = parser or ChangelogParser()

    def supports(self, repository_url: str, local_path: str | None) -> bool:
        return parse_repository_url(repository_url) is not None

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
        owner_repo = parse_repository_url(repository_url)
        if owner_repo is None:
            return None
        owner, repo = owner_repo

        content = await self._fetch_changelog_content(owner, repo, to_version)
        if content is None:
            logger.debug("No remote changelog found", package=package, owner=owner, repo=repo)
            return None

        try:
            result = self.parser.parse(content, from_version, to_version, include_prerelease)
        except ReleaseNotesError as exc:
            logger.warning("Failed to parse remote changelog", package=package, owner=owner, repo=repo, error=str(exc))
            return None

        logger.info("Parsed remote changelog", package=package, ecosystem=ecosystem.value, releases=len(result))
        return result

    async def _fetch_changelog_content(self, owner: str, repo: str, version: str) -> str | None:
        """Return the first non-empty changelog found across candidate refs and filenames."""
        for ref in candidate_refs(version):
            for filename in CHANGELOG_FILENAMES:
                try:
                    content = await self.client.get_file_content(owner, repo, filename, ref)
                except ReleaseNotesError as exc:
                    logger.debug("Failed to read remote changelog candidate", owner=owner, repo=repo, ref=ref, path=filename, error=str(exc))
                    continue
                if content and content.strip():
                    logger.debug("Found remote changelog", owner=owner, repo=repo, ref=ref, path=filename)
                    return content
        return None
