"""Fetches release notes from the GitHub Releases API."""

from datetime import datetime, timezone
from typing import Any

import structlog

from release_notes_resolver.configuration.models import Ecosystem, FetcherKind
from release_notes_resolver.github.abc import RepositoryHostClientBase
from release_notes_resolver.utils.constants import RELEASES_PER_PAGE
from release_notes_resolver.utils.github import parse_repository_url

from ..exceptions import ParseError, ReleaseNotesError
from ..models import ReleaseCollection, ReleaseEntry
from ..versions import VersionRange, strip_prefix
from .base import ReleaseNotesFetcher

logger = structlog.get_logger(__name__)


def _field(release: Any, name: str) -> Any:
    """Read a field from a githubkit release model or a raw JSON object."""
    if isinstance(release, dict):
        return release.get(name)
    return getattr(release, name, None)


def _parse_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Unparsable release date, using current time", date=value)
            return datetime.now(timezone.utc)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc)


class ReleasesApiFetcher(ReleaseNotesFetcher):
    """Builds release entries from GitHub release objects.

    Release bodies are kept as-is; section extraction happens on the entries.
    """

    kind = FetcherKind.RELEASES_API

    def __init__(self, client: RepositoryHostClientBase) -> None:
        """Initialize with a repository host client."""
        self.client = client

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

        try:
            releases = await self.client.list_releases(owner, repo, per_page=RELEASES_PER_PAGE)
            if not isinstance(releases, list):
                raise ParseError(f"Unexpected releases payload for {owner}/{repo}: {type(releases).__name__}")
        except ReleaseNotesError as exc:
            logger.warning("Failed to fetch releases", package=package, owner=owner, repo=repo, error=str(exc))
            return None

        result = self.build_collection(releases, from_version, to_version, include_prerelease)
        logger.info(
            "Fetched releases from the releases API",
            package=package,
            ecosystem=ecosystem.value,
            total=len(releases),
            in_range=len(result),
        )
        return result

    def build_collection(
        self,
        releases: list[Any],
        from_version: str,
        to_version: str,
        include_prerelease: bool,
    ) -> ReleaseCollection:
        """Filter release objects to the version range and convert them to entries.

        Drafts are always skipped. Releases flagged as pre-releases, or whose
        tag is a pre-release version, are skipped unless ``include_prerelease``.
        """
        version_range = VersionRange(from_version, to_version)
        entries: list[ReleaseEntry] = []

        for release in releases:
            tag_name = _field(release, "tag_name")
            if not isinstance(tag_name, str) or not tag_name:
                continue
            if _field(release, "draft"):
                logger.debug("Skipping draft release", tag_name=tag_name)
                continue
            if not include_prerelease and _field(release, "prerelease"):
                logger.debug("Skipping pre-release", tag_name=tag_name)
                continue
            if not version_range.contains(strip_prefix(tag_name), include_prerelease=include_prerelease):
                continue

            entries.append(
                ReleaseEntry(
                    tag_name=tag_name,
                    title=_field(release, "name") or tag_name,
                    body=_field(release, "body") or "",
                    date=_parse_date(_field(release, "published_at") or _field(release, "created_at")),
                    url=_field(release, "html_url"),
                )
            )

        return ReleaseCollection(entries)
