"""Resolves release notes by trying fetchers in a configured order."""

from typing import Iterable

import structlog

from release_notes_resolver.configuration.models import DEFAULT_FETCHER_ORDER, Ecosystem, FetcherKind
from release_notes_resolver.github.abc import RepositoryHostClientBase

from .fetchers import LocalChangelogFetcher, ReleaseNotesFetcher, ReleasesApiFetcher, RemoteChangelogFetcher
from .models import ReleaseCollection
from .parser import ChangelogParser

logger = structlog.get_logger(__name__)


class ReleaseNotesResolver:
    """Resolves release notes using a chain of responsibility.

    Fetchers are tried in the order they were added, and the first one that
    returns a non-empty collection wins. The order is therefore a fallback
    priority: reordering the fetchers changes which source answers.
    """

    def __init__(self, fetchers: Iterable[ReleaseNotesFetcher] = ()) -> None:
        """Initialize with an optional initial list of fetchers."""
        self._fetchers: list[ReleaseNotesFetcher] = list(fetchers)

    def add_fetcher(self, fetcher: ReleaseNotesFetcher) -> None:
        """Append a fetcher to the end of the chain."""
        self._fetchers.append(fetcher)

    @property
    def fetchers(self) -> tuple[ReleaseNotesFetcher, ...]:
        return tuple(self._fetchers)

    async def resolve(
        self,
        package: str,
        from_version: str,
        to_version: str,
        repository_url: str,
        ecosystem: Ecosystem,
        local_path: str | None = None,
        include_prerelease: bool = False,
    ) -> ReleaseCollection | None:
        """Resolve release notes by trying each fetcher in sequence.

        Each fetcher is attempted at most once and never retried.

        Returns:
            The first non-empty collection, or None if every fetcher came up empty
        """
        for fetcher in self._fetchers:
            if not fetcher.supports(repository_url, local_path):
                logger.debug("Fetcher does not support source", fetcher=type(fetcher).__name__, package=package)
                continue

            result = await fetcher.fetch(
                package,
                from_version,
                to_version,
                repository_url,
                ecosystem,
                local_path,
                include_prerelease,
            )

            if result is not None and not result.is_empty():
                logger.info(
                    "Resolved release notes",
                    package=package,
                    fetcher=type(fetcher).__name__,
                    releases=len(result),
                )
                return result

            logger.debug(
                "Fetcher found no release notes",
                fetcher=type(fetcher).__name__,
                package=package,
                result="none" if result is None else "empty",
            )

        logger.info("No release notes found", package=package, from_version=from_version, to_version=to_version)
        return None


def build_resolver(
    client: RepositoryHostClientBase,
    order: Iterable[FetcherKind] = DEFAULT_FETCHER_ORDER,
    parser: ChangelogParser | None = None,
) -> ReleaseNotesResolver:
    """Build a resolver with fetchers in the given order.

    Args:
        client: Repository host client used by the remote fetchers
        order: Fetcher kinds in priority order; the first successful, non-empty fetch wins
        parser: Changelog parser shared by the changelog fetchers

    Returns:
        A configured ReleaseNotesResolver
    """
    parser = parser or ChangelogParser()
    factories = {
        FetcherKind.LOCAL: lambda: LocalChangelogFetcher(parser),
        FetcherKind.REMOTE_CHANGELOG: lambda: RemoteChangelogFetcher(client, parser),
        FetcherKind.RELEASES_API: lambda: ReleasesApiFetcher(client),
    }
    resolver = ReleaseNotesResolver()
    for kind in order:
        resolver.add_fetcher(factories[FetcherKind(kind)]())
    return resolver
