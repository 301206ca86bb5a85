"""Base ABC for release notes fetchers."""

from abc import ABC, abstractmethod

from release_notes_resolver.configuration.models import Ecosystem, FetcherKind

from ..models import ReleaseCollection


class ReleaseNotesFetcher(ABC):
    """A strategy producing release notes from one kind of source.

    Fetchers never raise: a source that is unavailable, unreadable or
    incomplete for the requested version yields None so the resolver can try
    the next fetcher.
    """

    kind: FetcherKind

    @abstractmethod
    def supports(self, repository_url: str, local_path: str | None) -> bool:
        """Return True if this fetcher can handle the source (no I/O)."""
        pass

    @abstractmethod
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
        """Fetch release notes for a package between two versions.

        Args:
            package: Package name (e.g., "symfony/console")
            from_version: Starting version (exclusive)
            to_version: Ending version (inclusive)
            repository_url: Repository URL (e.g., "https://github.com/symfony/console")
            ecosystem: Package manager ecosystem of the package
            local_path: Local path of the installed package (vendor/... or node_modules/...)
            include_prerelease: Whether to include pre-release versions

        Returns:
            Release notes collection, or None if nothing usable was found
        """
        pass
