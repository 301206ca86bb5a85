"""Base ABC for repository host clients."""

from abc import ABC, abstractmethod
from typing import Any


class RepositoryHostClientBase(ABC):
    """Read-only operations the release notes fetchers need from a repository host."""

    @abstractmethod
    async def list_releases(self, owner: str, repo: str, per_page: int = 100) -> list[Any]:
        """List the most recent releases for a repository."""
        pass

    @abstractmethod
    async def get_file_content(self, owner: str, repo: str, path: str, ref: str) -> str | None:
        """Get the content of a file at a ref, or None if it does not exist."""
        pass
