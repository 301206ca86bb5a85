"""GitHub client adapter for the githubkit library."""

import base64
import binascii
from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException, RequestFailed
from githubkit.versions.latest.models import Release
from pydantic import ValidationError

from release_notes_resolver.release_notes.exceptions import FetchError, ParseError
from release_notes_resolver.utils.retry import retry_on_rate_limit

from .abc import RepositoryHostClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_errors(func: F) -> F:
    """Decorator translating githubkit failures into FetchError and malformed payloads into ParseError."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            logger.debug(
                "GitHub request failed",
                function=func.__name__,
                status_code=exc.response.status_code,
                url=str(getattr(exc.response, "url", None)),
            )
            raise FetchError(f"GitHub request failed in {func.__name__} with status {exc.response.status_code}") from exc
        except ValidationError as exc:
            logger.debug("Malformed GitHub response", function=func.__name__, errors=exc.error_count())
            raise ParseError(f"Malformed GitHub response in {func.__name__}: {exc}") from exc
        except GitHubException as exc:
            logger.debug("GitHub transport error", function=func.__name__, error=str(exc), error_type=type(exc).__name__)
            raise FetchError(f"GitHub transport error in {func.__name__}: {exc}") from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(RepositoryHostClientBase):
    """GitHub client adapter for the githubkit library.

    One adapter serves any number of repositories; the owner and repository
    name are passed per call.
    """

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    def create(cls, github_pat_token: str | None = None, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_pat_token: Personal access token; anonymous access is used when omitted
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.debug("Creating client for GitHub instance", github_api_url=github_api_url)
        return cls(get_github_client(github_pat_token=github_pat_token, github_api_url=github_api_url))

    # Release Operations
    @handle_github_errors
    @retry_on_rate_limit()
    async def list_releases(self, owner: str, repo: str, per_page: int = 100) -> list[Release]:
        """List the most recent releases for a repository (a single page)."""
        logger.debug("Fetching releases", owner=owner, repo=repo, per_page=per_page)
        response: Response[list[Release]] = await self.client.rest.repos.async_list_releases(
            owner=owner,
            repo=repo,
            per_page=per_page,
        )
        releases: list[Release] = response.parsed_data
        logger.debug(f"Got {len(releases)} releases", owner=owner, repo=repo)
        return releases

    # Content Operations
    async def get_file_content(self, owner: str, repo: str, path: str, ref: str) -> str | None:
        """Get the content of a file at a ref.

        Returns:
            The decoded file content, or None if the file or ref does not exist

        Raises:
            FetchError: On any failure other than not found
            ParseError: If the file content cannot be decoded as UTF-8 text
        """
        try:
            return await self._get_file_content(owner, repo, path, ref)
        except FetchError as exc:
            if isinstance(exc.__cause__, RequestFailed) and exc.__cause__.response.status_code == 404:
                logger.debug("File not found", owner=owner, repo=repo, path=path, ref=ref)
                return None
            raise

    @handle_github_errors
    @retry_on_rate_limit()
    async def _get_file_content(self, owner: str, repo: str, path: str, ref: str) -> str | None:
        response = await self.client.rest.repos.async_get_content(owner=owner, repo=repo, path=path, ref=ref)
        content_file = response.parsed_data
        # Directories come back as lists; symlinks and submodules have other types.
        if getattr(content_file, "type", None) != "file":
            return None
        try:
            return base64.b64decode(content_file.content or "").decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ParseError(f"Could not decode {owner}/{repo}/{path}@{ref}: {exc}") from exc
