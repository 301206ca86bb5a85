"""Retry decorator for handling GitHub API rate limits.

Release notes lookups are interactive, so the defaults give up after a few
attempts instead of waiting out a long rate limit window.
"""

import asyncio
import functools
import inspect
import time
from typing import Any, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _wait_time_from_headers(headers: Any, default: float) -> float:
    """Compute the wait time from retry-after or x-ratelimit-reset headers."""
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)
            return default

    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
            return default
        current_timestamp = int(time.time())
        if reset_timestamp > current_timestamp:
            return reset_timestamp - current_timestamp + 1
    return default


def retry_on_rate_limit(
    max_retries: int = 3,
    initial_delay: float = 2.0,
    max_delay: float = 60.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async functions when they hit GitHub rate limits.

    Handles primary and secondary rate limits as well as plain 403/429
    responses that mention a rate limit. Any other error is raised immediately.

    Args:
        max_retries: Maximum number of retry attempts
        initial_delay: Initial delay in seconds between retries
        max_delay: Maximum delay in seconds between retries
        exponential_base: Base for exponential backoff calculation

    Returns:
        Decorated function with retry logic
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as e:
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for GitHub rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            error_type=type(e).__name__,
                        )
                        raise
                    retry_after = getattr(e, "retry_after", None)
                    wait_time = min(retry_after.total_seconds() if retry_after else delay, max_delay)
                except RequestFailed as e:
                    status_code = e.response.status_code
                    is_rate_limit = status_code == 429 or (status_code == 403 and "rate limit" in str(e).lower())
                    if not is_rate_limit:
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=status_code,
                        )
                        raise
                    wait_time = min(_wait_time_from_headers(e.response.headers, delay), max_delay)

                logger.warning(
                    f"GitHub rate limit hit, retrying in {wait_time} seconds",
                    function=func.__name__,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_time=wait_time,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return wrapper  # type: ignore

    return decorator
