"""Fixtures for unit tests."""

from datetime import datetime, timezone
from typing import Callable, Generator

import pytest
import structlog

from release_notes_resolver.release_notes.models import ReleaseCollection, ReleaseEntry


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Route structlog through stdlib logging so caplog can see release notes events."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_collection() -> Callable[..., ReleaseCollection]:
    """Return a factory building a collection from (tag_name, body) pairs."""

    def _make(*releases: tuple[str, str]) -> ReleaseCollection:
        return ReleaseCollection(
            ReleaseEntry(tag_name=tag, title=tag, body=body, date=datetime(2024, 1, 15, tzinfo=timezone.utc)) for tag, body in releases
        )

    return _make
