"""Parses markdown changelogs into release collections."""

from datetime import datetime, timezone

import structlog

from ..utils.constants import CHANGELOG_DATE_FORMAT, CHANGELOG_HEADER_PATTERNS
from .exceptions import InvalidVersionError, ParseError
from .models import ReleaseCollection, ReleaseEntry
from .versions import VersionRange, normalize

logger = structlog.get_logger(__name__)


class ChangelogParser:
    """Parses changelogs in Keep a Changelog and similar formats.

    Recognized release headers:

    - ``## [1.0.0] - 2023-05-21``
    - ``## 1.0.0 - 2023-05-21`` (optionally ``## v1.0.0 - ...``)
    - ``## 1.0.0 (2023-05-21)``
    - ``## 1.0.0``
    """

    def parse(
        self,
        content: str | bytes,
        from_version: str,
        to_version: str,
        include_prerelease: bool = False,
    ) -> ReleaseCollection:
        """Parse changelog content and keep the releases within the version range.

        Args:
            content: Changelog markdown content
            from_version: Starting version (exclusive)
            to_version: Ending version (inclusive); equal bounds select that single version
            include_prerelease: Whether to keep alpha, beta, rc and dev versions

        Returns:
            Release entries in document order

        Raises:
            InvalidVersionError: If either bound is not a valid version
            ParseError: If the content is not decodable text
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError(f"Changelog is not valid UTF-8: {exc}") from exc

        # Fail early on invalid bounds rather than silently matching nothing.
        normalize(from_version)
        normalize(to_version)
        version_range = VersionRange(from_version, to_version)

        releases: list[ReleaseEntry] = []
        current_version: str | None = None
        current_date: str | None = None
        current_lines: list[str] = []

        for line in content.splitlines():
            header = self.parse_version_header(line)
            if header is not None:
                if current_version is not None:
                    self._flush(releases, version_range, include_prerelease, current_version, current_date, current_lines)
                current_version, current_date = header
                current_lines = []
                continue

            if current_version is not None and line.strip():
                current_lines.append(line)

        if current_version is not None:
            self._flush(releases, version_range, include_prerelease, current_version, current_date, current_lines)

        logger.debug("Parsed changelog", from_version=from_version, to_version=to_version, releases=len(releases))
        return ReleaseCollection(releases)

    def parse_version_header(self, line: str) -> tuple[str, str | None] | None:
        """Return ``(version, date)`` if the line is a release header, else None."""
        stripped = line.strip()
        for pattern in CHANGELOG_HEADER_PATTERNS:
            match = pattern.match(stripped)
            if match:
                date = match.group(2) if pattern.groups > 1 else None
                return match.group(1), date
        return None

    def _flush(
        self,
        releases: list[ReleaseEntry],
        version_range: VersionRange,
        include_prerelease: bool,
        version: str,
        date: str | None,
        lines: list[str],
    ) -> None:
        release = self._create_release(version, date, lines)
        if release is None:
            logger.debug("Skipping release section without content", version=version)
            return
        try:
            normalize(version)
        except InvalidVersionError:
            logger.debug("Skipping release section with invalid version", version=version)
            return
        if version_range.contains(version, include_prerelease=include_prerelease):
            releases.append(release)

    def _create_release(self, version: str, date: str | None, lines: list[str]) -> ReleaseEntry | None:
        body = "\n".join(lines).strip()
        if not body:
            return None
        return ReleaseEntry(
            tag_name=version,
            title=version,
            body=body,
            date=self._parse_date(date),
            url=None,
        )

    def _parse_date(self, date: str | None) -> datetime:
        if date is None:
            return datetime.now(timezone.utc)
        try:
            return datetime.strptime(date, CHANGELOG_DATE_FORMAT).replace(tzinfo=timezone.utc)
        except ValueError:
            logger.debug("Unparsable changelog date, using current time", date=date)
            return datetime.now(timezone.utc)
