"""Markdown rendering for release notes."""

from typing import TYPE_CHECKING

import structlog

from ..utils.github import format_github_links
from .sections import SectionKind

if TYPE_CHECKING:
    from .models import ReleaseCollection

logger = structlog.get_logger(__name__)

SUMMARY_HEADER = "# Release Notes Summary"

SUMMARY_SECTIONS: tuple[tuple[SectionKind, str], ...] = (
    (SectionKind.BREAKING, "Breaking Changes"),
    (SectionKind.CHANGES, "Changes"),
    (SectionKind.FIXES, "Fixes"),
    (SectionKind.DEPRECATED, "Deprecated"),
    (SectionKind.REMOVED, "Removed"),
    (SectionKind.SECURITY, "Security"),
)
"""Summary sections in display order, with their headings."""


class MarkdownWriter:
    """Renders release collections as markdown documents."""

    def __init__(self, date_format: str = "%Y-%m-%d") -> None:
        """Initialize with the date format used for release dates."""
        self.date_format = date_format

    def render_releases(self, collection: "ReleaseCollection") -> str:
        """Render each release as a section, in collection order."""
        if collection.is_empty():
            return ""

        sections = []
        for release in collection:
            heading = f"## {release.tag_name}"
            if release.title and release.title != release.tag_name:
                heading += f" - {release.title}"

            parts = [heading]
            if release.url:
                parts.append(f"**Release URL:** {release.url}")
            parts.append(f"**Date:** {release.date.strftime(self.date_format)}")
            if release.body:
                parts.append(format_github_links(release.body))
            sections.append("\n\n".join(parts))

        return "\n\n---\n\n".join(sections)

    def render_summary(self, collection: "ReleaseCollection") -> str:
        """Render one summary merging the sections of every release.

        Items are concatenated in release order without de-duplication. If any
        release is unstructured, all bullet points are listed under a single
        "All Changes" heading instead of per-section lists.
        """
        if collection.is_empty():
            return ""

        lines = [
            SUMMARY_HEADER,
            "",
            f"**Releases:** {collection.first_tag} → {collection.last_tag} ({len(collection)} versions)",
            "",
        ]

        if collection.has_unstructured_releases():
            logger.debug("Collection has unstructured releases, rendering flat summary", releases=len(collection))
            lines.extend(self._render_list("All Changes", collection.all_bullet_points))
        else:
            for kind, heading in SUMMARY_SECTIONS:
                lines.extend(self._render_list(heading, collection.section(kind)))

        return "\n".join(lines).strip()

    def _render_list(self, heading: str, items: list[str]) -> list[str]:
        if not items:
            return []
        return [f"## {heading}", "", *(f"- {format_github_links(item)}" for item in items), ""]
