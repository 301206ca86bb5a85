"""Data models for resolved release notes."""

from dataclasses import dataclass
from datetime import datetime
from functools import cached_property
from typing import Iterable, Iterator

from .markdown import MarkdownWriter
from .sections import SectionKind, extract_bullet_points, extract_description, extract_section, is_structured


@dataclass(frozen=True)
class ReleaseEntry:
    """A single published or documented release.

    Section lists are extracted from the markdown body on first access. An
    entry without any recognized section heading is unstructured: its section
    lists are empty and its body should be treated as free text.
    """

    tag_name: str
    title: str
    body: str
    date: datetime
    url: str | None = None

    @cached_property
    def is_structured(self) -> bool:
        return is_structured(self.body)

    def section(self, kind: SectionKind) -> list[str]:
        """Return the bullet points under headings of the given kind."""
        if not self.is_structured:
            return []
        return extract_section(self.body, kind)

    @cached_property
    def changes(self) -> list[str]:
        return self.section(SectionKind.CHANGES)

    @cached_property
    def fixes(self) -> list[str]:
        return self.section(SectionKind.FIXES)

    @cached_property
    def breaking_changes(self) -> list[str]:
        return self.section(SectionKind.BREAKING)

    @cached_property
    def deprecated(self) -> list[str]:
        return self.section(SectionKind.DEPRECATED)

    @cached_property
    def removed(self) -> list[str]:
        return self.section(SectionKind.REMOVED)

    @cached_property
    def security(self) -> list[str]:
        return self.section(SectionKind.SECURITY)

    @cached_property
    def all_bullet_points(self) -> list[str]:
        """Every bullet point in the body, regardless of section."""
        return extract_bullet_points(self.body)

    @cached_property
    def description(self) -> str:
        """Introductory or unsectioned text; empty for unstructured entries."""
        if not self.is_structured:
            return ""
        return extract_description(self.body)


@dataclass(frozen=True, init=False)
class ReleaseCollection:
    """An ordered, immutable sequence of release entries.

    Order is the order of the source: newest first from the releases API,
    document order from changelogs.
    """

    entries: tuple[ReleaseEntry, ...]

    def __init__(self, entries: Iterable[ReleaseEntry] = ()) -> None:
        """Initialize with the entries in source order."""
        object.__setattr__(self, "entries", tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ReleaseEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    @property
    def releases(self) -> list[ReleaseEntry]:
        return list(self.entries)

    @property
    def first_tag(self) -> str | None:
        return self.entries[0].tag_name if self.entries else None

    @property
    def last_tag(self) -> str | None:
        return self.entries[-1].tag_name if self.entries else None

    def section(self, kind: SectionKind) -> list[str]:
        """Concatenate one section across all entries, preserving entry order."""
        return [item for entry in self.entries for item in entry.section(kind)]

    @property
    def changes(self) -> list[str]:
        return self.section(SectionKind.CHANGES)

    @property
    def fixes(self) -> list[str]:
        return self.section(SectionKind.FIXES)

    @property
    def breaking_changes(self) -> list[str]:
        return self.section(SectionKind.BREAKING)

    @property
    def deprecated(self) -> list[str]:
        return self.section(SectionKind.DEPRECATED)

    @property
    def removed(self) -> list[str]:
        return self.section(SectionKind.REMOVED)

    @property
    def security(self) -> list[str]:
        return self.section(SectionKind.SECURITY)

    @property
    def all_bullet_points(self) -> list[str]:
        return [item for entry in self.entries for item in entry.all_bullet_points]

    def has_unstructured_releases(self) -> bool:
        """Return True if at least one entry has no recognized section heading."""
        return any(not entry.is_structured for entry in self.entries)

    def to_markdown(self) -> str:
        """Render every release as its own markdown section."""
        return MarkdownWriter().render_releases(self)

    def to_summary_markdown(self) -> str:
        """Render all releases as a single summary with merged sections."""
        return MarkdownWriter().render_summary(self)
