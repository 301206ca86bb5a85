"""Structured records of resolved release notes for machine consumption."""

from datetime import datetime

from pydantic import BaseModel, Field

from .models import ReleaseCollection, ReleaseEntry


class ReleaseRecord(BaseModel):
    """A single release with its extracted sections."""

    tag_name: str
    title: str
    date: datetime
    url: str | None = None
    body: str
    is_structured: bool
    description: str
    changes: list[str] = Field(default_factory=list)
    fixes: list[str] = Field(default_factory=list)
    breaking_changes: list[str] = Field(default_factory=list)
    deprecated: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    security: list[str] = Field(default_factory=list)
    all_bullet_points: list[str] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: ReleaseEntry) -> "ReleaseRecord":
        return cls(
            tag_name=entry.tag_name,
            title=entry.title,
            date=entry.date,
            url=entry.url,
            body=entry.body,
            is_structured=entry.is_structured,
            description=entry.description,
            changes=entry.changes,
            fixes=entry.fixes,
            breaking_changes=entry.breaking_changes,
            deprecated=entry.deprecated,
            removed=entry.removed,
            security=entry.security,
            all_bullet_points=entry.all_bullet_points,
        )


class ReleaseNotesSummary(BaseModel):
    """Sections merged across every release in a collection."""

    is_structured: bool
    breaking_changes: list[str] = Field(default_factory=list)
    changes: list[str] = Field(default_factory=list)
    fixes: list[str] = Field(default_factory=list)
    deprecated: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    security: list[str] = Field(default_factory=list)
    all_bullet_points: list[str] = Field(default_factory=list)


class ReleaseNotesReport(BaseModel):
    """Release notes for a version range."""

    total_releases: int
    first_tag: str | None = None
    last_tag: str | None = None
    summary: ReleaseNotesSummary | None = None
    releases: list[ReleaseRecord] = Field(default_factory=list)

    @classmethod
    def from_collection(cls, collection: ReleaseCollection, summary: bool = False) -> "ReleaseNotesReport":
        """Build a report, including merged sections when ``summary`` is set and there are releases."""
        merged = None
        if summary and not collection.is_empty():
            is_structured = not collection.has_unstructured_releases()
            merged = ReleaseNotesSummary(
                is_structured=is_structured,
                breaking_changes=collection.breaking_changes if is_structured else [],
                changes=collection.changes if is_structured else [],
                fixes=collection.fixes if is_structured else [],
                deprecated=collection.deprecated if is_structured else [],
                removed=collection.removed if is_structured else [],
                security=collection.security if is_structured else [],
                all_bullet_points=collection.all_bullet_points,
            )
        return cls(
            total_releases=len(collection),
            first_tag=collection.first_tag,
            last_tag=collection.last_tag,
            summary=merged,
            releases=[ReleaseRecord.from_entry(entry) for entry in collection],
        )
