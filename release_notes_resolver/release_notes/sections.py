"""Section taxonomy and extraction for release note bodies.

Release notes have no fixed schema, so sections are recognized by their
heading text. Headings may be Markdown (``##``/``###``) or bold
(``**Fixed**``) lines.
"""

import re
from enum import Enum


class SectionKind(str, Enum):
    """Kinds of release note sections."""

    BREAKING = "breaking_changes"
    SECURITY = "security"
    DEPRECATED = "deprecated"
    REMOVED = "removed"
    FIXES = "fixes"
    CHANGES = "changes"


# Scanned top to bottom; the first matching phrase decides the kind. Breaking
# must stay ahead of Changes.
SECTION_HEADINGS: tuple[tuple[SectionKind, tuple[str, ...]], ...] = (
    (SectionKind.BREAKING, ("breaking changes", "breaking change", "breaking")),
    (SectionKind.SECURITY, ("security",)),
    (SectionKind.DEPRECATED, ("deprecated", "deprecations")),
    (SectionKind.REMOVED, ("removed", "removals", "remove")),
    (SectionKind.FIXES, ("bug fixes", "bug fix", "bugfixes", "bugfix", "fixed", "fixes", "fix")),
    (
        SectionKind.CHANGES,
        (
            "what's changed",
            "whats changed",
            "new features",
            "features",
            "enhancements",
            "improvements",
            "changed",
            "changes",
            "change",
            "added",
            "add",
        ),
    ),
)

_MARKDOWN_HEADING = re.compile(r"^#{2,3}\s+(.+)$")
_BOLD_HEADING = re.compile(r"^\*\*\s*([^*]+?)\s*\*\*")
_KEEP_A_CHANGELOG_HEADING = re.compile(r"^#{2,3}\s+\[\d+\.\d+")
_BULLET_PREFIXES = ("- ", "* ")


def _heading_text(line: str) -> str | None:
    """Return the text of a heading line, or None if the line is not a heading."""
    stripped = line.strip()
    match = _MARKDOWN_HEADING.match(stripped)
    if match:
        return match.group(1)
    match = _BOLD_HEADING.match(stripped)
    if match:
        return match.group(1)
    return None


def _matches_phrase(text: str, phrase: str) -> bool:
    if not text.startswith(phrase):
        return False
    rest = text[len(phrase) :]
    return not rest or not rest[0].isalnum()


def is_heading(line: str) -> bool:
    """Return True for any Markdown ``##``/``###`` heading or bold heading line."""
    return _heading_text(line) is not None


def classify_heading(line: str) -> SectionKind | None:
    """Return the section kind a heading line opens, or None if unrecognized."""
    text = _heading_text(line)
    if text is None:
        return None
    text = text.strip().lower()
    for kind, phrases in SECTION_HEADINGS:
        for phrase in phrases:
            if _matches_phrase(text, phrase):
                return kind
    return None


def _bullet_text(line: str) -> str | None:
    stripped = line.strip()
    if stripped.startswith(_BULLET_PREFIXES):
        return stripped[2:]
    return None


def is_structured(body: str) -> bool:
    """Return True if the body contains at least one recognized section heading."""
    for line in body.splitlines():
        if _KEEP_A_CHANGELOG_HEADING.match(line.strip()):
            return True
        if classify_heading(line) is not None:
            return True
    return False


def extract_section(body: str, kind: SectionKind) -> list[str]:
    """Collect bullet points found under headings of the given kind."""
    items: list[str] = []
    in_section = False
    for line in body.splitlines():
        if is_heading(line):
            in_section = classify_heading(line) is kind
            continue
        if in_section:
            bullet = _bullet_text(line)
            if bullet is not None:
                items.append(bullet)
    return items


def extract_bullet_points(body: str) -> list[str]:
    """Collect every bullet point in the body regardless of section."""
    return [bullet for bullet in map(_bullet_text, body.splitlines()) if bullet is not None]


def extract_description(body: str) -> str:
    """Collect text outside recognized sections that is not a bullet point."""
    description: list[str] = []
    in_recognized_section = False
    for line in body.splitlines():
        if is_heading(line):
            in_recognized_section = classify_heading(line) is not None
            continue
        if not in_recognized_section and _bullet_text(line) is None:
            description.append(line)

    text = "\n".join(description).strip()
    return re.sub(r"\n{3,}", "\n\n", text)
