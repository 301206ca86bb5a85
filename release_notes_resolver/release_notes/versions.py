"""Version normalization and range membership for release notes.

Versions are decomposed into numeric components plus an optional stability
suffix, the way package managers such as Composer and npm write them
(``v1.2.3``, ``2.0``, ``1.0.0-beta1``, ``3.1.0-RC.2``, ``1.0.0-dev``).
Ordering is delegated to ``packaging.version.Version`` so that components are
compared numerically and stabilities order as dev < alpha < beta < rc <
stable < patch.
"""

import functools
import re
from dataclasses import dataclass

from packaging import version as pep440

from .exceptions import InvalidVersionError

_VERSION_PATTERN = re.compile(
    r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?"
    r"(?:[._-]?(stable|beta|b|rc|alpha|a|patch|pl|p)(?:[.-]?(\d+))?)?"
    r"([.-]?dev)?$",
    re.IGNORECASE,
)

_MODIFIER_ALIASES = {
    "a": "alpha",
    "alpha": "alpha",
    "b": "beta",
    "beta": "beta",
    "rc": "rc",
    "p": "patch",
    "pl": "patch",
    "patch": "patch",
}

PRERELEASE_STABILITIES = frozenset({"alpha", "beta", "rc", "dev"})


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class NormalizedVersion:
    """A version decomposed into numeric components and a stability tag."""

    release: tuple[int, int, int, int]
    modifier: str | None = None
    modifier_number: int | None = None
    dev: bool = False

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1]

    @property
    def patch(self) -> int:
        return self.release[2]

    @property
    def build(self) -> int:
        return self.release[3]

    @property
    def stability(self) -> str:
        """Return the stability tag: dev, alpha, beta, rc, stable or patch."""
        if self.dev:
            return "dev"
        return self.modifier or "stable"

    @property
    def stability_number(self) -> int | None:
        return self.modifier_number

    @property
    def is_prerelease(self) -> bool:
        return self.stability in PRERELEASE_STABILITIES

    @functools.cached_property
    def key(self) -> pep440.Version:
        """PEP 440 equivalent used for ordering and equality."""
        text = ".".join(str(part) for part in self.release)
        number = self.modifier_number or 0
        if self.modifier == "alpha":
            text += f"a{number}"
        elif self.modifier == "beta":
            text += f"b{number}"
        elif self.modifier == "rc":
            text += f"rc{number}"
        elif self.modifier == "patch":
            text += f".post{number}"
        if self.dev:
            text += ".dev0"
        return pep440.Version(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalizedVersion):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: "NormalizedVersion") -> bool:
        if not isinstance(other, NormalizedVersion):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        text = ".".join(str(part) for part in self.release)
        if self.modifier is not None:
            text += f"-{self.modifier}"
            if self.modifier_number is not None:
                text += str(self.modifier_number)
        if self.dev:
            text += "-dev"
        return text


def strip_prefix(version: str) -> str:
    """Remove one leading 'v' or 'V' from a version string."""
    if version[:1] in ("v", "V"):
        return version[1:]
    return version


def normalize(version: str) -> NormalizedVersion:
    """Normalize a version string.

    Examples:
        ``v1.2.3`` -> ``1.2.3.0``, ``2.0`` -> ``2.0.0.0``,
        ``1.0.0-beta1`` -> ``1.0.0.0-beta1``

    Raises:
        InvalidVersionError: If the string has no numeric components or an
            unrecognized suffix.
    """
    candidate = strip_prefix(version.strip()).split("+", 1)[0]
    match = _VERSION_PATTERN.match(candidate)
    if match is None:
        raise InvalidVersionError(version)

    major, minor, patch, build, modifier, modifier_number, dev = match.groups()
    release = (int(major), int(minor or 0), int(patch or 0), int(build or 0))

    normalized_modifier = None
    if modifier is not None and modifier.lower() != "stable":
        normalized_modifier = _MODIFIER_ALIASES[modifier.lower()]

    return NormalizedVersion(
        release=release,
        modifier=normalized_modifier,
        modifier_number=int(modifier_number) if modifier_number is not None and normalized_modifier else None,
        dev=dev is not None,
    )


def is_prerelease(version: str) -> bool:
    """Return True when the version's stability is alpha, beta, rc or dev.

    Raises:
        InvalidVersionError: If the version cannot be normalized.
    """
    return normalize(version).is_prerelease


def in_range(version: str, from_version: str, to_version: str) -> bool:
    """Check whether ``from_version < version <= to_version``.

    When both bounds normalize to the same version, only that exact version is
    a member. A version (or bound) that cannot be normalized is never a member.
    """
    try:
        normalized = normalize(version)
        lower = normalize(from_version)
        upper = normalize(to_version)
    except InvalidVersionError:
        return False

    if lower == upper:
        return normalized == lower
    return lower < normalized <= upper


@dataclass(frozen=True)
class VersionRange:
    """A ``(from, to]`` version range; a single version when both bounds are equal."""

    from_version: str
    to_version: str

    @property
    def is_single_version(self) -> bool:
        try:
            return normalize(self.from_version) == normalize(self.to_version)
        except InvalidVersionError:
            return False

    def contains(self, version: str, include_prerelease: bool = False) -> bool:
        """Return True if the version is in range and passes the pre-release filter."""
        try:
            if not include_prerelease and is_prerelease(version):
                return False
        except InvalidVersionError:
            return False
        return in_range(version, self.from_version, self.to_version)
