"""Contains unit tests for the release_notes.versions module."""

import pytest

from release_notes_resolver.release_notes.exceptions import InvalidVersionError
from release_notes_resolver.release_notes.versions import VersionRange, in_range, is_prerelease, normalize, strip_prefix


@pytest.mark.parametrize(
    "version,expected",
    [
        pytest.param("v1.2.3", "1.2.3", id="lowercase v"),
        pytest.param("V2.0.0", "2.0.0", id="uppercase V"),
        pytest.param("1.0.0", "1.0.0", id="no prefix"),
        pytest.param("vv1.0.0", "v1.0.0", id="only one prefix removed"),
        pytest.param("", "", id="empty string"),
    ],
)
def test_strip_prefix(version: str, expected: str) -> None:
    """Test that exactly one leading v/V is removed."""
    assert strip_prefix(version) == expected


@pytest.mark.parametrize(
    "version,expected",
    [
        pytest.param("v1.2.3", "1.2.3.0", id="prefixed"),
        pytest.param("2.0", "2.0.0.0", id="two components padded"),
        pytest.param("1.2.3.4", "1.2.3.4", id="four components"),
        pytest.param("1.0.0-beta1", "1.0.0.0-beta1", id="beta"),
        pytest.param("1.0.0-b2", "1.0.0.0-beta2", id="beta alias"),
        pytest.param("3.1.0-RC.2", "3.1.0.0-rc2", id="release candidate"),
        pytest.param("1.0.0-alpha", "1.0.0.0-alpha", id="alpha without number"),
        pytest.param("1.0.0-dev", "1.0.0.0-dev", id="dev"),
        pytest.param("1.0.0-stable", "1.0.0.0", id="explicit stable"),
        pytest.param("1.0.0+build.5", "1.0.0.0", id="build metadata ignored"),
        pytest.param("  1.0.0  ", "1.0.0.0", id="surrounding whitespace"),
    ],
)
def test_normalize(version: str, expected: str) -> None:
    """Test that versions normalize to their canonical form."""
    assert str(normalize(version)) == expected


@pytest.mark.parametrize(
    "version",
    [
        pytest.param("", id="empty"),
        pytest.param("v", id="prefix only"),
        pytest.param("dev-main", id="branch name"),
        pytest.param("latest", id="word"),
        pytest.param("1.0.0-foo", id="unknown suffix"),
        pytest.param("1.2.3.4.5", id="too many components"),
    ],
)
def test_normalize_invalid(version: str) -> None:
    """Test that non-numeric versions raise InvalidVersionError."""
    with pytest.raises(InvalidVersionError):
        normalize(version)


def test_normalize_components() -> None:
    """Test that numeric components and stability are exposed."""
    normalized = normalize("v2.10.3-rc1")
    assert (normalized.major, normalized.minor, normalized.patch, normalized.build) == (2, 10, 3, 0)
    assert normalized.stability == "rc"
    assert normalized.stability_number == 1


def test_normalize_is_idempotent() -> None:
    """Test that normalizing a stripped version gives the same result as the original."""
    for version in ["v1.2.3", "V2.0", "1.0.0-beta1", "3.1.0-RC.2", "1.0.0-dev"]:
        assert normalize(strip_prefix(version)) == normalize(version)
        assert normalize(str(normalize(version))) == normalize(version)


def test_numeric_ordering() -> None:
    """Test that components compare numerically rather than as strings."""
    assert normalize("2.10.0") > normalize("2.9.0")
    assert normalize("1.0.10") > normalize("1.0.9")


def test_stability_ordering() -> None:
    """Test that stabilities order as dev < alpha < beta < rc < stable < patch."""
    ordered = ["1.0.0-dev", "1.0.0-alpha1", "1.0.0-beta1", "1.0.0-rc1", "1.0.0", "1.0.0-patch1"]
    normalized = [normalize(version) for version in ordered]
    assert normalized == sorted(normalized)


def test_equal_versions_with_different_spelling() -> None:
    """Test that padded and prefixed spellings of a version are equal."""
    assert normalize("v2.0") == normalize("2.0.0")
    assert hash(normalize("v2.0")) == hash(normalize("2.0.0"))


@pytest.mark.parametrize(
    "version,expected",
    [
        pytest.param("1.0.0-alpha", True, id="alpha"),
        pytest.param("1.0.0-beta2", True, id="beta"),
        pytest.param("1.0.0-RC1", True, id="rc"),
        pytest.param("1.0.0-dev", True, id="dev"),
        pytest.param("1.0.0", False, id="stable"),
        pytest.param("v1.0.0-patch1", False, id="patch"),
    ],
)
def test_is_prerelease(version: str, expected: bool) -> None:
    """Test pre-release detection by stability tag."""
    assert is_prerelease(version) is expected


def test_is_prerelease_invalid_version() -> None:
    """Test that is_prerelease raises for unparsable versions."""
    with pytest.raises(InvalidVersionError):
        is_prerelease("not-a-version")


@pytest.mark.parametrize(
    "version,expected",
    [
        pytest.param("1.0.0", False, id="lower bound excluded"),
        pytest.param("1.0.1", True, id="just above lower bound"),
        pytest.param("1.5.0", True, id="inside"),
        pytest.param("2.0.0", True, id="upper bound included"),
        pytest.param("2.0.1", False, id="above upper bound"),
        pytest.param("0.9.0", False, id="below lower bound"),
    ],
)
def test_in_range(version: str, expected: bool) -> None:
    """Test that membership is from < version <= to."""
    assert in_range(version, "1.0.0", "2.0.0") is expected


@pytest.mark.parametrize(
    "version,from_version,to_version",
    [
        pytest.param("v1.5.0", "1.0.0", "2.0.0", id="prefixed version"),
        pytest.param("1.5.0", "v1.0.0", "V2.0.0", id="prefixed bounds"),
        pytest.param("V2.0.0", "v1.0.0", "v2.0.0", id="all prefixed"),
    ],
)
def test_in_range_ignores_prefixes(version: str, from_version: str, to_version: str) -> None:
    """Test that leading v/V prefixes do not affect membership."""
    assert in_range(version, from_version, to_version) is True


def test_in_range_numeric_comparison() -> None:
    """Test that 2.10.0 is above 2.9.0 when checking ranges."""
    assert in_range("2.10.0", "2.9.0", "2.10.0") is True
    assert in_range("2.9.5", "2.9.0", "2.10.0") is True
    assert in_range("2.9.0", "2.8.0", "2.10.0") is True
    assert in_range("2.11.0", "2.9.0", "2.10.0") is False


@pytest.mark.parametrize(
    "version,expected",
    [
        pytest.param("2.0.0", True, id="same version"),
        pytest.param("v2.0.0", True, id="same version prefixed"),
        pytest.param("2.0", True, id="same version padded"),
        pytest.param("1.9.0", False, id="lower version"),
        pytest.param("2.0.1", False, id="higher version"),
    ],
)
def test_in_range_equal_bounds(version: str, expected: bool) -> None:
    """Test that equal bounds select exactly that version."""
    assert in_range(version, "2.0.0", "2.0.0") is expected


@pytest.mark.parametrize(
    "version,from_version,to_version",
    [
        pytest.param("dev-main", "1.0.0", "2.0.0", id="invalid version"),
        pytest.param("1.5.0", "latest", "2.0.0", id="invalid lower bound"),
        pytest.param("1.5.0", "1.0.0", "next", id="invalid upper bound"),
    ],
)
def test_in_range_invalid_never_member(version: str, from_version: str, to_version: str) -> None:
    """Test that unparsable inputs are never members of a range."""
    assert in_range(version, from_version, to_version) is False


def test_version_range_contains_filters_prereleases() -> None:
    """Test that VersionRange excludes pre-releases unless requested."""
    version_range = VersionRange("1.0.0", "2.0.0")
    assert version_range.contains("2.0.0-beta1") is False
    assert version_range.contains("2.0.0-beta1", include_prerelease=True) is True
    assert version_range.contains("1.5.0") is True
    assert version_range.contains("garbage") is False


def test_version_range_is_single_version() -> None:
    """Test detection of single-version ranges."""
    assert VersionRange("v1.0.0", "1.0.0").is_single_version is True
    assert VersionRange("1.0.0", "1.1.0").is_single_version is False
