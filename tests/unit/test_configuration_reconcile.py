"""Contains unit tests for the configuration.reconcile module."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from release_notes_resolver.configuration.exceptions import UnsupportedFetcherError
from release_notes_resolver.configuration.models import DEFAULT_FETCHER_ORDER, Ecosystem, FetcherKind
from release_notes_resolver.configuration.reconcile import local_package_path, parse_fetcher_order


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(None, id="none"),
        pytest.param("", id="empty string"),
        pytest.param("   ", id="whitespace"),
        pytest.param(" , ,", id="only separators"),
    ],
)
def test_parse_fetcher_order_defaults(value: str | None) -> None:
    """Test that an empty value falls back to the default order."""
    assert parse_fetcher_order(value) == list(DEFAULT_FETCHER_ORDER)


@pytest.mark.parametrize(
    "value,expected",
    [
        pytest.param("releases_api,local", [FetcherKind.RELEASES_API, FetcherKind.LOCAL], id="custom order"),
        pytest.param("Remote-Changelog, local", [FetcherKind.REMOTE_CHANGELOG, FetcherKind.LOCAL], id="dashes and case"),
        pytest.param("local,local,releases_api", [FetcherKind.LOCAL, FetcherKind.RELEASES_API], id="duplicates removed"),
        pytest.param("releases_api", [FetcherKind.RELEASES_API], id="single fetcher"),
    ],
)
def test_parse_fetcher_order(value: str, expected: list[FetcherKind]) -> None:
    """Test that fetcher names are parsed in the configured order."""
    assert parse_fetcher_order(value) == expected


def test_parse_fetcher_order_unknown_name() -> None:
    """Test that an unknown fetcher name raises UnsupportedFetcherError."""
    with pytest.raises(UnsupportedFetcherError) as exc_info:
        parse_fetcher_order("local, packagist")
    assert exc_info.value.name == "packagist"
    assert "releases_api" in str(exc_info.value)


@pytest.mark.parametrize(
    "ecosystem,directory",
    [
        pytest.param(Ecosystem.COMPOSER, "vendor", id="composer"),
        pytest.param(Ecosystem.NPM, "node_modules", id="npm"),
    ],
)
def test_local_package_path_found(tmp_path: Path, ecosystem: Ecosystem, directory: str) -> None:
    """Test that the installed package directory of each ecosystem is located."""
    package_dir = tmp_path / directory / "acme" / "tool"
    package_dir.mkdir(parents=True)
    assert local_package_path("acme/tool", ecosystem, tmp_path) == str(package_dir)


def test_local_package_path_wrong_ecosystem(tmp_path: Path) -> None:
    """Test that a package installed by another package manager is not used."""
    (tmp_path / "node_modules" / "acme" / "tool").mkdir(parents=True)
    assert local_package_path("acme/tool", Ecosystem.COMPOSER, tmp_path) is None


def test_local_package_path_missing(tmp_path: Path) -> None:
    """Test that a package that is not installed yields None."""
    assert local_package_path("acme/tool", Ecosystem.COMPOSER, tmp_path) is None


def test_local_package_path_not_a_directory(tmp_path: Path) -> None:
    """Test that a file at the package location is not treated as an installed package."""
    (tmp_path / "vendor" / "acme").mkdir(parents=True)
    (tmp_path / "vendor" / "acme" / "tool").write_text("not a package", encoding="utf-8")
    assert local_package_path("acme/tool", Ecosystem.COMPOSER, tmp_path) is None


def test_local_package_path_defaults_to_working_directory(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test that the current working directory is the default project root."""
    (tmp_path / "vendor" / "acme" / "tool").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    result = local_package_path("acme/tool", Ecosystem.COMPOSER)
    assert result is not None
    assert Path(result).resolve() == (tmp_path / "vendor" / "acme" / "tool").resolve()
