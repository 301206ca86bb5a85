"""Integration tests for the CLI."""

import json
import subprocess
import sys
from pathlib import Path

CHANGELOG = """# Changelog

## [1.2.0] - 2024-03-01

### Added

- Widgets (https://github.com/acme/tool/pull/12)

## [1.1.0] - 2024-02-01

### Fixed

- Startup crash https://github.com/acme/tool/issues/9

## [1.0.0] - 2024-01-01

- Initial release
"""


def run_cli(args: list[str]) -> subprocess.CompletedProcess[str]:
    """Helper to run the CLI as a subprocess and capture output.

    Args:
        args: List of command line arguments to pass to the CLI.

    Returns:
        subprocess.CompletedProcess: The result of running the CLI command.
    """
    complete_command = [sys.executable, "-m", "release_notes_resolver.configuration.cli", *args]
    print(f"Running command: {' '.join(complete_command)}")
    result = subprocess.run(complete_command, capture_output=True, text=True, encoding="utf-8")
    print(f"Command result: {result.returncode}")
    print(f"Command stdout: {result.stdout}")
    print(f"Command stderr: {result.stderr}")
    return result


def local_args(package_dir: Path, *extra: str) -> list[str]:
    """Build arguments resolving acme/tool from a local package directory only."""
    return [
        "changelog",
        "acme/tool",
        "1.0.0",
        "1.2.0",
        "--repository-url",
        "https://github.com/acme/tool",
        "--local-path",
        str(package_dir),
        "--fetchers",
        "local",
        *extra,
    ]


def test_missing_arguments() -> None:
    """Test that the CLI exits with a usage error if versions are missing."""
    result = run_cli(["changelog", "acme/tool"])
    assert result.returncode == 2
    assert "Missing argument" in result.stderr


def test_local_changelog_markdown(tmp_path: Path) -> None:
    """Test resolving release notes from a local changelog."""
    (tmp_path / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")
    result = run_cli(local_args(tmp_path))
    assert result.returncode == 0
    assert "## 1.2.0" in result.stdout
    assert "## 1.1.0" in result.stdout
    assert "## 1.0.0" not in result.stdout
    assert "[#9](https://github.com/acme/tool/issues/9)" in result.stdout


def test_local_changelog_json(tmp_path: Path) -> None:
    """Test JSON output for a local changelog."""
    (tmp_path / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")
    result = run_cli(local_args(tmp_path, "--format", "json"))
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert [release["tag_name"] for release in data["releases"]] == ["1.2.0", "1.1.0"]
    assert data["summary"]["fixes"] == ["Startup crash https://github.com/acme/tool/issues/9"]


def test_outdated_local_changelog_is_not_found(tmp_path: Path) -> None:
    """Test that a local changelog missing the target version resolves to nothing."""
    (tmp_path / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")
    args = local_args(tmp_path)
    args[3] = "2.0.0"
    result = run_cli(args)
    assert result.returncode == 1
    assert "No release notes found for acme/tool between 1.0.0 and 2.0.0" in result.stderr


def test_unknown_fetcher(tmp_path: Path) -> None:
    """Test that an unknown fetcher name is rejected."""
    result = run_cli(local_args(tmp_path)[:-1] + ["local,packagist"])
    assert result.returncode == 2
    assert "Unsupported release notes fetcher" in result.stderr
