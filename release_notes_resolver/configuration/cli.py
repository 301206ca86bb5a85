"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from release_notes_resolver.configuration.env import settings
from release_notes_resolver.configuration.exceptions import UnsupportedFetcherError
from release_notes_resolver.configuration.models import Ecosystem, OutputFormat, ResolveConfig
from release_notes_resolver.configuration.reconcile import local_package_path, parse_fetcher_order
from release_notes_resolver.github.adapter import GitHubKitAdapter
from release_notes_resolver.release_notes import ReleaseCollection, ReleaseNotesReport, build_resolver

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Show what changed between two versions of a dependency.")


@typer_app.callback()
def main_callback() -> None:
    """Release notes resolver for dependency updates."""


def configure_logging(debug: bool) -> None:
    """Configure structlog to emit debug logs only when requested."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


async def run_changelog(config: ResolveConfig, github_pat_token: str | None, github_api_url: str) -> ReleaseCollection | None:
    """Resolve release notes for one package using the configured fetcher order."""
    adapter = GitHubKitAdapter.create(github_pat_token=github_pat_token, github_api_url=github_api_url)
    resolver = build_resolver(adapter, config.fetchers)
    return await resolver.resolve(
        package=config.package,
        from_version=config.from_version,
        to_version=config.to_version,
        repository_url=config.repository_url,
        ecosystem=config.ecosystem,
        local_path=config.local_path,
        include_prerelease=config.include_prerelease,
    )


def render(collection: ReleaseCollection, output_format: OutputFormat) -> str:
    """Render a resolved collection in the requested output format."""
    if output_format == OutputFormat.SUMMARY:
        return collection.to_summary_markdown()
    if output_format == OutputFormat.JSON:
        return ReleaseNotesReport.from_collection(collection, summary=True).model_dump_json(indent=2)
    return collection.to_markdown()


@typer_app.command(name="changelog")
def changelog_cli(
    package: Annotated[str, Argument(help="Package name (e.g. symfony/console).")],
    from_version: Annotated[str, Argument(help="Version to start from (exclusive).")],
    to_version: Annotated[str, Argument(help="Version to end at (inclusive). Use the same version twice for a single release.")],
    repository_url: Annotated[str, Option(envvar="REPOSITORY_URL", help="Repository URL of the package.")] = "",
    local_path: Annotated[
        Path | None, Option(envvar="LOCAL_PATH", help="Path to the installed package. Defaults to vendor/<package> or node_modules/<package> when present.")
    ] = None,
    ecosystem: Annotated[Ecosystem, Option(envvar="ECOSYSTEM", help="Package manager ecosystem.")] = Ecosystem.COMPOSER,
    include_prerelease: Annotated[
        bool, Option(envvar="INCLUDE_PRERELEASE", help="Include alpha, beta, rc and dev versions.")
    ] = settings.INCLUDE_PRERELEASE,
    output_format: Annotated[OutputFormat, Option("--format", help="Output format.")] = OutputFormat.MARKDOWN,
    fetchers: Annotated[
        str, Option(envvar="RELEASE_NOTES_FETCHERS", help="Comma-separated fetcher order (local, remote_changelog, releases_api).")
    ] = settings.RELEASE_NOTES_FETCHERS,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = settings.GITHUB_API_URL,
    github_pat_token: Annotated[str | None, Option(envvar="GITHUB_PAT_TOKEN", help="GitHub Personal Access Token.")] = settings.GITHUB_PAT_TOKEN,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = settings.DEBUG,
) -> None:
    """Show the release notes of a package between two versions."""
    configure_logging(debug)

    try:
        fetcher_order = parse_fetcher_order(fetchers)
    except UnsupportedFetcherError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e

    config = ResolveConfig(
        package=package,
        from_version=from_version,
        to_version=to_version,
        repository_url=repository_url,
        ecosystem=ecosystem,
        local_path=str(local_path) if local_path is not None else local_package_path(package, ecosystem),
        include_prerelease=include_prerelease,
        fetchers=fetcher_order,
    )

    collection = asyncio.run(run_changelog(config, github_pat_token=github_pat_token, github_api_url=github_api_url))
    if collection is None:
        typer.echo(f"No release notes found for {package} between {from_version} and {to_version}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render(collection, output_format))


if __name__ == "__main__":
    typer_app()
