"""Reconcile release notes configuration from CLI arguments and environment variables."""

from pathlib import Path

from release_notes_resolver.configuration.exceptions import UnsupportedFetcherError
from release_notes_resolver.configuration.models import DEFAULT_FETCHER_ORDER, Ecosystem, FetcherKind

PACKAGE_DIRECTORIES: dict[Ecosystem, str] = {
    Ecosystem.COMPOSER: "vendor",
    Ecosystem.NPM: "node_modules",
}
"""Directory each package manager installs packages into, relative to the project root."""


def parse_fetcher_order(value: str | None) -> list[FetcherKind]:
    """Parses a comma-separated fetcher order such as ``local,releases_api``.

    Args:
        value (str | None): Comma-separated fetcher names. Dashes are accepted in place of underscores.

    Raises:
        UnsupportedFetcherError: If a name does not match a known fetcher.

    Returns:
        list[FetcherKind]: The fetchers in the configured order, without duplicates.
            The default order is returned when the value is empty.
    """
    if not value or not value.strip():
        return list(DEFAULT_FETCHER_ORDER)

    supported = [kind.value for kind in FetcherKind]
    order: list[FetcherKind] = []
    for raw_name in value.split(","):
        name = raw_name.strip().lower().replace("-", "_")
        if not name:
            continue
        if name not in supported:
            raise UnsupportedFetcherError(raw_name.strip(), supported)
        kind = FetcherKind(name)
        if kind not in order:
            order.append(kind)
    return order or list(DEFAULT_FETCHER_ORDER)


def local_package_path(package: str, ecosystem: Ecosystem, base_dir: Path | None = None) -> str | None:
    """Locates the installed copy of a package, e.g. ``vendor/symfony/console``.

    Args:
        package (str): Package name as the package manager knows it.
        ecosystem (Ecosystem): Package manager that installed the package.
        base_dir (Path | None): Project root. Defaults to the current working directory.

    Returns:
        str | None: The package directory, or None if it is not installed there.
    """
    root = base_dir if base_dir is not None else Path.cwd()
    candidate = root / PACKAGE_DIRECTORIES[ecosystem] / package
    if not candidate.is_dir():
        return None
    return str(candidate)
