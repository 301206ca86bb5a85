"""Contains exceptions raised when reconciling application configuration."""


class UnsupportedFetcherError(Exception):
    """Raised when a configured fetcher name does not match any known fetcher."""

    def __init__(self, name: str, supported: list[str]) -> None:
        """Initializes the exception with the unknown name and the supported names."""
        super().__init__(f"Unsupported release notes fetcher: {name!r} (supported: {', '.join(supported)})")
        self.name = name
        self.supported = supported
