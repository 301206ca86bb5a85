"""Contains exceptions raised while resolving release notes.

None of these escape a resolution: fetchers catch them and report that they
found nothing.
"""


class ReleaseNotesError(Exception):
    """Base class for release notes errors."""

    pass


class InvalidVersionError(ReleaseNotesError, ValueError):
    """Raised when a version string cannot be decomposed into numeric components."""

    def __init__(self, version: str) -> None:
        """Initializes the exception with the offending version string."""
        super().__init__(f"Invalid version string: {version!r}")
        self.version = version


class FetchError(ReleaseNotesError):
    """Raised when a release notes source cannot be read (network or local I/O failure)."""

    pass


class ParseError(ReleaseNotesError):
    """Raised when release notes content cannot be made sense of."""

    pass
