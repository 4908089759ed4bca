"""
Exceptions for extractor modules.

``MalformedEntryError`` is re-exported from ``bookmarker.core.uri`` for
convenience; it is a ``ValueError`` and deliberately not an ``ExtractorError``.
"""

from bookmarker.core.uri import MalformedEntryError  # noqa: F401


class ExtractorError(Exception):
    """Base exception for extractor errors."""
    pass


class ConfigurationError(ExtractorError):
    """Raised when an extractor cannot be configured (e.g. profile not found)."""

    def __init__(self, message: str, engine=None):
        self.engine = engine
        super().__init__(message)


class SourceUnavailableError(ExtractorError):
    """Raised when a source's bookmark container cannot be opened."""
    pass


class DecodeFailedError(ExtractorError):
    """Raised when a bookmark container was opened but could not be decoded."""
    pass


class SourceFailedError(ExtractorError):
    """Raised by the engine when one source fails; names the failing family."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Failed to load bookmarks in {source}: {cause}")
