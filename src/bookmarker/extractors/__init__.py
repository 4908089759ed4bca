"""
Bookmark extractors, one per browser family.

Each extractor is constructed from a resolved path to its browser's bookmark
container and exposes convert() -> list of Records.

Folder Structure:
- browser/         Browser family extractors (chromium/, firefox/, safari/)
- _shared/         Shared utilities (sqlite_helpers, profiles)
"""

from .exceptions import (
    ConfigurationError,
    DecodeFailedError,
    ExtractorError,
    MalformedEntryError,
    SourceFailedError,
    SourceUnavailableError,
)
from .base import BaseBookmarkExtractor, ExtractorMetadata
from .browser import (
    ChromiumBookmarksExtractor,
    FirefoxBookmarksExtractor,
    SafariBookmarksExtractor,
)
