"""
Firefox Bookmarks Extractor

Exports:
- FirefoxBookmarksExtractor: Extractor for places.sqlite and jsonlz4 backups
- parse_places / parse_bookmark_backup: Parser functions
- FirefoxBookmark: Dataclass representing a single bookmark
"""
from .extractor import FirefoxBookmarksExtractor
from ._parser import FirefoxBookmark, decompress_mozlz4, parse_bookmark_backup, parse_places

__all__ = [
    "FirefoxBookmarksExtractor",
    "FirefoxBookmark",
    "decompress_mozlz4",
    "parse_bookmark_backup",
    "parse_places",
]
