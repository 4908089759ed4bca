"""
Chromium Bookmarks Extractor

Exports:
- ChromiumBookmarksExtractor: Extractor converting a Bookmarks file into Records
- parse_bookmarks_json: Parser function for decoded Bookmarks JSON
- ChromiumBookmark: Dataclass representing a single URL node
"""
from .extractor import ChromiumBookmarksExtractor
from ._parser import parse_bookmarks_json, ChromiumBookmark

__all__ = [
    "ChromiumBookmarksExtractor",
    "parse_bookmarks_json",
    "ChromiumBookmark",
]
