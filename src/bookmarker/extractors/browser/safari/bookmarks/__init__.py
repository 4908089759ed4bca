"""Safari bookmarks extractor."""

from .extractor import SafariBookmarksExtractor
from ._parser import SafariBookmark, parse_bookmarks_plist

__all__ = ["SafariBookmarksExtractor", "SafariBookmark", "parse_bookmarks_plist"]
