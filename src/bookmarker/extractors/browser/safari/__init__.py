"""
Safari browser family extractors.

Safari is macOS-only; bookmarks and the Reading List share Bookmarks.plist.
"""

from .bookmarks import SafariBookmarksExtractor

__all__ = ["SafariBookmarksExtractor"]
