"""
Firefox browser family extractors.

Firefox keeps bookmarks in places.sqlite (moz_bookmarks + moz_places) and
takes periodic jsonlz4 snapshots under bookmarkbackups/.
"""

from .bookmarks import FirefoxBookmarksExtractor

__all__ = ["FirefoxBookmarksExtractor"]
