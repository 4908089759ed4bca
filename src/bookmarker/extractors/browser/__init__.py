"""
Bookmark extractors organized by browser family.

Structure:
    browser/
    ├── chromium/    # Chrome, Chromium, Edge, Brave (Bookmarks JSON)
    ├── firefox/     # Firefox (places.sqlite, jsonlz4 backups)
    └── safari/      # Safari (Bookmarks.plist, macOS only)
"""

from .chromium import ChromiumBookmarksExtractor
from .firefox import FirefoxBookmarksExtractor
from .safari import SafariBookmarksExtractor

__all__ = [
    "ChromiumBookmarksExtractor",
    "FirefoxBookmarksExtractor",
    "SafariBookmarksExtractor",
]
