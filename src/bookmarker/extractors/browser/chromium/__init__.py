"""
Chromium browser family extractors.

Covers: Chrome, Chromium, Edge, Brave. All share the same profile structure
(User Data/Default, Profile 1, etc.) and the same Bookmarks JSON format.
"""

from .bookmarks import ChromiumBookmarksExtractor

__all__ = ["ChromiumBookmarksExtractor"]
