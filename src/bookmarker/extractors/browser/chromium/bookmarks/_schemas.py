"""
Chromium Bookmarks JSON schema definitions.

Chromium Bookmarks Format:
- JSON file at: {profile}/Bookmarks
- Structure: { "checksum": "...", "roots": { "bookmark_bar": {...}, ... }, "version": 1 }
- Edge/Brave/Chromium use the identical format
"""

from __future__ import annotations

from typing import Set, Tuple

# =============================================================================
# Root Folders
# =============================================================================
# Root folder keys inside the "roots" object, in the order they are read.
# Each root is itself a folder node whose name becomes the first path segment.

ROOT_FOLDER_ORDER: Tuple[str, ...] = (
    "bookmark_bar",  # Main toolbar bookmarks
    "synced",        # Synced from mobile devices
    "other",         # Other bookmarks (not on bar)
)

KNOWN_ROOT_FOLDER_KEYS: Set[str] = set(ROOT_FOLDER_ORDER) | {
    "account",       # Account-level bookmarks (Chromium 120+), not read
}

# =============================================================================
# Bookmark Types
# =============================================================================
# Valid values for the "type" field in bookmark nodes.

NODE_TYPE_URL = "url"
NODE_TYPE_FOLDER = "folder"

KNOWN_BOOKMARK_TYPES: Set[str] = {NODE_TYPE_URL, NODE_TYPE_FOLDER}
