"""
Chromium Bookmarks JSON parser.

Walks the decoded Bookmarks JSON from Chromium-based browsers (Chrome, Edge,
Brave, Chromium) depth-first and yields one entry per URL node with its
reconstructed folder path.

Walk policy:
- Folder without a "children" list ends the branch
- Folder with a non-empty name appends a path segment for its children
- Node of unknown type with children is descended with the path unchanged
- Non-dict nodes are skipped

Usage:
    from bookmarker.extractors.browser.chromium.bookmarks._parser import (
        parse_bookmarks_json,
        ChromiumBookmark,
    )

    with open(bookmarks_path, encoding="utf-8") as f:
        data = json.load(f)

    for bookmark in parse_bookmarks_json(data):
        print(bookmark.folder_path, bookmark.name, bookmark.url)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator

from bookmarker.core.logging import get_logger
from bookmarker.core.records import ROOT_FOLDER, join_folder
from ._schemas import (
    KNOWN_BOOKMARK_TYPES,
    KNOWN_ROOT_FOLDER_KEYS,
    NODE_TYPE_FOLDER,
    NODE_TYPE_URL,
    ROOT_FOLDER_ORDER,
)

LOGGER = get_logger("extractors.browser.chromium.bookmarks.parser")


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class ChromiumBookmark:
    """A single Chromium URL node, before URI validation."""
    name: str
    url: Any  # as stored; validated when converted to a Record
    folder_path: str  # e.g., "/Bookmarks bar/Tech/Dev"


# =============================================================================
# Main Parser Functions
# =============================================================================

def parse_bookmarks_json(data: Dict[str, Any]) -> Iterator[ChromiumBookmark]:
    """
    Parse a decoded Chromium Bookmarks JSON document.

    Args:
        data: Parsed JSON dict; must contain a "roots" mapping

    Yields:
        ChromiumBookmark entries for URL nodes, in depth-first order over
        bookmark_bar, synced and other

    Raises:
        ValueError: If the document does not have the expected shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"Bookmarks root must be an object, got {type(data).__name__}")

    roots = data.get("roots")
    if not isinstance(roots, dict):
        raise ValueError("Bookmarks document has no 'roots' object")

    unknown_roots = set(roots) - KNOWN_ROOT_FOLDER_KEYS
    if unknown_roots:
        LOGGER.debug("Ignoring unknown Chromium root folders: %s", sorted(unknown_roots))

    for root_key in ROOT_FOLDER_ORDER:
        root_node = roots.get(root_key)
        if root_node is None:
            continue
        yield from _parse_bookmark_node(root_node, ROOT_FOLDER)


# =============================================================================
# Internal Parser Helpers
# =============================================================================

def _parse_bookmark_node(node: Any, folder_path: str) -> Iterator[ChromiumBookmark]:
    """
    Recursively parse a bookmark node and its children.

    Args:
        node: Bookmark node dict
        folder_path: Folder path accumulated from the node's ancestors

    Yields:
        ChromiumBookmark entries
    """
    if not isinstance(node, dict):
        return

    node_type = node.get("type", "")
    name = node.get("name", "")

    if isinstance(node_type, str) and node_type and node_type not in KNOWN_BOOKMARK_TYPES:
        LOGGER.debug("Unknown Chromium bookmark node type %r at %s", node_type, folder_path)

    if node_type == NODE_TYPE_URL:
        yield ChromiumBookmark(
            name=name if isinstance(name, str) else "",
            url=node.get("url"),
            folder_path=folder_path,
        )
        return

    children = node.get("children")
    if not isinstance(children, list):
        # Folder never materialized (or malformed): stop here
        return

    if node_type == NODE_TYPE_FOLDER and isinstance(name, str):
        folder_path = join_folder(folder_path, name)

    for child in children:
        yield from _parse_bookmark_node(child, folder_path)
