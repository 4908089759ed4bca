"""
Firefox bookmark parsing utilities.

Two containers hold Firefox bookmarks:
- places.sqlite: moz_bookmarks (tree via parent/position) joined to moz_places (URLs)
- bookmarkbackups/*.jsonlz4: mozLz4-compressed JSON snapshot of the same tree

Both are reduced to the backup JSON node shape and walked by the same
depth-first traversal:
- "text/x-moz-place-container": folder (title, children)
- "text/x-moz-place": bookmark (title, uri)
- "text/x-moz-place-separator": ignored

Built-in root folders ("menu", "toolbar", "unfiled", "mobile") directly under
the root container are shown with their display names; the root container
itself adds no path segment. The built-in "tags" root is skipped: it holds
one entry per (tag, bookmark) pair, not bookmarks.
"""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

import lz4.block

from bookmarker.core.records import ROOT_FOLDER, join_folder
from ...._shared.sqlite_helpers import table_exists


# =============================================================================
# Constants
# =============================================================================

MOZLZ4_MAGIC = b"mozLz40\x00"

# moz_bookmarks.type values
TYPE_BOOKMARK = 1
TYPE_FOLDER = 2
TYPE_SEPARATOR = 3

NODE_TYPE_CONTAINER = "text/x-moz-place-container"
NODE_TYPE_PLACE = "text/x-moz-place"
NODE_TYPE_SEPARATOR = "text/x-moz-place-separator"

_NODE_TYPES_BY_ROW_TYPE: Dict[int, str] = {
    TYPE_BOOKMARK: NODE_TYPE_PLACE,
    TYPE_FOLDER: NODE_TYPE_CONTAINER,
    TYPE_SEPARATOR: NODE_TYPE_SEPARATOR,
}

# Map internal root folder names to display names
ROOT_TITLE_MAP: Dict[str, str] = {
    "menu": "Bookmarks Menu",
    "toolbar": "Bookmarks Toolbar",
    "unfiled": "Other Bookmarks",
    "mobile": "Mobile Bookmarks",
}

# Built-in tags root, identified by title, backup "root" key or places guid
TAGS_ROOT_TITLE = "tags"
TAGS_ROOT_NAME = "tagsFolder"
TAGS_ROOT_GUID = "tags________"

REQUIRED_TABLES = ("moz_bookmarks", "moz_places")


@dataclass
class FirefoxBookmark:
    """A single Firefox bookmark, before URI validation."""
    title: str
    url: Any
    folder_path: str


# =============================================================================
# places.sqlite
# =============================================================================

def parse_places(conn: sqlite3.Connection) -> Iterator[FirefoxBookmark]:
    """
    Parse bookmarks from an open places.sqlite connection.

    Args:
        conn: Connection with ``sqlite3.Row`` row factory

    Yields:
        FirefoxBookmark records in depth-first tree order

    Raises:
        ValueError: If the bookmark tables are missing
        sqlite3.Error: If the query fails
    """
    missing = [name for name in REQUIRED_TABLES if not table_exists(conn, name)]
    if missing:
        raise ValueError(f"places database is missing tables: {', '.join(missing)}")

    cursor = conn.execute("""
        SELECT
            b.id,
            b.type,
            b.parent,
            b.title,
            b.guid,
            p.url
        FROM moz_bookmarks b
        LEFT JOIN moz_places p ON b.fk = p.id
        ORDER BY b.parent, b.position, b.id
    """)
    rows = cursor.fetchall()

    yield from _traverse_bookmark_tree(_build_places_tree(rows), ROOT_FOLDER, depth=0)


def _build_places_tree(rows: List[sqlite3.Row]) -> Dict[str, Any]:
    """
    Rebuild the bookmark tree from moz_bookmarks rows as backup-style nodes.

    The root container is the row with parent 0. Rows whose parent chain never
    reaches it are unreachable and left out.
    """
    nodes: Dict[int, Dict[str, Any]] = {}
    children_of: Dict[int, List[int]] = {}

    for row in rows:
        node: Dict[str, Any] = {
            "type": _NODE_TYPES_BY_ROW_TYPE.get(row["type"], ""),
            "title": row["title"] or "",
            "guid": row["guid"],
        }
        if row["type"] == TYPE_BOOKMARK:
            node["uri"] = row["url"]
        elif row["type"] == TYPE_FOLDER:
            node["children"] = []
        nodes[row["id"]] = node
        children_of.setdefault(row["parent"], []).append(row["id"])

    for parent_id, child_ids in children_of.items():
        parent = nodes.get(parent_id)
        if parent is not None and "children" in parent:
            parent["children"] = [nodes[child_id] for child_id in child_ids]

    roots = [nodes[node_id] for node_id in children_of.get(0, [])]
    if len(roots) == 1:
        return roots[0]
    return {"type": NODE_TYPE_CONTAINER, "title": "", "children": roots}


# =============================================================================
# Bookmark Backup Parsing (jsonlz4)
# =============================================================================

def decompress_mozlz4(data: bytes) -> bytes:
    """
    Decompress Mozilla LZ4 format data.

    Mozilla uses a custom LZ4 variant with "mozLz40\\x00" magic header.
    The actual LZ4 block (with its size prefix) follows the 8-byte header.

    Raises:
        ValueError: If the header is invalid or the block cannot be decompressed
    """
    if len(data) < 8:
        raise ValueError("Data too short for mozLz4 format")

    if data[:8] != MOZLZ4_MAGIC:
        raise ValueError(f"Invalid mozLz4 magic: {data[:8]!r}")

    try:
        return lz4.block.decompress(data[8:])
    except lz4.block.LZ4BlockError as e:
        raise ValueError(f"Corrupt mozLz4 block: {e}") from e


def parse_bookmark_backup(data: bytes) -> Iterator[FirefoxBookmark]:
    """
    Parse the raw bytes of a Firefox bookmark backup (jsonlz4).

    Raises:
        ValueError: If the data cannot be decompressed or decoded
    """
    try:
        backup = json.loads(decompress_mozlz4(data))
    except UnicodeDecodeError as e:
        raise ValueError(f"Bookmark backup is not UTF-8 JSON: {e}") from e

    if not isinstance(backup, dict):
        raise ValueError(f"Bookmark backup root must be an object, got {type(backup).__name__}")

    yield from _traverse_bookmark_tree(backup, ROOT_FOLDER, depth=0)


# =============================================================================
# Tree Traversal
# =============================================================================

def _traverse_bookmark_tree(
    node: Any,
    parent_path: str,
    depth: int,
) -> Iterator[FirefoxBookmark]:
    """
    Recursively traverse a backup-style bookmark node.

    Args:
        node: Current node in bookmark tree
        parent_path: Folder path of the node's parent
        depth: 0 for the root container, 1 for the built-in roots

    Yields:
        FirefoxBookmark records
    """
    if not isinstance(node, dict):
        return

    node_type = node.get("type", "")
    title = node.get("title") or ""
    if not isinstance(title, str):
        title = ""

    if node_type == NODE_TYPE_PLACE:
        yield FirefoxBookmark(title=title, url=node.get("uri"), folder_path=parent_path)
        return

    if node_type != NODE_TYPE_CONTAINER:
        return

    children: Optional[List[Any]] = node.get("children")
    if not isinstance(children, list):
        return

    if depth == 1:
        if _is_tags_root(node, title):
            return
        title = ROOT_TITLE_MAP.get(title, title)
    current_path = join_folder(parent_path, title)

    for child in children:
        yield from _traverse_bookmark_tree(child, current_path, depth + 1)


def _is_tags_root(node: Dict[str, Any], title: str) -> bool:
    return (
        title == TAGS_ROOT_TITLE
        or node.get("root") == TAGS_ROOT_NAME
        or node.get("guid") == TAGS_ROOT_GUID
    )
