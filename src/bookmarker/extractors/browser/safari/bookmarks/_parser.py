"""
Safari Bookmarks.plist parser.

Safari bookmark plist structure (binary or XML plist):
- WebBookmarkType: "WebBookmarkTypeLeaf" (bookmark), "WebBookmarkTypeList"
  (folder) or "WebBookmarkTypeProxy" (e.g. History, ignored)
- URLString: URL for bookmarks
- URIDictionary: Contains "title" for bookmarks
- Title: Folder name for folders ("BookmarksBar", "BookmarksMenu",
  "com.apple.ReadingList", or user-chosen)
- Children: Array of child items for folders
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator

from bookmarker.core.records import ROOT_FOLDER, join_folder

NODE_TYPE_LEAF = "WebBookmarkTypeLeaf"
NODE_TYPE_LIST = "WebBookmarkTypeList"


@dataclass
class SafariBookmark:
    """A single Safari bookmark leaf, before URI validation."""
    url: Any
    title: str
    folder_path: str


def parse_bookmarks_plist(plist_data: Dict[str, Any]) -> Iterator[SafariBookmark]:
    """
    Walk a decoded Bookmarks.plist depth-first.

    Args:
        plist_data: Top-level plist dictionary

    Yields:
        SafariBookmark entries for leaf nodes

    Raises:
        ValueError: If the top level is not a dictionary
    """
    if not isinstance(plist_data, dict):
        raise ValueError(f"Bookmarks.plist root must be a dictionary, got {type(plist_data).__name__}")

    yield from _extract_bookmarks_recursive(plist_data, ROOT_FOLDER)


def _extract_bookmarks_recursive(node: Any, folder_path: str) -> Iterator[SafariBookmark]:
    if not isinstance(node, dict):
        return

    node_type = node.get("WebBookmarkType", "")

    if node_type == NODE_TYPE_LEAF:
        url_dict = node.get("URIDictionary", {})
        title = url_dict.get("title", "") if isinstance(url_dict, dict) else ""
        yield SafariBookmark(
            url=node.get("URLString"),
            title=title if isinstance(title, str) else "",
            folder_path=folder_path,
        )
        return

    children = node.get("Children")
    if not isinstance(children, list):
        return

    if node_type == NODE_TYPE_LIST:
        name = node.get("Title", "")
        if isinstance(name, str):
            folder_path = join_folder(folder_path, name)
    elif node_type:
        # Proxy and other special entries
        return

    # Root-level Children without explicit type keep the current path
    for child in children:
        yield from _extract_bookmarks_recursive(child, folder_path)
