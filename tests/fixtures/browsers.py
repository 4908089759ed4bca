"""Fixtures that write real browser bookmark containers for tests."""
from __future__ import annotations

import json
import plistlib
import sqlite3
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import lz4.block
import pytest


# =============================================================================
# Chromium node helpers
# =============================================================================

def chrome_url(name: str, url: str) -> Dict[str, Any]:
    return {"type": "url", "name": name, "url": url}


def chrome_folder(name: str, children: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    node: Dict[str, Any] = {"type": "folder", "name": name}
    if children is not None:
        node["children"] = children
    return node


# =============================================================================
# Safari node helpers
# =============================================================================

def safari_leaf(title: str, url: str) -> Dict[str, Any]:
    return {
        "WebBookmarkType": "WebBookmarkTypeLeaf",
        "URLString": url,
        "URIDictionary": {"title": title},
    }


def safari_list(title: str, children: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    node: Dict[str, Any] = {"WebBookmarkType": "WebBookmarkTypeList", "Title": title}
    if children is not None:
        node["Children"] = children
    return node


# =============================================================================
# Firefox helpers
# =============================================================================

# (id, type, parent, position, title, url)
PlacesRow = Tuple[int, int, int, int, Optional[str], Optional[str]]

FIREFOX_ROOT_ROWS: List[PlacesRow] = [
    (1, 2, 0, 0, "", None),
    (2, 2, 1, 0, "menu", None),
    (3, 2, 1, 1, "toolbar", None),
    (4, 2, 1, 2, "tags", None),
    (5, 2, 1, 3, "unfiled", None),
    (6, 2, 1, 4, "mobile", None),
]

FIREFOX_ROOT_GUIDS: Dict[int, str] = {
    1: "root________",
    2: "menu________",
    3: "toolbar_____",
    4: "tags________",
    5: "unfiled_____",
    6: "mobile______",
}


def write_places_db(path: Path, rows: Iterable[PlacesRow]) -> Path:
    """Create a minimal places.sqlite with moz_bookmarks and moz_places."""
    conn = sqlite3.connect(path)
    try:
        conn.executescript("""
            CREATE TABLE moz_places (
                id INTEGER PRIMARY KEY,
                url LONGVARCHAR,
                title LONGVARCHAR
            );
            CREATE TABLE moz_bookmarks (
                id INTEGER PRIMARY KEY,
                type INTEGER,
                fk INTEGER DEFAULT NULL,
                parent INTEGER,
                position INTEGER,
                title LONGVARCHAR,
                guid TEXT
            );
        """)
        for bookmark_id, bm_type, parent, position, title, url in rows:
            guid = FIREFOX_ROOT_GUIDS.get(bookmark_id, f"guid{bookmark_id:08d}")
            fk = None
            if bm_type == 1 and url is not None:
                fk = conn.execute(
                    "INSERT INTO moz_places (url, title) VALUES (?, ?)", (url, title)
                ).lastrowid
            conn.execute(
                "INSERT INTO moz_bookmarks (id, type, fk, parent, position, title, guid) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (bookmark_id, bm_type, fk, parent, position, title, guid),
            )
        conn.commit()
    finally:
        conn.close()
    return path


def write_mozlz4(path: Path, document: Any) -> Path:
    """Write ``document`` as a Mozilla jsonlz4 file."""
    payload = json.dumps(document).encode("utf-8")
    path.write_bytes(b"mozLz40\x00" + lz4.block.compress(payload))
    return path


def moz_container(title: str, children: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    node: Dict[str, Any] = {"type": "text/x-moz-place-container", "title": title}
    if children is not None:
        node["children"] = children
    return node


def moz_place(title: str, uri: str) -> Dict[str, Any]:
    return {"type": "text/x-moz-place", "title": title, "uri": uri}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def chrome_bookmarks_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a Chromium Bookmarks file from a ``roots`` mapping."""

    def _create(roots: Dict[str, Any], name: str = "Bookmarks") -> Path:
        path = tmp_path / name
        document = {"checksum": "0" * 32, "roots": roots, "version": 1}
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _create


@pytest.fixture
def places_db_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a places.sqlite containing the built-in roots plus ``rows``."""

    def _create(rows: Iterable[PlacesRow], name: str = "places.sqlite") -> Path:
        return write_places_db(tmp_path / name, [*FIREFOX_ROOT_ROWS, *rows])

    return _create


@pytest.fixture
def safari_plist_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a Bookmarks.plist from a top-level dictionary."""

    def _create(document: Any, fmt: plistlib.PlistFormat = plistlib.FMT_BINARY) -> Path:
        path = tmp_path / "Bookmarks.plist"
        with open(path, "wb") as f:
            plistlib.dump(document, f, fmt=fmt)
        return path

    return _create
