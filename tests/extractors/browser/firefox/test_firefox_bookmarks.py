"""
Tests for Firefox Bookmarks Extractor.

Tests cover:
- places.sqlite tree reconstruction and root folder naming
- mozLz4 backup decoding and traversal
- FirefoxBookmarksExtractor conversion and error mapping
"""

import sqlite3

import pytest

from bookmarker.core.enums import SourceName
from bookmarker.extractors.browser.firefox.bookmarks import (
    FirefoxBookmarksExtractor,
    decompress_mozlz4,
    parse_bookmark_backup,
    parse_places,
)
from bookmarker.extractors.exceptions import DecodeFailedError, SourceUnavailableError
from tests.fixtures.browsers import moz_container, moz_place, write_mozlz4, write_places_db

# (id, type, parent, position, title, url); parents 2/3/5 are menu/toolbar/unfiled
PLACES_ROWS = [
    (10, 2, 3, 0, "Work", None),
    (11, 1, 10, 0, "A", "http://a.com"),
    (12, 2, 10, 1, "Sub", None),
    (13, 1, 12, 0, "B", "http://b.com"),
    (14, 3, 3, 1, None, None),
    (15, 1, 2, 0, "Menu item", "https://menu.example/"),
    (16, 2, 5, 0, "Empty", None),
    (17, 1, 5, 1, "Unsorted", "https://unsorted.example/"),
]


@pytest.fixture
def backup_document():
    return moz_container("", [
        moz_container("menu", [moz_place("Menu item", "https://menu.example/")]),
        moz_container("toolbar", [
            moz_container("Work", [
                moz_place("A", "http://a.com"),
                {"type": "text/x-moz-place-separator"},
                moz_container("menu", [moz_place("Nested", "http://nested.com")]),
            ]),
        ]),
        moz_container("unfiled", []),
        moz_container("mobile"),
    ])


# =============================================================================
# places.sqlite
# =============================================================================

class TestParsePlaces:
    """Test parse_places()."""

    def test_tree_order_and_root_names(self, places_db_factory):
        path = places_db_factory(PLACES_ROWS)
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        try:
            bookmarks = list(parse_places(conn))
        finally:
            conn.close()

        assert [(b.folder_path, b.title, b.url) for b in bookmarks] == [
            ("/Bookmarks Menu", "Menu item", "https://menu.example/"),
            ("/Bookmarks Toolbar/Work", "A", "http://a.com"),
            ("/Bookmarks Toolbar/Work/Sub", "B", "http://b.com"),
            ("/Other Bookmarks", "Unsorted", "https://unsorted.example/"),
        ]

    def test_position_orders_siblings(self, places_db_factory):
        path = places_db_factory([
            (20, 1, 3, 1, "Second", "http://2.com"),
            (21, 1, 3, 0, "First", "http://1.com"),
        ])
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        try:
            assert [b.title for b in parse_places(conn)] == ["First", "Second"]
        finally:
            conn.close()

    def test_tags_root_skipped(self, places_db_factory):
        """Tag entries under the built-in tags root are not bookmarks."""
        path = places_db_factory([
            (40, 2, 4, 0, "python", None),
            (41, 1, 40, 0, None, "https://docs.python.org/"),
            (42, 1, 3, 0, "Docs", "https://docs.python.org/"),
        ])
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        try:
            bookmarks = list(parse_places(conn))
        finally:
            conn.close()

        assert [(b.folder_path, b.title) for b in bookmarks] == [("/Bookmarks Toolbar", "Docs")]

    def test_tags_root_recognized_by_guid(self, tmp_path):
        path = write_places_db(tmp_path / "places.sqlite", [
            (1, 2, 0, 0, "", None),
            (3, 2, 1, 0, "toolbar", None),
            (4, 2, 1, 1, "", None),
            (40, 2, 4, 0, "python", None),
            (41, 1, 40, 0, None, "https://docs.python.org/"),
        ])
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        try:
            assert list(parse_places(conn)) == []
        finally:
            conn.close()

    def test_missing_tables(self, tmp_path):
        conn = sqlite3.connect(tmp_path / "empty.sqlite")
        conn.row_factory = sqlite3.Row
        try:
            with pytest.raises(ValueError, match="moz_bookmarks"):
                list(parse_places(conn))
        finally:
            conn.close()


# =============================================================================
# jsonlz4 backups
# =============================================================================

class TestBookmarkBackup:
    """Test mozLz4 decoding and backup traversal."""

    def test_decompress_roundtrip(self, tmp_path):
        path = write_mozlz4(tmp_path / "b.jsonlz4", {"k": "v"})
        assert decompress_mozlz4(path.read_bytes()) == b'{"k": "v"}'

    @pytest.mark.parametrize("data", [b"", b"mozLz4", b"notmagic" + b"\x00" * 8])
    def test_decompress_rejects_bad_header(self, data):
        with pytest.raises(ValueError):
            decompress_mozlz4(data)

    def test_parse_backup(self, tmp_path, backup_document):
        """Only depth-1 roots are renamed; a nested "menu" folder is kept as is."""
        data = write_mozlz4(tmp_path / "b.jsonlz4", backup_document).read_bytes()

        bookmarks = list(parse_bookmark_backup(data))

        assert [(b.folder_path, b.url) for b in bookmarks] == [
            ("/Bookmarks Menu", "https://menu.example/"),
            ("/Bookmarks Toolbar/Work", "http://a.com"),
            ("/Bookmarks Toolbar/Work/menu", "http://nested.com"),
        ]

    def test_tags_folder_skipped(self, tmp_path):
        """The backup tags root is skipped by its "root" key or its title."""
        tags = moz_container("Tags", [
            moz_container("python", [moz_place("", "https://docs.python.org/")]),
        ])
        tags["root"] = "tagsFolder"
        document = moz_container("", [
            moz_container("toolbar", [moz_place("Docs", "https://docs.python.org/")]),
            tags,
            moz_container("tags", [moz_place("", "https://other.example/")]),
        ])
        data = write_mozlz4(tmp_path / "b.jsonlz4", document).read_bytes()

        bookmarks = list(parse_bookmark_backup(data))

        assert [(b.folder_path, b.title) for b in bookmarks] == [("/Bookmarks Toolbar", "Docs")]

    def test_non_object_root(self, tmp_path):
        data = write_mozlz4(tmp_path / "b.jsonlz4", [1, 2]).read_bytes()
        with pytest.raises(ValueError, match="must be an object"):
            list(parse_bookmark_backup(data))


# =============================================================================
# Extractor Tests
# =============================================================================

class TestFirefoxBookmarksExtractor:
    """Test FirefoxBookmarksExtractor."""

    def test_metadata(self, tmp_path):
        extractor = FirefoxBookmarksExtractor(tmp_path / "places.sqlite")
        assert extractor.metadata.name == "firefox_bookmarks"
        assert extractor.metadata.source_name == SourceName.FIREFOX
        assert extractor.is_backup is False

    def test_convert_places(self, places_db_factory):
        path = places_db_factory([
            *PLACES_ROWS,
            (30, 1, 6, 0, "Broken", "no scheme here"),
            (31, 1, 6, 1, "No URL", None),
        ])
        before = path.read_bytes()

        records = FirefoxBookmarksExtractor(path).convert()

        assert [r.uri for r in records] == [
            "https://menu.example/", "http://a.com", "http://b.com", "https://unsorted.example/",
        ]
        assert all(r.source_name == SourceName.FIREFOX for r in records)
        assert records[1].domain == "a.com"
        # Source database is untouched
        assert path.read_bytes() == before

    def test_convert_places_ignores_tags(self, places_db_factory):
        path = places_db_factory([
            (40, 2, 4, 0, "python", None),
            (41, 1, 40, 0, None, "https://docs.python.org/"),
            (11, 1, 3, 0, "Docs", "https://docs.python.org/"),
        ])

        records = FirefoxBookmarksExtractor(path).convert()

        assert [(r.folder, r.title, r.uri) for r in records] == [
            ("/Bookmarks Toolbar", "Docs", "https://docs.python.org/"),
        ]

    def test_convert_backup(self, tmp_path, backup_document):
        path = write_mozlz4(tmp_path / "bookmarks-2024-05-01_12_abc.jsonlz4", backup_document)
        extractor = FirefoxBookmarksExtractor(path)

        assert extractor.is_backup is True
        assert [r.folder for r in extractor.convert()] == [
            "/Bookmarks Menu", "/Bookmarks Toolbar/Work", "/Bookmarks Toolbar/Work/menu",
        ]

    def test_missing_places(self, tmp_path):
        with pytest.raises(SourceUnavailableError):
            FirefoxBookmarksExtractor(tmp_path / "places.sqlite").convert()

    def test_missing_backup(self, tmp_path):
        with pytest.raises(SourceUnavailableError):
            FirefoxBookmarksExtractor(tmp_path / "bookmarks.jsonlz4").convert()

    def test_corrupt_places(self, tmp_path):
        path = tmp_path / "places.sqlite"
        path.write_bytes(b"this is not a database" * 100)
        with pytest.raises(DecodeFailedError):
            FirefoxBookmarksExtractor(path).convert()

    def test_places_without_bookmark_tables(self, tmp_path):
        path = tmp_path / "places.sqlite"
        conn = sqlite3.connect(path)
        conn.execute("CREATE TABLE moz_places (id INTEGER PRIMARY KEY, url TEXT)")
        conn.commit()
        conn.close()

        with pytest.raises(DecodeFailedError, match="moz_bookmarks"):
            FirefoxBookmarksExtractor(path).convert()

    def test_corrupt_backup(self, tmp_path):
        path = tmp_path / "bookmarks.jsonlz4"
        path.write_bytes(b"mozLz40\x00" + b"\x10\x00\x00\x00" + b"\xff" * 12)
        with pytest.raises(DecodeFailedError):
            FirefoxBookmarksExtractor(path).convert()
