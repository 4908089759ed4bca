"""
Firefox Bookmarks Extractor

Reads bookmarks from one Firefox profile container:
- places.sqlite: live bookmarks, read from a temporary read-only copy so a
  running Firefox's lock does not interfere
- *.jsonlz4: a bookmarkbackups/ snapshot (selected by file suffix)
"""

from __future__ import annotations

from typing import List

from bookmarker.core.enums import SourceName
from bookmarker.core.logging import get_logger
from bookmarker.core.records import Record
from ....base import BaseBookmarkExtractor, ExtractorMetadata
from ....exceptions import DecodeFailedError, SourceUnavailableError
from ...._shared.sqlite_helpers import SQLiteReadError, safe_sqlite_connect
from ._parser import FirefoxBookmark, parse_bookmark_backup, parse_places

LOGGER = get_logger("extractors.browser.firefox.bookmarks")

BACKUP_SUFFIX = ".jsonlz4"


class FirefoxBookmarksExtractor(BaseBookmarkExtractor):
    """
    Firefox bookmarks extractor.

    Features:
    - Folder hierarchy rebuilt from moz_bookmarks parent/position
    - Built-in roots shown as "Bookmarks Menu", "Bookmarks Toolbar",
      "Other Bookmarks" and "Mobile Bookmarks"
    - jsonlz4 backup files decoded with the same traversal
    """

    source_name = SourceName.FIREFOX

    @property
    def metadata(self) -> ExtractorMetadata:
        return ExtractorMetadata(
            name="firefox_bookmarks",
            display_name="Firefox Bookmarks",
            description="Firefox bookmarks from places.sqlite or jsonlz4 backups",
            source_name=self.source_name,
        )

    @property
    def is_backup(self) -> bool:
        return self.bookmarks_path.suffix.lower() == BACKUP_SUFFIX

    def convert(self) -> List[Record]:
        if self.is_backup:
            entries = self._read_backup()
        else:
            entries = self._read_places()

        records = []
        for entry in entries:
            record = self.make_record(entry.folder_path, entry.title, entry.url)
            if record is not None:
                records.append(record)

        LOGGER.info(
            "Read %d bookmarks from %s (%d dropped)",
            len(records), self.bookmarks_path, len(entries) - len(records),
        )
        return records

    def _read_places(self) -> List[FirefoxBookmark]:
        try:
            with safe_sqlite_connect(self.bookmarks_path, copy_first=True) as conn:
                return list(parse_places(conn))
        except SQLiteReadError as e:
            raise DecodeFailedError(str(e)) from e
        except RecursionError as e:
            raise DecodeFailedError(f"Bookmark tree in {self.bookmarks_path} is nested too deeply") from e
        except ValueError as e:
            raise DecodeFailedError(f"Unexpected places database {self.bookmarks_path}: {e}") from e
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open {self.bookmarks_path}: {e}") from e

    def _read_backup(self) -> List[FirefoxBookmark]:
        try:
            data = self.bookmarks_path.read_bytes()
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open {self.bookmarks_path}: {e}") from e

        try:
            return list(parse_bookmark_backup(data))
        except (ValueError, RecursionError) as e:
            raise DecodeFailedError(f"Failed to decode bookmark backup {self.bookmarks_path}: {e}") from e
