"""
Safari Bookmarks Extractor

Reads ~/Library/Safari/Bookmarks.plist (binary or XML) and converts its leaf
entries into Records. Reading List items live under "/com.apple.ReadingList".
"""

from __future__ import annotations

import plistlib
from typing import List
from xml.parsers.expat import ExpatError

from bookmarker.core.enums import SourceName
from bookmarker.core.logging import get_logger
from bookmarker.core.records import Record
from ....base import BaseBookmarkExtractor, ExtractorMetadata
from ....exceptions import DecodeFailedError, SourceUnavailableError
from ._parser import parse_bookmarks_plist

LOGGER = get_logger("extractors.browser.safari.bookmarks")


class SafariBookmarksExtractor(BaseBookmarkExtractor):
    """Safari bookmarks extractor for Bookmarks.plist."""

    source_name = SourceName.SAFARI

    @property
    def metadata(self) -> ExtractorMetadata:
        return ExtractorMetadata(
            name="safari_bookmarks",
            display_name="Safari Bookmarks",
            description="Safari bookmarks and Reading List from Bookmarks.plist",
            source_name=self.source_name,
        )

    def convert(self) -> List[Record]:
        try:
            with open(self.bookmarks_path, "rb") as f:
                plist_data = plistlib.load(f)
        except (plistlib.InvalidFileException, ValueError, ExpatError, RecursionError) as e:
            raise DecodeFailedError(f"Failed to decode {self.bookmarks_path}: {e}") from e
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open {self.bookmarks_path}: {e}") from e

        try:
            entries = list(parse_bookmarks_plist(plist_data))
        except RecursionError as e:
            raise DecodeFailedError(f"Bookmarks.plist tree in {self.bookmarks_path} is nested too deeply") from e
        except ValueError as e:
            raise DecodeFailedError(f"Unexpected Bookmarks.plist structure in {self.bookmarks_path}: {e}") from e

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
