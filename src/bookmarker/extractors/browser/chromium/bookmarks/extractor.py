"""
Chromium Bookmarks Extractor

Reads the Bookmarks JSON file of one Chromium-family profile (Chrome,
Chromium, Edge, Brave) and converts its URL nodes into Records.

Folder paths start at the root folder's own name, e.g.
"/Bookmarks bar/Tech" for a "Tech" folder on the bookmarks bar.
"""

from __future__ import annotations

import json
from typing import List

from bookmarker.core.enums import SourceName
from bookmarker.core.logging import get_logger
from bookmarker.core.records import Record
from ....base import BaseBookmarkExtractor, ExtractorMetadata
from ....exceptions import DecodeFailedError, SourceUnavailableError
from ._parser import parse_bookmarks_json

LOGGER = get_logger("extractors.browser.chromium.bookmarks")


class ChromiumBookmarksExtractor(BaseBookmarkExtractor):
    """
    Chromium-family bookmarks extractor.

    Walks bookmark_bar, synced and other in that order; each URL node with a
    valid URI becomes one Record attributed to the chrome source.
    """

    source_name = SourceName.CHROME

    @property
    def metadata(self) -> ExtractorMetadata:
        return ExtractorMetadata(
            name="chromium_bookmarks",
            display_name="Chromium Bookmarks",
            description="Bookmarks JSON from Chrome, Chromium, Edge and Brave profiles",
            source_name=self.source_name,
        )

    def convert(self) -> List[Record]:
        data = self._load()

        try:
            entries = list(parse_bookmarks_json(data))
        except RecursionError as e:
            raise DecodeFailedError(f"Bookmarks tree in {self.bookmarks_path} is nested too deeply") from e
        except ValueError as e:
            raise DecodeFailedError(f"Unexpected Bookmarks structure in {self.bookmarks_path}: {e}") from e

        records = []
        for entry in entries:
            record = self.make_record(entry.folder_path, entry.name, entry.url)
            if record is not None:
                records.append(record)

        LOGGER.info(
            "Read %d bookmarks from %s (%d dropped)",
            len(records), self.bookmarks_path, len(entries) - len(records),
        )
        return records

    def _load(self):
        """Open and decode the Bookmarks JSON file."""
        try:
            with open(self.bookmarks_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            raise DecodeFailedError(f"Failed to decode {self.bookmarks_path}: {e}") from e
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open {self.bookmarks_path}: {e}") from e
