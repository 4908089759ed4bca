"""
Base extractor interface for bookmark sources.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from bookmarker.core.enums import SourceName
from bookmarker.core.logging import get_logger
from bookmarker.core.records import Record
from bookmarker.core.uri import MalformedEntryError

LOGGER = get_logger("extractors.base")


@dataclass
class ExtractorMetadata:
    """
    Metadata about an extractor module.

    Attributes:
        name: Internal identifier (e.g., "chromium_bookmarks")
        display_name: Human-readable name (e.g., "Chromium Bookmarks")
        description: Short description
        source_name: Source family the extractor attributes its records to
    """
    name: str
    display_name: str
    description: str
    source_name: SourceName


class BaseBookmarkExtractor(ABC):
    """
    Base class for all bookmark extractors.

    Each extractor is constructed from an already-resolved path to its browser's
    bookmark container and is responsible for:
    1. Declaring what it reads (metadata)
    2. Opening and decoding the container (convert)
    3. Walking the decoded structure into Records

    Error contract for convert():
        - SourceUnavailableError: container could not be opened
        - DecodeFailedError: container contents could not be decoded
        - Malformed entries never raise; they are dropped by make_record()

    Example:
        class MyExtractor(BaseBookmarkExtractor):
            source_name = SourceName.CHROME

            @property
            def metadata(self):
                return ExtractorMetadata(
                    name="my_bookmarks",
                    display_name="My Bookmarks",
                    description="Reads my browser's bookmarks",
                    source_name=self.source_name,
                )

            def convert(self):
                data = self._load()
                return [r for r in self._walk(data, "/") if r]
    """

    source_name: SourceName

    def __init__(self, bookmarks_path: Union[str, Path]):
        self.bookmarks_path = Path(bookmarks_path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.bookmarks_path)!r})"

    @property
    @abstractmethod
    def metadata(self) -> ExtractorMetadata:
        """
        Return module metadata.

        Returns:
            ExtractorMetadata describing this module
        """
        pass

    @abstractmethod
    def convert(self) -> List[Record]:
        """
        Read the bookmark container and return its records in tree order.

        Raises:
            SourceUnavailableError: If the container cannot be opened
            DecodeFailedError: If the container cannot be decoded
        """
        pass

    def make_record(self, folder: str, title: object, uri: object) -> Optional[Record]:
        """Build a Record for this source, or None when the URI is malformed."""
        try:
            return Record(
                source_name=self.source_name,
                folder=folder,
                title=title if isinstance(title, str) else "",
                uri=uri,
            )
        except MalformedEntryError as e:
            LOGGER.debug("%s: dropping entry in %s: %s", self.source_name, folder, e)
            return None
