"""
Aggregation engine: runs the enabled extractors and merges their Records.

Usage:
    from bookmarker.core.engine import build_engine, enable_chrome, remove_duplicates

    engine = build_engine(enable_chrome("Default"), remove_duplicates())
    for record in engine.bookmarks():
        print(record.folder, record.uri)
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .enums import ChromiumVariant, SourceName
from .logging import get_logger
from .records import Record, filter_by_folder_prefix, uniq_by_uri

from bookmarker.extractors.base import BaseBookmarkExtractor
from bookmarker.extractors.browser import (
    ChromiumBookmarksExtractor,
    FirefoxBookmarksExtractor,
    SafariBookmarksExtractor,
)
from bookmarker.extractors.exceptions import (
    ConfigurationError,
    ExtractorError,
    SourceFailedError,
)
from bookmarker.extractors._shared.profiles import (
    get_chrome_bookmark_file,
    get_firefox_bookmark_file,
    get_safari_bookmark_file,
)

LOGGER = get_logger("core.engine")


class BookmarkEngine:
    """
    Holds one extractor per enabled source family plus the merge settings.

    Attributes:
        extractors: Enabled extractors keyed by source family
        folder_query: Folder prefix filter; empty string disables filtering
        remove_duplicates: Keep only the first record per exact URI
    """

    def __init__(self) -> None:
        self.extractors: Dict[SourceName, BaseBookmarkExtractor] = {}
        self.folder_query: str = ""
        self.remove_duplicates: bool = False

    def __repr__(self) -> str:
        return (
            f"BookmarkEngine(sources={[str(s) for s in self.enabled_sources()]}, "
            f"folder_query={self.folder_query!r}, remove_duplicates={self.remove_duplicates})"
        )

    def register(self, source: SourceName, extractor: BaseBookmarkExtractor) -> None:
        """Enable ``source`` with ``extractor``, replacing any previous one."""
        self.extractors[SourceName(source)] = extractor

    def enabled_sources(self) -> List[SourceName]:
        """Enabled families in the order bookmarks() reads them."""
        return [name for name in SourceName.priority_order() if name in self.extractors]

    def bookmarks(self) -> List[Record]:
        """
        Read every enabled source and return the merged records.

        Sources are read in ``SourceName.priority_order()`` regardless of
        registration order. The folder filter is applied to the concatenated
        records before URI deduplication.

        Raises:
            SourceFailedError: If any source fails; no partial result is returned
        """
        records: List[Record] = []
        for name in self.enabled_sources():
            extractor = self.extractors[name]
            display_name = extractor.metadata.display_name
            LOGGER.debug("Reading %s with %s from %s", name, display_name, extractor.bookmarks_path)
            try:
                converted = extractor.convert()
            except ExtractorError as e:
                LOGGER.error("Failed to load bookmarks in %s (%s): %s", name, display_name, e)
                raise SourceFailedError(name, e) from e
            LOGGER.debug("%s (%s) yielded %d records", name, display_name, len(converted))
            records.extend(converted)

        total = len(records)

        if self.folder_query:
            records = filter_by_folder_prefix(records, self.folder_query)
            LOGGER.debug("Folder filter %r kept %d of %d records", self.folder_query, len(records), total)

        # Dedup runs on the filtered records so the first survivor wins
        if self.remove_duplicates:
            before = len(records)
            records = uniq_by_uri(records)
            LOGGER.debug("Removed %d duplicate URIs", before - len(records))

        LOGGER.info("Aggregated %d bookmarks from %d sources", len(records), len(self.extractors))
        return records


# =============================================================================
# Options
# =============================================================================

Option = Callable[[BookmarkEngine], None]


def enable_chrome(
    profile_name: str = "Default",
    profile_dir: Optional[Union[str, Path]] = None,
    variant: Union[str, ChromiumVariant] = ChromiumVariant.CHROME,
) -> Option:
    """Read bookmarks from a Chromium-family profile."""
    def option(engine: BookmarkEngine) -> None:
        path = get_chrome_bookmark_file(profile_name, profile_dir, variant)
        engine.register(SourceName.CHROME, ChromiumBookmarksExtractor(path))
    return option


def enable_firefox(
    profile_name: str = "default-release",
    profile_dir: Optional[Union[str, Path]] = None,
    use_backup: bool = False,
) -> Option:
    """Read bookmarks from a Firefox profile (places.sqlite or newest backup)."""
    def option(engine: BookmarkEngine) -> None:
        path = get_firefox_bookmark_file(profile_name, profile_dir, use_backup)
        engine.register(SourceName.FIREFOX, FirefoxBookmarksExtractor(path))
    return option


def enable_safari(bookmarks_path: Optional[Union[str, Path]] = None) -> Option:
    """Read bookmarks from Safari's Bookmarks.plist."""
    def option(engine: BookmarkEngine) -> None:
        path = get_safari_bookmark_file(bookmarks_path)
        engine.register(SourceName.SAFARI, SafariBookmarksExtractor(path))
    return option


def remove_duplicates() -> Option:
    """Keep only the first record for each exact URI."""
    def option(engine: BookmarkEngine) -> None:
        engine.remove_duplicates = True
    return option


def filter_by_folder(folder_query: str) -> Option:
    """Keep only records whose folder starts with ``folder_query``."""
    def option(engine: BookmarkEngine) -> None:
        engine.folder_query = folder_query
    return option


def build_engine(*options: Optional[Option]) -> BookmarkEngine:
    """
    Apply ``options`` in order to a new engine.

    ``None`` entries are skipped, so options can be added conditionally.

    Raises:
        ConfigurationError: On the first failing option; the partially
            configured engine is attached as ``error.engine``
    """
    engine = BookmarkEngine()
    for option in options:
        if option is None:
            continue
        try:
            option(engine)
        except ConfigurationError as e:
            e.engine = engine
            LOGGER.error("Engine configuration failed: %s", e)
            raise
    return engine
