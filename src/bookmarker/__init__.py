"""Read-only bookmark aggregation across Chromium, Firefox and Safari."""

from .core import (  # noqa: F401
    BookmarkEngine,
    BookmarkerConfig,
    ChromiumVariant,
    Record,
    SourceName,
    build_engine,
    build_engine_from_config,
    enable_chrome,
    enable_firefox,
    enable_safari,
    filter_by_folder,
    filter_by_folder_prefix,
    group_by_domain,
    load_config,
    remove_duplicates,
    uniq_by_uri,
)
from .extractors.exceptions import (  # noqa: F401
    ConfigurationError,
    DecodeFailedError,
    ExtractorError,
    MalformedEntryError,
    SourceFailedError,
    SourceUnavailableError,
)
