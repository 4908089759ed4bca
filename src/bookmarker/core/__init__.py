"""Record model, aggregation engine and ambient configuration."""

from .enums import ChromiumVariant, SourceName  # noqa: F401
from .records import (  # noqa: F401
    Record,
    filter_by_folder_prefix,
    group_by_domain,
    uniq_by_uri,
)
from .engine import (  # noqa: F401
    BookmarkEngine,
    build_engine,
    enable_chrome,
    enable_firefox,
    enable_safari,
    filter_by_folder,
    remove_duplicates,
)
from .config import BookmarkerConfig, build_engine_from_config, load_config  # noqa: F401
