"""
Shared utilities for bookmark extractors.

- sqlite_helpers: Safe read-only SQLite access
- profiles: Browser profile directory and bookmark file resolution
"""

from .sqlite_helpers import (
    SQLiteReadError,
    copy_sqlite_for_reading,
    safe_sqlite_connect,
    table_exists,
)
from .profiles import (
    chromium_user_data_dir,
    firefox_profiles_dir,
    get_chrome_bookmark_file,
    get_firefox_bookmark_file,
    get_safari_bookmark_file,
    search_suffix_dir,
)
