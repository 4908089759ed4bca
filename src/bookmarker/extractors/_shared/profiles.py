"""
Browser profile path resolution.

Maps a human profile name to the bookmark container of that profile on the
local machine. Each browser keeps its profiles under a platform-specific parent
directory; the requested profile is matched as a suffix of the directory name
(Chromium: "Default", "Profile 1"; Firefox: "x1y2z3.default-release").

Supported platforms: macOS ("darwin"), Linux ("linux") and Windows ("win32").

Usage:
    from bookmarker.extractors._shared.profiles import get_chrome_bookmark_file

    path = get_chrome_bookmark_file("Default")
    path = get_chrome_bookmark_file("Profile 1", variant="brave")
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from bookmarker.core.enums import ChromiumVariant
from bookmarker.core.logging import get_logger
from ..exceptions import ConfigurationError

LOGGER = get_logger("extractors.profiles")

CHROMIUM_BOOKMARKS_FILE = "Bookmarks"
FIREFOX_PLACES_FILE = "places.sqlite"
FIREFOX_BACKUP_DIR = "bookmarkbackups"
FIREFOX_BACKUP_GLOB = "*.jsonlz4"

# Chromium user data directories, relative to the home directory (macOS/Linux)
# or to %LOCALAPPDATA% (Windows)
CHROMIUM_USER_DATA_DIRS: Dict[str, Dict[str, str]] = {
    ChromiumVariant.CHROME: {
        "darwin": "Library/Application Support/Google/Chrome",
        "linux": ".config/google-chrome",
        "win32": "Google/Chrome/User Data",
    },
    ChromiumVariant.CHROMIUM: {
        "darwin": "Library/Application Support/Chromium",
        "linux": ".config/chromium",
        "win32": "Chromium/User Data",
    },
    ChromiumVariant.EDGE: {
        "darwin": "Library/Application Support/Microsoft Edge",
        "linux": ".config/microsoft-edge",
        "win32": "Microsoft/Edge/User Data",
    },
    ChromiumVariant.BRAVE: {
        "darwin": "Library/Application Support/BraveSoftware/Brave-Browser",
        "linux": ".config/BraveSoftware/Brave-Browser",
        "win32": "BraveSoftware/Brave-Browser/User Data",
    },
}

# Firefox profile directories, relative to the home directory (macOS/Linux)
# or to %APPDATA% (Windows)
FIREFOX_PROFILE_DIRS: Dict[str, str] = {
    "darwin": "Library/Application Support/Firefox/Profiles",
    "linux": ".mozilla/firefox",
    "win32": "Mozilla/Firefox/Profiles",
}

SAFARI_BOOKMARKS_FILE = "Library/Safari/Bookmarks.plist"


def _platform_key() -> str:
    if sys.platform.startswith("darwin"):
        return "darwin"
    if sys.platform.startswith("win"):
        return "win32"
    return "linux"


def _windows_base(env_var: str, fallback: str) -> Path:
    value = os.environ.get(env_var)
    if value:
        return Path(value)
    return Path.home() / fallback


def chromium_user_data_dir(variant: Union[str, ChromiumVariant] = ChromiumVariant.CHROME) -> Path:
    """Return the default user data directory for a Chromium variant."""
    try:
        variant = ChromiumVariant(variant)
    except ValueError:
        raise ConfigurationError(f"Unknown Chromium variant: {variant!r}") from None

    platform = _platform_key()
    relative = CHROMIUM_USER_DATA_DIRS[variant][platform]
    if platform == "win32":
        return _windows_base("LOCALAPPDATA", "AppData/Local") / relative
    return Path.home() / relative


def firefox_profiles_dir() -> Path:
    """Return the default Firefox profiles directory."""
    platform = _platform_key()
    relative = FIREFOX_PROFILE_DIRS[platform]
    if platform == "win32":
        return _windows_base("APPDATA", "AppData/Roaming") / relative
    return Path.home() / relative


def search_suffix_dir(parent: Union[str, Path], suffix: str) -> str:
    """
    Find the first directory under ``parent`` whose name ends with ``suffix``.

    Entries are examined in name order so the match is deterministic.

    Raises:
        ConfigurationError: If ``parent`` cannot be listed or nothing matches
    """
    parent = Path(parent)
    if not suffix:
        raise ConfigurationError("Profile name must not be empty")

    try:
        entries = sorted(parent.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ConfigurationError(f"Cannot read profile directory {parent}: {e}") from e

    for entry in entries:
        if entry.is_dir() and entry.name.endswith(suffix):
            return entry.name

    raise ConfigurationError(f"No profile matching '{suffix}' found in {parent}")


def get_chrome_bookmark_file(
    profile_name: str = "Default",
    profile_dir: Optional[Union[str, Path]] = None,
    variant: Union[str, ChromiumVariant] = ChromiumVariant.CHROME,
) -> Path:
    """
    Resolve the Bookmarks JSON file of a Chromium-family profile.

    Args:
        profile_name: Profile directory suffix ("Default", "Profile 1", ...)
        profile_dir: Override for the user data directory
        variant: Chromium browser whose default user data directory is searched

    Raises:
        ConfigurationError: If no matching profile directory exists
    """
    parent = Path(profile_dir) if profile_dir else chromium_user_data_dir(variant)
    match = search_suffix_dir(parent, profile_name)
    path = parent / match / CHROMIUM_BOOKMARKS_FILE
    LOGGER.debug("Resolved %s profile '%s' to %s", variant, profile_name, path)
    return path


def get_firefox_bookmark_file(
    profile_name: str = "default-release",
    profile_dir: Optional[Union[str, Path]] = None,
    use_backup: bool = False,
) -> Path:
    """
    Resolve the bookmark container of a Firefox profile.

    Args:
        profile_name: Profile directory suffix ("default-release", ...)
        profile_dir: Override for the Firefox profiles directory
        use_backup: Return the newest bookmarkbackups/*.jsonlz4 file instead
                    of places.sqlite

    Raises:
        ConfigurationError: If no matching profile (or backup) exists
    """
    parent = Path(profile_dir) if profile_dir else firefox_profiles_dir()
    profile_path = parent / search_suffix_dir(parent, profile_name)

    if not use_backup:
        path = profile_path / FIREFOX_PLACES_FILE
    else:
        # Backup names start with the ISO date, so name order is chronological
        backups = sorted(
            (profile_path / FIREFOX_BACKUP_DIR).glob(FIREFOX_BACKUP_GLOB),
            key=lambda p: p.name,
        )
        if not backups:
            raise ConfigurationError(
                f"No bookmark backups found in {profile_path / FIREFOX_BACKUP_DIR}"
            )
        path = backups[-1]

    LOGGER.debug("Resolved firefox profile '%s' to %s", profile_name, path)
    return path


def get_safari_bookmark_file(bookmarks_path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve Safari's Bookmarks.plist (the current user's unless overridden)."""
    if bookmarks_path:
        return Path(bookmarks_path)
    return Path.home() / SAFARI_BOOKMARKS_FILE
