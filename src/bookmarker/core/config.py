from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .engine import (
    BookmarkEngine,
    Option,
    build_engine,
    enable_chrome,
    enable_firefox,
    enable_safari,
    filter_by_folder,
    remove_duplicates,
)
from .logging import configure_logging


@dataclass(slots=True)
class ChromeSourceConfig:
    """Chromium-family source settings from the ``sources.chrome`` section."""

    enabled: bool = False
    profile: str = "Default"
    profile_dir: Optional[Path] = None
    variant: str = "chrome"


@dataclass(slots=True)
class FirefoxSourceConfig:
    """Firefox source settings from the ``sources.firefox`` section."""

    enabled: bool = False
    profile: str = "default-release"
    profile_dir: Optional[Path] = None
    use_backup: bool = False


@dataclass(slots=True)
class SafariSourceConfig:
    """Safari source settings from the ``sources.safari`` section."""

    enabled: bool = False
    bookmarks_path: Optional[Path] = None


@dataclass(slots=True)
class LoggingConfig:
    """Logging configuration from the ``logging`` section."""

    level: str = "INFO"
    log_dir: Optional[Path] = None
    max_mb: int = 10
    backup_count: int = 3


@dataclass(slots=True)
class BookmarkerConfig:
    """Top-level configuration resolved from disk."""

    chrome: ChromeSourceConfig = field(default_factory=ChromeSourceConfig)
    firefox: FirefoxSourceConfig = field(default_factory=FirefoxSourceConfig)
    safari: SafariSourceConfig = field(default_factory=SafariSourceConfig)
    remove_duplicates: bool = False
    folder_filter: str = ""
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_options(self) -> List[Option]:
        """Translate the configuration into engine options, sources first."""
        options: List[Option] = []
        if self.chrome.enabled:
            options.append(enable_chrome(self.chrome.profile, self.chrome.profile_dir, self.chrome.variant))
        if self.firefox.enabled:
            options.append(enable_firefox(self.firefox.profile, self.firefox.profile_dir, self.firefox.use_backup))
        if self.safari.enabled:
            options.append(enable_safari(self.safari.bookmarks_path))
        if self.remove_duplicates:
            options.append(remove_duplicates())
        if self.folder_filter:
            options.append(filter_by_folder(self.folder_filter))
        return options


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        content = yaml.safe_load(handle) or {}
        if not isinstance(content, dict):
            raise ValueError(f"Config file {path} must contain a mapping at the top level.")
        return content


def _section(data: Dict[str, Any], key: str, where: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{where}{key}' must be a mapping.")
    return value


def _optional_path(value: Any) -> Optional[Path]:
    if not value:
        return None
    return Path(value).expanduser()


def load_config(path: Path) -> BookmarkerConfig:
    """Load configuration from a YAML file, providing defaults for anything missing."""

    overrides = _load_yaml(Path(path))
    sources_cfg = _section(overrides, "sources", "")

    chrome_cfg = _section(sources_cfg, "chrome", "sources.")
    chrome = ChromeSourceConfig(
        enabled=bool(chrome_cfg.get("enabled", False)),
        profile=str(chrome_cfg.get("profile", "Default")),
        profile_dir=_optional_path(chrome_cfg.get("profile_dir")),
        variant=str(chrome_cfg.get("variant", "chrome")),
    )

    firefox_cfg = _section(sources_cfg, "firefox", "sources.")
    firefox = FirefoxSourceConfig(
        enabled=bool(firefox_cfg.get("enabled", False)),
        profile=str(firefox_cfg.get("profile", "default-release")),
        profile_dir=_optional_path(firefox_cfg.get("profile_dir")),
        use_backup=bool(firefox_cfg.get("use_backup", False)),
    )

    safari_cfg = _section(sources_cfg, "safari", "sources.")
    safari = SafariSourceConfig(
        enabled=bool(safari_cfg.get("enabled", False)),
        bookmarks_path=_optional_path(safari_cfg.get("bookmarks_path")),
    )

    logging_cfg = _section(overrides, "logging", "")
    logging_config = LoggingConfig(
        level=str(logging_cfg.get("level", "INFO")).upper(),
        log_dir=_optional_path(logging_cfg.get("log_dir")),
        max_mb=int(logging_cfg.get("max_mb", 10)),
        backup_count=int(logging_cfg.get("backup_count", 3)),
    )

    return BookmarkerConfig(
        chrome=chrome,
        firefox=firefox,
        safari=safari,
        remove_duplicates=bool(overrides.get("remove_duplicates", False)),
        folder_filter=str(overrides.get("folder_filter") or ""),
        logging=logging_config,
    )


def build_engine_from_config(config: BookmarkerConfig) -> BookmarkEngine:
    """Build an engine from a loaded configuration.

    Raises:
        ConfigurationError: If a configured profile cannot be resolved
    """
    return build_engine(*config.to_options())


def setup_logging(config: BookmarkerConfig) -> logging.Logger:
    """Configure package logging from the ``logging`` section."""
    level = logging.getLevelName(config.logging.level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.logging.level!r}")
    return configure_logging(
        level=level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_mb * 1024 * 1024,
        backup_count=config.logging.backup_count,
    )
