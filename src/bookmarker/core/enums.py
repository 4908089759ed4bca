"""
Core Enumerations

Source identifiers shared by the record model, the extractors and the engine.
Using StrEnum (Python 3.11+) so identifiers serialize naturally in logs and config.
"""

from enum import StrEnum


class SourceName(StrEnum):
    """Supported bookmark source families, declared in aggregation priority order."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    SAFARI = "safari"

    @classmethod
    def priority_order(cls) -> tuple["SourceName", ...]:
        """Return families in the fixed order the engine reads them."""
        return (cls.CHROME, cls.FIREFOX, cls.SAFARI)


class ChromiumVariant(StrEnum):
    """Chromium-family browsers sharing the Bookmarks JSON format."""

    CHROME = "chrome"
    CHROMIUM = "chromium"
    EDGE = "edge"
    BRAVE = "brave"
