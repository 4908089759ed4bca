"""
URI validation for bookmark records.

A bookmark URI is accepted when it is a non-empty string carrying an RFC 3986
scheme, contains no control characters, and splits cleanly with
``urllib.parse`` (including a well-formed bracketed host and numeric port).
Spaces are rejected in the host only; browsers store unescaped spaces in
paths and queries.
The host may be empty, so ``javascript:``, ``file:///`` and ``about:`` style
bookmarks are kept.

Usage:
    from bookmarker.core.uri import validate_uri, uri_domain

    parsed = validate_uri("https://user@example.com:8080/path")
    uri_domain(parsed)  # "example.com:8080"
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


class MalformedEntryError(ValueError):
    """Raised when a single bookmark entry carries an unusable URI."""

    def __init__(self, uri: object, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Malformed bookmark URI {uri!r}: {reason}")


def validate_uri(uri: object) -> SplitResult:
    """
    Parse ``uri`` and return its components.

    Raises:
        MalformedEntryError: If the value is not a syntactically valid URI
    """
    if not isinstance(uri, str) or not uri:
        raise MalformedEntryError(uri, "empty or not a string")
    if not _SCHEME_RE.match(uri):
        raise MalformedEntryError(uri, "missing scheme")
    if _CONTROL_RE.search(uri):
        raise MalformedEntryError(uri, "contains control characters")

    try:
        parsed = urlsplit(uri)
        parsed.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError as e:
        raise MalformedEntryError(uri, str(e)) from e

    if " " in parsed.netloc:
        raise MalformedEntryError(uri, "space in host")

    return parsed


def uri_domain(parsed: SplitResult) -> str:
    """Return the host component (with port, without user-info) of a parsed URI."""
    return parsed.netloc.rpartition("@")[2]
