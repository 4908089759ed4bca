"""
Normalized bookmark records and the collection operations over them.

Every extractor emits ``Record`` instances; the engine concatenates them and
applies ``filter_by_folder_prefix`` and ``uniq_by_uri``. Collections are plain
lists whose order is significant: source priority first, then the depth-first
order of each source's tree.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .enums import SourceName
from .uri import uri_domain, validate_uri

ROOT_FOLDER = "/"


@dataclass(frozen=True, slots=True)
class Record:
    """
    One normalized bookmark.

    ``uri`` is validated on construction and ``domain`` is derived from it, so
    a live Record always carries a parseable URI.

    Raises:
        MalformedEntryError: If ``uri`` is not a valid URI
        ValueError: If ``folder`` does not begin with "/"
    """
    source_name: SourceName
    folder: str
    title: str
    uri: str
    domain: str = field(init=False)

    def __post_init__(self) -> None:
        parsed = validate_uri(self.uri)
        if not self.folder.startswith(ROOT_FOLDER):
            raise ValueError(f"Folder path must start with '/': {self.folder!r}")
        object.__setattr__(self, "domain", uri_domain(parsed))


def join_folder(parent: str, name: str) -> str:
    """
    Append ``name`` as a path segment of ``parent``.

    Empty names add no segment. The result is cleaned like a POSIX path and
    always starts with a single "/".
    """
    if not name:
        return parent
    joined = posixpath.normpath(f"{parent}/{name}")
    return ROOT_FOLDER + joined.lstrip("/")


def filter_by_folder_prefix(records: Iterable[Record], prefix: str) -> List[Record]:
    """Keep records whose folder starts with ``prefix``, preserving order."""
    return [record for record in records if record.folder.startswith(prefix)]


def uniq_by_uri(records: Iterable[Record]) -> List[Record]:
    """Keep the first record seen for each exact URI string."""
    seen = set()
    unique = []
    for record in records:
        if record.uri in seen:
            continue
        seen.add(record.uri)
        unique.append(record)
    return unique


def group_by_domain(records: Iterable[Record]) -> Dict[str, List[Record]]:
    """Group records by their cached domain, keeping first-seen group order."""
    groups: Dict[str, List[Record]] = {}
    for record in records:
        groups.setdefault(record.domain, []).append(record)
    return groups
