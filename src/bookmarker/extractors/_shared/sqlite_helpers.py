"""
Safe SQLite helpers for browser extractors.

Provides utilities for reading browser SQLite databases without touching them:
- Read-only connections to prevent modification
- Copying to a temporary location to sidestep a running browser's lock
- Error wrapping for corrupt/incomplete databases

The browser's own files are never opened for writing.
"""

from __future__ import annotations

import shutil
import sqlite3
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union


class SQLiteReadError(Exception):
    """Raised when SQLite database cannot be read."""
    pass


@contextmanager
def safe_sqlite_connect(
    db_path: Union[str, Path],
    copy_first: bool = False,
    timeout: float = 5.0,
) -> Iterator[sqlite3.Connection]:
    """
    Safely connect to SQLite database in read-only mode.

    Args:
        db_path: Path to the SQLite database file
        copy_first: If True, copy database to temp location before opening
                   (useful while the browser holds a lock on it)
        timeout: Connection timeout in seconds

    Yields:
        sqlite3.Connection in read-only mode

    Raises:
        SQLiteReadError: If database cannot be opened or queried
        FileNotFoundError: If database file doesn't exist
        OSError: If the database cannot be copied

    Example:
        with safe_sqlite_connect("/path/to/places.sqlite", copy_first=True) as conn:
            for row in conn.execute("SELECT url FROM moz_places"):
                print(row["url"])
    """
    db_path = Path(db_path)

    if not db_path.exists():
        raise FileNotFoundError(f"Database not found: {db_path}")

    temp_dir: Optional[Path] = None
    conn: Optional[sqlite3.Connection] = None

    try:
        if copy_first:
            temp_dir = Path(tempfile.mkdtemp(prefix="bookmarker_sqlite_"))
            target_path = copy_sqlite_for_reading(db_path, dest_dir=temp_dir)
        else:
            target_path = db_path

        # Open in read-only mode using URI
        uri = f"file:{target_path.as_posix()}?mode=ro"
        conn = sqlite3.connect(uri, uri=True, timeout=timeout)
        conn.row_factory = sqlite3.Row  # Enable column access by name

        yield conn

    except sqlite3.Error as e:
        raise SQLiteReadError(f"Failed to read database {db_path}: {e}") from e

    finally:
        if conn:
            conn.close()
        if temp_dir is not None:
            shutil.rmtree(temp_dir, ignore_errors=True)


def copy_sqlite_for_reading(
    db_path: Union[str, Path],
    include_wal: bool = True,
    dest_dir: Optional[Path] = None,
) -> Path:
    """
    Copy SQLite database and associated files for safe reading.

    Copies the main database file and optionally WAL/journal files
    to a temporary location, so pending WAL pages are visible to the copy.

    Args:
        db_path: Path to the SQLite database
        include_wal: If True, also copy -wal, -journal, -shm files
        dest_dir: Destination directory (default: fresh system temp dir)

    Returns:
        Path to the copied database

    Note:
        Caller is responsible for cleaning up the copied files.
    """
    db_path = Path(db_path)

    if dest_dir is None:
        dest_dir = Path(tempfile.mkdtemp(prefix="bookmarker_sqlite_"))
    else:
        dest_dir = Path(dest_dir)
        dest_dir.mkdir(parents=True, exist_ok=True)

    dest_db = dest_dir / db_path.name
    shutil.copy2(db_path, dest_db)

    if include_wal:
        for suffix in ["-wal", "-journal", "-shm"]:
            companion = db_path.parent / (db_path.name + suffix)
            if companion.exists():
                shutil.copy2(companion, dest_dir / companion.name)

    return dest_db


def table_exists(conn: sqlite3.Connection, table_name: str) -> bool:
    """Check whether ``table_name`` exists in the connected database."""
    cursor = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?",
        (table_name,),
    )
    return cursor.fetchone() is not None
