# src/cache/sqlite_store.py — v2
"""SQLite-backed name cache (CACHE_BACKEND=sqlite).

Uses stdlib sqlite3, no external dependency. A single connection is opened
for the lifetime of the store and shared by all threads; one lock serializes
every statement executed on it, since one SQLite connection cannot run
statements concurrently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from uuid import UUID

_SQLITE_IMPORT_ERROR: ImportError | None = None
try:
    import sqlite3
except ImportError as _e:  # Python built without _sqlite3
    sqlite3 = None  # type: ignore[assignment]
    _SQLITE_IMPORT_ERROR = _e

from uuidcache.cache.base_cache_store import BaseNameCache
from uuidcache.cache.errors import CacheError, InvalidArgumentError
from uuidcache.cache.query_builder import (
    CREATE_INDEX_SQL,
    CREATE_TABLE_SQL,
    UPSERT_SQL,
    build_select,
    fold_rows,
    iter_batches,
    validate_entries,
    validate_uuids,
)
from uuidcache.logging.context import operation_context

logger = logging.getLogger(__name__)

_BACKEND = "sqlite"


class SqliteNameCache(BaseNameCache):
    """Identifier->name cache stored in a single SQLite file."""

    def __init__(self, db_path: Path | str) -> None:
        if db_path is None:
            raise InvalidArgumentError("db_path must not be None")
        if sqlite3 is None:
            raise CacheError("SQLite support is not installed") from _SQLITE_IMPORT_ERROR

        self._db_path = Path(db_path).expanduser().resolve()
        self._lock = threading.Lock()

        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            # Autocommit: each upsert is its own unit of work.
            self._conn = sqlite3.connect(
                str(self._db_path), check_same_thread=False, isolation_level=None
            )
        except (OSError, sqlite3.Error) as e:
            raise CacheError(f"Failed to connect to cache file {self._db_path}") from e

        try:
            self._create_schema()
        except sqlite3.Error as e:
            self._conn.close()
            raise CacheError("Failed to create tables") from e

        logger.info("Opened name cache at %s", self._db_path)

    @property
    def db_path(self) -> Path:
        """Absolute path of the backing file."""
        return self._db_path

    def _create_schema(self) -> None:
        """Create the table and name index if they do not exist yet."""
        self._conn.execute(CREATE_TABLE_SQL)
        try:
            self._conn.execute(CREATE_INDEX_SQL)
        except sqlite3.OperationalError as e:
            if "already exists" not in str(e):
                raise
            logger.debug("Name index already present in %s", self._db_path)

    def put_all(self, entries: Mapping[UUID, str]) -> None:
        """Upsert every entry, one statement per entry.

        Not atomic across the batch: if an entry fails, the ones before it
        stay written and the rest are not attempted.
        """
        rows = validate_entries(entries)
        if not rows:
            return

        with operation_context(_BACKEND, "put_all"):
            with self._lock:
                try:
                    for row in rows:
                        self._conn.execute(UPSERT_SQL, row)
                except sqlite3.Error as e:
                    logger.error("Upsert failed after batch of %d", len(rows), exc_info=True)
                    raise CacheError("Failed to execute queries") from e
            logger.debug("Stored %d entries", len(rows))

    def get_all_present(self, uuids: Iterable[UUID]) -> Mapping[UUID, str]:
        """Look up names for *uuids* with one IN query per batch."""
        wanted = validate_uuids(uuids)
        if not wanted:
            return MappingProxyType({})

        queries = [build_select(batch) for batch in iter_batches(wanted)]

        with operation_context(_BACKEND, "get_all_present"):
            rows: list[tuple[str, str]] = []
            with self._lock:
                try:
                    for sql, params in queries:
                        rows.extend(self._conn.execute(sql, params).fetchall())
                except sqlite3.Error as e:
                    logger.error("Lookup of %d identifiers failed", len(wanted), exc_info=True)
                    raise CacheError("Failed to execute queries") from e

            result = fold_rows(rows)
            logger.debug("Resolved %d of %d identifiers", len(result), len(wanted))
            return result

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            self._conn.close()

    def __enter__(self) -> SqliteNameCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
