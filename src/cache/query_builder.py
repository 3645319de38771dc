# src/cache/query_builder.py — v1
"""Batched SQL construction and result folding for the name cache.

Identifiers are validated and canonicalized here, before any storage
access, so that malformed input never reaches a query.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeVar
from uuid import UUID

from uuidcache.cache.errors import InvalidArgumentError

T = TypeVar("T")

TABLE_NAME = "uuid_cache"

# Stays below SQLITE_MAX_VARIABLE_NUMBER on older builds (999).
MAX_BATCH_SIZE = 500

CREATE_TABLE_SQL = (
    f"CREATE TABLE IF NOT EXISTS {TABLE_NAME} (\n"
    "  uuid CHAR(36) PRIMARY KEY NOT NULL,\n"
    "  name CHAR(32) NOT NULL)"
)
CREATE_INDEX_SQL = f"CREATE INDEX name_index ON {TABLE_NAME} (name)"
UPSERT_SQL = f"INSERT OR REPLACE INTO {TABLE_NAME} (name, uuid) VALUES (?, ?)"
_SELECT_PREFIX = f"SELECT name, uuid FROM {TABLE_NAME} WHERE uuid IN "


def canonical_uuid(value: Any) -> str:
    """Return the 36-char hyphenated form of *value*.

    Raises:
        InvalidArgumentError: If *value* is None or not a UUID.
    """
    if value is None:
        raise InvalidArgumentError("Unexpected null UUID")
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, str):
        try:
            return str(UUID(value))
        except ValueError as e:
            raise InvalidArgumentError(f"Malformed UUID: {value!r}") from e
    raise InvalidArgumentError(
        f"Expected UUID, got {type(value).__name__}"
    )


def validate_uuids(uuids: Iterable[Any]) -> list[str]:
    """Canonicalize identifiers, dropping duplicates but keeping order."""
    if uuids is None:
        raise InvalidArgumentError("uuids must not be None")
    seen: dict[str, None] = {}
    for value in uuids:
        seen[canonical_uuid(value)] = None
    return list(seen)


def validate_entries(entries: Mapping[Any, Any]) -> list[tuple[str, str]]:
    """Turn an identifier->name mapping into ``(name, uuid)`` bind rows."""
    if entries is None:
        raise InvalidArgumentError("entries must not be None")
    rows: list[tuple[str, str]] = []
    for key, name in entries.items():
        uuid_str = canonical_uuid(key)
        if name is None:
            raise InvalidArgumentError(f"Unexpected null name for {uuid_str}")
        if not isinstance(name, str):
            raise InvalidArgumentError(
                f"Name for {uuid_str} must be str, got {type(name).__name__}"
            )
        rows.append((name, uuid_str))
    return rows


def iter_batches(items: Sequence[T], size: int = MAX_BATCH_SIZE) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most *size* items."""
    if size < 1:
        raise ValueError("size must be >= 1")
    for start in range(0, len(items), size):
        yield items[start:start + size]


def build_select(canonical_uuids: Sequence[str]) -> tuple[str, list[str]] | None:
    """Build the membership query for one batch of identifiers.

    Returns None for an empty batch: ``IN ()`` is not valid SQL.
    """
    if not canonical_uuids:
        return None
    placeholders = ", ".join("?" * len(canonical_uuids))
    return f"{_SELECT_PREFIX}({placeholders})", list(canonical_uuids)


def fold_rows(rows: Iterable[Sequence[Any]]) -> Mapping[UUID, str]:
    """Fold ``(name, uuid)`` rows into a read-only identifier->name mapping."""
    result: dict[UUID, str] = {}
    for name, uuid_str in rows:
        result[UUID(uuid_str)] = name
    return MappingProxyType(result)
