# src/cache/memory_store.py — v1
"""In-process name cache (CACHE_BACKEND=memory).

Nothing is persisted; useful for tests and short-lived tools.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from uuid import UUID

from uuidcache.cache.base_cache_store import BaseNameCache
from uuidcache.cache.query_builder import validate_entries, validate_uuids
from uuidcache.logging.context import operation_context

logger = logging.getLogger(__name__)

_BACKEND = "memory"


class MemoryNameCache(BaseNameCache):
    """Dict-backed cache guarded by a lock."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def put_all(self, entries: Mapping[UUID, str]) -> None:
        rows = validate_entries(entries)
        with operation_context(_BACKEND, "put_all"):
            with self._lock:
                for name, uuid_str in rows:
                    self._entries[uuid_str] = name
            logger.debug("Stored %d entries", len(rows))

    def get_all_present(self, uuids: Iterable[UUID]) -> Mapping[UUID, str]:
        wanted = validate_uuids(uuids)
        with operation_context(_BACKEND, "get_all_present"):
            with self._lock:
                found = {
                    UUID(uuid_str): self._entries[uuid_str]
                    for uuid_str in wanted
                    if uuid_str in self._entries
                }
            logger.debug("Resolved %d of %d identifiers", len(found), len(wanted))
        return MappingProxyType(found)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
