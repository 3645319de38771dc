# src/cache/redis_store.py — v2
"""Redis-based name cache (CACHE_BACKEND=redis).

Requires 'redis' package: pip install redis.
All entries live in one Redis hash, so a batch is one HSET or one HMGET.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from uuid import UUID

from uuidcache.cache.base_cache_store import BaseNameCache
from uuidcache.cache.errors import CacheError
from uuidcache.cache.query_builder import validate_entries, validate_uuids
from uuidcache.logging.context import operation_context

logger = logging.getLogger(__name__)

_BACKEND = "redis"
DEFAULT_HASH_KEY = "uuidcache:names"


class RedisNameCache(BaseNameCache):
    """Redis-hash-backed cache; the client handles its own connection pool."""

    def __init__(self, redis_url: str, key: str = DEFAULT_HASH_KEY) -> None:
        try:
            import redis
        except ImportError as e:
            raise ImportError(
                "redis package required: pip install redis"
            ) from e

        self._client = redis.Redis.from_url(redis_url, decode_responses=True)
        self._key = key

    def put_all(self, entries: Mapping[UUID, str]) -> None:
        from redis import RedisError

        rows = validate_entries(entries)
        if not rows:
            return
        mapping = {uuid_str: name for name, uuid_str in rows}
        with operation_context(_BACKEND, "put_all"):
            try:
                self._client.hset(self._key, mapping=mapping)
            except RedisError as e:
                logger.error("HSET of %d entries failed", len(mapping), exc_info=True)
                raise CacheError("Failed to store entries in Redis") from e
            logger.debug("Stored %d entries", len(mapping))

    def get_all_present(self, uuids: Iterable[UUID]) -> Mapping[UUID, str]:
        from redis import RedisError

        wanted = validate_uuids(uuids)
        if not wanted:
            return MappingProxyType({})
        with operation_context(_BACKEND, "get_all_present"):
            try:
                names = self._client.hmget(self._key, wanted)
            except RedisError as e:
                logger.error("HMGET of %d identifiers failed", len(wanted), exc_info=True)
                raise CacheError("Failed to read entries from Redis") from e
            found = {
                UUID(uuid_str): name
                for uuid_str, name in zip(wanted, names)
                if name is not None
            }
            logger.debug("Resolved %d of %d identifiers", len(found), len(wanted))
        return MappingProxyType(found)

    def close(self) -> None:
        """Close the Redis connection."""
        self._client.close()
