# src/cache/cache_factory.py — v3
"""Factory for name cache instantiation."""

from __future__ import annotations

from uuidcache.cache.base_cache_store import BaseNameCache
from uuidcache.config.settings import Settings


def create_name_cache(settings: Settings | None = None) -> BaseNameCache:
    """Instantiate the configured cache backend.

    Args:
        settings: Application settings. Defaults to Settings() (SQLite).

    Returns:
        Configured BaseNameCache implementation.
    """
    if settings is None:
        settings = Settings()
    backend = settings.cache_backend

    if backend == "sqlite":
        from uuidcache.cache.sqlite_store import SqliteNameCache
        return SqliteNameCache(db_path=settings.resolved_cache_path)

    if backend == "memory":
        from uuidcache.cache.memory_store import MemoryNameCache
        return MemoryNameCache()

    if backend == "redis":
        from uuidcache.cache.redis_store import RedisNameCache
        if not settings.cache_redis_url:
            raise ValueError(
                "CACHE_REDIS_URL must be set when CACHE_BACKEND=redis"
            )
        return RedisNameCache(
            redis_url=settings.cache_redis_url, key=settings.cache_redis_key
        )

    raise ValueError(f"Unsupported cache backend: {backend!r}")
