# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides fixed identifiers, a temp SQLite cache and an in-memory cache.
No external services — Redis is always mocked.
"""

from __future__ import annotations

from uuid import UUID

import pytest

from uuidcache.cache.memory_store import MemoryNameCache
from uuidcache.cache.sqlite_store import SqliteNameCache
from uuidcache.logging.context import clear_context


# === FIXTURES: Sample data ===


@pytest.fixture
def id1() -> UUID:
    return UUID("0ea8eca3-dbf6-47cc-9d1a-c64551ca975c")


@pytest.fixture
def id2() -> UUID:
    return UUID("069a79f4-44e9-4726-a5be-fca90e38aaf5")


@pytest.fixture
def id3() -> UUID:
    return UUID("853c80ef-3c37-49fd-aa49-938b674adae6")


# === FIXTURES: Stores ===


@pytest.fixture
def sqlite_cache(tmp_path):
    """SQLite cache in a fresh temp file, closed after the test."""
    cache = SqliteNameCache(db_path=tmp_path / "uuid_cache.db")
    yield cache
    cache.close()


@pytest.fixture
def memory_cache() -> MemoryNameCache:
    return MemoryNameCache()


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()
