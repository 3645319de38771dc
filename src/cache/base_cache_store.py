# src/cache/base_cache_store.py — v2
"""Abstract name cache interface.

Every backend implements the two batched operations; the single-item and
Profile-shaped helpers are built on top of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from uuid import UUID

from uuidcache.cache.models import Profile


class BaseNameCache(ABC):
    """Unified interface for identifier->name cache backends."""

    @abstractmethod
    def put_all(self, entries: Mapping[UUID, str]) -> None:
        """Store every association, overwriting existing names.

        Raises:
            InvalidArgumentError: If a key or name is None, before any write.
            CacheError: If the backend cannot complete the write.
        """

    @abstractmethod
    def get_all_present(self, uuids: Iterable[UUID]) -> Mapping[UUID, str]:
        """Return names for the requested identifiers that are stored.

        Identifiers with no entry are omitted. The mapping is a snapshot.

        Raises:
            InvalidArgumentError: If an identifier is None, before any query.
            CacheError: If the backend lookup fails.
        """

    def put(self, uuid: UUID, name: str) -> None:
        """Store a single association."""
        self.put_all({uuid: name})

    def get_if_present(self, uuid: UUID) -> str | None:
        """Return the stored name for *uuid*, or None on a miss."""
        found = self.get_all_present([uuid])
        for name in found.values():
            return name
        return None

    def put_profiles(self, profiles: Iterable[Profile]) -> None:
        """Store a batch of profiles; later duplicates win."""
        self.put_all({profile.uuid: profile.name for profile in profiles})

    def get_profiles(self, uuids: Iterable[UUID]) -> dict[UUID, Profile]:
        """Like get_all_present, but returns Profile records."""
        return {
            uuid: Profile(uuid=uuid, name=name)
            for uuid, name in self.get_all_present(uuids).items()
        }
