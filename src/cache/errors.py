# src/cache/errors.py — v1
"""Exceptions raised by name cache stores."""

from __future__ import annotations


class CacheError(Exception):
    """Storage-layer failure (driver, connection, schema or query).

    Always raised with ``raise CacheError(...) from exc`` so the low-level
    exception stays reachable for diagnosis.
    """

    @property
    def cause(self) -> BaseException | None:
        """The wrapped low-level exception, if any."""
        return self.__cause__


class InvalidArgumentError(ValueError):
    """Malformed input (e.g. a None identifier), raised before any I/O."""
