# src/logging/context.py — v2
"""Contextual logging support: attach cache backend and operation to log records."""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per cache call.
_backend: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "backend", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    backend: str | None = None
    operation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(backend=_backend.get(), operation=_operation.get())


def set_operation_context(backend: str, operation: str | None = None) -> None:
    """Set backend/operation context for subsequent log records."""
    _backend.set(backend)
    _operation.set(operation)


@contextmanager
def operation_context(backend: str, operation: str) -> Iterator[None]:
    """Scope backend/operation context to a block, restoring the previous one."""
    backend_token = _backend.set(backend)
    operation_token = _operation.set(operation)
    try:
        yield
    finally:
        _operation.reset(operation_token)
        _backend.reset(backend_token)


def clear_context() -> None:
    """Reset all context variables."""
    _backend.set(None)
    _operation.set(None)
