# src/cache/models.py — v2
"""Cache domain model: Profile (identifier + name)."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Profile(BaseModel):
    """One identifier-to-name association."""

    model_config = ConfigDict(frozen=True)

    uuid: UUID
    name: str
