"""Configuration for a DocumentStore instance."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """Validated configuration for a DocumentStore. Passed via DI at construction."""

    max_id_attempts: int = Field(default=8, ge=1)
